"""Built-in parsers for TOML, YAML, JSON, and Java-style properties files."""

from __future__ import annotations

import json
import logging
import tomllib
from typing import Final

import yaml

from layerconf.domain.failures import ParseFailure
from layerconf.domain.nodes import Node, node_from_properties, node_from_value
from layerconf.domain.result import ConfigResult, invalid, valid
from layerconf.parsers.base import ParserRegistry

logger = logging.getLogger(__name__)

_WHITESPACE: Final[str] = " \t\f"
_KEY_TERMINATORS: Final[frozenset[str]] = frozenset("=:" + _WHITESPACE)


def _decode_text(data: bytes, source: str) -> ConfigResult[str]:
    try:
        return valid(data.decode("utf-8-sig"))
    except UnicodeDecodeError as exc:
        return invalid(ParseFailure(source, f"not valid UTF-8: {exc}"))


class TomlParser:
    def load(self, data: bytes, source: str) -> ConfigResult[Node]:
        return _decode_text(data, source).flat_map(lambda text: self._parse(text, source))

    @staticmethod
    def _parse(text: str, source: str) -> ConfigResult[Node]:
        try:
            parsed = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            return invalid(ParseFailure(source, f"invalid TOML: {exc}"))
        return valid(node_from_value(parsed, source))


class YamlParser:
    """Parses a single YAML document with ``yaml.safe_load``.

    An empty document yields an empty map rather than a null node.
    """

    def load(self, data: bytes, source: str) -> ConfigResult[Node]:
        return _decode_text(data, source).flat_map(lambda text: self._parse(text, source))

    @staticmethod
    def _parse(text: str, source: str) -> ConfigResult[Node]:
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            return invalid(ParseFailure(source, f"invalid YAML: {exc}"))
        if parsed is None:
            parsed = {}
        return valid(node_from_value(parsed, source))


class JsonParser:
    def load(self, data: bytes, source: str) -> ConfigResult[Node]:
        return _decode_text(data, source).flat_map(lambda text: self._parse(text, source))

    @staticmethod
    def _parse(text: str, source: str) -> ConfigResult[Node]:
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            return invalid(ParseFailure(source, f"invalid JSON: {exc}"))
        return valid(node_from_value(parsed, source))


class PropertiesParser:
    """Parses ``key=value``, ``key: value`` and ``key value`` lines into a tree nested on dots.

    Lines starting with ``#`` or ``!`` are comments. A trailing backslash
    continues the value on the next line. In keys, a backslash escapes the
    next character so ``\\=``, ``\\:`` and ``\\ `` stay part of the key; values are
    taken as written.
    """

    def load(self, data: bytes, source: str) -> ConfigResult[Node]:
        return _decode_text(data, source).flat_map(lambda text: self._parse(text, source))

    @staticmethod
    def _parse(text: str, source: str) -> ConfigResult[Node]:
        properties: dict[str, str] = {}
        pending = ""
        for lineno, raw_line in enumerate(text.splitlines(), start=1):
            line = pending + raw_line.strip() if pending else raw_line.strip()
            pending = ""
            if not line or line[0] in "#!":
                continue
            if line.endswith("\\"):
                pending = line[:-1]
                continue
            key, value = _split_property(line)
            if not key:
                return invalid(ParseFailure(source, f"line {lineno}: missing property key"))
            properties[key] = value
        if pending:
            key, value = _split_property(pending)
            if key:
                properties[key] = value
        return valid(node_from_properties(properties, source))


def _split_property(line: str) -> tuple[str, str]:
    key: list[str] = []
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\" and index + 1 < len(line):
            key.append(line[index + 1])
            index += 2
            continue
        if char in _KEY_TERMINATORS:
            break
        key.append(char)
        index += 1
    rest = line[index:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:]
    return "".join(key), rest.strip()


def default_parser_registry() -> ParserRegistry:
    """Return the registry of built-in parsers keyed by file extension."""

    registry = ParserRegistry(
        (
            ("toml", TomlParser()),
            ("yaml", YamlParser()),
            ("yml", YamlParser()),
            ("json", JsonParser()),
            ("properties", PropertiesParser()),
        )
    )
    logger.debug("default parsers registered: %s", ", ".join(registry.registered_extensions()))
    return registry


__all__ = [
    "JsonParser",
    "PropertiesParser",
    "TomlParser",
    "YamlParser",
    "default_parser_registry",
]
