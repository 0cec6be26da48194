"""Parser contract and the extension-keyed parser registry."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from layerconf.domain.failures import ParserNotFound
from layerconf.domain.nodes import Node
from layerconf.domain.result import ConfigResult, invalid, valid


@runtime_checkable
class Parser(Protocol):
    """Turns raw file content into a configuration tree."""

    def load(self, data: bytes, source: str) -> ConfigResult[Node]: ...


class ParserRegistry:
    """Immutable mapping of file extensions to parsers.

    Registration order is preserved; it decides which user settings file wins
    when several extensions exist side by side.
    """

    __slots__ = ("_parsers",)

    def __init__(self, parsers: Iterable[tuple[str, Parser]] = ()) -> None:
        registered: dict[str, Parser] = {}
        for ext, parser in parsers:
            normalized = _normalize_extension(ext)
            if not normalized:
                raise ValueError("extension must not be empty")
            registered[normalized] = parser
        self._parsers = registered

    def register(self, ext: str, parser: Parser) -> ParserRegistry:
        """Return a registry with ``parser`` handling ``ext``."""

        return ParserRegistry((*self._parsers.items(), (ext, parser)))

    def locate(self, ext: str, source: str = "") -> ConfigResult[Parser]:
        parser = self._parsers.get(_normalize_extension(ext))
        if parser is None:
            return invalid(ParserNotFound(ext, source))
        return valid(parser)

    def supports(self, ext: str) -> bool:
        return _normalize_extension(ext) in self._parsers

    def registered_extensions(self) -> tuple[str, ...]:
        return tuple(self._parsers)

    def __repr__(self) -> str:
        return f"ParserRegistry({', '.join(self._parsers)})"


def _normalize_extension(ext: str) -> str:
    if not isinstance(ext, str):
        raise TypeError(f"extension must be a string, got {type(ext).__name__}")
    return ext.strip().lstrip(".").lower()


__all__ = ["Parser", "ParserRegistry"]
