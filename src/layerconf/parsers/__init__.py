"""Parsers turning configuration files into trees, keyed by file extension."""

from layerconf.parsers.base import Parser, ParserRegistry
from layerconf.parsers.formats import (
    JsonParser,
    PropertiesParser,
    TomlParser,
    YamlParser,
    default_parser_registry,
)

__all__ = [
    "JsonParser",
    "Parser",
    "ParserRegistry",
    "PropertiesParser",
    "TomlParser",
    "YamlParser",
    "default_parser_registry",
]
