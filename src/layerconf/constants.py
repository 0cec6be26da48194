"""Stable constants shared across sources, decoders, and the loader."""

from __future__ import annotations

from typing import Final

# Source tags attached to nodes produced by built-in sources.
ENV_SOURCE: Final[str] = "env"
PROPS_SOURCE: Final[str] = "props"
UNDEFINED_SOURCE: Final[str] = "<undefined>"

# Process property keys must carry this prefix to be exposed.
PROPERTY_OVERRIDE_PREFIX: Final[str] = "config.override."

# User settings live at ~/<basename>.<ext>.
USER_SETTINGS_BASENAME: Final[str] = ".userconfig"

# Indent used when rendering failure reports.
INDENT: Final[str] = "    "

LIST_SEPARATOR: Final[str] = ","

__all__ = [
    "ENV_SOURCE",
    "INDENT",
    "LIST_SEPARATOR",
    "PROPERTY_OVERRIDE_PREFIX",
    "PROPS_SOURCE",
    "UNDEFINED_SOURCE",
    "USER_SETTINGS_BASENAME",
]
