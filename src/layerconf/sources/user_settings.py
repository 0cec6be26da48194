"""Per-user settings file at ``~/.userconfig.<ext>``."""

from __future__ import annotations

import logging
from pathlib import Path

from layerconf.constants import USER_SETTINGS_BASENAME
from layerconf.domain.nodes import UNDEFINED, Node
from layerconf.domain.result import ConfigResult, valid
from layerconf.parsers.base import ParserRegistry
from layerconf.sources.base import PropertySource
from layerconf.sources.files import ConfigFilePropertySource, PathFileSource
from layerconf.sources.system import (
    EnvironmentVariablesPropertySource,
    ProcessPropertiesPropertySource,
)

logger = logging.getLogger(__name__)


class UserSettingsPropertySource:
    """Reads the first ``~/.userconfig.<ext>`` whose extension has a parser.

    Extensions are tried in parser registration order. No file means nothing to
    contribute.
    """

    __slots__ = ("_home", "_parsers")

    def __init__(self, parsers: ParserRegistry, *, home: Path | str | None = None) -> None:
        self._parsers = parsers
        self._home = home

    def path(self, ext: str) -> Path:
        home = Path.home() if self._home is None else Path(self._home).expanduser()
        return home / f"{USER_SETTINGS_BASENAME}.{ext}"

    def node(self) -> ConfigResult[Node]:
        for ext in self._parsers.registered_extensions():
            candidate = self.path(ext)
            if candidate.is_file():
                logger.debug("user settings found at %s", candidate)
                return ConfigFilePropertySource(PathFileSource(candidate), self._parsers).node()
        return valid(UNDEFINED)

    def __repr__(self) -> str:
        return "UserSettingsPropertySource()"


def default_property_sources(parsers: ParserRegistry) -> tuple[PropertySource, ...]:
    """Built-in sources, highest priority first: env, process properties, user settings."""

    return (
        EnvironmentVariablesPropertySource(),
        ProcessPropertiesPropertySource(),
        UserSettingsPropertySource(parsers),
    )


__all__ = ["UserSettingsPropertySource", "default_property_sources"]
