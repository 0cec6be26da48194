"""Sources backed by process state: environment variables and ``-X`` options."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping

from layerconf.constants import ENV_SOURCE, PROPERTY_OVERRIDE_PREFIX, PROPS_SOURCE
from layerconf.domain.nodes import UNDEFINED, Node, node_from_flat_strings, node_from_properties
from layerconf.domain.result import ConfigResult, valid


class EnvironmentVariablesPropertySource:
    """Snapshot of every environment variable as a flat map of strings."""

    __slots__ = ("_environ",)

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def node(self) -> ConfigResult[Node]:
        environ = os.environ if self._environ is None else self._environ
        return valid(node_from_flat_strings(dict(environ), ENV_SOURCE))

    def __repr__(self) -> str:
        return "EnvironmentVariablesPropertySource()"


class ProcessPropertiesPropertySource:
    """Interpreter ``-X`` options carrying the override prefix.

    ``python -X config.override.db.host=example`` exposes ``db.host`` as
    ``{"db": {"host": "example"}}``. Options given without a value read as
    ``"true"``.
    """

    __slots__ = ("_prefix", "_properties")

    def __init__(
        self,
        properties: Mapping[str, str | bool] | None = None,
        *,
        prefix: str = PROPERTY_OVERRIDE_PREFIX,
    ) -> None:
        self._properties = properties
        self._prefix = prefix

    def node(self) -> ConfigResult[Node]:
        raw = _xoptions() if self._properties is None else self._properties
        selected: dict[str, str] = {}
        for key in sorted(raw):
            if not key.startswith(self._prefix):
                continue
            name = key[len(self._prefix) :]
            if not name:
                continue
            selected[name] = _property_text(raw[key])
        if not selected:
            return valid(UNDEFINED)
        return valid(node_from_properties(selected, PROPS_SOURCE))

    def __repr__(self) -> str:
        return f"ProcessPropertiesPropertySource(prefix={self._prefix!r})"


def _xoptions() -> Mapping[str, str | bool]:
    options = getattr(sys, "_xoptions", None)
    if not isinstance(options, Mapping):
        return {}
    return options


def _property_text(value: str | bool) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


__all__ = ["EnvironmentVariablesPropertySource", "ProcessPropertiesPropertySource"]
