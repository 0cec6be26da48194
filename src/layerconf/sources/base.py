"""Property source contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from layerconf.domain.nodes import Node
from layerconf.domain.result import ConfigResult


@runtime_checkable
class PropertySource(Protocol):
    """Provides one tree for an entire configuration origin.

    ``UNDEFINED`` is a successful result meaning the source has nothing to
    contribute.
    """

    def node(self) -> ConfigResult[Node]: ...


__all__ = ["PropertySource"]
