"""Leaf decoders for ``str``, ``int``, ``float``, ``bool``, and ``Path``."""

from __future__ import annotations

import math
from pathlib import PurePath
from typing import Any, Final

from layerconf.decoders.base import DecoderContext
from layerconf.domain.failures import TypeConversionFailure
from layerconf.domain.nodes import BooleanNode, DoubleNode, LongNode, Node, StringNode
from layerconf.domain.result import ConfigResult, invalid, valid

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})


class _ExactTypeDecoder:
    target_type: type = object

    def supports(self, target: Any) -> bool:
        return target is self.target_type


class StringDecoder(_ExactTypeDecoder):
    target_type = str

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        if isinstance(node, StringNode):
            return valid(node.value)
        return invalid(TypeConversionFailure(node, path, target))


class IntDecoder(_ExactTypeDecoder):
    target_type = int

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        if isinstance(node, LongNode):
            return valid(node.value)
        if isinstance(node, StringNode):
            try:
                return valid(int(node.value.strip()))
            except ValueError:
                return invalid(TypeConversionFailure(node, path, target))
        return invalid(TypeConversionFailure(node, path, target))


class FloatDecoder(_ExactTypeDecoder):
    """Accepts doubles, longs, and numeric strings; infinities and NaN are rejected."""

    target_type = float

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        parsed = _to_float(node)
        if parsed is not None and math.isfinite(parsed):
            return valid(parsed)
        return invalid(TypeConversionFailure(node, path, target))


def _to_float(node: Node) -> float | None:
    if isinstance(node, DoubleNode):
        return node.value
    try:
        if isinstance(node, LongNode):
            return float(node.value)
        if isinstance(node, StringNode):
            return float(node.value.strip())
    except (OverflowError, ValueError):
        return None
    return None


class BoolDecoder(_ExactTypeDecoder):
    target_type = bool

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        if isinstance(node, BooleanNode):
            return valid(node.value)
        if isinstance(node, StringNode):
            lowered = node.value.strip().lower()
            if lowered in _BOOLEAN_TRUE:
                return valid(True)
            if lowered in _BOOLEAN_FALSE:
                return valid(False)
        return invalid(TypeConversionFailure(node, path, target))


class PathDecoder:
    def supports(self, target: Any) -> bool:
        return isinstance(target, type) and issubclass(target, PurePath)

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        if isinstance(node, StringNode) and node.value:
            return valid(target(node.value))
        return invalid(TypeConversionFailure(node, path, target))


__all__ = [
    "BoolDecoder",
    "FloatDecoder",
    "IntDecoder",
    "PathDecoder",
    "StringDecoder",
]
