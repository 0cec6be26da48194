"""Decoder for ``enum.Enum`` subclasses, matched by member name."""

from __future__ import annotations

import enum
from typing import Any

from layerconf.decoders.base import DecoderContext
from layerconf.domain.failures import InvalidEnumConstant, TypeConversionFailure
from layerconf.domain.nodes import BooleanNode, DoubleNode, LongNode, Node, StringNode
from layerconf.domain.result import ConfigResult, invalid, valid


class EnumDecoder:
    """Accepts string, boolean, long, and double leaves.

    The leaf is stringified (booleans as ``true``/``false``) and compared with
    member names exactly; no case folding.
    """

    def supports(self, target: Any) -> bool:
        return isinstance(target, type) and issubclass(target, enum.Enum)

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        if isinstance(node, StringNode):
            text = node.value
        elif isinstance(node, BooleanNode):
            text = "true" if node.value else "false"
        elif isinstance(node, (LongNode, DoubleNode)):
            text = str(node.value)
        else:
            return invalid(TypeConversionFailure(node, path, target))

        member = target.__members__.get(text)
        if member is None:
            return invalid(InvalidEnumConstant(node, path, target, text))
        return valid(member)


__all__ = ["EnumDecoder"]
