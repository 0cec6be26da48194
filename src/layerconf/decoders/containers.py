"""Container decoders: optionals, homogeneous sequences and sets, string-keyed dicts."""

from __future__ import annotations

import types
import typing
from collections.abc import Sequence
from typing import Any, Union, get_args, get_origin

from layerconf.constants import LIST_SEPARATOR
from layerconf.decoders.base import DecoderContext, index_path, join_path
from layerconf.domain.failures import TypeConversionFailure
from layerconf.domain.nodes import UNDEFINED, ListNode, MapNode, Node, NullNode, StringNode
from layerconf.domain.result import ConfigResult, invalid, sequence, valid

_SEQUENCE_ORIGINS: dict[Any, type] = {
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    Sequence: tuple,
}


def optional_inner(target: Any) -> Any | None:
    """Return ``T`` for ``T | None`` / ``Optional[T]``, else ``None``."""

    if get_origin(target) not in (Union, types.UnionType):
        return None
    args = get_args(target)
    if type(None) not in args:
        return None
    remaining = tuple(arg for arg in args if arg is not type(None))
    if len(remaining) == 1:
        return remaining[0]
    return typing.Union[remaining]  # noqa: UP007


class OptionalDecoder:
    """Null or absent values decode to ``None``; anything else to the inner type."""

    def supports(self, target: Any) -> bool:
        return optional_inner(target) is not None

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        if node is UNDEFINED or isinstance(node, NullNode):
            return valid(None)
        return context.decode(node, optional_inner(target), path)


class ListDecoder:
    """``list[T]``, ``tuple[T, ...]``, ``set[T]``, ``frozenset[T]``, ``Sequence[T]``.

    Besides list nodes, a string leaf is split on commas so environment
    variables can carry lists.
    """

    def supports(self, target: Any) -> bool:
        origin = get_origin(target)
        if origin not in _SEQUENCE_ORIGINS:
            return False
        args = get_args(target)
        if origin is tuple:
            return len(args) == 2 and args[1] is Ellipsis
        return len(args) == 1

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        element_type = get_args(target)[0]
        collection = _SEQUENCE_ORIGINS[get_origin(target)]

        if isinstance(node, ListNode):
            elements: tuple[Node, ...] = node.elements
        elif isinstance(node, StringNode):
            elements = tuple(
                StringNode(part.strip(), source=node.source)
                for part in node.value.split(LIST_SEPARATOR)
                if part.strip()
            )
        else:
            return invalid(TypeConversionFailure(node, path, target))

        decoded = sequence(
            context.decode(element, element_type, index_path(path, index))
            for index, element in enumerate(elements)
        )
        return decoded.map(collection)


class DictDecoder:
    """``dict[str, T]`` from a map node; every entry decoded independently."""

    def supports(self, target: Any) -> bool:
        if get_origin(target) is not dict:
            return False
        args = get_args(target)
        return len(args) == 2 and args[0] is str

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        if not isinstance(node, MapNode):
            return invalid(TypeConversionFailure(node, path, target))

        value_type = get_args(target)[1]
        keys = node.keys()
        decoded = sequence(
            context.decode(node.entries[key], value_type, join_path(path, key)) for key in keys
        )
        return decoded.map(lambda values: dict(zip(keys, values, strict=True)))


__all__ = ["DictDecoder", "ListDecoder", "OptionalDecoder", "optional_inner"]
