"""
layerconf: dataclass decoder.

File: src/layerconf/decoders/records.py
Last updated: 2026-10-17

Purpose
- Decode a map node into a dataclass instance, field by field.

Functional requirements
- Candidate keys for each field come from the parameter mappers, tried in
  order; the first key present in the map is decoded.
- Absent fields use their dataclass default, ``None`` when the field type is
  optional, and otherwise report ``UnknownPropertyPath``.
- Fields are independent: every failing field is reported, not just the first.
- A constructor rejecting the decoded values becomes ``InstantiationFailure``.
- Field annotations that cannot be resolved (a name imported only for type
  checking, a class local to a function) become ``UnresolvedFieldTypes``.
- The path of a present field uses the key as written in the source; the path
  of a missing field uses the declared field name.
"""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, Final

from layerconf.decoders.base import DecoderContext, join_path
from layerconf.decoders.containers import optional_inner
from layerconf.domain.failures import (
    InstantiationFailure,
    TypeConversionFailure,
    UnknownPropertyPath,
    UnresolvedFieldTypes,
)
from layerconf.domain.nodes import UNDEFINED, MapNode, Node
from layerconf.domain.result import ConfigResult, invalid, sequence, valid
from layerconf.mappers import candidate_keys

_USE_DEFAULT: Final[object] = object()

FieldValue = tuple[str, Any]


class DataClassDecoder:
    def supports(self, target: Any) -> bool:
        return isinstance(target, type) and dataclasses.is_dataclass(target)

    def decode(
        self, node: Node, target: Any, context: DecoderContext, path: str
    ) -> ConfigResult[Any]:
        if node is not UNDEFINED and not isinstance(node, MapNode):
            return invalid(TypeConversionFailure(node, path, target))

        try:
            hints = typing.get_type_hints(target)
        except (NameError, TypeError) as exc:
            return invalid(UnresolvedFieldTypes(path, target, str(exc)))
        fields = [field for field in dataclasses.fields(target) if field.init]
        decoded = sequence(
            _decode_field(node, field, hints.get(field.name, Any), context, path)
            for field in fields
        )
        return decoded.flat_map(lambda values: _instantiate(target, values, path))


def _decode_field(
    node: Node,
    field: dataclasses.Field[Any],
    hint: Any,
    context: DecoderContext,
    path: str,
) -> ConfigResult[FieldValue]:
    keys = candidate_keys(field.name, context.param_mappers) or (field.name,)
    for key in keys:
        child = node.at(key)
        if child is not UNDEFINED:
            return context.decode(child, hint, join_path(path, key)).map(
                lambda value: (field.name, value)
            )

    has_default = (
        field.default is not dataclasses.MISSING
        or field.default_factory is not dataclasses.MISSING
    )
    if has_default:
        return valid((field.name, _USE_DEFAULT))
    if optional_inner(hint) is not None:
        return valid((field.name, None))
    return invalid(UnknownPropertyPath(join_path(path, field.name), keys))


def _instantiate(target: type, values: list[FieldValue], path: str) -> ConfigResult[Any]:
    kwargs = {name: value for name, value in values if value is not _USE_DEFAULT}
    try:
        return valid(target(**kwargs))
    except (TypeError, ValueError) as exc:
        return invalid(InstantiationFailure(path, target, str(exc)))


__all__ = ["DataClassDecoder"]
