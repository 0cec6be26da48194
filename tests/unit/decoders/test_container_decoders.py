"""Unit tests for optional, sequence, set, and dict decoders."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

import pytest

from layerconf.decoders import DecoderContext, default_decoder_registry
from layerconf.domain.failures import NoDecoderFound, TypeConversionFailure
from layerconf.domain.nodes import (
    UNDEFINED,
    ListNode,
    LongNode,
    MapNode,
    Node,
    NullNode,
    StringNode,
)
from layerconf.domain.result import ConfigResult, Invalid, Valid
from layerconf.mappers import default_param_mappers


def _decode(node: Node, target: Any, path: str = "") -> ConfigResult[Any]:
    context = DecoderContext(default_decoder_registry(), default_param_mappers())
    return context.decode(node, target, path)


def _longs(*values: int) -> ListNode:
    return ListNode(tuple(LongNode(value) for value in values))


@pytest.mark.parametrize(
    ("node", "target", "expected"),
    [
        (_longs(1, 2, 3), list[int], [1, 2, 3]),
        (StringNode("1, 2,3"), list[int], [1, 2, 3]),
        (StringNode(""), list[str], []),
        (_longs(1, 2), tuple[int, ...], (1, 2)),
        (_longs(1, 1, 2), set[int], {1, 2}),
        (_longs(3), frozenset[int], frozenset({3})),
        (_longs(4, 5), Sequence[int], (4, 5)),
    ],
)
def test_sequence_decoding(node: Node, target: Any, expected: object) -> None:
    assert _decode(node, target) == Valid(expected)


def test_sequence_element_failures_carry_index_paths() -> None:
    bad_first = StringNode("x")
    bad_second = StringNode("y")
    node = ListNode((bad_first, LongNode(2), bad_second))

    assert _decode(node, list[int], "ports") == Invalid(
        (
            TypeConversionFailure(bad_first, "ports[0]", int),
            TypeConversionFailure(bad_second, "ports[2]", int),
        )
    )


def test_sequence_rejects_maps() -> None:
    node = MapNode({})

    assert _decode(node, list[int], "ports") == Invalid(
        (TypeConversionFailure(node, "ports", list[int]),)
    )


def test_fixed_length_tuples_are_not_supported() -> None:
    assert _decode(_longs(1), tuple[int, str], "pair") == Invalid(
        (NoDecoderFound(tuple[int, str], "pair"),)
    )


def test_dict_decoding_and_entry_paths() -> None:
    bad = StringNode("many")
    node = MapNode({"a": LongNode(1), "b": bad, "c": StringNode("3")})

    assert _decode(MapNode({"a": LongNode(1)}), dict[str, int]) == Valid({"a": 1})
    assert _decode(node, dict[str, int], "limits") == Invalid(
        (TypeConversionFailure(bad, "limits.b", int),)
    )


def test_dict_requires_map_and_string_keys() -> None:
    leaf = StringNode("x")

    assert _decode(leaf, dict[str, int], "limits") == Invalid(
        (TypeConversionFailure(leaf, "limits", dict[str, int]),)
    )
    assert _decode(MapNode({}), dict[int, str], "limits") == Invalid(
        (NoDecoderFound(dict[int, str], "limits"),)
    )


@pytest.mark.parametrize("target", [int | None, Optional[int]])  # noqa: UP007
def test_optional_decoding(target: Any) -> None:
    assert _decode(UNDEFINED, target) == Valid(None)
    assert _decode(NullNode(), target) == Valid(None)
    assert _decode(StringNode("5"), target) == Valid(5)


def test_optional_container() -> None:
    assert _decode(StringNode("a,b"), list[str] | None) == Valid(["a", "b"])
    assert _decode(UNDEFINED, list[str] | None) == Valid(None)
