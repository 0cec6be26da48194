"""
layerconf: configuration tree model and fallback merge.

File: src/layerconf/domain/nodes.py
Last updated: 2026-10-17

Purpose
- Define the closed set of node kinds every property source produces.
- Implement the priority fallback merge used to combine source trees.

What should be included in this file
- One frozen dataclass per node kind, each carrying a ``source`` tag.
- Conversions from parser output and flat property mappings into trees.
- ``fallback`` and ``merge_nodes``.

Functional requirements
- The ``source`` tag is diagnostic metadata only; it never takes part in
  equality or merge decisions.
- ``UNDEFINED`` only appears as a whole-tree result; absence inside maps is
  represented by key absence.
- When two nodes disagree on shape, the higher-priority node wins outright.

Non-functional requirements
- Trees are immutable and built fresh per load.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Final

from layerconf.constants import UNDEFINED_SOURCE

StringTransform = Callable[[str], str]


class Node:
    """Base type of every configuration tree value."""

    __slots__ = ()

    source: str
    kind: str = "node"

    def at(self, key: str) -> Node:
        """Return the child stored under ``key`` or ``UNDEFINED``."""

        return UNDEFINED

    def transform(self, fn: StringTransform) -> Node:
        """Return a copy of the tree with ``fn`` applied to every string leaf."""

        return self

    def to_python(self) -> Any:
        raise NotImplementedError


class UndefinedNode(Node):
    """Absence of a value: a source with nothing to contribute."""

    __slots__ = ()

    kind = "undefined"
    source = UNDEFINED_SOURCE

    def __repr__(self) -> str:
        return "UNDEFINED"

    def to_python(self) -> Any:
        return None


UNDEFINED: Final[UndefinedNode] = UndefinedNode()


@dataclass(frozen=True, slots=True)
class NullNode(Node):
    source: str = field(default="", compare=False)

    kind = "null"

    def to_python(self) -> Any:
        return None


@dataclass(frozen=True, slots=True)
class BooleanNode(Node):
    value: bool
    source: str = field(default="", compare=False)

    kind = "boolean"

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class LongNode(Node):
    value: int
    source: str = field(default="", compare=False)

    kind = "long"

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class DoubleNode(Node):
    value: float
    source: str = field(default="", compare=False)

    kind = "double"

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class StringNode(Node):
    value: str
    source: str = field(default="", compare=False)

    kind = "string"

    def transform(self, fn: StringTransform) -> Node:
        return StringNode(fn(self.value), source=self.source)

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class ListNode(Node):
    elements: tuple[Node, ...]
    source: str = field(default="", compare=False)

    kind = "list"

    def __post_init__(self) -> None:
        elements = tuple(self.elements)
        if any(element is UNDEFINED for element in elements):
            raise ValueError("UNDEFINED cannot be stored inside a list node")
        object.__setattr__(self, "elements", elements)

    def transform(self, fn: StringTransform) -> Node:
        return ListNode(tuple(item.transform(fn) for item in self.elements), source=self.source)

    def to_python(self) -> Any:
        return [item.to_python() for item in self.elements]


@dataclass(frozen=True, slots=True)
class MapNode(Node):
    entries: Mapping[str, Node]
    source: str = field(default="", compare=False)

    kind = "map"

    def __post_init__(self) -> None:
        entries = dict(self.entries)
        for key, value in entries.items():
            if not isinstance(key, str):
                raise ValueError(f"map node keys must be strings, got {type(key).__name__}")
            if value is UNDEFINED:
                raise ValueError(f"UNDEFINED cannot be stored under map key {key!r}")
        object.__setattr__(self, "entries", entries)

    def at(self, key: str) -> Node:
        return self.entries.get(key, UNDEFINED)

    def keys(self) -> tuple[str, ...]:
        return tuple(self.entries)

    def transform(self, fn: StringTransform) -> Node:
        return MapNode(
            {key: value.transform(fn) for key, value in self.entries.items()},
            source=self.source,
        )

    def to_python(self) -> Any:
        return {key: value.to_python() for key, value in self.entries.items()}


def fallback(primary: Node, secondary: Node) -> Node:
    """Merge ``secondary`` beneath ``primary``.

    ``primary`` wins on every conflict except where both sides are maps, in
    which case keys are unioned and shared keys are merged recursively.
    """

    if primary is UNDEFINED:
        return secondary
    if isinstance(primary, MapNode) and isinstance(secondary, MapNode):
        merged: dict[str, Node] = {}
        for key, value in primary.entries.items():
            other = secondary.entries.get(key)
            merged[key] = value if other is None else fallback(value, other)
        for key, value in secondary.entries.items():
            if key not in merged:
                merged[key] = value
        return MapNode(merged, source=primary.source)
    return primary


def merge_nodes(nodes: Iterable[Node]) -> Node:
    """Left-fold ``fallback`` over ``nodes`` ordered from highest priority."""

    merged: Node = UNDEFINED
    for node in nodes:
        merged = fallback(merged, node)
    return merged


def node_from_value(value: object, source: str) -> Node:
    """Convert parser output (mappings, sequences, scalars) into a tree."""

    if isinstance(value, Node):
        return value
    if value is None:
        return NullNode(source=source)
    if isinstance(value, bool):
        return BooleanNode(value, source=source)
    if isinstance(value, int):
        return LongNode(value, source=source)
    if isinstance(value, float):
        return DoubleNode(value, source=source)
    if isinstance(value, str):
        return StringNode(value, source=source)
    if isinstance(value, Mapping):
        return MapNode(
            {str(key): node_from_value(item, source) for key, item in value.items()},
            source=source,
        )
    if isinstance(value, (list, tuple)):
        return ListNode(tuple(node_from_value(item, source) for item in value), source=source)
    if isinstance(value, (datetime, date, time)):
        return StringNode(value.isoformat(), source=source)
    return StringNode(str(value), source=source)


def node_from_properties(
    properties: Mapping[str, str],
    source: str,
    *,
    separator: str = ".",
) -> MapNode:
    """Build a map tree from flat ``key=value`` properties, nesting on ``separator``.

    When a key is both a leaf and the prefix of a longer key, the nested map wins.
    """

    root: dict[str, Any] = {}
    for key, value in properties.items():
        path = [part for part in key.split(separator) if part]
        if not path:
            continue
        cursor = root
        for part in path[:-1]:
            child = cursor.get(part)
            if not isinstance(child, dict):
                child = {}
                cursor[part] = child
            cursor = child
        if isinstance(cursor.get(path[-1]), dict):
            continue
        cursor[path[-1]] = value
    return MapNode(_nested_entries(root, source), source=source)


def node_from_flat_strings(values: Mapping[str, str], source: str) -> MapNode:
    """Build a single-level map of string leaves."""

    return MapNode(
        {key: StringNode(value, source=source) for key, value in values.items()},
        source=source,
    )


def _nested_entries(payload: Mapping[str, Any], source: str) -> dict[str, Node]:
    entries: dict[str, Node] = {}
    for key, value in payload.items():
        if isinstance(value, dict):
            entries[key] = MapNode(_nested_entries(value, source), source=source)
        else:
            entries[key] = StringNode(value, source=source)
    return entries


__all__ = [
    "UNDEFINED",
    "BooleanNode",
    "DoubleNode",
    "ListNode",
    "LongNode",
    "MapNode",
    "Node",
    "NullNode",
    "StringNode",
    "StringTransform",
    "UndefinedNode",
    "fallback",
    "merge_nodes",
    "node_from_flat_strings",
    "node_from_properties",
    "node_from_value",
]
