"""Configuration tree, failure taxonomy, and accumulating result primitives."""

from layerconf.domain.failures import (
    ConfigFailure,
    InstantiationFailure,
    InvalidEnumConstant,
    MultipleFailures,
    NoDecoderFound,
    ParseFailure,
    ParserNotFound,
    ResourceNotFound,
    TypeConversionFailure,
    UnknownPropertyPath,
    UnresolvedFieldTypes,
    describe_type,
    render_failures,
)
from layerconf.domain.nodes import (
    UNDEFINED,
    BooleanNode,
    DoubleNode,
    ListNode,
    LongNode,
    MapNode,
    Node,
    NullNode,
    StringNode,
    UndefinedNode,
    fallback,
    merge_nodes,
    node_from_flat_strings,
    node_from_properties,
    node_from_value,
)
from layerconf.domain.result import (
    ConfigException,
    ConfigResult,
    Invalid,
    Valid,
    combine,
    invalid,
    sequence,
    valid,
)

__all__ = [
    "UNDEFINED",
    "BooleanNode",
    "ConfigException",
    "ConfigFailure",
    "ConfigResult",
    "DoubleNode",
    "InstantiationFailure",
    "Invalid",
    "InvalidEnumConstant",
    "ListNode",
    "LongNode",
    "MapNode",
    "MultipleFailures",
    "NoDecoderFound",
    "Node",
    "NullNode",
    "ParseFailure",
    "ParserNotFound",
    "ResourceNotFound",
    "StringNode",
    "TypeConversionFailure",
    "UndefinedNode",
    "UnknownPropertyPath",
    "UnresolvedFieldTypes",
    "Valid",
    "combine",
    "describe_type",
    "fallback",
    "invalid",
    "merge_nodes",
    "node_from_flat_strings",
    "node_from_properties",
    "node_from_value",
    "render_failures",
    "sequence",
    "valid",
]
