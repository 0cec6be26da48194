"""layerconf: typed configuration loaded from layered sources."""

from layerconf.decoders import Decoder, DecoderContext, DecoderRegistry, default_decoder_registry
from layerconf.domain import (
    UNDEFINED,
    BooleanNode,
    ConfigException,
    ConfigFailure,
    ConfigResult,
    DoubleNode,
    Invalid,
    ListNode,
    LongNode,
    MapNode,
    Node,
    NullNode,
    StringNode,
    Valid,
    fallback,
    merge_nodes,
)
from layerconf.loader import ConfigLoader, load_config, load_config_or_raise
from layerconf.mappers import (
    CamelCaseParamMapper,
    IdentityParamMapper,
    KebabCaseParamMapper,
    ParameterMapper,
)
from layerconf.parsers import Parser, ParserRegistry, default_parser_registry
from layerconf.preprocessors import EnvVarPreprocessor, Preprocessor
from layerconf.reporting import render_node
from layerconf.sources import (
    ConfigFilePropertySource,
    EnvironmentVariablesPropertySource,
    FileSource,
    ProcessPropertiesPropertySource,
    PropertySource,
    UserSettingsPropertySource,
)

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "BooleanNode",
    "CamelCaseParamMapper",
    "ConfigException",
    "ConfigFailure",
    "ConfigFilePropertySource",
    "ConfigLoader",
    "ConfigResult",
    "Decoder",
    "DecoderContext",
    "DecoderRegistry",
    "DoubleNode",
    "EnvVarPreprocessor",
    "EnvironmentVariablesPropertySource",
    "FileSource",
    "IdentityParamMapper",
    "Invalid",
    "KebabCaseParamMapper",
    "ListNode",
    "LongNode",
    "MapNode",
    "Node",
    "NullNode",
    "ParameterMapper",
    "Parser",
    "ParserRegistry",
    "Preprocessor",
    "ProcessPropertiesPropertySource",
    "PropertySource",
    "StringNode",
    "UserSettingsPropertySource",
    "Valid",
    "__version__",
    "default_decoder_registry",
    "default_parser_registry",
    "fallback",
    "load_config",
    "load_config_or_raise",
    "merge_nodes",
    "render_node",
]
