"""Type-directed decoders and the registry that dispatches between them."""

from layerconf.decoders.base import (
    Decoder,
    DecoderContext,
    DecoderRegistry,
    index_path,
    join_path,
)
from layerconf.decoders.containers import DictDecoder, ListDecoder, OptionalDecoder
from layerconf.decoders.enums import EnumDecoder
from layerconf.decoders.records import DataClassDecoder
from layerconf.decoders.scalars import (
    BoolDecoder,
    FloatDecoder,
    IntDecoder,
    PathDecoder,
    StringDecoder,
)


def default_decoder_registry() -> DecoderRegistry:
    """Built-in decoders in dispatch order; optionals are unwrapped first."""

    return DecoderRegistry(
        (
            OptionalDecoder(),
            DataClassDecoder(),
            EnumDecoder(),
            ListDecoder(),
            DictDecoder(),
            StringDecoder(),
            IntDecoder(),
            FloatDecoder(),
            BoolDecoder(),
            PathDecoder(),
        )
    )


__all__ = [
    "BoolDecoder",
    "DataClassDecoder",
    "Decoder",
    "DecoderContext",
    "DecoderRegistry",
    "DictDecoder",
    "EnumDecoder",
    "FloatDecoder",
    "IntDecoder",
    "ListDecoder",
    "OptionalDecoder",
    "PathDecoder",
    "StringDecoder",
    "default_decoder_registry",
    "index_path",
    "join_path",
]
