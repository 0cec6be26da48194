"""
layerconf: decoder contract and registry.

File: src/layerconf/decoders/base.py
Last updated: 2026-10-17

Purpose
- Map a requested target type to the decoder able to produce it.

What should be included in this file
- ``Decoder`` protocol: ``supports`` + ``decode``.
- ``DecoderContext`` bundling the registry and parameter mappers for recursive
  decoding of nested types.
- ``DecoderRegistry``: ordered, immutable, first supporting decoder wins.

Functional requirements
- User-registered decoders are placed ahead of built-ins; no further
  tie-breaking exists.
- An unsupported type yields ``NoDecoderFound``, never an exception.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from layerconf.domain.failures import NoDecoderFound
from layerconf.domain.nodes import Node
from layerconf.domain.result import ConfigResult, invalid, valid
from layerconf.mappers import ParameterMapper


@runtime_checkable
class Decoder(Protocol):
    def supports(self, target: Any) -> bool: ...

    def decode(
        self,
        node: Node,
        target: Any,
        context: DecoderContext,
        path: str,
    ) -> ConfigResult[Any]: ...


class DecoderRegistry:
    __slots__ = ("_decoders",)

    def __init__(self, decoders: Iterable[Decoder] = ()) -> None:
        self._decoders = tuple(decoders)

    @property
    def decoders(self) -> tuple[Decoder, ...]:
        return self._decoders

    def register(self, decoder: Decoder) -> DecoderRegistry:
        """Return a registry consulting ``decoder`` before every existing one."""

        return DecoderRegistry((decoder, *self._decoders))

    def decoder(self, target: Any, path: str = "") -> ConfigResult[Decoder]:
        for candidate in self._decoders:
            if candidate.supports(target):
                return valid(candidate)
        return invalid(NoDecoderFound(target, path))

    def __len__(self) -> int:
        return len(self._decoders)

    def __repr__(self) -> str:
        names = ", ".join(type(decoder).__name__ for decoder in self._decoders)
        return f"DecoderRegistry({names})"


@dataclass(frozen=True, slots=True)
class DecoderContext:
    registry: DecoderRegistry
    param_mappers: tuple[ParameterMapper, ...] = ()

    def decode(self, node: Node, target: Any, path: str) -> ConfigResult[Any]:
        """Resolve a decoder for ``target`` then decode ``node`` with it."""

        return self.registry.decoder(target, path).flat_map(
            lambda decoder: decoder.decode(node, target, self, path)
        )


def join_path(path: str, key: str) -> str:
    if not path:
        return key
    return f"{path}.{key}"


def index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


__all__ = [
    "Decoder",
    "DecoderContext",
    "DecoderRegistry",
    "index_path",
    "join_path",
]
