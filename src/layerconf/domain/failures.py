"""Failure kinds reported while loading and decoding configuration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from layerconf.constants import INDENT
from layerconf.domain.nodes import Node


class ConfigFailure:
    """Base type of every failure carried by ``Invalid`` results."""

    __slots__ = ()

    def description(self) -> str:
        raise NotImplementedError


def describe_type(target: object) -> str:
    """Render a type annotation the way it reads in source code."""

    if isinstance(target, type):
        return target.__qualname__
    return repr(target).replace("typing.", "")


def _at(path: str) -> str:
    return f"'{path}'" if path else "<root>"


def _from(node: Node) -> str:
    return f" ({node.source})" if node.source else ""


@dataclass(frozen=True, slots=True)
class TypeConversionFailure(ConfigFailure):
    node: Node
    path: str
    target: object

    def description(self) -> str:
        return (
            f"- {_at(self.path)}: Required type {describe_type(self.target)} "
            f"could not be decoded from a {self.node.kind} value{_from(self.node)}"
        )


@dataclass(frozen=True, slots=True)
class InvalidEnumConstant(ConfigFailure):
    node: Node
    path: str
    target: object
    value: str

    def description(self) -> str:
        return (
            f"- {_at(self.path)}: Required a value for the Enum type "
            f"{describe_type(self.target)} but given value was {self.value!r}{_from(self.node)}"
        )


@dataclass(frozen=True, slots=True)
class UnknownPropertyPath(ConfigFailure):
    """A required field with no value under any candidate key.

    ``path`` ends in the declared field name since no key matched; failures
    for values that are present use the key as written in the source.
    """

    path: str
    candidates: tuple[str, ...] = ()

    def description(self) -> str:
        tried = ""
        if len(self.candidates) > 1:
            tried = f" (tried keys: {', '.join(self.candidates)})"
        return f"- {_at(self.path)}: Missing required value{tried}"


@dataclass(frozen=True, slots=True)
class ParserNotFound(ConfigFailure):
    extension: str
    source: str = ""

    def description(self) -> str:
        where = f" for {self.source}" if self.source else ""
        return f"- Could not find parser for file extension {self.extension!r}{where}"


@dataclass(frozen=True, slots=True)
class ResourceNotFound(ConfigFailure):
    resource: str

    def description(self) -> str:
        return f"- Could not find config file {self.resource}"


@dataclass(frozen=True, slots=True)
class ParseFailure(ConfigFailure):
    source: str
    message: str

    def description(self) -> str:
        return f"- Could not parse {self.source}: {self.message}"


@dataclass(frozen=True, slots=True)
class NoDecoderFound(ConfigFailure):
    target: object
    path: str = ""

    def description(self) -> str:
        return f"- {_at(self.path)}: Unable to locate a decoder for {describe_type(self.target)}"


@dataclass(frozen=True, slots=True)
class InstantiationFailure(ConfigFailure):
    path: str
    target: object
    message: str

    def description(self) -> str:
        return (
            f"- {_at(self.path)}: Could not create instance of "
            f"{describe_type(self.target)}: {self.message}"
        )


@dataclass(frozen=True, slots=True)
class UnresolvedFieldTypes(ConfigFailure):
    path: str
    target: object
    message: str

    def description(self) -> str:
        return (
            f"- {_at(self.path)}: Could not resolve the field types of "
            f"{describe_type(self.target)}: {self.message}"
        )


@dataclass(frozen=True, slots=True)
class MultipleFailures(ConfigFailure):
    failures: tuple[ConfigFailure, ...]

    def __post_init__(self) -> None:
        failures = tuple(self.failures)
        if not failures:
            raise ValueError("MultipleFailures requires at least one failure")
        object.__setattr__(self, "failures", failures)

    def description(self) -> str:
        return "\n".join(failure.description() for failure in self.failures)


def render_failures(failures: Sequence[ConfigFailure]) -> str:
    """Render failures one per line, indented, for the throwing entry points."""

    lines: list[str] = []
    for failure in failures:
        lines.extend(failure.description().splitlines())
    return "\n".join(f"{INDENT}{line}" for line in lines)


__all__ = [
    "ConfigFailure",
    "InstantiationFailure",
    "InvalidEnumConstant",
    "MultipleFailures",
    "NoDecoderFound",
    "ParseFailure",
    "ParserNotFound",
    "ResourceNotFound",
    "TypeConversionFailure",
    "UnknownPropertyPath",
    "UnresolvedFieldTypes",
    "describe_type",
    "render_failures",
]
