"""
layerconf: config loader.

File: src/layerconf/loader.py
Last updated: 2026-10-17

Purpose
- Load typed configuration from ranked property sources and files.

What should be included in this file
- ``ConfigLoader``: immutable bundle of decoders, sources, parsers,
  preprocessors, and parameter mappers; ``with_*`` methods return new loaders.
- Orchestration: poll sources -> merge -> preprocess -> decode.
- Throwing and non-throwing entry points.

Functional requirements
- Sources are polled independently; every source failure is reported together,
  wrapped in ``MultipleFailures``.
- Priority: built-in and registered sources first (in order), then files in the
  order given. Earlier wins.
- Only the ``*_or_raise`` entry points raise; everything else returns a
  ``ConfigResult``.

Non-functional requirements
- No state is shared between loads; a loader can be reused and shared freely.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any, TypeVar

from layerconf.decoders import DecoderContext, DecoderRegistry, default_decoder_registry
from layerconf.decoders.base import Decoder
from layerconf.domain.failures import (
    ConfigFailure,
    MultipleFailures,
    describe_type,
    render_failures,
)
from layerconf.domain.nodes import Node, merge_nodes
from layerconf.domain.result import ConfigResult, Invalid, sequence, valid
from layerconf.mappers import ParameterMapper, default_param_mappers
from layerconf.parsers import Parser, ParserRegistry, default_parser_registry
from layerconf.preprocessors import Preprocessor, default_preprocessors, preprocess
from layerconf.reporting import render_node
from layerconf.sources import (
    ConfigFilePropertySource,
    FileSource,
    PropertySource,
    default_property_sources,
    file_sources_from_paths,
    file_sources_from_resources,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
PathLike = str | os.PathLike[str]

FAILURE_HEADER = "Error loading config because:\n\n"


def render_load_failure(failures: tuple[ConfigFailure, ...]) -> str:
    return FAILURE_HEADER + render_failures(failures)


@dataclass(frozen=True, slots=True)
class ConfigLoader:
    """Immutable loader configuration.

    ``property_sources`` defaults to environment variables, process properties,
    and user settings, highest priority first.
    """

    decoder_registry: DecoderRegistry = field(default_factory=default_decoder_registry)
    parser_registry: ParserRegistry = field(default_factory=default_parser_registry)
    property_sources: tuple[PropertySource, ...] | None = None
    preprocessors: tuple[Preprocessor, ...] = field(default_factory=default_preprocessors)
    param_mappers: tuple[ParameterMapper, ...] = field(default_factory=default_param_mappers)

    def __post_init__(self) -> None:
        sources = self.property_sources
        if sources is None:
            sources = default_property_sources(self.parser_registry)
        object.__setattr__(self, "property_sources", tuple(sources))
        object.__setattr__(self, "preprocessors", tuple(self.preprocessors))
        object.__setattr__(self, "param_mappers", tuple(self.param_mappers))

    @property
    def sources(self) -> tuple[PropertySource, ...]:
        return self.property_sources or ()

    def with_preprocessor(self, preprocessor: Preprocessor) -> ConfigLoader:
        return replace(self, preprocessors=(*self.preprocessors, preprocessor))

    def with_decoder(self, decoder: Decoder) -> ConfigLoader:
        """Return a loader consulting ``decoder`` before the built-in decoders."""

        return replace(self, decoder_registry=self.decoder_registry.register(decoder))

    def with_file_extension_mapping(self, ext: str, parser: Parser) -> ConfigLoader:
        return replace(self, parser_registry=self.parser_registry.register(ext, parser))

    def with_parameter_mapper(self, mapper: ParameterMapper) -> ConfigLoader:
        return replace(self, param_mappers=(*self.param_mappers, mapper))

    def with_property_source(self, source: PropertySource) -> ConfigLoader:
        return replace(self, property_sources=(*self.sources, source))

    def load_config(self, target: type[T], *paths: PathLike) -> ConfigResult[T]:
        """Load ``target`` from the property sources and ``paths``.

        Files fall back in order: a key missing from the first path is looked up
        in the second, and so on.
        """

        return self.load_config_from_sources(target, file_sources_from_paths(paths))

    def load_config_or_raise(self, target: type[T], *paths: PathLike) -> T:
        return self.load_config(target, *paths).value_or_raise(render_load_failure)

    def load_config_from_resources(
        self, target: type[T], *names: str, package: str
    ) -> ConfigResult[T]:
        """Like ``load_config`` with files read from package data of ``package``."""

        return self.load_config_from_sources(target, file_sources_from_resources(package, names))

    def load_config_from_resources_or_raise(self, target: type[T], *names: str, package: str) -> T:
        return self.load_config_from_resources(target, *names, package=package).value_or_raise(
            render_load_failure
        )

    def load_node(self, *paths: PathLike) -> ConfigResult[Node]:
        return self.load_node_from_sources(file_sources_from_paths(paths))

    def load_node_or_raise(self, *paths: PathLike) -> Node:
        return self.load_node(*paths).value_or_raise(render_load_failure)

    def dump_effective_config(self, *paths: PathLike, redact: bool = True) -> str:
        """Render the merged, preprocessed tree as JSON with secrets redacted."""

        return render_node(self.load_node_or_raise(*paths), redact=redact)

    def load_config_from_sources(
        self, target: Any, files: Iterable[FileSource]
    ) -> ConfigResult[Any]:
        context = DecoderContext(registry=self.decoder_registry, param_mappers=self.param_mappers)

        def decode(node: Node) -> ConfigResult[Any]:
            result = context.decode(node, target, "")
            if isinstance(result, Invalid):
                logger.debug(
                    "decoding %s failed", describe_type(target), extra={"failures": result.failures}
                )
            else:
                logger.debug("decoded %s", describe_type(target))
            return result

        return self.load_node_from_sources(files).flat_map(decode)

    def load_node_from_sources(self, files: Iterable[FileSource]) -> ConfigResult[Node]:
        sources: list[PropertySource] = list(self.sources)
        sources.extend(ConfigFilePropertySource(file, self.parser_registry) for file in files)
        logger.debug("polling %d property source(s)", len(sources))

        polled = sequence(source.node() for source in sources)
        if isinstance(polled, Invalid):
            logger.debug("property sources failed", extra={"failures": polled.failures})
            return polled.map_failures(lambda failures: (MultipleFailures(failures),))

        return valid(preprocess(merge_nodes(polled.value), self.preprocessors))


def load_config(target: type[T], *paths: PathLike) -> ConfigResult[T]:
    """Load ``target`` with a default ``ConfigLoader``."""

    return ConfigLoader().load_config(target, *paths)


def load_config_or_raise(target: type[T], *paths: PathLike) -> T:
    return ConfigLoader().load_config_or_raise(target, *paths)


__all__ = [
    "FAILURE_HEADER",
    "ConfigLoader",
    "load_config",
    "load_config_or_raise",
    "render_load_failure",
]
