"""
layerconf: file and package-resource sources.

File: src/layerconf/sources/files.py
Last updated: 2026-10-17

Purpose
- Locate configuration input (filesystem paths or package data) and hand its
  bytes to the parser registered for its extension.

Functional requirements
- A missing input and a missing parser are both reported in one pass.
- File handles are held only for the duration of the read.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from importlib import resources
from pathlib import Path, PurePosixPath
from typing import Protocol, cast, runtime_checkable

from layerconf.domain.failures import ResourceNotFound
from layerconf.domain.nodes import Node
from layerconf.domain.result import ConfigResult, combine, invalid, valid
from layerconf.parsers.base import Parser, ParserRegistry

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


@runtime_checkable
class FileSource(Protocol):
    """Locates one configuration input and reads its content."""

    def extension(self) -> str: ...

    def describe(self) -> str: ...

    def read(self) -> ConfigResult[bytes]: ...


@dataclass(frozen=True, slots=True)
class PathFileSource:
    path: Path

    def extension(self) -> str:
        return self.path.suffix.lstrip(".")

    def describe(self) -> str:
        return self.path.as_posix()

    def read(self) -> ConfigResult[bytes]:
        try:
            with self.path.open("rb") as handle:
                return valid(handle.read())
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            return invalid(ResourceNotFound(self.describe()))
        except OSError as exc:
            return invalid(ResourceNotFound(f"{self.describe()} ({exc.strerror or exc})"))


@dataclass(frozen=True, slots=True)
class ResourceFileSource:
    """Package data located through ``importlib.resources``."""

    package: str
    name: str

    def extension(self) -> str:
        return PurePosixPath(self.name).suffix.lstrip(".")

    def describe(self) -> str:
        return f"resource {self.package}:{self.name}"

    def read(self) -> ConfigResult[bytes]:
        try:
            resource = resources.files(self.package).joinpath(self.name)
        except (ModuleNotFoundError, TypeError):
            return invalid(ResourceNotFound(self.describe()))
        if not resource.is_file():
            return invalid(ResourceNotFound(self.describe()))
        with resource.open("rb") as handle:
            return valid(handle.read())


def file_sources_from_paths(paths: Iterable[PathLike]) -> list[FileSource]:
    return [PathFileSource(Path(path).expanduser()) for path in paths]


def file_sources_from_resources(package: str, names: Iterable[str]) -> list[FileSource]:
    return [ResourceFileSource(package, name) for name in names]


class ConfigFilePropertySource:
    """Property source backed by one ``FileSource`` parsed by extension."""

    __slots__ = ("_file", "_parsers")

    def __init__(self, file: FileSource, parsers: ParserRegistry) -> None:
        self._file = file
        self._parsers = parsers

    @property
    def file(self) -> FileSource:
        return self._file

    def node(self) -> ConfigResult[Node]:
        description = self._file.describe()
        parser = self._parsers.locate(self._file.extension(), description)
        content = self._file.read()

        def parse(pair: tuple[object, ...]) -> ConfigResult[Node]:
            located = cast("Parser", pair[0])
            data = cast("bytes", pair[1])
            logger.debug("parsing %s (%d bytes)", description, len(data))
            return located.load(data, description)

        return combine(parser, content).flat_map(parse)

    def __repr__(self) -> str:
        return f"ConfigFilePropertySource({self._file.describe()})"


__all__ = [
    "ConfigFilePropertySource",
    "FileSource",
    "PathFileSource",
    "ResourceFileSource",
    "file_sources_from_paths",
    "file_sources_from_resources",
]
