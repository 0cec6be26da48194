"""String-leaf preprocessors applied to the merged tree before decoding."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Final, Protocol, runtime_checkable

from layerconf.domain.nodes import Node

_ENV_REFERENCE: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


@runtime_checkable
class Preprocessor(Protocol):
    def process(self, value: str) -> str: ...


class EnvVarPreprocessor:
    """Replaces ``${NAME}`` with the value of environment variable ``NAME``.

    References to unset variables are left untouched.
    """

    __slots__ = ("_environ",)

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def process(self, value: str) -> str:
        if "${" not in value:
            return value
        environ = os.environ if self._environ is None else self._environ

        def substitute(match: re.Match[str]) -> str:
            return environ.get(match.group(1), match.group(0))

        return _ENV_REFERENCE.sub(substitute, value)


def default_preprocessors() -> tuple[Preprocessor, ...]:
    return (EnvVarPreprocessor(),)


def preprocess(node: Node, preprocessors: tuple[Preprocessor, ...]) -> Node:
    """Apply each preprocessor to every string leaf, in registration order."""

    for preprocessor in preprocessors:
        node = node.transform(preprocessor.process)
    return node


__all__ = ["EnvVarPreprocessor", "Preprocessor", "default_preprocessors", "preprocess"]
