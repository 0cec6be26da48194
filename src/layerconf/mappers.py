"""Parameter mappers: candidate source keys for a declared field name."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final, Protocol, runtime_checkable

_CAMEL_CASE_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"([a-z0-9])([A-Z])")


@runtime_checkable
class ParameterMapper(Protocol):
    def map(self, name: str) -> str: ...


class IdentityParamMapper:
    def map(self, name: str) -> str:
        return name


class KebabCaseParamMapper:
    """``db_host`` and ``dbHost`` both map to ``db-host``."""

    def map(self, name: str) -> str:
        with_boundaries = _CAMEL_CASE_BOUNDARY.sub(r"\1_\2", name)
        return with_boundaries.replace("_", "-").lower()


class CamelCaseParamMapper:
    """``db_host`` maps to ``dbHost``."""

    def map(self, name: str) -> str:
        head, *rest = name.split("_")
        return head + "".join(part[:1].upper() + part[1:] for part in rest)


def default_param_mappers() -> tuple[ParameterMapper, ...]:
    return (IdentityParamMapper(), KebabCaseParamMapper(), CamelCaseParamMapper())


def candidate_keys(name: str, mappers: Iterable[ParameterMapper]) -> tuple[str, ...]:
    """Return each mapper's key for ``name``, first occurrence wins."""

    seen: dict[str, None] = {}
    for mapper in mappers:
        seen.setdefault(mapper.map(name), None)
    return tuple(seen)


__all__ = [
    "CamelCaseParamMapper",
    "IdentityParamMapper",
    "KebabCaseParamMapper",
    "ParameterMapper",
    "candidate_keys",
    "default_param_mappers",
]
