"""
layerconf: accumulating result type.

File: src/layerconf/domain/result.py
Last updated: 2026-10-17

Purpose
- Represent every fallible step as a value: ``Valid(value)`` or
  ``Invalid(failures)`` with at least one failure.

What should be included in this file
- ``map`` / ``flat_map`` for dependent steps; ``flat_map`` short-circuits.
- ``sequence`` / ``combine`` for independent steps; both accumulate the
  failures of every failing element in encounter order.

Functional requirements
- Accumulating and short-circuiting combinators stay separate functions so each
  call site chooses one deliberately.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeAlias, TypeVar

from layerconf.domain.failures import ConfigFailure

A = TypeVar("A")
B = TypeVar("B")


class ConfigException(RuntimeError):
    """Raised by the throwing loader entry points when a load is invalid."""

    def __init__(self, message: str, failures: Iterable[ConfigFailure] = ()) -> None:
        super().__init__(message)
        self.failures = tuple(failures)


@dataclass(frozen=True, slots=True)
class Valid(Generic[A]):
    value: A

    @property
    def is_valid(self) -> bool:
        return True

    def map(self, fn: Callable[[A], B]) -> ConfigResult[B]:
        return Valid(fn(self.value))

    def flat_map(self, fn: Callable[[A], ConfigResult[B]]) -> ConfigResult[B]:
        return fn(self.value)

    def map_failures(
        self, fn: Callable[[tuple[ConfigFailure, ...]], Iterable[ConfigFailure]]
    ) -> ConfigResult[A]:
        return self

    def value_or(self, fn: Callable[[tuple[ConfigFailure, ...]], A]) -> A:
        return self.value

    def value_or_raise(self, render: Callable[[tuple[ConfigFailure, ...]], str]) -> A:
        return self.value


@dataclass(frozen=True, slots=True)
class Invalid:
    failures: tuple[ConfigFailure, ...]

    def __post_init__(self) -> None:
        failures = tuple(self.failures)
        if not failures:
            raise ValueError("Invalid requires at least one failure")
        object.__setattr__(self, "failures", failures)

    @property
    def is_valid(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], B]) -> ConfigResult[B]:
        return self

    def flat_map(self, fn: Callable[[Any], ConfigResult[B]]) -> ConfigResult[B]:
        return self

    def map_failures(
        self, fn: Callable[[tuple[ConfigFailure, ...]], Iterable[ConfigFailure]]
    ) -> ConfigResult[Any]:
        return Invalid(tuple(fn(self.failures)))

    def value_or(self, fn: Callable[[tuple[ConfigFailure, ...]], A]) -> A:
        return fn(self.failures)

    def value_or_raise(self, render: Callable[[tuple[ConfigFailure, ...]], str]) -> NoReturn:
        raise ConfigException(render(self.failures), self.failures)


ConfigResult: TypeAlias = Valid[A] | Invalid


def valid(value: A) -> Valid[A]:
    return Valid(value)


def invalid(failure: ConfigFailure, *more: ConfigFailure) -> Invalid:
    return Invalid((failure, *more))


def sequence(results: Iterable[ConfigResult[A]]) -> ConfigResult[list[A]]:
    """Collect independent results, accumulating every failure in order."""

    values: list[A] = []
    failures: list[ConfigFailure] = []
    for result in results:
        if isinstance(result, Invalid):
            failures.extend(result.failures)
        elif not failures:
            values.append(result.value)
    if failures:
        return Invalid(tuple(failures))
    return Valid(values)


def combine(*results: ConfigResult[Any]) -> ConfigResult[tuple[Any, ...]]:
    """Accumulating product of independent results of possibly different types."""

    return sequence(results).map(tuple)


__all__ = [
    "ConfigException",
    "ConfigResult",
    "Invalid",
    "Valid",
    "combine",
    "invalid",
    "sequence",
    "valid",
]
