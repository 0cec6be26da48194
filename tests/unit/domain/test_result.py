"""Unit tests for the accumulating ``ConfigResult`` combinators."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from layerconf.domain.failures import ResourceNotFound, UnknownPropertyPath
from layerconf.domain.result import (
    ConfigException,
    Invalid,
    Valid,
    combine,
    invalid,
    sequence,
    valid,
)

_MISSING_A = UnknownPropertyPath("a")
_MISSING_B = UnknownPropertyPath("b")
_NO_FILE = ResourceNotFound("app.toml")


def _unexpected(_: object) -> object:
    raise AssertionError("callback must not run on Invalid")


def test_valid_map_and_flat_map() -> None:
    assert valid(2).map(lambda value: value * 3) == Valid(6)
    assert valid(2).flat_map(lambda value: valid(value + 1)) == Valid(3)
    assert valid(2).flat_map(lambda _: invalid(_MISSING_A)) == Invalid((_MISSING_A,))


def test_invalid_short_circuits_map_and_flat_map() -> None:
    failed = invalid(_MISSING_A)

    assert failed.map(_unexpected) is failed
    assert failed.flat_map(_unexpected) is failed
    assert failed.is_valid is False
    assert valid(1).is_valid is True


def test_invalid_requires_at_least_one_failure() -> None:
    with pytest.raises(ValueError, match="at least one failure"):
        Invalid(())


def test_sequence_accumulates_failures_in_encounter_order() -> None:
    result = sequence(
        [valid(1), invalid(_MISSING_A), valid(2), invalid(_MISSING_B, _NO_FILE)]
    )

    assert result == Invalid((_MISSING_A, _MISSING_B, _NO_FILE))


def test_sequence_of_nothing_is_valid_empty_list() -> None:
    assert sequence([]) == Valid([])


def test_combine_returns_a_tuple_or_every_failure() -> None:
    assert combine(valid("a"), valid(1)) == Valid(("a", 1))
    assert combine(invalid(_MISSING_A), valid(1), invalid(_NO_FILE)) == Invalid(
        (_MISSING_A, _NO_FILE)
    )


def test_map_failures_and_value_or() -> None:
    failed = invalid(_MISSING_A).map_failures(lambda failures: (*failures, _NO_FILE))

    assert failed == Invalid((_MISSING_A, _NO_FILE))
    assert failed.value_or(lambda failures: len(failures)) == 2
    assert valid(5).value_or(lambda _: 0) == 5
    assert valid(5).map_failures(lambda _: ()) == Valid(5)


def test_value_or_raise_carries_rendered_message_and_failures() -> None:
    with pytest.raises(ConfigException) as excinfo:
        invalid(_MISSING_A, _NO_FILE).value_or_raise(lambda failures: f"{len(failures)} failed")

    assert str(excinfo.value) == "2 failed"
    assert excinfo.value.failures == (_MISSING_A, _NO_FILE)
    assert valid("ok").value_or_raise(lambda _: "unused") == "ok"


@given(values=st.lists(st.integers(), max_size=10))
@settings(max_examples=50, derandomize=True, deadline=None)
def test_sequence_of_valid_results_preserves_order(values: list[int]) -> None:
    assert sequence(valid(value) for value in values) == Valid(values)


@given(flags=st.lists(st.booleans(), min_size=1, max_size=10))
@settings(max_examples=50, derandomize=True, deadline=None)
def test_sequence_reports_one_failure_per_failing_element(flags: list[bool]) -> None:
    failures = [UnknownPropertyPath(f"key{index}") for index in range(len(flags))]
    results = [
        invalid(failure) if failing else valid(index)
        for index, (failing, failure) in enumerate(zip(flags, failures, strict=True))
    ]

    expected = tuple(failure for failing, failure in zip(flags, failures, strict=True) if failing)
    if expected:
        assert sequence(results) == Invalid(expected)
    else:
        assert sequence(results) == Valid(list(range(len(flags))))
