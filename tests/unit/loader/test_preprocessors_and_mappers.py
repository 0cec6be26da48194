"""Unit tests for string preprocessors and parameter-name mappers."""

from __future__ import annotations

import pytest

from layerconf.domain.nodes import ListNode, LongNode, MapNode, StringNode
from layerconf.mappers import (
    CamelCaseParamMapper,
    IdentityParamMapper,
    KebabCaseParamMapper,
    candidate_keys,
    default_param_mappers,
)
from layerconf.preprocessors import EnvVarPreprocessor, default_preprocessors, preprocess


def test_env_var_preprocessor_substitutes_known_references() -> None:
    preprocessor = EnvVarPreprocessor({"HOST": "db", "PORT": "5432"})

    assert preprocessor.process("${HOST}:${PORT}") == "db:5432"
    assert preprocessor.process("${MISSING}/x") == "${MISSING}/x"
    assert preprocessor.process("plain $HOST") == "plain $HOST"


def test_env_var_preprocessor_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAYERCONF_TEST_REGION", "eu")
    (preprocessor,) = default_preprocessors()

    assert preprocessor.process("region-${LAYERCONF_TEST_REGION}") == "region-eu"


def test_preprocess_applies_preprocessors_in_order_to_string_leaves() -> None:
    class Suffix:
        def __init__(self, suffix: str) -> None:
            self._suffix = suffix

        def process(self, value: str) -> str:
            return value + self._suffix

    tree = MapNode({"a": StringNode("x"), "b": ListNode((StringNode("y"), LongNode(1)))})

    processed = preprocess(tree, (Suffix("1"), Suffix("2")))

    assert processed.to_python() == {"a": "x12", "b": ["y12", 1]}
    assert preprocess(tree, ()) is tree


@pytest.mark.parametrize(
    ("mapper", "name", "expected"),
    [
        (IdentityParamMapper(), "max_size", "max_size"),
        (KebabCaseParamMapper(), "max_size", "max-size"),
        (KebabCaseParamMapper(), "maxSize", "max-size"),
        (CamelCaseParamMapper(), "max_pool_size", "maxPoolSize"),
        (CamelCaseParamMapper(), "name", "name"),
    ],
)
def test_param_mappers(mapper: object, name: str, expected: str) -> None:
    assert mapper.map(name) == expected  # type: ignore[attr-defined]


def test_candidate_keys_are_deduplicated_in_mapper_order() -> None:
    mappers = default_param_mappers()

    assert candidate_keys("max_size", mappers) == ("max_size", "max-size", "maxSize")
    assert candidate_keys("name", mappers) == ("name",)
    assert candidate_keys("name", ()) == ()
