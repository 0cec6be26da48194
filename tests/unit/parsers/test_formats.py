"""
layerconf — unit tests for built-in file parsers

File: tests/unit/parsers/test_formats.py
Last updated: 2026-10-17

Purpose
- Validate TOML, YAML, JSON, and properties parsing into configuration trees.

What this test file should cover
- Scalar kinds and nesting per format.
- Source tags on produced nodes.
- Syntax errors and undecodable bytes reported as ParseFailure, never raised.
"""

from __future__ import annotations

import pytest

from layerconf.domain.failures import ParseFailure
from layerconf.domain.nodes import (
    BooleanNode,
    DoubleNode,
    ListNode,
    LongNode,
    MapNode,
    StringNode,
)
from layerconf.domain.result import Invalid, Valid
from layerconf.parsers.formats import JsonParser, PropertiesParser, TomlParser, YamlParser


def _parsed(result: object) -> MapNode:
    assert isinstance(result, Valid)
    assert isinstance(result.value, MapNode)
    return result.value


def test_toml_scalars_and_tables() -> None:
    data = b'[db]\nhost = "h"\nport = 5432\nratio = 0.5\nenabled = true\n'

    node = _parsed(TomlParser().load(data, "app.toml"))

    assert node == MapNode(
        {
            "db": MapNode(
                {
                    "host": StringNode("h"),
                    "port": LongNode(5432),
                    "ratio": DoubleNode(0.5),
                    "enabled": BooleanNode(True),
                }
            )
        }
    )
    assert node.at("db").at("host").source == "app.toml"


def test_yaml_lists_and_dates() -> None:
    data = b"servers:\n  - a\n  - b\nreleased: 2024-01-02\n"

    node = _parsed(YamlParser().load(data, "app.yaml"))

    assert node.at("servers") == ListNode((StringNode("a"), StringNode("b")))
    assert node.at("released") == StringNode("2024-01-02")


def test_empty_yaml_document_is_an_empty_map() -> None:
    assert _parsed(YamlParser().load(b"", "empty.yaml")) == MapNode({})
    assert _parsed(YamlParser().load(b"# only a comment\n", "empty.yaml")) == MapNode({})


def test_json_objects() -> None:
    node = _parsed(JsonParser().load(b'{"a": {"b": [1, 2.5, null]}}', "app.json"))

    assert node.to_python() == {"a": {"b": [1, 2.5, None]}}


@pytest.mark.parametrize(
    ("parser", "data", "source"),
    [
        (TomlParser(), b"[db\nhost = 1\n", "bad.toml"),
        (YamlParser(), b"a: [1, 2\n", "bad.yaml"),
        (JsonParser(), b'{"a": ', "bad.json"),
        (TomlParser(), b"\xff\xfe\x00", "binary.toml"),
    ],
)
def test_syntax_errors_become_parse_failures(parser: object, data: bytes, source: str) -> None:
    result = parser.load(data, source)  # type: ignore[attr-defined]

    assert isinstance(result, Invalid)
    assert len(result.failures) == 1
    failure = result.failures[0]
    assert isinstance(failure, ParseFailure)
    assert failure.source == source


def test_utf8_byte_order_mark_is_ignored() -> None:
    node = _parsed(JsonParser().load(b'\xef\xbb\xbf{"a": 1}', "bom.json"))

    assert node.at("a") == LongNode(1)


def test_properties_comments_separators_and_nesting() -> None:
    data = (
        b"# comment\n"
        b"! another comment\n"
        b"db.host = localhost\n"
        b"db.port: 5432\n"
        b"\n"
        b"name=svc=primary\n"
        b"flag\n"
    )

    node = _parsed(PropertiesParser().load(data, "app.properties"))

    assert node.to_python() == {
        "db": {"host": "localhost", "port": "5432"},
        "name": "svc=primary",
        "flag": "",
    }
    assert node.at("db").at("port").source == "app.properties"


def test_properties_backslash_continues_value() -> None:
    data = b"message = hello \\\n    world\nlast = end \\\n"

    node = _parsed(PropertiesParser().load(data, "app.properties"))

    assert node.at("message") == StringNode("hello world")
    assert node.at("last") == StringNode("end")


def test_properties_line_without_key_is_a_parse_failure() -> None:
    result = PropertiesParser().load(b"ok = 1\n= orphan\n", "app.properties")

    assert isinstance(result, Invalid)
    assert result.failures == (ParseFailure("app.properties", "line 2: missing property key"),)


def test_properties_whitespace_separator_and_escaped_key_characters() -> None:
    data = (
        b"db.host localhost\n"
        b"db.port   5432\n"
        b"greeting  =  hello there\n"
        b"path\\:win = C:\\\\data\n"
        b"first\\ name = Ada\n"
        b"equation\\=x: y\n"
    )

    node = _parsed(PropertiesParser().load(data, "app.properties"))

    assert node.to_python() == {
        "db": {"host": "localhost", "port": "5432"},
        "greeting": "hello there",
        "path:win": "C:\\\\data",
        "first name": "Ada",
        "equation=x": "y",
    }
