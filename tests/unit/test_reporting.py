"""Unit tests for redacted rendering of configuration trees."""

from __future__ import annotations

import json

import pytest

from layerconf.domain.nodes import ListNode, LongNode, MapNode, StringNode
from layerconf.reporting import REDACTED, is_sensitive_key, render_node


def test_render_node_sorts_keys_and_redacts_nested_secrets() -> None:
    tree = MapNode(
        {
            "zeta": LongNode(1),
            "db": MapNode({"password": StringNode("hunter2"), "host": StringNode("h")}),
            "providers": ListNode((MapNode({"apiKey": StringNode("sk")}),)),
        }
    )

    rendered = render_node(tree)

    assert json.loads(rendered) == {
        "db": {"host": "h", "password": REDACTED},
        "providers": [{"apiKey": REDACTED}],
        "zeta": 1,
    }
    assert rendered.index('"db"') < rendered.index('"zeta"')
    assert "hunter2" in render_node(tree, redact=False)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("password", True),
        ("dbPassword", True),
        ("client-secret", True),
        ("auth_token", True),
        ("API_KEY", True),
        ("author", False),
        ("host", False),
        ("max_size", False),
    ],
)
def test_is_sensitive_key(key: str, expected: bool) -> None:
    assert is_sensitive_key(key) is expected
