"""Deterministic, redacted rendering of configuration trees for logs and debugging."""

from __future__ import annotations

import json
import re
from typing import Any, Final

from layerconf.domain.nodes import Node
from layerconf.mappers import KebabCaseParamMapper

REDACTED: Final[str] = "<redacted>"

# Whole words of the kebab-cased key.
_SECRET_WORDS: Final[frozenset[str]] = frozenset(
    {
        "secret",
        "secrets",
        "token",
        "password",
        "passwd",
        "passphrase",
        "apikey",
        "private",
        "credential",
        "credentials",
        "auth",
    }
)
# Adjacent word pairs.
_SECRET_PAIRS: Final[frozenset[tuple[str, str]]] = frozenset(
    {("api", "key"), ("access", "key"), ("signing", "key")}
)

_WORD_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")
_KEBAB: Final[KebabCaseParamMapper] = KebabCaseParamMapper()


def render_node(node: Node, *, redact: bool = True) -> str:
    """Return a JSON dump of ``node`` with sorted keys.

    Values under secret-looking keys are replaced by ``<redacted>`` unless
    ``redact`` is false.
    """

    payload = node.to_python()
    if redact:
        payload = redact_value(payload)
    return json.dumps(payload, sort_keys=True, indent=2, ensure_ascii=False)


def redact_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: REDACTED if is_sensitive_key(key) else redact_value(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_value(item) for item in value]
    return value


def is_sensitive_key(key: str) -> bool:
    """True when ``key`` names a secret, whether written snake, kebab, or camel case."""

    words = [word for word in _WORD_SEPARATOR.split(_KEBAB.map(key.strip())) if word]
    if any(word in _SECRET_WORDS for word in words):
        return True
    return any(pair in _SECRET_PAIRS for pair in zip(words, words[1:], strict=False))


__all__ = ["REDACTED", "is_sensitive_key", "redact_value", "render_node"]
