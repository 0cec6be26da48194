"""
layerconf: opt-in structured logging.

File: src/layerconf/observability/logging.py
Last updated: 2026-10-17

Purpose
- Make the library's DEBUG trail (sources polled, files parsed, decode
  outcome) readable as JSON lines when an application asks for it.

Functional requirements
- Nothing is configured on import; modules only call ``logging.getLogger``.
- ``setup_logging`` installs exactly one handler per logger name; calling it
  again replaces that handler and leaves application handlers alone.
- Extra fields may carry nodes and failures; they render as plain values and
  failure descriptions.
- Values under secret-looking keys, inline ``key=value`` secrets, and bearer
  tokens are masked using the same key rules as ``render_node``.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path, PurePath
from typing import IO, Any, Final

from layerconf.domain.failures import ConfigFailure
from layerconf.domain.nodes import Node
from layerconf.reporting import is_sensitive_key

LogRedactor = Callable[[Any], Any]

MASK: Final[str] = "***REDACTED***"
ROOT_LOGGER: Final[str] = "layerconf"

_INSTALLED_ATTR: Final[str] = "_layerconf_installed"
_RESERVED_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime"}

# A key must contain a secret-ish term to anchor a match.
_INLINE_ASSIGNMENT: Final[re.Pattern[str]] = re.compile(
    r"(?i)(?<![\w.-])"
    r"(?P<key>[\w.-]*(?:secret|token|passw(?:or)?d|api[_-]?key|private|credential|auth)[\w.-]*)"
    r"(?P<sep>\s*[:=]\s*)(?P<value>[^\s,;\"')]+)"
)
_BEARER: Final[re.Pattern[str]] = re.compile(r"(?i)\b(bearer)\s+\S+")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Destination and verbosity of ``layerconf`` records.

    ``log_path`` takes precedence over ``stream``; with neither, records go to
    stderr.
    """

    level: int | str = logging.INFO
    logger_name: str = ROOT_LOGGER
    log_path: str | PurePath | None = None
    stream: IO[str] | None = None
    redactor: LogRedactor | None = None


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record: ``time``, ``level``, ``logger``, ``message``.

    Attributes passed with ``extra=`` are collected under ``fields``; a record
    with exception info gets an ``exception`` entry.
    """

    def __init__(self, *, redactor: LogRedactor | None = None) -> None:
        super().__init__()
        self._redact = redactor or default_log_redactor

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, UTC)
        payload: dict[str, Any] = {
            "time": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields = {
            key: _jsonable(value)
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(self._redact(payload), sort_keys=True, default=str, ensure_ascii=False)


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Attach a JSON-lines handler to ``config.logger_name`` and return the logger."""

    config = config or LoggingConfig()
    level = _level(config.level)

    handler = _handler(config)
    handler.setLevel(level)
    handler.setFormatter(JsonLineFormatter(redactor=config.redactor))
    setattr(handler, _INSTALLED_ATTR, True)

    shutdown_logging(config.logger_name)
    logger = logging.getLogger(config.logger_name)
    logger.setLevel(level)
    logger.addHandler(handler)
    return logger


def shutdown_logging(logger_name: str = ROOT_LOGGER) -> None:
    """Flush and detach the handler installed by ``setup_logging``, if any."""

    logger = logging.getLogger(logger_name)
    for handler in [h for h in logger.handlers if getattr(h, _INSTALLED_ATTR, False)]:
        logger.removeHandler(handler)
        handler.flush()
        handler.close()


def default_log_redactor(value: Any) -> Any:
    """Mask values under secret-looking keys and secrets embedded in strings."""

    if isinstance(value, Mapping):
        return {
            key: MASK if is_sensitive_key(str(key)) else default_log_redactor(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [default_log_redactor(item) for item in value]
    if isinstance(value, str):
        return _mask_inline_secrets(value)
    return value


def _mask_inline_secrets(text: str) -> str:
    def mask(match: re.Match[str]) -> str:
        if not is_sensitive_key(match.group("key")):
            return match.group(0)
        return f"{match.group('key')}{match.group('sep')}{MASK}"

    return _BEARER.sub(rf"\1 {MASK}", _INLINE_ASSIGNMENT.sub(mask, text))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_python()
    if isinstance(value, ConfigFailure):
        return value.description()
    if isinstance(value, PurePath):
        return value.as_posix()
    if isinstance(value, Mapping):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(item) for item in value]
    return value


def _handler(config: LoggingConfig) -> logging.Handler:
    if config.log_path is None:
        return logging.StreamHandler(config.stream or sys.stderr)
    path = Path(config.log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, encoding="utf-8")


def _level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    try:
        return logging.getLevelNamesMapping()[value.strip().upper()]
    except KeyError:
        raise ValueError(f"unsupported logging level {value!r}") from None


__all__ = [
    "MASK",
    "ROOT_LOGGER",
    "JsonLineFormatter",
    "LogRedactor",
    "LoggingConfig",
    "default_log_redactor",
    "setup_logging",
    "shutdown_logging",
]
