"""Public observability primitives: opt-in structured logging."""

from layerconf.observability.logging import (
    JsonLineFormatter,
    LoggingConfig,
    LogRedactor,
    default_log_redactor,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "JsonLineFormatter",
    "LogRedactor",
    "LoggingConfig",
    "default_log_redactor",
    "setup_logging",
    "shutdown_logging",
]
