"""
Core модули gNMI Reconcile.

- models: типы данных (SourceKind, SourceMapping, ComparisonResult)
- domain: нормализация и сравнение
- context: RunContext для отслеживания запусков
- logging: Structured Logging (JSON/Human-readable)
- exceptions: типизированные исключения
- config_schema: pydantic схема config.yaml
"""

from .context import RunContext, get_current_context, set_current_context
from .logging import (
    get_logger,
    setup_logging,
    setup_logging_from_config,
    StructuredLogger,
    JSONFormatter,
    HumanFormatter,
    RotationType,
)
from .exceptions import (
    ReconcileError,
    UsageError,
    InputFileNotFoundError,
    ParseError,
    ConfigError,
    format_error_for_log,
)

__all__ = [
    # Context
    "RunContext",
    "get_current_context",
    "set_current_context",
    # Structured Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
    "StructuredLogger",
    "JSONFormatter",
    "HumanFormatter",
    "RotationType",
    # Exceptions
    "ReconcileError",
    "UsageError",
    "InputFileNotFoundError",
    "ParseError",
    "ConfigError",
    "format_error_for_log",
]
