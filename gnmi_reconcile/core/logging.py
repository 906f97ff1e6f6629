"""
Логирование gNMI Reconcile.

Консоль: человекочитаемый формат. Файл и log aggregation: JSON
(одна запись на строку). Структурированные поля передаются именованными
аргументами и попадают в запись как extra:

    from gnmi_reconcile.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Файл обработан", source="cli", file="show_int.txt", entries=42)

Консоль:
    2026-10-18 10:30:15 INFO     [2026-10-18T10-30-00] Файл обработан (source=cli, file=show_int.txt)

JSON:
    {"timestamp": "...", "level": "INFO", "logger": "...", "message": "Файл обработан",
     "source": "cli", "file": "show_int.txt", "entries": 42, "run_id": "..."}
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, IO, List, Optional

from .context import get_current_context

if TYPE_CHECKING:
    from .config_schema import LoggingConfig

# Атрибуты любой LogRecord; остальное в record.__dict__ считается extra полями
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

# Именованные аргументы, которые logging обрабатывает сам
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


class RotationType(str, Enum):
    """Ротация файла логов."""
    SIZE = "size"
    TIME = "time"
    NONE = "none"


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Extra поля записи (без None и служебных атрибутов)."""
    return {
        name: value
        for name, value in record.__dict__.items()
        if name not in _RECORD_ATTRS and not name.startswith("_") and value is not None
    }


class JSONFormatter(logging.Formatter):
    """Запись лога как JSON объект в одну строку."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(extra_fields(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    """
    Консольный формат: TIMESTAMP LEVEL [run_id] MESSAGE (source=X, file=Y, key=Z)

    В скобках только поля из SHOWN_FIELDS, прочие extra видны в JSON.
    """

    SHOWN_FIELDS = ("source", "file", "key")

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        parts = [self.formatTime(record, self.datefmt), f"{record.levelname:<8}"]

        run_id = getattr(record, "run_id", None)
        if run_id:
            parts.append(f"[{run_id}]")
        parts.append(record.getMessage())
        line = " ".join(parts)

        shown = [
            f"{name}={getattr(record, name)}"
            for name in self.SHOWN_FIELDS
            if getattr(record, name, None)
        ]
        if shown:
            line += f" ({', '.join(shown)})"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StructuredLogger(logging.LoggerAdapter):
    """
    Логгер с именованными полями.

    Неизвестные logging именованные аргументы становятся extra полями,
    run_id берётся из текущего RunContext, если не передан явно.

    Example:
        cli_logger = get_logger(__name__).bind(source="cli")
        cli_logger.info("Merged", file="b.txt")  # source=cli, file=b.txt
    """

    def __init__(self, logger: logging.Logger, bound: Optional[Dict[str, Any]] = None):
        super().__init__(logger, dict(bound or {}))

    def process(self, msg: Any, kwargs: Any):
        fields = dict(self.extra)
        fields.update(kwargs.pop("extra", None) or {})
        for name in [k for k in kwargs if k not in _LOGGING_KWARGS]:
            fields[name] = kwargs.pop(name)

        if "run_id" not in fields:
            ctx = get_current_context()
            if ctx is not None:
                fields["run_id"] = ctx.run_id

        kwargs["extra"] = fields
        return msg, kwargs

    def bind(self, **fields: Any) -> "StructuredLogger":
        """Новый логгер с дополнительными постоянными полями."""
        return StructuredLogger(self.logger, {**self.extra, **fields})


@lru_cache(maxsize=None)
def get_logger(name: str) -> StructuredLogger:
    """StructuredLogger для модуля (обычно get_logger(__name__))."""
    return StructuredLogger(logging.getLogger(name))


def _level(value: Any) -> int:
    if isinstance(value, int):
        return value
    return getattr(logging, str(value).upper(), logging.INFO)


def _install(handlers: List[logging.Handler], level: int) -> None:
    """Заменяет handlers root logger."""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(level)
        root.addHandler(handler)
    root.setLevel(level)


def _file_handler(settings: "LoggingConfig") -> logging.Handler:
    path = Path(settings.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rotation = RotationType(settings.rotation)
    if rotation is RotationType.SIZE:
        return logging.handlers.RotatingFileHandler(
            path,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
    if rotation is RotationType.TIME:
        return logging.handlers.TimedRotatingFileHandler(
            path,
            when=settings.when,
            interval=settings.interval,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
    return logging.FileHandler(path, encoding="utf-8")


def setup_logging(
    json_format: bool = False,
    level: Any = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Один консольный handler.

    Используется до загрузки конфигурации (например, если config.yaml невалиден).

    Args:
        json_format: JSON вместо человекочитаемого формата
        level: Уровень (int или имя)
        stream: Поток вывода (по умолчанию sys.stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())
    _install([handler], _level(level))


def setup_logging_from_config(settings: "LoggingConfig", stream: Optional[IO[str]] = None) -> None:
    """
    Настраивает логирование из секции logging конфигурации.

    json_format задаёт формат файла. Консоль пишет JSON только если файла нет,
    иначе остаётся человекочитаемой.

    Args:
        settings: Секция logging (LoggingConfig)
        stream: Поток для консоли (по умолчанию sys.stderr)
    """
    handlers: List[logging.Handler] = []

    if settings.console:
        console = logging.StreamHandler(stream or sys.stderr)
        console_json = settings.json_format and not settings.file_path
        console.setFormatter(JSONFormatter() if console_json else HumanFormatter())
        handlers.append(console)

    if settings.file_path:
        file_handler = _file_handler(settings)
        file_handler.setFormatter(JSONFormatter() if settings.json_format else HumanFormatter())
        handlers.append(file_handler)

    _install(handlers, _level(settings.level))
