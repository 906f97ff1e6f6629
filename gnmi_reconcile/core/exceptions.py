"""
Исключения gNMI Reconcile.

    ReconcileError
    ├── UsageError              неверный вызов CLI (код выхода 2)
    ├── InputFileNotFoundError  нет входного файла (код выхода 1, отчёт не трогается)
    ├── ParseError              сломанный TextFSM шаблон
    └── ConfigError             невалидный config.yaml

Нераспознанные строки, неизвестные единицы и отсутствующие ключи
исключениями не являются: это данные для отчёта.

    try:
        mapping = aggregator.build(SourceKind.CLI, paths)
    except InputFileNotFoundError as e:
        logger.error(f"Файл не найден: {e.path}")
"""

from typing import Any, Dict, Optional


class ReconcileError(Exception):
    """
    Базовое исключение.

    Attributes:
        message: Описание ошибки
        details: Контекст ошибки (путь, источник, ключ конфигурации...)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, **context: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.details.update({k: v for k, v in context.items() if v is not None})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({context})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class UsageError(ReconcileError):
    """Не хватает аргументов команды."""


class InputFileNotFoundError(ReconcileError):
    """
    Входной файл gNMI или CLI не найден.

    Example:
        raise InputFileNotFoundError("CLI file not found: a.txt", path="a.txt", source="cli")
    """

    def __init__(self, message: str, path: Optional[str] = None, source: Optional[str] = None, **kwargs: Any):
        super().__init__(message, path=path, source=source, **kwargs)
        self.path = path
        self.source = source


class ParseError(ReconcileError):
    """TextFSM шаблон не удалось загрузить."""

    def __init__(self, message: str, template: Optional[str] = None, **kwargs: Any):
        super().__init__(message, template=template, **kwargs)
        self.template = template


class ConfigError(ReconcileError):
    """
    Ошибка конфигурации.

    Attributes:
        config_file: Файл конфигурации
        key: Путь к ключу ("logging.level")
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        key: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(message, config_file=config_file, key=key, **kwargs)
        self.config_file = config_file
        self.key = key


def format_error_for_log(error: BaseException) -> str:
    """Строка для лога: свои ошибки как есть, чужие с именем класса."""
    if isinstance(error, ReconcileError):
        return str(error)
    return f"{type(error).__name__}: {error}"
