"""
Pydantic схемы config.yaml.

Секции: report, comparison, normalizer, logging. Любая ошибка валидации
превращается в ConfigError с путём к ключу:

    from gnmi_reconcile.core.config_schema import validate_config

    config = validate_config({"logging": {"level": "debug"}})
    config.logging.level  # "DEBUG"
"""

from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .constants import DEFAULT_REPORT_FILE
from .exceptions import ConfigError
from .logging import RotationType


class ReportConfig(BaseModel):
    """Отчёт и экспорт."""
    file_path: str = DEFAULT_REPORT_FILE
    echo: bool = True
    json_file: Optional[str] = None
    encoding: str = "utf-8"

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError(
                "empty_path",
                "Путь к файлу отчёта не может быть пустым",
            )
        return v


class ComparisonConfig(BaseModel):
    strict_missing_in_cli: bool = False


class NormalizerConfig(BaseModel):
    legacy_literal_fixup: bool = True


class LoggingConfig(BaseModel):
    """Логирование (см. core/logging.py)."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    rotation: RotationType = RotationType.SIZE
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)
    backup_count: int = Field(default=5, ge=1, le=100)
    when: str = "midnight"
    interval: int = Field(default=1, ge=1)

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Полная конфигурация приложения."""
    report: ReportConfig = Field(default_factory=ReportConfig)
    comparison: ComparisonConfig = Field(default_factory=ComparisonConfig)
    normalizer: NormalizerConfig = Field(default_factory=NormalizerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(config_dict: dict, config_file: str = "config.yaml") -> AppConfig:
    """
    Валидирует словарь конфигурации.

    Args:
        config_dict: Словарь из YAML (после слияния с defaults)
        config_file: Источник (для сообщения об ошибке)

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: Первая ошибка валидации, key = путь вида "logging.level"
    """
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigError(
            f"Ошибка валидации конфигурации: {key}: {first['msg']}",
            config_file=config_file,
            key=key,
        ) from e


def get_default_config() -> AppConfig:
    return AppConfig()
