"""
Загрузчик конфигурации из config.yaml.

Порядок применения (последний побеждает):
    1. Значения по умолчанию (AppConfig)
    2. YAML файл (-c PATH или первый найденный из CONFIG_SEARCH_PATHS)
    3. Переменные окружения GNMI_RECONCILE_*

Результат валидируется pydantic схемой:
    config = load_config()
    config.report.file_path   # "comparison_report.txt"
    config.logging.level      # "INFO"
"""

import os
from typing import Any, Dict, Optional

import yaml

from .core.config_schema import AppConfig, get_default_config, validate_config
from .core.exceptions import ConfigError
from .core.logging import get_logger

logger = get_logger(__name__)

# Файлы конфигурации, которые ищутся если путь не указан явно
CONFIG_SEARCH_PATHS = [
    os.path.join(os.path.dirname(__file__), "config.yaml"),
    "config.yaml",
    "config.yml",
    ".gnmi_reconcile.yaml",
]

# Переменная окружения → (секция, ключ)
ENV_OVERRIDES = {
    "GNMI_RECONCILE_REPORT_FILE": ("report", "file_path"),
    "GNMI_RECONCILE_LOG_LEVEL": ("logging", "level"),
}


def _find_config_file() -> Optional[str]:
    for path in CONFIG_SEARCH_PATHS:
        if os.path.exists(path):
            return path
    return None


def _merge_dict(base: dict, override: dict) -> None:
    """Рекурсивно мержит словари."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_dict(base[key], value)
        else:
            base[key] = value


def _read_yaml(config_file: str) -> Dict[str, Any]:
    """
    Читает YAML файл конфигурации.

    Raises:
        ConfigError: Файл не найден или содержит невалидный YAML
    """
    if not os.path.exists(config_file):
        raise ConfigError("Файл конфигурации не найден", config_file=config_file)

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Ошибка разбора YAML: {e}", config_file=config_file) from e

    if not isinstance(data, dict):
        raise ConfigError("Корень конфигурации должен быть словарём", config_file=config_file)

    logger.debug(f"Конфигурация загружена из {config_file}")
    return data


def _apply_env(data: Dict[str, Any]) -> None:
    """Переопределяет значения из переменных окружения."""
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data.setdefault(section, {})[key] = value


def load_config(config_file: Optional[str] = None) -> AppConfig:
    """
    Загружает и валидирует конфигурацию.

    Args:
        config_file: Путь к YAML файлу. Если None, ищется в CONFIG_SEARCH_PATHS,
            при отсутствии используются значения по умолчанию.

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: Невалидный YAML, явно указанный файл не найден или
            значения не прошли валидацию
    """
    data = get_default_config().model_dump()

    source = config_file or _find_config_file()
    if source:
        _merge_dict(data, _read_yaml(source))

    _apply_env(data)
    return validate_config(data, config_file=source or "<defaults>")
