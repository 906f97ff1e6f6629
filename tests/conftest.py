"""
Pytest configuration и общие fixtures для тестов.

Предоставляет переиспользуемые fixtures:
- fixtures_dir / load_fixture: тестовые дампы gNMI и CLI
- write_file: запись текстового файла во временную папку
- clean_context: сброс глобального RunContext
- restore_root_logger: восстановление handlers root logger
"""

import logging

import pytest
from pathlib import Path

from gnmi_reconcile.core.context import set_current_context


@pytest.fixture
def fixtures_dir() -> Path:
    """Возвращает путь к директории fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir):
    """
    Fixture для загрузки тестовых данных из файлов.

    Usage:
        text = load_fixture("gnmi_interface.txt")
    """
    def _load(filename: str) -> str:
        fixture_path = fixtures_dir / filename
        if not fixture_path.exists():
            pytest.skip(f"Fixture не найден: {fixture_path}")
        return fixture_path.read_text(encoding="utf-8")
    return _load


@pytest.fixture
def write_file(tmp_path):
    """
    Fixture для записи файла во временную папку.

    Usage:
        path = write_file("gnmi.txt", '"speed": "1Gb"\\n')
    """
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def clean_context():
    """Глобальный RunContext не переживает тест."""
    set_current_context(None)
    yield
    set_current_context(None)


def pytest_configure(config):
    """Регистрация custom markers для pytest."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (быстрые, без внешних зависимостей)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (работают с файлами)"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end тесты CLI"
    )


@pytest.fixture
def restore_root_logger():
    """Возвращает root logger в исходное состояние после теста."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
