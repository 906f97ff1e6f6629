"""
Базовый экспортер результата запуска.

Наследник задаёт file_extension и реализует _write. Общая часть:
расширение по умолчанию (append_extension), создание папок, ошибки записи.

    class CSVExporter(BaseExporter):
        file_extension = ".csv"

        def _write(self, run, file_path):
            ...
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ..core.logging import get_logger
from ..core.models import ComparisonRun

logger = get_logger(__name__)


class BaseExporter(ABC):
    """
    Экспортер ComparisonRun в файл.

    Attributes:
        encoding: Кодировка файла
        append_extension: Добавлять file_extension к пути без расширения
    """

    file_extension: str = ".txt"
    append_extension: bool = True

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def resolve_path(self, file_path: Union[str, Path]) -> Path:
        """Путь с расширением экспортера, если своего нет и append_extension включён."""
        path = Path(file_path)
        if path.suffix or not self.append_extension:
            return path
        return path.with_suffix(self.file_extension)

    def export(self, run: ComparisonRun, file_path: Union[str, Path]) -> Optional[Path]:
        """
        Записывает запуск в файл.

        Args:
            run: Запуск сравнения
            file_path: Путь к файлу

        Returns:
            Path: Итоговый путь или None, если запись не удалась (ошибка в логе)
        """
        path = self.resolve_path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._write(run, path)
        except OSError as e:
            logger.error(f"Ошибка записи: {e}", file=str(path), operation=type(self).__name__)
            return None

        logger.info("Результат записан", file=str(path), operation=type(self).__name__)
        return path

    @abstractmethod
    def _write(self, run: ComparisonRun, file_path: Path) -> None:
        """Запись в уже подготовленный путь."""
