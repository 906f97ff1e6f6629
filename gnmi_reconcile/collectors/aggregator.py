"""
Сборщик данных источников.

Читает файлы gNMI/CLI, извлекает пары key/value экстрактором источника
и сразу нормализует значения. В SourceMapping попадают только
нормализованные значения.

Правила слияния:
- gNMI: один файл
- CLI: несколько файлов в порядке аргументов
- повтор ключа (в файле или между файлами) перезаписывает значение

Пример использования:
    aggregator = SourceAggregator()
    gnmi = aggregator.build(SourceKind.GNMI, ["gnmi.txt"])
    cli = aggregator.build(SourceKind.CLI, ["show_int.txt", "show_env.txt"])
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..core.domain.normalizer import ValueNormalizer
from ..core.exceptions import InputFileNotFoundError
from ..core.logging import get_logger
from ..core.models import SourceKind, SourceMapping
from ..parsers.extractors import LineExtractor, get_extractor

logger = get_logger(__name__)


class SourceAggregator:
    """
    Построение SourceMapping для одного типа источника.

    Attributes:
        normalizer: Нормализатор значений
        encoding: Кодировка входных файлов

    Example:
        aggregator = SourceAggregator(ValueNormalizer(legacy_literal_fixup=False))
        mapping = aggregator.build(SourceKind.CLI, ["a.txt", "b.txt"])
    """

    def __init__(
        self,
        normalizer: Optional[ValueNormalizer] = None,
        encoding: str = "utf-8",
    ):
        self.normalizer = normalizer or ValueNormalizer()
        self.encoding = encoding

    @staticmethod
    def check_paths(kind: SourceKind, paths: Sequence[Union[str, Path]]) -> None:
        """
        Проверяет что все файлы существуют.

        Raises:
            InputFileNotFoundError: Для первого отсутствующего файла
        """
        for path in paths:
            if not Path(path).is_file():
                raise InputFileNotFoundError(
                    f"{kind.label} file not found: {path}",
                    path=str(path),
                    source=kind.value,
                )

    def build(
        self,
        kind: SourceKind,
        paths: Sequence[Union[str, Path]],
    ) -> SourceMapping:
        """
        Строит отображение по списку файлов.

        Все пути проверяются до чтения первого файла.

        Args:
            kind: Тип источника
            paths: Файлы в порядке слияния

        Returns:
            SourceMapping: key → нормализованное значение

        Raises:
            InputFileNotFoundError: Если какой-то файл не найден
        """
        self.check_paths(kind, paths)

        extractor = get_extractor(kind)
        mapping = SourceMapping(kind)

        for path in paths:
            text = Path(path).read_text(encoding=self.encoding, errors="replace")
            count = self.aggregate_text(kind, text, mapping, origin=str(path), extractor=extractor)
            logger.info(
                f"Файл обработан: {count} пар",
                source=kind.value,
                file=str(path),
            )

        if mapping.overwrites:
            logger.debug(
                f"Перезаписано значений: {mapping.overwrites}",
                source=kind.value,
            )
        return mapping

    def aggregate_text(
        self,
        kind: SourceKind,
        text: str,
        mapping: SourceMapping,
        origin: str = "",
        extractor: Optional[LineExtractor] = None,
    ) -> int:
        """
        Добавляет пары из текста в существующее отображение.

        Args:
            kind: Тип источника
            text: Содержимое файла
            mapping: Отображение для записи
            origin: Имя файла
            extractor: Экстрактор (по умолчанию из реестра по kind)

        Returns:
            int: Количество извлечённых пар
        """
        extractor = extractor or get_extractor(kind)
        entries = extractor.extract(text, origin=origin)

        for entry in entries:
            value = self.normalizer.normalize(entry.raw_value)
            previous = mapping.origin_of(entry.key) if entry.key in mapping else None
            if mapping.upsert(entry.key, value, origin=entry.origin):
                logger.debug(
                    f"Значение перезаписано (было из {previous or '<text>'})",
                    source=kind.value,
                    file=entry.origin,
                    key=entry.key,
                )

        return len(entries)

    def build_from_texts(self, kind: SourceKind, texts: List[str]) -> SourceMapping:
        """Строит отображение из текстов в памяти (порядок = порядок слияния)."""
        mapping = SourceMapping(kind)
        for index, text in enumerate(texts):
            self.aggregate_text(kind, text, mapping, origin=f"<text {index}>")
        return mapping
