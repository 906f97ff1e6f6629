"""
Команда run.

Сравнение gNMI дампа с одним или несколькими дампами CLI:
    файлы → экстрактор → нормализация → слияние → сравнение → отчёт
"""

from typing import List, Tuple

from ...core.config_schema import AppConfig
from ...collectors.aggregator import SourceAggregator
from ...core.context import RunContext
from ...core.domain import SourceComparator, ValueNormalizer
from ...core.exceptions import UsageError
from ...core.logging import get_logger
from ...core.models import ComparisonRun, SourceKind
from ...exporters import JSONExporter, TextReportExporter

logger = get_logger(__name__)

# Коды выхода
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_DIFFERENCES = 3


def _resolve_paths(args) -> Tuple[str, List[str]]:
    """
    Достаёт пути gNMI и CLI из аргументов.

    Raises:
        UsageError: Нет пути gNMI или ни одного пути CLI
    """
    gnmi_path = getattr(args, "gnmi_path", None)
    cli_paths = list(getattr(args, "cli_paths", None) or [])
    if not gnmi_path or not cli_paths:
        raise UsageError("Нужен путь к файлу gNMI и хотя бы один путь к файлу CLI")
    return gnmi_path, cli_paths


def cmd_run(args, config: AppConfig, ctx: RunContext) -> int:
    """
    Выполняет одно сравнение и дописывает блок в отчёт.

    Все входные файлы проверяются до чтения: при отсутствии любого
    отчёт не создаётся и не изменяется.

    Returns:
        int: Код выхода (0, 1 при ошибке записи, 3 при --fail-on-diff и расхождениях)

    Raises:
        UsageError: Недостаточно аргументов
        InputFileNotFoundError: Входной файл не найден
    """
    gnmi_path, cli_paths = _resolve_paths(args)
    ctx.extra.update({"gnmi_file": gnmi_path, "cli_files": cli_paths})

    SourceAggregator.check_paths(SourceKind.GNMI, [gnmi_path])
    SourceAggregator.check_paths(SourceKind.CLI, cli_paths)

    normalizer = ValueNormalizer(
        legacy_literal_fixup=config.normalizer.legacy_literal_fixup,
    )
    aggregator = SourceAggregator(normalizer)
    gnmi = aggregator.build(SourceKind.GNMI, [gnmi_path])
    cli = aggregator.build(SourceKind.CLI, cli_paths)

    strict = bool(getattr(args, "strict", False)) or config.comparison.strict_missing_in_cli
    result = SourceComparator(strict_missing_in_cli=strict).compare(gnmi, cli)
    logger.info(f"Сравнение завершено: {result.summary()}")

    run = ComparisonRun(
        gnmi_path=gnmi_path,
        cli_paths=cli_paths,
        result=result,
        timestamp=ctx.started_at,
        run_id=ctx.run_id,
    )

    report_path = getattr(args, "report", None) or config.report.file_path
    report_exporter = TextReportExporter(encoding=config.report.encoding)
    if report_exporter.export(run, report_path) is None:
        return EXIT_ERROR

    json_path = getattr(args, "json", None) or config.report.json_file
    if json_path:
        json_exporter = JSONExporter(encoding=config.report.encoding, context=ctx)
        if json_exporter.export(run, json_path) is None:
            return EXIT_ERROR

    if config.report.echo and not getattr(args, "no_echo", False):
        print(report_exporter.render_block(run), end="")

    if getattr(args, "fail_on_diff", False) and not result.all_match:
        return EXIT_DIFFERENCES
    return EXIT_OK
