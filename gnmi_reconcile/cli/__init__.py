"""
CLI модуль gnmi_reconcile.

Структура:
- commands/: обработчики команд
  - run.py: run

Примеры использования:
    python -m gnmi_reconcile run gnmi.txt show_int.txt
    python -m gnmi_reconcile run gnmi.txt a.txt b.txt --report reports/compare.txt
    python -m gnmi_reconcile -v run gnmi.txt cli.txt --json result.json --fail-on-diff
"""

import argparse
import sys
from typing import List, Optional

from .commands import cmd_run, EXIT_ERROR
from ..core.logging import get_logger, setup_logging, setup_logging_from_config

logger = get_logger(__name__)

EXIT_USAGE = 2


def setup_parser() -> argparse.ArgumentParser:
    """
    Создаёт парсер аргументов командной строки.

    Returns:
        ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="gnmi_reconcile",
        description="Сверка состояния устройства: gNMI дамп против вывода CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s run gnmi.txt show_int.txt
  %(prog)s run gnmi.txt a.txt b.txt --report reports/compare.txt
  %(prog)s -v run gnmi.txt cli.txt --json result.json --fail-on-diff
        """,
    )

    # Общие аргументы
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный вывод (DEBUG)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Путь к файлу конфигурации YAML (default: config.yaml)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Логи в формате JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Команды")

    # === RUN ===
    run_parser = subparsers.add_parser("run", help="Сравнить gNMI с CLI")
    run_parser.add_argument(
        "gnmi_path",
        nargs="?",
        help="Файл с выводом gNMI",
    )
    run_parser.add_argument(
        "cli_paths",
        nargs="*",
        help="Файлы с выводом CLI (слияние в порядке аргументов)",
    )
    run_parser.add_argument(
        "--report",
        default=None,
        help="Файл отчёта (default: из config.yaml, comparison_report.txt)",
    )
    run_parser.add_argument(
        "--json",
        default=None,
        help="Дополнительно сохранить результат в JSON",
    )
    run_parser.add_argument(
        "--no-echo",
        action="store_true",
        help="Не выводить блок отчёта в stdout",
    )
    run_parser.add_argument(
        "--strict",
        action="store_true",
        help="Считать ключи без пары в CLI расхождением",
    )
    run_parser.add_argument(
        "--fail-on-diff",
        action="store_true",
        help="Код выхода 3, если найдены расхождения",
    )

    return parser


def _setup_logging(args, app_config) -> None:
    """Логирование из config.yaml с приоритетом флагов -v и --json-logs."""
    overrides = {}
    if args.verbose:
        overrides["level"] = "DEBUG"
    if args.json_logs:
        overrides["json_format"] = True

    setup_logging_from_config(app_config.logging.model_copy(update=overrides))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Главная функция CLI.

    Returns:
        int: Код выхода
    """
    from ..config import load_config
    from ..core.context import RunContext, set_current_context
    from ..core.exceptions import ConfigError, ReconcileError, UsageError, format_error_for_log

    parser = setup_parser()
    args = parser.parse_args(argv)

    try:
        app_config = load_config(args.config)
    except ConfigError as e:
        setup_logging()
        logger.error(format_error_for_log(e))
        return EXIT_ERROR

    ctx = RunContext.create(triggered_by="cli", command=args.command or "")
    set_current_context(ctx)
    _setup_logging(args, app_config)

    try:
        if args.command == "run":
            logger.info(f"Run started (command={args.command})")
            exit_code = cmd_run(args, app_config, ctx)
            logger.info(f"Run finished in {ctx.elapsed_human} (exit={exit_code})")
        else:
            parser.print_help()
            return EXIT_ERROR
    except UsageError as e:
        parser.print_usage(sys.stderr)
        logger.error(format_error_for_log(e))
        return EXIT_USAGE
    except ReconcileError as e:
        logger.error(format_error_for_log(e))
        return EXIT_ERROR
    finally:
        set_current_context(None)

    return exit_code


__all__ = ["setup_parser", "main", "EXIT_USAGE"]
