"""
Точка входа для запуска модуля.

Позволяет запускать утилиту как:
    python -m gnmi_reconcile [команда] [опции]

Примеры:
    python -m gnmi_reconcile run gnmi.txt cli.txt
    python -m gnmi_reconcile run gnmi.txt cli_a.txt cli_b.txt --json result.json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
