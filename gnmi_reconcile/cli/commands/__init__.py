"""
CLI команды.

- run.py: run (сравнение gNMI с CLI)
"""

from .run import cmd_run, EXIT_OK, EXIT_ERROR, EXIT_DIFFERENCES

__all__ = [
    "cmd_run",
    "EXIT_OK",
    "EXIT_ERROR",
    "EXIT_DIFFERENCES",
]
