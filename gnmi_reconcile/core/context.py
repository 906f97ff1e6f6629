"""
Контекст запуска.

Один RunContext на вызов CLI. Его run_id попадает в каждую запись лога
и в JSON экспорт, started_at в Timestamp блока отчёта.

    ctx = RunContext.create(command="run")
    set_current_context(ctx)
    ...
    logger.info(f"Готово за {ctx.elapsed_human}")
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Literal, Optional

TriggerSource = Literal["cli", "cron", "test"]

RUN_ID_FORMAT = "%Y-%m-%dT%H-%M-%S"


def format_duration(seconds: float) -> str:
    """12.3 → "12.3s", 125 → "2m 05s"."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, rest = divmod(int(seconds), 60)
    return f"{minutes}m {rest:02d}s"


@dataclass
class RunContext:
    """
    Контекст одного сравнения.

    Attributes:
        run_id: Идентификатор запуска
        started_at: Время начала
        triggered_by: Кто запустил (cli/cron/test)
        command: Команда CLI
        extra: Входные файлы и прочие данные запуска
    """

    run_id: str
    started_at: datetime = field(default_factory=datetime.now)
    triggered_by: TriggerSource = "cli"
    command: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        triggered_by: TriggerSource = "cli",
        command: str = "",
    ) -> "RunContext":
        """
        Новый контекст с текущим временем.

        Args:
            triggered_by: Источник запуска
            command: Команда CLI
        """
        started_at = datetime.now()
        run_id = started_at.strftime(RUN_ID_FORMAT)
        return cls(run_id=run_id, started_at=started_at, triggered_by=triggered_by, command=command)

    @property
    def elapsed_seconds(self) -> float:
        return (datetime.now() - self.started_at).total_seconds()

    @property
    def elapsed_human(self) -> str:
        return format_duration(self.elapsed_seconds)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat(),
            "triggered_by": self.triggered_by,
            "command": self.command,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
            "extra": dict(self.extra),
        }

    def __str__(self) -> str:
        return f"RunContext({self.run_id})"


_current_context: Optional[RunContext] = None


def get_current_context() -> Optional[RunContext]:
    """Контекст текущего запуска или None."""
    return _current_context


def set_current_context(ctx: Optional[RunContext]) -> None:
    """Устанавливает (или сбрасывает при None) контекст текущего запуска."""
    global _current_context
    _current_context = ctx
