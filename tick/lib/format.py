from typing import assert_never

from tick.core.models import Deadline, Event, Task, Todo

from . import ansi
from .dates import format_date

__all__ = ["format_status", "format_tag", "format_task", "format_tasks", "type_marker"]


def type_marker(task: Task) -> str:
    if isinstance(task, Todo):
        return "T"
    if isinstance(task, Deadline):
        return "D"
    if isinstance(task, Event):
        return "E"
    assert_never(task)


def _format_when(task: Task) -> str:
    if isinstance(task, Todo):
        return ""
    if isinstance(task, Deadline):
        return ansi.muted(f"(by: {format_date(task.by)})")
    if isinstance(task, Event):
        return ansi.muted(f"(at: {format_date(task.at)})")
    assert_never(task)


def format_tag(label: str) -> str:
    r = ansi.active().reset
    return f"{ansi.tag_color(label)}#{label}{r}"


def format_task(task: Task, position: int | None = None) -> str:
    """Format a task for display. Returns: [N.][T][✓] description [#tag] [(by: date)]"""
    check = ansi.green("✓") if task.done else " "
    description = ansi.dim(task.description) if task.done else task.description
    parts = [f"[{type_marker(task)}][{check}]", description]

    if task.tag:
        parts.append(format_tag(task.tag.label))

    when = _format_when(task)
    if when:
        parts.append(when)

    line = " ".join(parts)
    if position is not None:
        return f"{position}.{line}"
    return line


def format_tasks(tasks: list[Task], positions: list[int] | None = None) -> list[str]:
    """One line per task, numbered from 1 unless explicit positions are given."""
    if positions is None:
        positions = list(range(1, len(tasks) + 1))
    return [format_task(t, p) for t, p in zip(tasks, positions, strict=True)]


def format_status(symbol: str, text: str) -> str:
    """Format status message for action confirmations."""
    return f"{symbol} {text}"
