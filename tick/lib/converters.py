from datetime import date
from typing import assert_never

from tick.core.models import Deadline, Event, Tag, Task, Todo

from .dates import parse_iso_date
from .format import type_marker

SEPARATOR = " | "
_FIELDS = 5


def _format_date(d: date | None) -> str:
    return d.isoformat() if d else ""


def task_to_record(task: Task) -> str:
    """
    Serializes a task into one storage line.
    Record format: <type> | <done> | <tag> | <date> | <description>
    """
    if isinstance(task, Todo):
        when = None
    elif isinstance(task, Deadline):
        when = task.by
    elif isinstance(task, Event):
        when = task.at
    else:
        assert_never(task)

    return SEPARATOR.join(
        [
            type_marker(task),
            "1" if task.done else "0",
            task.tag.label if task.tag else "",
            _format_date(when),
            task.description,
        ]
    )


def record_to_task(record: str) -> Task:
    """
    Parses one storage line back into a task.
    Raises ValueError when the record is malformed.
    """
    fields = record.rstrip("\r\n").split(SEPARATOR, _FIELDS - 1)
    if len(fields) != _FIELDS:
        raise ValueError(f"expected {_FIELDS} fields, got {len(fields)}: {record!r}")

    kind, done_str, label, when_str, description = fields
    if done_str not in ("0", "1"):
        raise ValueError(f"done flag must be 0 or 1, got {done_str!r}")
    done = done_str == "1"
    tag = Tag(label) if label else None

    if kind == "T":
        return Todo(description, done=done, tag=tag)
    if kind == "D":
        return Deadline(description, parse_iso_date(when_str), done=done, tag=tag)
    if kind == "E":
        return Event(description, parse_iso_date(when_str), done=done, tag=tag)
    raise ValueError(f"unknown task type {kind!r}")
