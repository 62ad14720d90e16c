import dataclasses
import logging
from collections.abc import Iterable, Iterator

from .core.errors import OutOfRangeError, ValidationError
from .core.models import Tag, Task
from .lib.converters import record_to_task, task_to_record

__all__ = ["TaskList"]

logger = logging.getLogger(__name__)


class TaskList:
    """Ordered, mutable collection of tasks. Indices are 0-based; messages use 1-based positions."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise OutOfRangeError(index + 1, len(self._tasks))

    def add(self, task: Task) -> int:
        """Append a task; returns its 1-based position."""
        self._tasks.append(task)
        return len(self._tasks)

    def mark_done(self, index: int) -> Task:
        self._check(index)
        task = self._tasks[index]
        if not task.done:
            task = dataclasses.replace(task, done=True)
            self._tasks[index] = task
        return task

    def set_tag(self, index: int, tag: Tag) -> Task:
        self._check(index)
        task = dataclasses.replace(self._tasks[index], tag=tag)
        self._tasks[index] = task
        return task

    def remove(self, index: int) -> Task:
        self._check(index)
        return self._tasks.pop(index)

    def find(self, term: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring match over descriptions, in list order.

        Returns (1-based position, task) pairs.
        """
        return [(i, t) for i, t in enumerate(self._tasks, start=1) if term in t.description]

    def export(self) -> list[str]:
        return [task_to_record(t) for t in self._tasks]

    def load(self, records: Iterable[str]) -> int:
        """Append tasks parsed from storage records; malformed records are skipped.

        Returns the number of tasks loaded.
        """
        loaded = 0
        for lineno, record in enumerate(records, start=1):
            if not record.strip():
                continue
            try:
                task = record_to_task(record)
            except (ValueError, ValidationError) as e:
                logger.warning("skipping record %d: %s", lineno, e)
                continue
            self._tasks.append(task)
            loaded += 1
        return loaded
