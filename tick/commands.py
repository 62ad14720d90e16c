import dataclasses
import logging

from .core.models import Tag, Task
from .lib import ansi
from .lib.format import format_status, format_tag, format_task, format_tasks
from .tasklist import TaskList

__all__ = [
    "AddCommand",
    "Command",
    "DeleteCommand",
    "DoneCommand",
    "EmptyCommand",
    "EndCommand",
    "FindCommand",
    "ListCommand",
    "TagCommand",
]

logger = logging.getLogger(__name__)

FAREWELL = "bye for now, see you next time"


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


@dataclasses.dataclass(frozen=True)
class AddCommand:
    task: Task

    def execute(self, tasks: TaskList) -> str:
        position = tasks.add(self.task)
        logger.debug("added task %d: %r", position, self.task)
        return "\n".join(
            [
                format_status("+", format_task(self.task)),
                ansi.muted(f"{_count(len(tasks))} in the list"),
            ]
        )


@dataclasses.dataclass(frozen=True)
class DoneCommand:
    index: int

    def execute(self, tasks: TaskList) -> str:
        was_done = tasks[self.index].done
        task = tasks.mark_done(self.index)
        if was_done:
            return format_status(ansi.green("✓"), f"already done: {task.description}")
        return format_status(ansi.green("✓"), format_task(task, self.index + 1))


@dataclasses.dataclass(frozen=True)
class DeleteCommand:
    index: int

    def execute(self, tasks: TaskList) -> str:
        task = tasks.remove(self.index)
        logger.debug("removed task %d: %r", self.index + 1, task)
        return "\n".join(
            [
                format_status("-", format_task(task)),
                ansi.muted(f"{_count(len(tasks))} left in the list"),
            ]
        )


@dataclasses.dataclass(frozen=True)
class FindCommand:
    term: str

    def execute(self, tasks: TaskList) -> str:
        matches = tasks.find(self.term)
        if not matches:
            return f"no tasks matching '{self.term}'"
        positions = [p for p, _ in matches]
        found = [t for _, t in matches]
        return "\n".join([f"tasks matching '{self.term}':", *format_tasks(found, positions)])


@dataclasses.dataclass(frozen=True)
class TagCommand:
    index: int
    tag: Tag

    def execute(self, tasks: TaskList) -> str:
        task = tasks.set_tag(self.index, self.tag)
        return format_status(format_tag(self.tag.label), format_task(task, self.index + 1))


@dataclasses.dataclass(frozen=True)
class ListCommand:
    def execute(self, tasks: TaskList) -> str:
        if not len(tasks):
            return "no tasks yet"
        return "\n".join(["your tasks:", *format_tasks(list(tasks))])


@dataclasses.dataclass(frozen=True)
class EndCommand:
    def execute(self, tasks: TaskList) -> str:
        return FAREWELL


@dataclasses.dataclass(frozen=True)
class EmptyCommand:
    message: str = ""

    def execute(self, tasks: TaskList) -> str:
        return self.message


Command = (
    AddCommand
    | DoneCommand
    | DeleteCommand
    | FindCommand
    | TagCommand
    | ListCommand
    | EndCommand
    | EmptyCommand
)
