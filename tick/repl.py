import dataclasses
import logging
from collections.abc import Callable
from pathlib import Path

from fncli import UsageError, cli

from . import config, storage
from .commands import EndCommand
from .core.errors import TickError
from .lib.errors import echo, exit_error
from .parser import KEYWORDS, interpret, parse
from .tasklist import TaskList

__all__ = ["Reply", "execute_line", "run", "session"]

logger = logging.getLogger(__name__)

GREETING = f"tick here. what needs doing? ({', '.join(KEYWORDS)})"
PROMPT = "> "

Reader = Callable[[str], str]
Writer = Callable[[str], None]


@dataclasses.dataclass(frozen=True)
class Reply:
    text: str
    stop: bool = False


def execute_line(line: str, tasks: TaskList) -> Reply:
    """Interpret and execute one line. Errors come back as the reply text."""
    command = interpret(line)
    try:
        text = command.execute(tasks)
    except TickError as e:
        logger.debug("%s failed: %s", type(command).__name__, e)
        return Reply(str(e))
    return Reply(text, stop=isinstance(command, EndCommand))


def run(tasks: TaskList, read: Reader = input, write: Writer = print) -> None:
    """Read lines until `bye` or end of input, writing each reply. Does not persist."""
    write(GREETING)
    while True:
        try:
            line = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            logger.info("input closed, exiting")
            break
        reply = execute_line(line, tasks)
        if reply.text:
            write(reply.text)
        if reply.stop:
            break


def session(path: Path | None = None, read: Reader = input, write: Writer = print) -> int:
    """Load the saved list, run the loop, save on the way out."""
    path = path if path else config.get_data_path()
    tasks = storage.load(path)
    run(tasks, read, write)
    if not storage.save(path, tasks):
        exit_error(f"could not save tasks to {path}")
    return 0


@cli("tick", name="ls")
def ls() -> None:
    """Show saved tasks"""
    tasks = storage.load(config.get_data_path())
    echo(execute_line("list", tasks).text)


@cli("tick", name="do")
def do(line: list[str]) -> None:
    """Run one command, e.g. tick do todo buy milk"""
    text = " ".join(line) if line else ""
    if not text.strip():
        raise UsageError("Usage: tick do <command>")
    path = config.get_data_path()
    tasks = storage.load(path)
    reply = parse(text).execute(tasks)
    if not storage.save(path, tasks):
        exit_error(f"could not save tasks to {path}")
    if reply:
        echo(reply)


@cli("tick", name="path")
def path_cmd() -> None:
    """Show the data file location"""
    echo(str(config.get_data_path()))
