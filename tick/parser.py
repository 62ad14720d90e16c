"""Turns one line of user input into a Command.

parse() raises a ParseError subclass for anything it cannot interpret.
interpret() is the boundary the run loop uses: errors come back as an
EmptyCommand carrying the message.
"""

import logging
from collections.abc import Callable
from datetime import date

from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    DoneCommand,
    EmptyCommand,
    EndCommand,
    FindCommand,
    ListCommand,
    TagCommand,
)
from .core.errors import (
    InvalidFormatError,
    MissingArgumentError,
    ParseError,
    UnknownCommandError,
)
from .core.models import Deadline, Event, Tag, Todo
from .lib.dates import parse_iso_date
from .lib.parsing import find_marker, join_tokens, parse_position, tokenize

__all__ = ["KEYWORDS", "interpret", "parse"]

logger = logging.getLogger(__name__)

Handler = Callable[[list[str]], Command]


def _index(tokens: list[str], verb: str) -> int:
    if len(tokens) < 2:
        raise MissingArgumentError(
            f"which task should I {verb}? give its number, e.g. '{tokens[0]} 2'"
        )
    try:
        return parse_position(tokens[1])
    except ValueError as e:
        raise InvalidFormatError(f"the task number has to be a number, not '{tokens[1]}'") from e


def _end(tokens: list[str]) -> Command:
    return EndCommand()


def _list(tokens: list[str]) -> Command:
    return ListCommand()


def _done(tokens: list[str]) -> Command:
    return DoneCommand(_index(tokens, "mark as done"))


def _delete(tokens: list[str]) -> Command:
    return DeleteCommand(_index(tokens, "delete"))


def _find(tokens: list[str]) -> Command:
    if len(tokens) < 2:
        raise MissingArgumentError("what should I look for? e.g. 'find milk'")
    return FindCommand(join_tokens(tokens[1:]))


def _tag(tokens: list[str]) -> Command:
    index = _index(tokens, "tag")
    if len(tokens) < 3:
        raise MissingArgumentError(f"which tag? e.g. 'tag {tokens[1]} errands'")
    return TagCommand(index, Tag(tokens[2]))


def _todo(tokens: list[str]) -> Command:
    if len(tokens) < 2:
        raise MissingArgumentError("a todo needs a description, e.g. 'todo buy milk'")
    return AddCommand(Todo(join_tokens(tokens[1:])))


def _dated(tokens: list[str], marker: str) -> tuple[str, str]:
    kind = tokens[0].lower()
    position = find_marker(tokens, marker)
    if position == 0:
        raise MissingArgumentError(f"missing '{marker}', e.g. '{kind} report {marker} 2024-01-31'")
    if position == 1:
        raise MissingArgumentError(f"this {kind} needs a description before '{marker}'")
    when = join_tokens(tokens[position + 1 :])
    if not when:
        raise MissingArgumentError(f"this {kind} needs a date after '{marker}'")
    return join_tokens(tokens[1:position]), when


def _date(text: str) -> date:
    try:
        return parse_iso_date(text)
    except ValueError as e:
        raise InvalidFormatError(f"can't make out the date '{text}', use YYYY-MM-DD") from e


def _deadline(tokens: list[str]) -> Command:
    description, when = _dated(tokens, "/by")
    return AddCommand(Deadline(description, _date(when)))


def _event(tokens: list[str]) -> Command:
    description, when = _dated(tokens, "/at")
    return AddCommand(Event(description, _date(when)))


_HANDLERS: dict[str, Handler] = {
    "bye": _end,
    "list": _list,
    "done": _done,
    "delete": _delete,
    "find": _find,
    "tag": _tag,
    "todo": _todo,
    "deadline": _deadline,
    "event": _event,
}

KEYWORDS = tuple(_HANDLERS)


def parse(line: str) -> Command:
    tokens = tokenize(line)
    if not tokens:
        return EmptyCommand()
    handler = _HANDLERS.get(tokens[0].lower())
    if handler is None:
        raise UnknownCommandError(tokens[0])
    return handler(tokens)


def interpret(line: str) -> Command:
    try:
        return parse(line)
    except UnknownCommandError as e:
        logger.debug("unknown command: %r", line)
        return EmptyCommand(f"{e} (try: {', '.join(KEYWORDS)})")
    except ParseError as e:
        logger.debug("parse failed for %r: %s", line, e)
        return EmptyCommand(str(e))
