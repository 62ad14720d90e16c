import dataclasses
from datetime import date

from .errors import ValidationError


def _require_description(description: str) -> None:
    if not description or not description.strip():
        raise ValidationError("description cannot be empty")


@dataclasses.dataclass(frozen=True)
class Tag:
    label: str

    def __post_init__(self) -> None:
        if not self.label or not self.label.strip():
            raise ValidationError("tag label cannot be empty")
        if len(self.label.split()) > 1:
            raise ValidationError(f"tag label must be one word, got '{self.label}'")


@dataclasses.dataclass(frozen=True)
class Todo:
    description: str
    done: bool = False
    tag: Tag | None = None

    def __post_init__(self) -> None:
        _require_description(self.description)


@dataclasses.dataclass(frozen=True)
class Deadline:
    description: str
    by: date
    done: bool = False
    tag: Tag | None = None

    def __post_init__(self) -> None:
        _require_description(self.description)


@dataclasses.dataclass(frozen=True)
class Event:
    description: str
    at: date
    done: bool = False
    tag: Tag | None = None

    def __post_init__(self) -> None:
        _require_description(self.description)


Task = Todo | Deadline | Event
