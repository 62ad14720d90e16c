import dataclasses
from datetime import date

import pytest

from tick.core.errors import ValidationError
from tick.core.models import Deadline, Event, Tag, Todo


@pytest.mark.parametrize("description", ["", "   ", "\t"])
def test_description_required(description):
    with pytest.raises(ValidationError):
        Todo(description)
    with pytest.raises(ValidationError):
        Deadline(description, date(2024, 1, 1))
    with pytest.raises(ValidationError):
        Event(description, date(2024, 1, 1))


def test_defaults():
    task = Todo("buy milk")
    assert task.done is False
    assert task.tag is None


def test_tasks_are_frozen():
    task = Todo("buy milk")
    with pytest.raises(dataclasses.FrozenInstanceError):
        task.done = True  # type: ignore[misc]


@pytest.mark.parametrize("label", ["", "  ", "two words"])
def test_tag_label_is_one_word(label):
    with pytest.raises(ValidationError):
        Tag(label)


def test_variants_compare_by_type():
    assert Deadline("x", date(2024, 1, 1)) != Event("x", date(2024, 1, 1))
