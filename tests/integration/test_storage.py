from datetime import date

from tick import storage
from tick.core.models import Deadline, Tag, Todo
from tick.tasklist import TaskList


def test_missing_file_is_empty(tmp_path):
    assert storage.load_records(tmp_path / "nope.txt") == []
    assert len(storage.load(tmp_path / "nope.txt")) == 0


def test_empty_file_is_empty(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("")
    assert len(storage.load(path)) == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "data" / "tasks.txt"
    tasks = TaskList(
        [Todo("buy milk", tag=Tag("shop")), Deadline("taxes", date(2024, 4, 15), done=True)]
    )

    assert storage.save(path, tasks) is True
    assert path.read_text() == "T | 0 | shop |  | buy milk\nD | 1 |  | 2024-04-15 | taxes\n"
    assert storage.load(path) == tasks
    assert not (path.parent / "tasks.txt.tmp").exists()


def test_save_empty_list(tmp_path):
    path = tmp_path / "tasks.txt"
    storage.save(path, TaskList())
    assert path.read_text() == ""


def test_load_skips_corrupt_lines(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 |  |  | fine\nnot a task\n\nE | 1 |  | 2024-06-12 | party\n")
    tasks = storage.load(path)
    assert [t.description for t in tasks] == ["fine", "party"]


def test_undecodable_bytes_are_skipped_not_fatal(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"\xff\xfe\x00garbage\nT | 0 |  |  | fine\n")
    assert [t.description for t in storage.load(path)] == ["fine"]


def test_surrogate_escaped_text_round_trips(tmp_path):
    path = tmp_path / "tasks.txt"
    tasks = TaskList([Todo("caf\udce9")])

    assert storage.save(path, tasks) is True
    assert path.read_bytes() == b"T | 0 |  |  | caf\xe9\n"
    assert storage.load(path) == tasks


def test_unencodable_text_fails_cleanly(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 |  |  | keep me\n")

    assert storage.save(path, TaskList([Todo("bad \ud800")])) is False
    assert path.read_text() == "T | 0 |  |  | keep me\n"
    assert not (tmp_path / "tasks.txt.tmp").exists()


def test_save_failure_returns_false(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    assert storage.save(blocker / "tasks.txt", TaskList([Todo("a")])) is False
