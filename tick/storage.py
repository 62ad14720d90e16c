import logging
from pathlib import Path

from .tasklist import TaskList

__all__ = ["load", "load_records", "save", "save_records"]

logger = logging.getLogger(__name__)

# Undecodable bytes from argv/stdin arrive as lone surrogates; keep them byte-exact on disk.
ENCODING = "utf-8"
ERRORS = "surrogateescape"


def load_records(path: Path) -> list[str]:
    """Lines of the data file; a missing or unreadable file reads as no records."""
    if not path.exists():
        logger.info("no data file at %s, starting empty", path)
        return []
    try:
        return path.read_text(encoding=ENCODING, errors=ERRORS).splitlines()
    except OSError:
        logger.warning("could not read %s, starting empty", path, exc_info=True)
        return []


def save_records(path: Path, records: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    body = "".join(f"{r}\n" for r in records)
    try:
        tmp.write_text(body, encoding=ENCODING, errors=ERRORS)
        tmp.replace(path)
    finally:
        tmp.unlink(missing_ok=True)


def load(path: Path) -> TaskList:
    tasks = TaskList()
    count = tasks.load(load_records(path))
    logger.debug("loaded %d tasks from %s", count, path)
    return tasks


def save(path: Path, tasks: TaskList) -> bool:
    """Write the list to disk. Returns False (and logs) when the write fails."""
    try:
        save_records(path, tasks.export())
    except (OSError, UnicodeError):
        logger.exception("could not save tasks to %s", path)
        return False
    logger.debug("saved %d tasks to %s", len(tasks), path)
    return True
