import dataclasses
import re
from collections.abc import Callable
from dataclasses import dataclass
from zlib import crc32

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True)
class Theme:
    red: str = "\033[38;5;203m"
    green: str = "\033[38;5;114m"
    yellow: str = "\033[38;5;221m"
    blue: str = "\033[38;5;111m"
    cyan: str = "\033[38;5;117m"
    gray: str = "\033[38;5;245m"
    muted: str = "\033[90m"  # dim gray for secondary text
    bold: str = "\033[1m"
    dim: str = "\033[2m"
    reset: str = "\033[0m"


DEFAULT = Theme()
PLAIN = Theme(**{f.name: "" for f in dataclasses.fields(Theme)})
_active: Theme = DEFAULT


def use(theme: Theme) -> None:
    global _active
    _active = theme


def active() -> Theme:
    return _active


_COLORS = {"red", "green", "yellow", "blue", "cyan", "gray", "muted"}

POOL: list[str] = [
    "\033[38;5;209m",  # coral
    "\033[38;5;185m",  # butter
    "\033[38;5;113m",  # spring
    "\033[38;5;116m",  # seafoam
    "\033[38;5;81m",  # sky
    "\033[38;5;69m",  # cornflower
    "\033[38;5;134m",  # orchid
    "\033[38;5;217m",  # peach
]


def __getattr__(name: str) -> Callable[[str], str]:
    if name in _COLORS:

        def _wrap(text: str) -> str:
            return f"{getattr(_active, name)}{text}{_active.reset}"

        _wrap.__name__ = name
        return _wrap
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def bold(text: str) -> str:
    return f"{_active.bold}{text}{_active.reset}"


def dim(text: str) -> str:
    return f"{_active.dim}{text}{_active.reset}"


def tag_color(label: str) -> str:
    """Stable per-label colour from POOL; empty under the plain theme."""
    if not _active.reset:
        return ""
    return POOL[crc32(label.lower().encode()) % len(POOL)]


def strip(text: str) -> str:
    return _ANSI_RE.sub("", text)
