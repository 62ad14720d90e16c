import re

__all__ = ["find_marker", "join_tokens", "parse_position", "tokenize"]

_INT_RE = re.compile(r"^[+-]?\d+$")


def tokenize(line: str) -> list[str]:
    return line.split()


def join_tokens(tokens: list[str]) -> str:
    return " ".join(tokens).strip()


def parse_position(token: str) -> int:
    """Parse a 1-based list position into a 0-based index.

    Raises ValueError when the token is not an integer. Range is not checked here.
    """
    if not _INT_RE.match(token):
        raise ValueError(f"'{token}' is not a number")
    return int(token) - 1


def find_marker(tokens: list[str], marker: str) -> int:
    """Position of the last token equal to `marker`, or 0 when absent.

    Position 0 is always the command word, so 0 doubles as "not found".
    """
    position = 0
    for i, token in enumerate(tokens):
        if token == marker:
            position = i
    return position
