import re
from datetime import date

from dateutil.parser import isoparser

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_isoparser = isoparser()

DISPLAY_FORMAT = "%b %d %Y"


def parse_iso_date(text: str) -> date:
    """Parse a calendar date written as YYYY-MM-DD.

    Raises ValueError for anything else, including relative words like 'tomorrow'.
    """
    text = text.strip()
    if not _ISO_DATE_RE.match(text):
        raise ValueError(f"Invalid date '{text}' — use YYYY-MM-DD")
    try:
        return _isoparser.parse_isodate(text)
    except ValueError as e:
        raise ValueError(f"Invalid date '{text}' — {e}") from e


def format_date(d: date) -> str:
    return d.strftime(DISPLAY_FORMAT)
