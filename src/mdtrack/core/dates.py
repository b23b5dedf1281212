"""Day arithmetic and date-format handling.

A DayCalendar is created once per run from configuration and handed to the
components that need to parse, format, or step through calendar days.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterator

from .exceptions import DocumentDateError

# Moment-style tokens, longest first so "MMMM" wins over "MM".
_TOKENS: tuple[tuple[str, str], ...] = (
    ("YYYY", "%Y"),
    ("MMMM", "%B"),
    ("MMM", "%b"),
    ("YY", "%y"),
    ("MM", "%m"),
    ("DD", "%d"),
    ("M", "%m"),
    ("D", "%d"),
)

_TOKEN_PATTERN = re.compile("|".join(token for token, _ in _TOKENS))
_TOKEN_MAP = dict(_TOKENS)

# Tokens without zero padding, which strftime cannot express portably
_UNPADDED = {"M": lambda day: str(day.month), "D": lambda day: str(day.day)}


def to_strftime(date_format: str) -> str:
    """Translate a moment-style date format to a strftime format.

    Formats that already contain ``%`` directives are returned unchanged.

    Example:
        >>> to_strftime("YYYY-MM-DD")
        '%Y-%m-%d'
    """
    if "%" in date_format:
        return date_format
    return _TOKEN_PATTERN.sub(lambda m: _TOKEN_MAP[m.group()], date_format)


def format_day(day: date, date_format: str) -> str:
    """Format a day with a moment-style or strftime format.

    Example:
        >>> format_day(date(2024, 1, 5), "YYYY-M-D")
        '2024-1-5'
    """
    if "%" in date_format:
        return day.strftime(date_format)

    def render(match: re.Match[str]) -> str:
        token = match.group()
        if token in _UNPADDED:
            return _UNPADDED[token](day)
        return day.strftime(_TOKEN_MAP[token])

    return _TOKEN_PATTERN.sub(render, date_format)


@dataclass(frozen=True)
class DayCalendar:
    """Calendar utility bound to one date format.

    Attributes:
        date_format: Moment-style (``YYYY-MM-DD``) or strftime (``%Y-%m-%d``)
            format used for document names and output.
    """

    date_format: str = "YYYY-MM-DD"
    _strftime: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_strftime", to_strftime(self.date_format))

    def parse_strict(self, text: str) -> date:
        """Parse text as a day, requiring an exact round-trip.

        Raises:
            DocumentDateError: If the text does not match the format exactly.
        """
        try:
            parsed = datetime.strptime(text, self._strftime).date()
        except ValueError:
            raise DocumentDateError(text, self.date_format) from None
        # strptime accepts unpadded numbers; the format must reproduce the text
        if self.format(parsed) != text:
            raise DocumentDateError(text, self.date_format)
        return parsed

    def parse(self, text: str) -> date | None:
        """Parse text as a day, returning None when it is not a valid date."""
        try:
            return self.parse_strict(text)
        except DocumentDateError:
            return None

    def format(self, day: date) -> str:
        """Format a day with this calendar's format."""
        return format_day(day, self.date_format)

    @staticmethod
    def days_between(start: date, end: date) -> int:
        """Number of days from start to end (negative if end is earlier)."""
        return (end - start).days

    @staticmethod
    def add_days(day: date, days: int) -> date:
        """Shift a day by a number of days."""
        return day + timedelta(days=days)

    def iter_days(self, start: date, end: date) -> Iterator[date]:
        """Yield every day from start to end inclusive."""
        for offset in range(self.days_between(start, end) + 1):
            yield self.add_days(start, offset)
