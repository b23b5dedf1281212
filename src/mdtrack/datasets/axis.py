"""The shared, gapless daily date axis."""

from __future__ import annotations

import datetime
from typing import Iterator

from mdtrack.core.dates import DayCalendar
from mdtrack.core.exceptions import InvalidDateRangeError


class DateAxis:
    """Immutable sequence of consecutive days, start to end inclusive.

    The ``date -> index`` table is built once so that datasets resolve their
    slots without referring back to a parent collection.
    """

    def __init__(self, days: tuple[datetime.date, ...]) -> None:
        for previous, current in zip(days, days[1:]):
            if (current - previous).days != 1:
                raise InvalidDateRangeError(
                    f"axis is not consecutive at {previous.isoformat()} -> {current.isoformat()}"
                )
        self._days = days
        self._index = {day: i for i, day in enumerate(days)}

    @classmethod
    def between(
        cls,
        start: datetime.date,
        end: datetime.date,
        calendar: DayCalendar | None = None,
    ) -> "DateAxis":
        """Build the axis covering start..end inclusive."""
        if start > end:
            raise InvalidDateRangeError(
                f"start date {start.isoformat()} is after end date {end.isoformat()}"
            )
        calendar = calendar or DayCalendar()
        return cls(tuple(calendar.iter_days(start, end)))

    @property
    def days(self) -> tuple[datetime.date, ...]:
        return self._days

    @property
    def start(self) -> datetime.date:
        return self._days[0]

    @property
    def end(self) -> datetime.date:
        return self._days[-1]

    def index_of(self, day: datetime.date) -> int:
        """Slot index of a day, or -1 if the day is not on the axis."""
        return self._index.get(day, -1)

    def __contains__(self, day: object) -> bool:
        return day in self._index

    def __getitem__(self, index: int) -> datetime.date:
        return self._days[index]

    def __iter__(self) -> Iterator[datetime.date]:
        return iter(self._days)

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        if not self._days:
            return "DateAxis([])"
        return f"DateAxis({self.start.isoformat()}..{self.end.isoformat()}, {len(self)} days)"
