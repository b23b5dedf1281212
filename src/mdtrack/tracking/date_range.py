"""Resolution of the daily date axis from bounds and observed dates."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from mdtrack.core.exceptions import InvalidDateRangeError


@dataclass
class DateRangeObserver:
    """Tracks the earliest and latest valid document date seen during a scan."""

    min_date: datetime.date | None = None
    max_date: datetime.date | None = None
    count: int = 0

    def observe(self, day: datetime.date | None) -> None:
        if day is None:
            return
        self.count += 1
        if self.min_date is None or day < self.min_date:
            self.min_date = day
        if self.max_date is None or day > self.max_date:
            self.max_date = day

    def resolve(
        self,
        start: datetime.date | None = None,
        end: datetime.date | None = None,
    ) -> tuple[datetime.date, datetime.date]:
        """Resolve the axis bounds against what this observer has seen."""
        return resolve_date_range(start, end, self.min_date, self.max_date)


def resolve_date_range(
    start: datetime.date | None,
    end: datetime.date | None,
    min_date: datetime.date | None,
    max_date: datetime.date | None,
) -> tuple[datetime.date, datetime.date]:
    """Pick the inclusive ``(start, end)`` axis bounds.

    Rules, first match wins:

    1. No dated documents: fail.
    2. No bounds: the observed range.
    3. Only ``start``: ``(start, max_date)`` if ``start < max_date``, else fail.
    4. Only ``end``: ``(min_date, end)`` if ``end > min_date``, else fail.
    5. Both: fail if the interval lies wholly before ``min_date`` or wholly
       after ``max_date``; otherwise the bounds as given, even when they only
       partially overlap the data.

    Raises:
        InvalidDateRangeError: When a rule rejects the range.
    """
    if min_date is None or max_date is None:
        raise InvalidDateRangeError("no documents with a valid date")

    if start is None and end is None:
        return min_date, max_date

    if end is None:
        if start < max_date:
            return start, max_date
        raise InvalidDateRangeError(
            f"start date {start.isoformat()} is not before the last document "
            f"date {max_date.isoformat()}"
        )

    if start is None:
        if end > min_date:
            return min_date, end
        raise InvalidDateRangeError(
            f"end date {end.isoformat()} is not after the first document "
            f"date {min_date.isoformat()}"
        )

    if start > end:
        raise InvalidDateRangeError(
            f"start date {start.isoformat()} is after end date {end.isoformat()}"
        )
    if (start < min_date and end < min_date) or (start > max_date and end > max_date):
        raise InvalidDateRangeError(
            f"{start.isoformat()}..{end.isoformat()} does not overlap documents "
            f"dated {min_date.isoformat()}..{max_date.isoformat()}"
        )
    return start, end
