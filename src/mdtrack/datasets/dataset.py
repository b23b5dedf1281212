"""A single query's time series over the shared date axis."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Iterator

from mdtrack.query.model import Query
from .axis import DateAxis


@dataclass(frozen=True)
class DataPoint:
    """One day of a dataset."""

    date: datetime.date
    value: float | None


@dataclass(frozen=True)
class DatasetSummary:
    """Descriptive statistics over a dataset's non-null values.

    Attributes:
        count: Days with a value.
        total: Sum of values.
        minimum: Smallest value (None if no values).
        maximum: Largest value (None if no values).
        average: Mean value (None if no values).
        max_streak: Longest run of consecutive days with a value.
        max_break: Longest run of consecutive days without a value.
    """

    count: int
    total: float
    minimum: float | None
    maximum: float | None
    average: float | None
    max_streak: int
    max_break: int


class Dataset:
    """Nullable numeric series, one slot per axis day.

    The slot count is fixed at construction. ``y_min``/``y_max`` track the
    range of every non-null value written.
    """

    def __init__(self, axis: DateAxis, query: Query, name: str | None = None) -> None:
        self._axis = axis
        self._query = query
        self._values: list[float | None] = [None] * len(axis)
        self.name = name if name is not None else query.options.name
        self.y_min: float | None = None
        self.y_max: float | None = None

    @property
    def query(self) -> Query:
        return self._query

    @property
    def id(self) -> int:
        return self._query.id

    @property
    def axis(self) -> DateAxis:
        return self._axis

    @property
    def values(self) -> list[float | None]:
        """A copy of the slot values in axis order."""
        return list(self._values)

    @property
    def length(self) -> int:
        return len(self._values)

    @property
    def length_not_null(self) -> int:
        return sum(1 for value in self._values if value is not None)

    def _extend_range(self, value: float) -> None:
        if self.y_min is None or value < self.y_min:
            self.y_min = value
        if self.y_max is None or value > self.y_max:
            self.y_max = value

    def set_value(self, day: datetime.date, value: float | None) -> bool:
        """Write a day's value; days off the axis are ignored.

        Returns:
            True if the day is on the axis and was written.
        """
        index = self._axis.index_of(day)
        if index < 0:
            return False
        self._values[index] = value
        if value is not None:
            self._extend_range(value)
        return True

    def get_value(self, day: datetime.date, offset: int = 0) -> float | None:
        """Value ``offset`` slots away from ``day``, or None if out of range.

        Example:
            yesterday = dataset.get_value(day, -1)
        """
        index = self._axis.index_of(day)
        if index < 0:
            return None
        target = index + offset
        if target < 0 or target >= len(self._values):
            return None
        return self._values[target]

    def accumulate(self) -> None:
        """Replace each slot with the running sum up to and including it.

        Gaps count as zero, so no slot is None afterwards. Not idempotent.
        """
        running = 0.0
        for index, value in enumerate(self._values):
            if value is not None:
                running += value
            self._values[index] = running

        self.y_min = None
        self.y_max = None
        for value in self._values:
            self._extend_range(value)

    def apply_penalty(self, penalty: float) -> None:
        """Substitute ``penalty`` for every empty slot."""
        filled = False
        for index, value in enumerate(self._values):
            if value is None:
                self._values[index] = penalty
                filled = True
        if filled:
            self._extend_range(penalty)

    def points(self) -> Iterator[DataPoint]:
        """Yield ``(date, value)`` points in axis order; restartable."""
        for day, value in zip(self._axis, self._values):
            yield DataPoint(date=day, value=value)

    def summary(self) -> DatasetSummary:
        """Compute descriptive statistics over the current values."""
        present = [value for value in self._values if value is not None]
        max_streak = max_break = streak = gap = 0
        for value in self._values:
            if value is None:
                gap += 1
                streak = 0
            else:
                streak += 1
                gap = 0
            max_streak = max(max_streak, streak)
            max_break = max(max_break, gap)

        total = sum(present)
        return DatasetSummary(
            count=len(present),
            total=total,
            minimum=min(present) if present else None,
            maximum=max(present) if present else None,
            average=total / len(present) if present else None,
            max_streak=max_streak,
            max_break=max_break,
        )

    def __iter__(self) -> Iterator[DataPoint]:
        return self.points()

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"Dataset(name={self.name!r}, query={self._query.type.value}:{self._query.target!r}, "
            f"length={self.length}, not_null={self.length_not_null})"
        )
