"""Accumulates per-day contributions across the corpus."""

from __future__ import annotations

import datetime
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from mdtrack.core.types import Document
from mdtrack.extraction.extractors import TEXT_MATCH_LIMIT, extract
from mdtrack.query.model import Query


@dataclass(frozen=True)
class Contribution:
    """One document's numeric evidence for one query."""

    query: Query
    value: float


class ContributionCollector:
    """Maps each calendar day to the contributions observed on it.

    Contributions are appended in scan order; several documents may land on
    the same day. The map is append-only while scanning.
    """

    def __init__(self, text_match_limit: int = TEXT_MATCH_LIMIT) -> None:
        self._by_day: dict[datetime.date, list[Contribution]] = defaultdict(list)
        self._text_match_limit = text_match_limit

    def add(self, day: datetime.date, query: Query, value: float | None) -> None:
        """Record a contribution; None values are not stored."""
        if value is None:
            return
        self._by_day[day].append(Contribution(query=query, value=value))

    def collect(self, document: Document, queries: Iterable[Query]) -> int:
        """Run every query against one document.

        Queries equal to one already evaluated for the document are skipped,
        so duplicates share a single contribution.

        Returns:
            Number of contributions recorded for the document.
        """
        if document.date is None:
            return 0

        recorded = 0
        evaluated: list[Query] = []
        for query in queries:
            if any(query.equal_to(seen) for seen in evaluated):
                continue
            evaluated.append(query)
            value = extract(document, query, text_match_limit=self._text_match_limit)
            if value is not None:
                self.add(document.date, query, value)
                recorded += 1
        return recorded

    def contributions_for(self, day: datetime.date, query: Query) -> list[Contribution]:
        """Contributions on one day whose query measures the same thing as ``query``."""
        return [c for c in self._by_day.get(day, ()) if c.query.equal_to(query)]

    @property
    def by_day(self) -> Mapping[datetime.date, tuple[Contribution, ...]]:
        """Read-only snapshot of the day-to-contributions map."""
        return MappingProxyType({day: tuple(items) for day, items in self._by_day.items()})

    def days(self) -> list[datetime.date]:
        """Days with at least one contribution, in calendar order."""
        return sorted(self._by_day)

    def __len__(self) -> int:
        return sum(len(items) for items in self._by_day.values())
