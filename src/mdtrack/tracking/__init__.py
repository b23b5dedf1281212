"""Corpus scan state: per-day contributions and observed date range."""

from mdtrack.tracking.collector import Contribution, ContributionCollector
from mdtrack.tracking.date_range import DateRangeObserver, resolve_date_range

__all__ = [
    "Contribution",
    "ContributionCollector",
    "DateRangeObserver",
    "resolve_date_range",
]
