"""mdtrack: daily time series from dated markdown notes."""

from mdtrack.core import (
    Config,
    DayCalendar,
    Document,
    InvalidDateRangeError,
    MDTrackError,
    SearchType,
)
from mdtrack.datasets import DataPoint, Dataset, DatasetCollection, DateAxis
from mdtrack.query import Query, QueryOptions
from mdtrack.services import TrackingResult, TrackingService

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DayCalendar",
    "Document",
    "InvalidDateRangeError",
    "MDTrackError",
    "SearchType",
    "DataPoint",
    "Dataset",
    "DatasetCollection",
    "DateAxis",
    "Query",
    "QueryOptions",
    "TrackingResult",
    "TrackingService",
]
