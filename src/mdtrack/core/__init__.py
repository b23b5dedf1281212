"""Core types, configuration and errors for mdtrack."""

from .config import Config, SourceSettings, TrackingSettings
from .dates import DayCalendar, to_strftime
from .exceptions import (
    DocumentDateError,
    InvalidDateRangeError,
    InvalidQueryError,
    MDTrackError,
    SourceError,
    SourceFetchError,
    SourceListError,
    UnparseableValueError,
)
from .instrumentation import TracingConfig
from .types import Document, OutputFormat, SearchType

__all__ = [
    "Config",
    "SourceSettings",
    "TrackingSettings",
    "TracingConfig",
    "DayCalendar",
    "to_strftime",
    "MDTrackError",
    "InvalidDateRangeError",
    "UnparseableValueError",
    "DocumentDateError",
    "InvalidQueryError",
    "SourceError",
    "SourceListError",
    "SourceFetchError",
    "Document",
    "SearchType",
    "OutputFormat",
]
