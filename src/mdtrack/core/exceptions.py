"""Custom exceptions for mdtrack."""


class MDTrackError(Exception):
    """Base exception for all mdtrack errors."""

    pass


class InvalidDateRangeError(MDTrackError):
    """Date axis could not be resolved from the bounds and observed dates."""

    def __init__(self, reason: str = ""):
        """Initialize exception with the failing rule.

        Args:
            reason: Which resolution rule rejected the range.
        """
        self.reason = reason
        message = "Invalid date range"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnparseableValueError(MDTrackError, ValueError):
    """A field, capture group, or segment is not a number."""

    def __init__(self, raw: object):
        self.raw = raw
        super().__init__(f"Not a numeric value: {raw!r}")


class DocumentDateError(MDTrackError):
    """Document date could not be parsed."""

    def __init__(self, text: str, date_format: str):
        self.text = text
        self.date_format = date_format
        super().__init__(f"Cannot parse date {text!r} with format {date_format!r}")


class InvalidQueryError(MDTrackError):
    """Query specification is malformed."""

    pass


class SourceError(MDTrackError):
    """Base exception for document source operations."""

    pass


class SourceListError(SourceError):
    """Failed to list documents from source."""

    def __init__(self, source_uri: str, reason: str):
        self.source_uri = source_uri
        self.reason = reason
        super().__init__(f"Failed to list documents from {source_uri}: {reason}")


class SourceFetchError(SourceError):
    """Failed to fetch document content."""

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Failed to fetch {uri}: {reason}")
