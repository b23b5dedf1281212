"""Type definitions for mdtrack."""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .exceptions import InvalidQueryError


class SearchType(Enum):
    """What a query measures in each document."""

    TAG = "tag"
    FRONTMATTER = "frontmatter"
    WIKI = "wiki"
    TEXT = "text"

    @classmethod
    def parse(cls, name: "str | SearchType") -> "SearchType":
        """Resolve a search type from its value or member name.

        Args:
            name: Value ("tag") or member name ("TAG"), any case.

        Returns:
            Matching SearchType.

        Raises:
            InvalidQueryError: If no search type matches.
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        raise InvalidQueryError(f"Unknown search type: {name!r}")


class OutputFormat(Enum):
    """Output format for dumped series."""

    JSON = "json"
    CSV = "csv"


@dataclass
class Document:
    """A dated markdown document with its parsed side-data.

    Attributes:
        path: Document identity (relative path for filesystem sources).
        date: Calendar day the document belongs to; None if it has no valid date.
        content: Raw document text, read once per scan.
        frontmatter: Parsed YAML frontmatter fields.
        tags: Structured tag list from the frontmatter (nested paths kept).
        links: Outbound wiki link targets, one entry per occurrence.
    """

    path: str
    date: Optional[datetime.date]
    content: str = ""
    frontmatter: dict[str, Any] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.date is not None
