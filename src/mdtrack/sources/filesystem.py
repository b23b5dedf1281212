"""Filesystem document source.

Reads markdown notes from a directory. Each note's day comes from its file
name, e.g. ``Journal/2024-01-15.md`` or ``Daily 2024-01-15 notes.md`` with a
prefix and suffix configured.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from loguru import logger

from mdtrack.core.config import SourceSettings
from mdtrack.core.dates import DayCalendar
from mdtrack.core.exceptions import SourceFetchError, SourceListError
from mdtrack.core.types import Document
from mdtrack.extraction.parsing import (
    extract_tags_from_field,
    extract_wiki_links,
    parse_frontmatter,
)
from .base import DocumentReference
from .glob_matcher import MultiGlobMatcher, parse_glob_patterns


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class FileSystemConfig:
    """Configuration for filesystem source.

    Attributes:
        base_path: Root directory to scan for documents.
        glob_patterns: Patterns for matching files (default: ['**/*.md']).
            Use ! prefix for exclusion patterns.
        date_prefix: Text stripped from the start of the file stem before parsing.
        date_suffix: Text stripped from the end of the file stem before parsing.
        encoding: File encoding to use (default: 'utf-8').
    """

    base_path: Path
    glob_patterns: list[str] = field(default_factory=lambda: ["**/*.md"])
    date_prefix: str = ""
    date_suffix: str = ""
    encoding: str = "utf-8"

    @classmethod
    def from_settings(cls, base_path: Path | str, settings: SourceSettings) -> "FileSystemConfig":
        """Create FileSystemConfig from application source settings."""
        return cls(
            base_path=Path(base_path),
            glob_patterns=parse_glob_patterns(settings.glob_patterns),
            date_prefix=settings.date_prefix,
            date_suffix=settings.date_suffix,
            encoding=settings.encoding,
        )


def build_document(path: str, date: datetime.date | None, content: str) -> Document:
    """Parse markdown content into a Document with its side-data."""
    frontmatter = parse_frontmatter(content)
    return Document(
        path=path,
        date=date,
        content=content,
        frontmatter=frontmatter.data,
        tags=extract_tags_from_field(frontmatter.data.get("tags")),
        links=extract_wiki_links(frontmatter.content),
    )


# =============================================================================
# Source Implementation
# =============================================================================


class FileSystemSource:
    """Document source for a local directory of dated notes.

    Example:
        source = FileSystemSource(
            FileSystemConfig(base_path=Path("~/vault/Journal").expanduser()),
            calendar=DayCalendar("YYYY-MM-DD"),
        )
        for ref in source.list_documents():
            document = await source.fetch_document(ref)
    """

    def __init__(self, config: FileSystemConfig, calendar: DayCalendar | None = None) -> None:
        self._config = config
        self._base_path = config.base_path.expanduser().resolve()
        self._calendar = calendar or DayCalendar()
        self._matcher = MultiGlobMatcher(config.glob_patterns)

    @property
    def base_path(self) -> Path:
        """Get the resolved base path."""
        return self._base_path

    @property
    def calendar(self) -> DayCalendar:
        return self._calendar

    def resolve_date(self, file_path: Path) -> datetime.date | None:
        """Resolve a file's day from its stem, or None if it is not a dated note."""
        stem = file_path.stem
        prefix = self._config.date_prefix
        suffix = self._config.date_suffix
        if prefix and stem.startswith(prefix):
            stem = stem[len(prefix) :]
        if suffix and stem.endswith(suffix):
            stem = stem[: len(stem) - len(suffix)]
        return self._calendar.parse(stem)

    def list_documents(self) -> Iterator[DocumentReference]:
        """Enumerate all files matching the glob patterns.

        Yields:
            DocumentReference for each matching file; undated files carry date=None.

        Raises:
            SourceListError: If the base path doesn't exist or can't be read.
        """
        if not self._base_path.exists():
            raise SourceListError(
                str(self._base_path),
                f"Directory does not exist: {self._base_path}",
            )
        if not self._base_path.is_dir():
            raise SourceListError(
                str(self._base_path),
                f"Path is not a directory: {self._base_path}",
            )

        logger.debug(
            f"Listing documents: base={self._base_path}, patterns={self._config.glob_patterns}"
        )

        try:
            for file_path in self._matcher.list_matching_files(self._base_path):
                yield DocumentReference(
                    uri=file_path.as_uri(),
                    path=file_path.relative_to(self._base_path).as_posix(),
                    date=self.resolve_date(file_path),
                )
        except PermissionError as e:
            raise SourceListError(str(self._base_path), f"Permission denied: {e}")
        except OSError as e:
            raise SourceListError(str(self._base_path), str(e))

    async def fetch_document(self, ref: DocumentReference) -> Document:
        """Read and parse one file.

        Raises:
            SourceFetchError: If the file can't be read.
        """
        file_path = self._base_path / ref.path

        if not file_path.is_file():
            raise SourceFetchError(ref.uri, "File not found")

        try:
            content = file_path.read_text(encoding=self._config.encoding)
        except UnicodeDecodeError as e:
            raise SourceFetchError(ref.uri, f"Encoding error ({self._config.encoding}): {e}")
        except OSError as e:
            raise SourceFetchError(ref.uri, str(e))

        return build_document(ref.path, ref.date, content)
