"""Document sources for mdtrack.

A source lists dated document references and fetches each document once,
returning a parsed Document (content, frontmatter, tags, links).

FileSystemSource
----------------
Reads markdown notes whose file names carry their date:

    config = FileSystemConfig(base_path=Path("vault/Journal"), date_prefix="Daily ")
    source = FileSystemSource(config, calendar=DayCalendar("YYYY-MM-DD"))

InMemorySource
--------------
Wraps already-parsed documents:

    source = InMemorySource([Document(path="a.md", date=date(2024, 1, 1))])
"""

from mdtrack.core.exceptions import SourceError, SourceFetchError, SourceListError

from .base import DocumentReference, DocumentSource, InMemorySource
from .filesystem import FileSystemConfig, FileSystemSource, build_document
from .glob_matcher import MultiGlobMatcher, parse_glob_patterns

__all__ = [
    "DocumentReference",
    "DocumentSource",
    "InMemorySource",
    "FileSystemConfig",
    "FileSystemSource",
    "build_document",
    "MultiGlobMatcher",
    "parse_glob_patterns",
    "SourceError",
    "SourceFetchError",
    "SourceListError",
]
