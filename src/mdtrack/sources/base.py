"""Base protocol and types for document sources.

Sources enumerate dated document references and fetch each document once.
Uses Protocol (structural subtyping) for flexibility: sources don't need to
inherit from a base class, just implement the required methods.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Protocol, runtime_checkable

from mdtrack.core.exceptions import SourceFetchError
from mdtrack.core.types import Document


# =============================================================================
# Data Types
# =============================================================================


@dataclass(frozen=True)
class DocumentReference:
    """Reference to a document from a source.

    A lightweight pointer used to fetch the document later. The date is
    resolved at listing time so that undated documents can be skipped
    without reading them.

    Attributes:
        uri: Canonical URI for this document (e.g., 'file:///vault/2024-01-01.md').
        path: Relative path, used as the document's identity.
        date: Resolved calendar day, or None if the name carries no valid date.
        metadata: Source-specific metadata (size, mtime, etc.).
    """

    uri: str
    path: str
    date: datetime.date | None = None
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)


# =============================================================================
# Protocol Definition
# =============================================================================


@runtime_checkable
class DocumentSource(Protocol):
    """Protocol defining the interface for document sources.

    Example implementation:

        class MyCustomSource:
            def list_documents(self) -> Iterator[DocumentReference]:
                for item in self._get_items():
                    yield DocumentReference(uri=item.uri, path=item.path, date=item.day)

            async def fetch_document(self, ref: DocumentReference) -> Document:
                content = await self._fetch(ref.uri)
                return build_document(ref.path, ref.date, content)
    """

    def list_documents(self) -> Iterator[DocumentReference]:
        """Enumerate all documents available from this source.

        Raises:
            SourceListError: If enumeration fails.
        """
        ...

    async def fetch_document(self, ref: DocumentReference) -> Document:
        """Read a document and parse its side-data.

        Raises:
            SourceFetchError: If fetching fails.
        """
        ...


# =============================================================================
# In-memory Source
# =============================================================================


class InMemorySource:
    """Source over documents that are already parsed.

    Useful for callers that enumerate their corpus themselves, and for tests.

    Example:
        source = InMemorySource([
            Document(path="a.md", date=date(2024, 1, 1), tags=["exercise"]),
        ])
    """

    def __init__(self, documents: Iterable[Document]) -> None:
        self._documents: dict[str, Document] = {}
        for document in documents:
            self._documents[document.path] = document

    def list_documents(self) -> Iterator[DocumentReference]:
        for document in self._documents.values():
            yield DocumentReference(
                uri=f"memory://{document.path}",
                path=document.path,
                date=document.date,
            )

    async def fetch_document(self, ref: DocumentReference) -> Document:
        try:
            return self._documents[ref.path]
        except KeyError:
            raise SourceFetchError(ref.uri, "Document not found") from None
