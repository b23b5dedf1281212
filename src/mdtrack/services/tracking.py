"""Tracking service: one scan over the corpus into aligned datasets.

The service drives the scan, feeding each document to the contribution
collector and the date range observer, then resolves the axis, reshapes the
contributions, and applies the per-query transforms.
"""

from __future__ import annotations

import datetime
import time
from dataclasses import dataclass, field
from typing import Sequence

from loguru import logger

from mdtrack.core.config import TrackingSettings
from mdtrack.core.dates import DayCalendar
from mdtrack.core.exceptions import SourceFetchError
from mdtrack.core.instrumentation import traced_request
from mdtrack.datasets import DateAxis, DatasetCollection
from mdtrack.query.model import Query
from mdtrack.sources.base import DocumentSource
from mdtrack.tracking import ContributionCollector, DateRangeObserver


# =============================================================================
# Result Types
# =============================================================================


@dataclass
class ScanResult:
    """State gathered by one pass over the corpus.

    Attributes:
        collector: Per-day contributions.
        observer: Earliest and latest valid document dates.
        documents_scanned: Documents read and evaluated.
        documents_skipped: Documents without a valid date.
        errors: List of (path, error_message) for documents that failed to load.
    """

    collector: ContributionCollector
    observer: DateRangeObserver
    documents_scanned: int = 0
    documents_skipped: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class TrackingResult:
    """Aligned datasets plus scan statistics."""

    datasets: DatasetCollection
    documents_scanned: int
    documents_skipped: int
    errors: list[tuple[str, str]] = field(default_factory=list)
    duration_ms: int = 0


# =============================================================================
# Tracking Service
# =============================================================================


class TrackingService:
    """Turns a document source and a list of queries into aligned datasets.

    Responsibilities:
    - Enumerate document references and skip undated ones.
    - Fetch each document once and run every query against that snapshot.
    - Track the observed date range.
    - Resolve the axis, reshape, and apply penalty then accumulation.

    Example:
        service = TrackingService(source, calendar=DayCalendar("YYYY-MM-DD"))
        result = await service.track([Query.create(0, "tag", "exercise")])
        for dataset in result.datasets:
            print(dataset.name, dataset.values)
    """

    def __init__(
        self,
        source: DocumentSource,
        calendar: DayCalendar | None = None,
        settings: TrackingSettings | None = None,
    ) -> None:
        self._source = source
        self._calendar = calendar or DayCalendar()
        self._settings = settings or TrackingSettings()

    @property
    def calendar(self) -> DayCalendar:
        return self._calendar

    async def scan(self, queries: Sequence[Query]) -> ScanResult:
        """Run every query against every dated document, in order.

        Fetch failures are recorded and the document is skipped.

        Raises:
            SourceListError: If the source cannot enumerate documents.
        """
        result = ScanResult(
            collector=ContributionCollector(self._settings.text_match_limit),
            observer=DateRangeObserver(),
        )

        for ref in self._source.list_documents():
            if ref.date is None:
                logger.debug(f"Skipping undated document: {ref.path}")
                result.documents_skipped += 1
                continue

            try:
                document = await self._source.fetch_document(ref)
            except SourceFetchError as e:
                result.errors.append((ref.path, str(e)))
                logger.warning(f"Failed to fetch document: {ref.path}: {e}")
                continue

            if document.date is None:
                logger.debug(f"Skipping undated document: {ref.path}")
                result.documents_skipped += 1
                continue

            result.observer.observe(document.date)
            result.collector.collect(document, queries)
            result.documents_scanned += 1

        logger.debug(
            f"Scanned {result.documents_scanned} documents, "
            f"skipped {result.documents_skipped}, {len(result.errors)} errors"
        )
        return result

    async def track(
        self,
        queries: Sequence[Query],
        start: datetime.date | None = None,
        end: datetime.date | None = None,
    ) -> TrackingResult:
        """Scan the corpus and build the aligned dataset collection.

        Args:
            queries: Measurements to take; each yields one dataset.
            start: Optional first day of the axis.
            end: Optional last day of the axis.

        Returns:
            TrackingResult with the dataset collection.

        Raises:
            InvalidDateRangeError: If the axis cannot be resolved.
            SourceListError: If the source cannot enumerate documents.
        """
        started = time.perf_counter()
        with traced_request(
            "track",
            attributes={
                "mdtrack.queries": len(queries),
                "mdtrack.start": start.isoformat() if start else None,
                "mdtrack.end": end.isoformat() if end else None,
            },
        ) as span:
            scan = await self.scan(queries)
            axis_start, axis_end = scan.observer.resolve(start, end)
            axis = DateAxis.between(axis_start, axis_end, self._calendar)

            datasets = DatasetCollection.build(axis, queries, scan.collector)
            for dataset in datasets:
                options = dataset.query.options
                if options.penalty is not None:
                    dataset.apply_penalty(options.penalty)
                if options.accumulate:
                    dataset.accumulate()

            if span is not None:
                span.set_attribute("mdtrack.documents_scanned", scan.documents_scanned)
                span.set_attribute("mdtrack.axis_length", len(axis))

        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            f"Tracked {len(queries)} queries over {len(axis)} days "
            f"({self._calendar.format(axis.start)}..{self._calendar.format(axis.end)}) "
            f"from {scan.documents_scanned} documents in {duration_ms}ms"
        )
        return TrackingResult(
            datasets=datasets,
            documents_scanned=scan.documents_scanned,
            documents_skipped=scan.documents_skipped,
            errors=scan.errors,
            duration_ms=duration_ms,
        )
