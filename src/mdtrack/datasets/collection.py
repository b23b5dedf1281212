"""Datasets aligned on one shared date axis."""

from __future__ import annotations

import datetime
from typing import Iterable, Iterator

from loguru import logger

from mdtrack.query.model import Query
from mdtrack.tracking.collector import ContributionCollector
from .axis import DateAxis
from .dataset import Dataset


class DatasetCollection:
    """Owns the date axis and one dataset per query.

    Every dataset has exactly ``len(axis)`` slots.
    """

    def __init__(self, axis: DateAxis) -> None:
        self._axis = axis
        self._datasets: list[Dataset] = []

    @classmethod
    def build(
        cls,
        axis: DateAxis,
        queries: Iterable[Query],
        collector: ContributionCollector,
    ) -> "DatasetCollection":
        """Reshape collected contributions onto the axis.

        For each query and axis day, the contributions of equal queries on
        that day are summed into the day's slot. Days without contributions
        stay None.
        """
        collection = cls(axis)
        for query in queries:
            dataset = collection.create_dataset(query)
            for day in axis:
                contributions = collector.contributions_for(day, query)
                if contributions:
                    dataset.set_value(day, sum(c.value for c in contributions))
            logger.debug(
                f"Reshaped {query.type.value}:{query.target!r}: "
                f"{dataset.length_not_null}/{dataset.length} days with data"
            )
        return collection

    def create_dataset(self, query: Query, name: str | None = None) -> Dataset:
        """Create an empty (all-None) dataset for a query and register it."""
        dataset = Dataset(self._axis, query, name=name)
        self._datasets.append(dataset)
        return dataset

    @property
    def axis(self) -> DateAxis:
        return self._axis

    @property
    def dates(self) -> tuple[datetime.date, ...]:
        return self._axis.days

    @property
    def datasets(self) -> list[Dataset]:
        return list(self._datasets)

    @property
    def names(self) -> list[str]:
        return [dataset.name for dataset in self._datasets]

    def index_of(self, day: datetime.date) -> int:
        return self._axis.index_of(day)

    def get_dataset_by_query(self, query: Query) -> Dataset | None:
        """First dataset whose query measures the same thing as ``query``."""
        for dataset in self._datasets:
            if dataset.query.equal_to(query):
                return dataset
        return None

    def get_dataset_by_id(self, id: int) -> Dataset | None:
        for dataset in self._datasets:
            if dataset.id == id:
                return dataset
        return None

    def __iter__(self) -> Iterator[Dataset]:
        return iter(self._datasets)

    def __len__(self) -> int:
        return len(self._datasets)
