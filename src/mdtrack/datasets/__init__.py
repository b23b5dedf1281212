"""Aligned per-day datasets and their transforms."""

from mdtrack.datasets.axis import DateAxis
from mdtrack.datasets.dataset import DataPoint, Dataset, DatasetSummary
from mdtrack.datasets.collection import DatasetCollection

__all__ = [
    "DateAxis",
    "DataPoint",
    "Dataset",
    "DatasetSummary",
    "DatasetCollection",
]
