"""Tests for DatasetCollection."""

from datetime import date

from mdtrack.datasets import DateAxis, DatasetCollection
from mdtrack.query import Query
from mdtrack.tracking import ContributionCollector


def _axis() -> DateAxis:
    return DateAxis.between(date(2024, 1, 1), date(2024, 1, 4))


class TestDatasetCollectionBuild:
    """Tests for reshaping contributions onto the axis."""

    def test_sums_contributions_per_day(self, make_document):
        query = Query.create(0, "tag", "exercise", name="exercise")
        collector = ContributionCollector()
        collector.collect(make_document(day=1, path="a.md", content="#exercise"), [query])
        collector.collect(make_document(day=1, path="b.md", content="#exercise:30"), [query])
        collector.collect(make_document(day=3, content="#exercise #exercise"), [query])

        collection = DatasetCollection.build(_axis(), [query], collector)
        dataset = collection.get_dataset_by_id(0)

        assert dataset.values == [31.0, None, 2.0, None]
        assert dataset.y_min == 2.0
        assert dataset.y_max == 31.0

    def test_every_dataset_spans_axis(self, make_document):
        queries = [Query.create(0, "tag", "a"), Query.create(1, "wiki", "B")]
        collector = ContributionCollector()
        collector.collect(make_document(day=2, content="#a"), queries)

        collection = DatasetCollection.build(_axis(), queries, collector)

        assert len(collection) == 2
        for dataset in collection:
            assert dataset.length == len(collection.dates) == 4
        assert collection.get_dataset_by_id(1).values == [None] * 4

    def test_contributions_off_axis_dropped(self, make_document):
        query = Query.create(0, "tag", "a")
        collector = ContributionCollector()
        collector.collect(make_document(day=9, content="#a"), [query])

        collection = DatasetCollection.build(_axis(), [query], collector)
        assert collection.get_dataset_by_id(0).length_not_null == 0

    def test_duplicate_queries_share_contributions(self, make_document):
        """Two queries with the same type and target see the same data."""
        first = Query.create(0, "tag", "a", name="first")
        second = Query.create(1, "tag", "a", name="second")
        collector = ContributionCollector()
        collector.collect(make_document(day=1, content="#a"), [first])

        collection = DatasetCollection.build(_axis(), [first, second], collector)

        assert collection.get_dataset_by_id(0).values == [1.0, None, None, None]
        assert collection.get_dataset_by_id(1).values == [1.0, None, None, None]


class TestDatasetCollectionLookup:
    """Tests for collection accessors."""

    def test_lookup(self):
        collection = DatasetCollection(_axis())
        weight = collection.create_dataset(Query.create(3, "frontmatter", "weight", name="kg"))
        collection.create_dataset(Query.create(5, "wiki", "Gym"), name="gym")

        assert collection.names == ["kg", "gym"]
        assert collection.get_dataset_by_id(3) is weight
        assert collection.get_dataset_by_id(42) is None
        assert collection.get_dataset_by_query(Query.create(99, "frontmatter", "weight")) is weight
        assert collection.get_dataset_by_query(Query.create(0, "tag", "weight")) is None

    def test_dates_and_index(self):
        collection = DatasetCollection(_axis())

        assert collection.dates[0] == date(2024, 1, 1)
        assert collection.index_of(date(2024, 1, 4)) == 3
        assert collection.index_of(date(2024, 1, 5)) == -1

    def test_new_dataset_is_empty(self):
        collection = DatasetCollection(_axis())
        dataset = collection.create_dataset(Query.create(0, "tag", "x"))

        assert dataset.values == [None] * 4
        assert dataset.axis is collection.axis
