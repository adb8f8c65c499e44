"""
Tests for record sorting.
"""

import pytest

from directory.query_state import QueryState
from directory.sorting import sort_for_query, sort_records
from tests.factories import make_record


def names(records):
    return [record.name for record in records]


class TestSortRecords:
    """Ordering by fees and experience"""

    def test_empty_key_is_identity(self, providers):
        result = sort_records(providers, "")
        assert result == providers
        assert result is not providers

    def test_unknown_key_is_identity(self, providers):
        assert sort_records(providers, "rating", "desc") == providers

    def test_fees_ascending(self, providers):
        assert [r.fees for r in sort_records(providers, "fees", "asc")] == [300, 300, 500, 500, 800]

    def test_experience_descending(self, providers):
        assert [r.experience_years for r in sort_records(providers, "experience", "desc")] == [20, 12, 12, 5, 5]

    @pytest.mark.parametrize("direction", ["asc", "desc"])
    def test_ties_keep_input_order_in_both_directions(self, direction):
        records = [
            make_record("First", fees=100),
            make_record("Second", fees=200),
            make_record("Third", fees=100),
            make_record("Fourth", fees=200),
        ]
        result = names(sort_records(records, "fees", direction))
        if direction == "asc":
            assert result == ["First", "Third", "Second", "Fourth"]
        else:
            assert result == ["Second", "Fourth", "First", "Third"]

    def test_input_is_not_mutated(self, providers):
        snapshot = list(providers)
        sort_records(providers, "fees", "desc")
        assert providers == snapshot

    def test_accepts_any_iterable(self, providers):
        assert len(sort_records(iter(providers), "fees")) == len(providers)

    def test_sort_for_query_uses_key_and_direction(self, ana_and_ben):
        query = QueryState(sort="experience", sort_order="desc")
        assert names(sort_for_query(ana_and_ben, query)) == ["Ben", "Ana"]
        assert names(sort_for_query(ana_and_ben, QueryState(sort_order="desc"))) == ["Ana", "Ben"]
