"""
Tests for collectkit.collections.unique module.

Tests cover:
- add_unique on sets, sequences and weak collections
- add_unique_range counting distinct new values
- Duplicates inside the incoming batch
- Read-only and None handling
- Non-transactional partial failure
- add_if
"""

from collections import deque

import pytest

from collectkit.collections.unique import add_if, add_unique, add_unique_range
from collectkit.core.errors import MissingArgumentError, ReadOnlyCollectionError, UnsupportedOperationError
from tests._support.containers import ArraySequence, Bag, FailingBag, FrozenList, ListBackedSet


class TestAddUnique:
    """Tests for add_unique."""

    @pytest.mark.parametrize(
        "initial, value, expected",
        [
            ([], 1, True),
            ([1, 2, 3], 4, True),
            ([1, 2, 3], 2, False),
            (["a"], "a", False),
        ],
    )
    def test_list_results(self, initial, value, expected):
        items = list(initial)
        assert add_unique(items, value) is expected
        assert items.count(value) == 1

    def test_idempotent(self):
        """A second identical add returns False and changes nothing."""
        items = [1, 2]
        assert add_unique(items, 3) is True
        size_after_first = len(items)

        assert add_unique(items, 3) is False
        assert len(items) == size_after_first

    def test_set_fast_path(self):
        items = {1, 2}
        assert add_unique(items, 3) is True
        assert add_unique(items, 3) is False
        assert items == {1, 2, 3}

    def test_registered_mutable_set(self):
        """A MutableSet implementation takes the set path."""
        items = ListBackedSet([1])
        assert add_unique(items, 1) is False
        assert add_unique(items, 2) is True
        assert len(items) == 2

    def test_appends_to_sequence_end(self):
        items = ArraySequence([3, 1])
        add_unique(items, 2)
        assert items.to_list() == [3, 1, 2]

    def test_weak_collection(self):
        bag = Bag(["x"])
        assert add_unique(bag, "x") is False
        assert add_unique(bag, "y") is True
        assert bag.to_list() == ["x", "y"]

    def test_unhashable_values_in_list(self):
        items = [[1], [2]]
        assert add_unique(items, [1]) is False
        assert add_unique(items, [3]) is True
        assert items == [[1], [2], [3]]

    def test_none_collection_raises(self):
        with pytest.raises(MissingArgumentError) as exc_info:
            add_unique(None, 1)
        assert exc_info.value.argument == "collection"

    def test_none_value_is_a_value(self):
        """None is a legitimate element, not a missing argument."""
        items = [1]
        assert add_unique(items, None) is True
        assert add_unique(items, None) is False

    @pytest.mark.parametrize("collection", [(1, 2), frozenset({1, 2}), FrozenList([1, 2])])
    def test_read_only_raises(self, collection):
        """Read-only destinations are a reported failure, not a no-op."""
        with pytest.raises(ReadOnlyCollectionError) as exc_info:
            add_unique(collection, 3)
        assert exc_info.value.context.operation == "add_unique"

    def test_read_only_raises_even_when_present(self):
        with pytest.raises(ReadOnlyCollectionError):
            add_unique((1, 2), 1)

    def test_mapping_unsupported(self):
        with pytest.raises(UnsupportedOperationError):
            add_unique({"a": 1}, "b")


class TestAddUniqueRange:
    """Tests for add_unique_range."""

    def test_scenario_list(self):
        """[1, 2] + [2, 3, 4] adds two values."""
        items = [1, 2]
        assert add_unique_range(items, [2, 3, 4]) == 2
        assert items == [1, 2, 3, 4]

    @pytest.mark.parametrize(
        "initial, values, expected",
        [
            ([], [1, 2, 3], 3),
            ([1, 2, 3], [1, 2, 3], 0),
            ([1], [], 0),
            ([1], [2, 2, 2], 1),
            ([1, 2], [3, 1, 3, 4, 2, 4], 2),
        ],
    )
    def test_counts_distinct_new_values(self, initial, values, expected):
        items = list(initial)
        assert add_unique_range(items, values) == expected
        assert len(items) == len(set(items))
        assert set(items) == set(initial) | set(values)

    def test_preserves_input_order(self):
        items = ["a"]
        add_unique_range(items, ["d", "b", "d", "c", "b"])
        assert items == ["a", "d", "b", "c"]

    def test_set_destination(self):
        items = {1, 2}
        assert add_unique_range(items, [2, 3, 3, 4]) == 2
        assert items == {1, 2, 3, 4}

    def test_custom_set_destination(self):
        items = ListBackedSet([1])
        assert add_unique_range(items, [1, 2, 2]) == 1
        assert set(items) == {1, 2}

    def test_sequence_destination(self):
        items = deque([1, 2])
        assert add_unique_range(items, [2, 3]) == 1
        assert list(items) == [1, 2, 3]

    def test_weak_destination_uses_index_not_contains(self):
        """The live collection is never queried with `in` per candidate."""
        bag = Bag([1, 2])
        assert add_unique_range(bag, [2, 3, 4, 3]) == 2
        assert sorted(bag.to_list()) == [1, 2, 3, 4]
        assert bag.contains_calls == 0

    def test_generator_values(self):
        items = [0]
        assert add_unique_range(items, (n % 3 for n in range(10))) == 2
        assert items == [0, 1, 2]

    def test_unhashable_values(self):
        items = [{"id": 1}]
        assert add_unique_range(items, [{"id": 1}, {"id": 2}, {"id": 2}]) == 1
        assert items == [{"id": 1}, {"id": 2}]

    def test_self_merge_adds_nothing(self):
        items = [1, 2, 3]
        assert add_unique_range(items, items) == 0
        assert items == [1, 2, 3]

    def test_none_values_returns_zero(self):
        items = [1]
        assert add_unique_range(items, None) == 0
        assert items == [1]

    def test_none_values_on_read_only_returns_zero(self):
        """Nothing to add is not an attempted mutation."""
        assert add_unique_range((1,), None) == 0

    def test_none_collection_raises(self):
        with pytest.raises(MissingArgumentError):
            add_unique_range(None, [1, 2, 3])

    def test_read_only_raises_before_mutation(self):
        items = FrozenList([1])
        with pytest.raises(ReadOnlyCollectionError):
            add_unique_range(items, [2, 3])
        assert items == [1]

    def test_partial_failure_keeps_earlier_insertions(self):
        """No rollback: values added before the failure stay."""
        bag = FailingBag([1], limit=2)
        with pytest.raises(OverflowError):
            add_unique_range(bag, [2, 3, 4, 5])
        assert bag.to_list() == [1, 2, 3]


class TestAddIf:
    """Tests for add_if."""

    def test_adds_when_predicate_true(self):
        items = [1]
        assert add_if(items, 2, lambda v: v % 2 == 0) is True
        assert items == [1, 2]

    def test_skips_when_predicate_false(self):
        items = [1]
        assert add_if(items, 3, lambda v: v % 2 == 0) is False
        assert items == [1]

    def test_allows_duplicates(self):
        items = [2]
        assert add_if(items, 2, lambda v: True) is True
        assert items == [2, 2]

    def test_adds_to_empty_set(self):
        items: set[int] = set()
        assert add_if(items, 5, lambda v: v > 0) is True
        assert items == {5}

    def test_none_collection_raises(self):
        with pytest.raises(MissingArgumentError):
            add_if(None, 1, lambda v: True)

    def test_none_predicate_raises(self):
        items = [1]
        with pytest.raises(MissingArgumentError) as exc_info:
            add_if(items, 2, None)
        assert exc_info.value.argument == "predicate"
        assert items == [1]

    def test_read_only_raises(self):
        with pytest.raises(ReadOnlyCollectionError):
            add_if((1,), 2, lambda v: True)
