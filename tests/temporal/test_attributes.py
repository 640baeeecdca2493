"""
Tests for time-varying attributes.

The lookup policy is first match in insertion order: when two stored
spells overlap, the value inserted first wins.
"""

import pytest

from netdynamic.common.exceptions import InvalidInterval
from netdynamic.temporal.attributes import AttributeStore, TimeVaryingAttribute
from netdynamic.temporal.spell import Spell


class TestTimeVaryingAttribute:
    """Test the (value, spell) series."""

    def test_empty_series(self):
        tea = TimeVaryingAttribute()
        assert len(tea) == 0
        assert tea.value_at(0) is None

    def test_step_function_lookup(self):
        tea = TimeVaryingAttribute()
        tea.append("low", Spell(0, 10))
        tea.append("high", Spell(10, 20))

        assert tea.value_at(0) == "low"
        assert tea.value_at(9.5) == "low"
        assert tea.value_at(10) == "high"
        assert tea.value_at(20) is None

    def test_first_match_wins_on_overlap(self):
        tea = TimeVaryingAttribute()
        tea.append("first", Spell(0, 20))
        tea.append("second", Spell(5, 15))

        assert tea.value_at(10) == "first"

    def test_insertion_order_not_time_order(self):
        tea = TimeVaryingAttribute()
        tea.append("later", Spell(50, 60))
        tea.append("earlier", Spell(0, 10))

        assert tea.items() == [("later", Spell(50, 60)), ("earlier", Spell(0, 10))]
        assert list(tea) == tea.items()


class TestAttributeStore:
    """Test the keyed attribute store."""

    def test_set_and_get(self):
        store = AttributeStore()
        store.set_active(1, "status", "online", 0.0, 10.0)

        assert store.get_active(1, "status", 5.0) == "online"
        assert store.get_series(1, "status") == [("online", Spell(0.0, 10.0))]

    def test_unknown_name_returns_none(self):
        store = AttributeStore()
        store.set_active(1, "status", "online", 0.0, 10.0)

        assert store.get_active(1, "mood", 5.0) is None
        assert store.get_active(2, "status", 5.0) is None

    def test_uncovered_time_returns_none(self):
        store = AttributeStore()
        store.set_active(1, "status", "online", 0.0, 10.0)

        assert store.get_active(1, "status", 10.0) is None
        assert store.get_active(1, "status", -1.0) is None

    def test_heterogeneous_values(self):
        store = AttributeStore()
        store.set_active(0, "score", 3, 0, 5)
        store.set_active(0, "score", 4.5, 5, 10)
        store.set_active(0, "label", "x", 0, 10)

        assert store.get_active(0, "score", 2) == 3
        assert store.get_active(0, "score", 7) == 4.5
        assert store.get_active(0, "label", 7) == "x"

    def test_no_overlap_checks_on_set(self):
        store = AttributeStore()
        store.set_active(0, "w", 1, 0, 10)
        store.set_active(0, "w", 2, 0, 10)

        assert store.get_series(0, "w") == [(1, Spell(0, 10)), (2, Spell(0, 10))]
        assert store.get_active(0, "w", 5) == 1

    def test_invalid_interval_rejected(self):
        store = AttributeStore()
        with pytest.raises(InvalidInterval):
            store.set_active(0, "w", 1, 10, 0)
        assert store.get_series(0, "w") == []
        assert store.attribute_names() == []

    def test_edge_tuple_keys(self):
        store = AttributeStore()
        store.set_active((0, 1), "weight", 2.0, 0, 10)
        assert store.get_active((0, 1), "weight", 1) == 2.0
        assert store.get_active((1, 0), "weight", 1) is None

    def test_attribute_names_are_distinct(self):
        store = AttributeStore()
        store.set_active(0, "status", "a", 0, 1)
        store.set_active(1, "status", "b", 0, 1)
        store.set_active(1, "score", 1, 0, 1)

        assert store.attribute_names() == ["status", "score"]

    def test_get_series_unknown_is_empty(self):
        assert AttributeStore().get_series(0, "missing") == []
