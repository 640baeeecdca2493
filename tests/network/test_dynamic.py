"""
Tests for the DynamicNetwork aggregate.
"""

import pytest

from netdynamic.common.exceptions import InvalidInterval, InvalidRule, MissingSelector
from netdynamic.network.activity import Edge, Vertex
from netdynamic.network.dynamic import DynamicNetwork
from netdynamic.temporal.spell import Spell


@pytest.fixture
def dnet():
    """Five undirected vertices observed over [0, 100)."""
    return DynamicNetwork(5, observation_start=0.0, observation_end=100.0, directed=False)


class TestConstruction:
    """Test construction and the observation period."""

    def test_defaults(self):
        dnet = DynamicNetwork()
        assert dnet.number_of_vertices() == 0
        assert dnet.is_directed()
        assert dnet.observation_period == (0.0, 1.0)

    def test_observation_period(self, dnet):
        assert dnet.observation_period == (0.0, 100.0)
        assert dnet.observation_spell == Spell(0.0, 100.0)

        dnet.set_observation_period(10.0, 20.0)
        assert dnet.observation_period == (10.0, 20.0)

    def test_inverted_observation_period(self, dnet):
        with pytest.raises(InvalidInterval):
            DynamicNetwork(2, observation_start=5.0, observation_end=1.0)
        with pytest.raises(InvalidInterval):
            dnet.set_observation_period(5.0, 1.0)
        assert dnet.observation_period == (0.0, 100.0)

    def test_spells_outside_observation_not_clipped(self, dnet):
        dnet.activate(-50.0, 500.0, Vertex(0))
        assert dnet.when_vertex(0) == [Spell(-50.0, 500.0)]
        assert dnet.is_active(300.0, Vertex(0))

    def test_repr(self, dnet):
        assert repr(dnet) == "DynamicNetwork(n=5, edges=0, undirected, observation=(0.0, 100.0))"


class TestSpells:
    """Test spell mutation through the aggregate."""

    def test_activate_and_query(self, dnet):
        dnet.activate(0.0, 30.0, Vertex(0))

        assert dnet.is_active(10.0, Vertex(0))
        assert not dnet.is_active(30.0, Vertex(0))
        assert dnet.is_active_over(10.0, 25.0, Vertex(0), rule="all")
        assert not dnet.is_active_over(10.0, 35.0, Vertex(0), rule="all")
        assert dnet.is_active_over(10.0, 35.0, Vertex(0), rule="any")

    def test_edge_spell_creates_edge(self, dnet):
        dnet.add_spell(Spell(0.0, 10.0), Edge(3, 1))

        assert dnet.number_of_edges() == 1
        assert dnet.network.has_edge(1, 3)
        assert dnet.when_edge(1, 3) == [Spell(0.0, 10.0)]
        assert dnet.when_edge(3, 1) == [Spell(0.0, 10.0)]

    def test_activate_many(self, dnet):
        dnet.activate_vertices([0, 2, 4], 0.0, 10.0)
        dnet.activate_edges([(0, 2), (2, 4)], 5.0, 10.0)

        assert dnet.active_vertices(1.0) == [0, 2, 4]
        assert sorted(dnet.active_edges(7.0)) == [(0, 2), (2, 4)]
        assert dnet.active_edges(1.0) == []

    def test_remove_and_merge(self, dnet):
        dnet.activate(0.0, 10.0, Vertex(1))
        dnet.activate(10.0, 20.0, Vertex(1))
        dnet.activate(50.0, 60.0, Vertex(1))

        dnet.remove_spell(Spell(50.0, 60.0), Vertex(1))
        dnet.merge_spells(Vertex(1))

        assert dnet.get_spells(Vertex(1)) == [Spell(0.0, 20.0)]

    def test_deactivate_splits(self, dnet):
        dnet.activate(0.0, 100.0, Edge(0, 1))
        dnet.deactivate(40.0, 60.0, Edge(1, 0))

        assert dnet.when_edge(0, 1) == [Spell(0.0, 40.0), Spell(60.0, 100.0)]
        assert not dnet.is_active(50.0, Edge(0, 1))

    def test_activity_views_are_copies(self, dnet):
        dnet.activate(0.0, 10.0, Vertex(0))
        dnet.activate(0.0, 10.0, Edge(0, 1))

        vertex_activity = dnet.get_vertex_activity()
        edge_activity = dnet.get_edge_activity()
        assert vertex_activity == {0: [Spell(0.0, 10.0)]}
        assert edge_activity == {(0, 1): [Spell(0.0, 10.0)]}

        vertex_activity[0].append(Spell(20.0, 30.0))
        assert dnet.when_vertex(0) == [Spell(0.0, 10.0)]

    def test_activity_range(self, dnet):
        assert dnet.activity_range(Vertex(2)) is None
        dnet.activate(5.0, 8.0, Vertex(2))
        dnet.activate(1.0, 3.0, Vertex(2))
        assert dnet.activity_range(Vertex(2)) == (1.0, 8.0)

    def test_errors_propagate(self, dnet):
        with pytest.raises(MissingSelector):
            dnet.activate(0.0, 1.0, 2)
        with pytest.raises(InvalidRule):
            dnet.is_active_over(0.0, 1.0, Vertex(0), rule="every")
        with pytest.raises(InvalidInterval):
            dnet.activate(10.0, 0.0, Vertex(0))


class TestAttributes:
    """Test static and time-varying attributes."""

    def test_static_vertex_attribute(self, dnet):
        dnet.set_vertex_attribute(2, "group", "b")
        assert dnet.get_vertex_attribute(2, "group") == "b"
        assert dnet.get_vertex_attribute(3, "group") is None

    def test_vertex_attribute_lookup(self, dnet):
        dnet.set_vertex_attribute_active(1, "status", "online", 0.0, 10.0)
        dnet.set_vertex_attribute_active(1, "status", "away", 10.0, 20.0)

        assert dnet.get_vertex_attribute_active(1, "status", 5.0) == "online"
        assert dnet.get_vertex_attribute_active(1, "status", 10.0) == "away"
        assert dnet.get_vertex_attribute_active(1, "status", 25.0) is None
        assert dnet.get_vertex_attribute_active(1, "mood", 5.0) is None
        assert dnet.get_vertex_attribute_active(2, "status", 5.0) is None

    def test_first_inserted_value_wins(self, dnet):
        dnet.set_vertex_attribute_active(0, "score", 1, 0.0, 50.0)
        dnet.set_vertex_attribute_active(0, "score", 2, 20.0, 30.0)
        assert dnet.get_vertex_attribute_active(0, "score", 25.0) == 1

    def test_edge_attribute_undirected_keys(self, dnet):
        dnet.set_edge_attribute_active(3, 1, "weight", 0.5, 0.0, 10.0)

        assert dnet.get_edge_attribute_active(1, 3, "weight", 5.0) == 0.5
        assert dnet.get_edge_attribute_active(3, 1, "weight", 5.0) == 0.5

    def test_edge_attribute_directed_keys(self):
        dnet = DynamicNetwork(3, directed=True)
        dnet.set_edge_attribute_active(2, 1, "weight", 0.5, 0.0, 1.0)

        assert dnet.get_edge_attribute_active(2, 1, "weight", 0.5) == 0.5
        assert dnet.get_edge_attribute_active(1, 2, "weight", 0.5) is None

    def test_list_attribute_names(self, dnet):
        dnet.set_vertex_attribute_active(0, "status", "a", 0.0, 1.0)
        dnet.set_vertex_attribute_active(1, "status", "b", 0.0, 1.0)
        dnet.set_vertex_attribute_active(1, "score", 3, 0.0, 1.0)
        dnet.set_edge_attribute_active(0, 1, "weight", 1.0, 0.0, 1.0)

        assert dnet.list_vertex_attributes_active() == ["status", "score"]
        assert dnet.list_edge_attributes_active() == ["weight"]
        assert DynamicNetwork(2).list_vertex_attributes_active() == []
