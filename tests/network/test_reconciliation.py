"""
Tests for clipping edge activity to the activity of its endpoints.
"""

from datetime import datetime, timedelta

import pytest

from netdynamic.common.exceptions import ConfigurationError
from netdynamic.network.activity import Edge, Vertex
from netdynamic.network.dynamic import DynamicNetwork
from netdynamic.network.reconciliation import reconcile_activity
from netdynamic.temporal.spell import Spell


@pytest.fixture
def dnet():
    return DynamicNetwork(4, observation_start=0.0, observation_end=100.0, directed=False)


class TestReconcileActivity:
    """Test reconcile_activity."""

    def test_clipped_to_shortest_endpoint(self, dnet):
        dnet.activate(0.0, 50.0, Vertex(0))
        dnet.activate(0.0, 100.0, Vertex(1))
        dnet.activate(0.0, 80.0, Edge(0, 1))

        reconcile_activity(dnet)

        assert dnet.when_edge(0, 1) == [Spell(0.0, 50.0)]

    def test_edge_without_endpoint_spells_untouched(self, dnet):
        dnet.activate(10.0, 200.0, Edge(2, 3))

        reconcile_activity(dnet)

        assert dnet.when_edge(2, 3) == [Spell(10.0, 200.0)]

    def test_missing_endpoint_uses_observation_period(self, dnet):
        dnet.activate(20.0, 300.0, Vertex(0))
        dnet.activate(-10.0, 150.0, Edge(0, 1))

        reconcile_activity(dnet)

        assert dnet.when_edge(0, 1) == [Spell(20.0, 100.0)]

    def test_edge_split_by_endpoint_gap(self, dnet):
        dnet.activate(0.0, 30.0, Vertex(0))
        dnet.activate(60.0, 100.0, Vertex(0))
        dnet.activate(0.0, 100.0, Vertex(1))
        dnet.activate(10.0, 90.0, Edge(0, 1))

        reconcile_activity(dnet)

        assert dnet.when_edge(0, 1) == [Spell(10.0, 30.0), Spell(60.0, 90.0)]

    def test_touching_intersections_dropped(self, dnet):
        dnet.activate(0.0, 10.0, Vertex(0))
        dnet.activate(0.0, 100.0, Vertex(1))
        dnet.activate(10.0, 20.0, Edge(0, 1))

        reconcile_activity(dnet)

        assert dnet.when_edge(0, 1) == []
        assert dnet.network.has_edge(0, 1)

    def test_result_is_sorted(self, dnet):
        dnet.activate(50.0, 60.0, Vertex(0))
        dnet.activate(0.0, 10.0, Vertex(0))
        dnet.activate(0.0, 100.0, Vertex(1))
        dnet.activate(0.0, 100.0, Edge(1, 0))

        reconcile_activity(dnet)

        assert dnet.when_edge(0, 1) == [Spell(0.0, 10.0), Spell(50.0, 60.0)]

    def test_directed_edges(self):
        dnet = DynamicNetwork(2, observation_start=0.0, observation_end=100.0, directed=True)
        dnet.activate(0.0, 40.0, Vertex(1))
        dnet.activate(0.0, 100.0, Edge(1, 0))

        reconcile_activity(dnet)

        assert dnet.when_edge(1, 0) == [Spell(0.0, 40.0)]

    def test_vertex_spells_unchanged(self, dnet):
        dnet.activate(0.0, 50.0, Vertex(0))
        dnet.activate(0.0, 80.0, Edge(0, 1))

        reconcile_activity(dnet)

        assert dnet.when_vertex(0) == [Spell(0.0, 50.0)]
        assert dnet.when_vertex(1) == []

    def test_idempotent(self, dnet):
        dnet.activate(0.0, 30.0, Vertex(0))
        dnet.activate(60.0, 100.0, Vertex(0))
        dnet.activate(5.0, 95.0, Vertex(1))
        dnet.activate(0.0, 100.0, Edge(0, 1))

        reconcile_activity(dnet)
        once = dnet.when_edge(0, 1)
        reconcile_activity(dnet)

        assert dnet.when_edge(0, 1) == once

    def test_datetime_network_with_default_observation_period(self):
        start = datetime(2024, 1, 1)
        dnet = DynamicNetwork(2, directed=False)
        dnet.activate(start, start + timedelta(days=5), Vertex(0))
        dnet.activate(start, start + timedelta(days=10), Edge(0, 1))

        with pytest.raises(ConfigurationError, match="set_observation_period") as exc_info:
            reconcile_activity(dnet)
        assert isinstance(exc_info.value.__cause__, TypeError)

        dnet.set_observation_period(start, start + timedelta(days=30))
        reconcile_activity(dnet)
        assert dnet.when_edge(0, 1) == [Spell(start, start + timedelta(days=5))]

    def test_empty_network(self, dnet):
        reconcile_activity(dnet)
        assert dnet.get_edge_activity() == {}
