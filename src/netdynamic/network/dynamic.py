"""
Dynamic network aggregate.

A DynamicNetwork wraps a StaticNetwork holding the maximum ever-active vertex
and edge sets, an ActivityStore with the vertex and edge spells, time-varying
vertex and edge attributes, and an observation period.

The observation period is context only: spells outside it are neither clipped
nor rejected. It is used by reconciliation as the activity of vertices that
have no spells of their own.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..common.logging_config import get_logger
from ..temporal.attributes import AttributeStore
from ..temporal.spell import Spell
from .activity import ActivityStore, Edge, RULE_ANY, Selector, Vertex
from .static import EdgeKey, StaticNetwork

logger = get_logger(__name__)


class DynamicNetwork:
    """
    A network whose vertices, edges and attributes change over time.

    Parameters
    ----------
    n : int, default 0
        Number of vertices (ids ``0..n-1``). Vertices are never removed;
        only their activity changes.
    observation_start, observation_end : Any, default 0.0, 1.0
        Observation window
    directed : bool, default True
        Whether edges are directed

    Examples
    --------
    >>> dnet = DynamicNetwork(3, observation_start=0.0, observation_end=100.0)
    >>> dnet.activate(0.0, 30.0, Vertex(0))
    >>> dnet.activate(10.0, 20.0, Edge(0, 1))
    >>> dnet.is_active(10.0, Vertex(0))
    True
    >>> dnet.is_active(30.0, Vertex(0))
    False
    >>> dnet.active_edges(15.0)
    [(0, 1)]
    """

    def __init__(
        self,
        n: int = 0,
        observation_start: Any = 0.0,
        observation_end: Any = 1.0,
        directed: bool = True
    ) -> None:
        self._network = StaticNetwork(n, directed=directed)
        self._activity = ActivityStore(self._network)
        self._vertex_tea = AttributeStore()
        self._edge_tea = AttributeStore()
        self._observation = Spell(observation_start, observation_end)

        logger.debug(
            "Created dynamic network: n=%d, directed=%s, observation=(%s, %s)",
            n, directed, observation_start, observation_end
        )

    # ------------------------------------------------------------------
    # Static structure
    # ------------------------------------------------------------------

    @property
    def network(self) -> StaticNetwork:
        """Static network of every vertex and every edge that ever had a spell."""
        return self._network

    @property
    def activity(self) -> ActivityStore:
        return self._activity

    def number_of_vertices(self) -> int:
        return self._network.number_of_vertices()

    def number_of_edges(self) -> int:
        return self._network.number_of_edges()

    def is_directed(self) -> bool:
        return self._network.is_directed()

    def vertices(self) -> range:
        return self._network.vertices()

    def normalize_edge(self, i: int, j: int) -> EdgeKey:
        return self._network.normalize_edge(i, j)

    def set_vertex_attribute(self, v: int, name: str, value: Any) -> None:
        """Set a static (time-invariant) vertex attribute."""
        self._network.set_vertex_attribute(v, name, value)

    def get_vertex_attribute(self, v: int, name: str, default: Optional[Any] = None) -> Any:
        return self._network.get_vertex_attribute(v, name, default)

    # ------------------------------------------------------------------
    # Observation period
    # ------------------------------------------------------------------

    @property
    def observation_period(self) -> Tuple[Any, Any]:
        return (self._observation.onset, self._observation.terminus)

    @property
    def observation_spell(self) -> Spell:
        return self._observation

    def set_observation_period(self, start: Any, stop: Any) -> None:
        """
        Replace the observation window.

        Raises
        ------
        InvalidInterval
            If ``start > stop``
        """
        self._observation = Spell(start, stop)

    # ------------------------------------------------------------------
    # Spells
    # ------------------------------------------------------------------

    def add_spell(self, spell: Spell, selector: Selector) -> None:
        """Add an activity spell to a vertex or an edge (creating the edge if needed)."""
        self._activity.add_spell(selector, spell)

    def activate(self, onset: Any, terminus: Any, selector: Selector) -> None:
        """Add the spell ``[onset, terminus)`` to a vertex or an edge."""
        self._activity.add_spell(selector, Spell(onset, terminus))

    def activate_vertices(self, vertices: Iterable[int], onset: Any, terminus: Any) -> None:
        spell = Spell(onset, terminus)
        for v in vertices:
            self._activity.add_spell(Vertex(v), spell)

    def activate_edges(self, edges: Iterable[Tuple[int, int]], onset: Any, terminus: Any) -> None:
        spell = Spell(onset, terminus)
        for i, j in edges:
            self._activity.add_spell(Edge(i, j), spell)

    def deactivate(self, onset: Any, terminus: Any, selector: Selector) -> None:
        """Remove activity inside ``[onset, terminus)``, splitting spells that straddle it."""
        self._activity.deactivate(onset, terminus, selector)

    def remove_spell(self, spell: Spell, selector: Selector) -> None:
        self._activity.remove_spell(selector, spell)

    def merge_spells(self, selector: Selector) -> None:
        self._activity.merge_spells(selector)

    def get_spells(self, selector: Selector) -> List[Spell]:
        return self._activity.get_spells(selector)

    def when_vertex(self, v: int) -> List[Spell]:
        return self._activity.get_spells(Vertex(v))

    def when_edge(self, i: int, j: int) -> List[Spell]:
        return self._activity.get_spells(Edge(i, j))

    def get_vertex_activity(self) -> Dict[int, List[Spell]]:
        return self._activity.vertex_spells()

    def get_edge_activity(self) -> Dict[EdgeKey, List[Spell]]:
        return self._activity.edge_spells()

    # ------------------------------------------------------------------
    # Activity queries
    # ------------------------------------------------------------------

    def is_active(self, at: Any, selector: Selector) -> bool:
        """True iff some spell of the element contains the time point ``at``."""
        return self._activity.is_active_at(at, selector)

    def is_active_over(self, onset: Any, terminus: Any, selector: Selector, rule: str = RULE_ANY) -> bool:
        """
        Interval activity query.

        ``rule="any"`` tests overlap with any spell; ``rule="all"`` requires
        one spell to contain the whole interval.

        Raises
        ------
        InvalidRule
            If rule is not ``"any"`` or ``"all"``
        """
        return self._activity.is_active_over(onset, terminus, selector, rule)

    def active_vertices(self, at: Any) -> List[int]:
        return self._activity.active_vertices(at)

    def active_edges(self, at: Any) -> List[EdgeKey]:
        return self._activity.active_edges(at)

    def activity_range(self, selector: Selector) -> Optional[Tuple[Any, Any]]:
        return self._activity.activity_range(selector)

    # ------------------------------------------------------------------
    # Time-varying attributes
    # ------------------------------------------------------------------

    def set_vertex_attribute_active(
        self, v: int, name: str, value: Any, onset: Any, terminus: Any
    ) -> None:
        self._vertex_tea.set_active(v, name, value, onset, terminus)

    def get_vertex_attribute_active(self, v: int, name: str, at: Any) -> Optional[Any]:
        return self._vertex_tea.get_active(v, name, at)

    def set_edge_attribute_active(
        self, i: int, j: int, name: str, value: Any, onset: Any, terminus: Any
    ) -> None:
        self._edge_tea.set_active(self.normalize_edge(i, j), name, value, onset, terminus)

    def get_edge_attribute_active(self, i: int, j: int, name: str, at: Any) -> Optional[Any]:
        return self._edge_tea.get_active(self.normalize_edge(i, j), name, at)

    def list_vertex_attributes_active(self) -> List[str]:
        return self._vertex_tea.attribute_names()

    def list_edge_attributes_active(self) -> List[str]:
        return self._edge_tea.attribute_names()

    def __repr__(self) -> str:
        kind = "directed" if self.is_directed() else "undirected"
        return (
            f"DynamicNetwork(n={self.number_of_vertices()}, edges={self.number_of_edges()}, "
            f"{kind}, observation={self.observation_period})"
        )
