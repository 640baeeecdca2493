"""
Static network container backed by networkit.

StaticNetwork pairs an ``nk.Graph`` with a per-vertex attribute store, since
networkit node attributes are restricted to a single primitive type per
attribute. It is the static-graph collaborator of DynamicNetwork (holding the
maximum ever-active vertex and edge sets) and the result type of snapshot
extraction.

Vertex ids follow networkit: consecutive integers ``0..n-1``.
"""

import numbers
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

import networkit as nk

from ..common.exceptions import GraphConstructionError, require_positive
from ..common.logging_config import get_logger

logger = get_logger(__name__)

EdgeKey = Tuple[int, int]


class StaticNetwork:
    """
    A networkit graph plus static vertex attributes.

    Parameters
    ----------
    n : int, default 0
        Number of vertices
    directed : bool, default True
        Whether edges are directed

    Attributes
    ----------
    graph : nk.Graph
        Underlying unweighted networkit graph
    vertex_attrs : Dict[str, Dict[int, Any]]
        Attribute name -> {vertex id -> value}

    Examples
    --------
    >>> net = StaticNetwork(3, directed=False)
    >>> net.add_edge(0, 2)
    >>> net.has_edge(2, 0)
    True
    >>> net.set_vertex_attribute(1, "group", "a")
    >>> net.vertex_attributes(1)
    {'group': 'a'}
    """

    def __init__(self, n: int = 0, directed: bool = True) -> None:
        require_positive(n, "n", allow_zero=True)
        self.graph = nk.Graph(n, weighted=False, directed=directed)
        self.vertex_attrs: Dict[str, Dict[int, Any]] = {}

    @classmethod
    def from_graph(cls, graph: nk.Graph) -> 'StaticNetwork':
        """
        Wrap a copy of an existing networkit graph.

        Edge weights are discarded; nodes must be consecutive (no deleted ids).
        """
        n = graph.upperNodeIdBound()
        if graph.numberOfNodes() != n:
            raise GraphConstructionError(
                "Graph has deleted nodes; vertex ids must be consecutive",
                node_count=graph.numberOfNodes(),
                operation="from_graph"
            )

        net = cls(n, directed=graph.isDirected())
        for u, v in graph.iterEdges():
            net.add_edge(u, v)
        logger.debug("Wrapped networkit graph: %d vertices, %d edges", n, net.number_of_edges())
        return net

    def number_of_vertices(self) -> int:
        return self.graph.numberOfNodes()

    def number_of_edges(self) -> int:
        return self.graph.numberOfEdges()

    def is_directed(self) -> bool:
        return self.graph.isDirected()

    def vertices(self) -> range:
        return range(self.number_of_vertices())

    def has_vertex(self, v: int) -> bool:
        return isinstance(v, numbers.Integral) and 0 <= v < self.number_of_vertices()

    def _check_vertex(self, v: int, operation: str) -> None:
        if not self.has_vertex(v):
            raise GraphConstructionError(
                f"Vertex {v!r} is outside the network",
                node_count=self.number_of_vertices(),
                operation=operation
            )

    def add_edge(self, i: int, j: int) -> None:
        """Add edge ``(i, j)`` unless it is already present."""
        self._check_vertex(i, "add_edge")
        self._check_vertex(j, "add_edge")
        if not self.graph.hasEdge(int(i), int(j)):
            self.graph.addEdge(int(i), int(j))

    def has_edge(self, i: int, j: int) -> bool:
        if not (self.has_vertex(i) and self.has_vertex(j)):
            return False
        return self.graph.hasEdge(int(i), int(j))

    def normalize_edge(self, i: int, j: int) -> EdgeKey:
        """Canonical key for ``(i, j)``: unchanged if directed, sorted otherwise."""
        if self.is_directed():
            return (i, j)
        return (min(i, j), max(i, j))

    def iter_edges(self) -> Iterator[EdgeKey]:
        """Iterate edges as normalized ``(i, j)`` pairs."""
        for u, v in self.graph.iterEdges():
            yield self.normalize_edge(u, v)

    def edges(self) -> List[EdgeKey]:
        return sorted(self.iter_edges())

    def edge_set(self) -> Set[EdgeKey]:
        return set(self.iter_edges())

    def set_vertex_attribute(self, v: int, name: str, value: Any) -> None:
        self._check_vertex(v, "set_vertex_attribute")
        self.vertex_attrs.setdefault(name, {})[v] = value

    def get_vertex_attribute(self, v: int, name: str, default: Optional[Any] = None) -> Any:
        return self.vertex_attrs.get(name, {}).get(v, default)

    def vertex_attributes(self, v: int) -> Dict[str, Any]:
        """All static attributes set on vertex ``v``."""
        return {
            name: values[v]
            for name, values in self.vertex_attrs.items()
            if v in values
        }

    def vertex_attribute_names(self) -> List[str]:
        return list(self.vertex_attrs)

    def __repr__(self) -> str:
        kind = "directed" if self.is_directed() else "undirected"
        return (
            f"StaticNetwork(n={self.number_of_vertices()}, "
            f"edges={self.number_of_edges()}, {kind})"
        )
