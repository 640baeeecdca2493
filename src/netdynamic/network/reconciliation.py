"""
Vertex/edge activity reconciliation.

An edge should only be active while both of its endpoints are active.
:func:`reconcile_activity` enforces this by replacing every edge spell with
its intersections against the spells of the two endpoints.
"""

from typing import List

from ..common.exceptions import ConfigurationError
from ..common.logging_config import get_logger, LoggingTimer
from ..temporal.spell import Spell, spell_intersection
from .activity import Edge, Vertex
from .dynamic import DynamicNetwork

logger = get_logger(__name__)


def reconcile_activity(dnet: DynamicNetwork) -> None:
    """
    Clip edge activity to the activity of both endpoints, in place.

    For every edge with spells:

    - if neither endpoint has spells, both are treated as always active and
      the edge is left unchanged;
    - otherwise an endpoint without spells is treated as active over the
      observation period, and each edge spell is intersected with every
      pair of endpoint spells. Intersections of positive length become the
      new edge spells; zero-length ones are dropped.

    Raises
    ------
    ConfigurationError
        If the observation period is needed for an endpoint without spells
        but its bounds cannot be compared with the spell times (for example
        the default ``(0.0, 1.0)`` period on a ``datetime`` network)

    Examples
    --------
    >>> dnet = DynamicNetwork(2, observation_start=0.0, observation_end=100.0)
    >>> dnet.activate(0.0, 50.0, Vertex(0))
    >>> dnet.activate(0.0, 100.0, Vertex(1))
    >>> dnet.activate(0.0, 80.0, Edge(0, 1))
    >>> reconcile_activity(dnet)
    >>> dnet.when_edge(0, 1)
    [Spell(onset=0.0, terminus=50.0, onset_censored=False, terminus_censored=False)]

    Notes
    -----
    Cost is O(|spells_i| x |spells_j| x |spells_edge|) per edge.
    """
    activity = dnet.activity
    edge_spells = activity.edge_spells()
    fallback = [dnet.observation_spell]

    changed = 0
    with LoggingTimer("reconcile_activity", {"n_edges": len(edge_spells)}):
        for (i, j), spells in edge_spells.items():
            if not spells:
                continue

            spells_i = activity.get_spells(Vertex(i))
            spells_j = activity.get_spells(Vertex(j))
            if not spells_i and not spells_j:
                continue

            reconciled: List[Spell] = []
            for es in spells:
                for vs_i in spells_i or fallback:
                    for vs_j in spells_j or fallback:
                        try:
                            common = spell_intersection(es, vs_i, vs_j)
                        except TypeError as e:
                            raise ConfigurationError(
                                f"Observation period {dnet.observation_period} is not comparable "
                                f"with the spells of edge {(i, j)}; set it with set_observation_period",
                                parameter="observation_period",
                                function="reconcile_activity",
                                cause=e
                            ) from e
                        if common is not None:
                            reconciled.append(common)

            if sorted(reconciled) != spells:
                changed += 1
            activity.replace_edge_spells(Edge(i, j), reconciled)

    logger.info(f"Reconciled activity of {len(edge_spells)} edges ({changed} changed)")
