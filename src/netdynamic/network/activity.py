"""
Activity store: the spells during which vertices and edges are active.

The store keeps two mappings, vertex id -> spells and edge key -> spells.
Every spell list is kept sorted (by onset, then terminus) after each
mutation. Lists may contain duplicates and overlapping spells; they are only
guaranteed to be disjoint right after :meth:`ActivityStore.merge_spells`.

Edge keys are normalized through the static network: ``(i, j)`` as given for
directed networks, ``(min(i, j), max(i, j))`` for undirected ones, so both
orientations of an undirected edge address the same list.

Operations on a single element take a selector, ``Vertex(v)`` or
``Edge(i, j)``.

Interval rules
--------------
``"any"``
    Active if some spell overlaps the query interval.
``"all"``
    Active if a *single* spell contains the whole query interval. Two
    adjacent spells that jointly cover the interval do not satisfy it; call
    :meth:`ActivityStore.merge_spells` first to test union coverage.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..common.exceptions import InvalidRule, MissingSelector, GraphConstructionError
from ..common.logging_config import get_logger
from ..temporal.spell import Spell, spell_overlap
from .static import EdgeKey, StaticNetwork

logger = get_logger(__name__)

RULE_ANY = "any"
RULE_ALL = "all"
VALID_RULES = (RULE_ANY, RULE_ALL)


@dataclass(frozen=True)
class Vertex:
    """Selects the activity of one vertex."""
    id: int


@dataclass(frozen=True)
class Edge:
    """Selects the activity of the edge ``tail -> head`` (or ``{tail, head}`` if undirected)."""
    tail: int
    head: int


Selector = Union[Vertex, Edge]


def validate_rule(rule: str, function: Optional[str] = None) -> str:
    """
    Check that ``rule`` is one of ``"any"`` or ``"all"``.

    Raises
    ------
    InvalidRule
        For any other value
    """
    if rule not in VALID_RULES:
        raise InvalidRule(rule, list(VALID_RULES), function=function)
    return rule


def any_active_at(spells: Iterable[Spell], at: Any) -> bool:
    """True iff some spell contains the time point ``at``."""
    return any(s.contains_point(at) for s in spells)


def any_active_over(spells: Iterable[Spell], onset: Any, terminus: Any, rule: str = RULE_ANY) -> bool:
    """
    Interval activity test over a spell list.

    Parameters
    ----------
    spells : Iterable[Spell]
        Spells of one vertex or edge
    onset, terminus : Any
        Query interval
    rule : str, default "any"
        ``"any"`` for overlap, ``"all"`` for single-spell containment

    Raises
    ------
    InvalidRule
        If rule is not recognized
    InvalidInterval
        If ``onset > terminus``
    """
    validate_rule(rule)
    return _active_over_window(spells, Spell(onset, terminus), rule)


def _active_over_window(spells: Iterable[Spell], window: Spell, rule: str) -> bool:
    if rule == RULE_ANY:
        return any(spell_overlap(s, window) for s in spells)
    return any(s.contains_interval(window.onset, window.terminus) for s in spells)


def merge_spell_list(spells: Iterable[Spell]) -> List[Spell]:
    """
    Merge overlapping or exactly adjacent spells.

    Examples
    --------
    >>> merge_spell_list([Spell(0, 20), Spell(15, 40), Spell(35, 60)])
    [Spell(onset=0, terminus=60, onset_censored=False, terminus_censored=False)]
    >>> len(merge_spell_list([Spell(0, 10), Spell(15, 25)]))
    2
    """
    ordered = sorted(spells)
    if not ordered:
        return []

    merged: List[Spell] = []
    current = ordered[0]
    for spell in ordered[1:]:
        if spell.onset <= current.terminus:
            current = Spell(current.onset, max(current.terminus, spell.terminus))
        else:
            merged.append(current)
            current = spell
    merged.append(current)
    return merged


def subtract_interval(spells: Iterable[Spell], onset: Any, terminus: Any) -> List[Spell]:
    """
    Remove ``[onset, terminus)`` from every spell, trimming or splitting as needed.

    Pieces of zero length are dropped. The flag on a side that was cut is
    cleared; the flag on an untouched side is kept.
    """
    window = Spell(onset, terminus)
    remaining: List[Spell] = []
    for s in spells:
        if not spell_overlap(s, window):
            remaining.append(s)
            continue
        if s.onset < onset:
            remaining.append(Spell(s.onset, onset, onset_censored=s.onset_censored))
        if s.terminus > terminus:
            remaining.append(Spell(terminus, s.terminus, terminus_censored=s.terminus_censored))
    return sorted(remaining)


class ActivityStore:
    """
    Vertex and edge activity spells of one dynamic network.

    Parameters
    ----------
    network : StaticNetwork
        Static network holding the maximum vertex and edge sets. Adding an
        edge spell creates the edge here when it does not exist yet.

    Notes
    -----
    Spell lists are never handed out directly: accessors return copies so the
    sorted-list invariant cannot be broken from outside.
    """

    def __init__(self, network: StaticNetwork) -> None:
        self.network = network
        self._vertex_spells: Dict[int, List[Spell]] = {}
        self._edge_spells: Dict[EdgeKey, List[Spell]] = {}

    # ------------------------------------------------------------------
    # Key resolution
    # ------------------------------------------------------------------

    def _resolve(self, selector: Selector, function: str) -> Tuple[Dict[Any, List[Spell]], Any]:
        if isinstance(selector, Vertex):
            return self._vertex_spells, selector.id
        if isinstance(selector, Edge):
            return self._edge_spells, self.network.normalize_edge(selector.tail, selector.head)
        raise MissingSelector(selector, function=function)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_spell(self, selector: Selector, spell: Spell) -> None:
        """
        Append ``spell`` to the selected element and re-sort its list.

        Duplicates are kept. For an edge, the edge is created in the static
        network first if it is absent.

        Raises
        ------
        MissingSelector
            If selector is neither Vertex nor Edge
        GraphConstructionError
            If a referenced vertex is outside the network
        """
        mapping, key = self._resolve(selector, "add_spell")
        if isinstance(selector, Edge):
            self.network.add_edge(selector.tail, selector.head)
        elif not self.network.has_vertex(key):
            raise GraphConstructionError(
                f"Vertex {key!r} is outside the network",
                node_count=self.network.number_of_vertices(),
                operation="add_spell"
            )

        spells = mapping.setdefault(key, [])
        spells.append(spell)
        spells.sort()

    def remove_spell(self, selector: Selector, spell: Spell) -> None:
        """Remove every stored spell equal to ``spell``; a missing spell is a no-op."""
        mapping, key = self._resolve(selector, "remove_spell")
        if key in mapping:
            mapping[key] = [s for s in mapping[key] if s != spell]

    def merge_spells(self, selector: Selector) -> None:
        """Replace the selected list by its merge of overlapping/adjacent spells."""
        mapping, key = self._resolve(selector, "merge_spells")
        spells = mapping.get(key)
        if not spells:
            return

        merged = merge_spell_list(spells)
        mapping[key] = merged
        logger.debug("Merged %d spells into %d for %s", len(spells), len(merged), selector)

    def deactivate(self, onset: Any, terminus: Any, selector: Selector) -> None:
        """Remove activity inside ``[onset, terminus)`` for the selected element."""
        mapping, key = self._resolve(selector, "deactivate")
        if key in mapping:
            mapping[key] = subtract_interval(mapping[key], onset, terminus)

    def replace_edge_spells(self, edge: Edge, spells: Iterable[Spell]) -> None:
        """
        Overwrite the spells of an edge with ``spells`` (sorted on store).

        The edge is created in the static network if absent, as with
        :meth:`add_spell`.

        Raises
        ------
        MissingSelector
            If edge is not an Edge selector
        GraphConstructionError
            If an endpoint is outside the network
        """
        if not isinstance(edge, Edge):
            raise MissingSelector(edge, function="replace_edge_spells")
        self.network.add_edge(edge.tail, edge.head)
        key = self.network.normalize_edge(edge.tail, edge.head)
        self._edge_spells[key] = sorted(spells)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_spells(self, selector: Selector) -> List[Spell]:
        """Copy of the spells of the selected element (empty if none)."""
        mapping, key = self._resolve(selector, "get_spells")
        return list(mapping.get(key, ()))

    def is_active_at(self, at: Any, selector: Selector) -> bool:
        mapping, key = self._resolve(selector, "is_active_at")
        return any_active_at(mapping.get(key, ()), at)

    def is_active_over(self, onset: Any, terminus: Any, selector: Selector, rule: str = RULE_ANY) -> bool:
        validate_rule(rule, function="is_active_over")
        mapping, key = self._resolve(selector, "is_active_over")
        return any_active_over(mapping.get(key, ()), onset, terminus, rule)

    def activity_range(self, selector: Selector) -> Optional[Tuple[Any, Any]]:
        """``(earliest onset, latest terminus)``, or None if the element has no spells."""
        mapping, key = self._resolve(selector, "activity_range")
        spells = mapping.get(key)
        if not spells:
            return None
        return (min(s.onset for s in spells), max(s.terminus for s in spells))

    def active_vertices(self, at: Any) -> List[int]:
        """Vertex ids active at ``at``, ascending."""
        return [
            v for v in self.network.vertices()
            if any_active_at(self._vertex_spells.get(v, ()), at)
        ]

    def active_vertices_over(self, onset: Any, terminus: Any, rule: str = RULE_ANY) -> List[int]:
        """
        Vertex ids active during ``[onset, terminus]`` under ``rule``, ascending.

        Raises
        ------
        InvalidRule
            If rule is not ``"any"`` or ``"all"``
        InvalidInterval
            If ``onset > terminus``, whatever the network holds
        """
        validate_rule(rule, function="active_vertices_over")
        window = Spell(onset, terminus)
        return [
            v for v in self.network.vertices()
            if _active_over_window(self._vertex_spells.get(v, ()), window, rule)
        ]

    def active_edges(self, at: Any) -> List[EdgeKey]:
        """Normalized edge keys active at ``at``; order is not guaranteed."""
        return [
            edge for edge, spells in self._edge_spells.items()
            if any_active_at(spells, at)
        ]

    def active_edges_over(self, onset: Any, terminus: Any, rule: str = RULE_ANY) -> List[EdgeKey]:
        validate_rule(rule, function="active_edges_over")
        window = Spell(onset, terminus)
        return [
            edge for edge, spells in self._edge_spells.items()
            if _active_over_window(spells, window, rule)
        ]

    def vertex_spells(self) -> Dict[int, List[Spell]]:
        """Copy of the whole vertex -> spells mapping."""
        return {v: list(spells) for v, spells in self._vertex_spells.items()}

    def edge_spells(self) -> Dict[EdgeKey, List[Spell]]:
        """Copy of the whole edge -> spells mapping."""
        return {e: list(spells) for e, spells in self._edge_spells.items()}

    def iter_all_spells(self) -> Iterable[Spell]:
        for spells in self._vertex_spells.values():
            yield from spells
        for spells in self._edge_spells.values():
            yield from spells

    def count_vertex_spells(self) -> int:
        return sum(len(spells) for spells in self._vertex_spells.values())

    def count_edge_spells(self) -> int:
        return sum(len(spells) for spells in self._edge_spells.values())
