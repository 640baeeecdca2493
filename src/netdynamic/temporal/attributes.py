"""
Time-varying attributes (TEAs).

A time-varying attribute is a step function over time, stored as an
insertion-ordered series of ``(value, spell)`` pairs. The series is neither
sorted nor checked for overlap. A lookup at time ``t`` returns the value of
the *first* pair, in insertion order, whose spell contains ``t``: when pairs
overlap, the earliest inserted one wins.
"""

from typing import Any, Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from .spell import Spell

V = TypeVar("V")


class TimeVaryingAttribute(Generic[V]):
    """
    Parallel sequences of values and the spells during which they hold.

    Examples
    --------
    >>> tea = TimeVaryingAttribute()
    >>> tea.append("low", Spell(0, 10))
    >>> tea.append("high", Spell(5, 20))
    >>> tea.value_at(7)
    'low'
    >>> tea.value_at(12)
    'high'
    >>> tea.value_at(25) is None
    True
    """

    def __init__(self) -> None:
        self.values: List[V] = []
        self.spells: List[Spell] = []

    def append(self, value: V, spell: Spell) -> None:
        self.values.append(value)
        self.spells.append(spell)

    def value_at(self, at: Any) -> Optional[V]:
        for value, spell in zip(self.values, self.spells):
            if spell.contains_point(at):
                return value
        return None

    def items(self) -> List[Tuple[V, Spell]]:
        return list(zip(self.values, self.spells))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Tuple[V, Spell]]:
        return iter(self.items())

    def __repr__(self) -> str:
        return f"TimeVaryingAttribute(n_values={len(self)})"


class AttributeStore:
    """
    Time-varying attribute series keyed by ``(element, attribute name)``.

    The element is a vertex id or a normalized edge key; the store itself
    does not care which. Attribute names are plain strings and values may be
    of any type, independently per series.
    """

    def __init__(self) -> None:
        self._series: Dict[Tuple[Hashable, str], TimeVaryingAttribute] = {}

    def set_active(
        self,
        key: Hashable,
        name: str,
        value: Any,
        onset: Any,
        terminus: Any
    ) -> None:
        """
        Append ``(value, Spell(onset, terminus))`` to the series of ``(key, name)``.

        No overlap checking or merging is performed.

        Raises
        ------
        InvalidInterval
            If ``onset > terminus``
        """
        spell = Spell(onset, terminus)
        series = self._series.setdefault((key, name), TimeVaryingAttribute())
        series.append(value, spell)

    def get_active(self, key: Hashable, name: str, at: Any) -> Optional[Any]:
        """Value of ``(key, name)`` at time ``at``, or None when nothing covers it."""
        series = self._series.get((key, name))
        if series is None:
            return None
        return series.value_at(at)

    def get_series(self, key: Hashable, name: str) -> List[Tuple[Any, Spell]]:
        """Copy of the ``(value, spell)`` pairs for ``(key, name)``; empty if unknown."""
        series = self._series.get((key, name))
        return series.items() if series is not None else []

    def attribute_names(self) -> List[str]:
        """Distinct attribute names across all keys, in first-seen order."""
        names: Dict[str, None] = {}
        for _, name in self._series:
            names.setdefault(name, None)
        return list(names)
