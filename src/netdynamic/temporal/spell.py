"""
Activity spells: half-open time intervals ``[onset, terminus)``.

A spell marks when a vertex, an edge or an attribute value is active. Time
values can be any totally ordered type that supports subtraction (int, float,
``datetime``). Spells are immutable; operations that combine spells always
build new values.

Censoring flags record that the observed boundary may not be the true start
or end of activity. They are descriptive metadata only: they take no part in
equality, ordering, overlap, containment or any query.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.exceptions import InvalidInterval


@dataclass(frozen=True, order=True)
class Spell:
    """
    Immutable activity interval ``[onset, terminus)``.

    Parameters
    ----------
    onset : Any
        Start time (inclusive)
    terminus : Any
        End time (exclusive)
    onset_censored : bool, default False
        True if the spell may have started before ``onset``
    terminus_censored : bool, default False
        True if the spell may continue beyond ``terminus``

    Raises
    ------
    InvalidInterval
        If ``onset > terminus``

    Examples
    --------
    >>> s = Spell(0.0, 30.0)
    >>> s.contains_point(10.0)
    True
    >>> s.contains_point(30.0)
    False
    >>> Spell(5, 5).contains_point(5)
    False

    Notes
    -----
    Spells sort by onset, then terminus. Two spells are equal when their
    onset and terminus are equal, whatever their censoring flags.
    """

    onset: Any
    terminus: Any
    onset_censored: bool = field(default=False, compare=False)
    terminus_censored: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.onset > self.terminus:
            raise InvalidInterval(self.onset, self.terminus)

    @property
    def duration(self) -> Any:
        return self.terminus - self.onset

    def contains_point(self, at: Any) -> bool:
        """True iff ``onset <= at < terminus``."""
        return self.onset <= at < self.terminus

    def contains_interval(self, onset: Any, terminus: Any) -> bool:
        """True iff this single spell covers the whole of ``[onset, terminus]``."""
        return self.onset <= onset and self.terminus >= terminus

    def overlaps(self, other: 'Spell') -> bool:
        return spell_overlap(self, other)


def spell_overlap(s1: Spell, s2: Spell) -> bool:
    """
    Check whether two spells share any time.

    Touching spells such as ``[0, 10)`` and ``[10, 20)`` do not overlap.

    Examples
    --------
    >>> spell_overlap(Spell(0, 10), Spell(5, 15))
    True
    >>> spell_overlap(Spell(0, 10), Spell(10, 20))
    False
    """
    return s1.onset < s2.terminus and s2.onset < s1.terminus


def spell_duration(s: Spell) -> Any:
    """Length of a spell, using the time type's subtraction."""
    return s.terminus - s.onset


def spell_intersection(*spells: Spell) -> Optional[Spell]:
    """
    Intersect spells into ``[max(onsets), min(termini))``.

    Returns
    -------
    Optional[Spell]
        The common spell, or None when the intersection has no positive
        duration (disjoint, touching, or a zero-length input)

    Examples
    --------
    >>> spell_intersection(Spell(0, 80), Spell(0, 50), Spell(0, 100))
    Spell(onset=0, terminus=50, onset_censored=False, terminus_censored=False)
    >>> spell_intersection(Spell(0, 10), Spell(10, 20)) is None
    True
    """
    if not spells:
        return None

    start = max(s.onset for s in spells)
    stop = min(s.terminus for s in spells)
    if start < stop:
        return Spell(start, stop)
    return None
