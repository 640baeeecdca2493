"""
Temporal building blocks: activity spells and time-varying attributes.
"""

from .spell import Spell, spell_overlap, spell_duration, spell_intersection
from .attributes import TimeVaryingAttribute, AttributeStore
