"""
netdynamic - Dynamic network data structures.

Networks whose vertices, edges and attributes are active only during
specific time intervals ("spells"), with point and interval activity
queries, static snapshot extraction and vertex/edge activity reconciliation.

Modules:
    common: Exceptions, logging configuration, ID mapping and validation
    temporal: Spells and time-varying attributes
    network: Static and dynamic networks, extraction, reconciliation, conversion
"""

__version__ = "0.1.0"

from .common.exceptions import (
    DynamicNetworkError,
    ValidationError,
    InvalidInterval,
    DataFormatError,
    ConfigurationError,
    InvalidRule,
    MissingSelector,
    GraphConstructionError,
)
from .common.id_mapper import IDMapper
from .common.logging_config import setup_logging, get_logger
from .temporal import (
    Spell,
    spell_overlap,
    spell_duration,
    spell_intersection,
    TimeVaryingAttribute,
    AttributeStore,
)
from .network import (
    StaticNetwork,
    DynamicNetwork,
    ActivityStore,
    Vertex,
    Edge,
    RULE_ANY,
    RULE_ALL,
    network_extract,
    network_extract_interval,
    network_slice,
    network_collapse,
    time_grid,
    get_timing_info,
    TimingInfo,
    reconcile_activity,
    as_dynamic_network,
    spells_to_dataframe,
    dynamic_network_from_spells,
)

__all__ = [
    "DynamicNetworkError",
    "ValidationError",
    "InvalidInterval",
    "DataFormatError",
    "ConfigurationError",
    "InvalidRule",
    "MissingSelector",
    "GraphConstructionError",
    "IDMapper",
    "setup_logging",
    "get_logger",
    "Spell",
    "spell_overlap",
    "spell_duration",
    "spell_intersection",
    "TimeVaryingAttribute",
    "AttributeStore",
    "StaticNetwork",
    "DynamicNetwork",
    "ActivityStore",
    "Vertex",
    "Edge",
    "RULE_ANY",
    "RULE_ALL",
    "network_extract",
    "network_extract_interval",
    "network_slice",
    "network_collapse",
    "time_grid",
    "get_timing_info",
    "TimingInfo",
    "reconcile_activity",
    "as_dynamic_network",
    "spells_to_dataframe",
    "dynamic_network_from_spells",
]
