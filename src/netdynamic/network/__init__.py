"""
Static and dynamic networks.

- StaticNetwork: networkit graph plus static vertex attributes
- ActivityStore and DynamicNetwork: vertex/edge spells and activity queries
- Snapshot extraction (point, interval, slice, collapse) and timing summary
- Vertex/edge activity reconciliation
- Conversion from static networks and to/from Polars spell tables
"""

from .static import StaticNetwork
from .activity import (
    ActivityStore,
    Vertex,
    Edge,
    RULE_ANY,
    RULE_ALL,
    VALID_RULES,
    validate_rule,
    merge_spell_list,
    subtract_interval
)
from .dynamic import DynamicNetwork
from .extraction import (
    network_extract,
    network_extract_interval,
    network_slice,
    network_collapse,
    time_grid,
    get_timing_info,
    TimingInfo
)
from .reconciliation import reconcile_activity
from .conversion import (
    as_dynamic_network,
    spells_to_dataframe,
    dynamic_network_from_spells
)
