"""
Common utilities for the netdynamic library.

- Custom exception hierarchy
- Logging configuration
- Vertex re-index mapping for extracted snapshots
- Spell table validation
"""

from .exceptions import (
    DynamicNetworkError,
    ValidationError,
    InvalidInterval,
    DataFormatError,
    ConfigurationError,
    InvalidRule,
    MissingSelector,
    GraphConstructionError,
    validate_parameter,
    require_positive
)

from .id_mapper import IDMapper
from .validators import validate_spell_dataframe

from .logging_config import (
    setup_logging,
    get_logger,
    log_function_entry,
    log_performance_metric,
    LoggingTimer,
    JSONFormatter,
    PerformanceFilter
)
