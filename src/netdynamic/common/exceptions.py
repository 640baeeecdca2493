"""
Custom exception hierarchy for the netdynamic library.

This module defines the exceptions raised by spell construction, activity
queries, snapshot extraction and spell-table conversion. Every exception
inherits from DynamicNetworkError so callers can catch all library errors
with a single except clause.

Hierarchy
---------
DynamicNetworkError
├── ValidationError
│   ├── InvalidInterval
│   └── DataFormatError
├── ConfigurationError
│   ├── InvalidRule
│   └── MissingSelector
└── GraphConstructionError

"No data" outcomes (an empty activity range, a missing attribute value) are
not errors: they are returned as ``None``.
"""

from typing import Dict, Any, Optional, List, Union
import traceback


class DynamicNetworkError(Exception):
    """
    Base exception for all dynamic network errors.

    Parameters
    ----------
    message : str
        Human-readable error message describing what went wrong
    details : Dict[str, Any], optional
        Additional structured information about the error for debugging
        or programmatic handling
    cause : Exception, optional
        The underlying exception that caused this error (for exception chaining)
    context : Dict[str, Any], optional
        Additional context about the operation that failed

    Attributes
    ----------
    message : str
        The error message
    details : Dict[str, Any]
        Additional error details
    cause : Exception, optional
        The underlying cause
    context : Dict[str, Any]
        Operation context

    Examples
    --------
    >>> raise DynamicNetworkError("Extraction failed")
    >>> raise DynamicNetworkError(
    ...     "Unknown vertex",
    ...     details={"vertex": 12, "n_vertices": 10}
    ... )
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        self.message = message
        self.details = details or {}
        self.cause = cause
        self.context = context or {}

        full_message = message

        if self.details:
            detail_parts = []
            for key, value in self.details.items():
                if isinstance(value, (list, dict)) and len(str(value)) > 100:
                    # Truncate long collections
                    detail_parts.append(f"{key}=<{type(value).__name__} with {len(value)} items>")
                else:
                    detail_parts.append(f"{key}={value}")

            if detail_parts:
                full_message += f" (Details: {', '.join(detail_parts)})"

        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            if context_parts:
                full_message += f" (Context: {', '.join(context_parts)})"

        super().__init__(full_message)

        if cause is not None:
            self.__cause__ = cause

    def add_context(self, **kwargs: Any) -> 'DynamicNetworkError':
        """
        Add additional context to the exception.

        Returns
        -------
        DynamicNetworkError
            Self, for method chaining

        Examples
        --------
        >>> error = DynamicNetworkError("Failed")
        >>> error.add_context(operation="network_extract", at=10.0)
        """
        self.context.update(kwargs)
        return self

    def get_debug_info(self) -> Dict[str, Any]:
        """Get all available error information as a dictionary."""
        return {
            "exception_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
            "traceback": traceback.format_exc() if hasattr(self, '__traceback__') else None
        }


class ValidationError(DynamicNetworkError):
    """
    Exception raised for input validation errors.

    Parameters
    ----------
    message : str
        Descriptive error message explaining the validation failure
    field : str, optional
        Name of the field or column that failed validation
    value : Any, optional
        The invalid value that caused the error
    expected : str, optional
        Description of what was expected
    details : Dict[str, Any], optional
        Additional details about the validation failure

    Examples
    --------
    >>> raise ValidationError("Column contains null values", field="onset")
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        expected: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> None:
        self.field = field
        self.value = value
        self.expected = expected

        enhanced_details = details or {}
        if field is not None:
            enhanced_details["field"] = field
        if value is not None:
            enhanced_details["invalid_value"] = value
        if expected is not None:
            enhanced_details["expected"] = expected

        if field:
            enhanced_message = f"Validation error in field '{field}': {message}"
        else:
            enhanced_message = f"Validation error: {message}"

        super().__init__(enhanced_message, details=enhanced_details, **kwargs)


class InvalidInterval(ValidationError):
    """
    Exception raised when a spell is constructed with ``onset > terminus``.

    Parameters
    ----------
    onset : Any
        The requested onset
    terminus : Any
        The requested terminus

    Examples
    --------
    >>> raise InvalidInterval(10.0, 5.0)  # doctest: +SKIP
    InvalidInterval: Validation error: onset must be <= terminus ...
    """

    def __init__(self, onset: Any, terminus: Any, **kwargs) -> None:
        self.onset = onset
        self.terminus = terminus

        details = kwargs.pop("details", None) or {}
        details["onset"] = onset
        details["terminus"] = terminus

        super().__init__(
            "onset must be <= terminus",
            expected="onset <= terminus",
            details=details,
            **kwargs
        )


class DataFormatError(ValidationError):
    """
    Exception raised for malformed spell tables.

    Parameters
    ----------
    message : str
        Description of the format error
    format_type : str, optional
        Expected format (e.g., "DataFrame")
    row : int, optional
        Row index where the problem was found
    """

    def __init__(
        self,
        message: str,
        format_type: Optional[str] = None,
        row: Optional[int] = None,
        **kwargs
    ) -> None:
        details = kwargs.get('details', None) or {}

        if format_type:
            details["format_type"] = format_type
        if row is not None:
            details["row"] = row

        kwargs["details"] = details
        super().__init__(message, **kwargs)


class ConfigurationError(DynamicNetworkError):
    """
    Exception raised for invalid parameter values or combinations.

    Parameters
    ----------
    message : str
        Description of the configuration error
    parameter : str, optional
        Name of the problematic parameter
    value : Any, optional
        The invalid parameter value
    valid_options : List[Any], optional
        List of valid options for the parameter
    function : str, optional
        Name of the function where the error occurred

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "Invalid spell kind",
    ...     parameter="kind",
    ...     value="node",
    ...     valid_options=["vertex", "edge"]
    ... )
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: Optional[Any] = None,
        valid_options: Optional[List[Any]] = None,
        function: Optional[str] = None,
        **kwargs
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.valid_options = valid_options
        self.function = function

        details = kwargs.get('details', None) or {}
        if parameter:
            details["parameter"] = parameter
        if value is not None:
            details["invalid_value"] = value
        if valid_options:
            details["valid_options"] = valid_options
        if function:
            details["function"] = function

        enhanced_message = message
        if parameter and valid_options:
            enhanced_message += f". Valid options for '{parameter}': {valid_options}"

        kwargs["details"] = details
        super().__init__(enhanced_message, **kwargs)


class InvalidRule(ConfigurationError):
    """
    Exception raised when an interval query uses a rule other than
    ``"any"`` or ``"all"``.
    """

    def __init__(self, rule: Any, valid_rules: List[str], **kwargs) -> None:
        self.rule = rule
        super().__init__(
            f"Invalid interval rule: {rule!r}",
            parameter="rule",
            value=rule,
            valid_options=list(valid_rules),
            **kwargs
        )


class MissingSelector(ConfigurationError):
    """
    Exception raised when a vertex/edge-keyed operation is called without
    a Vertex or Edge selector.
    """

    def __init__(self, received: Any = None, function: Optional[str] = None, **kwargs) -> None:
        self.received = received
        details = kwargs.pop("details", None) or {}
        details["received"] = type(received).__name__
        super().__init__(
            "Must specify either a vertex or an edge",
            parameter="selector",
            function=function,
            details=details,
            **kwargs
        )


class GraphConstructionError(DynamicNetworkError):
    """
    Exception raised when the underlying static graph cannot be built or
    modified as requested.

    Parameters
    ----------
    message : str
        Description of the graph construction error
    node_count : int, optional
        Number of vertices in the graph when the error occurred
    operation : str, optional
        Specific operation that failed (e.g., "add_edge", "add_spell")

    Examples
    --------
    >>> raise GraphConstructionError(
    ...     "Vertex 12 is outside the network",
    ...     node_count=10,
    ...     operation="add_edge"
    ... )
    """

    def __init__(
        self,
        message: str,
        node_count: Optional[int] = None,
        operation: Optional[str] = None,
        **kwargs
    ) -> None:
        self.node_count = node_count
        self.operation = operation

        context = kwargs.pop("context", None) or {}
        if node_count is not None:
            context["node_count"] = node_count
        if operation:
            context["operation"] = operation

        super().__init__(message, context=context, **kwargs)


# Convenience functions for common error patterns

def validate_parameter(
    value: Any,
    valid_options: List[Any],
    parameter_name: str,
    function_name: Optional[str] = None
) -> None:
    """
    Validate that a parameter value is in the list of valid options.

    Raises
    ------
    ConfigurationError
        If value is not in valid_options
    """
    if value not in valid_options:
        raise ConfigurationError(
            f"Invalid value for parameter '{parameter_name}': {value}",
            parameter=parameter_name,
            value=value,
            valid_options=valid_options,
            function=function_name
        )


def require_positive(
    value: Union[int, float],
    parameter_name: str,
    allow_zero: bool = False
) -> None:
    """
    Validate that a numeric parameter is positive.

    Parameters
    ----------
    value : Union[int, float]
        The numeric value to validate
    parameter_name : str
        Name of the parameter
    allow_zero : bool, default False
        Whether to allow zero values

    Raises
    ------
    ConfigurationError
        If value is not positive (or non-negative if allow_zero=True)
    """
    if allow_zero and value < 0:
        raise ConfigurationError(
            f"Parameter '{parameter_name}' must be non-negative, got {value}",
            parameter=parameter_name,
            value=value
        )
    elif not allow_zero and value <= 0:
        raise ConfigurationError(
            f"Parameter '{parameter_name}' must be positive, got {value}",
            parameter=parameter_name,
            value=value
        )
