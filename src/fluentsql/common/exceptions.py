from enum import Enum
from typing import Any, Dict, Iterable, Optional


class ErrorCode(Enum):
    """Standard error codes for fluentsql.

    This enum provides categorized error codes so callers can identify the
    failure without matching on message text. Each category uses its own
    prefix.

    Attributes:
        CONFIG_*: Configuration-related errors
        VALIDATION_*: Input validation errors
        BUILDER_*: Errors in how a builder chain was constructed
    """
    # Configuration errors
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_002"
    DIALECT_NOT_SUPPORTED = "CONFIG_003"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_ARGUMENT = "VALIDATION_002"

    # Builder chain errors
    BUILDER_ERROR = "BUILDER_001"
    BUILDER_SEQUENCING = "BUILDER_002"
    BUILDER_UNSUPPORTED_STEP = "BUILDER_003"


class FluentSQLError(Exception):
    """Base exception for all fluentsql errors.

    Uses error codes for categorization. The two builder chain failures get
    their own subclasses so callers can catch them separately.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUILDER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize fluentsql error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from fluentsql.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={
                "error_code": error_code.value,
                "details": self.details,
            },
            exc_info=cause,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "FluentSQLError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for FluentSQLError

        Returns:
            FluentSQLError instance
        """
        return cls(message=message, error_code=error_code, **kwargs)


class SequencingError(FluentSQLError):
    """A step was called before any statement-initiating step.

    Raised by ``where`` and ``limit`` when the builder has no base query.
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.BUILDER_SEQUENCING)
        super().__init__(message, **kwargs)


class UnsupportedStepError(FluentSQLError):
    """A step is not valid for the current statement kind.

    Raised when ``where`` is called on a statement that cannot be filtered,
    or ``limit`` on a statement that cannot be paginated.
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.BUILDER_UNSUPPORTED_STEP)
        super().__init__(message, **kwargs)


# Helper functions for common error scenarios
def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> FluentSQLError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        FluentSQLError with CONFIG_ERROR code (unless overridden)
    """
    details = kwargs.pop("details", {})
    if config_key:
        details["config_key"] = config_key

    kwargs.setdefault("error_code", ErrorCode.CONFIG_ERROR)
    return FluentSQLError(message=message, details=details, **kwargs)


def sequencing_error(step: str) -> SequencingError:
    """Create the error for a step invoked before any statement was started.

    Args:
        step: Name of the offending builder step

    Returns:
        SequencingError carrying the step name in its details
    """
    return SequencingError(
        f"{step.upper()} requires a statement; call select, insert, update "
        f"or delete first",
        details={"step": step},
    )


def unsupported_step_error(
    step: str,
    query_type: Any,
    allowed: Iterable[Any],
) -> UnsupportedStepError:
    """Create the error for a step that the current statement kind rejects.

    Args:
        step: Name of the offending builder step
        query_type: Current statement kind
        allowed: Statement kinds that accept the step

    Returns:
        UnsupportedStepError describing the allowed kinds
    """
    allowed_names = sorted(getattr(kind, "value", str(kind)) for kind in allowed)
    current = getattr(query_type, "value", str(query_type))
    if len(allowed_names) > 1:
        allowed_text = ", ".join(allowed_names[:-1]) + " or " + allowed_names[-1]
    else:
        allowed_text = allowed_names[0]
    return UnsupportedStepError(
        f"{step.upper()} can be added to {allowed_text} only, not {current}",
        details={
            "step": step,
            "query_type": current,
            "allowed": allowed_names,
        },
    )
