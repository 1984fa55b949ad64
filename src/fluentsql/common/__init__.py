"""Common utilities and exceptions for fluentsql.

Exception Design:
    The exception system uses error codes for categorization. All exceptions
    inherit from FluentSQLError and carry structured error information.
    The two builder chain failures, SequencingError and UnsupportedStepError,
    are separate subclasses so they can be caught individually.
"""

from fluentsql.common.exceptions import (
    ErrorCode,
    FluentSQLError,
    SequencingError,
    UnsupportedStepError,
    # Helper functions
    configuration_error,
    sequencing_error,
    unsupported_step_error,
)

__all__ = [
    # Base Exception and Error Codes
    "FluentSQLError",
    "ErrorCode",
    "SequencingError",
    "UnsupportedStepError",
    # Helper functions
    "configuration_error",
    "sequencing_error",
    "unsupported_step_error",
]
