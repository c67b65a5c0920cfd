"""
Exception hierarchy for autologistic.

All exceptions inherit from AutologisticError so callers (an optimizer
loop, typically) can catch any library error in one place.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the offending argument with expected vs actual values
    - Errors propagate to the immediate caller; nothing is retried internally
"""

from typing import Any


class AutologisticError(Exception):
    """Base exception for all autologistic errors."""
    pass


class ValidationError(AutologisticError):
    """
    Input validation failed.

    Raised when user-provided inputs fail content checks (non-numeric data,
    non-finite values, invalid coding pairs).
    """
    pass


class DimensionMismatch(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a design tensor and coefficient vector disagree, when a
    boolean mask does not match the axis it selects on, or when model
    components have incompatible shapes.

    Attributes:
        name: Name of the offending argument
        expected: Expected extent or shape
        actual: Observed extent or shape
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.name = name
        self.expected = expected
        self.actual = actual


class UnrecognizedKindError(ValidationError):
    """
    A centering kind is not one of the recognized policies.

    Attributes:
        kind: The value that was supplied
        valid: The accepted values
    """

    def __init__(
        self,
        message: str,
        kind: Any = None,
        valid: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.kind = kind
        self.valid = valid


class ImmutableValueError(AutologisticError):
    """
    Attempted to write a computed value.

    Values of a unary component are derived from its design tensor and
    coefficients; they change only through set_parameters().

    Attributes:
        type_name: Name of the component type that refused the write
    """

    def __init__(self, message: str, type_name: str | None = None):
        super().__init__(message)
        self.type_name = type_name
