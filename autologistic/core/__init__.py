"""
Core infrastructure for autologistic.

Shared abstractions used by the unary and model subpackages.

Key components:
    protocols: UnaryComponent protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device selection and tolerance tiers
"""

from autologistic.core.protocols import UnaryComponent
from autologistic.core.exceptions import (
    AutologisticError,
    ValidationError,
    DimensionMismatch,
    UnrecognizedKindError,
    ImmutableValueError,
)

__all__ = [
    # Protocols
    "UnaryComponent",
    # Exceptions
    "AutologisticError",
    "ValidationError",
    "DimensionMismatch",
    "UnrecognizedKindError",
    "ImmutableValueError",
]
