"""
Dichotomous states, their numeric coding, and centering policies.

A dichotomous variable has two states ("low" and "high" by default) that
enter the model through a numeric coding pair (lo, hi), typically (-1, 1)
or (0, 1).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray

from autologistic.core.exceptions import UnrecognizedKindError, ValidationError
from autologistic.core.validation import check_coding
from autologistic.model._common import as_response_matrix


DEFAULT_CODING: tuple[float, float] = (-1.0, 1.0)
DEFAULT_LABELS: tuple[str, str] = ('low', 'high')


class CenteringKind(str, Enum):
    """
    Centering policy for the pairwise term.

    NONE: no adjustment
    ONEHALF: subtract 0.5 from every response
    EXPECTATION: subtract the expected response under the unary-only model
    """
    NONE = 'none'
    ONEHALF = 'onehalf'
    EXPECTATION = 'expectation'


def resolve_centering(kind: str | CenteringKind) -> CenteringKind:
    """
    Resolve a centering argument to a CenteringKind member.

    Args:
        kind: A CenteringKind, or its value as a string (case-insensitive)

    Raises:
        UnrecognizedKindError: If kind is not a recognized policy
    """
    if isinstance(kind, CenteringKind):
        return kind
    valid = tuple(k.value for k in CenteringKind)
    if isinstance(kind, str):
        try:
            return CenteringKind(kind.lower())
        except ValueError:
            pass
    raise UnrecognizedKindError(
        f"centering kind not recognized: {kind!r}. Valid kinds: {', '.join(valid)}",
        kind=kind,
        valid=valid,
    )


def make_coded(
    responses: ArrayLike,
    coding: tuple[float, float] = DEFAULT_CODING,
) -> NDArray[np.float64]:
    """
    Convert boolean responses to their coded values.

    Args:
        responses: Boolean array (n,) or (n, m)
        coding: (lo, hi) pair; False maps to lo, True to hi

    Returns:
        Float array (n, m); a 1-D input is treated as one replicate
    """
    lo, hi = check_coding(coding)
    Y = as_response_matrix(responses)
    return np.where(Y, hi, lo)


@dataclass(frozen=True)
class Dichotomous:
    """
    One observed state of a dichotomous variable.

    Attributes:
        value: Numeric value; must be one of the coding values
        coding: (lo, hi) coding pair
        labels: Names of the (low, high) states
    """
    value: float
    coding: tuple[float, float] = DEFAULT_CODING
    labels: tuple[str, str] = DEFAULT_LABELS

    def __post_init__(self) -> None:
        lo, hi = check_coding(self.coding)
        labels = tuple(self.labels)
        if len(labels) != 2 or not all(isinstance(s, str) for s in labels):
            raise ValidationError(f"labels: expected two strings, got {self.labels!r}")
        value = float(self.value)
        if value not in (lo, hi):
            raise ValidationError(
                f"value: {value} is not one of the coding values ({lo}, {hi})"
            )
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'coding', (lo, hi))
        object.__setattr__(self, 'labels', labels)

    @classmethod
    def from_response(
        cls,
        state: bool,
        coding: tuple[float, float] = DEFAULT_CODING,
        labels: tuple[str, str] = DEFAULT_LABELS,
    ) -> Dichotomous:
        """Build from a boolean response (True is the high state)."""
        lo, hi = check_coding(coding)
        return cls(hi if state else lo, (lo, hi), labels)

    @property
    def is_high(self) -> bool:
        return self.value == self.coding[1]

    @property
    def label(self) -> str:
        return self.labels[1] if self.is_high else self.labels[0]

    def __str__(self) -> str:
        return f"{self.label} ({self.value:g})"
