"""
Core protocols for autologistic.

These define structural interfaces that model components must satisfy.
Protocol (structural typing) is used rather than ABC so that any object
with the right methods can act as a component of an ALModel.
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike, NDArray


@runtime_checkable
class UnaryComponent(Protocol):
    """
    Minimal protocol for the unary (node-level) part of an autologistic model.

    A unary component behaves like an n-by-m matrix of α values (n
    observations, m replicates) whose entries are determined by a parameter
    vector. Values are read, never written; they change only when the
    parameters are replaced.
    """

    @property
    def shape(self) -> tuple[int, int]:
        """Logical extent (n, m)."""
        ...

    def get_parameters(self) -> NDArray[np.floating[Any]]:
        """Current parameter vector."""
        ...

    def set_parameters(self, new_parameters: ArrayLike) -> None:
        """Replace the parameter vector."""
        ...

    def materialize(self, backend: str = 'cpu') -> NDArray[np.floating[Any]]:
        """
        Compute the full (n, m) matrix of values.

        This is the explicit bulk-retrieval path. Components must not offer
        an implicit conversion that materializes on every element access.
        """
        ...
