"""Core types and default tolerances shared across the algorithm families."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Union

import numpy as np

from .errors import InvalidInput

Array = np.ndarray
ArrayLike = Union[Sequence[float], np.ndarray]
ScalarFunction = Callable[[float], float]
ODEFunction = Callable[[float, float], float]

DEFAULT_TOL = 1e-6
DEFAULT_MAX_ITER = 100
NEWTON_MAX_ITER = 50
TRAPEZOID_MAX_ITER = 20

# Divisors below these magnitudes abort the iteration.
PIVOT_TOL = 1e-12
DERIVATIVE_TOL = 1e-12


@dataclass(frozen=True)
class IterationRecord:
    """Snapshot of one iteration of an iterative algorithm.

    Attributes:
        index: Iteration number, starting at 1.
        value: Current approximant. Vector iterates are stored as read-only
            copies so later iterations never alias earlier snapshots.
        error: Error estimate used by the convergence test.
    """

    index: int
    value: Union[float, Array]
    error: float

    @classmethod
    def snapshot(cls, index: int, value: Union[float, Array], error: float) -> "IterationRecord":
        if isinstance(value, np.ndarray):
            frozen = value.copy()
            frozen.setflags(write=False)
            return cls(index=int(index), value=frozen, error=float(error))
        return cls(index=int(index), value=float(value), error=float(error))


def as_float_vector(values: ArrayLike, name: str) -> Array:
    """Convert ``values`` to a 1D float array or raise ``InvalidInput``."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise InvalidInput(f"{name} must be a 1D sequence, got shape {arr.shape}.")
    return arr


__all__ = [
    "Array",
    "ArrayLike",
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOL",
    "DERIVATIVE_TOL",
    "IterationRecord",
    "NEWTON_MAX_ITER",
    "ODEFunction",
    "PIVOT_TOL",
    "ScalarFunction",
    "TRAPEZOID_MAX_ITER",
    "as_float_vector",
]
