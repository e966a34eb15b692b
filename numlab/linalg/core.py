"""Result container for the stationary iterative solvers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from ..core import IterationRecord


@dataclass
class SolveResult:
    """Outcome of an iterative solve of ``A x = b``.

    Attributes:
        x: Final iterate, returned whether or not the tolerance was met.
        converged: True when the infinity norm of the last update fell
            below tol.
        nit: Number of sweeps performed.
        error: Infinity norm of the last update (``inf`` if no sweep ran).
        message: Human-readable exit reason.
        history: One record per sweep with the full iterate vector.
    """

    x: np.ndarray
    converged: bool
    nit: int
    error: float
    message: str
    history: List[IterationRecord] = field(default_factory=list)


__all__ = ["SolveResult"]
