"""Result containers and shared helpers for the quadrature routines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from ..core import ScalarFunction
from ..errors import InvalidInput

RombergTable = Tuple[Tuple[float, ...], ...]


@dataclass(frozen=True)
class TrapezoidIteration:
    """Progress report of the adaptive trapezoid rule.

    Attributes:
        panels: Number of trapezoid panels of this estimate.
        value: Composite trapezoid estimate.
        error: ``|T(2n) - T(n)|``; the initial estimate carries a nominal
            ``0.1 (b - a)`` since there is nothing to compare it with.
        iteration: 0 for the single-panel estimate, then 1, 2, ...
    """

    panels: int
    value: float
    error: float
    iteration: int


TrapezoidCallback = Callable[[TrapezoidIteration], None]


@dataclass
class QuadratureResult:
    """Converged outcome of :func:`adaptive_composite_trapezoid`."""

    value: float
    error: float
    panels: int
    nit: int
    history: List[TrapezoidIteration] = field(default_factory=list)

    def __float__(self) -> float:
        return self.value


@dataclass
class RombergResult:
    """Outcome of :func:`romberg_integration_with_table`.

    Attributes:
        value: Accepted extrapolation, or ``R[n_max][n_max]`` when the
            tolerance was never met.
        table: Lower-triangular Romberg table; row ``i`` has ``i + 1``
            entries except possibly the last row after an early exit.
        converged: Whether some ``|R[i][j] - R[i-1][j-1]|`` fell below tol.
        error: The last such difference computed.
    """

    value: float
    table: RombergTable
    converged: bool
    error: float

    @property
    def rows(self) -> int:
        return len(self.table)

    def __float__(self) -> float:
        return self.value


def trapezoid_single_panel(f: ScalarFunction, a: float, b: float) -> float:
    """Trapezoid estimate with one panel, ``(b - a) / 2 (f(a) + f(b))``."""
    return (b - a) / 2.0 * (f(a) + f(b))


def trapezoid_refine(f: ScalarFunction, a: float, b: float, previous: float, panels: int) -> float:
    """Halve the panel width of a composite trapezoid estimate.

    Given ``previous = T(panels)``, returns ``T(2 panels)`` using only the
    ``panels`` new odd-indexed nodes: ``T(2n) = T(n)/2 + h * sum f(odd)``.
    """
    n = 2 * panels
    h = (b - a) / n
    odd_sum = 0.0
    for i in range(1, n, 2):
        odd_sum += f(a + i * h)
    return previous / 2.0 + h * odd_sum


def validate_interval(a: float, b: float, tol: float) -> Tuple[float, float]:
    a = float(a)
    b = float(b)
    if not a < b:
        raise InvalidInput(f"Integration interval must satisfy a < b, got a={a}, b={b}.")
    if not tol > 0:
        raise InvalidInput(f"tol must be positive, got {tol}.")
    return a, b


__all__ = [
    "QuadratureResult",
    "RombergResult",
    "RombergTable",
    "TrapezoidCallback",
    "TrapezoidIteration",
    "trapezoid_refine",
    "trapezoid_single_panel",
    "validate_interval",
]
