"""Trajectory container and the fixed-step driver shared by the ODE solvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Tuple

import numpy as np

from ..core import ODEFunction
from ..errors import InvalidInput

# Remainders below this fraction of h are absorbed into the previous step.
_END_SLACK = 1e-9

Stepper = Callable[[ODEFunction, float, float, float], float]


@dataclass(frozen=True)
class Trajectory:
    """Discrete solution ``(x_k, y_k)`` of an initial-value problem."""

    x: np.ndarray
    y: np.ndarray

    def __len__(self) -> int:
        return int(self.x.size)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for xk, yk in zip(self.x, self.y):
            yield float(xk), float(yk)

    @property
    def final(self) -> Tuple[float, float]:
        """Last point of the trajectory, ``(xn, y(xn))``."""
        return float(self.x[-1]), float(self.y[-1])


def integrate_fixed_step(
    step: Stepper,
    f: ODEFunction,
    x0: float,
    y0: float,
    h: float,
    xn: float,
) -> Trajectory:
    """Advance ``step`` from ``x0`` to ``xn`` on the grid ``x0 + k h``.

    ``step(f, x, y, width)`` must return ``y`` at ``x + width``. The last step
    is shortened so the trajectory ends exactly at ``xn``.
    """
    x0 = float(x0)
    xn = float(xn)
    h = float(h)
    if not np.isfinite([x0, xn, h]).all():
        raise InvalidInput(f"x0, xn and h must be finite, got x0={x0}, xn={xn}, h={h}.")
    if not h > 0:
        raise InvalidInput(f"Step size h must be positive, got {h}.")
    if not xn > x0:
        raise InvalidInput(f"End point xn must exceed x0, got x0={x0}, xn={xn}.")

    xs = [x0]
    ys = [float(y0)]
    x = x0
    y = float(y0)
    k = 0
    while x < xn:
        k += 1
        x_next = x0 + k * h
        if x_next >= xn - _END_SLACK * h:
            x_next = xn
        y = float(step(f, x, y, x_next - x))
        x = x_next
        xs.append(x)
        ys.append(y)

    return Trajectory(x=np.asarray(xs, dtype=float), y=np.asarray(ys, dtype=float))


__all__ = ["Stepper", "Trajectory", "integrate_fixed_step"]
