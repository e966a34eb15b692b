"""Improved Euler (Heun) method."""

from __future__ import annotations

from ..core import ODEFunction
from .core import Trajectory, integrate_fixed_step


def heun_step(f: ODEFunction, x: float, y: float, h: float) -> float:
    """One predictor-corrector step of width ``h``."""
    y_predictor = y + h * f(x, y)
    y_corrector = y + h * f(x + h, y_predictor)
    return (y_predictor + y_corrector) / 2.0


def improved_euler(f: ODEFunction, x0: float, y0: float, h: float, xn: float) -> Trajectory:
    """Solve ``dy/dx = f(x, y)``, ``y(x0) = y0`` on ``[x0, xn]`` with Heun's method.

    Second-order accurate: the global error scales like ``h**2``.

    Raises:
        InvalidInput: If ``h <= 0`` or ``xn <= x0``.
    """
    return integrate_fixed_step(heun_step, f, x0, y0, h, xn)


__all__ = ["heun_step", "improved_euler"]
