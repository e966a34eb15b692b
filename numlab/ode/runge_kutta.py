"""Classical fourth-order Runge-Kutta method."""

from __future__ import annotations

from ..core import ODEFunction
from .core import Trajectory, integrate_fixed_step


def rk4_step(f: ODEFunction, x: float, y: float, h: float) -> float:
    """One classical RK4 step of width ``h``."""
    k1 = f(x, y)
    k2 = f(x + h / 2, y + (h / 2) * k1)
    k3 = f(x + h / 2, y + (h / 2) * k2)
    k4 = f(x + h, y + h * k3)
    return y + (h / 6) * (k1 + 2 * k2 + 2 * k3 + k4)


def runge_kutta4(f: ODEFunction, x0: float, y0: float, h: float, xn: float) -> Trajectory:
    """Solve ``dy/dx = f(x, y)``, ``y(x0) = y0`` on ``[x0, xn]`` with RK4.

    Parameters
    ----------
    f:
        Right-hand side ``f(x, y)``.
    x0, y0:
        Initial condition.
    h:
        Step size, positive.
    xn:
        End of the integration interval, ``xn > x0``.

    Returns
    -------
    Trajectory
        Initial point plus one point per step; the last point sits exactly
        at ``xn``.

    Raises
    ------
    InvalidInput
        If ``h <= 0`` or ``xn <= x0``.
    """
    return integrate_fixed_step(rk4_step, f, x0, y0, h, xn)


__all__ = ["rk4_step", "runge_kutta4"]
