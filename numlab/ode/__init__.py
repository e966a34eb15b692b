"""
Fixed-step solvers for scalar initial-value problems ``dy/dx = f(x, y)``.

* `improved_euler` – Heun's predictor-corrector method, second order.
* `runge_kutta4` – classical four-stage Runge-Kutta, fourth order.

Every call starts afresh at ``(x0, y0)`` and returns a `Trajectory`.

Example
-------
>>> import math
>>> from numlab.ode import runge_kutta4
>>> traj = runge_kutta4(lambda x, y: y, 0.0, 1.0, 0.01, 1.0)
>>> len(traj)
101
>>> abs(traj.final[1] - math.e) < 1e-9
True
"""

from .core import Trajectory, integrate_fixed_step
from .euler import heun_step, improved_euler
from .runge_kutta import rk4_step, runge_kutta4

__all__ = [
    "Trajectory",
    "heun_step",
    "improved_euler",
    "integrate_fixed_step",
    "rk4_step",
    "runge_kutta4",
]
