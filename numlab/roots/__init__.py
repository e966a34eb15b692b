"""Root finding for scalar equations ``f(x) = 0``.

Both solvers return a :class:`RootResult`; running out of iterations is not
an error, it is reported through ``converged=False``.

Example
-------
>>> from numlab.roots import bisection, newton_method
>>> res = newton_method(lambda x: x**2 - 4, lambda x: 2 * x, 1.0)
>>> res.converged, round(res.root, 8)
(True, 2.0)
"""

from .bisection import bisection
from .core import RootResult
from .newton import newton_method

__all__ = ["RootResult", "bisection", "newton_method"]
