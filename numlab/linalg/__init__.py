"""Stationary iterative solvers for dense linear systems ``A x = b``.

Example
-------
>>> import numpy as np
>>> from numlab.linalg import gauss_seidel
>>> A = np.array([[4.0, 1.0], [2.0, 5.0]])
>>> res = gauss_seidel(A, np.array([1.0, 2.0]), tol=1e-12)
>>> bool(np.allclose(A @ res.x, [1.0, 2.0]))
True
"""

from .core import SolveResult
from .iterative import gauss_seidel, jacobi
from .utils import infinity_norm, is_diagonally_dominant, validate_system

__all__ = [
    "SolveResult",
    "gauss_seidel",
    "infinity_norm",
    "is_diagonally_dominant",
    "jacobi",
    "validate_system",
]
