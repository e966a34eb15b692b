"""Polynomial interpolation and linear least-squares fitting.

Example
-------
>>> from numlab.interpolate import lagrange_interpolation, newton_interpolation
>>> xs, ys = [0.0, 1.0, 2.0], [1.0, 3.0, 7.0]
>>> lagrange_interpolation(xs, ys, 1.5)
4.75
>>> newton_interpolation(xs, ys, 1.5)
4.75
"""

from .fit import linear_fit
from .lagrange import lagrange_interpolation
from .newton import divided_differences, newton_interpolation
from .utils import validate_nodes

__all__ = [
    "divided_differences",
    "lagrange_interpolation",
    "linear_fit",
    "newton_interpolation",
    "validate_nodes",
]
