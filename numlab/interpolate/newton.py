"""Newton form of the interpolating polynomial via divided differences."""

from __future__ import annotations

import numpy as np

from ..core import ArrayLike
from .utils import validate_nodes


def divided_differences(xs: ArrayLike, ys: ArrayLike) -> np.ndarray:
    """Return the Newton coefficients ``[f[x0], f[x0,x1], ..., f[x0..x_{n-1}]]``.

    Builds the full triangular divided-difference table in O(n^2) and
    returns its top row.

    Example:
        >>> divided_differences([0.0, 1.0, 2.0], [1.0, 3.0, 7.0])
        array([1., 2., 1.])
    """
    x_arr, y_arr = validate_nodes(xs, ys)
    n = x_arr.size
    table = np.zeros((n, n), dtype=float)
    table[:, 0] = y_arr
    for j in range(1, n):
        for i in range(n - j):
            table[i, j] = (table[i + 1, j - 1] - table[i, j - 1]) / (x_arr[i + j] - x_arr[i])
    return table[0].copy()


def newton_interpolation(xs: ArrayLike, ys: ArrayLike, x: float) -> float:
    """Evaluate the Newton form ``sum_k c_k prod_{i<k} (x - xs[i])`` at ``x``.

    Same polynomial as :func:`~numlab.interpolate.lagrange_interpolation`
    for identical nodes; the two agree up to rounding.

    Raises:
        InvalidInput: If the lengths differ, no node is given, or ``xs`` has
            duplicates.
    """
    x_arr, _ = validate_nodes(xs, ys)
    coeffs = divided_differences(xs, ys)
    x = float(x)

    result = coeffs[0]
    product = 1.0
    for i in range(1, coeffs.size):
        product *= x - x_arr[i - 1]
        result += coeffs[i] * product
    return float(result)


__all__ = ["divided_differences", "newton_interpolation"]
