"""Lagrange form of the interpolating polynomial."""

from __future__ import annotations

from ..core import ArrayLike
from .utils import validate_nodes


def lagrange_interpolation(xs: ArrayLike, ys: ArrayLike, x: float) -> float:
    """Evaluate the degree ``n-1`` polynomial through ``n`` nodes at ``x``.

    Uses the classic basis sum
    ``y = sum_i ys[i] * prod_{j != i} (x - xs[j]) / (xs[i] - xs[j])``.

    Args:
        xs: Node abscissas, pairwise distinct.
        ys: Node ordinates, same length as ``xs``.
        x: Evaluation point.

    Returns:
        Value of the interpolating polynomial at ``x``.

    Raises:
        InvalidInput: If the lengths differ, no node is given, or ``xs`` has
            duplicates.

    Example:
        >>> lagrange_interpolation([0.0, 1.0, 2.0], [1.0, 3.0, 7.0], 1.5)
        4.75
    """
    x_arr, y_arr = validate_nodes(xs, ys)
    x = float(x)
    n = x_arr.size

    result = 0.0
    for i in range(n):
        term = y_arr[i]
        for j in range(n):
            if j != i:
                term *= (x - x_arr[j]) / (x_arr[i] - x_arr[j])
        result += term
    return float(result)


__all__ = ["lagrange_interpolation"]
