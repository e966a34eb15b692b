"""Linear least-squares fitting."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..core import ArrayLike, as_float_vector
from ..errors import InvalidInput


def linear_fit(xs: ArrayLike, ys: ArrayLike) -> Tuple[float, float]:
    """Fit ``y = a + b x`` by ordinary least squares.

    Solves the 2x2 normal equations in closed form:
    ``b = (n Sxy - Sx Sy) / (n Sxx - Sx^2)`` and ``a = (Sy - b Sx) / n``.

    Args:
        xs: Abscissas.
        ys: Ordinates, same length as ``xs``.

    Returns:
        Tuple ``(a, b)`` of intercept and slope.

    Raises:
        InvalidInput: If the arrays differ in length, are empty, or all
            ``xs`` coincide (singular normal equations).
    """
    x_arr = as_float_vector(xs, "xs")
    y_arr = as_float_vector(ys, "ys")
    n = x_arr.size
    if n != y_arr.size or n == 0:
        raise InvalidInput("xs and ys must have equal, non-zero length.")

    if np.all(x_arr == x_arr[0]):
        raise InvalidInput("Cannot fit a line: all xs are identical.")

    sum_x = float(x_arr.sum())
    sum_y = float(y_arr.sum())
    sum_xy = float(x_arr @ y_arr)
    sum_x2 = float(x_arr @ x_arr)
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0.0:
        raise InvalidInput("Cannot fit a line: all xs are identical.")

    b = (n * sum_xy - sum_x * sum_y) / denominator
    a = (sum_y - b * sum_x) / n
    return a, b


__all__ = ["linear_fit"]
