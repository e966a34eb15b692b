"""Validation helpers shared by the interpolation routines."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..core import ArrayLike, as_float_vector
from ..errors import InvalidInput


def validate_nodes(xs: ArrayLike, ys: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(xs, ys)`` as float arrays after checking they form valid nodes.

    Raises:
        InvalidInput: If the lengths differ, no node is given, or ``xs``
            contains a repeated abscissa.
    """
    x_arr = as_float_vector(xs, "xs")
    y_arr = as_float_vector(ys, "ys")
    if x_arr.size != y_arr.size:
        raise InvalidInput(f"xs and ys must have the same length, got {x_arr.size} and {y_arr.size}.")
    if x_arr.size == 0:
        raise InvalidInput("At least one interpolation node is required.")
    if np.unique(x_arr).size != x_arr.size:
        raise InvalidInput("xs must not contain duplicate values.")
    return x_arr, y_arr


__all__ = ["validate_nodes"]
