"""Validation and norm helpers for the iterative linear solvers."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ..core import PIVOT_TOL, ArrayLike, as_float_vector
from ..errors import InvalidInput, SingularPivot


def infinity_norm(vec: ArrayLike) -> float:
    """Return ``max_i |v_i|`` (0.0 for an empty vector)."""
    arr = np.asarray(vec, dtype=float)
    if arr.size == 0:
        return 0.0
    return float(np.max(np.abs(arr)))


def is_diagonally_dominant(mat: ArrayLike, strict: bool = True) -> bool:
    """Check row diagonal dominance ``|A_ii| > sum_{j != i} |A_ij|``.

    With ``strict=False`` equality is accepted. Strict dominance is a
    sufficient condition for Jacobi and Gauss-Seidel convergence.
    """
    arr = np.abs(np.asarray(mat, dtype=float))
    diag = np.diag(arr)
    off = arr.sum(axis=1) - diag
    if strict:
        return bool(np.all(diag > off))
    return bool(np.all(diag >= off))


def check_pivot(row: int, pivot: float) -> None:
    if abs(pivot) < PIVOT_TOL:
        raise SingularPivot(row, pivot)


def validate_system(
    A: ArrayLike,
    b: ArrayLike,
    x0: Optional[ArrayLike],
    tol: float,
    max_iter: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return float copies of ``(A, b, x0)`` after shape and parameter checks.

    ``x0=None`` selects the zero vector.
    """
    try:
        mat = np.array(A, dtype=float)
    except ValueError as exc:
        raise InvalidInput(f"A is not a numeric matrix: {exc}") from exc
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise InvalidInput(f"A must be a square 2D matrix, got shape {mat.shape}.")
    n = mat.shape[0]
    if n == 0:
        raise InvalidInput("A must not be empty.")
    rhs = as_float_vector(b, "b").copy()
    if rhs.size != n:
        raise InvalidInput(f"b must have length {n}, got {rhs.size}.")
    if x0 is None:
        guess = np.zeros(n, dtype=float)
    else:
        guess = as_float_vector(x0, "x0").copy()
        if guess.size != n:
            raise InvalidInput(f"x0 must have length {n}, got {guess.size}.")
    if not tol > 0:
        raise InvalidInput(f"tol must be positive, got {tol}.")
    if max_iter < 0:
        raise InvalidInput(f"max_iter must be >= 0, got {max_iter}.")
    return mat, rhs, guess


__all__ = [
    "check_pivot",
    "infinity_norm",
    "is_diagonally_dominant",
    "validate_system",
]
