"""Jacobi and Gauss-Seidel stationary iterations for ``A x = b``."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ..core import DEFAULT_MAX_ITER, DEFAULT_TOL, ArrayLike, IterationRecord
from ..diagnostics import trace_iteration
from ..logging import get_logger
from .core import SolveResult
from .utils import check_pivot, infinity_norm, validate_system

logger = get_logger(__name__)

Sweep = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]


def _jacobi_sweep(A: np.ndarray, b: np.ndarray, x_old: np.ndarray) -> np.ndarray:
    n = b.size
    x_new = np.empty(n, dtype=float)
    for i in range(n):
        check_pivot(i, A[i, i])
        sigma = A[i, :i] @ x_old[:i] + A[i, i + 1 :] @ x_old[i + 1 :]
        x_new[i] = (b[i] - sigma) / A[i, i]
    return x_new


def _gauss_seidel_sweep(A: np.ndarray, b: np.ndarray, x_old: np.ndarray) -> np.ndarray:
    n = b.size
    x_new = x_old.copy()
    for i in range(n):
        check_pivot(i, A[i, i])
        # x_new[:i] already holds this sweep's values, x_new[i+1:] the previous ones.
        sigma = A[i, :i] @ x_new[:i] + A[i, i + 1 :] @ x_new[i + 1 :]
        x_new[i] = (b[i] - sigma) / A[i, i]
    return x_new


def _iterate(
    method: str,
    sweep: Sweep,
    A: ArrayLike,
    b: ArrayLike,
    x0: Optional[ArrayLike],
    tol: float,
    max_iter: int,
) -> SolveResult:
    mat, rhs, x = validate_system(A, b, x0, tol, max_iter)
    history: list[IterationRecord] = []
    error = float("inf")

    for it in range(1, max_iter + 1):
        x_new = sweep(mat, rhs, x)
        error = infinity_norm(x_new - x)
        record = IterationRecord.snapshot(it, x_new, error)
        history.append(record)
        trace_iteration(logger, method, record)
        x = x_new
        if error < tol:
            return SolveResult(
                x=x,
                converged=True,
                nit=it,
                error=error,
                message="Update tolerance satisfied.",
                history=history,
            )

    logger.info("%s stopped after %d iterations without meeting tol=%g", method, max_iter, tol)
    return SolveResult(
        x=x,
        converged=False,
        nit=len(history),
        error=error,
        message="Maximum iterations reached.",
        history=history,
    )


def jacobi(
    A: ArrayLike,
    b: ArrayLike,
    x0: Optional[ArrayLike] = None,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> SolveResult:
    """Solve ``A x = b`` with the Jacobi iteration.

    Every component of the new iterate is computed from the previous full
    iterate: ``x_i <- (b_i - sum_{j != i} A_ij x_j) / A_ii``.

    Parameters
    ----------
    A:
        Square coefficient matrix with a non-zero diagonal.
    b:
        Right-hand side.
    x0:
        Initial guess; zeros when omitted.
    tol:
        Tolerance on ``max_i |x_i^(k) - x_i^(k-1)|``.
    max_iter:
        Maximum number of sweeps.

    Returns
    -------
    SolveResult
        Final iterate and per-sweep history; ``converged`` is False when
        ``max_iter`` sweeps did not meet ``tol``.

    Raises
    ------
    InvalidInput
        On shape mismatches, ``tol <= 0`` or ``max_iter < 0``.
    SingularPivot
        If some ``|A_ii| < 1e-12``.
    """
    return _iterate("jacobi", _jacobi_sweep, A, b, x0, tol, max_iter)


def gauss_seidel(
    A: ArrayLike,
    b: ArrayLike,
    x0: Optional[ArrayLike] = None,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
) -> SolveResult:
    """Solve ``A x = b`` with the Gauss-Seidel iteration.

    Same update as :func:`jacobi`, but components ``j < i`` already updated
    in the current sweep are used immediately. Arguments, return value and
    errors are those of :func:`jacobi`.
    """
    return _iterate("gauss_seidel", _gauss_seidel_sweep, A, b, x0, tol, max_iter)


__all__ = ["gauss_seidel", "jacobi"]
