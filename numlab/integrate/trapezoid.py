"""Composite trapezoid rule with adaptive panel doubling."""

from __future__ import annotations

from typing import Optional

from ..core import TRAPEZOID_MAX_ITER, IterationRecord, ScalarFunction
from ..diagnostics import trace_iteration
from ..errors import InvalidInput, NotConverged
from ..logging import get_logger
from .core import (
    QuadratureResult,
    TrapezoidCallback,
    TrapezoidIteration,
    trapezoid_refine,
    trapezoid_single_panel,
    validate_interval,
)

logger = get_logger(__name__)


def adaptive_composite_trapezoid(
    f: ScalarFunction,
    a: float,
    b: float,
    tol: float,
    max_iter: int = TRAPEZOID_MAX_ITER,
    callback: Optional[TrapezoidCallback] = None,
) -> QuadratureResult:
    """Integrate ``f`` over ``[a, b]`` by doubling the panel count until stable.

    Starts from a single panel and, at each iteration, doubles the number of
    panels reusing the previous estimate so only the new odd-indexed nodes
    are evaluated. The error estimate is ``|T(2n) - T(n)|``; iteration stops
    as soon as it drops below ``tol``.

    Parameters
    ----------
    f:
        Integrand.
    a, b:
        Interval bounds, ``a < b``.
    tol:
        Absolute tolerance on successive estimates, positive.
    max_iter:
        Maximum number of doublings.
    callback:
        Called synchronously with a :class:`TrapezoidIteration` for the
        initial single-panel estimate (iteration 0) and after every
        doubling, in increasing iteration order.

    Returns
    -------
    QuadratureResult
        Accepted estimate together with the reported iteration history.

    Raises
    ------
    InvalidInput
        If ``f`` is not callable, ``a >= b``, ``tol <= 0`` or ``max_iter < 1``.
    NotConverged
        If ``max_iter`` doublings do not meet ``tol``. The exception carries
        the last estimate and its error.
    """
    if not callable(f):
        raise InvalidInput("f must be callable.")
    a, b = validate_interval(a, b, tol)
    if max_iter < 1:
        raise InvalidInput("max_iter must be at least 1.")

    history: list[TrapezoidIteration] = []

    def report(item: TrapezoidIteration) -> None:
        history.append(item)
        if callback is not None:
            callback(item)

    panels = 1
    t_prev = trapezoid_single_panel(f, a, b)
    report(TrapezoidIteration(panels=panels, value=t_prev, error=0.1 * (b - a), iteration=0))

    t_curr = t_prev
    error = float("inf")
    for it in range(1, max_iter + 1):
        t_curr = trapezoid_refine(f, a, b, t_prev, panels)
        panels *= 2
        error = abs(t_curr - t_prev)
        report(TrapezoidIteration(panels=panels, value=t_curr, error=error, iteration=it))
        trace_iteration(logger, "trapezoid", IterationRecord.snapshot(it, t_curr, error))

        if error < tol:
            return QuadratureResult(value=t_curr, error=error, panels=panels, nit=it, history=history)
        t_prev = t_curr

    raise NotConverged(
        f"Tolerance tol={tol} not reached within {max_iter} iterations, last error={error}.",
        value=t_curr,
        error=error,
        nit=max_iter,
    )


__all__ = ["adaptive_composite_trapezoid"]
