"""Bisection method for bracketed roots."""

from __future__ import annotations

from ..core import DEFAULT_MAX_ITER, DEFAULT_TOL, IterationRecord, ScalarFunction
from ..diagnostics import trace_iteration
from ..errors import InvalidInput, PreconditionViolation
from ..logging import get_logger
from .core import RootResult

logger = get_logger(__name__)


def bisection(
    f: ScalarFunction,
    a: float,
    b: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = DEFAULT_MAX_ITER,
    ftol: float = 0.0,
) -> RootResult:
    """Find a root of ``f`` in ``[a, b]`` by repeated halving.

    Each iteration evaluates the midpoint ``c`` and keeps ``[a, c]`` if
    ``f(a) f(c) < 0``, otherwise ``[c, b]``. The call converges when
    ``|f(c)| <= ftol`` or the half-width drops below ``tol``.

    Args:
        f: Continuous scalar function.
        a: Left end of the bracket.
        b: Right end of the bracket, ``b > a``.
        tol: Half-width tolerance, must be positive.
        max_iter: Maximum number of halvings, at least 1.
        ftol: Residual tolerance; the default accepts only an exact zero.

    Returns:
        RootResult whose ``error`` is the final half-width. When the budget
        is exhausted ``converged`` is False and ``root`` is the last midpoint.

    Raises:
        InvalidInput: If ``a >= b``, ``tol <= 0`` or ``max_iter < 1``.
        PreconditionViolation: If ``f(a)`` and ``f(b)`` do not differ in sign.
    """
    a = float(a)
    b = float(b)
    if not a < b:
        raise InvalidInput(f"Bracket must satisfy a < b, got a={a}, b={b}.")
    if not tol > 0:
        raise InvalidInput("tol must be positive.")
    if max_iter < 1:
        raise InvalidInput("max_iter must be at least 1.")

    fa = f(a)
    fb = f(b)
    if fa * fb >= 0:
        raise PreconditionViolation(
            f"f(a) and f(b) must have opposite signs, got f({a})={fa}, f({b})={fb}."
        )

    history: list[IterationRecord] = []
    c = a
    half_width = (b - a) / 2.0
    for it in range(1, max_iter + 1):
        c = (a + b) / 2.0
        fc = f(c)
        half_width = (b - a) / 2.0
        record = IterationRecord.snapshot(it, c, half_width)
        history.append(record)
        trace_iteration(logger, "bisection", record)

        if abs(fc) <= ftol or half_width < tol:
            return RootResult(
                root=c,
                converged=True,
                nit=it,
                error=half_width,
                message="Tolerance satisfied.",
                history=history,
            )

        if fa * fc < 0:
            b = c
        else:
            a = c
            fa = fc

    logger.info("bisection stopped after %d iterations without meeting tol=%g", max_iter, tol)
    return RootResult(
        root=c,
        converged=False,
        nit=max_iter,
        error=half_width,
        message="Maximum iterations reached.",
        history=history,
    )


__all__ = ["bisection"]
