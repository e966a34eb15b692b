"""Newton-Raphson iteration for scalar roots."""

from __future__ import annotations

from ..core import DEFAULT_TOL, DERIVATIVE_TOL, NEWTON_MAX_ITER, IterationRecord, ScalarFunction
from ..diagnostics import trace_iteration
from ..errors import DerivativeTooSmall, InvalidInput
from ..logging import get_logger
from .core import RootResult

logger = get_logger(__name__)


def newton_method(
    f: ScalarFunction,
    f_prime: ScalarFunction,
    x0: float,
    tol: float = DEFAULT_TOL,
    max_iter: int = NEWTON_MAX_ITER,
) -> RootResult:
    """Newton's method ``x <- x - f(x) / f'(x)`` started from ``x0``.

    Converged when two successive iterates differ by less than ``tol``; the
    newer iterate is returned.

    Raises:
        InvalidInput: If ``tol <= 0`` or ``max_iter < 1``.
        DerivativeTooSmall: If ``|f'(x)| < 1e-12`` at any iterate.
    """
    if not tol > 0:
        raise InvalidInput("tol must be positive.")
    if max_iter < 1:
        raise InvalidInput("max_iter must be at least 1.")

    x = float(x0)
    history: list[IterationRecord] = []
    step = float("inf")
    for it in range(1, max_iter + 1):
        fx = f(x)
        dfx = f_prime(x)
        if abs(dfx) < DERIVATIVE_TOL:
            raise DerivativeTooSmall(x, dfx)

        x_new = x - fx / dfx
        step = abs(x_new - x)
        record = IterationRecord.snapshot(it, x_new, step)
        history.append(record)
        trace_iteration(logger, "newton", record)

        if step < tol:
            return RootResult(
                root=float(x_new),
                converged=True,
                nit=it,
                error=step,
                message="Step tolerance satisfied.",
                history=history,
            )
        x = float(x_new)

    logger.info("newton_method stopped after %d iterations without meeting tol=%g", max_iter, tol)
    return RootResult(
        root=x,
        converged=False,
        nit=max_iter,
        error=step,
        message="Maximum iterations reached.",
        history=history,
    )


__all__ = ["newton_method"]
