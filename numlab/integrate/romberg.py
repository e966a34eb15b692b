"""Romberg integration: trapezoid halving plus Richardson extrapolation."""

from __future__ import annotations

import numbers

from ..core import IterationRecord, ScalarFunction
from ..diagnostics import trace_iteration
from ..errors import InvalidInput
from ..logging import get_logger
from .core import RombergResult, trapezoid_refine, trapezoid_single_panel, validate_interval

logger = get_logger(__name__)


def _validate_levels(n_max: int) -> int:
    if isinstance(n_max, bool) or not isinstance(n_max, numbers.Integral) or n_max < 1:
        raise InvalidInput(f"n_max must be an integer >= 1, got {n_max!r}.")
    return int(n_max)


def romberg_integration_with_table(
    f: ScalarFunction,
    a: float,
    b: float,
    n_max: int,
    tol: float,
) -> RombergResult:
    """Romberg integration returning the extrapolation table built so far.

    Row ``i`` starts with the composite trapezoid estimate on ``2**i``
    panels, obtained from row ``i - 1`` by the halving recurrence. Further
    columns apply Richardson extrapolation
    ``R[i][j] = R[i][j-1] + (R[i][j-1] - R[i-1][j-1]) / (4**j - 1)``.

    Right after computing each ``R[i][j]`` the call returns if
    ``|R[i][j] - R[i-1][j-1]| < tol``, so the last row of the table may be
    shorter than ``i + 1``. If no entry meets ``tol`` within ``n_max`` rows the
    final diagonal element is returned with ``converged=False``.

    Args:
        f: Integrand.
        a: Lower bound.
        b: Upper bound, ``b > a``.
        n_max: Index of the last row to build, integer >= 1.
        tol: Absolute tolerance, positive.

    Raises:
        InvalidInput: If ``a >= b``, ``n_max`` is not an integer >= 1, or
            ``tol <= 0``.

    Example:
        >>> import math
        >>> res = romberg_integration_with_table(math.sin, 0.0, math.pi, 10, 1e-8)
        >>> res.converged, round(res.value, 8)
        (True, 2.0)
    """
    a, b = validate_interval(a, b, tol)
    n_max = _validate_levels(n_max)

    table: list[tuple[float, ...]] = []
    prev_row = [trapezoid_single_panel(f, a, b)]
    table.append(tuple(prev_row))

    diff = float("inf")
    for i in range(1, n_max + 1):
        row = [trapezoid_refine(f, a, b, prev_row[0], 2 ** (i - 1))]
        for j in range(1, i + 1):
            extrapolated = row[j - 1] + (row[j - 1] - prev_row[j - 1]) / (4**j - 1)
            row.append(extrapolated)
            diff = abs(extrapolated - prev_row[j - 1])
            if diff < tol:
                table.append(tuple(row))
                return RombergResult(value=extrapolated, table=tuple(table), converged=True, error=diff)
        table.append(tuple(row))
        trace_iteration(logger, "romberg", IterationRecord.snapshot(i, row[-1], diff))
        prev_row = row

    logger.info("romberg stopped after %d rows without meeting tol=%g", n_max, tol)
    return RombergResult(value=prev_row[-1], table=tuple(table), converged=False, error=diff)


def romberg_integration(
    f: ScalarFunction,
    a: float,
    b: float,
    n_max: int,
    tol: float,
) -> float:
    """Romberg integration returning only the value.

    See :func:`romberg_integration_with_table` for the algorithm and errors.
    """
    return romberg_integration_with_table(f, a, b, n_max, tol).value


__all__ = ["romberg_integration", "romberg_integration_with_table"]
