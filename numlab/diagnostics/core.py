"""Diagnostic helpers for iterative numerical algorithms."""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

from ..core import IterationRecord
from ..errors import NumericalError
from .debug_mode import is_debug_enabled


def assert_finite(value: Union[float, np.ndarray], name: str = "value") -> None:
    """
    Raise if ``value`` contains NaN or infinite entries.

    Parameters
    ----------
    value:
        Scalar or array to check.
    name:
        Label used in the error message.

    Raises
    ------
    NumericalError
        If any entry is not finite.
    """
    arr = np.asarray(value, dtype=float)
    if not np.all(np.isfinite(arr)):
        raise NumericalError(f"{name} contains non-finite entries: {value!r}")


def error_ratios(errors: Sequence[float]) -> np.ndarray:
    """
    Return successive contraction factors ``errors[k-1] / errors[k]``.

    A composite trapezoid rule refined by panel doubling has ratios near 4,
    Simpson-like schemes near 16. Entries where the later error is zero are
    reported as ``inf``.

    Parameters
    ----------
    errors:
        Error estimates in iteration order.

    Returns
    -------
    np.ndarray
        Array of length ``len(errors) - 1`` (empty for fewer than 2 errors).
    """
    errs = np.abs(np.asarray(errors, dtype=float))
    if errs.size < 2:
        return np.array([], dtype=float)
    prev, curr = errs[:-1], errs[1:]
    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = np.where(curr == 0.0, np.inf, prev / np.where(curr == 0.0, 1.0, curr))
    return ratios


def trace_iteration(logger: logging.Logger, method: str, record: IterationRecord) -> None:
    """Log ``record`` and reject non-finite iterates while debug mode is on."""
    if not is_debug_enabled():
        return
    logger.debug("%s iteration %d: value=%s error=%.3e", method, record.index, record.value, record.error)
    assert_finite(record.value, name=f"{method} iterate {record.index}")
