"""Debug mode switch for iteration tracing.

Debug mode gates ``numlab.diagnostics.trace_iteration``, which the bisection,
Newton, adaptive trapezoid, Romberg, Jacobi and Gauss-Seidel loops call once
per iteration. While it is on, every ``IterationRecord`` is logged at DEBUG on
the algorithm's logger, and a NaN or infinite iterate raises
``NumericalError`` instead of flowing into the next step.

The initial state comes from the ``NUMLAB_DEBUG`` environment variable
(``1``, ``true``, ``yes`` or ``on``, case-insensitive).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "NUMLAB_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return True while iterative solvers trace and finiteness-check each iterate."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn iteration tracing on or off for the whole process."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """Temporarily set debug mode, restoring the previous state on exit.

    Example
    -------
    >>> from numlab import bisection
    >>> with debug_context():
    ...     result = bisection(lambda x: x * x - 2.0, 0.0, 2.0)
    >>> round(result.root, 4)
    1.4142
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)


__all__ = ["debug_context", "is_debug_enabled", "set_debug_enabled"]
