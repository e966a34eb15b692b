"""Diagnostics and debugging utilities for numlab."""

from .core import (
    assert_finite,
    error_ratios,
    trace_iteration,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_finite",
    "error_ratios",
    "trace_iteration",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
