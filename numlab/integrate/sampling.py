"""Grid sampling helpers used to render integrands and integration areas.

These helpers never raise on a bad sample: evaluations that fail with an
arithmetic or domain error, or that return NaN/inf, are skipped. A step
count below one yields no samples.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core import ScalarFunction

Point = Tuple[float, float]


@dataclass(frozen=True)
class FunctionRange:
    """Padded plot bounds for a function on an interval."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float


def _safe_eval(f: ScalarFunction, x: float) -> Optional[float]:
    try:
        y = float(f(x))
    except (ArithmeticError, ValueError, TypeError):
        return None
    if not math.isfinite(y):
        return None
    return y


def _sample(f: ScalarFunction, start: float, stop: float, steps: int) -> List[Point]:
    points: List[Point] = []
    if steps < 1:
        return points
    span = stop - start
    for i in range(steps + 1):
        x = start + span * (i / steps)
        y = _safe_eval(f, x)
        if y is not None:
            points.append((x, y))
    return points


def calculate_function_range(
    f: ScalarFunction,
    a: float,
    b: float,
    padding: float = 0.1,
    samples: int = 100,
) -> FunctionRange:
    """Sample ``f`` on ``samples + 1`` points of ``[a, b]`` and pad the bounds.

    The x bounds are widened by ``padding * (b - a)`` on each side. The y
    bounds are widened by 10% of the sampled range, or by 0.5 when the range
    is below 0.1. If no sample is finite the y bounds are ``[-0.5, 0.5]``.
    """
    a = float(a)
    b = float(b)
    pad = (b - a) * padding

    ys = [y for _, y in _sample(f, a, b, samples)]
    if ys:
        min_y, max_y = min(ys), max(ys)
    else:
        min_y = max_y = 0.0

    y_range = max_y - min_y
    if y_range < 0.1:
        min_y -= 0.5
        max_y += 0.5
    else:
        min_y -= y_range * 0.1
        max_y += y_range * 0.1

    return FunctionRange(min_x=a - pad, max_x=b + pad, min_y=min_y, max_y=max_y)


def generate_function_curve_data(
    f: ScalarFunction,
    min_x: float,
    max_x: float,
    steps: int = 500,
) -> List[Point]:
    """Return the finite samples of ``f`` on ``steps + 1`` evenly spaced points."""
    return _sample(f, float(min_x), float(max_x), steps)


def generate_integral_area_data(
    f: ScalarFunction,
    a: float,
    b: float,
    steps: int = 500,
) -> List[Point]:
    """Outline of the area under ``f`` on ``[a, b]``, closed along the x axis.

    The sampled curve is prefixed with ``(a, 0)`` and suffixed with ``(b, 0)``
    so the polygon can be filled directly.
    """
    a = float(a)
    b = float(b)
    area = _sample(f, a, b, steps)
    return [(a, 0.0)] + area + [(b, 0.0)]


__all__ = [
    "FunctionRange",
    "calculate_function_range",
    "generate_function_curve_data",
    "generate_integral_area_data",
]
