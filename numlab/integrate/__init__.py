"""
Numerical integration on a finite interval.

The module provides:

* `adaptive_composite_trapezoid` – composite trapezoid rule refined by panel
  doubling until successive estimates agree; raises `NotConverged` when the
  iteration budget runs out.
* `romberg_integration_with_table` / `romberg_integration` – Richardson
  extrapolation of the halved trapezoid estimates; returns a best-effort
  value with ``converged=False`` when the table is exhausted.
* Sampling helpers that feed plots of the integrand and the integration area.

Example
-------
>>> import math
>>> from numlab.integrate import adaptive_composite_trapezoid
>>> res = adaptive_composite_trapezoid(lambda x: x**2, 0.0, 1.0, tol=1e-6)
>>> abs(res.value - 1 / 3) < 1e-6
True
"""

from .core import (
    QuadratureResult,
    RombergResult,
    RombergTable,
    TrapezoidIteration,
    trapezoid_refine,
    trapezoid_single_panel,
)
from .romberg import romberg_integration, romberg_integration_with_table
from .sampling import (
    FunctionRange,
    calculate_function_range,
    generate_function_curve_data,
    generate_integral_area_data,
)
from .trapezoid import adaptive_composite_trapezoid

__all__ = [
    "FunctionRange",
    "QuadratureResult",
    "RombergResult",
    "RombergTable",
    "TrapezoidIteration",
    "adaptive_composite_trapezoid",
    "calculate_function_range",
    "generate_function_curve_data",
    "generate_integral_area_data",
    "romberg_integration",
    "romberg_integration_with_table",
    "trapezoid_refine",
    "trapezoid_single_panel",
]
