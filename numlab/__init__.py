"""numlab - classical numerical-analysis algorithms for teaching and visualization."""

__version__ = "0.1.0"

# Shared types and defaults
from .core import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOL,
    DERIVATIVE_TOL,
    NEWTON_MAX_ITER,
    PIVOT_TOL,
    TRAPEZOID_MAX_ITER,
    IterationRecord,
)

# Diagnostics
from .diagnostics import (
    assert_finite,
    debug_context,
    error_ratios,
    is_debug_enabled,
    set_debug_enabled,
)

# Errors
from .errors import (
    DerivativeTooSmall,
    InvalidInput,
    NotConverged,
    NumericalError,
    PreconditionViolation,
    SingularPivot,
)

# Numerical integration
from .integrate import (
    FunctionRange,
    QuadratureResult,
    RombergResult,
    TrapezoidIteration,
    adaptive_composite_trapezoid,
    calculate_function_range,
    generate_function_curve_data,
    generate_integral_area_data,
    romberg_integration,
    romberg_integration_with_table,
)

# Interpolation and fitting
from .interpolate import (
    divided_differences,
    lagrange_interpolation,
    linear_fit,
    newton_interpolation,
)

# Iterative linear solvers
from .linalg import (
    SolveResult,
    gauss_seidel,
    infinity_norm,
    is_diagonally_dominant,
    jacobi,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Initial-value ODE solvers
from .ode import Trajectory, improved_euler, runge_kutta4

# Root finding
from .roots import RootResult, bisection, newton_method

__all__ = [
    "__version__",
    # core
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOL",
    "DERIVATIVE_TOL",
    "IterationRecord",
    "NEWTON_MAX_ITER",
    "PIVOT_TOL",
    "TRAPEZOID_MAX_ITER",
    # diagnostics
    "assert_finite",
    "debug_context",
    "error_ratios",
    "is_debug_enabled",
    "set_debug_enabled",
    # errors
    "DerivativeTooSmall",
    "InvalidInput",
    "NotConverged",
    "NumericalError",
    "PreconditionViolation",
    "SingularPivot",
    # integrate
    "FunctionRange",
    "QuadratureResult",
    "RombergResult",
    "TrapezoidIteration",
    "adaptive_composite_trapezoid",
    "calculate_function_range",
    "generate_function_curve_data",
    "generate_integral_area_data",
    "romberg_integration",
    "romberg_integration_with_table",
    # interpolate
    "divided_differences",
    "lagrange_interpolation",
    "linear_fit",
    "newton_interpolation",
    # linalg
    "SolveResult",
    "gauss_seidel",
    "infinity_norm",
    "is_diagonally_dominant",
    "jacobi",
    # logging
    "configure_logging",
    "get_logger",
    "set_log_level",
    # ode
    "Trajectory",
    "improved_euler",
    "runge_kutta4",
    # roots
    "RootResult",
    "bisection",
    "newton_method",
]
