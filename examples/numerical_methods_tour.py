"""
Example: A tour of the numlab algorithm families

Runs one textbook problem per chapter (interpolation, quadrature, ODEs,
root finding, iterative linear solvers) and prints the numbers a teaching
front-end would render.
"""

import math

import numpy as np

from numlab import (
    NotConverged,
    adaptive_composite_trapezoid,
    bisection,
    gauss_seidel,
    improved_euler,
    jacobi,
    lagrange_interpolation,
    linear_fit,
    newton_interpolation,
    newton_method,
    romberg_integration_with_table,
    runge_kutta4,
)


def example_interpolation():
    """Example: Interpolate sin(x) through five nodes."""
    print("=" * 60)
    print("Example 1: Interpolation and Least Squares")
    print("=" * 60)

    xs = np.linspace(0.0, math.pi, 5)
    ys = np.sin(xs)
    x = 1.0
    print(f"Lagrange  p({x}) = {lagrange_interpolation(xs, ys, x):.10f}")
    print(f"Newton    p({x}) = {newton_interpolation(xs, ys, x):.10f}")
    print(f"Exact sin({x}) = {math.sin(x):.10f}")

    a, b = linear_fit([0.0, 1.0, 2.0, 3.0], [1.1, 2.9, 5.2, 6.8])
    print(f"Least-squares line: y = {a:.4f} + {b:.4f} x")
    print()


def example_quadrature():
    """Example: Trapezoid doubling versus Romberg extrapolation."""
    print("=" * 60)
    print("Example 2: Numerical Integration of sin on [0, pi]")
    print("=" * 60)

    def report(item):
        print(f"  n={item.panels:6d}  T={item.value:.10f}  err={item.error:.2e}")

    try:
        res = adaptive_composite_trapezoid(math.sin, 0.0, math.pi, tol=1e-6, callback=report)
        print(f"Trapezoid: {res.value:.10f} after {res.nit} doublings")
    except NotConverged as exc:
        print(f"Trapezoid did not converge, last value {exc.value:.10f}")

    romberg = romberg_integration_with_table(math.sin, 0.0, math.pi, 10, 1e-10)
    print(f"Romberg:   {romberg.value:.10f} using {romberg.rows} rows")
    for row in romberg.table:
        print("  " + "  ".join(f"{v:.8f}" for v in row))
    print()


def example_ode():
    """Example: y' = y, y(0) = 1 on [0, 1]."""
    print("=" * 60)
    print("Example 3: Initial-Value Problem y' = y")
    print("=" * 60)

    for name, solver in (("Improved Euler", improved_euler), ("Runge-Kutta 4", runge_kutta4)):
        traj = solver(lambda x, y: y, 0.0, 1.0, 0.1, 1.0)
        x_end, y_end = traj.final
        print(f"{name:15s} y({x_end:.1f}) = {y_end:.10f}  error = {abs(y_end - math.e):.2e}")
    print()


def example_roots():
    """Example: Roots of x^2 - 4."""
    print("=" * 60)
    print("Example 4: Root Finding")
    print("=" * 60)

    res = bisection(lambda x: x**2 - 4, 0.0, 3.0, tol=1e-8)
    print(f"Bisection: root = {res.root:.10f}, iterations = {res.nit}, converged = {res.converged}")
    res = newton_method(lambda x: x**2 - 4, lambda x: 2 * x, 1.0, tol=1e-12)
    print(f"Newton:    root = {res.root:.10f}, iterations = {res.nit}, converged = {res.converged}")
    print()


def example_linear_systems():
    """Example: A diagonally dominant 3x3 system."""
    print("=" * 60)
    print("Example 5: Jacobi and Gauss-Seidel")
    print("=" * 60)

    A = np.array([[10.0, -1.0, 2.0], [-1.0, 11.0, -1.0], [2.0, -1.0, 10.0]])
    b = np.array([6.0, 25.0, -11.0])
    for name, solver in (("Jacobi", jacobi), ("Gauss-Seidel", gauss_seidel)):
        res = solver(A, b, tol=1e-10)
        print(f"{name:12s} x = {np.round(res.x, 8)}  sweeps = {res.nit}")
    print(f"Direct       x = {np.round(np.linalg.solve(A, b), 8)}")
    print()


if __name__ == "__main__":
    example_interpolation()
    example_quadrature()
    example_ode()
    example_roots()
    example_linear_systems()
    print("All examples completed.")
