from __future__ import annotations

import math

import numpy as np
import pytest

from numlab.diagnostics import error_ratios
from numlab.errors import InvalidInput, NotConverged
from numlab.integrate import (
    TrapezoidIteration,
    adaptive_composite_trapezoid,
    trapezoid_refine,
    trapezoid_single_panel,
)


def _square(x: float) -> float:
    return x**2


def test_converges_to_one_third() -> None:
    res = adaptive_composite_trapezoid(_square, 0.0, 1.0, tol=1e-6)
    assert abs(res.value - 1.0 / 3.0) < 1e-6
    assert res.error < 1e-6
    assert res.panels == 2**res.nit
    assert float(res) == res.value


def test_error_shrinks_by_factor_four() -> None:
    res = adaptive_composite_trapezoid(_square, 0.0, 1.0, tol=1e-8)
    errors = [item.error for item in res.history[1:]]
    ratios = error_ratios(errors)
    assert ratios.size >= 5
    assert np.allclose(ratios, 4.0, rtol=1e-3)


def test_callback_reports_every_iteration_in_order() -> None:
    seen: list[TrapezoidIteration] = []
    res = adaptive_composite_trapezoid(_square, 0.0, 2.0, tol=1e-4, callback=seen.append)
    assert seen == res.history
    assert [item.iteration for item in seen] == list(range(res.nit + 1))
    assert [item.panels for item in seen] == [2**k for k in range(res.nit + 1)]
    initial = seen[0]
    assert initial.value == pytest.approx(4.0)
    assert initial.error == pytest.approx(0.2)


def test_linear_integrand_converges_after_one_doubling() -> None:
    res = adaptive_composite_trapezoid(lambda x: 3 * x + 1, 0.0, 2.0, tol=1e-10)
    assert res.nit == 1
    assert res.value == pytest.approx(8.0)


def test_not_converged_is_a_hard_failure() -> None:
    with pytest.raises(NotConverged) as excinfo:
        adaptive_composite_trapezoid(math.exp, 0.0, 1.0, tol=1e-14, max_iter=3)
    err = excinfo.value
    assert err.nit == 3
    assert err.value == pytest.approx(math.e - 1, abs=1e-2)
    assert err.error > 1e-14
    assert isinstance(err, RuntimeError)


def test_not_converged_reports_callback_before_raising() -> None:
    seen: list[TrapezoidIteration] = []
    with pytest.raises(NotConverged):
        adaptive_composite_trapezoid(math.exp, 0.0, 1.0, tol=1e-14, max_iter=2, callback=seen.append)
    assert len(seen) == 3


def test_refine_matches_direct_composite_rule() -> None:
    a, b = 0.0, math.pi
    t1 = trapezoid_single_panel(math.sin, a, b)
    t2 = trapezoid_refine(math.sin, a, b, t1, 1)
    t4 = trapezoid_refine(math.sin, a, b, t2, 2)
    xs = np.linspace(a, b, 5)
    direct = (b - a) / 4 * (0.5 * np.sin(xs[0]) + np.sin(xs[1:-1]).sum() + 0.5 * np.sin(xs[-1]))
    assert t4 == pytest.approx(direct, abs=1e-14)


@pytest.mark.parametrize(
    "a, b, tol",
    [(1.0, 1.0, 1e-6), (2.0, 1.0, 1e-6), (0.0, 1.0, 0.0), (0.0, 1.0, -1e-3)],
)
def test_invalid_arguments(a, b, tol) -> None:
    with pytest.raises(InvalidInput):
        adaptive_composite_trapezoid(_square, a, b, tol=tol)


def test_non_callable_rejected() -> None:
    with pytest.raises(InvalidInput, match="callable"):
        adaptive_composite_trapezoid(2.0, 0.0, 1.0, tol=1e-6)  # type: ignore[arg-type]
