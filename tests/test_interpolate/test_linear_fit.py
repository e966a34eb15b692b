from __future__ import annotations

import numpy as np
import pytest

from numlab.errors import InvalidInput
from numlab.interpolate import linear_fit


def test_exact_line_is_recovered() -> None:
    xs = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    ys = 2 * xs + 1
    a, b = linear_fit(xs, ys)
    assert a == pytest.approx(1.0, abs=1e-12)
    assert b == pytest.approx(2.0, abs=1e-12)
    residual = ys - (a + b * xs)
    assert np.max(np.abs(residual)) < 1e-12


def test_matches_numpy_polyfit(rng: np.random.Generator) -> None:
    xs = rng.uniform(0.0, 10.0, size=30)
    ys = -0.5 * xs + 3.0 + rng.normal(scale=0.2, size=30)
    a, b = linear_fit(xs, ys)
    slope, intercept = np.polyfit(xs, ys, 1)
    assert b == pytest.approx(slope, rel=1e-9)
    assert a == pytest.approx(intercept, rel=1e-9)


def test_accepts_plain_lists() -> None:
    a, b = linear_fit([1, 2], [3, 5])
    assert (a, b) == pytest.approx((1.0, 2.0))


def test_mismatched_lengths_rejected() -> None:
    with pytest.raises(InvalidInput):
        linear_fit([1.0, 2.0, 3.0], [1.0, 2.0])


def test_empty_input_rejected() -> None:
    with pytest.raises(InvalidInput):
        linear_fit([], [])


def test_identical_abscissas_rejected() -> None:
    with pytest.raises(InvalidInput, match="identical"):
        linear_fit([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])


@pytest.mark.parametrize("value, n", [(0.7, 3), (0.1, 5), (5.7, 7), (1e-3, 4)])
def test_identical_inexact_abscissas_rejected(value: float, n: int) -> None:
    with pytest.raises(InvalidInput, match="identical"):
        linear_fit([value] * n, list(range(n)))
