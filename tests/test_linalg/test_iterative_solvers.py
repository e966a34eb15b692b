from __future__ import annotations

import numpy as np
import pytest

from numlab.errors import InvalidInput, SingularPivot
from numlab.linalg import gauss_seidel, jacobi

DOMINANT_A = np.array(
    [
        [10.0, -1.0, 2.0],
        [-1.0, 11.0, -1.0],
        [2.0, -1.0, 10.0],
    ]
)
DOMINANT_B = np.array([6.0, 25.0, -11.0])


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_dominant_system_matches_direct_solve(solver) -> None:
    expected = np.linalg.solve(DOMINANT_A, DOMINANT_B)
    res = solver(DOMINANT_A, DOMINANT_B, np.zeros(3), tol=1e-10, max_iter=200)
    assert res.converged
    assert res.message == "Update tolerance satisfied."
    assert np.allclose(res.x, expected, atol=1e-8)


def test_both_methods_reach_same_solution() -> None:
    res_j = jacobi(DOMINANT_A, DOMINANT_B, tol=1e-12, max_iter=500)
    res_gs = gauss_seidel(DOMINANT_A, DOMINANT_B, tol=1e-12, max_iter=500)
    assert np.allclose(res_j.x, res_gs.x, atol=1e-10)
    assert res_gs.nit < res_j.nit


def test_first_jacobi_sweep_uses_only_previous_iterate() -> None:
    res = jacobi(DOMINANT_A, DOMINANT_B, [0.0, 0.0, 0.0], max_iter=1)
    assert np.allclose(res.history[0].value, DOMINANT_B / np.diag(DOMINANT_A))


def test_first_gauss_seidel_sweep_uses_fresh_components() -> None:
    res = gauss_seidel(DOMINANT_A, DOMINANT_B, [0.0, 0.0, 0.0], max_iter=1)
    x0 = 6.0 / 10.0
    x1 = (25.0 + x0) / 11.0
    x2 = (-11.0 - 2.0 * x0 + x1) / 10.0
    assert np.allclose(res.history[0].value, [x0, x1, x2])


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_non_dominant_system_flags_non_convergence(solver) -> None:
    A = np.array([[1.0, 3.0], [4.0, 1.0]])
    b = np.array([1.0, 1.0])
    res = solver(A, b, tol=1e-8, max_iter=25)
    assert not res.converged
    assert res.nit == 25
    assert len(res.history) == 25
    assert res.message == "Maximum iterations reached."


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_history_records_every_sweep(solver) -> None:
    res = solver(DOMINANT_A, DOMINANT_B, tol=1e-6)
    assert [rec.index for rec in res.history] == list(range(1, res.nit + 1))
    assert res.history[-1].error == res.error
    assert np.array_equal(res.history[-1].value, res.x)
    for prev, curr in zip(res.history, res.history[1:]):
        assert curr.error == pytest.approx(np.max(np.abs(curr.value - prev.value)))


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_history_snapshots_are_read_only(solver) -> None:
    res = solver(DOMINANT_A, DOMINANT_B, tol=1e-6)
    snapshot = res.history[0].value
    with pytest.raises(ValueError):
        snapshot[0] = 123.0
    assert snapshot is not res.x


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_rerun_is_bit_identical(solver) -> None:
    first = solver(DOMINANT_A, DOMINANT_B, tol=1e-9)
    second = solver(DOMINANT_A, DOMINANT_B, tol=1e-9)
    assert len(first.history) == len(second.history)
    for r1, r2 in zip(first.history, second.history):
        assert r1.index == r2.index
        assert r1.error == r2.error
        assert np.array_equal(r1.value, r2.value)


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_zero_pivot_raises(solver) -> None:
    A = np.array([[4.0, 1.0], [1.0, 0.0]])
    with pytest.raises(SingularPivot) as excinfo:
        solver(A, [1.0, 2.0])
    assert excinfo.value.row == 1


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_input_not_mutated(solver) -> None:
    A = DOMINANT_A.copy()
    b = DOMINANT_B.copy()
    x0 = np.ones(3)
    solver(A, b, x0, tol=1e-6)
    assert np.array_equal(A, DOMINANT_A)
    assert np.array_equal(b, DOMINANT_B)
    assert np.array_equal(x0, np.ones(3))


def test_zero_iterations_returns_initial_guess() -> None:
    res = jacobi(DOMINANT_A, DOMINANT_B, [1.0, 2.0, 3.0], max_iter=0)
    assert not res.converged
    assert res.nit == 0
    assert res.history == []
    assert np.array_equal(res.x, [1.0, 2.0, 3.0])


@pytest.mark.parametrize(
    "A, b, x0, tol, max_iter",
    [
        ([[1.0, 2.0, 3.0]], [1.0], None, 1e-6, 10),
        ([[2.0, 0.0], [0.0, 2.0]], [1.0, 2.0, 3.0], None, 1e-6, 10),
        ([[2.0, 0.0], [0.0, 2.0]], [1.0, 2.0], [0.0], 1e-6, 10),
        ([[2.0, 0.0], [0.0, 2.0]], [1.0, 2.0], None, 0.0, 10),
        ([[2.0, 0.0], [0.0, 2.0]], [1.0, 2.0], None, 1e-6, -1),
        ([[2.0, 0.0], [0.0]], [1.0, 2.0], None, 1e-6, 10),
    ],
)
def test_invalid_systems(A, b, x0, tol, max_iter) -> None:
    with pytest.raises(InvalidInput):
        gauss_seidel(A, b, x0, tol=tol, max_iter=max_iter)
