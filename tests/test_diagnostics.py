"""Tests for debug mode and diagnostic helpers."""

import math

import numpy as np
import pytest

from numlab.core import IterationRecord
from numlab.diagnostics import debug_mode
from numlab.diagnostics import (
    assert_finite,
    debug_context,
    error_ratios,
    is_debug_enabled,
    set_debug_enabled,
)
from numlab.errors import NumericalError
from numlab.linalg import jacobi
from numlab.roots import newton_method


def test_debug_mode_toggle_and_context() -> None:
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_after_exception() -> None:
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()


def test_assert_finite() -> None:
    assert_finite(1.0)
    assert_finite(np.array([1.0, 2.0]))
    with pytest.raises(NumericalError, match="iterate"):
        assert_finite(np.array([1.0, np.nan]), name="iterate")
    with pytest.raises(NumericalError):
        assert_finite(math.inf)


def test_error_ratios() -> None:
    ratios = error_ratios([1.0, 0.25, 0.0625])
    assert np.allclose(ratios, [4.0, 4.0])
    assert error_ratios([1.0]).size == 0
    assert np.isinf(error_ratios([1.0, 0.0])[0])


def test_debug_mode_rejects_diverging_iterates() -> None:
    A = [[1.0, 1e200], [1e200, 1.0]]
    b = [1.0, 1.0]
    # Without debug mode the overflow is returned as a non-converged result.
    with np.errstate(over="ignore", invalid="ignore"):
        res = jacobi(A, b, max_iter=5)
        assert not res.converged
        with debug_context(True):
            with pytest.raises(NumericalError):
                jacobi(A, b, max_iter=5)


def test_debug_mode_does_not_change_results() -> None:
    plain = newton_method(lambda x: x**3 - 2, lambda x: 3 * x**2, 1.0)
    with debug_context(True):
        traced = newton_method(lambda x: x**3 - 2, lambda x: 3 * x**2, 1.0)
    assert plain.root == traced.root
    assert plain.history == traced.history


def test_iteration_record_snapshot_copies_arrays() -> None:
    vec = np.array([1.0, 2.0])
    record = IterationRecord.snapshot(1, vec, 0.5)
    vec[0] = 99.0
    assert record.value[0] == 1.0
    assert not record.value.flags.writeable
    scalar = IterationRecord.snapshot(2, np.float64(3.0), 0.1)
    assert isinstance(scalar.value, float)


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), (" on ", True), ("yes", True), ("0", False), ("off", False), ("", False), (None, False)],
)
def test_debug_flag_parsed_from_environment_value(raw, expected) -> None:
    assert debug_mode._flag_from_env(raw) is expected
