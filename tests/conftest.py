"""Pytest configuration and shared fixtures for numlab tests.

This module provides:
- A deterministic numpy RNG fixture for randomized node and matrix data
- Isolation of the global debug-mode switch between tests
"""

import os
from typing import Iterator

import numpy as np
import pytest

from numlab.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Reset the global debug flag after every test."""
    previous = is_debug_enabled()
    yield
    set_debug_enabled(previous)
