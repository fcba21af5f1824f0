"""Pytest configuration file with shared fixtures."""

import os

import numpy as np
import pytest

import smoothkit


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")
    os.environ.setdefault("VECLIB_MAXIMUM_THREADS", "1")
    os.environ.setdefault("NUMEXPR_NUM_THREADS", "1")


@pytest.fixture(autouse=True)
def _fresh_coefficient_cache():
    """Start every test with empty coefficient caches."""
    smoothkit.clear_coefficient_cache()
    yield
    smoothkit.clear_coefficient_cache()


@pytest.fixture
def rng():
    """Seeded random generator for reproducible noisy signals."""
    return np.random.default_rng(12345)
