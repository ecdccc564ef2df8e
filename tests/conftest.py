import jax.numpy as jnp
import numpy as np
import pytest

from sofajax.config import get_matrix_tolerance, set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that switch precision (e.g. test_config.py) restore float64 in
    their own teardown; this fixture guards against leakage between
    modules and pytest-xdist workers.
    """
    set_dtype(jnp.float64)


@pytest.fixture
def assert_orthonormal():
    """Check ``R @ R.T == I`` and ``det(R) == 1`` at the active dtype's tolerance."""

    def check(r):
        tol = get_matrix_tolerance()
        np.testing.assert_allclose(np.asarray(r @ r.T), np.eye(3), rtol=0.0, atol=tol)
        assert jnp.abs(jnp.linalg.det(r) - 1.0) < tol

    return check
