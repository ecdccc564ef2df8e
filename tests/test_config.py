"""Tests for the sofajax.config and sofajax.errors modules."""

import tomllib
from pathlib import Path

import jax
import jax.numpy as jnp
import pytest

from sofajax import IllegalParameterError, InternalError, SofaError
from sofajax.config import get_dtype, get_matrix_tolerance, set_dtype


@pytest.fixture(autouse=True)
def restore_dtype():
    """Restore float64 after each test."""
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float64

    def test_x64_enabled(self):
        assert jax.config.jax_enable_x64

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_invalid_dtype_raises(self):
        with pytest.raises(IllegalParameterError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_is_value_error(self):
        with pytest.raises(ValueError):
            set_dtype("float64")


class TestMatrixTolerance:
    def test_float64(self):
        assert get_matrix_tolerance() == 1e-12

    def test_float32(self):
        set_dtype(jnp.float32)
        assert get_matrix_tolerance() == 1e-5

    def test_float16(self):
        set_dtype(jnp.float16)
        assert get_matrix_tolerance() == 1e-2


class TestErrorHierarchy:
    def test_illegal_parameter_is_sofa_error(self):
        assert issubclass(IllegalParameterError, SofaError)
        assert issubclass(IllegalParameterError, ValueError)

    def test_internal_error_is_runtime_error(self):
        assert issubclass(InternalError, SofaError)
        assert issubclass(InternalError, RuntimeError)


class TestPackaging:
    def test_numpy_is_test_only(self):
        """The runtime needs jax alone; numpy comes with the test extra."""
        pyproject = tomllib.loads((Path(__file__).parents[1] / "pyproject.toml").read_text())
        project = pyproject["project"]
        runtime = [dep.split(">")[0].split("=")[0].strip() for dep in project["dependencies"]]
        test = [dep.split(">")[0].split("=")[0].strip() for dep in project["optional-dependencies"]["test"]]
        assert runtime == ["jax"]
        assert "numpy" in test
