"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout sofajax.  The default is ``jnp.float64``: the IAU reference
values are only reproducible in double precision, so JAX's 64-bit mode
(``jax_enable_x64``) is switched on when this module is imported.

Call ``set_dtype`` **before** any JIT compilation.  Under JIT,
``get_dtype()`` runs during tracing and its result is baked into the
compiled program.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp

from sofajax.errors import IllegalParameterError

logger = logging.getLogger(__name__)

# Absolute tolerance for orthonormality checks, per supported dtype.
_MATRIX_TOLERANCE = {
    jnp.float64: 1e-12,
    jnp.float32: 1e-5,
    jnp.float16: 1e-2,
    jnp.bfloat16: 1e-2,
}

jax.config.update("jax_enable_x64", True)
_dtype = jnp.float64


def set_dtype(dtype) -> None:
    """Choose the float dtype used by every sofajax routine.

    Takes effect immediately in eager mode; compiled functions keep the
    dtype they were traced with.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is (re-)enabled via
    ``jax.config.update("jax_enable_x64", True)``.  Reduced precisions are
    accepted for throughput experiments but do not reach the reference
    accuracy of the models.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        IllegalParameterError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _MATRIX_TOLERANCE:
        names = ", ".join(f"jnp.{jnp.dtype(d).name}" for d in _MATRIX_TOLERANCE)
        raise IllegalParameterError(f"Unsupported dtype {dtype}. Must be one of: {names}")
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    if dtype != _dtype:
        logger.info("sofajax float dtype set to %s", jnp.dtype(dtype).name)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_matrix_tolerance() -> float:
    """Absolute tolerance for checking that a matrix is a rotation.

    1e-12 in double precision, 1e-5 in single and 1e-2 in either half
    precision, applied element-wise to ``R @ R.T - I``.

    Returns:
        float: Tolerance for the active dtype.
    """
    return _MATRIX_TOLERANCE[_dtype]
