"""Shared evaluation of ``sin``/``cos`` series in the fundamental arguments.

Used by the CIO locator and the equation-of-the-equinoxes complementary
terms.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array

from sofajax.config import get_dtype
from sofajax.fundamental_arguments import fad03, fae03, faf03, fal03, falp03, faom03, fapa03, fave03


def periodic_series(args: tuple, coeffs: tuple, fa: Array) -> Array:
    """Evaluate one power of a ``sin``/``cos`` series in the fundamental arguments.

    Args:
        args: Integer multiplier rows, one per term.
        coeffs: ``(sin, cos)`` amplitude rows, one per term.
        fa: Fundamental arguments, shape ``(K,)`` matching the rows of *args*.

    Returns:
        Sum of ``s * sin(a) + c * cos(a)`` over all terms.
    """
    dtype = get_dtype()
    nfa = jnp.array(args, dtype=dtype)
    sc = jnp.array(coeffs, dtype=dtype)
    a = jnp.dot(nfa, fa, precision=jax.lax.Precision.HIGHEST)
    return jnp.sum(sc[:, 0] * jnp.sin(a) + sc[:, 1] * jnp.cos(a))


def cio_arguments(t: Array) -> Array:
    """The eight fundamental arguments used by the CIO locator series.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Array ``[l, l', F, D, Om, LVe, LE, pA]`` in radians.
    """
    return jnp.array(
        [fal03(t), falp03(t), faf03(t), fad03(t), faom03(t), fave03(t), fae03(t), fapa03(t)]
    )
