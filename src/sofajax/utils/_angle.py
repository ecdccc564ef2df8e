"""Angle conversion and normalization helpers.

``to_radians`` wraps the ``use_degrees`` convention used by the
elementary rotations.  ``anp`` and ``anpm`` fold angles into the ranges
returned by the sidereal-time and Earth-rotation routines.  All helpers
are JAX-traceable via ``jnp.where``.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sofajax.constants import D2PI

_DPI: float = 3.141592653589793238462643


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def anp(a: ArrayLike) -> Array:
    """Normalize angle into the range 0 <= a < 2pi.

    Args:
        a (ArrayLike): Angle in radians.

    Returns:
        Angle in radians in the range [0, 2pi).
    """
    w = jnp.fmod(a, D2PI)
    return jnp.where(w < 0.0, w + D2PI, w)


def anpm(a: ArrayLike) -> Array:
    """Normalize angle into the range -pi <= a < +pi.

    Args:
        a (ArrayLike): Angle in radians.

    Returns:
        Angle in radians in the range [-pi, pi).
    """
    w = jnp.fmod(a, D2PI)
    return jnp.where(jnp.abs(w) >= _DPI, w - jnp.copysign(D2PI, a), w)
