"""Elementary rotation matrices.

All three follow the astronomical convention shared by every composition
in sofajax: ``Rz(a)`` rotates the coordinate frame (not the vector)
anticlockwise by ``a`` as seen looking back along +z towards the origin,
so ``Rz(a) @ v`` expresses ``v`` in the rotated frame.  A chain that
applies ``A`` first and ``B`` second is written ``B @ A``.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sofajax.utils import to_radians


def _elementary(axis: int, angle: ArrayLike, use_degrees: bool) -> Array:
    # Rows/columns (i, j) are the two axes rotated, in cyclic order after *axis*.
    phi = to_radians(angle, use_degrees)
    c = jnp.cos(phi)
    s = jnp.sin(phi)
    i = (axis + 1) % 3
    j = (axis + 2) % 3

    r = jnp.eye(3, dtype=c.dtype)
    r = r.at[i, i].set(c).at[j, j].set(c)
    return r.at[i, j].set(s).at[j, i].set(-s)


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotate the frame about the x-axis.

    Args:
        angle (ArrayLike): Rotation angle, anticlockwise looking back along +x.
        use_degrees (bool): Interpret ``angle`` in degrees. Default: ``False``

    Returns:
        Array: 3x3 matrix ``[[1, 0, 0], [0, c, s], [0, -s, c]]``.

    References:

        1. IAU SOFA, *Tools for Earth Attitude*, 2021, sec. 2.
    """
    return _elementary(0, angle, use_degrees)


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotate the frame about the y-axis.

    Returns ``[[c, 0, -s], [0, 1, 0], [s, 0, c]]``.
    """
    return _elementary(1, angle, use_degrees)


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotate the frame about the z-axis.

    Returns ``[[c, s, 0], [-s, c, 0], [0, 0, 1]]``.
    """
    return _elementary(2, angle, use_degrees)
