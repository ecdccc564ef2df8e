"""Polar motion: the TIO locator s' and the polar-motion matrix.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from jax import Array

from sofajax.constants import DAS2R, DJ00, DJC
from sofajax.rotations import Rx, Ry, Rz


def sp00(date1: Array, date2: Array) -> Array:
    """TIO locator s', positioning the Terrestrial Intermediate Origin.

    Only the secular drift ``-47 microarcseconds per century`` is
    modelled.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        TIO locator s' in radians.
    """
    t = ((date1 - DJ00) + date2) / DJC
    return -47e-6 * t * DAS2R


def pom00(xp: Array, yp: Array, sp: Array) -> Array:
    """Form the polar motion matrix (TIRS -> ITRS).

    ``W = Rx(-yp) @ Ry(-xp) @ Rz(sp)``: the TIO locator is applied
    first, then the x and y pole offsets.

    Args:
        xp: Polar motion x-component (radians, positive towards Greenwich).
        yp: Polar motion y-component (radians, positive towards 90W).
        sp: TIO locator s' (radians).

    Returns:
        3x3 polar motion matrix.
    """
    return Rx(-yp) @ Ry(-xp) @ Rz(sp)
