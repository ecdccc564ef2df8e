"""CIO locator and the celestial-to-intermediate matrix.

The CIO locator ``s`` positions the Celestial Intermediate Origin on the
equator of the CIP.  Together with the CIP coordinates ``(X, Y)`` it
fixes the celestial-to-intermediate matrix directly (:func:`c2ixys`),
without decomposing into bias, precession and nutation.

The IAU 2000 (:func:`s00`) and IAU 2006 (:func:`s06`) series share
their argument tables but not their amplitudes or polynomial part.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from sofajax import _series
from sofajax._cio_data import (
    S00_POLY,
    S00_T1_COEFFS,
    S00_T2_COEFFS,
    S00_T3_COEFFS,
    S06_POLY,
    S06_T1_COEFFS,
    S06_T2_COEFFS,
    S06_T3_COEFFS,
    S_T0_ARGS,
    S_T0_COEFFS,
    S_T1_ARGS,
    S_T2_ARGS,
    S_T3_ARGS,
    S_T4_ARGS,
    S_T4_COEFFS,
)
from sofajax._types import CIPLocator, PrecessionNutationModel
from sofajax.config import get_dtype
from sofajax.constants import DAS2R, DJ00, DJC
from sofajax.precession_nutation import bpn2xy, pnm00a, pnm00b, pnm06a
from sofajax.rotations import Ry, Rz

_S00_TERMS = (
    (S_T0_ARGS, S_T0_COEFFS),
    (S_T1_ARGS, S00_T1_COEFFS),
    (S_T2_ARGS, S00_T2_COEFFS),
    (S_T3_ARGS, S00_T3_COEFFS),
    (S_T4_ARGS, S_T4_COEFFS),
)

_S06_TERMS = (
    (S_T0_ARGS, S_T0_COEFFS),
    (S_T1_ARGS, S06_T1_COEFFS),
    (S_T2_ARGS, S06_T2_COEFFS),
    (S_T3_ARGS, S06_T3_COEFFS),
    (S_T4_ARGS, S_T4_COEFFS),
)


def _cio_locator(date1: Array, date2: Array, x: Array, y: Array, poly: tuple, terms: tuple) -> Array:
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)
    fa = _series.cio_arguments(t)

    w = [poly[k] + _series.periodic_series(nfa, sc, fa) for k, (nfa, sc) in enumerate(terms)]
    w.append(poly[5])

    # The series is for s + XY/2
    s = (w[0] + (w[1] + (w[2] + (w[3] + (w[4] + w[5] * t) * t) * t) * t) * t) * DAS2R
    return s - x * y / 2.0


# ---------------------------------------------------------------------------
# CIO locator s
# ---------------------------------------------------------------------------


def s00(date1: Array, date2: Array, x: Array, y: Array) -> Array:
    """CIO locator s given the CIP X, Y, compatible with IAU 2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        x: CIP X coordinate.
        y: CIP Y coordinate.

    Returns:
        CIO locator s in radians.
    """
    return _cio_locator(date1, date2, x, y, S00_POLY, _S00_TERMS)


def s06(date1: Array, date2: Array, x: Array, y: Array) -> Array:
    """CIO locator s given the CIP X, Y, compatible with IAU 2006/2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        x: CIP X coordinate.
        y: CIP Y coordinate.

    Returns:
        CIO locator s in radians.
    """
    return _cio_locator(date1, date2, x, y, S06_POLY, _S06_TERMS)


def xys00a(date1: Array, date2: Array) -> CIPLocator:
    """CIP X, Y and CIO locator s, IAU 2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        CIPLocator: ``(x, y, s)``.
    """
    x, y = bpn2xy(pnm00a(date1, date2))
    return CIPLocator(x, y, s00(date1, date2, x, y))


def xys00b(date1: Array, date2: Array) -> CIPLocator:
    """CIP X, Y and CIO locator s, IAU 2000B.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        CIPLocator: ``(x, y, s)``.
    """
    x, y = bpn2xy(pnm00b(date1, date2))
    return CIPLocator(x, y, s00(date1, date2, x, y))


def xys06a(date1: Array, date2: Array) -> CIPLocator:
    """CIP X, Y and CIO locator s, IAU 2006/2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        CIPLocator: ``(x, y, s)``.
    """
    x, y = bpn2xy(pnm06a(date1, date2))
    return CIPLocator(x, y, s06(date1, date2, x, y))


def s00a(date1: Array, date2: Array) -> Array:
    """CIO locator s, IAU 2000A, from the date alone."""
    return xys00a(date1, date2).s


def s00b(date1: Array, date2: Array) -> Array:
    """CIO locator s, IAU 2000B, from the date alone."""
    return xys00b(date1, date2).s


def s06a(date1: Array, date2: Array) -> Array:
    """CIO locator s, IAU 2006/2000A, from the date alone."""
    return xys06a(date1, date2).s


# ---------------------------------------------------------------------------
# Celestial-to-intermediate matrix
# ---------------------------------------------------------------------------


def c2ixys(x: Array, y: Array, s: Array) -> Array:
    """Celestial-to-intermediate matrix given the CIP X, Y and CIO locator s.

    ``Rc2i = Rz(-(e + s)) @ Ry(d) @ Rz(e)`` where ``e = atan2(y, x)``
    (zero at the pole) and ``d = atan(sqrt(r2 / (1 - r2)))`` with
    ``r2 = x^2 + y^2``.

    Args:
        x: CIP X coordinate.
        y: CIP Y coordinate.
        s: CIO locator s [rad].

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    r2 = x * x + y * y
    e = jnp.where(r2 > 0.0, jnp.arctan2(y, x), 0.0)
    d = jnp.arctan(jnp.sqrt(r2 / (1.0 - r2)))

    return Rz(-(e + s)) @ Ry(d) @ Rz(e)


def c2ixy(date1: Array, date2: Array, x: Array, y: Array) -> Array:
    """Celestial-to-intermediate matrix given the CIP X, Y, IAU 2000.

    The CIO locator is taken from :func:`s00`.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        x: CIP X coordinate.
        y: CIP Y coordinate.

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    return c2ixys(x, y, s00(date1, date2, x, y))


def c2ibpn(date1: Array, date2: Array, rbpn: Array) -> Array:
    """Celestial-to-intermediate matrix given the bias-precession-nutation matrix, IAU 2000.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        rbpn: 3x3 celestial-to-true matrix.

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    x, y = bpn2xy(rbpn)
    return c2ixy(date1, date2, x, y)


def c2i00a(date1: Array, date2: Array) -> Array:
    """Celestial-to-intermediate matrix, IAU 2000A."""
    return c2ibpn(date1, date2, pnm00a(date1, date2))


def c2i00b(date1: Array, date2: Array) -> Array:
    """Celestial-to-intermediate matrix, IAU 2000B."""
    return c2ibpn(date1, date2, pnm00b(date1, date2))


def c2i06a(date1: Array, date2: Array) -> Array:
    """Celestial-to-intermediate matrix, IAU 2006/2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 celestial-to-intermediate matrix.
    """
    return c2ixys(*xys06a(date1, date2))


def celestial_to_intermediate(
    date1: Array,
    date2: Array,
    model: PrecessionNutationModel | str = PrecessionNutationModel.IAU2006A,
) -> Array:
    """Celestial-to-intermediate matrix for an explicitly selected model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        model: ``"2000A"``, ``"2000B"`` or ``"2006A"``.

    Returns:
        3x3 celestial-to-intermediate matrix.

    Raises:
        IllegalParameterError: If *model* is not recognised.
    """
    model = PrecessionNutationModel.parse(model)
    if model is PrecessionNutationModel.IAU2000A:
        return c2i00a(date1, date2)
    if model is PrecessionNutationModel.IAU2000B:
        return c2i00b(date1, date2)
    return c2i06a(date1, date2)
