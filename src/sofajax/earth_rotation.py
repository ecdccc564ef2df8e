"""Earth Rotation Angle, sidereal time and the equations of the equinoxes
and origins.

The CIO-based angle is the Earth Rotation Angle (:func:`era00`), a
linear function of UT1.  The equinox-based angle is Greenwich sidereal
time, either as mean sidereal time plus the equation of the equinoxes
(IAU 2000, :func:`gst00a` / :func:`gst00b`) or as ERA minus the equation
of the origins (IAU 2006, :func:`gst06`).  The IAU 1982/1994 pair
(:func:`gmst82`, :func:`gst94`) completes the 1976/1980 chain.

Angles returned by :func:`era00` and the sidereal-time functions lie in
``[0, 2pi)``.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from sofajax import _series
from sofajax._cio_data import EECT_T0_ARGS, EECT_T0_COEFFS, EECT_T1_ARGS, EECT_T1_COEFFS
from sofajax.cio import s06
from sofajax.config import get_dtype
from sofajax.constants import D2PI, DAS2R, DJ00, DJC
from sofajax.nutation import nut00a, nut00b, nut80
from sofajax.precession import obl80, pr00
from sofajax.precession_nutation import bpn2xy, pnm06a
from sofajax.utils import anp, anpm

# ---------------------------------------------------------------------------
# Earth Rotation Angle
# ---------------------------------------------------------------------------


def era00(dj1: Array, dj2: Array) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    The two date parts may be split in any way.  The smaller part is
    treated as the fractional contribution so that the day fraction is
    carried with full precision.

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Earth Rotation Angle in radians, in the range [0, 2pi).
    """
    d1 = jnp.where(dj1 < dj2, dj1, dj2)
    d2 = jnp.where(dj1 < dj2, dj2, dj1)

    # Days since J2000.0
    t = d1 + (d2 - DJ00)

    # Fractional part of T (days)
    f = jnp.fmod(d1, 1.0) + jnp.fmod(d2, 1.0)

    return anp(D2PI * (f + 0.7790572732640 + 0.00273781191135448 * t))


# ---------------------------------------------------------------------------
# Greenwich mean sidereal time
# ---------------------------------------------------------------------------


def gmst00(uta: Array, utb: Array, tta: Array, ttb: Array) -> Array:
    """Greenwich mean sidereal time, consistent with IAU 2000 resolutions.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        Greenwich mean sidereal time in radians, in the range [0, 2pi).
    """
    t = ((tta - DJ00) + ttb) / DJC
    return anp(
        era00(uta, utb)
        + (0.014506 + (4612.15739966 + (1.39667721 + (-0.00009344 + 0.00001882 * t) * t) * t) * t) * DAS2R
    )


def gmst06(uta: Array, utb: Array, tta: Array, ttb: Array) -> Array:
    """Greenwich mean sidereal time, consistent with IAU 2006 precession.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        Greenwich mean sidereal time in radians, in the range [0, 2pi).
    """
    t = ((tta - DJ00) + ttb) / DJC
    return anp(
        era00(uta, utb)
        + (
            0.014506
            + (4612.156534 + (1.3915817 + (-0.00000044 + (-0.000029956 + (-0.0000000368) * t) * t) * t) * t) * t
        )
        * DAS2R
    )


# ---------------------------------------------------------------------------
# Equation of the equinoxes
# ---------------------------------------------------------------------------


def eect00(date1: Array, date2: Array) -> Array:
    """Equation of the equinoxes complementary terms, IAU 2000.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Complementary terms in radians.
    """
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)
    fa = _series.cio_arguments(t)

    s0 = _series.periodic_series(EECT_T0_ARGS, EECT_T0_COEFFS, fa)
    s1 = _series.periodic_series(EECT_T1_ARGS, EECT_T1_COEFFS, fa)

    return (s0 + s1 * t) * DAS2R


def ee00(date1: Array, date2: Array, epsa: Array, dpsi: Array) -> Array:
    """Equation of the equinoxes, IAU 2000, given obliquity and nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        epsa: Mean obliquity [rad].
        dpsi: Nutation in longitude [rad].

    Returns:
        Equation of the equinoxes in radians.
    """
    return dpsi * jnp.cos(epsa) + eect00(date1, date2)


def ee00a(date1: Array, date2: Array) -> Array:
    """Equation of the equinoxes, IAU 2000A nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Equation of the equinoxes in radians.
    """
    epsa = obl80(date1, date2) + pr00(date1, date2).depspr
    return ee00(date1, date2, epsa, nut00a(date1, date2).dpsi)


def ee00b(date1: Array, date2: Array) -> Array:
    """Equation of the equinoxes, IAU 2000B nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Equation of the equinoxes in radians.
    """
    epsa = obl80(date1, date2) + pr00(date1, date2).depspr
    return ee00(date1, date2, epsa, nut00b(date1, date2).dpsi)


def ee06a(date1: Array, date2: Array) -> Array:
    """Equation of the equinoxes, IAU 2006/2000A.

    Computed as GST minus GMST, so the UT1 date is irrelevant.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Equation of the equinoxes in radians, in the range [-pi, pi).
    """
    return anpm(gst06a(0.0, 0.0, date1, date2) - gmst06(0.0, 0.0, date1, date2))


# ---------------------------------------------------------------------------
# Equation of the origins
# ---------------------------------------------------------------------------


def eors(rnpb: Array, s: Array) -> Array:
    """Equation of the origins, given the NPB matrix and the CIO locator s.

    Args:
        rnpb: 3x3 celestial-to-true matrix.
        s: CIO locator s [rad].

    Returns:
        Equation of the origins (ERA - GST) in radians.
    """
    x = rnpb[2, 0]
    ax = x / (1.0 + rnpb[2, 2])
    xyz = jnp.array([1.0 - ax * x, -ax * rnpb[2, 1], -x])

    p = jnp.dot(rnpb[0], xyz)
    q = jnp.dot(rnpb[1], xyz)

    return jnp.where((p != 0.0) | (q != 0.0), s - jnp.arctan2(q, p), s)


def eo06a(date1: Array, date2: Array) -> Array:
    """Equation of the origins, IAU 2006 precession and IAU 2000A nutation.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Equation of the origins in radians.
    """
    rnpb = pnm06a(date1, date2)
    x, y = bpn2xy(rnpb)
    return eors(rnpb, s06(date1, date2, x, y))


# ---------------------------------------------------------------------------
# Greenwich apparent sidereal time
# ---------------------------------------------------------------------------


def gst00a(uta: Array, utb: Array, tta: Array, ttb: Array) -> Array:
    """Greenwich apparent sidereal time, IAU 2000A.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        Greenwich apparent sidereal time in radians, in the range [0, 2pi).
    """
    return anp(gmst00(uta, utb, tta, ttb) + ee00a(tta, ttb))


def gst00b(uta: Array, utb: Array) -> Array:
    """Greenwich apparent sidereal time, IAU 2000B.

    UT1 stands in for TT throughout; the resulting error is well below
    the accuracy of the IAU 2000B nutation.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).

    Returns:
        Greenwich apparent sidereal time in radians, in the range [0, 2pi).
    """
    return anp(gmst00(uta, utb, uta, utb) + ee00b(uta, utb))


def gst06(uta: Array, utb: Array, tta: Array, ttb: Array, rnpb: Array) -> Array:
    """Greenwich apparent sidereal time, IAU 2006, given the NPB matrix.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        rnpb: 3x3 celestial-to-true matrix.

    Returns:
        Greenwich apparent sidereal time in radians, in the range [0, 2pi).
    """
    x, y = bpn2xy(rnpb)
    s = s06(tta, ttb, x, y)
    return anp(era00(uta, utb) - eors(rnpb, s))


def gst06a(uta: Array, utb: Array, tta: Array, ttb: Array) -> Array:
    """Greenwich apparent sidereal time, IAU 2006/2000A.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        Greenwich apparent sidereal time in radians, in the range [0, 2pi).
    """
    return gst06(uta, utb, tta, ttb, pnm06a(tta, ttb))


# ---------------------------------------------------------------------------
# IAU 1982/1994 sidereal time
# ---------------------------------------------------------------------------

# Seconds of time to radians
_DS2R: float = 7.272205216643039903848712e-5
_DAYSEC: float = 86400.0


def gmst82(dj1: Array, dj2: Array) -> Array:
    """Greenwich mean sidereal time, IAU 1982 model.

    The date parts may be split in any way; as in :func:`era00` the
    smaller part carries the fraction of the day.

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Greenwich mean sidereal time in radians, in the range [0, 2pi).
    """
    # Coefficients of the IAU 1982 expression, seconds of time; the
    # constant term is shifted by 12h because the Julian Date starts at noon
    a = 24110.54841 - _DAYSEC / 2.0
    b = 8640184.812866
    c = 0.093104
    d = -6.2e-6

    d1 = jnp.where(dj1 < dj2, dj1, dj2)
    d2 = jnp.where(dj1 < dj2, dj2, dj1)
    t = (d1 + (d2 - DJ00)) / DJC

    f = _DAYSEC * (jnp.fmod(d1, 1.0) + jnp.fmod(d2, 1.0))

    return anp(_DS2R * ((a + (b + (c + d * t) * t) * t) + f))


def eqeq94(date1: Array, date2: Array) -> Array:
    """Equation of the equinoxes, IAU 1994 model.

    Args:
        date1: TDB as 2-part Julian Date (part 1).
        date2: TDB as 2-part Julian Date (part 2).

    Returns:
        Equation of the equinoxes in radians.
    """
    t = ((date1 - DJ00) + date2) / DJC

    # Longitude of the mean ascending node of the lunar orbit, FK5 form
    om = anpm(
        (450160.280 + (-482890.539 + (7.455 + 0.008 * t) * t) * t) * DAS2R
        + jnp.fmod(-5.0 * t, 1.0) * D2PI
    )

    dpsi = nut80(date1, date2).dpsi
    eps0 = obl80(date1, date2)

    return dpsi * jnp.cos(eps0) + DAS2R * (0.00264 * jnp.sin(om) + 0.000063 * jnp.sin(om + om))


def gst94(uta: Array, utb: Array) -> Array:
    """Greenwich apparent sidereal time, IAU 1982/1994.

    UT1 stands in for TDB in the equation of the equinoxes.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).

    Returns:
        Greenwich apparent sidereal time in radians, in the range [0, 2pi).
    """
    return anp(gmst82(uta, utb) + eqeq94(uta, utb))
