"""Fundamental arguments of nutation theory, IERS Conventions 2003.

The five Delaunay arguments are quartic polynomials in arcseconds reduced
modulo one turn.  The planetary mean longitudes are linear in radians and
reduced modulo 2pi.  The general precession in longitude is not reduced.

Every function takes ``t``, TDB Julian centuries since J2000.0.  Using TT
instead makes no practical difference.  Arguments are valid for any
finite ``t``; far from J2000.0 the polynomials extrapolate silently.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from sofajax._types import FundamentalArguments
from sofajax.constants import D2PI, DAS2R, TURNAS


def _delaunay(t: Array, c0: float, c1: float, c2: float, c3: float, c4: float) -> Array:
    """Evaluate a quartic in arcseconds, reduce modulo a turn, convert to radians."""
    return jnp.fmod(c0 + t * (c1 + t * (c2 + t * (c3 + t * c4))), TURNAS) * DAS2R


# ---------------------------------------------------------------------------
# Delaunay arguments
# ---------------------------------------------------------------------------


def fal03(t: Array) -> Array:
    """Mean anomaly of the Moon (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        l in radians.
    """
    return _delaunay(t, 485868.249036, 1717915923.2178, 31.8792, 0.051635, -0.00024470)


def falp03(t: Array) -> Array:
    """Mean anomaly of the Sun (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        l' in radians.
    """
    return _delaunay(t, 1287104.793048, 129596581.0481, -0.5532, 0.000136, -0.00001149)


def faf03(t: Array) -> Array:
    """Mean longitude of the Moon minus that of the ascending node (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        F in radians.
    """
    return _delaunay(t, 335779.526232, 1739527262.8478, -12.7512, -0.001037, 0.00000417)


def fad03(t: Array) -> Array:
    """Mean elongation of the Moon from the Sun (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        D in radians.
    """
    return _delaunay(t, 1072260.703692, 1602961601.2090, -6.3706, 0.006593, -0.00003169)


def faom03(t: Array) -> Array:
    """Mean longitude of the Moon's ascending node (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Omega in radians.
    """
    return _delaunay(t, 450160.398036, -6962890.5431, 7.4722, 0.007702, -0.00005939)


# ---------------------------------------------------------------------------
# Planetary mean longitudes
# ---------------------------------------------------------------------------


def fame03(t: Array) -> Array:
    """Mean longitude of Mercury (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Mean longitude in radians.
    """
    return jnp.fmod(4.402608842 + 2608.7903141574 * t, D2PI)


def fave03(t: Array) -> Array:
    """Mean longitude of Venus (IERS 2003)."""
    return jnp.fmod(3.176146697 + 1021.3285546211 * t, D2PI)


def fae03(t: Array) -> Array:
    """Mean longitude of Earth (IERS 2003)."""
    return jnp.fmod(1.753470314 + 628.3075849991 * t, D2PI)


def fama03(t: Array) -> Array:
    """Mean longitude of Mars (IERS 2003)."""
    return jnp.fmod(6.203480913 + 334.0612426700 * t, D2PI)


def faju03(t: Array) -> Array:
    """Mean longitude of Jupiter (IERS 2003)."""
    return jnp.fmod(0.599546497 + 52.9690962641 * t, D2PI)


def fasa03(t: Array) -> Array:
    """Mean longitude of Saturn (IERS 2003)."""
    return jnp.fmod(0.874016757 + 21.3299104960 * t, D2PI)


def faur03(t: Array) -> Array:
    """Mean longitude of Uranus (IERS 2003)."""
    return jnp.fmod(5.481293872 + 7.4781598567 * t, D2PI)


def fane03(t: Array) -> Array:
    """Mean longitude of Neptune (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Mean longitude in radians.
    """
    return jnp.fmod(5.311886287 + 3.8133035638 * t, D2PI)


def fapa03(t: Array) -> Array:
    """General accumulated precession in longitude (IERS 2003).

    Not reduced modulo 2pi.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        General precession in radians.
    """
    return (0.024381750 + 0.00000538691 * t) * t


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


def fundamental_arguments(t: Array) -> FundamentalArguments:
    """Evaluate all fourteen fundamental arguments at once.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        FundamentalArguments: Delaunay arguments, planetary mean
        longitudes and general precession, in radians.
    """
    return FundamentalArguments(
        l=fal03(t),
        lp=falp03(t),
        f=faf03(t),
        d=fad03(t),
        om=faom03(t),
        me=fame03(t),
        ve=fave03(t),
        ea=fae03(t),
        ma=fama03(t),
        ju=faju03(t),
        sa=fasa03(t),
        ur=faur03(t),
        ne=fane03(t),
        pa=fapa03(t),
    )
