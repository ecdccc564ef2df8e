"""Nutation series, IAU 2000A, IAU 2000B and IAU 2006/2000A.

The three models are distinct and are never substituted for one another:

- :func:`nut00a` sums the full MHB2000 series, 678 luni-solar and 687
  planetary terms, each vectorized as a single matrix product over the
  coefficient table.
- :func:`nut00b` sums the first 77 luni-solar terms with linear
  Delaunay arguments and replaces the planetary series with fixed
  offsets.  It agrees with IAU 2000A to about 1 mas between 1995 and
  2050.
- :func:`nut06a` scales the IAU 2000A result for consistency with the
  IAU 2006 precession.
- :func:`nut80` is the older 106-term IAU 1980 series, kept for the
  classical equinox-based chain.

:func:`nutation` selects one of the three by
:class:`~sofajax.PrecessionNutationModel`.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array

from sofajax._nutation80_data import NUT80_COEFFS
from sofajax._nutation_data import LUNI_SOLAR_COEFFS, NUT00B_TERMS, PLANETARY_COEFFS
from sofajax._types import NutationAngles, PrecessionNutationModel
from sofajax.config import get_dtype
from sofajax.constants import D2PI, DAS2R, DJ00, DJC, DMAS2R, TURNAS, U2R
from sofajax.fundamental_arguments import (
    fae03,
    faf03,
    faju03,
    fal03,
    fama03,
    fame03,
    faom03,
    fapa03,
    fasa03,
    faur03,
    fave03,
)
from sofajax.precession import obl80
from sofajax.rotations import Rx, Rz
from sofajax.utils import anpm

# IAU 2000B fixed offsets standing in for the planetary terms
_DPPLAN: float = -0.135 * DMAS2R
_DEPLAN: float = 0.388 * DMAS2R


def _series_arguments(multipliers: Array, args: Array) -> Array:
    """Integer combinations of fundamental arguments, reduced modulo 2pi.

    Args:
        multipliers: Integer multipliers, shape ``(N, K)``.
        args: Fundamental arguments, shape ``(K,)``.

    Returns:
        Term arguments in radians, shape ``(N,)``.
    """
    return jnp.fmod(jnp.dot(multipliers, args, precision=jax.lax.Precision.HIGHEST), D2PI)


def _luni_solar(table: Array, delaunay: Array, t: Array) -> tuple[Array, Array]:
    """Sum a luni-solar table in units of 0.1 microarcsecond."""
    arg = _series_arguments(table[:, :5], delaunay)
    sarg = jnp.sin(arg)
    carg = jnp.cos(arg)

    dp = jnp.sum((table[:, 5] + table[:, 6] * t) * sarg + table[:, 7] * carg)
    de = jnp.sum((table[:, 8] + table[:, 9] * t) * carg + table[:, 10] * sarg)
    return dp, de


# ---------------------------------------------------------------------------
# IAU 2000A
# ---------------------------------------------------------------------------


def nut00a(date1: Array, date2: Array) -> NutationAngles:
    """Nutation, IAU 2000A model (MHB2000 luni-solar and planetary).

    The luni-solar part uses the IERS 2003 Delaunay arguments, except for
    l' and D which keep the MHB2000 expressions.  The planetary part uses
    the MHB2000 linear arguments for l, F, D, Om and Neptune and the IERS
    2003 planetary longitudes for the rest.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        NutationAngles: ``(dpsi, deps)`` nutation in longitude and
        obliquity [radians], with respect to the equinox and ecliptic of
        date.
    """
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)

    # ---- Luni-solar nutation ----

    el = fal03(t)
    elp = jnp.fmod(
        1287104.79305 + t * (129596581.0481 + t * (-0.5532 + t * (0.000136 + t * (-0.00001149)))),
        TURNAS,
    ) * DAS2R
    f = faf03(t)
    d = jnp.fmod(
        1072260.70369 + t * (1602961601.2090 + t * (-6.3706 + t * (0.006593 + t * (-0.00003169)))),
        TURNAS,
    ) * DAS2R
    om = faom03(t)

    ls = jnp.array(LUNI_SOLAR_COEFFS, dtype=dtype)
    dpls, dels = _luni_solar(ls, jnp.array([el, elp, f, d, om]), t)

    # ---- Planetary nutation ----

    planetary = jnp.array(
        [
            jnp.fmod(2.35555598 + 8328.6914269554 * t, D2PI),  # l
            jnp.fmod(1.627905234 + 8433.466158131 * t, D2PI),  # F
            jnp.fmod(5.198466741 + 7771.3771468121 * t, D2PI),  # D
            jnp.fmod(2.18243920 - 33.757045 * t, D2PI),  # Om
            fame03(t),
            fave03(t),
            fae03(t),
            fama03(t),
            faju03(t),
            fasa03(t),
            faur03(t),
            jnp.fmod(5.321159000 + 3.8127774000 * t, D2PI),  # Neptune
            fapa03(t),
        ]
    )

    pl = jnp.array(PLANETARY_COEFFS, dtype=dtype)
    arg = _series_arguments(pl[:, :13], planetary)
    sarg = jnp.sin(arg)
    carg = jnp.cos(arg)

    dppl = jnp.sum(pl[:, 13] * sarg + pl[:, 14] * carg)
    depl = jnp.sum(pl[:, 15] * sarg + pl[:, 16] * carg)

    return NutationAngles((dpls + dppl) * U2R, (dels + depl) * U2R)


# ---------------------------------------------------------------------------
# IAU 2000B
# ---------------------------------------------------------------------------


def nut00b(date1: Array, date2: Array) -> NutationAngles:
    """Nutation, IAU 2000B model (McCarthy & Luzum truncation).

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        NutationAngles: ``(dpsi, deps)`` nutation in longitude and
        obliquity [radians].
    """
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)

    # Delaunay arguments, linear terms only (Simon et al. 1994)
    delaunay = jnp.array(
        [
            jnp.fmod(485868.249036 + 1717915923.2178 * t, TURNAS) * DAS2R,
            jnp.fmod(1287104.79305 + 129596581.0481 * t, TURNAS) * DAS2R,
            jnp.fmod(335779.526232 + 1739527262.8478 * t, TURNAS) * DAS2R,
            jnp.fmod(1072260.70369 + 1602961601.2090 * t, TURNAS) * DAS2R,
            jnp.fmod(450160.398036 - 6962890.5431 * t, TURNAS) * DAS2R,
        ]
    )

    ls = jnp.array(LUNI_SOLAR_COEFFS[:NUT00B_TERMS], dtype=dtype)
    dp, de = _luni_solar(ls, delaunay, t)

    return NutationAngles(dp * U2R + _DPPLAN, de * U2R + _DEPLAN)


# ---------------------------------------------------------------------------
# IAU 2006/2000A
# ---------------------------------------------------------------------------


def nut06a(date1: Array, date2: Array) -> NutationAngles:
    """Nutation, IAU 2006/2000A.

    IAU 2000A nutation with the adjustments required by the IAU 2006
    precession: the secular change in J2 and the different J2000.0
    obliquity (Wallace & Capitaine 2006).

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        NutationAngles: ``(dpsi, deps)`` nutation in longitude and
        obliquity [radians].
    """
    t = ((date1 - DJ00) + date2) / DJC

    # Factor correcting for secular variation of J2
    fj2 = -2.7774e-6 * t

    dp, de = nut00a(date1, date2)

    return NutationAngles(dp + dp * (0.4697e-6 + fj2), de + de * fj2)


# ---------------------------------------------------------------------------
# IAU 1980
# ---------------------------------------------------------------------------


def _fk5_argument(c0: float, c1: float, c2: float, c3: float, revs: float, t: Array) -> Array:
    # Polynomial in arcseconds plus whole revolutions per century
    return anpm((c0 + (c1 + (c2 + c3 * t) * t) * t) * DAS2R + jnp.fmod(revs * t, 1.0) * D2PI)


def nut80(date1: Array, date2: Array) -> NutationAngles:
    """Nutation, IAU 1980 model.

    The 106-term Wahr series with the FK5 fundamental arguments.  Belongs
    to the 1976/1980 equinox-based chain (:func:`~sofajax.pmat76`,
    :func:`~sofajax.gmst82`, :func:`~sofajax.eqeq94`) and must not be
    combined with the IAU 2000 or 2006 precession.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        NutationAngles: ``(dpsi, deps)`` nutation in longitude and
        obliquity [radians].
    """
    dtype = get_dtype()
    t = dtype(((date1 - DJ00) + date2) / DJC)

    fa = jnp.array(
        [
            _fk5_argument(485866.733, 715922.633, 31.310, 0.064, 1325.0, t),  # l
            _fk5_argument(1287099.804, 1292581.224, -0.577, -0.012, 99.0, t),  # l'
            _fk5_argument(335778.877, 295263.137, -13.257, 0.011, 1342.0, t),  # F
            _fk5_argument(1072261.307, 1105601.328, -6.891, 0.019, 1236.0, t),  # D
            _fk5_argument(450160.280, -482890.539, 7.455, 0.008, -5.0, t),  # Om
        ]
    )

    table = jnp.array(NUT80_COEFFS, dtype=dtype)
    arg = _series_arguments(table[:, :5], fa)

    dp = jnp.sum((table[:, 5] + table[:, 6] * t) * jnp.sin(arg))
    de = jnp.sum((table[:, 7] + table[:, 8] * t) * jnp.cos(arg))

    # Units of 0.1 mas
    return NutationAngles(dp * DAS2R / 1e4, de * DAS2R / 1e4)


def nutm80(date1: Array, date2: Array) -> Array:
    """Nutation matrix, IAU 1980.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 nutation matrix, mean of date to true of date.
    """
    dpsi, deps = nut80(date1, date2)
    return numat(obl80(date1, date2), dpsi, deps)


# ---------------------------------------------------------------------------
# Nutation matrix and model selection
# ---------------------------------------------------------------------------


def numat(epsa: Array, dpsi: Array, deps: Array) -> Array:
    """Form the nutation matrix from obliquity and nutation angles.

    ``Rn = Rx(-(epsa + deps)) @ Rz(-dpsi) @ Rx(epsa)``

    Args:
        epsa: Mean obliquity of date [rad].
        dpsi: Nutation in longitude [rad].
        deps: Nutation in obliquity [rad].

    Returns:
        3x3 nutation matrix, mean of date to true of date.
    """
    return Rx(-(epsa + deps)) @ Rz(-dpsi) @ Rx(epsa)


def nutation(
    date1: Array,
    date2: Array,
    model: PrecessionNutationModel | str = PrecessionNutationModel.IAU2006A,
) -> NutationAngles:
    """Nutation angles for an explicitly selected model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        model: ``"2000A"``, ``"2000B"`` or ``"2006A"``, or the matching
            :class:`~sofajax.PrecessionNutationModel` member.

    Returns:
        NutationAngles: ``(dpsi, deps)`` in radians.

    Raises:
        IllegalParameterError: If *model* is not recognised.
    """
    model = PrecessionNutationModel.parse(model)
    if model is PrecessionNutationModel.IAU2000A:
        return nut00a(date1, date2)
    if model is PrecessionNutationModel.IAU2000B:
        return nut00b(date1, date2)
    return nut06a(date1, date2)
