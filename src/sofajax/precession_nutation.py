"""Bias-precession-nutation matrices.

Combines the frame bias and precession of :mod:`sofajax.precession` with
the nutation of :mod:`sofajax.nutation`.  Every composition has the same
fixed order, ``rbpn = rn @ rp @ rb``, and is written once in
:func:`pn00` (IAU 2000 generation) or :func:`pn06` (IAU 2006
generation); the dated variants only choose the nutation model.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

from jax import Array

from sofajax._types import CIPCoordinates, PrecessionNutation, PrecessionNutationModel
from sofajax.constants import DJM0, DJM00
from sofajax.nutation import nut00a, nut00b, nut06a, numat, nutm80
from sofajax.precession import bp00, fw2m, fw2xy, obl06, obl80, pfw06, pmat76, pr00

# ---------------------------------------------------------------------------
# IAU 2000 generation
# ---------------------------------------------------------------------------


def pn00(date1: Array, date2: Array, dpsi: Array, deps: Array) -> PrecessionNutation:
    """Precession-nutation, IAU 2000 model, given the nutation angles.

    The mean obliquity is the IAU 1980 value corrected by the IAU 2000
    obliquity rate.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude [rad].
        deps: Nutation in obliquity [rad].

    Returns:
        PrecessionNutation: Obliquity and the bias, precession,
        bias-precession, nutation and combined matrices.
    """
    epsa = obl80(date1, date2) + pr00(date1, date2).depspr
    rb, rp, rbp = bp00(date1, date2)
    rn = numat(epsa, dpsi, deps)
    return PrecessionNutation(epsa, rb, rp, rbp, rn, rn @ rbp)


def pn00a(date1: Array, date2: Array) -> tuple[Array, Array, PrecessionNutation]:
    """Precession-nutation, IAU 2000A model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of ``(dpsi, deps, pn)`` where *pn* is the
        :class:`~sofajax.PrecessionNutation` from :func:`pn00`.
    """
    dpsi, deps = nut00a(date1, date2)
    return dpsi, deps, pn00(date1, date2, dpsi, deps)


def pn00b(date1: Array, date2: Array) -> tuple[Array, Array, PrecessionNutation]:
    """Precession-nutation, IAU 2000B model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of ``(dpsi, deps, pn)`` as for :func:`pn00a`.
    """
    dpsi, deps = nut00b(date1, date2)
    return dpsi, deps, pn00(date1, date2, dpsi, deps)


def pnm00a(date1: Array, date2: Array) -> Array:
    """Bias-precession-nutation matrix, IAU 2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 matrix, GCRS to true equator and equinox of date.
    """
    return pn00a(date1, date2)[2].rbpn


def pnm00b(date1: Array, date2: Array) -> Array:
    """Bias-precession-nutation matrix, IAU 2000B.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 matrix, GCRS to true equator and equinox of date.
    """
    return pn00b(date1, date2)[2].rbpn


def num00a(date1: Array, date2: Array) -> Array:
    """Nutation matrix, IAU 2000A."""
    return pn00a(date1, date2)[2].rn


def num00b(date1: Array, date2: Array) -> Array:
    """Nutation matrix, IAU 2000B."""
    return pn00b(date1, date2)[2].rn


# ---------------------------------------------------------------------------
# IAU 2006 generation
# ---------------------------------------------------------------------------


def pn06(date1: Array, date2: Array, dpsi: Array, deps: Array) -> PrecessionNutation:
    """Precession-nutation, IAU 2006 model, given the nutation angles.

    Every matrix is built from Fukushima-Williams angles; the nutation is
    folded into psi and epsilon before the final matrix is formed.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude [rad].
        deps: Nutation in obliquity [rad].

    Returns:
        PrecessionNutation: Obliquity and the bias, precession,
        bias-precession, nutation and combined matrices.
    """
    rb = fw2m(*pfw06(DJM0, DJM00))

    gamb, phib, psib, eps = pfw06(date1, date2)
    rbp = fw2m(gamb, phib, psib, eps)
    rbpn = fw2m(gamb, phib, psib + dpsi, eps + deps)

    return PrecessionNutation(eps, rb, rbp @ rb.T, rbp, rbpn @ rbp.T, rbpn)


def pn06a(date1: Array, date2: Array) -> tuple[Array, Array, PrecessionNutation]:
    """Precession-nutation, IAU 2006/2000A model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of ``(dpsi, deps, pn)`` where *pn* is the
        :class:`~sofajax.PrecessionNutation` from :func:`pn06`.
    """
    dpsi, deps = nut06a(date1, date2)
    return dpsi, deps, pn06(date1, date2, dpsi, deps)


def pnm06a(date1: Array, date2: Array) -> Array:
    """Bias-precession-nutation matrix, IAU 2006/2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 matrix, GCRS to true equator and equinox of date.
    """
    gamb, phib, psib, epsa = pfw06(date1, date2)
    dpsi, deps = nut06a(date1, date2)
    return fw2m(gamb, phib, psib + dpsi, epsa + deps)


def num06a(date1: Array, date2: Array) -> Array:
    """Nutation matrix, IAU 2006/2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 nutation matrix, mean of date to true of date.
    """
    dpsi, deps = nut06a(date1, date2)
    return numat(obl06(date1, date2), dpsi, deps)


# ---------------------------------------------------------------------------
# IAU 1976/1980
# ---------------------------------------------------------------------------


def pnm80(date1: Array, date2: Array) -> Array:
    """Precession-nutation matrix, IAU 1976 precession and IAU 1980 nutation.

    There is no frame bias in this model: the matrix goes from the mean
    equator and equinox of J2000.0 (FK5) to the true equator and equinox
    of date.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 precession-nutation matrix.
    """
    return nutm80(date1, date2) @ pmat76(date1, date2)


# ---------------------------------------------------------------------------
# CIP coordinates and model selection
# ---------------------------------------------------------------------------


def bpn2xy(rbpn: Array) -> CIPCoordinates:
    """Extract CIP X, Y coordinates from a bias-precession-nutation matrix.

    Args:
        rbpn: 3x3 celestial-to-true matrix.

    Returns:
        CIPCoordinates: ``(x, y)``, the bottom row of *rbpn*.
    """
    return CIPCoordinates(rbpn[2, 0], rbpn[2, 1])


def xy06(date1: Array, date2: Array) -> CIPCoordinates:
    """CIP X, Y, IAU 2006 precession and IAU 2000A nutation, from the series.

    Evaluates the P03 precession polynomials in Fukushima-Williams form
    together with the IAU 2000A luni-solar and planetary Fourier series
    (:func:`~sofajax.nut06a`) and takes X, Y as the direction cosines of
    the resulting pole.  The IERS publishes the same development as a
    single tabulated X, Y series; the two differ by under a
    microarcsecond near J2000.0.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        CIPCoordinates: ``(x, y)`` in the GCRS [radians].
    """
    gamb, phib, psib, epsa = pfw06(date1, date2)
    dpsi, deps = nut06a(date1, date2)
    return fw2xy(gamb, phib, psib + dpsi, epsa + deps)


def bias_precession_nutation(
    date1: Array,
    date2: Array,
    model: PrecessionNutationModel | str = PrecessionNutationModel.IAU2006A,
) -> Array:
    """Bias-precession-nutation matrix for an explicitly selected model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        model: ``"2000A"``, ``"2000B"`` or ``"2006A"``.

    Returns:
        3x3 matrix, GCRS to true equator and equinox of date.

    Raises:
        IllegalParameterError: If *model* is not recognised.
    """
    model = PrecessionNutationModel.parse(model)
    if model is PrecessionNutationModel.IAU2000A:
        return pnm00a(date1, date2)
    if model is PrecessionNutationModel.IAU2000B:
        return pnm00b(date1, date2)
    return pnm06a(date1, date2)
