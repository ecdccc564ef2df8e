"""Frame bias, precession and mean obliquity.

Three non-interchangeable generations are provided:

- **IAU 2000**: the IAU 1976 precession angles with the IAU 2000
  precession-rate corrections (:func:`pr00`) and the frame bias of
  :func:`bi00`, combined in :func:`bp00` / :func:`pmat00`.
- **IAU 1976**: the classical Lieske angles (:func:`prec76`,
  :func:`pmat76`) with no frame bias, for the 1980 equinox-based chain.
- **IAU 2006**: the P03 precession in Fukushima-Williams form
  (:func:`pfw06`, :func:`fw2m`), combined in :func:`bp06` /
  :func:`pmat06`, with the classical angles (:func:`pb06`) and the full
  angle set (:func:`p06e`) derived from the same model.

Bias is always applied before precession: ``rbp = rp @ rb``.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from sofajax._types import (
    BiasPrecession,
    CIPCoordinates,
    EulerAngles,
    FrameBias,
    FWAngles,
    PrecessionAngles,
    PrecessionRates,
)
from sofajax.constants import DAS2R, DJ00, DJC, DJM0, DJM00
from sofajax.rotations import Rx, Ry, Rz

# J2000.0 obliquity of the IAU 1980 model
_EPS0_1980: float = 84381.448 * DAS2R

# Frame bias, IAU 2000 (Chapront et al. 2002 for the J2000.0 equinox offset)
_DPBIAS: float = -0.041775 * DAS2R
_DEBIAS: float = -0.0068192 * DAS2R
_DRA0: float = -0.0146 * DAS2R

# Precession and obliquity rate corrections, radians per century
_PRECOR: float = -0.29965 * DAS2R
_OBLCOR: float = -0.02524 * DAS2R


# ---------------------------------------------------------------------------
# Mean obliquity
# ---------------------------------------------------------------------------


def obl80(date1: Array, date2: Array) -> Array:
    """Mean obliquity of the ecliptic, IAU 1980 model.

    Used by the IAU 2000 equinox-based quantities, corrected with the
    obliquity rate of :func:`pr00`.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Obliquity of the ecliptic in radians.
    """
    t = ((date1 - DJ00) + date2) / DJC
    return DAS2R * (84381.448 + (-46.8150 + (-0.00059 + 0.001813 * t) * t) * t)


def obl06(date1: Array, date2: Array) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Obliquity of the ecliptic in radians.
    """
    t = ((date1 - DJ00) + date2) / DJC
    eps0 = 84381.406 + t * (
        -46.836769 + t * (-0.0001831 + t * (0.00200340 + t * (-0.000000576 + t * (-0.0000000434))))
    )
    return eps0 * DAS2R


# ---------------------------------------------------------------------------
# IAU 2000 frame bias and precession
# ---------------------------------------------------------------------------


def bi00() -> FrameBias:
    """Frame bias components of the IAU 2000 precession-nutation models.

    Returns:
        FrameBias: ``(dpsibi, depsbi, dra)`` in radians.
    """
    return FrameBias(jnp.asarray(_DPBIAS), jnp.asarray(_DEBIAS), jnp.asarray(_DRA0))


def pr00(date1: Array, date2: Array) -> PrecessionRates:
    """Precession-rate part of the IAU 2000 precession-nutation models.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        PrecessionRates: Corrections ``(dpsipr, depspr)`` in radians.
    """
    t = ((date1 - DJ00) + date2) / DJC
    return PrecessionRates(_PRECOR * t, _OBLCOR * t)


def bp00(date1: Array, date2: Array) -> BiasPrecession:
    """Frame bias and precession, IAU 2000.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        BiasPrecession: Frame bias ``rb``, precession ``rp`` and their
        product ``rbp = rp @ rb``.
    """
    t = ((date1 - DJ00) + date2) / DJC

    # Precession angles (Lieske et al. 1977)
    psia77 = (5038.7784 + (-1.07259 + (-0.001147) * t) * t) * t * DAS2R
    oma77 = _EPS0_1980 + ((0.05127 + (-0.007726) * t) * t) * t * DAS2R
    chia = (10.5526 + (-2.38064 + (-0.001125) * t) * t) * t * DAS2R

    # IAU 2000 rate corrections
    dpsipr, depspr = pr00(date1, date2)
    psia = psia77 + dpsipr
    oma = oma77 + depspr

    rb = Rx(-_DEBIAS) @ Ry(_DPBIAS * jnp.sin(_EPS0_1980)) @ Rz(_DRA0)
    rp = Rz(chia) @ Rx(-oma) @ Rz(-psia) @ Rx(_EPS0_1980)

    return BiasPrecession(rb, rp, rp @ rb)


def pmat00(date1: Array, date2: Array) -> Array:
    """Precession matrix including frame bias, IAU 2000.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 bias-precession matrix, GCRS to mean of date.
    """
    return bp00(date1, date2).rbp


# ---------------------------------------------------------------------------
# IAU 2006 precession, Fukushima-Williams form
# ---------------------------------------------------------------------------


def pfw06(date1: Array, date2: Array) -> FWAngles:
    """Precession angles, IAU 2006, Fukushima-Williams 4-angle formulation.

    The angles include frame bias.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        FWAngles: ``(gamb, phib, psib, epsa)`` in radians.
    """
    t = ((date1 - DJ00) + date2) / DJC

    gamb = (
        -0.052928
        + (10.556378 + (0.4932044 + (-0.00031238 + (-0.000002788 + 0.0000000260 * t) * t) * t) * t) * t
    ) * DAS2R
    phib = (
        84381.412819
        + (-46.811016 + (0.0511268 + (0.00053289 + (-0.000000440 + (-0.0000000176) * t) * t) * t) * t) * t
    ) * DAS2R
    psib = (
        -0.041775
        + (5038.481484 + (1.5584175 + (-0.00018522 + (-0.000026452 + (-0.0000000148) * t) * t) * t) * t) * t
    ) * DAS2R

    return FWAngles(gamb, phib, psib, obl06(date1, date2))


def fw2m(gamb: Array, phib: Array, psi: Array, eps: Array) -> Array:
    """Form a rotation matrix from Fukushima-Williams angles.

    ``R = Rx(-eps) @ Rz(-psi) @ Rx(phib) @ Rz(gamb)``

    With the precession angles this gives the bias-precession matrix;
    with nutation added to ``psi`` and ``eps`` it gives the full
    bias-precession-nutation matrix.

    Args:
        gamb: F-W angle gamma_bar (radians).
        phib: F-W angle phi_bar (radians).
        psi: F-W angle psi (radians).
        eps: F-W angle epsilon (radians).

    Returns:
        3x3 rotation matrix.
    """
    return Rx(-eps) @ Rz(-psi) @ Rx(phib) @ Rz(gamb)


def fw2xy(gamb: Array, phib: Array, psi: Array, eps: Array) -> CIPCoordinates:
    """CIP X, Y from Fukushima-Williams angles.

    Args:
        gamb: F-W angle gamma_bar (radians).
        phib: F-W angle phi_bar (radians).
        psi: F-W angle psi (radians).
        eps: F-W angle epsilon (radians).

    Returns:
        CIPCoordinates: Bottom row ``(x, y)`` of the resulting matrix.
    """
    r = fw2m(gamb, phib, psi, eps)
    return CIPCoordinates(r[2, 0], r[2, 1])


def pmat06(date1: Array, date2: Array) -> Array:
    """Precession matrix including frame bias, IAU 2006.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 bias-precession matrix, GCRS to mean of date.
    """
    return fw2m(*pfw06(date1, date2))


def bp06(date1: Array, date2: Array) -> BiasPrecession:
    """Frame bias and precession, IAU 2006.

    The bias matrix is the Fukushima-Williams matrix at J2000.0; the
    precession matrix is what remains of the bias-precession matrix once
    the bias is removed.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        BiasPrecession: ``rb``, ``rp`` and ``rbp = rp @ rb``.
    """
    rb = fw2m(*pfw06(DJM0, DJM00))
    rbp = pmat06(date1, date2)
    return BiasPrecession(rb, rbp @ rb.T, rbp)


def pb06(date1: Array, date2: Array) -> EulerAngles:
    """Classical zeta, z, theta precession angles, IAU 2006, including bias.

    The angles are extracted from the bias-precession matrix so that
    ``Rz(-z) @ Ry(theta) @ Rz(-zeta)`` reproduces :func:`pmat06`.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        EulerAngles: ``(zeta, z, theta)`` in radians.
    """
    r = pmat06(date1, date2)

    # Solve for z, choosing the +/- pi alternative
    y = r[1, 2]
    x = -r[0, 2]
    flip = x < 0.0
    y = jnp.where(flip, -y, y)
    x = jnp.where(flip, -x, x)
    bz = -jnp.arctan2(y, x)

    # Derotate it out of the matrix, then solve for theta and zeta
    r = Rz(bz) @ r
    btheta = -jnp.arctan2(r[0, 2], r[2, 2])
    bzeta = -jnp.arctan2(-r[1, 0], r[1, 1])

    return EulerAngles(bzeta, bz, btheta)


def p06e(date1: Array, date2: Array) -> PrecessionAngles:
    """Precession angles, IAU 2006, equinox based.

    Evaluates the complete set of P03 angles (Capitaine et al. 2003,
    Hilton et al. 2006).  The angles are for precession only; frame bias
    is not included.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        PrecessionAngles: All sixteen angles in radians.
    """
    t = ((date1 - DJ00) + date2) / DJC

    eps0 = 84381.406 * DAS2R

    psia = (5038.481507 + (-1.0790069 + (-0.00114045 + (0.000132851 + (-0.0000000951) * t) * t) * t) * t) * t * DAS2R
    oma = eps0 + (
        (-0.025754 + (0.0512623 + (-0.00772503 + (-0.000000467 + 0.0000003337 * t) * t) * t) * t) * t * DAS2R
    )
    bpa = (4.199094 + (0.1939873 + (-0.00022466 + (-0.000000912 + 0.0000000120 * t) * t) * t) * t) * t * DAS2R
    bqa = (-46.811015 + (0.0510283 + (0.00052413 + (-0.000000646 + (-0.0000000172) * t) * t) * t) * t) * t * DAS2R
    pia = (46.998973 + (-0.0334926 + (-0.00012559 + (0.000000113 + (-0.0000000022) * t) * t) * t) * t) * t * DAS2R
    bpia = (
        629546.7936
        + (-867.95758 + (0.157992 + (-0.0005371 + (-0.00004797 + 0.000000072 * t) * t) * t) * t) * t
    ) * DAS2R
    epsa = obl06(date1, date2)
    chia = (10.556403 + (-2.3814292 + (-0.00121197 + (0.000170663 + (-0.0000000560) * t) * t) * t) * t) * t * DAS2R
    za = (
        -2.650545
        + (2306.077181 + (1.0927348 + (0.01826837 + (-0.000028596 + (-0.0000002904) * t) * t) * t) * t) * t
    ) * DAS2R
    zetaa = (
        2.650545
        + (2306.083227 + (0.2988499 + (0.01801828 + (-0.000005971 + (-0.0000003173) * t) * t) * t) * t) * t
    ) * DAS2R
    thetaa = (2004.191903 + (-0.4294934 + (-0.04182264 + (-0.000007089 + (-0.0000001274) * t) * t) * t) * t) * t * DAS2R
    pa = (5028.796195 + (1.1054348 + (0.00007964 + (-0.000023857 + (-0.0000000383) * t) * t) * t) * t) * t * DAS2R
    gam = (10.556403 + (0.4932044 + (-0.00031238 + (-0.000002788 + 0.0000000260 * t) * t) * t) * t) * t * DAS2R
    phi = eps0 + (
        (-46.811015 + (0.0511269 + (0.00053289 + (-0.000000440 + (-0.0000000176) * t) * t) * t) * t) * t * DAS2R
    )
    psi = (5038.481507 + (1.5584176 + (-0.00018522 + (-0.000026452 + (-0.0000000148) * t) * t) * t) * t) * t * DAS2R

    return PrecessionAngles(
        eps0=jnp.asarray(eps0),
        psia=psia,
        oma=oma,
        bpa=bpa,
        bqa=bqa,
        pia=pia,
        bpia=bpia,
        epsa=epsa,
        chia=chia,
        za=za,
        zetaa=zetaa,
        thetaa=thetaa,
        pa=pa,
        gam=gam,
        phi=phi,
        psi=psi,
    )


# ---------------------------------------------------------------------------
# IAU 1976 precession, classical equinox based
# ---------------------------------------------------------------------------


def prec76(date01: Array, date02: Array, date11: Array, date12: Array) -> EulerAngles:
    """Precession Euler angles between two epochs, IAU 1976 (Lieske et al. 1977).

    The matrix ``Rz(-z) @ Ry(theta) @ Rz(-zeta)`` carries mean coordinates
    of the starting epoch to mean coordinates of the ending epoch.

    Args:
        date01: TDB starting epoch as 2-part Julian Date (part 1).
        date02: TDB starting epoch as 2-part Julian Date (part 2).
        date11: TDB ending epoch as 2-part Julian Date (part 1).
        date12: TDB ending epoch as 2-part Julian Date (part 2).

    Returns:
        EulerAngles: ``(zeta, z, theta)`` in radians.
    """
    # Interval between fundamental epoch J2000.0 and start epoch, and
    # between start and end epochs (JC)
    t0 = ((date01 - DJ00) + date02) / DJC
    t = ((date11 - date01) + (date12 - date02)) / DJC

    tas2r = t * DAS2R
    w = 2306.2181 + (1.39656 - 0.000139 * t0) * t0

    zeta = (w + ((0.30188 - 0.000344 * t0) + 0.017998 * t) * t) * tas2r
    z = (w + ((1.09468 + 0.000066 * t0) + 0.018203 * t) * t) * tas2r
    theta = (
        (2004.3109 + (-0.85330 - 0.000217 * t0) * t0)
        + ((-0.42665 - 0.000217 * t0) - 0.041833 * t) * t
    ) * tas2r

    return EulerAngles(zeta, z, theta)


def pmat76(date1: Array, date2: Array) -> Array:
    """Precession matrix from J2000.0 to a date, IAU 1976.

    No frame bias is applied: the matrix goes from the mean equator and
    equinox of J2000.0 (FK5) to that of date.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 precession matrix.
    """
    zeta, z, theta = prec76(DJ00, 0.0, date1, date2)
    return Rz(-z) @ Ry(theta) @ Rz(-zeta)
