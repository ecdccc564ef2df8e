"""Type definitions shared by the precession-nutation pipeline.

Angle and matrix bundles are :class:`~typing.NamedTuple` instances, which
JAX treats as pytrees automatically, so every routine returning one works
unchanged under ``jax.jit`` and ``jax.vmap``.

Model and method selectors are :class:`enum.Enum` members resolved at
trace time (Python values), never inferred from array inputs.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from jax import Array

from sofajax.errors import IllegalParameterError


class FundamentalArguments(NamedTuple):
    """Fundamental arguments of nutation theory, IERS Conventions 2003.

    Attributes:
        l: Mean anomaly of the Moon [rad].
        lp: Mean anomaly of the Sun [rad].
        f: Mean longitude of the Moon minus that of the ascending node [rad].
        d: Mean elongation of the Moon from the Sun [rad].
        om: Mean longitude of the Moon's ascending node [rad].
        me: Mean longitude of Mercury [rad].
        ve: Mean longitude of Venus [rad].
        ea: Mean longitude of Earth [rad].
        ma: Mean longitude of Mars [rad].
        ju: Mean longitude of Jupiter [rad].
        sa: Mean longitude of Saturn [rad].
        ur: Mean longitude of Uranus [rad].
        ne: Mean longitude of Neptune [rad].
        pa: General accumulated precession in longitude [rad].
    """

    l: Array
    lp: Array
    f: Array
    d: Array
    om: Array
    me: Array
    ve: Array
    ea: Array
    ma: Array
    ju: Array
    sa: Array
    ur: Array
    ne: Array
    pa: Array


class NutationAngles(NamedTuple):
    """Nutation in longitude and obliquity.

    Attributes:
        dpsi: Nutation in longitude [rad].
        deps: Nutation in obliquity [rad].
    """

    dpsi: Array
    deps: Array


class FrameBias(NamedTuple):
    """Frame bias components of the IAU 2000 precession-nutation models.

    Attributes:
        dpsibi: Longitude correction [rad].
        depsbi: Obliquity correction [rad].
        dra: ICRS right ascension of the J2000.0 mean equinox [rad].
    """

    dpsibi: Array
    depsbi: Array
    dra: Array


class PrecessionRates(NamedTuple):
    """IAU 2000 precession-rate adjustments to the IAU 1976 model.

    Attributes:
        dpsipr: Precession correction in longitude [rad].
        depspr: Precession correction in obliquity [rad].
    """

    dpsipr: Array
    depspr: Array


class EulerAngles(NamedTuple):
    """Classical equatorial precession angles.

    The precession matrix is ``Rz(-z) @ Ry(theta) @ Rz(-zeta)``.

    Attributes:
        zeta: 1st rotation, about z [rad].
        z: 3rd rotation, about z [rad].
        theta: 2nd rotation, about y [rad].
    """

    zeta: Array
    z: Array
    theta: Array


class FWAngles(NamedTuple):
    """Fukushima-Williams precession angles.

    Attributes:
        gamb: F-W angle gamma_bar [rad].
        phib: F-W angle phi_bar [rad].
        psib: F-W angle psi_bar [rad].
        epsa: F-W angle epsilon_A, the mean obliquity of date [rad].
    """

    gamb: Array
    phib: Array
    psib: Array
    epsa: Array


class PrecessionAngles(NamedTuple):
    """Full set of IAU 2006 precession angles (Capitaine et al. 2003).

    Attributes:
        eps0: Obliquity at J2000.0.
        psia: Luni-solar precession.
        oma: Inclination of equator wrt J2000.0 ecliptic.
        bpa: Ecliptic pole x, J2000.0 ecliptic triad.
        bqa: Ecliptic pole -y, J2000.0 ecliptic triad.
        pia: Angle between moving and J2000.0 ecliptics.
        bpia: Longitude of ascending node of the ecliptic.
        epsa: Obliquity of the ecliptic.
        chia: Planetary precession.
        za: Equatorial precession: -3rd 323 Euler angle.
        zetaa: Equatorial precession: -1st 323 Euler angle.
        thetaa: Equatorial precession: 2nd 323 Euler angle.
        pa: General precession.
        gam: Fukushima-Williams angle gamma_J2000.
        phi: Fukushima-Williams angle phi_J2000.
        psi: Fukushima-Williams angle psi_J2000.

    All values are in radians.
    """

    eps0: Array
    psia: Array
    oma: Array
    bpa: Array
    bqa: Array
    pia: Array
    bpia: Array
    epsa: Array
    chia: Array
    za: Array
    zetaa: Array
    thetaa: Array
    pa: Array
    gam: Array
    phi: Array
    psi: Array


class BiasPrecession(NamedTuple):
    """Frame bias and precession matrices.

    Attributes:
        rb: Frame bias matrix, GCRS to mean J2000.0.
        rp: Precession matrix, mean J2000.0 to mean of date.
        rbp: Bias-precession matrix, ``rp @ rb``.
    """

    rb: Array
    rp: Array
    rbp: Array


class PrecessionNutation(NamedTuple):
    """Bias, precession and nutation matrices with the obliquity used.

    Attributes:
        epsa: Mean obliquity of date [rad].
        rb: Frame bias matrix.
        rp: Precession matrix.
        rbp: Bias-precession matrix, ``rp @ rb``.
        rn: Nutation matrix.
        rbpn: GCRS-to-true matrix, ``rn @ rbp``.
    """

    epsa: Array
    rb: Array
    rp: Array
    rbp: Array
    rn: Array
    rbpn: Array


class CIPCoordinates(NamedTuple):
    """Celestial Intermediate Pole coordinates in the GCRS.

    Attributes:
        x: CIP X direction cosine.
        y: CIP Y direction cosine.
    """

    x: Array
    y: Array


class CIPLocator(NamedTuple):
    """CIP coordinates together with the CIO locator.

    Attributes:
        x: CIP X direction cosine.
        y: CIP Y direction cosine.
        s: CIO locator s [rad].
    """

    x: Array
    y: Array
    s: Array


class PrecessionNutationModel(enum.Enum):
    """Precession-nutation model generation.

    Resolved at trace time (Python value), not at runtime.  The three
    models are distinct parameterizations and are never interchanged
    implicitly.

    Attributes:
        IAU2000A: IAU 2000A, full MHB2000 nutation (1365 terms).
        IAU2000B: IAU 2000B, truncated nutation (77 terms).
        IAU2006A: IAU 2006 precession with IAU 2000A nutation.
    """

    IAU2000A = "2000A"
    IAU2000B = "2000B"
    IAU2006A = "2006A"

    @classmethod
    def parse(cls, value: PrecessionNutationModel | str) -> PrecessionNutationModel:
        """Resolve a model from an enum member or its string value.

        Args:
            value: A :class:`PrecessionNutationModel` or one of
                ``"2000A"``, ``"2000B"``, ``"2006A"`` (case-insensitive).

        Returns:
            PrecessionNutationModel: The matching member.

        Raises:
            IllegalParameterError: If *value* names no known model.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if member.value == key:
                    return member
        raise IllegalParameterError(
            f"model must be one of {[m.value for m in cls]}, got '{value}'"
        )


class TransformMethod(enum.Enum):
    """Celestial-to-terrestrial composition path.

    Attributes:
        CIO: CIO-based path, ``Rpom @ Rz(ERA) @ Rc2i``.
        EQUINOX: Equinox-based path, ``Rpom @ Rz(GST) @ Rbpn``.
    """

    CIO = "cio"
    EQUINOX = "equinox"

    @classmethod
    def parse(cls, value: TransformMethod | str) -> TransformMethod:
        """Resolve a method from an enum member or its string value.

        Args:
            value: A :class:`TransformMethod` or one of ``"cio"``,
                ``"equinox"`` (case-insensitive).

        Returns:
            TransformMethod: The matching member.

        Raises:
            IllegalParameterError: If *value* names no known method.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise IllegalParameterError(
            f"method must be one of {[m.value for m in cls]}, got '{value}'"
        )
