"""Celestial-to-terrestrial matrix.

Two composition paths produce the GCRS-to-ITRS matrix:

- **CIO based**: ``Rc2t = Rpom @ Rz(ERA) @ Rc2i`` (:func:`c2tcio`)
- **Equinox based**: ``Rc2t = Rpom @ Rz(GST) @ Rbpn`` (:func:`c2teqx`)

For the same model generation the two paths agree to well below a
microarcsecond.  :func:`celestial_to_terrestrial` is the entry point
that takes the model and the path as explicit arguments; the SOFA-named
functions fix both by name.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jax import Array

from sofajax._types import PrecessionNutationModel, TransformMethod
from sofajax.cio import c2i00a, c2i00b, c2i06a, c2ixy
from sofajax.earth_rotation import ee00, ee00b, era00, gmst00, gst00a, gst06a
from sofajax.polar_motion import pom00, sp00
from sofajax.precession_nutation import pn00, pnm00a, pnm00b, pnm06a
from sofajax.rotations import Rz
from sofajax.utils import anp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformConfig:
    """Model and composition path for the celestial-to-terrestrial matrix.

    Both fields accept an enum member or its string value and are
    normalized to the enum on construction.  Selection is static: it is
    resolved at JAX trace time.

    Args:
        model: Precession-nutation model, ``"2000A"``, ``"2000B"`` or
            ``"2006A"``.
        method: Composition path, ``"cio"`` or ``"equinox"``.

    Raises:
        IllegalParameterError: If either field is not recognised.

    Examples:
        ```python
        from sofajax import TransformConfig
        config = TransformConfig(model="2000A", method="equinox")
        config.model
        ```
    """

    model: PrecessionNutationModel | str = PrecessionNutationModel.IAU2006A
    method: TransformMethod | str = TransformMethod.CIO

    def __post_init__(self) -> None:
        object.__setattr__(self, "model", PrecessionNutationModel.parse(self.model))
        object.__setattr__(self, "method", TransformMethod.parse(self.method))


# ---------------------------------------------------------------------------
# Fixed compositions
# ---------------------------------------------------------------------------


def c2tcio(rc2i: Array, era: Array, rpom: Array) -> Array:
    """Assemble the celestial-to-terrestrial matrix from CIO-based components.

    Args:
        rc2i: 3x3 celestial-to-intermediate matrix.
        era: Earth Rotation Angle [rad].
        rpom: 3x3 polar motion matrix.

    Returns:
        3x3 celestial-to-terrestrial matrix, ``rpom @ Rz(era) @ rc2i``.
    """
    return rpom @ Rz(era) @ rc2i


def c2teqx(rbpn: Array, gst: Array, rpom: Array) -> Array:
    """Assemble the celestial-to-terrestrial matrix from equinox-based components.

    Args:
        rbpn: 3x3 celestial-to-true matrix.
        gst: Greenwich (apparent) sidereal time [rad].
        rpom: 3x3 polar motion matrix.

    Returns:
        3x3 celestial-to-terrestrial matrix, ``rpom @ Rz(gst) @ rbpn``.
    """
    return rpom @ Rz(gst) @ rbpn


# ---------------------------------------------------------------------------
# Dated variants
# ---------------------------------------------------------------------------


def c2t00a(tta: Array, ttb: Array, uta: Array, utb: Array, xp: Array, yp: Array) -> Array:
    """Celestial-to-terrestrial matrix, IAU 2000A, CIO based.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        xp: Pole x coordinate [rad].
        yp: Pole y coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    rc2i = c2i00a(tta, ttb)
    era = era00(uta, utb)
    rpom = pom00(xp, yp, sp00(tta, ttb))
    return c2tcio(rc2i, era, rpom)


def c2t00b(tta: Array, ttb: Array, uta: Array, utb: Array, xp: Array, yp: Array) -> Array:
    """Celestial-to-terrestrial matrix, IAU 2000B, CIO based.

    The TIO locator s' is neglected.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        xp: Pole x coordinate [rad].
        yp: Pole y coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    rc2i = c2i00b(tta, ttb)
    era = era00(uta, utb)
    rpom = pom00(xp, yp, 0.0)
    return c2tcio(rc2i, era, rpom)


def c2t06a(tta: Array, ttb: Array, uta: Array, utb: Array, xp: Array, yp: Array) -> Array:
    """Celestial-to-terrestrial matrix, IAU 2006/2000A, CIO based.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        xp: Pole x coordinate [rad].
        yp: Pole y coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    rc2i = c2i06a(tta, ttb)
    era = era00(uta, utb)
    rpom = pom00(xp, yp, sp00(tta, ttb))
    return c2tcio(rc2i, era, rpom)


def c2tpe(
    tta: Array,
    ttb: Array,
    uta: Array,
    utb: Array,
    dpsi: Array,
    deps: Array,
    xp: Array,
    yp: Array,
) -> Array:
    """Celestial-to-terrestrial matrix, IAU 2000, equinox based, given the nutation.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude [rad].
        deps: Nutation in obliquity [rad].
        xp: Pole x coordinate [rad].
        yp: Pole y coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    pn = pn00(tta, ttb, dpsi, deps)
    gmst = gmst00(uta, utb, tta, ttb)
    ee = ee00(tta, ttb, pn.epsa, dpsi)
    rpom = pom00(xp, yp, sp00(tta, ttb))
    return c2teqx(pn.rbpn, gmst + ee, rpom)


def c2txy(
    tta: Array,
    ttb: Array,
    uta: Array,
    utb: Array,
    x: Array,
    y: Array,
    xp: Array,
    yp: Array,
) -> Array:
    """Celestial-to-terrestrial matrix, IAU 2000, CIO based, given the CIP X, Y.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        x: CIP X coordinate.
        y: CIP Y coordinate.
        xp: Pole x coordinate [rad].
        yp: Pole y coordinate [rad].

    Returns:
        3x3 celestial-to-terrestrial matrix.
    """
    rc2i = c2ixy(tta, ttb, x, y)
    era = era00(uta, utb)
    rpom = pom00(xp, yp, sp00(tta, ttb))
    return c2tcio(rc2i, era, rpom)


# ---------------------------------------------------------------------------
# Explicit model and path selection
# ---------------------------------------------------------------------------


def _c2t_equinox(
    tta: Array,
    ttb: Array,
    uta: Array,
    utb: Array,
    xp: Array,
    yp: Array,
    model: PrecessionNutationModel,
) -> Array:
    if model is PrecessionNutationModel.IAU2000A:
        rbpn = pnm00a(tta, ttb)
        gst = gst00a(uta, utb, tta, ttb)
        sp = sp00(tta, ttb)
    elif model is PrecessionNutationModel.IAU2000B:
        rbpn = pnm00b(tta, ttb)
        gst = anp(gmst00(uta, utb, tta, ttb) + ee00b(tta, ttb))
        sp = 0.0
    else:
        rbpn = pnm06a(tta, ttb)
        gst = gst06a(uta, utb, tta, ttb)
        sp = sp00(tta, ttb)
    return c2teqx(rbpn, gst, pom00(xp, yp, sp))


def celestial_to_terrestrial(
    tta: Array,
    ttb: Array,
    uta: Array,
    utb: Array,
    xp: Array,
    yp: Array,
    model: PrecessionNutationModel | str = PrecessionNutationModel.IAU2006A,
    method: TransformMethod | str = TransformMethod.CIO,
) -> Array:
    """Celestial-to-terrestrial (GCRS to ITRS) matrix.

    The model and composition path are explicit, caller-visible choices.
    Each model is internally consistent on both paths: the 2000A and
    2000B equinox paths use the matching IAU 2000 sidereal time, the
    2006A equinox path uses the IAU 2006 sidereal time, and 2000B
    neglects the TIO locator on both paths.

    Args:
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        xp: Pole x coordinate [rad].
        yp: Pole y coordinate [rad].
        model: ``"2000A"``, ``"2000B"`` or ``"2006A"``.  Default ``"2006A"``.
        method: ``"cio"`` or ``"equinox"``.  Default ``"cio"``.

    Returns:
        3x3 celestial-to-terrestrial matrix.

    Raises:
        IllegalParameterError: If *model* or *method* is not recognised.

    Examples:
        ```python
        from sofajax import celestial_to_terrestrial
        r = celestial_to_terrestrial(2400000.5, 54195.500754444, 2400000.5, 54195.499999,
                                     0.0, 0.0, model="2006A", method="cio")
        ```
    """
    config = TransformConfig(model=model, method=method)
    logger.debug(
        "Building celestial-to-terrestrial matrix: model=%s method=%s",
        config.model.value,
        config.method.value,
    )

    if config.method is TransformMethod.EQUINOX:
        return _c2t_equinox(tta, ttb, uta, utb, xp, yp, config.model)

    if config.model is PrecessionNutationModel.IAU2000A:
        return c2t00a(tta, ttb, uta, utb, xp, yp)
    if config.model is PrecessionNutationModel.IAU2000B:
        return c2t00b(tta, ttb, uta, utb, xp, yp)
    return c2t06a(tta, ttb, uta, utb, xp, yp)
