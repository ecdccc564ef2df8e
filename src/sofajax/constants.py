"""Astronomical constants shared by the SOFA routines.

All values follow the SOFA ``sofam.h`` definitions.
"""

DJ00: float = 2451545.0
"""Julian Date of the reference epoch J2000.0."""

DJC: float = 36525.0
"""Days per Julian century."""

DJM0: float = 2400000.5
"""Julian Date of the Modified Julian Date zero-point."""

DJM00: float = 51544.5
"""Modified Julian Date of J2000.0."""

DAS2R: float = 4.848136811095359935899141e-6
"""Arcseconds to radians."""

DMAS2R: float = DAS2R / 1e3
"""Milliarcseconds to radians."""

U2R: float = DAS2R / 1e7
"""Units of 0.1 microarcsecond to radians."""

D2PI: float = 6.283185307179586476925287
"""2*pi."""

TURNAS: float = 1296000.0
"""Arcseconds in a full circle."""
