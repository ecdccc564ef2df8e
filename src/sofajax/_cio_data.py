"""Coefficient tables for the CIO locator s and the equation of the
equinoxes complementary terms.

The CIO locator series is for ``s + XY/2`` and is split by power of t.
Every power has an argument table (integer multipliers of the eight
fundamental arguments l, l', F, D, Om, LVe, LE, pA) and a coefficient
table of ``(sin, cos)`` amplitudes in arcseconds.  The IAU 2000 and
IAU 2006 series share their argument tables and differ in a handful of
amplitudes and in the polynomial part.

Stored as Python tuples so that no array is created at import time.
"""

# fmt: off
# Polynomial coefficients, arcseconds
S00_POLY = (94.00e-6, 3808.35e-6, -119.94e-6, -72574.09e-6, 27.70e-6, 15.61e-6)
S06_POLY = (94.00e-6, 3808.65e-6, -122.68e-6, -72574.11e-6, 27.98e-6, 15.62e-6)

# Terms of order t^0 (33 terms)
S_T0_ARGS = (
    (0,0,0,0,1,0,0,0), (0,0,0,0,2,0,0,0), (0,0,2,-2,3,0,0,0),
    (0,0,2,-2,1,0,0,0), (0,0,2,-2,2,0,0,0), (0,0,2,0,3,0,0,0),
    (0,0,2,0,1,0,0,0), (0,0,0,0,3,0,0,0), (0,1,0,0,1,0,0,0),
    (0,1,0,0,-1,0,0,0), (1,0,0,0,-1,0,0,0), (1,0,0,0,1,0,0,0),
    (0,1,2,-2,3,0,0,0), (0,1,2,-2,1,0,0,0), (0,0,4,-4,4,0,0,0),
    (0,0,1,-1,1,-8,12,0), (0,0,2,0,0,0,0,0), (0,0,2,0,2,0,0,0),
    (1,0,2,0,3,0,0,0), (1,0,2,0,1,0,0,0), (0,0,2,-2,0,0,0,0),
    (0,1,-2,2,-3,0,0,0), (0,1,-2,2,-1,0,0,0), (0,0,0,0,0,8,-13,-1),
    (0,0,0,2,0,0,0,0), (2,0,-2,0,-1,0,0,0), (0,1,2,-2,2,0,0,0),
    (1,0,0,-2,1,0,0,0), (1,0,0,-2,-1,0,0,0), (0,0,4,-2,4,0,0,0),
    (0,0,2,-2,4,0,0,0), (1,0,-2,0,-3,0,0,0), (1,0,-2,0,-1,0,0,0),
)
S_T0_COEFFS = (
    (-2640.73e-6, 0.39e-6), (-63.53e-6, 0.02e-6), (-11.75e-6, -0.01e-6),
    (-11.21e-6, -0.01e-6), (4.57e-6, 0.00e-6), (-2.02e-6, 0.00e-6),
    (-1.98e-6, 0.00e-6), (1.72e-6, 0.00e-6), (1.41e-6, 0.01e-6),
    (1.26e-6, 0.01e-6), (0.63e-6, 0.00e-6), (0.63e-6, 0.00e-6),
    (-0.46e-6, 0.00e-6), (-0.45e-6, 0.00e-6), (-0.36e-6, 0.00e-6),
    (0.24e-6, 0.12e-6), (-0.32e-6, 0.00e-6), (-0.28e-6, 0.00e-6),
    (-0.27e-6, 0.00e-6), (-0.26e-6, 0.00e-6), (0.21e-6, 0.00e-6),
    (-0.19e-6, 0.00e-6), (-0.18e-6, 0.00e-6), (0.10e-6, -0.05e-6),
    (-0.15e-6, 0.00e-6), (0.14e-6, 0.00e-6), (0.14e-6, 0.00e-6),
    (-0.14e-6, 0.00e-6), (-0.14e-6, 0.00e-6), (-0.13e-6, 0.00e-6),
    (0.11e-6, 0.00e-6), (-0.11e-6, 0.00e-6), (-0.11e-6, 0.00e-6),
)

# Terms of order t^1 (3 terms)
S_T1_ARGS = (
    (0,0,0,0,2,0,0,0), (0,0,0,0,1,0,0,0), (0,0,2,-2,3,0,0,0),
)
S00_T1_COEFFS = (
    (-0.07e-6, 3.57e-6), (1.71e-6, -0.03e-6), (0.00e-6, 0.48e-6),
)
S06_T1_COEFFS = (
    (-0.07e-6, 3.57e-6), (1.73e-6, -0.03e-6), (0.00e-6, 0.48e-6),
)

# Terms of order t^2 (25 terms)
S_T2_ARGS = (
    (0,0,0,0,1,0,0,0), (0,0,2,-2,2,0,0,0), (0,0,2,0,2,0,0,0),
    (0,0,0,0,2,0,0,0), (0,1,0,0,0,0,0,0), (1,0,0,0,0,0,0,0),
    (0,1,2,-2,2,0,0,0), (0,0,2,0,1,0,0,0), (1,0,2,0,2,0,0,0),
    (0,1,-2,2,-2,0,0,0), (1,0,0,-2,0,0,0,0), (0,0,2,-2,1,0,0,0),
    (1,0,-2,0,-2,0,0,0), (0,0,0,2,0,0,0,0), (1,0,0,0,1,0,0,0),
    (1,0,-2,-2,-2,0,0,0), (1,0,0,0,-1,0,0,0), (1,0,2,0,1,0,0,0),
    (2,0,0,-2,0,0,0,0), (2,0,-2,0,-1,0,0,0), (0,0,2,2,2,0,0,0),
    (2,0,2,0,2,0,0,0), (2,0,0,0,0,0,0,0), (1,0,2,-2,2,0,0,0),
    (0,0,2,0,0,0,0,0),
)
_S_T2_TAIL = (
    (56.91e-6, 0.06e-6), (9.84e-6, -0.01e-6),
    (-8.85e-6, 0.01e-6), (-6.38e-6, -0.05e-6), (-3.07e-6, 0.00e-6),
    (2.23e-6, 0.00e-6), (1.67e-6, 0.00e-6), (1.30e-6, 0.00e-6),
    (0.93e-6, 0.00e-6), (0.68e-6, 0.00e-6), (-0.55e-6, 0.00e-6),
    (0.53e-6, 0.00e-6), (-0.27e-6, 0.00e-6), (-0.27e-6, 0.00e-6),
    (-0.26e-6, 0.00e-6), (-0.25e-6, 0.00e-6), (0.22e-6, 0.00e-6),
    (-0.21e-6, 0.00e-6), (0.20e-6, 0.00e-6), (0.17e-6, 0.00e-6),
    (0.13e-6, 0.00e-6), (-0.13e-6, 0.00e-6), (-0.12e-6, 0.00e-6),
    (-0.11e-6, 0.00e-6),
)
S00_T2_COEFFS = ((743.53e-6, -0.17e-6),) + _S_T2_TAIL
S06_T2_COEFFS = ((743.52e-6, -0.17e-6),) + _S_T2_TAIL

# Terms of order t^3 (4 terms)
S_T3_ARGS = (
    (0,0,0,0,1,0,0,0), (0,0,2,-2,2,0,0,0),
    (0,0,2,0,2,0,0,0), (0,0,0,0,2,0,0,0),
)
S00_T3_COEFFS = (
    (0.30e-6, -23.51e-6), (-0.03e-6, -1.39e-6),
    (-0.01e-6, -0.24e-6), (0.00e-6, 0.22e-6),
)
S06_T3_COEFFS = (
    (0.30e-6, -23.42e-6), (-0.03e-6, -1.46e-6),
    (-0.01e-6, -0.25e-6), (0.00e-6, 0.23e-6),
)

# Terms of order t^4 (1 term)
S_T4_ARGS = ((0,0,0,0,1,0,0,0),)
S_T4_COEFFS = ((-0.26e-6, -0.01e-6),)

# Equation of the equinoxes complementary terms, order t^0 (33 terms)
EECT_T0_ARGS = (
    (0,0,0,0,1,0,0,0), (0,0,0,0,2,0,0,0), (0,0,2,-2,3,0,0,0),
    (0,0,2,-2,1,0,0,0), (0,0,2,-2,2,0,0,0), (0,0,2,0,3,0,0,0),
    (0,0,2,0,1,0,0,0), (0,0,0,0,3,0,0,0), (0,1,0,0,1,0,0,0),
    (0,1,0,0,-1,0,0,0), (1,0,0,0,-1,0,0,0), (1,0,0,0,1,0,0,0),
    (0,1,2,-2,3,0,0,0), (0,1,2,-2,1,0,0,0), (0,0,4,-4,4,0,0,0),
    (0,0,1,-1,1,-8,12,0), (0,0,2,0,0,0,0,0), (0,0,2,0,2,0,0,0),
    (1,0,2,0,3,0,0,0), (1,0,2,0,1,0,0,0), (0,0,2,-2,0,0,0,0),
    (0,1,-2,2,-3,0,0,0), (0,1,-2,2,-1,0,0,0), (0,0,0,0,0,8,-13,-1),
    (0,0,0,2,0,0,0,0), (2,0,-2,0,-1,0,0,0), (1,0,0,-2,1,0,0,0),
    (0,1,2,-2,2,0,0,0), (1,0,0,-2,-1,0,0,0), (0,0,4,-2,4,0,0,0),
    (0,0,2,-2,4,0,0,0), (1,0,-2,0,-3,0,0,0), (1,0,-2,0,-1,0,0,0),
)
EECT_T0_COEFFS = (
    (2640.96e-6, -0.39e-6), (63.52e-6, -0.02e-6), (11.75e-6, 0.01e-6),
    (11.21e-6, 0.01e-6), (-4.55e-6, 0.00e-6), (2.02e-6, 0.00e-6),
    (1.98e-6, 0.00e-6), (-1.72e-6, 0.00e-6), (-1.41e-6, -0.01e-6),
    (-1.26e-6, -0.01e-6), (-0.63e-6, 0.00e-6), (-0.63e-6, 0.00e-6),
    (0.46e-6, 0.00e-6), (0.45e-6, 0.00e-6), (0.36e-6, 0.00e-6),
    (-0.24e-6, -0.12e-6), (0.32e-6, 0.00e-6), (0.28e-6, 0.00e-6),
    (0.27e-6, 0.00e-6), (0.26e-6, 0.00e-6), (-0.21e-6, 0.00e-6),
    (0.19e-6, 0.00e-6), (0.18e-6, 0.00e-6), (-0.10e-6, 0.05e-6),
    (0.15e-6, 0.00e-6), (-0.14e-6, 0.00e-6), (0.14e-6, 0.00e-6),
    (-0.14e-6, 0.00e-6), (0.14e-6, 0.00e-6), (0.13e-6, 0.00e-6),
    (-0.11e-6, 0.00e-6), (0.11e-6, 0.00e-6), (0.11e-6, 0.00e-6),
)

# Equation of the equinoxes complementary terms, order t^1 (1 term)
EECT_T1_ARGS = ((0,0,0,0,1,0,0,0),)
EECT_T1_COEFFS = ((-0.87e-6, 0.00e-6),)
# fmt: on
