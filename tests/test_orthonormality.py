"""Every rotation matrix the library builds is orthonormal with unit determinant."""

import pytest

from sofajax import (
    DJM0,
    bp00,
    bp06,
    c2i00a,
    c2i00b,
    c2i06a,
    c2ixys,
    nut00a,
    num00a,
    num00b,
    num06a,
    numat,
    nutm80,
    obl80,
    pmat76,
    pnm00a,
    pnm00b,
    pnm06a,
    pnm80,
    pom00,
    sp00,
    xys06a,
)

_EPOCHS = [33282.0, 45000.0, 51544.5, 53736.0, 60000.0, 69807.0]

_BUILDERS = {
    "bp00.rb": lambda d: bp00(DJM0, d).rb,
    "bp00.rp": lambda d: bp00(DJM0, d).rp,
    "bp00.rbp": lambda d: bp00(DJM0, d).rbp,
    "bp06.rb": lambda d: bp06(DJM0, d).rb,
    "bp06.rp": lambda d: bp06(DJM0, d).rp,
    "bp06.rbp": lambda d: bp06(DJM0, d).rbp,
    "pmat76": lambda d: pmat76(DJM0, d),
    "numat": lambda d: numat(obl80(DJM0, d), *nut00a(DJM0, d)),
    "num00a": lambda d: num00a(DJM0, d),
    "num00b": lambda d: num00b(DJM0, d),
    "num06a": lambda d: num06a(DJM0, d),
    "nutm80": lambda d: nutm80(DJM0, d),
    "pnm00a": lambda d: pnm00a(DJM0, d),
    "pnm00b": lambda d: pnm00b(DJM0, d),
    "pnm06a": lambda d: pnm06a(DJM0, d),
    "pnm80": lambda d: pnm80(DJM0, d),
    "c2ixys": lambda d: c2ixys(*xys06a(DJM0, d)),
    "c2i00a": lambda d: c2i00a(DJM0, d),
    "c2i00b": lambda d: c2i00b(DJM0, d),
    "c2i06a": lambda d: c2i06a(DJM0, d),
    "pom00": lambda d: pom00(2.55060238e-7, 1.860359247e-6, sp00(DJM0, d)),
}


class TestOrthonormality:
    @pytest.mark.parametrize("days", _EPOCHS)
    @pytest.mark.parametrize("name", list(_BUILDERS))
    def test_rotation_matrix(self, name, days, assert_orthonormal):
        assert_orthonormal(_BUILDERS[name](days))

    def test_polar_motion_large_angles(self, assert_orthonormal):
        """Polar motion stays orthonormal without small-angle approximations."""
        assert_orthonormal(pom00(0.3, -0.2, 0.1))
