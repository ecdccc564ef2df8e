"""Tests for the bias-precession-nutation compositions."""

import jax.numpy as jnp
import pytest

from sofajax import (
    DJM0,
    IllegalParameterError,
    bias_precession_nutation,
    bpn2xy,
    num00a,
    num00b,
    num06a,
    nutm80,
    pn00,
    pn00a,
    pn06,
    pn06a,
    pmat76,
    pnm00a,
    pnm00b,
    pnm06a,
    pnm80,
    xy06,
    xys06a,
)

_DPSI = -0.9632552291149335877e-5
_DEPS = 0.4063197106621141414e-4


class TestPn00:
    def test_obliquity(self):
        pn = pn00(DJM0, 53736.0, _DPSI, _DEPS)
        assert jnp.abs(pn.epsa - 0.4090791789404229916) < 1e-12

    def test_components(self):
        pn = pn00(DJM0, 53736.0, _DPSI, _DEPS)
        assert jnp.abs(pn.rb[0, 1] - (-0.7078279744199196626e-7)) < 1e-18
        assert jnp.abs(pn.rp[0, 1] - (-0.1341647226791824349e-2)) < 1e-14
        assert jnp.abs(pn.rbp[2, 1] - (-0.4315219955198608970e-6)) < 1e-14
        assert jnp.abs(pn.rn[0, 1] - 0.8837746144872140812e-5) < 1e-16
        assert jnp.abs(pn.rn[2, 0] - (-0.3831847930135328368e-5)) < 1e-16
        assert jnp.abs(pn.rbpn[0, 1] - (-0.1332880253640848301e-2)) < 1e-14

    def test_composition_order(self):
        """rbpn = rn @ rp @ rb."""
        pn = pn00(DJM0, 53736.0, _DPSI, _DEPS)
        assert jnp.allclose(pn.rbpn, pn.rn @ pn.rp @ pn.rb, atol=1e-15)

    def test_pn00a_uses_nut00a(self):
        dpsi, deps, pn = pn00a(DJM0, 53736.0)
        assert jnp.abs(dpsi - (-0.9630909107115518431e-5)) < 1e-13
        assert jnp.abs(deps - 0.4063239174001678710e-4) < 1e-13
        assert jnp.allclose(pn.rbpn, pnm00a(DJM0, 53736.0), atol=0.0)


class TestPn06:
    def test_obliquity(self):
        pn = pn06(DJM0, 53736.0, _DPSI, _DEPS)
        assert jnp.abs(pn.epsa - 0.4090789763356509926) < 1e-12

    def test_components(self):
        pn = pn06(DJM0, 53736.0, _DPSI, _DEPS)
        assert jnp.abs(pn.rb[0, 1] - (-0.7078368960971557145e-7)) < 1e-14
        assert jnp.abs(pn.rp[0, 1] - (-0.1341646886204443795e-2)) < 1e-14
        assert jnp.abs(pn.rbp[1, 2] - (-0.3504269280170069029e-6)) < 1e-14
        assert jnp.abs(pn.rn[0, 1] - 0.8837746921149881914e-5) < 1e-14
        assert jnp.abs(pn.rn[1, 2] - (-0.4063198798558931215e-4)) < 1e-14
        assert jnp.abs(pn.rbpn[0, 1] - (-0.1332879913170492655e-2)) < 1e-14

    def test_composition_order(self):
        pn = pn06(DJM0, 53736.0, _DPSI, _DEPS)
        assert jnp.allclose(pn.rbpn, pn.rn @ pn.rp @ pn.rb, atol=1e-15)

    def test_pn06a_matches_pnm06a(self):
        _, _, pn = pn06a(DJM0, 53736.0)
        assert jnp.allclose(pn.rbpn, pnm06a(DJM0, 53736.0), atol=1e-15)


class TestPnm:
    def test_pnm00a(self):
        expected = jnp.array(
            [
                [0.9999995832793134257, 0.8372384254137809439e-3, 0.3639684306407150645e-3],
                [-0.8372535226570394543e-3, 0.9999996486491582471, 0.4132915262664072381e-4],
                [-0.3639337004054317729e-3, -0.4163386925461775873e-4, 0.9999999329094390695],
            ]
        )
        assert jnp.allclose(pnm00a(DJM0, 50123.9999), expected, atol=1e-14, rtol=0.0)

    def test_pnm00b(self):
        expected = jnp.array(
            [
                [0.9999995832776208280, 0.8372401264429654837e-3, 0.3639691681450271771e-3],
                [-0.8372552234147137424e-3, 0.9999996486477686123, 0.4132832190946052890e-4],
                [-0.3639344385341866407e-3, -0.4163303977421522785e-4, 0.9999999329092049734],
            ]
        )
        assert jnp.allclose(pnm00b(DJM0, 50123.9999), expected, atol=1e-14, rtol=0.0)

    def test_pnm06a(self):
        expected = jnp.array(
            [
                [0.9999995832794205484, 0.8372382772630962111e-3, 0.3639684771140623099e-3],
                [-0.8372533744743683605e-3, 0.9999996486492861646, 0.4132905944611019498e-4],
                [-0.3639337469629464969e-3, -0.4163377605910663999e-4, 0.9999999329094260057],
            ]
        )
        assert jnp.allclose(pnm06a(DJM0, 50123.9999), expected, atol=1e-14, rtol=0.0)


class TestNum:
    def test_num00a(self):
        r = num00a(DJM0, 53736.0)
        assert jnp.abs(r[0, 1] - 0.8836238544090873336e-5) < 1e-12
        assert jnp.abs(r[1, 2] - (-0.4063240865362499850e-4)) < 1e-12
        assert jnp.abs(r[2, 0] - (-0.3831194272065995866e-5)) < 1e-12

    def test_num00b(self):
        r = num00b(DJM0, 53736.0)
        assert jnp.abs(r[0, 1] - 0.8837746144871248011e-5) < 1e-12
        assert jnp.abs(r[2, 1] - 0.4063195412258168380e-4) < 1e-12

    def test_num06a(self):
        r = num06a(DJM0, 53736.0)
        assert jnp.abs(r[0, 1] - 0.8836241998111535233e-5) < 1e-12
        assert jnp.abs(r[1, 2] - (-0.4063240188248455065e-4)) < 1e-12


class TestCIPExtraction:
    def test_bpn2xy(self):
        x, y = bpn2xy(pnm06a(DJM0, 50123.9999))
        assert jnp.abs(x - (-0.3639337469629464969e-3)) < 1e-14
        assert jnp.abs(y - (-0.4163377605910663999e-4)) < 1e-14


class TestPnm80:
    def test_reference(self):
        expected = jnp.array(
            [
                [0.9999995831934611169, 0.8373654045728124011e-3, 0.3639121916933106191e-3],
                [-0.8373804896118301316e-3, 0.9999996485439674092, 0.4130202510421549752e-4],
                [-0.3638774789072144473e-3, -0.4160674085851722359e-4, 0.9999999329310274805],
            ]
        )
        r = pnm80(DJM0, 50123.9999)
        off = ~jnp.eye(3, dtype=bool)
        assert jnp.all(jnp.abs(r - expected)[off] < 1e-14)
        assert jnp.all(jnp.abs(jnp.diag(r - expected)) < 1e-12)

    def test_nutation_after_precession(self):
        expected = nutm80(DJM0, 50123.9999) @ pmat76(DJM0, 50123.9999)
        assert jnp.allclose(pnm80(DJM0, 50123.9999), expected, atol=0.0)


class TestXy06:
    def test_reference(self):
        # Reference is the IERS tabulated X, Y series; this development
        # agrees with it to a few picoradians.
        x, y = xy06(DJM0, 53736.0)
        assert jnp.abs(x - 0.5791308486706010975e-3) < 5e-12
        assert jnp.abs(y - 0.4020579816732958141e-4) < 5e-12

    @pytest.mark.parametrize("mjd", [45000.0, 51544.5, 53736.0, 60000.0])
    def test_matches_bpn_matrix(self, mjd):
        x, y = xy06(DJM0, mjd)
        xm, ym = bpn2xy(pnm06a(DJM0, mjd))
        assert jnp.abs(x - xm) < 1e-15
        assert jnp.abs(y - ym) < 1e-15

    def test_matches_xys06a(self):
        x, y = xy06(DJM0, 53736.0)
        ref = xys06a(DJM0, 53736.0)
        assert jnp.abs(x - ref.x) < 1e-15
        assert jnp.abs(y - ref.y) < 1e-15


class TestModelSelection:
    def test_dispatch(self):
        assert jnp.allclose(bias_precession_nutation(DJM0, 53736.0, "2000A"), pnm00a(DJM0, 53736.0), atol=0.0)
        assert jnp.allclose(bias_precession_nutation(DJM0, 53736.0, "2000B"), pnm00b(DJM0, 53736.0), atol=0.0)
        assert jnp.allclose(bias_precession_nutation(DJM0, 53736.0), pnm06a(DJM0, 53736.0), atol=0.0)

    def test_unknown_model(self):
        with pytest.raises(IllegalParameterError):
            bias_precession_nutation(DJM0, 53736.0, "IAU1976")
