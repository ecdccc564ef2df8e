"""Tests for the TIO locator and the polar motion matrix."""

import jax.numpy as jnp

from sofajax import DJM0, Rx, Ry, Rz, pom00, sp00


class TestSp00:
    def test_reference(self):
        assert jnp.abs(sp00(DJM0, 52541.0) - (-0.6216698469981019309e-11)) < 1e-12

    def test_zero_at_j2000(self):
        assert jnp.abs(sp00(2451545.0, 0.0)) < 1e-24


class TestPom00:
    def test_reference(self):
        rpom = pom00(2.55060238e-7, 1.860359247e-6, -0.1367174580728891460e-10)
        assert jnp.abs(rpom[0, 0] - 0.9999999999999674721) < 1e-12
        assert jnp.abs(rpom[0, 1] - (-0.1367174580728846989e-10)) < 1e-16
        assert jnp.abs(rpom[0, 2] - 0.2550602379999972345e-6) < 1e-16
        assert jnp.abs(rpom[1, 0] - 0.1414624947957029801e-10) < 1e-16
        assert jnp.abs(rpom[1, 1] - 0.9999999999982695317) < 1e-12
        assert jnp.abs(rpom[1, 2] - (-0.1860359246998866389e-5)) < 1e-16
        assert jnp.abs(rpom[2, 0] - (-0.2550602379741215021e-6)) < 1e-16
        assert jnp.abs(rpom[2, 1] - 0.1860359247002414021e-5) < 1e-16
        assert jnp.abs(rpom[2, 2] - 0.9999999999982370039) < 1e-12

    def test_composition_order(self):
        xp, yp, sp = 1e-6, -2e-6, 3e-11
        expected = Rx(-yp) @ Ry(-xp) @ Rz(sp)
        assert jnp.allclose(pom00(xp, yp, sp), expected, atol=1e-18)

    def test_zero_pole_is_identity(self):
        assert jnp.allclose(pom00(0.0, 0.0, 0.0), jnp.eye(3), atol=0.0)
