"""Tests for Earth rotation angle, sidereal time and the equation of the equinoxes/origins."""

import jax
import jax.numpy as jnp
import pytest

from sofajax import (
    D2PI,
    DJM0,
    anp,
    anpm,
    ee00,
    ee00a,
    ee00b,
    ee06a,
    eect00,
    eo06a,
    eors,
    eqeq94,
    era00,
    gmst00,
    gmst06,
    gmst82,
    gst00a,
    gst00b,
    gst06,
    gst06a,
    gst94,
    nut80,
    pnm06a,
    s06a,
)

_RNPB = jnp.array(
    [
        [0.9999989440476103608, -0.1332881761240011518e-2, -0.5790767434730085097e-3],
        [0.1332858254308954453e-2, 0.9999991109044505944, -0.4097782710401555759e-4],
        [0.5791308472168153320e-3, 0.4020595661593994396e-4, 0.9999998314954572365],
    ]
)


class TestEra00:
    def test_reference(self):
        assert jnp.abs(era00(DJM0, 54388.0) - 0.4022837240028158102) < 1e-12

    def test_split_invariance(self):
        """Swapping or re-splitting the date gives the same angle."""
        ref = era00(DJM0, 54388.0)
        assert jnp.abs(era00(54388.0, DJM0) - ref) < 1e-12
        assert jnp.abs(era00(DJM0 + 54388.0, 0.0) - ref) < 1e-8

    def test_range(self):
        days = jnp.linspace(40000.0, 70000.0, 97)
        era = jax.vmap(lambda d: era00(DJM0, d))(days)
        assert jnp.all(era >= 0.0)
        assert jnp.all(era < D2PI)

    def test_one_day_advance(self):
        """In one UT1 day the Earth turns through 2pi * 1.00273781191135448 rad."""
        e0 = era00(DJM0, 54388.0)
        e1 = era00(DJM0, 54389.0)
        expected = anp(D2PI * 0.00273781191135448)
        assert jnp.abs(anp(e1 - e0) - expected) < 1e-9

    def test_jit(self):
        assert jnp.abs(jax.jit(era00)(DJM0, 54388.0) - 0.4022837240028158102) < 1e-12


class TestGreenwichMeanSiderealTime:
    def test_gmst00(self):
        assert jnp.abs(gmst00(DJM0, 53736.0, DJM0, 53736.0) - 1.754174972210740592) < 1e-12

    def test_gmst06(self):
        assert jnp.abs(gmst06(DJM0, 53736.0, DJM0, 53736.0) - 1.754174971870091203) < 1e-12

    def test_range(self):
        days = jnp.linspace(40000.0, 70000.0, 41)
        g = jax.vmap(lambda d: gmst06(DJM0, d, DJM0, d))(days)
        assert jnp.all(g >= 0.0)
        assert jnp.all(g < D2PI)

    def test_gmst82(self):
        assert jnp.abs(gmst82(DJM0, 53736.0) - 1.754174981860675096) < 1e-12

    def test_gmst82_split_invariance(self):
        a = gmst82(DJM0, 53736.0)
        b = gmst82(53736.0, DJM0)
        c = gmst82(DJM0 + 53736.0, 0.0)
        assert jnp.abs(a - b) < 1e-15
        assert jnp.abs(a - c) < 1e-9

    def test_gmst82_close_to_gmst00(self):
        """The 1982 expression and the ERA-based 2000 one agree to a few mas."""
        diff = anpm(gmst82(DJM0, 53736.0) - gmst00(DJM0, 53736.0, DJM0, 53736.0))
        assert jnp.abs(diff) < 3e-8


class TestGreenwichApparentSiderealTime:
    def test_gst00a(self):
        assert jnp.abs(gst00a(DJM0, 53736.0, DJM0, 53736.0) - 1.754166138018281369) < 1e-12

    def test_gst00b(self):
        assert jnp.abs(gst00b(DJM0, 53736.0) - 1.754166136510680589) < 1e-12

    def test_gst06(self):
        assert jnp.abs(gst06(DJM0, 53736.0, DJM0, 53736.0, _RNPB) - 1.754166138018167568) < 1e-12

    def test_gst06a(self):
        assert jnp.abs(gst06a(DJM0, 53736.0, DJM0, 53736.0) - 1.754166137675019159) < 1e-12

    def test_gst06a_is_era_minus_eo(self):
        """GST = ERA - EO for the 2006 model."""
        gst = gst06a(DJM0, 53736.0, DJM0, 53736.0)
        expected = anp(era00(DJM0, 53736.0) - eo06a(DJM0, 53736.0))
        assert jnp.abs(gst - expected) < 1e-14

    def test_gst_minus_gmst_is_equation_of_equinoxes(self):
        gst = gst00a(DJM0, 53736.0, DJM0, 53736.0)
        gmst = gmst00(DJM0, 53736.0, DJM0, 53736.0)
        assert jnp.abs(anpm(gst - gmst) - ee00a(DJM0, 53736.0)) < 1e-15

    def test_gst94(self):
        assert jnp.abs(gst94(DJM0, 53736.0) - 1.754166136020645203) < 1e-12

    def test_gst94_is_gmst82_plus_eqeq94(self):
        expected = anp(gmst82(DJM0, 53736.0) + eqeq94(DJM0, 53736.0))
        assert jnp.abs(gst94(DJM0, 53736.0) - expected) < 1e-15


class TestEquationOfTheEquinoxes:
    def test_ee00(self):
        ee = ee00(DJM0, 53736.0, 0.4090789763356509900, -0.9630909107115582393e-5)
        assert jnp.abs(ee - (-0.8834193235367965479e-5)) < 1e-18

    def test_ee00a(self):
        assert jnp.abs(ee00a(DJM0, 53736.0) - (-0.8834192459222588227e-5)) < 1e-17

    def test_ee00b(self):
        assert jnp.abs(ee00b(DJM0, 53736.0) - (-0.8835700060003032831e-5)) < 1e-16

    def test_ee06a(self):
        assert jnp.abs(ee06a(DJM0, 53736.0) - (-0.8834195072043790156e-5)) < 1e-15

    def test_eect00(self):
        assert jnp.abs(eect00(DJM0, 53736.0) - 0.2046085004885125264e-8) < 1e-20

    def test_eect00_is_small(self):
        """The complementary terms never exceed a few milliarcseconds."""
        days = jnp.linspace(30000.0, 80000.0, 51)
        eect = jax.vmap(lambda d: eect00(DJM0, d))(days)
        assert jnp.all(jnp.abs(eect) < 2e-8)

    def test_eqeq94(self):
        assert jnp.abs(eqeq94(DJM0, 41234.0) - 0.5357758254609256894e-4) < 1e-17

    def test_eqeq94_dominated_by_nutation_in_longitude(self):
        """Apart from the complementary terms, EE = dpsi cos(eps)."""
        dpsi, _ = nut80(DJM0, 41234.0)
        assert jnp.abs(eqeq94(DJM0, 41234.0) - dpsi * jnp.cos(0.40909)) < 2e-8


class TestEquationOfTheOrigins:
    def test_eors(self):
        eo = eors(_RNPB, -0.1220040848472271978e-7)
        assert jnp.abs(eo - (-0.1332882715130744606e-2)) < 1e-14

    def test_eo06a(self):
        assert jnp.abs(eo06a(DJM0, 53736.0) - (-0.1332882371941833644e-2)) < 1e-15

    def test_eo06a_from_components(self):
        eo = eors(pnm06a(DJM0, 53736.0), s06a(DJM0, 53736.0))
        assert jnp.abs(eo - eo06a(DJM0, 53736.0)) < 1e-15

    def test_identity_gives_s(self):
        """With no precession-nutation the origins differ only by s."""
        assert jnp.abs(eors(jnp.eye(3), 1.5e-8) - 1.5e-8) < 1e-20

    @pytest.mark.parametrize("days", [51544.5, 58000.0])
    def test_vmap_matches_scalar(self, days):
        batch = jax.vmap(lambda d: eo06a(DJM0, d))(jnp.array([days, days]))
        assert jnp.allclose(batch, eo06a(DJM0, days), atol=1e-16)
