"""Tests for the CIO locator and the celestial-to-intermediate matrix."""

import jax
import jax.numpy as jnp
import pytest

import sofajax
import sofajax.earth_rotation
from sofajax import (
    DJM0,
    CIPLocator,
    IllegalParameterError,
    c2i00a,
    c2i00b,
    c2i06a,
    c2ibpn,
    c2ixy,
    c2ixys,
    celestial_to_intermediate,
    pnm00a,
    pnm06a,
    s00,
    s00a,
    s00b,
    s06,
    s06a,
    xys00a,
    xys00b,
    xys06a,
)
from sofajax import _series

_X = 0.5791308486706011000e-3
_Y = 0.4020579816732961219e-4


class TestCIOLocator:
    def test_s00(self):
        assert jnp.abs(s00(DJM0, 53736.0, _X, _Y) - (-0.1220036263270905693e-7)) < 1e-18

    def test_s06(self):
        assert jnp.abs(s06(DJM0, 53736.0, _X, _Y) - (-0.1220032213076463117e-7)) < 1e-18

    def test_series_generations_differ(self):
        assert jnp.abs(s00(DJM0, 53736.0, _X, _Y) - s06(DJM0, 53736.0, _X, _Y)) > 1e-14

    def test_s00a(self):
        assert jnp.abs(s00a(DJM0, 52541.0) - (-0.1340684448919163584e-7)) < 1e-18

    def test_s00b(self):
        assert jnp.abs(s00b(DJM0, 52541.0) - (-0.1340695782951026584e-7)) < 1e-18

    def test_s06a(self):
        assert jnp.abs(s06a(DJM0, 52541.0) - (-0.1340680437291812383e-7)) < 1e-18


class TestXYS:
    def test_xys00a(self):
        x, y, s = xys00a(DJM0, 53736.0)
        assert jnp.abs(x - 0.5791308472168152904e-3) < 1e-14
        assert jnp.abs(y - 0.4020595661591500259e-4) < 1e-15
        assert jnp.abs(s - (-0.1220040848471549623e-7)) < 1e-18

    def test_xys00b(self):
        x, y, s = xys00b(DJM0, 53736.0)
        assert jnp.abs(x - 0.5791301929950208873e-3) < 1e-14
        assert jnp.abs(y - 0.4020553681373720832e-4) < 1e-15
        assert jnp.abs(s - (-0.1220027377285083189e-7)) < 1e-18

    def test_xys06a(self):
        result = xys06a(DJM0, 53736.0)
        assert isinstance(result, CIPLocator)
        assert jnp.abs(result.x - 0.5791308482835292617e-3) < 1e-14
        assert jnp.abs(result.y - 0.4020580099454020310e-4) < 1e-15
        assert jnp.abs(result.s - (-0.1220032294164579896e-7)) < 1e-18


class TestC2ixys:
    def test_reference(self):
        r = c2ixys(_X, _Y, -0.1220040848472271978e-7)
        expected = jnp.array(
            [
                [0.9999998323037157138, 0.5581984869168499149e-9, -0.5791308491611282180e-3],
                [-0.2384261642670440317e-7, 0.9999999991917468964, -0.4020579110169668931e-4],
                [0.5791308486706011000e-3, 0.4020579816732961219e-4, 0.9999998314954627590],
            ]
        )
        assert jnp.allclose(r, expected, atol=1e-12, rtol=0.0)

    def test_pole_is_identity(self):
        """At the pole with s = 0 the matrix is the identity."""
        assert jnp.allclose(c2ixys(0.0, 0.0, 0.0), jnp.eye(3), atol=1e-15)

    def test_bottom_row_is_cip(self):
        r = c2ixys(_X, _Y, 0.0)
        assert jnp.abs(r[2, 0] - _X) < 1e-18
        assert jnp.abs(r[2, 1] - _Y) < 1e-18


class TestC2ixy:
    def test_c2ixy(self):
        r = c2ixy(DJM0, 53736.0, _X, _Y)
        assert jnp.abs(r[0, 1] - 0.5581526349032241205e-9) < 1e-12
        assert jnp.abs(r[1, 0] - (-0.2384257057469842953e-7)) < 1e-12
        assert jnp.abs(r[1, 2] - (-0.4020579110172324363e-4)) < 1e-12

    def test_c2ibpn(self):
        rbpn = jnp.array(
            [
                [9.999962358680738e-1, -2.516417057665452e-3, -1.093569785342370e-3],
                [2.516462370370876e-3, 9.999968329010883e-1, 4.006159587358310e-5],
                [1.093465510215479e-3, -4.281337229063151e-5, 9.999994012499173e-1],
            ]
        )
        expected = jnp.array(
            [
                [0.9999994021664089977, -0.3869195948017503664e-8, -0.1093465511383285076e-2],
                [0.5068413965715446111e-7, 0.9999999990835075686, 0.4281334246452708915e-4],
                [0.1093465510215479000e-2, -0.4281337229063151000e-4, 0.9999994012499173103],
            ]
        )
        assert jnp.allclose(c2ibpn(DJM0, 50123.9999, rbpn), expected, atol=1e-12, rtol=0.0)


class TestC2iDated:
    def test_c2i00a(self):
        expected = jnp.array(
            [
                [0.9999998323037165557, 0.5581526348992140183e-9, -0.5791308477073443415e-3],
                [-0.2384266227870752452e-7, 0.9999999991917405258, -0.4020594955028209745e-4],
                [0.5791308472168152904e-3, 0.4020595661591500259e-4, 0.9999998314954572304],
            ]
        )
        assert jnp.allclose(c2i00a(DJM0, 53736.0), expected, atol=1e-12, rtol=0.0)

    def test_c2i00b(self):
        expected = jnp.array(
            [
                [0.9999998323040954356, 0.5581526349131823372e-9, -0.5791301934855394005e-3],
                [-0.2384239285499175543e-7, 0.9999999991917574043, -0.4020552974819030066e-4],
                [0.5791301929950208873e-3, 0.4020553681373720832e-4, 0.9999998314958529887],
            ]
        )
        assert jnp.allclose(c2i00b(DJM0, 53736.0), expected, atol=1e-12, rtol=0.0)

    def test_c2i06a(self):
        expected = jnp.array(
            [
                [0.9999998323037159379, 0.5581121329587613787e-9, -0.5791308487740529749e-3],
                [-0.2384253169452306581e-7, 0.9999999991917467827, -0.4020579392895682558e-4],
                [0.5791308482835292617e-3, 0.4020580099454020310e-4, 0.9999998314954628695],
            ]
        )
        assert jnp.allclose(c2i06a(DJM0, 53736.0), expected, atol=1e-12, rtol=0.0)

    @pytest.mark.parametrize("c2i, pnm", [(c2i00a, pnm00a), (c2i06a, pnm06a)])
    def test_cip_row_matches_bpn(self, c2i, pnm):
        """Rc2i and Rbpn differ only by a rotation about the CIP."""
        rc2i = c2i(DJM0, 53736.0)
        rbpn = pnm(DJM0, 53736.0)
        assert jnp.allclose(rc2i[2], rbpn[2], atol=1e-15)

    def test_vmap_over_dates(self):
        dates = jnp.array([51544.5, 53736.0, 58000.0])
        r = jax.vmap(lambda d: c2i06a(DJM0, d))(dates)
        assert r.shape == (3, 3, 3)
        assert jnp.allclose(r[1], c2i06a(DJM0, 53736.0), atol=1e-15)


class TestModelSelection:
    def test_dispatch(self):
        assert jnp.allclose(celestial_to_intermediate(DJM0, 53736.0, "2000A"), c2i00a(DJM0, 53736.0), atol=0.0)
        assert jnp.allclose(celestial_to_intermediate(DJM0, 53736.0, "2000B"), c2i00b(DJM0, 53736.0), atol=0.0)
        assert jnp.allclose(celestial_to_intermediate(DJM0, 53736.0, "2006A"), c2i06a(DJM0, 53736.0), atol=0.0)

    def test_unknown_model(self):
        with pytest.raises(IllegalParameterError):
            celestial_to_intermediate(DJM0, 53736.0, "2010")


class TestSeriesHelpers:
    @pytest.mark.parametrize("name", ["periodic_series", "cio_arguments"])
    def test_not_exported(self, name):
        """The shared series helpers are private to the package."""
        assert not hasattr(sofajax, name)
        assert not hasattr(sofajax.cio, name)
        assert not hasattr(sofajax.earth_rotation, name)

    def test_cio_arguments_at_j2000(self):
        fa = _series.cio_arguments(0.0)
        assert fa.shape == (8,)
        assert jnp.abs(fa[0] - 2.3555557435) < 1e-8
        assert jnp.abs(fa[7]) < 1e-20
