"""Tests for frame bias, precession and mean obliquity."""

import jax.numpy as jnp

from sofajax import (
    DJM0,
    Rz,
    Ry,
    bi00,
    bp00,
    bp06,
    fw2m,
    fw2xy,
    obl06,
    obl80,
    p06e,
    pb06,
    pfw06,
    pmat00,
    pmat06,
    pmat76,
    pr00,
    prec76,
)

_MJD_BP = 50123.9999

_RBP06 = jnp.array(
    [
        [0.9999995505176007047, 0.8695404617348208406e-3, 0.3779735201865589104e-3],
        [-0.8695404723772031414e-3, 0.9999996219496027161, -0.1361752497080270143e-6],
        [-0.3779734957034089490e-3, -0.1924880847894457113e-6, 0.9999999285679971958],
    ]
)


class TestObliquity:
    def test_obl80(self):
        assert jnp.abs(obl80(DJM0, 54388.0) - 0.4090751347643816218) < 1e-14

    def test_obl06(self):
        assert jnp.abs(obl06(DJM0, 54388.0) - 0.4090749229387258204) < 1e-14


class TestFrameBias:
    def test_bi00(self):
        dpsibi, depsbi, dra = bi00()
        assert jnp.abs(dpsibi - (-0.2025309152835086613e-6)) < 1e-12
        assert jnp.abs(depsbi - (-0.3306041454222147847e-7)) < 1e-12
        assert jnp.abs(dra - (-0.7078279744199225506e-7)) < 1e-12

    def test_pr00(self):
        dpsipr, depspr = pr00(DJM0, 53736.0)
        assert jnp.abs(dpsipr - (-0.8716465172668347629e-7)) < 1e-22
        assert jnp.abs(depspr - (-0.7342018386722813087e-8)) < 1e-22


class TestBp00:
    def test_bias_fixed_point(self):
        """The bias matrix reproduces the published small-angle terms."""
        rb = bp00(DJM0, _MJD_BP).rb
        assert jnp.abs(rb[0, 1] - (-0.7078279744199196626e-7)) < 1e-16
        assert jnp.abs(rb[0, 2] - 0.8056217146976134152e-7) < 1e-16
        assert jnp.abs(rb[1, 2] - 0.3306041454222136517e-7) < 1e-16
        assert jnp.abs(rb[2, 1] - (-0.3306040883980552500e-7)) < 1e-16

    def test_bias_is_epoch_independent(self):
        assert jnp.allclose(bp00(DJM0, 40000.0).rb, bp00(DJM0, 60000.0).rb, atol=0.0)

    def test_precession(self):
        rp = bp00(DJM0, _MJD_BP).rp
        expected = jnp.array(
            [
                [0.9999995504864048241, 0.8696113836207084411e-3, 0.3778928813389333402e-3],
                [-0.8696113818227265968e-3, 0.9999996218879365258, -0.1690679263009242066e-6],
                [-0.3778928854764695214e-3, -0.1595521004195286491e-6, 0.9999999285984682756],
            ]
        )
        assert jnp.allclose(rp, expected, atol=1e-14, rtol=0.0)

    def test_bias_precession_order(self):
        """rbp is precession applied after bias."""
        rb, rp, rbp = bp00(DJM0, _MJD_BP)
        assert jnp.allclose(rbp, rp @ rb, atol=1e-16)
        assert jnp.abs(rbp[0, 1] - 0.8695405883617884705e-3) < 1e-14
        assert jnp.abs(rbp[2, 1] - (-0.1925857585832024058e-6)) < 1e-14

    def test_pmat00(self):
        rbp = pmat00(DJM0, _MJD_BP)
        assert jnp.abs(rbp[0, 0] - 0.9999995505175087260) < 1e-12
        assert jnp.abs(rbp[1, 2] - (-0.1360775820404982209e-6)) < 1e-14
        assert jnp.abs(rbp[2, 0] - (-0.3779734476558184991e-3)) < 1e-14


class TestFukushimaWilliams:
    def test_pfw06(self):
        gamb, phib, psib, epsa = pfw06(DJM0, _MJD_BP)
        assert jnp.abs(gamb - (-0.2243387670997995690e-5)) < 1e-16
        assert jnp.abs(phib - 0.4091014602391312808) < 1e-12
        assert jnp.abs(psib - (-0.9501954178013031895e-3)) < 1e-14
        assert jnp.abs(epsa - 0.4091014316587367491) < 1e-12

    def test_fw2m(self):
        r = fw2m(
            -0.2243387670997992368e-5,
            0.4091014602391312982,
            -0.9501954178013015092e-3,
            0.4091014316587367472,
        )
        assert jnp.abs(r[0, 0] - 0.9999995505176007047) < 1e-12
        assert jnp.abs(r[0, 1] - 0.8695404617348192957e-3) < 1e-12
        assert jnp.abs(r[1, 2] - (-0.1361752496887100026e-6)) < 1e-12
        assert jnp.abs(r[2, 0] - (-0.3779734957034082790e-3)) < 1e-12

    def test_fw2xy(self):
        x, y = fw2xy(
            -0.2243387670997992368e-5,
            0.4091014602391312982,
            -0.9501954178013015092e-3,
            0.4091014316587367472,
        )
        assert jnp.abs(x - (-0.3779734957034082790e-3)) < 1e-14
        assert jnp.abs(y - (-0.1924880848087615651e-6)) < 1e-14

    def test_pmat06(self):
        assert jnp.allclose(pmat06(DJM0, _MJD_BP), _RBP06, atol=1e-14, rtol=0.0)


class TestBp06:
    def test_bias(self):
        rb = bp06(DJM0, _MJD_BP).rb
        assert jnp.abs(rb[0, 1] - (-0.7078368960971557145e-7)) < 1e-14
        assert jnp.abs(rb[2, 0] - (-0.8056214211620056792e-7)) < 1e-14

    def test_precession(self):
        rp = bp06(DJM0, _MJD_BP).rp
        assert jnp.abs(rp[0, 1] - 0.8696112578855404832e-3) < 1e-14
        assert jnp.abs(rp[1, 2] - (-0.1691646168941896285e-6)) < 1e-14
        assert jnp.abs(rp[2, 1] - (-0.1594554040786495076e-6)) < 1e-14

    def test_bias_precession(self):
        assert jnp.allclose(bp06(DJM0, _MJD_BP).rbp, _RBP06, atol=1e-14, rtol=0.0)

    def test_generations_differ(self):
        """IAU 2000 and IAU 2006 precession differ at the 0.1 nanoradian level in 1996."""
        diff = jnp.max(jnp.abs(bp06(DJM0, _MJD_BP).rbp - bp00(DJM0, _MJD_BP).rbp))
        assert diff > 1e-11
        assert diff < 1e-8


class TestPb06:
    def test_reference(self):
        bzeta, bz, btheta = pb06(DJM0, _MJD_BP)
        assert jnp.abs(bzeta - (-0.5092634016326478238e-3)) < 1e-12
        assert jnp.abs(bz - (-0.3602772060566044413e-3)) < 1e-12
        assert jnp.abs(btheta - (-0.3779735537167811177e-3)) < 1e-12

    def test_reconstructs_pmat06(self):
        bzeta, bz, btheta = pb06(DJM0, _MJD_BP)
        r = Rz(-bz) @ Ry(btheta) @ Rz(-bzeta)
        assert jnp.allclose(r, _RBP06, atol=1e-14, rtol=0.0)


class TestP06e:
    def test_reference(self):
        a = p06e(DJM0, 52541.0)
        assert jnp.abs(a.eps0 - 0.4090926006005828715) < 1e-14
        assert jnp.abs(a.psia - 0.6664369630191613431e-3) < 1e-14
        assert jnp.abs(a.za - 0.2921789846651790546e-3) < 1e-14
        assert jnp.abs(a.zetaa - 0.3178773290332009310e-3) < 1e-14
        assert jnp.abs(a.thetaa - 0.2650932701657497181e-3) < 1e-14
        assert jnp.abs(a.pa - 0.6651637681381016344e-3) < 1e-14
        assert jnp.abs(a.gam - 0.1398077115963754987e-5) < 1e-14
        assert jnp.abs(a.phi - 0.4090864090837462602) < 1e-14
        assert jnp.abs(a.psi - 0.6664464807480920325e-3) < 1e-14
        assert jnp.abs(a.chia - 0.1387703379530915364e-5) < 1e-14
        assert jnp.abs(a.bpia - 3.052014180023779882) < 1e-14
        assert jnp.abs(a.epsa - 0.4090864054922431688) < 1e-14

    def test_sixteen_angles(self):
        assert len(p06e(DJM0, 52541.0)) == 16


class TestPrecession76:
    def test_prec76(self):
        zeta, z, theta = prec76(DJM0, 33282.0, DJM0, 51544.0)
        assert jnp.abs(zeta - 0.5588961642000161243e-2) < 1e-12
        assert jnp.abs(z - 0.5589922365870680624e-2) < 1e-12
        assert jnp.abs(theta - 0.4858945471687296760e-2) < 1e-12

    def test_prec76_zero_interval(self):
        """No precession accumulates between identical epochs."""
        a = prec76(DJM0, 51544.0, DJM0, 51544.0)
        assert jnp.abs(a.zeta) < 1e-20
        assert jnp.abs(a.z) < 1e-20
        assert jnp.abs(a.theta) < 1e-20

    def test_pmat76(self):
        expected = jnp.array(
            [
                [0.9999995504328350733, 0.8696632209480960785e-3, 0.3779153474959888345e-3],
                [-0.8696632209485112192e-3, 0.9999996218428560614, -0.1643284776111886407e-6],
                [-0.3779153474950335077e-3, -0.1643306746147366896e-6, 0.9999999285899790119],
            ]
        )
        r = pmat76(DJM0, _MJD_BP)
        off = ~jnp.eye(3, dtype=bool)
        assert jnp.all(jnp.abs(r - expected)[off] < 1e-14)
        assert jnp.all(jnp.abs(jnp.diag(r - expected)) < 1e-12)

    def test_pmat76_from_euler_angles(self):
        zeta, z, theta = prec76(DJM0, 51544.5, DJM0, _MJD_BP)
        expected = Rz(-z) @ Ry(theta) @ Rz(-zeta)
        assert jnp.allclose(pmat76(DJM0, _MJD_BP), expected, atol=1e-15, rtol=0.0)

    def test_close_to_iau2006_precession(self):
        """IAU 1976 precession and the IAU 2006 bias-precession matrix stay within 0.2 arcsec."""
        diff = jnp.max(jnp.abs(pmat76(DJM0, _MJD_BP) - pmat06(DJM0, _MJD_BP)))
        assert diff > 1e-10
        assert diff < 1e-6
