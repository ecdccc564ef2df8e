"""Tests for the celestial-to-terrestrial matrix compositions and model selection."""

import logging

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from sofajax import (
    DJM0,
    IllegalParameterError,
    PrecessionNutationModel,
    Rz,
    TransformMethod,
    c2t00a,
    c2t00b,
    c2t06a,
    c2tcio,
    c2teqx,
    c2tpe,
    c2txy,
    celestial_to_terrestrial,
    pom00,
)
from sofajax.terrestrial import TransformConfig

_XP = 2.55060238e-7
_YP = 1.860359247e-6

_RPOM = jnp.array(
    [
        [0.9999999999999674705, -0.1367174580728847031e-10, 0.2550602379999972723e-6],
        [0.1414624947957029721e-10, 0.9999999999982694954, -0.1860359246998866338e-5],
        [-0.2550602379741215275e-6, 0.1860359247002413923e-5, 0.9999999999982369658],
    ]
)


class TestFixedCompositions:
    def test_c2tcio(self):
        rc2i = jnp.array(
            [
                [0.9999998323037164738, 0.5581526271714303683e-9, -0.5791308477073443903e-3],
                [-0.2384266227524722273e-7, 0.9999999991917404296, -0.4020594955030704125e-4],
                [0.5791308472168153320e-3, 0.4020595661593994396e-4, 0.9999998314954572365],
            ]
        )
        expected = np.array(
            [
                [-0.1810332128307110439, 0.9834769806938470149, 0.6555535638685466874e-4],
                [-0.9834768134135996657, -0.1810332203649448367, 0.5749801116141106528e-3],
                [0.5773474014081407076e-3, 0.3961832391772658944e-4, 0.9999998325501691969],
            ]
        )
        r = c2tcio(rc2i, 1.75283325530307, _RPOM)
        np.testing.assert_allclose(np.asarray(r), expected, rtol=0.0, atol=1e-12)

    def test_c2teqx(self):
        rbpn = jnp.array(
            [
                [0.9999989440476103608, -0.1332881761240011518e-2, -0.5790767434730085097e-3],
                [0.1332858254308954453e-2, 0.9999991109044505944, -0.4097782710401555759e-4],
                [0.5791308472168153320e-3, 0.4020595661593994396e-4, 0.9999998314954572365],
            ]
        )
        expected = np.array(
            [
                [-0.1810332128528685730, 0.9834769806897685071, 0.6555535639982634449e-4],
                [-0.9834768134095211257, -0.1810332203871023800, 0.5749801116126438962e-3],
                [0.5773474014081539467e-3, 0.3961832391768640871e-4, 0.9999998325501691969],
            ]
        )
        r = c2teqx(rbpn, 1.754166138040730516, _RPOM)
        np.testing.assert_allclose(np.asarray(r), expected, rtol=0.0, atol=1e-12)

    def test_degenerate_cio_is_earth_rotation(self):
        """With no precession-nutation and no polar motion only the ERA rotation remains."""
        r = c2tcio(jnp.eye(3), 1.2345, pom00(0.0, 0.0, 0.0))
        assert jnp.allclose(r, Rz(1.2345), atol=1e-15)


class TestDatedCompositions:
    def test_c2t00a(self):
        expected = np.array(
            [
                [-0.1810332128307182668, 0.9834769806938457836, 0.6555535638688341725e-4],
                [-0.9834768134135984552, -0.1810332203649520727, 0.5749801116141056317e-3],
                [0.5773474014081406921e-3, 0.3961832391770163647e-4, 0.9999998325501692289],
            ]
        )
        r = c2t00a(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP)
        np.testing.assert_allclose(np.asarray(r), expected, rtol=0.0, atol=1e-12)

    def test_c2t00b(self):
        expected = np.array(
            [
                [-0.1810332128439678965, 0.9834769806913872359, 0.6555565082458415611e-4],
                [-0.9834768134115435923, -0.1810332203784001946, 0.5749793922030017230e-3],
                [0.5773467471863534901e-3, 0.3961790411549945020e-4, 0.9999998325505635738],
            ]
        )
        r = c2t00b(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP)
        np.testing.assert_allclose(np.asarray(r), expected, rtol=0.0, atol=1e-12)

    def test_c2t06a(self):
        expected = np.array(
            [
                [-0.1810332128305897282, 0.9834769806938592296, 0.6555550962998436505e-4],
                [-0.9834768134136214897, -0.1810332203649130832, 0.5749800844905594110e-3],
                [0.5773474024748545878e-3, 0.3961816829632690581e-4, 0.9999998325501747785],
            ]
        )
        r = c2t06a(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP)
        np.testing.assert_allclose(np.asarray(r), expected, rtol=0.0, atol=1e-12)

    def test_c2tpe(self):
        expected = np.array(
            [
                [-0.1813677995763029394, 0.9023482206891683275, -0.3909902938641085751],
                [-0.9834147641476804807, -0.1659883635434995121, 0.7309763898042819705e-1],
                [0.1059685430673215247e-2, 0.3977631855605078674, 0.9174875068792735362],
            ]
        )
        r = c2tpe(DJM0, 53736.0, DJM0, 53736.0, -0.9630909107115582393e-5, 0.4090789763356509900, _XP, _YP)
        np.testing.assert_allclose(np.asarray(r), expected, rtol=0.0, atol=1e-12)

    def test_c2txy(self):
        expected = np.array(
            [
                [-0.1810332128306279253, 0.9834769806938520084, 0.6555551248057665829e-4],
                [-0.9834768134136142314, -0.1810332203649529312, 0.5749800843594139912e-3],
                [0.5773474028619264494e-3, 0.3961816546911624260e-4, 0.9999998325501746670],
            ]
        )
        r = c2txy(
            DJM0, 53736.0, DJM0, 53736.0, 0.5791308486706011000e-3, 0.4020579816732961219e-4, _XP, _YP
        )
        np.testing.assert_allclose(np.asarray(r), expected, rtol=0.0, atol=1e-12)

    @pytest.mark.parametrize("days", [45000.0, 51544.5, 53736.0, 60000.0, 66000.0])
    @pytest.mark.parametrize("func", [c2t00a, c2t00b, c2t06a])
    def test_orthonormal(self, func, days, assert_orthonormal):
        assert_orthonormal(func(DJM0, days, DJM0, days, _XP, _YP))


class TestTransformConfig:
    def test_defaults(self):
        config = TransformConfig()
        assert config.model is PrecessionNutationModel.IAU2006A
        assert config.method is TransformMethod.CIO

    def test_strings_are_normalized(self):
        config = TransformConfig(model="2000b", method="EQUINOX")
        assert config.model is PrecessionNutationModel.IAU2000B
        assert config.method is TransformMethod.EQUINOX

    def test_frozen(self):
        config = TransformConfig()
        with pytest.raises(AttributeError):
            config.model = PrecessionNutationModel.IAU2000A

    def test_unknown_model(self):
        with pytest.raises(IllegalParameterError, match="model must be one of"):
            TransformConfig(model="1980")

    def test_unknown_method(self):
        with pytest.raises(IllegalParameterError, match="method must be one of"):
            TransformConfig(method="sidereal")


class TestCelestialToTerrestrial:
    @pytest.mark.parametrize(
        "model, func",
        [("2000A", c2t00a), ("2000B", c2t00b), ("2006A", c2t06a)],
    )
    def test_cio_path_matches_named_routine(self, model, func):
        r = celestial_to_terrestrial(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP, model=model, method="cio")
        expected = func(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP)
        assert jnp.allclose(r, expected, atol=0.0)

    def test_default_is_2006a_cio(self):
        r = celestial_to_terrestrial(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP)
        assert jnp.allclose(r, c2t06a(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP), atol=0.0)

    @pytest.mark.parametrize("model", list(PrecessionNutationModel))
    def test_paths_agree(self, model):
        """CIO and equinox paths give the same matrix for each model."""
        days = 53736.0
        cio = celestial_to_terrestrial(DJM0, days, DJM0, days, _XP, _YP, model=model, method=TransformMethod.CIO)
        eqx = celestial_to_terrestrial(
            DJM0, days, DJM0, days, _XP, _YP, model=model, method=TransformMethod.EQUINOX
        )
        np.testing.assert_allclose(np.asarray(cio), np.asarray(eqx), rtol=0.0, atol=1e-12)

    @pytest.mark.parametrize("days", [47000.0, 62000.0])
    @pytest.mark.parametrize("model", list(PrecessionNutationModel))
    def test_paths_stay_close(self, model, days, assert_orthonormal):
        cio = celestial_to_terrestrial(DJM0, days, DJM0, days, _XP, _YP, model=model, method=TransformMethod.CIO)
        eqx = celestial_to_terrestrial(
            DJM0, days, DJM0, days, _XP, _YP, model=model, method=TransformMethod.EQUINOX
        )
        np.testing.assert_allclose(np.asarray(cio), np.asarray(eqx), rtol=0.0, atol=5e-11)
        assert_orthonormal(eqx)

    def test_models_differ(self):
        a = celestial_to_terrestrial(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP, model="2000A")
        b = celestial_to_terrestrial(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP, model="2000B")
        assert jnp.max(jnp.abs(a - b)) > 1e-12

    def test_unknown_model(self):
        with pytest.raises(IllegalParameterError):
            celestial_to_terrestrial(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP, model="2003")

    def test_unknown_method(self):
        with pytest.raises(IllegalParameterError):
            celestial_to_terrestrial(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP, method="tirs")

    def test_jit_with_static_selection(self):
        f = jax.jit(celestial_to_terrestrial, static_argnames=("model", "method"))
        r = f(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP, model="2000A", method="equinox")
        expected = celestial_to_terrestrial(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP, model="2000A", method="equinox")
        assert jnp.allclose(r, expected, atol=1e-15)

    def test_vmap_over_ut1(self):
        days = jnp.array([53736.0, 53736.25, 53736.5])
        r = jax.vmap(lambda d: celestial_to_terrestrial(DJM0, 53736.0, DJM0, d, _XP, _YP))(days)
        assert r.shape == (3, 3, 3)

    def test_logs_selection(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="sofajax.terrestrial"):
            celestial_to_terrestrial(DJM0, 53736.0, DJM0, 53736.0, _XP, _YP, model="2000B", method="equinox")
        assert "model=2000B method=equinox" in caplog.text
