"""Tests for the IAU 2000A, 2000B and 2006/2000A nutation models."""

import jax
import jax.numpy as jnp
import pytest

from sofajax import (
    DAS2R,
    DJM0,
    IllegalParameterError,
    NutationAngles,
    PrecessionNutationModel,
    nut00a,
    nut00b,
    nut06a,
    nut80,
    numat,
    nutm80,
    nutation,
    obl80,
)

_MJD = 53736.0


class TestNut00a:
    def test_reference(self):
        dpsi, deps = nut00a(DJM0, _MJD)
        assert jnp.abs(dpsi - (-0.9630909107115518431e-5)) < 1e-13
        assert jnp.abs(deps - 0.4063239174001678710e-4) < 1e-13

    def test_returns_named_tuple(self):
        result = nut00a(DJM0, _MJD)
        assert isinstance(result, NutationAngles)
        assert result.dpsi == result[0]

    def test_split_invariance(self):
        """Any split of the Julian date gives the same nutation."""
        a = nut00a(DJM0, _MJD)
        b = nut00a(DJM0 + _MJD, 0.0)
        assert jnp.abs(a.dpsi - b.dpsi) < 1e-14
        assert jnp.abs(a.deps - b.deps) < 1e-14

    def test_jit(self):
        dpsi, _ = jax.jit(nut00a)(DJM0, _MJD)
        assert jnp.abs(dpsi - (-0.9630909107115518431e-5)) < 1e-13


class TestNut00b:
    def test_reference(self):
        dpsi, deps = nut00b(DJM0, _MJD)
        assert jnp.abs(dpsi - (-0.9632552291148362783e-5)) < 1e-13
        assert jnp.abs(deps - 0.4063197106621159367e-4) < 1e-13

    def test_distinct_from_00a_within_one_mas(self):
        """2000B is a truncation: different from 2000A, but within about 1 mas."""
        a = nut00a(DJM0, _MJD)
        b = nut00b(DJM0, _MJD)
        one_mas = 1e-3 * DAS2R
        assert jnp.abs(a.dpsi - b.dpsi) > 1e-12
        assert jnp.abs(a.dpsi - b.dpsi) < one_mas
        assert jnp.abs(a.deps - b.deps) < one_mas


class TestNut06a:
    def test_reference(self):
        dpsi, deps = nut06a(DJM0, _MJD)
        assert jnp.abs(dpsi - (-0.9630912025820308797e-5)) < 1e-13
        assert jnp.abs(deps - 0.4063238496887249798e-4) < 1e-13

    def test_equals_00a_at_j2000(self):
        """The J2 correction vanishes at J2000.0 except for the fixed factor."""
        dp, de = nut00a(2451545.0, 0.0)
        dpsi, deps = nut06a(2451545.0, 0.0)
        assert jnp.abs(dpsi - dp * (1.0 + 0.4697e-6)) < 1e-20
        assert jnp.abs(deps - de) < 1e-20


class TestNut80:
    def test_reference(self):
        dpsi, deps = nut80(DJM0, _MJD)
        assert jnp.abs(dpsi - (-0.9643658353226563966e-5)) < 1e-13
        assert jnp.abs(deps - 0.4060051006879713322e-4) < 1e-13

    def test_within_model_accuracy_of_00a(self):
        """The 1980 theory is good to a few tens of mas against 2000A."""
        a = nut00a(DJM0, _MJD)
        b = nut80(DJM0, _MJD)
        assert jnp.abs(a.dpsi - b.dpsi) > 1e-9
        assert jnp.abs(a.dpsi - b.dpsi) < 0.1 * DAS2R
        assert jnp.abs(a.deps - b.deps) < 0.1 * DAS2R

    def test_jit(self):
        _, deps = jax.jit(nut80)(DJM0, _MJD)
        assert jnp.abs(deps - 0.4060051006879713322e-4) < 1e-13


class TestNutm80:
    def test_reference(self):
        expected = jnp.array(
            [
                [0.9999999999534999268, 0.8847935789636432161e-5, 0.3835906502164019142e-5],
                [-0.8847780042583435924e-5, 0.9999999991366569963, -0.4060052702727130809e-4],
                [-0.3836265729708478796e-5, 0.4060049308612638555e-4, 0.9999999991684415129],
            ]
        )
        assert jnp.allclose(nutm80(DJM0, _MJD), expected, atol=1e-12, rtol=0.0)

    def test_is_numat_of_nut80(self):
        dpsi, deps = nut80(DJM0, _MJD)
        expected = numat(obl80(DJM0, _MJD), dpsi, deps)
        assert jnp.allclose(nutm80(DJM0, _MJD), expected, atol=1e-15, rtol=0.0)


class TestNumat:
    def test_reference(self):
        epsa = 0.4090789763356509900
        dpsi = -0.9630909107115582393e-5
        deps = 0.4063239174001678826e-4
        expected = jnp.array(
            [
                [0.9999999999536227949, 0.8836239320236250577e-5, 0.3830833447458251908e-5],
                [-0.8836083657016688588e-5, 0.9999999991354654959, -0.4063240865361857698e-4],
                [-0.3831192481833385226e-5, 0.4063237480216934159e-4, 0.9999999991671660407],
            ]
        )
        assert jnp.allclose(numat(epsa, dpsi, deps), expected, atol=1e-12, rtol=0.0)

    def test_zero_nutation_is_identity(self):
        assert jnp.allclose(numat(0.409, 0.0, 0.0), jnp.eye(3), atol=1e-15)


class TestNutationSelection:
    @pytest.mark.parametrize(
        "model, func",
        [
            (PrecessionNutationModel.IAU2000A, nut00a),
            (PrecessionNutationModel.IAU2000B, nut00b),
            (PrecessionNutationModel.IAU2006A, nut06a),
            ("2000a", nut00a),
            ("2000B", nut00b),
            ("2006A", nut06a),
        ],
    )
    def test_dispatch(self, model, func):
        got = nutation(DJM0, _MJD, model)
        ref = func(DJM0, _MJD)
        assert got.dpsi == ref.dpsi
        assert got.deps == ref.deps

    def test_unknown_model(self):
        with pytest.raises(IllegalParameterError, match="model must be one of"):
            nutation(DJM0, _MJD, "1980")
