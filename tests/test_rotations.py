"""Tests for elementary rotations and angle normalization."""

import math

import jax.numpy as jnp

from sofajax import D2PI, Rx, Ry, Rz, anp, anpm


class TestElementaryRotations:
    """Rotation matrices follow the frame-rotation (astronomical) convention."""

    def test_rz_rotates_x_towards_minus_y(self):
        """Rz(90 deg) maps the x unit vector to -y in the rotated frame."""
        v = Rz(jnp.pi / 2) @ jnp.array([1.0, 0.0, 0.0])
        assert jnp.allclose(v, jnp.array([0.0, -1.0, 0.0]), atol=1e-15)

    def test_rx_off_diagonal_sign(self):
        r = Rx(0.3)
        assert jnp.abs(r[1, 2] - math.sin(0.3)) < 1e-16
        assert jnp.abs(r[2, 1] + math.sin(0.3)) < 1e-16

    def test_ry_off_diagonal_sign(self):
        r = Ry(0.3)
        assert jnp.abs(r[0, 2] + math.sin(0.3)) < 1e-16
        assert jnp.abs(r[2, 0] - math.sin(0.3)) < 1e-16

    def test_degrees(self):
        assert jnp.allclose(Rz(30.0, use_degrees=True), Rz(jnp.pi / 6), atol=1e-15)

    def test_inverse_is_negative_angle(self):
        for rot in (Rx, Ry, Rz):
            assert jnp.allclose(rot(0.7) @ rot(-0.7), jnp.eye(3), atol=1e-15)


class TestAngleNormalization:
    def test_anp_negative(self):
        assert jnp.abs(anp(-0.1) - 6.183185307179586477) < 1e-12

    def test_anp_range(self):
        a = anp(jnp.array([-20.0, -1e-3, 0.0, 3.0, 7.0, 100.0]))
        assert jnp.all(a >= 0.0)
        assert jnp.all(a < D2PI)

    def test_anpm(self):
        assert jnp.abs(anpm(-4.0) - 2.283185307179586477) < 1e-12

    def test_anpm_range(self):
        a = anpm(jnp.array([-20.0, -4.0, -1.0, 0.0, 3.0, 4.0, 100.0]))
        assert jnp.all(a >= -jnp.pi)
        assert jnp.all(a < jnp.pi)
