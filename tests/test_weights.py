"""
Tests for the MW, DH and GL sampling weights.
"""

import math

import numpy as np
import pytest

from sphsampling._src.errors import InvalidBandlimit
from sphsampling._src.weights import gl_thetas_weights, weight_dh, weight_mw

# ---------------------------------------------------------------------------
# MW weights
# ---------------------------------------------------------------------------


def test_weight_mw_values():
    assert weight_mw(1) == 1j * math.pi / 2
    assert weight_mw(-1) == -1j * math.pi / 2
    assert weight_mw(0) == 2.0
    assert weight_mw(2) == pytest.approx(-2.0 / 3.0)
    assert weight_mw(3) == 0.0


@pytest.mark.parametrize("p", [-7, -4, -1, 0, 1, 2, 5, 10])
def test_weight_mw_is_complex(p):
    """Every branch returns a complex number."""
    assert isinstance(weight_mw(p), complex)


@pytest.mark.parametrize("p", [2, 4, 6, 3, 5])
def test_weight_mw_even_in_p(p):
    """Away from p = +-1 the weight depends only on |p|."""
    assert weight_mw(p) == weight_mw(-p)


def test_weight_mw_accepts_numpy_int():
    assert weight_mw(np.int64(4)) == pytest.approx(-2.0 / 15.0)


def test_weight_mw_rejects_float():
    with pytest.raises(TypeError):
        weight_mw(2.0)


# ---------------------------------------------------------------------------
# DH weights
# ---------------------------------------------------------------------------


def test_weight_dh_single_term():
    """L=1 at theta=pi/2: 2 * sin(pi/2) * sin(pi/2) = 2."""
    assert weight_dh(math.pi / 2, 1) == pytest.approx(2.0, abs=1e-15)


def test_weight_dh_two_terms():
    """L=2 at theta=pi/8 by direct evaluation of the two-term series."""
    theta = math.pi / 8
    expected = math.sin(theta) * (math.sin(theta) + math.sin(3 * theta) / 3)
    assert weight_dh(theta, 2) == pytest.approx(expected, rel=1e-14)


@pytest.mark.parametrize("L", [1, 2, 5, 16])
def test_weight_dh_sum_over_rings(L):
    """Over the 2L DH colatitudes the weights integrate sin(theta) to 2."""
    thetas = (2.0 * np.arange(2 * L) + 1.0) * np.pi / (4.0 * L)
    total = sum(weight_dh(t, L) for t in thetas)
    assert total == pytest.approx(2.0, abs=1e-12)


@pytest.mark.parametrize("L", [0, -2])
def test_weight_dh_invalid_bandlimit(L):
    with pytest.raises(InvalidBandlimit):
        weight_dh(0.3, L)


# ---------------------------------------------------------------------------
# GL thetas / weights
# ---------------------------------------------------------------------------


def test_gl_thetas_weights_l4():
    """L=4: four colatitudes in (0, pi), weights summing to 2."""
    thetas, weights = gl_thetas_weights(4)
    assert thetas.shape == (4,)
    assert weights.shape == (4,)
    assert np.all(thetas > 0.0) and np.all(thetas < np.pi)
    assert weights.sum() == pytest.approx(2.0, abs=1e-12)


def test_gl_thetas_weights_node_order():
    """Thetas follow node order: cos(theta) ascending, theta descending."""
    thetas, _ = gl_thetas_weights(9)
    assert np.all(np.diff(thetas) < 0.0)
    assert np.all(np.diff(np.cos(thetas)) > 0.0)


def test_gl_thetas_weights_symmetric_about_equator():
    thetas, weights = gl_thetas_weights(6)
    np.testing.assert_allclose(thetas + thetas[::-1], np.pi, atol=1e-13)
    np.testing.assert_allclose(weights, weights[::-1], rtol=1e-13)


def test_gl_thetas_weights_integrates_cos_squared():
    """integral_0^pi cos^2(theta) sin(theta) d_theta = 2/3."""
    thetas, weights = gl_thetas_weights(3)
    assert float(np.sum(weights * np.cos(thetas) ** 2)) == pytest.approx(
        2.0 / 3.0, abs=1e-14
    )


def test_gl_thetas_weights_fills_caller_buffers():
    thetas = np.empty(5)
    weights = np.empty(5)
    t, w = gl_thetas_weights(5, thetas=thetas, weights=weights)
    assert t is thetas and w is weights
    assert np.all(thetas > 0.0) and np.all(thetas < np.pi)


def test_gl_thetas_weights_rejects_shared_buffer():
    buf = np.empty(4)
    with pytest.raises(ValueError, match="share memory"):
        gl_thetas_weights(4, thetas=buf, weights=buf)


def test_gl_thetas_weights_invalid_bandlimit():
    with pytest.raises(InvalidBandlimit) as excinfo:
        gl_thetas_weights(0)
    assert excinfo.value.L == 0
