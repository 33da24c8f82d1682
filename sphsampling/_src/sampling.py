"""
Spherical Sampling Grids
========================

Precomputed sampling geometry for the MW, DH and GL sampling theorems at a
given band-limit L.  Angles and weights are computed once with NumPy at
construction and stored as JAX arrays.

Key Concepts:
-------------
    • Colatitude theta in [0, pi]: theta=0 at North Pole, theta=pi at South Pole.
    • Longitude phi in [0, 2*pi): 2L-1 equispaced samples for every scheme.
    • MW: L rings, (2t+1)*pi/(2L-1), the last ring is the South Pole.  The
      colatitude integral is evaluated on the toroidal extension to [0, 2*pi)
      with the complex Fourier weights weight_mw(p), |p| <= 2L-2.
    • DH: 2L rings, (2t+1)*pi/(4L), weighted by the Driscoll-Healy series.
    • GL: L rings at arccos of the Gauss-Legendre nodes.

References:
-----------
[1] McEwen, J. D. & Wiaux, Y. (2011). A novel sampling theorem on the sphere.
[2] Driscoll, J. R. & Healy, D. M. (1994). Computing Fourier transforms and
    convolutions on the 2-sphere.
"""

import equinox as eqx
import jax.numpy as jnp
from jaxtyping import Array, Complex, Float, Int
from loguru import logger
import numpy as np

from .angles import Method, _check_method
from .indexing import harmonic_indices
from .validation import check_bandlimit
from .weights import gl_thetas_weights, weight_dh, weight_mw


def _equispaced_phis(L: int) -> np.ndarray:
    """Longitudes 2p*pi/(2L-1), p = 0..2L-2."""
    return 2.0 * np.arange(2 * L - 1) * np.pi / (2.0 * L - 1.0)


class _SphericalSampling(eqx.Module):
    """Properties shared by every sampling scheme."""

    @property
    def ntheta(self) -> int:
        """Number of colatitude rings."""
        return self._thetas.shape[0]

    @property
    def nphi(self) -> int:
        """Number of longitudes per ring (2L-1)."""
        return self._phis.shape[0]

    @property
    def n_samples(self) -> int:
        """Total number of samples on the sphere."""
        return self.ntheta * self.nphi

    @property
    def thetas(self) -> Float[Array, "Ntheta"]:
        """Colatitudes [rad]."""
        return self._thetas

    @property
    def phis(self) -> Float[Array, "Nphi"]:
        """Longitudes in [0, 2*pi) [rad]."""
        return self._phis

    @property
    def X(self) -> tuple[Float[Array, "Ntheta Nphi"], Float[Array, "Ntheta Nphi"]]:
        """2D meshgrid (PHI, THETA), shapes (ntheta, nphi)."""
        result = jnp.meshgrid(self._phis, self._thetas, indexing="xy")
        return (result[0], result[1])

    @property
    def el(self) -> Int[Array, "L2"]:
        """Degree of each harmonic coefficient in flat storage order."""
        return harmonic_indices(self.L)[0]

    @property
    def m(self) -> Int[Array, "L2"]:
        """Order of each harmonic coefficient in flat storage order."""
        return harmonic_indices(self.L)[1]


# ============================================================================
# MWSampling — McEwen-Wiaux equiangular sampling
# ============================================================================


class MWSampling(_SphericalSampling):
    """
    McEwen-Wiaux sampling for band-limit L.

    Mathematical Framework:
    -----------------------
    Samples:
        theta_t = (2t+1)*pi/(2L-1),  t = 0..L-1   (theta_{L-1} = pi)
        phi_p   = 2p*pi/(2L-1),      p = 0..2L-2

    The colatitude integral of a band-limited function is computed by
    extending it periodically to theta in [0, 2*pi) (t = 0..2L-2) and
    weighting its Fourier modes F_p by w(p) = weight_mw(p), |p| <= 2L-2.
    The extension avoids evaluating the sin(theta) Jacobian at the poles.

    Attributes:
    -----------
    L : int
        Harmonic band-limit.
    """

    L: int
    _thetas: Float[Array, "L"]
    _extended_thetas: Float[Array, "Nphi"]
    _phis: Float[Array, "Nphi"]
    _fourier_weights: Complex[Array, "Np"]

    def __init__(self, L: int):
        self.L = check_bandlimit(L)

        t = np.arange(2 * self.L - 1)
        extended = (2.0 * t + 1.0) * np.pi / (2.0 * self.L - 1.0)
        p = np.arange(-(2 * self.L - 2), 2 * self.L - 1)
        w = np.array([weight_mw(int(q)) for q in p], dtype=np.complex128)

        self._extended_thetas = jnp.asarray(extended)
        self._thetas = jnp.asarray(extended[: self.L])
        self._phis = jnp.asarray(_equispaced_phis(self.L))
        self._fourier_weights = jnp.asarray(w)
        logger.debug(f"MW sampling: L={self.L}, {self.L} x {2 * self.L - 1} samples")

    @property
    def extended_thetas(self) -> Float[Array, "Nphi"]:
        """Colatitudes of the toroidal extension, t = 0..2L-2, in (0, 2*pi)."""
        return self._extended_thetas

    @property
    def fourier_modes(self) -> Int[Array, "Np"]:
        """Fourier mode indices p = -(2L-2)..(2L-2) matching fourier_weights."""
        return jnp.arange(-(2 * self.L - 2), 2 * self.L - 1)

    @property
    def fourier_weights(self) -> Complex[Array, "Np"]:
        """MW weights weight_mw(p) for p = -(2L-2)..(2L-2)."""
        return self._fourier_weights


# ============================================================================
# DHSampling — Driscoll-Healy equiangular sampling
# ============================================================================


class DHSampling(_SphericalSampling):
    """
    Driscoll-Healy sampling for band-limit L.

    Samples:
        theta_t = (2t+1)*pi/(4L),  t = 0..2L-1
        phi_p   = 2p*pi/(2L-1),    p = 0..2L-2

    Ring weights absorb the sin(theta) d_theta Jacobian and sum to 2.

    Attributes:
    -----------
    L : int
        Harmonic band-limit.
    """

    L: int
    _thetas: Float[Array, "Ntheta"]
    _phis: Float[Array, "Nphi"]
    _weights: Float[Array, "Ntheta"]

    def __init__(self, L: int):
        self.L = check_bandlimit(L)

        t = np.arange(2 * self.L)
        thetas = (2.0 * t + 1.0) * np.pi / (4.0 * self.L)
        w = np.array([weight_dh(theta, self.L) for theta in thetas])

        self._thetas = jnp.asarray(thetas)
        self._phis = jnp.asarray(_equispaced_phis(self.L))
        self._weights = jnp.asarray(w)
        logger.debug(
            f"DH sampling: L={self.L}, {2 * self.L} x {2 * self.L - 1} samples"
        )

    @property
    def weights(self) -> Float[Array, "Ntheta"]:
        """Driscoll-Healy ring weights (sum to 2)."""
        return self._weights

    @property
    def quadrature_weights(self) -> Float[Array, "Ntheta Nphi"]:
        """
        Full 2D integration weights: w[t, p] = w_theta[t] * 2*pi/(2L-1).

            integral u d_Omega ≈ sum_{t,p} quadrature_weights[t, p] * u[t, p]
        """
        dphi = 2 * jnp.pi / self.nphi
        return jnp.outer(self._weights, jnp.full(self.nphi, dphi))


# ============================================================================
# GLSampling — Gauss-Legendre sampling
# ============================================================================


class GLSampling(_SphericalSampling):
    """
    Gauss-Legendre sampling for band-limit L.

    The colatitudes are arccos of the L-point Gauss-Legendre nodes, ordered
    North to South (theta ascending), so sin(theta) > 0 at every ring.
    gl_thetas_weights returns them in the opposite (node) order.

    Attributes:
    -----------
    L : int
        Harmonic band-limit.
    """

    L: int
    _thetas: Float[Array, "L"]
    _phis: Float[Array, "Nphi"]
    _weights: Float[Array, "L"]

    def __init__(self, L: int):
        self.L = check_bandlimit(L)

        thetas, w = gl_thetas_weights(self.L)
        # Node order is South to North; reverse to North-South.
        self._thetas = jnp.asarray(thetas[::-1].copy())
        self._weights = jnp.asarray(w[::-1].copy())
        self._phis = jnp.asarray(_equispaced_phis(self.L))
        logger.debug(f"GL sampling: L={self.L}, {self.L} x {2 * self.L - 1} samples")

    @property
    def cos_theta(self) -> Float[Array, "L"]:
        """Gauss-Legendre nodes mu = cos(theta), ordered North to South."""
        return jnp.cos(self._thetas)

    @property
    def weights(self) -> Float[Array, "L"]:
        """Gauss-Legendre ring weights (sum to 2)."""
        return self._weights

    @property
    def quadrature_weights(self) -> Float[Array, "L Nphi"]:
        """
        Full 2D integration weights: w[t, p] = w_theta[t] * 2*pi/(2L-1).

            integral u d_Omega ≈ sum_{t,p} quadrature_weights[t, p] * u[t, p]
        """
        dphi = 2 * jnp.pi / self.nphi
        return jnp.outer(self._weights, jnp.full(self.nphi, dphi))


def make_sampling(method: Method, L: int) -> MWSampling | DHSampling | GLSampling:
    """
    Construct the sampling grid for a method name.

    Parameters:
    -----------
    method : {"MW", "DH", "GL"}
        Sampling theorem.
    L : int
        Harmonic band-limit.
    """
    method = _check_method(method)
    cls = {"MW": MWSampling, "DH": DHSampling, "GL": GLSampling}[method]
    return cls(L)
