"""
Gauss-Legendre Quadrature
=========================

n-point Gauss-Legendre abscissas and weights on an arbitrary interval
[x1, x2], found by Newton iteration on the Legendre polynomial P_n.

Key Concepts:
-------------
    • The roots of P_n are symmetric about 0, so only the ceil(n/2) roots in
      the upper half are solved for; each mirror root shares its weight.
    • The rule integrates polynomials of degree <= 2*n-1 exactly.
    • Nodes are returned in ascending order on [x1, x2].

References:
-----------
[1] Press et al. (2007). Numerical Recipes, 3rd ed., section 4.6.
[2] Abramowitz & Stegun (1964). Handbook of Mathematical Functions, 25.4.29.
"""

import math
import operator

from loguru import logger
import numpy as np

from .constants import GL_MAX_ITER, GL_TOLERANCE
from .errors import NonConvergence


def _prepare_buffer(buf: np.ndarray | None, n: int, name: str, dtype=np.float64):
    """
    Return a writable output buffer of shape (n,).

    A caller-supplied buffer is used as is (never resized); otherwise a new
    array is allocated.
    """
    if buf is None:
        return np.empty(n, dtype=dtype)
    if not isinstance(buf, np.ndarray):
        raise TypeError(f"{name} must be a numpy array, got {type(buf).__name__}")
    if buf.shape != (n,):
        raise ValueError(f"{name} must have shape ({n},), got {buf.shape}")
    if buf.dtype != np.dtype(dtype):
        raise ValueError(f"{name} must have dtype {np.dtype(dtype)}, got {buf.dtype}")
    return buf


def _check_distinct(a: np.ndarray, b: np.ndarray, name_a: str, name_b: str):
    """Raise ValueError if two output buffers overlap in memory."""
    if np.shares_memory(a, b):
        raise ValueError(f"{name_a} and {name_b} must not share memory")


def _legendre_newton(
    n: int, z: np.ndarray, tol: float, max_iter: int
) -> tuple[np.ndarray, np.ndarray]:
    """
    Refine initial root guesses z of P_n by Newton iteration.

    Parameters:
    -----------
    n : int
        Polynomial degree.
    z : ndarray [m]
        Initial guesses in (-1, 1).
    tol : float
        Absolute tolerance on the Newton update.
    max_iter : int
        Maximum number of Newton steps per root.

    Returns:
    --------
    z : ndarray [m]
        Converged roots.
    pp : ndarray [m]
        P_n'(z) evaluated at the last iterate before the final update.
    """
    z = z.astype(np.float64, copy=True)
    pp = np.zeros_like(z)
    active = np.ones(z.shape, dtype=bool)
    dz = np.full(z.shape, np.inf)

    for it in range(1, max_iter + 1):
        za = z[active]
        # Three-term recurrence: p1 = P_n(za), p2 = P_{n-1}(za)
        p1 = np.ones_like(za)
        p2 = np.zeros_like(za)
        for j in range(1, n + 1):
            p3 = p2
            p2 = p1
            p1 = ((2.0 * j - 1.0) * za * p2 - (j - 1.0) * p3) / j
        pp_a = n * (za * p1 - p2) / (za * za - 1.0)
        z_new = za - p1 / pp_a

        dz[active] = np.abs(z_new - za)
        z[active] = z_new
        pp[active] = pp_a
        # NaN updates never count as converged
        active &= ~(dz <= tol)

        if not active.any():
            logger.debug(f"Legendre roots for n={n} converged in {it} iterations")
            return z, pp

    raise NonConvergence(n, max_iter, float(dz.max()))


def gauss_legendre(
    n: int,
    x1: float = -1.0,
    x2: float = 1.0,
    *,
    nodes: np.ndarray | None = None,
    weights: np.ndarray | None = None,
    tol: float = GL_TOLERANCE,
    max_iter: int = GL_MAX_ITER,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Compute the n-point Gauss-Legendre rule on [x1, x2].

    Mathematical Framework:
    -----------------------
        integral_{x1}^{x2} f(x) dx ≈ sum_{i=0}^{n-1} w_i * f(x_i)

    with x_i the roots of P_n mapped from [-1, 1] and
        w_i = 2*xl / ((1 - z_i^2) * P_n'(z_i)^2),   xl = (x2 - x1) / 2.

    Parameters:
    -----------
    n : int
        Number of quadrature points (>= 1).
    x1, x2 : float
        Integration bounds, x1 < x2.  Default [-1, 1].
    nodes, weights : ndarray [n], optional
        Caller-owned output buffers.  Written in place when given.
    tol : float
        Absolute convergence tolerance on each root.  Default 1e-14.
    max_iter : int
        Newton iteration bound.  Default 100.

    Returns:
    --------
    nodes : ndarray [n]
        Abscissas in ascending order.
    weights : ndarray [n]
        Positive weights summing to x2 - x1, aligned with nodes.

    Raises:
    -------
    NonConvergence
        If a root is still moving by more than tol after max_iter steps.
    ValueError
        For n < 1, x1 >= x2, a non-positive or non-finite tol, max_iter < 1,
        or malformed or overlapping output buffers.
    TypeError
        For a non-integer n or max_iter.
    """
    n = operator.index(n)
    if n < 1:
        raise ValueError(f"Number of quadrature points must be >= 1, got n={n}")
    if not x1 < x2:
        raise ValueError(f"Require x1 < x2, got x1={x1}, x2={x2}")
    if not (math.isfinite(tol) and tol > 0):
        raise ValueError(f"Tolerance must be finite and positive, got tol={tol}")
    max_iter = operator.index(max_iter)
    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got max_iter={max_iter}")

    nodes = _prepare_buffer(nodes, n, "nodes")
    weights = _prepare_buffer(weights, n, "weights")
    _check_distinct(nodes, weights, "nodes", "weights")

    m = (n + 1) // 2
    xm = 0.5 * (x2 + x1)
    xl = 0.5 * (x2 - x1)

    i = np.arange(1, m + 1)
    z0 = np.cos(np.pi * (i - 0.25) / (n + 0.5))
    z, pp = _legendre_newton(n, z0, tol, max_iter)

    w = 2.0 * xl / ((1.0 - z * z) * pp * pp)
    # Low half ascending from x1, mirror half descending from x2
    nodes[:m] = xm - xl * z
    nodes[n - m :] = (xm + xl * z)[::-1]
    weights[:m] = w
    weights[n - m :] = w[::-1]
    return nodes, weights
