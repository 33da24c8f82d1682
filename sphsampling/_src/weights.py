"""
Sampling Weights
================

Quadrature weights for the three supported sampling theorems.

    • MW  (McEwen-Wiaux): closed-form weights for the periodic (toroidal)
      extension of the colatitude integral to [0, 2*pi).  Complex valued.
    • DH  (Driscoll-Healy): finite trigonometric series per colatitude.
    • GL  (Gauss-Legendre): roots of P_L mapped through arccos.

References:
-----------
[1] McEwen, J. D. & Wiaux, Y. (2011). A novel sampling theorem on the sphere.
    IEEE Trans. Signal Process. 59, 5876-5887.
[2] Driscoll, J. R. & Healy, D. M. (1994). Computing Fourier transforms and
    convolutions on the 2-sphere. Adv. Appl. Math. 15, 202-250.
"""

import math
import operator

import numpy as np

from .quadrature import _check_distinct, _prepare_buffer, gauss_legendre
from .validation import check_bandlimit


def weight_mw(p: int) -> complex:
    """
    MW toroidal-extension weight for Fourier mode p.

        w(+1) =  i*pi/2
        w(-1) = -i*pi/2
        w(p)  = 2 / (1 - p^2)   for even p
        w(p)  = 0               for odd p, |p| != 1

    The result is always a complex number so call sites are uniform.
    """
    p = operator.index(p)
    if p == 1:
        return complex(0.0, math.pi / 2)
    if p == -1:
        return complex(0.0, -math.pi / 2)
    if p % 2 == 0:
        return complex(2.0 / (1.0 - p * p))
    return complex(0.0)


def weight_dh(theta: float, L: int) -> float:
    """
    Driscoll-Healy weight at colatitude theta for band-limit L.

    Mathematical Framework:
    -----------------------
        w(theta) = (2/L) * sin(theta) * sum_{k=0}^{L-1} sin((2k+1)*theta) / (2k+1)

    Evaluate once per theta ring, not per sample.

    Parameters:
    -----------
    theta : float
        Colatitude [rad].
    L : int
        Harmonic band-limit (> 0).

    Returns:
    --------
    w : float
        Quadrature weight.
    """
    L = check_bandlimit(L)
    odd = 2.0 * np.arange(L) + 1.0
    series = np.sum(np.sin(odd * theta) / odd)
    return float(2.0 / L * math.sin(theta) * series)


def gl_thetas_weights(
    L: int,
    *,
    thetas: np.ndarray | None = None,
    weights: np.ndarray | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Gauss-Legendre colatitudes and weights for band-limit L.

    The L-point rule on [-1, 1] is mapped to colatitude by theta = arccos(x);
    weights are passed through unchanged (they sum to 2).

    Order follows the quadrature nodes: x ascends, so theta *decreases* from
    near pi (south) to near 0 (north).  thetas[i] and weights[i] always refer
    to the same node.

    Parameters:
    -----------
    L : int
        Harmonic band-limit (> 0).
    thetas, weights : ndarray [L], optional
        Caller-owned output buffers.  Written in place when given.

    Returns:
    --------
    thetas : ndarray [L]
        Colatitudes in (0, pi).
    weights : ndarray [L]
        Gauss-Legendre weights.
    """
    L = check_bandlimit(L)
    thetas = _prepare_buffer(thetas, L, "thetas")
    weights = _prepare_buffer(weights, L, "weights")
    _check_distinct(thetas, weights, "thetas", "weights")

    gauss_legendre(L, -1.0, 1.0, nodes=thetas, weights=weights)
    np.arccos(thetas, out=thetas)
    return thetas, weights
