"""
Sample Angle Mapping
====================

Conversion of discrete theta/phi sample indices to angles.

Key Concepts:
-------------
    • MW colatitudes are sampled over the toroidal extension: t in [0, 2L-2]
      gives 2L-1 points in (0, 2*pi).  The physical sphere uses t in
      [0, L-1], the last of which is the south pole theta = pi.
    • DH colatitudes: t in [0, 2L-1] gives 2L points in (0, pi).
    • All three schemes use 2L-1 equispaced longitudes in [0, 2*pi).
"""

import math
from typing import Literal

from .constants import SAMPLING_METHODS
from .validation import check_bandlimit, check_sample_index

Method = Literal["MW", "DH", "GL"]


def mw_t2theta(t: int, L: int) -> float:
    """MW colatitude (2t+1)*pi/(2L-1) for theta index t in [0, 2L-2]."""
    L = check_bandlimit(L)
    t = check_sample_index("t", t, 2 * L - 2)
    return (2.0 * t + 1.0) * math.pi / (2.0 * L - 1.0)


def mw_p2phi(p: int, L: int) -> float:
    """MW longitude 2p*pi/(2L-1) for phi index p in [0, 2L-2]."""
    L = check_bandlimit(L)
    p = check_sample_index("p", p, 2 * L - 2)
    return 2.0 * p * math.pi / (2.0 * L - 1.0)


def dh_t2theta(t: int, L: int) -> float:
    """DH colatitude (2t+1)*pi/(4L) for theta index t in [0, 2L-1]."""
    L = check_bandlimit(L)
    t = check_sample_index("t", t, 2 * L - 1)
    return (2.0 * t + 1.0) * math.pi / (4.0 * L)


def dh_p2phi(p: int, L: int) -> float:
    """DH longitude 2p*pi/(2L-1) for phi index p in [0, 2L-2]."""
    L = check_bandlimit(L)
    p = check_sample_index("p", p, 2 * L - 2)
    return 2.0 * p * math.pi / (2.0 * L - 1.0)


def gl_p2phi(p: int, L: int) -> float:
    """GL longitude 2p*pi/(2L-1) for phi index p in [0, 2L-2]."""
    L = check_bandlimit(L)
    p = check_sample_index("p", p, 2 * L - 2)
    return 2.0 * p * math.pi / (2.0 * L - 1.0)


def _check_method(method: str) -> str:
    if method not in SAMPLING_METHODS:
        raise ValueError(
            f"Unknown sampling method {method!r}; expected one of {SAMPLING_METHODS}"
        )
    return method


def ntheta(method: Method, L: int) -> int:
    """
    Number of colatitude rings on the sphere for a sampling scheme.

    MW: L (including the south pole), DH: 2L, GL: L.
    """
    method = _check_method(method)
    L = check_bandlimit(L)
    return 2 * L if method == "DH" else L


def nphi(method: Method, L: int) -> int:
    """Number of longitude samples per ring: 2L-1 for every scheme."""
    _check_method(method)
    L = check_bandlimit(L)
    return 2 * L - 1
