"""
Harmonic Index Relations
========================

Bijection between spherical harmonic pairs (el, m) and the flat index used
to store harmonic coefficients f_lm:

    ind = el^2 + el + m,   0 <= el < L,  -el <= m <= el,  0 <= ind < L^2

Coefficients are stored degree by degree, m ascending within each degree.
"""

import math
import operator

import jax.numpy as jnp
from jaxtyping import Array, Int
import numpy as np

from .errors import InvalidIndex
from .validation import check_bandlimit


def elm2ind(el: int, m: int, L: int | None = None) -> int:
    """
    Flat storage index of the harmonic pair (el, m).

    Parameters:
    -----------
    el : int
        Degree, el >= 0 (and el < L when L is given).
    m : int
        Order, -el <= m <= el.
    L : int, optional
        Band-limit to check el against.

    Returns:
    --------
    ind : int
        el*el + el + m.
    """
    el = operator.index(el)
    m = operator.index(m)
    if el < 0:
        raise InvalidIndex(f"Degree must be non-negative, got el={el}", el=el, m=m)
    if not -el <= m <= el:
        raise InvalidIndex(f"Order m={m} outside [-{el}, {el}]", el=el, m=m)
    if L is not None and el >= check_bandlimit(L):
        raise InvalidIndex(f"Degree el={el} not below band-limit L={L}", el=el, m=m)
    return el * el + el + m


def ind2elm(ind: int, L: int | None = None) -> tuple[int, int]:
    """
    Harmonic pair (el, m) stored at flat index ind.

    el = floor(sqrt(ind)) is taken with an exact integer square root, so
    perfect squares never round down to the previous degree.

    Parameters:
    -----------
    ind : int
        Flat index, ind >= 0 (and ind < L^2 when L is given).
    L : int, optional
        Band-limit to check ind against.

    Returns:
    --------
    (el, m) : tuple of int
    """
    ind = operator.index(ind)
    if ind < 0:
        raise InvalidIndex(f"Flat index must be non-negative, got ind={ind}", ind=ind)
    if L is not None:
        L = check_bandlimit(L)
        if ind >= L * L:
            raise InvalidIndex(f"Flat index ind={ind} outside [0, {L * L - 1}]", ind=ind)
    el = math.isqrt(ind)
    m = ind - el * el - el
    return el, m


def harmonic_indices(L: int) -> tuple[Int[Array, "L2"], Int[Array, "L2"]]:
    """
    All (el, m) pairs for band-limit L in flat storage order.

    Returns:
    --------
    (el, m) : tuple of Int[Array, "L2"]
        el[i], m[i] is the pair stored at flat index i, for i in [0, L^2).
    """
    L = check_bandlimit(L)
    ind = np.arange(L * L)
    el = np.floor(np.sqrt(ind)).astype(np.int64)
    # Correct any floating-point floor that lands one degree low or high
    el = np.where((el + 1) ** 2 <= ind, el + 1, el)
    el = np.where(el * el > ind, el - 1, el)
    m = ind - el * el - el
    return jnp.asarray(el), jnp.asarray(m)
