"""
Tests for the (el, m) <-> flat index relations.
"""

import numpy as np
import pytest

from sphsampling._src.errors import InvalidBandlimit, InvalidIndex
from sphsampling._src.indexing import elm2ind, harmonic_indices, ind2elm


@pytest.mark.parametrize("L", [1, 4, 23])
def test_elm_roundtrip(L):
    for el in range(L):
        for m in range(-el, el + 1):
            assert ind2elm(elm2ind(el, m)) == (el, m)


@pytest.mark.parametrize("L", [1, 4, 23])
def test_ind_roundtrip(L):
    for ind in range(L * L):
        assert elm2ind(*ind2elm(ind)) == ind


def test_flat_index_is_dense():
    """Pairs for L=5 cover [0, 24] with no gaps or repeats."""
    L = 5
    inds = sorted(elm2ind(el, m) for el in range(L) for m in range(-el, el + 1))
    assert inds == list(range(L * L))


def test_ind2elm_example():
    """ind=7: el = floor(sqrt(7)) = 2, m = 7 - 4 - 2 = 1."""
    assert ind2elm(7, L=4) == (2, 1)
    assert elm2ind(2, 1, L=4) == 7


@pytest.mark.parametrize("el", [1, 2, 10, 1000, 94906265, 3037000499])
def test_ind2elm_perfect_squares(el):
    """At ind = el^2 the degree must not round down to el-1."""
    assert ind2elm(el * el) == (el, -el)
    assert ind2elm(el * el - 1) == (el - 1, el - 1)


def test_ind2elm_accepts_numpy_int():
    assert ind2elm(np.int64(8)) == (2, 2)


def test_elm2ind_invalid_order():
    with pytest.raises(InvalidIndex) as excinfo:
        elm2ind(2, 3)
    assert excinfo.value.el == 2 and excinfo.value.m == 3
    with pytest.raises(InvalidIndex):
        elm2ind(2, -3)


def test_elm2ind_negative_degree():
    with pytest.raises(InvalidIndex):
        elm2ind(-1, 0)


def test_elm2ind_degree_above_bandlimit():
    with pytest.raises(InvalidIndex):
        elm2ind(4, 0, L=4)


def test_ind2elm_out_of_range():
    with pytest.raises(InvalidIndex) as excinfo:
        ind2elm(-1)
    assert excinfo.value.ind == -1
    with pytest.raises(InvalidIndex):
        ind2elm(16, L=4)


def test_ind2elm_invalid_bandlimit():
    with pytest.raises(InvalidBandlimit):
        ind2elm(0, L=0)


def test_index_rejects_float():
    with pytest.raises(TypeError):
        ind2elm(4.0)


@pytest.mark.parametrize("L", [1, 3, 12])
def test_harmonic_indices_storage_order(L):
    el, m = harmonic_indices(L)
    assert el.shape == (L * L,)
    assert m.shape == (L * L,)
    for i in range(L * L):
        assert ind2elm(i) == (int(el[i]), int(m[i]))
    assert np.all(np.abs(np.asarray(m)) <= np.asarray(el))
