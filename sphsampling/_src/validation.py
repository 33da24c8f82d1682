"""Argument checks shared by the sampling and indexing routines."""

import operator

from .errors import InvalidBandlimit, InvalidSampleIndex


def check_bandlimit(L: int) -> int:
    """Return L as an int, raising InvalidBandlimit unless L > 0."""
    L = operator.index(L)
    if L <= 0:
        raise InvalidBandlimit(L)
    return L


def check_sample_index(name: str, value: int, upper: int) -> int:
    """Return value as an int, raising InvalidSampleIndex unless 0 <= value <= upper."""
    value = operator.index(value)
    if not 0 <= value <= upper:
        raise InvalidSampleIndex(name, value, upper)
    return value
