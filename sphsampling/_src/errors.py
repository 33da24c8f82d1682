"""
Sampling Errors
===============

Exceptions raised by the sampling, quadrature and indexing routines.  Every
error is raised at the point of the call and carries the offending value(s)
as attributes, so the transform pipeline can report them unchanged.
"""


class SamplingError(Exception):
    """Base class for all errors raised by sphsampling."""


class InvalidBandlimit(SamplingError, ValueError):
    """Band-limit L is not a positive integer."""

    def __init__(self, L: int):
        self.L = L
        super().__init__(f"Band-limit must be positive, got L={L}")


class InvalidIndex(SamplingError, ValueError):
    """Harmonic index pair (el, m) or flat index ind is out of range."""

    def __init__(self, message: str, *, el=None, m=None, ind=None):
        self.el = el
        self.m = m
        self.ind = ind
        super().__init__(message)


class InvalidSampleIndex(SamplingError, ValueError):
    """Theta or phi sample index lies outside the sampling scheme."""

    def __init__(self, name: str, value: int, upper: int):
        self.name = name
        self.value = value
        self.upper = upper
        super().__init__(f"Sample index {name}={value} outside [0, {upper}]")


class NonConvergence(SamplingError, RuntimeError):
    """Newton iteration for the Legendre roots exceeded its iteration bound."""

    def __init__(self, n: int, max_iter: int, residual: float):
        self.n = n
        self.max_iter = max_iter
        self.residual = residual
        super().__init__(
            f"Gauss-Legendre roots for n={n} did not converge in {max_iter} "
            f"iterations (max |dz|={residual:.3e})"
        )
