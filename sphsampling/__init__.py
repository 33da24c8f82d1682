from sphsampling._src.angles import (
    dh_p2phi,
    dh_t2theta,
    gl_p2phi,
    mw_p2phi,
    mw_t2theta,
    nphi,
    ntheta,
)
from sphsampling._src.errors import (
    InvalidBandlimit,
    InvalidIndex,
    InvalidSampleIndex,
    NonConvergence,
    SamplingError,
)
from sphsampling._src.indexing import elm2ind, harmonic_indices, ind2elm
from sphsampling._src.quadrature import gauss_legendre
from sphsampling._src.sampling import DHSampling, GLSampling, MWSampling, make_sampling
from sphsampling._src.weights import gl_thetas_weights, weight_dh, weight_mw

__all__ = [
    # Quadrature
    "gauss_legendre",
    # Weights
    "weight_mw",
    "weight_dh",
    "gl_thetas_weights",
    # Angles
    "mw_t2theta",
    "mw_p2phi",
    "dh_t2theta",
    "dh_p2phi",
    "gl_p2phi",
    "ntheta",
    "nphi",
    # Harmonic indexing
    "elm2ind",
    "ind2elm",
    "harmonic_indices",
    # Sampling grids
    "MWSampling",
    "DHSampling",
    "GLSampling",
    "make_sampling",
    # Errors
    "SamplingError",
    "InvalidBandlimit",
    "InvalidIndex",
    "InvalidSampleIndex",
    "NonConvergence",
]
