import jax
import pytest


def pytest_sessionstart(session):
    """Enable JAX 64-bit mode so precomputed grids keep double precision."""
    jax.config.update("jax_enable_x64", True)


@pytest.fixture(params=[1, 2, 4, 16])
def bandlimit(request):
    """Band-limits covering the single-ring, even, and larger cases."""
    return request.param
