"""Numerical defaults shared by the sampling routines."""

# Absolute tolerance on the Legendre root update |z_new - z_old|.
GL_TOLERANCE: float = 1e-14

# Upper bound on Newton steps per root.
GL_MAX_ITER: int = 100

SAMPLING_METHODS = ("MW", "DH", "GL")
