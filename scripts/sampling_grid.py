"""
Spherical Sampling Grid Inspection
==================================

This script builds the sampling grid of one of the supported sampling
theorems (MW, DH, GL) with `sphsampling`, checks its quadrature against the
area of the unit sphere, and writes the colatitudes, longitudes and ring
weights to a NetCDF file.

Sampling Theorems:
------------------
- **MW** (McEwen-Wiaux): L rings including the South Pole, 2L-1 longitudes.
  Ring weights are not stored; the complex Fourier weights of the toroidal
  extension are written instead.
- **DH** (Driscoll-Healy): 2L equiangular rings, 2L-1 longitudes.
- **GL** (Gauss-Legendre): L rings at the Gauss-Legendre nodes, 2L-1
  longitudes.

Usage:
------
The script is run from the command line, with parameters controlled by `cyclopts`.

Example:
  python scripts/sampling_grid.py --method GL --bandlimit 64 --plot
"""

import pathlib
from typing import Annotated, Literal

import cyclopts
import jax
import jax.numpy as jnp
from loguru import logger
import matplotlib.pyplot as plt
import numpy as np
import xarray as xr

from sphsampling import MWSampling, make_sampling

# JAX configuration
jax.config.update("jax_enable_x64", True)

# Initialize the cyclopts app
app = cyclopts.App()


def build_dataset(sampling) -> xr.Dataset:
    """Collect the sampling geometry into an xarray Dataset."""
    data_vars = {}
    coords = {"theta": np.asarray(sampling.thetas), "phi": np.asarray(sampling.phis)}
    if isinstance(sampling, MWSampling):
        fourier = np.asarray(sampling.fourier_weights)
        coords["p"] = np.asarray(sampling.fourier_modes)
        data_vars["fourier_weight_real"] = (("p",), fourier.real)
        data_vars["fourier_weight_imag"] = (("p",), fourier.imag)
    else:
        data_vars["weight"] = (("theta",), np.asarray(sampling.weights))

    return xr.Dataset(
        data_vars=data_vars,
        coords=coords,
        attrs={
            "description": f"{type(sampling).__name__} spherical sampling grid",
            "bandlimit": sampling.L,
            "ntheta": sampling.ntheta,
            "nphi": sampling.nphi,
        },
    )


@app.default
def run_sampling_grid(
    method: Annotated[
        Literal["MW", "DH", "GL"],
        cyclopts.Option("--method", help="Sampling theorem."),
    ] = "GL",
    bandlimit: Annotated[
        int, cyclopts.Option("--bandlimit", help="Harmonic band-limit L.")
    ] = 32,
    output_dir: Annotated[
        pathlib.Path | None,
        cyclopts.Option("--output-dir", help="Directory to save the output NetCDF."),
    ] = None,
    plot: Annotated[
        bool, cyclopts.Option("--plot", help="Plot the ring weights.")
    ] = False,
):
    """
    Build, check and save a spherical sampling grid.
    """
    logger.info("=" * 60)
    logger.info(f"{method} sampling grid, L={bandlimit}")
    logger.info("=" * 60)

    # --- Setup Grid ---
    logger.info("Computing sampling geometry...")
    sampling = make_sampling(method, bandlimit)
    logger.success(
        f"Grid initialized: {sampling.ntheta} x {sampling.nphi} = "
        f"{sampling.n_samples} samples"
    )

    # --- Quadrature check ---
    if method != "MW":
        area = float(jnp.sum(sampling.quadrature_weights))
        logger.info(f"Sphere area from quadrature: {area:.15f}")
        logger.info(f"Error vs 4*pi: {abs(area - 4 * np.pi):.3e}")

    # --- Save ---
    ds = build_dataset(sampling)
    logger.info(f"Dataset created with shape: theta={len(ds.theta)}, phi={len(ds.phi)}")

    if output_dir is None:
        output_dir = pathlib.Path("./output/sampling")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{method.lower()}_L{bandlimit}.nc"
    ds.to_netcdf(output_path)
    logger.success(f"Output saved to: {output_path}")

    if plot and "weight" in ds:
        logger.info("Generating plots...")
        plot_weights(ds)
        logger.success("Plots generated successfully!")
        plt.show()


def plot_weights(ds: xr.Dataset):
    """
    Ring weights against colatitude.
    """
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(ds.theta, ds["weight"], "o-", markersize=3)
    ax.set_xlabel("Colatitude theta [rad]")
    ax.set_ylabel("Ring weight")
    ax.grid(True, linestyle="--", alpha=0.6)
    ax.set_title(ds.attrs["description"])
    plt.tight_layout()


if __name__ == "__main__":
    app()
