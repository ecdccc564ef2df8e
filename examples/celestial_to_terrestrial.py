# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "sofajax"]
#
# [tool.uv.sources]
# sofajax = { path = ".." }
# ///
"""Print the celestial-to-terrestrial (GCRS to ITRS) matrix for a date.

Builds the matrix for the chosen precession-nutation model on the chosen
composition path, and optionally on the other path as well so the two
can be compared.

Requires sofajax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/celestial_to_terrestrial.py [OPTIONS]

Examples:
    # IAU 2006/2000A, CIO based, 2006 January 1 0h
    uv run examples/celestial_to_terrestrial.py --mjd-tt 53736.0 --mjd-ut1 53736.0

    # IAU 2000B on the equinox path with pole coordinates in arcseconds
    uv run examples/celestial_to_terrestrial.py --model 2000B --method equinox \\
        --xp 0.0526 --yp 0.3837

    # Compare both paths for IAU 2000A
    uv run examples/celestial_to_terrestrial.py --model 2000A --compare
"""

import enum
import time
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

from sofajax import DAS2R, DJM0, celestial_to_terrestrial, set_dtype

set_dtype(jnp.float64)  # Must be before any JIT compilation


class Model(enum.StrEnum):
    """Precession-nutation model."""

    iau2000a = "2000A"
    iau2000b = "2000B"
    iau2006a = "2006A"


class Method(enum.StrEnum):
    """Composition path."""

    cio = "cio"
    equinox = "equinox"


_c2t = jax.jit(celestial_to_terrestrial, static_argnames=("model", "method"))


def _print_matrix(name: str, r) -> None:
    print(f"  {name}:")
    for row in r.tolist():
        print("    [" + ", ".join(f"{v:+.16f}" for v in row) + "]")


def main(
    mjd_tt: Annotated[float, typer.Option(help="TT as a Modified Julian Date")] = 53736.0,
    mjd_ut1: Annotated[float, typer.Option(help="UT1 as a Modified Julian Date")] = 53736.0,
    xp: Annotated[float, typer.Option(help="Pole x coordinate in arcseconds")] = 0.0526,
    yp: Annotated[float, typer.Option(help="Pole y coordinate in arcseconds")] = 0.3837,
    model: Annotated[Model, typer.Option(help="Precession-nutation model")] = Model.iau2006a,
    method: Annotated[Method, typer.Option(help="Composition path")] = Method.cio,
    compare: Annotated[bool, typer.Option(help="Also build the matrix on the other path")] = False,
):
    print(f"JAX backend: {jax.default_backend().upper()}")
    print(f"  TT  = MJD {mjd_tt}")
    print(f"  UT1 = MJD {mjd_ut1}")
    print(f"  Pole: xp = {xp} as, yp = {yp} as")

    args = (DJM0, mjd_tt, DJM0, mjd_ut1, xp * DAS2R, yp * DAS2R)

    print(f"\n── IAU {model.value}, {method.value} based ──")
    t0 = time.perf_counter()
    r = _c2t(*args, model=model.value, method=method.value)
    r.block_until_ready()
    print(f"  Built (including compilation) in {time.perf_counter() - t0:.2f}s")
    _print_matrix("Rc2t", r)

    if not compare:
        return

    other = Method.equinox if method is Method.cio else Method.cio
    print(f"\n── IAU {model.value}, {other.value} based ──")
    r_other = _c2t(*args, model=model.value, method=other.value)
    _print_matrix("Rc2t", r_other)

    diff = float(jnp.max(jnp.abs(r - r_other)))
    print(f"\n  Max element difference: {diff:.3e} ({diff / DAS2R * 1e6:.3f} µas)")


if __name__ == "__main__":
    typer.run(main)
