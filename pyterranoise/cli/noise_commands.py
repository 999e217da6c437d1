"""
Noise Sampling CLI Commands for PyTerraNoise

Command line interface for evaluating single noise samples, mostly useful
for checking seeds and parameters before generating whole heightmaps.

Author: B.G.
"""

import sys

import click

import pyterranoise as ptn
from pyterranoise import constants as cte


@click.command()
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.option(
    "--type",
    "-t",
    "noise_type",
    type=click.Choice(["perlin", "simplex"]),
    default="perlin",
    show_default=True,
    help="Noise type to sample",
)
@click.option("--z", default=0.0, show_default=True, type=float, help="Z coordinate (Perlin only)")
@click.option(
    "--seed", "-s", default=cte.DEFAULT_SEED, show_default=True, type=click.IntRange(min=0),
    help="Random seed",
)
@click.option(
    "--octaves", "-o", default=1, show_default=True, type=int,
    help="Number of FBM octaves (1 = raw sample)",
)
@click.option("--persistence", default=cte.DEFAULT_PERSISTENCE, show_default=True, type=float)
@click.option("--lacunarity", default=cte.DEFAULT_LACUNARITY, show_default=True, type=float)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noise_sample(x, y, noise_type, z, seed, octaves, persistence, lacunarity, verbose):
    """
    Print one noise sample at coordinates (X, Y).

    With --octaves 1 the raw sample is printed; larger values print the
    fractal Brownian motion sum of that many octaves.

    Examples:

        # Raw Perlin sample
        pnoise-sample 0.5 0.5 --seed 42

        # 6-octave Simplex FBM
        pnoise-sample 12.3 4.5 -t simplex -o 6 -s 54321
    """
    try:
        if verbose:
            ptn.setup_logging()

        if z != 0.0 and (noise_type != "perlin" or octaves != 1):
            raise ptn.noise.NoiseConfigError("--z is only supported for raw Perlin samples")

        if noise_type == "perlin":
            if octaves == 1:
                value = ptn.noise.perlin_sample(x, y, z, seed=seed)
            else:
                value = ptn.noise.perlin_fbm(x, y, octaves, persistence, lacunarity, seed=seed)
        else:
            if octaves == 1:
                value = ptn.noise.simplex_sample(x, y, seed=seed)
            else:
                value = ptn.noise.simplex_fbm(x, y, octaves, persistence, lacunarity, seed=seed)

        if verbose:
            click.echo(
                f"{noise_type} x={x} y={y} z={z} seed={seed} octaves={octaves} "
                f"persistence={persistence} lacunarity={lacunarity}"
            )
        click.echo(repr(value))

    except ptn.noise.NoiseConfigError as e:
        click.echo(f"Error: Invalid configuration - {e}", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    noise_sample()
