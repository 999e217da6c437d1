"""
Heightmap Generation CLI Commands for PyTerraNoise

Command line interface for generating heightmaps with any of the noise
types and writing them as .npy arrays or PNG images, and for rendering
existing .npy heightmaps through the terrain color ramp.

Author: B.G.
"""

import sys

import click
import numpy as np

import pyterranoise as ptn
from pyterranoise import constants as cte


@click.command()
@click.argument("output", type=click.Path())
@click.option(
    "--type",
    "-t",
    "noise_type",
    type=click.Choice(list(cte.NOISE_TYPES)),
    default="perlin",
    show_default=True,
    help="Noise type used to build the heightmap",
)
@click.option("--width", "-W", default=cte.TERRAIN_WIDTH, show_default=True, type=click.IntRange(min=1))
@click.option("--height", "-H", default=cte.TERRAIN_HEIGHT, show_default=True, type=click.IntRange(min=1))
@click.option(
    "--scale", default=cte.NOISE_SCALE, show_default=True, type=float,
    help="Coordinate spacing between samples (perlin/simplex)",
)
@click.option("--octaves", "-o", default=None, type=int, help="FBM octaves [default: preset]")
@click.option("--persistence", default=None, type=float, help="FBM persistence [default: preset]")
@click.option("--lacunarity", default=None, type=float, help="FBM lacunarity [default: preset]")
@click.option("--seed", "-s", default=None, type=click.IntRange(min=0), help="Random seed [default: preset]")
@click.option(
    "--roughness", "-r", default=None, type=float,
    help="Displacement decay exponent (diamond_square) [default: 0.5]",
)
@click.option("--wrap", is_flag=True, help="Wrap edges (diamond_square)")
@click.option("--uint", is_flag=True, default=False, help="Save PNG as uint8 instead of uint16")
@click.option("--colored", is_flag=True, default=False, help="Save PNG through the height color ramp")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def heightmap(output, noise_type, width, height, scale, octaves, persistence, lacunarity,
              seed, roughness, wrap, uint, colored, verbose):
    """
    Generate a heightmap and save it to OUTPUT.

    The format follows the extension of OUTPUT: .npy stores the raw float
    heights, .png stores a grayscale (or --colored) image.

    Examples:

        # 256x256 Perlin FBM heightmap as numpy array
        pnoise-heightmap terrain.npy

        # Diamond-Square with edge wrap-around as 8-bit PNG
        pnoise-heightmap ds.png -t diamond_square -W 257 -H 257 --wrap --uint

        # Colored Simplex preview
        pnoise-heightmap preview.png -t simplex --colored
    """
    try:
        if verbose:
            ptn.setup_logging()
            click.echo(f"Generating {noise_type} heightmap {width}x{height}...")

        lower = output.lower()
        if not (lower.endswith(".npy") or lower.endswith(".png")):
            raise click.BadParameter("OUTPUT must end with .npy or .png", param_hint="OUTPUT")

        heights = ptn.terrain.sample_heightfield(
            noise_type,
            width,
            height,
            noise_scale=scale,
            octaves=octaves,
            persistence=persistence,
            lacunarity=lacunarity,
            seed=seed,
            roughness=roughness,
            wrap=wrap,
        )

        if lower.endswith(".npy"):
            ptn.misc.save_heightmap_npy(heights, output)
        elif colored:
            ptn.misc.save_colored_png(heights, output)
        else:
            ptn.misc.save_heightmap_png(heights, output, uint=uint)

        if verbose:
            click.echo(
                f"Saved '{output}' (shape: {heights.shape}, "
                f"range: {heights.min():.4f}-{heights.max():.4f})"
            )
        else:
            click.echo(f"Generated {noise_type} heightmap -> '{output}'")

    except ptn.noise.NoiseConfigError as e:
        click.echo(f"Error: Invalid configuration - {e}", err=True)
        sys.exit(1)

    except click.BadParameter:
        raise

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_npy", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=None,
    help="Output PNG filename (default: input name with .png extension)",
)
@click.option("--normalize", is_flag=True, default=False, help="Min-max rescale heights before coloring")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def colorize(input_npy, output, normalize, verbose):
    """
    Render a .npy heightmap through the terrain color ramp.

    INPUT_NPY: Path to a 2D numpy heightmap with values in [0, 1]

    Examples:

        pnoise-colorize terrain.npy
        pnoise-colorize raw_dem.npy --normalize -o dem_colored.png
    """
    try:
        if verbose:
            ptn.setup_logging()
            click.echo(f"Loading heightmap from '{input_npy}'...")

        heights = np.load(input_npy)

        if output is None:
            output = input_npy.rsplit(".", 1)[0] + ".png"

        ptn.misc.save_colored_png(heights, output, normalize=normalize)

        click.echo(f"Colorized '{input_npy}' -> '{output}'")

    except FileNotFoundError:
        click.echo(f"Error: Input file '{input_npy}' not found", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    heightmap()
