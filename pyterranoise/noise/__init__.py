"""
Noise generation module for PyTerraNoise.

Deterministic, seedable noise generators for procedural terrain. All
generators are pure functions of (coordinates, parameters, seed): the same
inputs always give bit-identical outputs, and no process-wide random state
is read or written.

Noise Types:
- Perlin Noise: improved gradient noise (3D, 2D as the z=0 slice)
- Simplex Noise: 2D gradient noise on a triangular lattice
- Diamond-Square: fractal midpoint displacement heightmaps (size 2**n + 1)

FBM (fractal Brownian motion) combinators sum several octaves of Perlin or
Simplex noise at increasing frequency and decreasing amplitude.

Usage:
    import pyterranoise as ptn

    # Single samples in [0, 1]
    h = ptn.noise.perlin_sample(0.5, 0.5, seed=42)
    s = ptn.noise.simplex_fbm(1.2, 3.4, octaves=5, seed=54321)

    # Reusable generator objects
    gen = ptn.noise.PerlinGenerator(seed=12345)
    grid = gen.fbm_grid(xs, ys, octaves=6)

    # Complete heightmap
    heights = ptn.noise.diamond_square_generate(257, roughness=0.5, seed=1)

Author: B.G.
"""

from .errors import NoiseConfigError
from .permutation import PermutationTable, fisher_yates_permutation, get_permutation_table
from .fbm import fbm, fbm_grid, grid_coordinates
from .perlin import PerlinGenerator, perlin_sample, perlin_fbm, perlin_grid
from .simplex import GRAD3, SimplexGenerator, simplex_sample, simplex_fbm, simplex_grid
from .diamond_square import DiamondSquareGenerator, diamond_square_generate

__all__ = [
    "NoiseConfigError",
    "PermutationTable", "fisher_yates_permutation", "get_permutation_table",
    "fbm", "fbm_grid", "grid_coordinates",
    "PerlinGenerator", "perlin_sample", "perlin_fbm", "perlin_grid",
    "GRAD3", "SimplexGenerator", "simplex_sample", "simplex_fbm", "simplex_grid",
    "DiamondSquareGenerator", "diamond_square_generate",
]
