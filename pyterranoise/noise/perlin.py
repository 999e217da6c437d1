"""
Perlin noise generation for PyTerraNoise.

Implements Ken Perlin's improved noise (2002): quintic fade curve, 512-entry
doubled permutation table and the 16-case gradient function keyed on the low
four bits of the corner hash. 2D noise is the ``z = 0`` slice of the 3D
function.

Author: B.G.
"""

import logging
import math

import numpy as np

from .. import constants as cte
from .fbm import fbm, fbm_grid, grid_coordinates
from .permutation import get_permutation_table

logger = logging.getLogger(__name__)


def fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(t, a, b):
    """Linear interpolation between a and b by factor t"""
    return a + t * (b - a)


def grad(hash_val, x, y, z):
    """Dot product of the hashed pseudo-random gradient with (x, y, z)."""
    h = hash_val & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


def grad_array(hash_val, x, y, z):
    """Vectorised :func:`grad` over integer hash arrays."""
    h = hash_val & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)


class PerlinGenerator:
    """
    Seeded 3D improved-Perlin noise source.

    The generator owns one immutable permutation table and has no other
    state; sampling is a pure function of the coordinates. A different seed
    requires a new instance.

    Args:
        seed: Non-negative integer seed (default: 0)
    """

    def __init__(self, seed=cte.DEFAULT_SEED):
        self.table = get_permutation_table(seed)
        self._p = self.table.lookup

    @property
    def seed(self):
        return self.table.seed

    def sample3(self, x, y, z):
        """
        Perlin noise at (x, y, z), normalized to [0, 1].

        Lattice cells are found with ``floor`` so negative coordinates are
        handled the same way as positive ones.
        """
        p = self._p

        # Find unit cube that contains point
        fx = math.floor(x)
        fy = math.floor(y)
        fz = math.floor(z)
        X = int(fx) & cte.PERM_MASK
        Y = int(fy) & cte.PERM_MASK
        Z = int(fz) & cte.PERM_MASK

        # Find relative x, y, z of point in cube
        x -= fx
        y -= fy
        z -= fz

        u = fade(x)
        v = fade(y)
        w = fade(z)

        # Hash coordinates of the 8 cube corners
        A = p[X] + Y
        AA = p[A] + Z
        AB = p[A + 1] + Z
        B = p[X + 1] + Y
        BA = p[B] + Z
        BB = p[B + 1] + Z

        res = lerp(
            w,
            lerp(v,
                 lerp(u, grad(p[AA], x, y, z), grad(p[BA], x - 1, y, z)),
                 lerp(u, grad(p[AB], x, y - 1, z), grad(p[BB], x - 1, y - 1, z))),
            lerp(v,
                 lerp(u, grad(p[AA + 1], x, y, z - 1), grad(p[BA + 1], x - 1, y, z - 1)),
                 lerp(u, grad(p[AB + 1], x, y - 1, z - 1), grad(p[BB + 1], x - 1, y - 1, z - 1))),
        )

        return min(1.0, max(0.0, (res + 1.0) / 2.0))

    def sample2(self, x, y):
        """2D Perlin noise, the ``z = 0`` slice of :meth:`sample3`."""
        return self.sample3(x, y, 0.0)

    def sample_grid(self, xs, ys, z=0.0):
        """
        Evaluate :meth:`sample3` over broadcastable coordinate arrays.

        Args:
            xs, ys: Arrays (or scalars) of x and y coordinates
            z: Scalar or array of z coordinates (default: 0.0)

        Returns:
            np.ndarray: float64 samples in [0, 1] with the broadcast shape
        """
        p = self.table.values.astype(np.int64)
        x, y, z = np.broadcast_arrays(
            np.asarray(xs, dtype=np.float64),
            np.asarray(ys, dtype=np.float64),
            np.asarray(z, dtype=np.float64),
        )

        fx = np.floor(x)
        fy = np.floor(y)
        fz = np.floor(z)
        X = fx.astype(np.int64) & cte.PERM_MASK
        Y = fy.astype(np.int64) & cte.PERM_MASK
        Z = fz.astype(np.int64) & cte.PERM_MASK

        x = x - fx
        y = y - fy
        z = z - fz

        u = fade(x)
        v = fade(y)
        w = fade(z)

        A = p[X] + Y
        AA = p[A] + Z
        AB = p[A + 1] + Z
        B = p[X + 1] + Y
        BA = p[B] + Z
        BB = p[B + 1] + Z

        res = lerp(
            w,
            lerp(v,
                 lerp(u, grad_array(p[AA], x, y, z), grad_array(p[BA], x - 1, y, z)),
                 lerp(u, grad_array(p[AB], x, y - 1, z), grad_array(p[BB], x - 1, y - 1, z))),
            lerp(v,
                 lerp(u, grad_array(p[AA + 1], x, y, z - 1),
                      grad_array(p[BA + 1], x - 1, y, z - 1)),
                 lerp(u, grad_array(p[AB + 1], x, y - 1, z - 1),
                      grad_array(p[BB + 1], x - 1, y - 1, z - 1))),
        )

        return np.clip((res + 1.0) / 2.0, 0.0, 1.0)

    def fbm(self, x, y, octaves=cte.DEFAULT_OCTAVES, persistence=cte.DEFAULT_PERSISTENCE,
            lacunarity=cte.DEFAULT_LACUNARITY):
        """Multi-octave 2D Perlin noise at (x, y)."""
        return fbm(self.sample2, x, y, octaves, persistence, lacunarity)

    def fbm_grid(self, xs, ys, octaves=cte.DEFAULT_OCTAVES, persistence=cte.DEFAULT_PERSISTENCE,
                 lacunarity=cte.DEFAULT_LACUNARITY):
        """Multi-octave 2D Perlin noise over coordinate arrays."""
        return fbm_grid(self.sample_grid, xs, ys, octaves, persistence, lacunarity)

    def __repr__(self):
        return f"PerlinGenerator(seed={self.seed})"


def perlin_sample(x, y, z=0.0, seed=cte.DEFAULT_SEED):
    """
    Generate a Perlin noise value at given coordinates.

    Args:
        x, y: Coordinates
        z: Z coordinate, 0.0 for 2D noise (default: 0.0)
        seed: Random seed for noise generation (default: 0)

    Returns:
        float: Noise value in [0, 1]
    """
    return PerlinGenerator(seed).sample3(x, y, z)


def perlin_fbm(x, y, octaves=cte.DEFAULT_OCTAVES, persistence=cte.DEFAULT_PERSISTENCE,
               lacunarity=cte.DEFAULT_LACUNARITY, seed=cte.DEFAULT_SEED):
    """
    Generate multi-octave Perlin noise (fractal Brownian motion).

    A generator is built from ``seed`` on every call; the permutation table
    itself is cached per seed, so repeated calls are cheap and identical.

    Args:
        x, y: Coordinates
        octaves: Number of noise layers to combine (default: 4)
        persistence: Amplitude multiplier for each octave (default: 0.5)
        lacunarity: Frequency multiplier for each octave (default: 2.0)
        seed: Random seed for noise generation (default: 0)

    Returns:
        float: Weighted octave average, nominally in [0, 1]

    Raises:
        NoiseConfigError: If octaves < 1 or seed is invalid
    """
    return PerlinGenerator(seed).fbm(x, y, octaves, persistence, lacunarity)


def perlin_grid(width, height, scale=cte.NOISE_SCALE, octaves=cte.DEFAULT_OCTAVES,
                persistence=cte.DEFAULT_PERSISTENCE, lacunarity=cte.DEFAULT_LACUNARITY,
                seed=cte.DEFAULT_SEED):
    """
    Generate a (height, width) array of Perlin FBM noise.

    Cell (z, x) holds ``perlin_fbm(x * scale, z * scale, ...)``.

    Example:
        # 256x256 terrain base, 6 octaves
        heights = perlin_grid(256, 256, scale=0.02, octaves=6, seed=12345)
    """
    xs, ys = grid_coordinates(width, height, scale)
    logger.debug(
        "perlin_grid %dx%d scale=%s octaves=%s persistence=%s lacunarity=%s seed=%s",
        width, height, scale, octaves, persistence, lacunarity, seed,
    )
    return PerlinGenerator(seed).fbm_grid(xs, ys, octaves, persistence, lacunarity)
