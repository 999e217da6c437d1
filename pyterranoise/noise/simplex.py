"""
2D Simplex noise generation for PyTerraNoise.

Based on Stefan Gustavson's reference implementation: the input point is
skewed onto a triangular (simplex) lattice, the containing triangle's three
corners each contribute ``t^4 * dot(gradient, offset)`` with
``t = 0.5 - |offset|^2`` (zero outside the influence radius), and the sum is
scaled by 70 and mapped to [0, 1].

Author: B.G.
"""

import logging
import math

import numpy as np

from .. import constants as cte
from .fbm import fbm, fbm_grid, grid_coordinates
from .permutation import get_permutation_table

logger = logging.getLogger(__name__)

# Gradient set shared by every generator (edge midpoints of a cube)
GRAD3 = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
], dtype=np.int64)
GRAD3.setflags(write=False)

_GRAD3_TUPLES = tuple(tuple(int(c) for c in g) for g in GRAD3)

F2 = cte.SIMPLEX_F2
G2 = cte.SIMPLEX_G2


def _corner(g, x, y):
    t = 0.5 - x * x - y * y
    if t < 0:
        return 0.0
    t *= t
    return t * t * (g[0] * x + g[1] * y)


def _corner_array(gi, x, y):
    t = 0.5 - x * x - y * y
    t2 = t * t
    n = t2 * t2 * (GRAD3[gi, 0] * x + GRAD3[gi, 1] * y)
    return np.where(t < 0, 0.0, n)


class SimplexGenerator:
    """
    Seeded 2D simplex noise source.

    Owns one immutable permutation table; sampling is a pure function of
    the coordinates.

    Args:
        seed: Non-negative integer seed (default: 0)
    """

    def __init__(self, seed=cte.DEFAULT_SEED):
        self.table = get_permutation_table(seed)
        self._perm = self.table.lookup

    @property
    def seed(self):
        return self.table.seed

    def sample2(self, xin, yin):
        """Simplex noise at (xin, yin), normalized to [0, 1]."""
        perm = self._perm

        # Skew the input space to determine which simplex cell we're in
        s = (xin + yin) * F2
        i = math.floor(xin + s)
        j = math.floor(yin + s)

        t = (i + j) * G2
        X0 = i - t
        Y0 = j - t
        x0 = xin - X0
        y0 = yin - Y0

        # Lower triangle (0,0)->(1,0)->(1,1), upper triangle (0,0)->(0,1)->(1,1)
        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2
        y2 = y0 - 1.0 + 2.0 * G2

        ii = i & cte.PERM_MASK
        jj = j & cte.PERM_MASK
        gi0 = perm[ii + perm[jj]] % 12
        gi1 = perm[ii + i1 + perm[jj + j1]] % 12
        gi2 = perm[ii + 1 + perm[jj + 1]] % 12

        n0 = _corner(_GRAD3_TUPLES[gi0], x0, y0)
        n1 = _corner(_GRAD3_TUPLES[gi1], x1, y1)
        n2 = _corner(_GRAD3_TUPLES[gi2], x2, y2)

        return min(1.0, max(0.0, (cte.SIMPLEX_SCALE * (n0 + n1 + n2) + 1.0) / 2.0))

    def sample_grid(self, xs, ys):
        """
        Evaluate :meth:`sample2` over broadcastable coordinate arrays.

        Returns:
            np.ndarray: float64 samples in [0, 1] with the broadcast shape
        """
        perm = self.table.values.astype(np.int64)
        xin, yin = np.broadcast_arrays(
            np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)
        )

        s = (xin + yin) * F2
        i = np.floor(xin + s)
        j = np.floor(yin + s)

        t = (i + j) * G2
        x0 = xin - (i - t)
        y0 = yin - (j - t)

        lower = x0 > y0
        i1 = np.where(lower, 1, 0)
        j1 = np.where(lower, 0, 1)

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2
        y2 = y0 - 1.0 + 2.0 * G2

        ii = i.astype(np.int64) & cte.PERM_MASK
        jj = j.astype(np.int64) & cte.PERM_MASK
        gi0 = perm[ii + perm[jj]] % 12
        gi1 = perm[ii + i1 + perm[jj + j1]] % 12
        gi2 = perm[ii + 1 + perm[jj + 1]] % 12

        total = _corner_array(gi0, x0, y0) + _corner_array(gi1, x1, y1) + _corner_array(gi2, x2, y2)
        return np.clip((cte.SIMPLEX_SCALE * total + 1.0) / 2.0, 0.0, 1.0)

    def fbm(self, x, y, octaves=cte.DEFAULT_OCTAVES, persistence=cte.DEFAULT_PERSISTENCE,
            lacunarity=cte.DEFAULT_LACUNARITY):
        """Multi-octave simplex noise at (x, y)."""
        return fbm(self.sample2, x, y, octaves, persistence, lacunarity)

    def fbm_grid(self, xs, ys, octaves=cte.DEFAULT_OCTAVES, persistence=cte.DEFAULT_PERSISTENCE,
                 lacunarity=cte.DEFAULT_LACUNARITY):
        return fbm_grid(self.sample_grid, xs, ys, octaves, persistence, lacunarity)

    def __repr__(self):
        return f"SimplexGenerator(seed={self.seed})"


def simplex_sample(x, y, seed=cte.DEFAULT_SEED):
    """
    Generate a 2D Simplex noise value at given coordinates.

    Returns:
        float: Noise value in [0, 1]
    """
    return SimplexGenerator(seed).sample2(x, y)


def simplex_fbm(x, y, octaves=cte.DEFAULT_OCTAVES, persistence=cte.DEFAULT_PERSISTENCE,
                lacunarity=cte.DEFAULT_LACUNARITY, seed=cte.DEFAULT_SEED):
    """
    Generate multi-octave Simplex noise (fractal Brownian motion).

    Args:
        x, y: Coordinates
        octaves: Number of noise layers to combine (default: 4)
        persistence: Amplitude multiplier for each octave (default: 0.5)
        lacunarity: Frequency multiplier for each octave (default: 2.0)
        seed: Random seed for noise generation (default: 0)

    Returns:
        float: Weighted octave average, nominally in [0, 1]
    """
    return SimplexGenerator(seed).fbm(x, y, octaves, persistence, lacunarity)


def simplex_grid(width, height, scale=cte.NOISE_SCALE, octaves=cte.DEFAULT_OCTAVES,
                 persistence=cte.DEFAULT_PERSISTENCE, lacunarity=cte.DEFAULT_LACUNARITY,
                 seed=cte.DEFAULT_SEED):
    """Generate a (height, width) array of Simplex FBM noise."""
    xs, ys = grid_coordinates(width, height, scale)
    logger.debug(
        "simplex_grid %dx%d scale=%s octaves=%s persistence=%s lacunarity=%s seed=%s",
        width, height, scale, octaves, persistence, lacunarity, seed,
    )
    return SimplexGenerator(seed).fbm_grid(xs, ys, octaves, persistence, lacunarity)
