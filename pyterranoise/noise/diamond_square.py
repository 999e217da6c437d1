"""
Diamond-Square heightmap generation for PyTerraNoise.

Fractal midpoint displacement on a ``size x size`` grid with
``size = 2**n + 1``. Generation is a fixed sequence of passes over one owned
grid:

1. seed the four corners,
2. for each step size ``s = size - 1, (size - 1) / 2, ..., 2``:
   a diamond pass (square centres from their four diagonal corners), then a
   square pass (diamond centres from their orthogonal neighbours), then the
   random range shrinks by ``2 ** -roughness``,
3. normalize to [0, 1].

Every pass computes all of its cells from cells finalised by earlier passes
before writing any of them, so a pass's cells are independent of each
other and are evaluated as whole numpy arrays. Random offsets are drawn in
row-major cell order from a generator owned by the instance.

Author: B.G.
"""

import logging

import numpy as np

from .. import constants as cte
from .errors import check_finite, check_grid_size, check_seed

logger = logging.getLogger(__name__)


class DiamondSquareGenerator:
    """
    Diamond-Square heightmap builder.

    Args:
        size: Grid side length, must be 2**n + 1 (e.g. 129, 257, 513)
        seed: Non-negative integer seed (default: 0)
        wrap: Wrap neighbour lookups around the grid edges (default: False)

    Attributes:
        size (int): Grid side length
        seed (int): Seed of the instance's random generator
        wrap (bool): Edge wrapping flag

    Raises:
        NoiseConfigError: If size is not of the form 2**n + 1 or seed is invalid

    Example:
        ds = DiamondSquareGenerator(257, seed=7)
        ds.generate(roughness=0.6)
        heights = ds.heightmap()   # (257, 257) float64 in [0, 1]
    """

    def __init__(self, size, seed=cte.DEFAULT_SEED, wrap=False):
        self.size = check_grid_size(size)
        self.seed = check_seed(seed)
        self.wrap = bool(wrap)
        self._rng = np.random.default_rng(self.seed)
        # Row-major storage: self._grid[y, x]
        self._grid = np.zeros((self.size, self.size), dtype=np.float64)
        self._generated = False

    @property
    def generated(self):
        return self._generated

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def seed_corners(self):
        """Assign the four grid corners independent uniform values in [-1, 1]."""
        last = self.size - 1
        c00, c10, c01, c11 = self._rng.uniform(-1.0, 1.0, 4)
        self._grid[0, 0] = c00
        self._grid[0, last] = c10
        self._grid[last, 0] = c01
        self._grid[last, last] = c11

    def diamond_pass(self, step_size, random_range):
        """
        Set every square centre to the mean of its four diagonal corners plus
        a uniform offset in [-random_range, random_range].
        """
        half = step_size // 2
        # Lattice of spacing half: corners at even/even, centres at odd/odd
        sub = self._grid[::half, ::half]

        avg = (sub[0:-1:2, 0:-1:2]      # (x - h, y - h)
               + sub[0:-1:2, 2::2]      # (x + h, y - h)
               + sub[2::2, 0:-1:2]      # (x - h, y + h)
               + sub[2::2, 2::2]) / 4.0  # (x + h, y + h)

        offsets = self._rng.uniform(-random_range, random_range, avg.shape)
        sub[1::2, 1::2] = avg + offsets

    def square_pass(self, step_size, random_range):
        """
        Set every diamond centre to the mean of its orthogonal neighbours at
        distance ``step_size / 2`` plus a uniform offset.

        Without wrapping, edge cells average the 3 neighbours that exist.
        With wrapping all 4 are used; the lattice wraps with period
        ``size - 1`` so a wrapped neighbour is always a cell finalised by an
        earlier pass.
        """
        half = step_size // 2
        sub = self._grid[::half, ::half]
        m = sub.shape[0]

        total = np.zeros_like(sub)
        count = np.zeros_like(sub)

        if self.wrap:
            idx = np.arange(m)
            prev = np.where(idx > 0, idx - 1, m - 2)
            nxt = np.where(idx < m - 1, idx + 1, 1)
            total += sub[prev, :]       # up
            total += sub[:, nxt]        # right
            total += sub[nxt, :]        # down
            total += sub[:, prev]       # left
            count[:] = 4.0
        else:
            total[1:, :] += sub[:-1, :]     # up
            count[1:, :] += 1.0
            total[:, :-1] += sub[:, 1:]     # right
            count[:, :-1] += 1.0
            total[:-1, :] += sub[1:, :]     # down
            count[:-1, :] += 1.0
            total[:, 1:] += sub[:, :-1]     # left
            count[:, 1:] += 1.0

        iy, ix = np.indices(sub.shape)
        diamond_centres = (iy + ix) % 2 == 1

        avg = total[diamond_centres] / count[diamond_centres]
        offsets = self._rng.uniform(-random_range, random_range, avg.shape)
        sub[diamond_centres] = avg + offsets

    def normalize(self):
        """
        Rescale the grid to [0, 1].

        A grid whose value spread is below ``NORMALIZE_EPS`` is flat and is
        left unchanged.

        Returns:
            bool: True if the grid was rescaled
        """
        min_val = float(self._grid.min())
        max_val = float(self._grid.max())
        value_range = max_val - min_val

        if value_range > cte.NORMALIZE_EPS:
            self._grid -= min_val
            self._grid /= value_range
            return True

        logger.debug("Flat heightmap (range %.3g), normalization skipped", value_range)
        return False

    # ------------------------------------------------------------------
    # Driver and accessors
    # ------------------------------------------------------------------

    def generate(self, roughness=cte.DEFAULT_ROUGHNESS):
        """
        Run the full Diamond-Square pipeline on the owned grid.

        Args:
            roughness: Decay exponent of the displacement range; after each
                step size the range is multiplied by ``2 ** -roughness``
                (default: 0.5). Larger values give smoother terrain.

        Returns:
            np.ndarray: The generated heightmap (same object as heightmap())

        Raises:
            NoiseConfigError: If roughness is not finite
            RuntimeError: If this instance has already generated a heightmap
        """
        roughness = check_finite("roughness", roughness)
        if self._generated:
            raise RuntimeError(
                "DiamondSquareGenerator.generate() already ran; create a new instance"
            )

        logger.debug(
            "Diamond-Square size=%d roughness=%s seed=%d wrap=%s",
            self.size, roughness, self.seed, self.wrap,
        )

        self.seed_corners()

        random_range = 1.0
        decay = 2.0 ** -roughness
        step_size = self.size - 1
        while step_size > 1:
            self.diamond_pass(step_size, random_range)
            self.square_pass(step_size, random_range)
            random_range *= decay
            step_size //= 2

        self.normalize()
        self._generated = True
        return self._grid

    def height_at(self, x, y):
        """
        Height at integer cell (x, y).

        Out-of-range coordinates return 0.0, or wrap around the grid when
        the generator was built with ``wrap=True``.
        """
        if self.wrap:
            x %= self.size
            y %= self.size
        elif not (0 <= x < self.size and 0 <= y < self.size):
            return 0.0
        return float(self._grid[y, x])

    def heightmap(self):
        """Return the grid by reference, indexed as ``[y, x]``."""
        return self._grid

    def __repr__(self):
        return (
            f"DiamondSquareGenerator(size={self.size}, seed={self.seed}, "
            f"wrap={self.wrap}, generated={self._generated})"
        )


def diamond_square_generate(size, roughness=cte.DEFAULT_ROUGHNESS, seed=cte.DEFAULT_SEED,
                            wrap=False):
    """
    Generate a heightmap using the Diamond-Square algorithm.

    Args:
        size: Size of heightmap, must be 2**n + 1 (e.g. 129, 257, 513, 1025)
        roughness: Displacement decay exponent (default: 0.5)
        seed: Random seed for generation (default: 0)
        wrap: Wrap neighbour lookups around the grid edges (default: False)

    Returns:
        np.ndarray: (size, size) float64 heights in [0, 1]

    Raises:
        NoiseConfigError: If size is not of the form 2**n + 1
    """
    generator = DiamondSquareGenerator(size, seed=seed, wrap=wrap)
    return generator.generate(roughness)
