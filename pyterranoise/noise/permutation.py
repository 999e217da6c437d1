"""
Seeded permutation tables shared by the Perlin and Simplex generators.

Author: B.G.
"""

import functools

import numpy as np

from .. import constants as cte
from .errors import check_seed


def fisher_yates_permutation(seed: int) -> np.ndarray:
    """
    Generate a permutation table using Fisher-Yates shuffle algorithm.

    The shuffle is driven by a PCG64 generator created for this call only,
    so no process-wide random state is read or modified.

    Args:
        seed: Random seed for reproducible permutation

    Returns:
        512-element permutation array (256 values duplicated)
    """
    rng = np.random.default_rng(seed)

    # Create initial sequence [0, 1, 2, ..., 255]
    perm = np.arange(cte.PERM_SIZE, dtype=np.int32)

    # Fisher-Yates shuffle
    for i in range(cte.PERM_SIZE - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        perm[i], perm[j] = perm[j], perm[i]

    # Duplicate to 512 elements for easier wrapping
    return np.concatenate([perm, perm])


class PermutationTable:
    """
    Immutable, seed-derived shuffle of ``0..255`` stored doubled to 512 entries.

    ``table[i + 256] == table[i]`` for every ``i`` so that lookups of the form
    ``p[p[i] + j]`` never need an explicit wrap.

    Attributes:
        seed (int): Seed the table was built from
        values (np.ndarray): Read-only int32 array of length 512
    """

    def __init__(self, seed=cte.DEFAULT_SEED):
        self.seed = check_seed(seed)
        values = fisher_yates_permutation(self.seed)
        values.setflags(write=False)
        self.values = values
        # Plain list for scalar sampling; indexing a list beats numpy scalars
        self._lookup = values.tolist()

    @classmethod
    def build(cls, seed=cte.DEFAULT_SEED):
        """Alternate constructor kept for symmetry with ``get_permutation_table``."""
        return cls(seed)

    @property
    def lookup(self):
        return self._lookup

    def __len__(self):
        return len(self._lookup)

    def __getitem__(self, index):
        return self._lookup[index]

    def __eq__(self, other):
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return np.array_equal(self.values, other.values)

    def __hash__(self):
        return hash((self.seed, self.values.tobytes()))

    def __repr__(self):
        return f"PermutationTable(seed={self.seed})"


@functools.lru_cache(maxsize=64)
def _cached_table(seed):
    return PermutationTable(seed)


def get_permutation_table(seed=cte.DEFAULT_SEED):
    """
    Return the permutation table for ``seed``, building it at most once.

    Tables are immutable so sharing one instance between generators built
    from the same seed does not change any generator's output.
    """
    return _cached_table(check_seed(seed))
