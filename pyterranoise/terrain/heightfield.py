"""
Heightfield sampling for terrain meshes.

Turns one of the three noise types into a (height, width) array of
normalized heights, ready for mesh assembly or export.

Author: B.G.
"""

import logging

from .. import constants as cte
from ..noise import NoiseConfigError, diamond_square_generate, perlin_grid, simplex_grid
from ..noise.errors import check_dimension

logger = logging.getLogger(__name__)

# Parameters used by the original terrain viewer
PERLIN_PRESET = {"octaves": 6, "persistence": 0.5, "lacunarity": 2.0, "seed": 12345}
SIMPLEX_PRESET = {"octaves": 5, "persistence": 0.5, "lacunarity": 2.0, "seed": 54321}
DIAMOND_SQUARE_PRESET = {"roughness": cte.DEFAULT_ROUGHNESS, "seed": cte.DEFAULT_SEED}

PRESETS = {
    "perlin": PERLIN_PRESET,
    "simplex": SIMPLEX_PRESET,
    "diamond_square": DIAMOND_SQUARE_PRESET,
}


def diamond_square_size_for(width, height):
    """Smallest valid Diamond-Square side (2**n + 1) covering width x height."""
    side = 2
    while side + 1 < max(width, height):
        side *= 2
    return side + 1


def sample_heightfield(noise_type="perlin", width=cte.TERRAIN_WIDTH, height=cte.TERRAIN_HEIGHT,
                       noise_scale=cte.NOISE_SCALE, octaves=None, persistence=None,
                       lacunarity=None, seed=None, roughness=None, wrap=False):
    """
    Sample a heightfield from the requested noise type.

    Parameters left as None take the value of the type's preset
    (see ``PRESETS``).

    Args:
        noise_type: "perlin", "simplex" or "diamond_square"
        width, height: Number of samples along x and z
        noise_scale: Coordinate spacing between samples (Perlin/Simplex)
        octaves, persistence, lacunarity: FBM parameters (Perlin/Simplex)
        seed: Random seed
        roughness: Displacement decay exponent (Diamond-Square)
        wrap: Edge wrapping (Diamond-Square)

    Returns:
        np.ndarray: (height, width) float64 heights

    Raises:
        NoiseConfigError: For an unknown noise type or invalid parameters

    Note:
        Diamond-Square generates the smallest conforming square grid that
        covers the request and crops it to (height, width).
    """
    if noise_type not in PRESETS:
        raise NoiseConfigError(
            f"noise_type must be one of {cte.NOISE_TYPES}, got '{noise_type}'"
        )
    preset = PRESETS[noise_type]

    def pick(name, value):
        return preset[name] if value is None else value

    logger.debug("Sampling %s heightfield %dx%d", noise_type, width, height)

    if noise_type == "diamond_square":
        width = check_dimension("width", width)
        height = check_dimension("height", height)
        size = diamond_square_size_for(width, height)
        heights = diamond_square_generate(
            size, roughness=pick("roughness", roughness), seed=pick("seed", seed), wrap=wrap
        )
        return heights[:height, :width].copy()

    grid_fn = perlin_grid if noise_type == "perlin" else simplex_grid
    return grid_fn(
        width,
        height,
        scale=noise_scale,
        octaves=pick("octaves", octaves),
        persistence=pick("persistence", persistence),
        lacunarity=pick("lacunarity", lacunarity),
        seed=pick("seed", seed),
    )
