"""
Default parameters and numerical constants for PyTerraNoise.

Every public function takes these values as keyword defaults. Override them
per call (or per CLI invocation) rather than editing this module.

Author: B.G.
"""

import math

# --- Seeding ---
DEFAULT_SEED = 0

# --- Permutation table ---
PERM_SIZE = 256
PERM_MASK = PERM_SIZE - 1

# --- FBM (fractal Brownian motion) ---
DEFAULT_OCTAVES = 4
DEFAULT_PERSISTENCE = 0.5
DEFAULT_LACUNARITY = 2.0

# --- Simplex skew factors (2D) ---
SIMPLEX_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
SIMPLEX_G2 = (3.0 - math.sqrt(3.0)) / 6.0
SIMPLEX_SCALE = 70.0

# --- Diamond-Square ---
DEFAULT_ROUGHNESS = 0.5
# Below this max-min spread the heightmap is considered flat and left as is
NORMALIZE_EPS = 1e-4

# --- Terrain sampling (values of the original OpenGL viewer) ---
TERRAIN_WIDTH = 256
TERRAIN_HEIGHT = 256
TERRAIN_SCALE = 0.5
HEIGHT_SCALE = 20.0
NOISE_SCALE = 0.02

NOISE_TYPES = ("perlin", "simplex", "diamond_square")

# Height color ramp: (normalized height, RGB)
HEIGHT_COLOR_STOPS = (
    (0.0, (0.2, 0.4, 0.8)),    # water
    (0.3, (0.4, 0.6, 0.3)),    # shore / low grass
    (0.5, (0.3, 0.5, 0.2)),    # grass
    (0.7, (0.5, 0.4, 0.3)),    # hills
    (0.85, (0.5, 0.5, 0.5)),   # rock
    (1.0, (0.9, 0.9, 0.95)),   # snow
)
