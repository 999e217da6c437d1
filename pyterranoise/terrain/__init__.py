"""
Terrain helpers built on the noise generators.

- heightfield: sample a (height, width) heightfield from a noise type
- mesh: vertex positions, finite-difference normals, triangle indices
- colors: height color ramp

Usage:
    import pyterranoise as ptn

    heights = ptn.terrain.sample_heightfield("simplex", 256, 256)
    mesh = ptn.terrain.build_terrain_mesh(heights)
    vbo_data = mesh.interleaved()

Author: B.G.
"""

from .heightfield import (
    PRESETS,
    PERLIN_PRESET,
    SIMPLEX_PRESET,
    DIAMOND_SQUARE_PRESET,
    diamond_square_size_for,
    sample_heightfield,
)
from .mesh import TerrainMesh, build_indices, build_terrain_mesh, build_vertices, compute_normals
from .colors import HEIGHT_COLORMAP, color_for_height, colorize

__all__ = [
    "PRESETS",
    "PERLIN_PRESET",
    "SIMPLEX_PRESET",
    "DIAMOND_SQUARE_PRESET",
    "diamond_square_size_for",
    "sample_heightfield",
    "TerrainMesh",
    "build_indices",
    "build_terrain_mesh",
    "build_vertices",
    "compute_normals",
    "HEIGHT_COLORMAP",
    "color_for_height",
    "colorize",
]
