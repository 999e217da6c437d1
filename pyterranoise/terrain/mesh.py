"""
Terrain mesh assembly from a heightfield.

Vertices are laid out row-major (vertex ``z * width + x``), normals come
from central finite differences with edge clamping, and each grid quad is
split into two triangles. Output arrays are float32/uint32, ready for
vertex and index buffers.

Author: B.G.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .. import constants as cte
from .colors import colorize


def _as_heightfield(heights) -> np.ndarray:
    heights = np.asarray(heights, dtype=np.float64)
    if heights.ndim != 2:
        raise ValueError("heights must be a 2D array")
    if heights.shape[0] < 2 or heights.shape[1] < 2:
        raise ValueError(f"heights must be at least 2x2, got {heights.shape}")
    return heights


def build_vertices(heights, terrain_scale: float = cte.TERRAIN_SCALE,
                   height_scale: float = cte.HEIGHT_SCALE) -> np.ndarray:
    """Vertex positions ``(x * terrain_scale, h * height_scale, z * terrain_scale)``."""
    heights = _as_heightfield(heights)
    ny, nx = heights.shape
    zz, xx = np.indices((ny, nx), dtype=np.float64)
    positions = np.stack(
        [xx * terrain_scale, heights * height_scale, zz * terrain_scale], axis=-1
    )
    return positions.reshape(-1, 3).astype(np.float32)


def compute_normals(heights, terrain_scale: float = cte.TERRAIN_SCALE,
                    height_scale: float = cte.HEIGHT_SCALE) -> np.ndarray:
    """
    Unit vertex normals by central differences.

    For each vertex the normal is ``(hL - hR, 2 * terrain_scale, hD - hU)``
    normalized, where hL/hR/hD/hU are the scaled heights of the left, right,
    previous-row and next-row neighbours; missing neighbours on the border
    fall back to the vertex's own height.
    """
    heights = _as_heightfield(heights) * height_scale
    padded = np.pad(heights, 1, mode="edge")

    h_left = padded[1:-1, :-2]
    h_right = padded[1:-1, 2:]
    h_down = padded[:-2, 1:-1]
    h_up = padded[2:, 1:-1]

    normals = np.stack(
        [h_left - h_right, np.full_like(heights, 2.0 * terrain_scale), h_down - h_up], axis=-1
    )
    normals /= np.linalg.norm(normals, axis=-1, keepdims=True)
    return normals.reshape(-1, 3).astype(np.float32)


def build_indices(width: int, height: int) -> np.ndarray:
    """
    Triangle indices for a width x height vertex grid.

    Each quad gives ``(top_left, bottom_left, top_right)`` and
    ``(top_right, bottom_left, bottom_right)``.
    """
    if width < 2 or height < 2:
        raise ValueError(f"grid must be at least 2x2, got {width}x{height}")
    zz, xx = np.indices((height - 1, width - 1), dtype=np.uint32)
    top_left = zz * width + xx
    top_right = top_left + 1
    bottom_left = top_left + width
    bottom_right = bottom_left + 1
    tris = np.stack(
        [top_left, bottom_left, top_right, top_right, bottom_left, bottom_right], axis=-1
    )
    return tris.reshape(-1).astype(np.uint32)


@dataclass
class TerrainMesh:
    """Interleavable terrain mesh buffers for a width x height grid."""

    width: int
    height: int
    positions: np.ndarray
    normals: np.ndarray
    colors: np.ndarray
    indices: np.ndarray

    @property
    def vertex_count(self) -> int:
        return self.width * self.height

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def interleaved(self) -> np.ndarray:
        """(N, 9) float32 array of position, normal, color per vertex."""
        return np.hstack([self.positions, self.normals, self.colors]).astype(np.float32)


def build_terrain_mesh(heights, terrain_scale: float = cte.TERRAIN_SCALE,
                       height_scale: float = cte.HEIGHT_SCALE) -> TerrainMesh:
    """Assemble positions, normals, height colors and indices for a heightfield."""
    heights = _as_heightfield(heights)
    ny, nx = heights.shape
    return TerrainMesh(
        width=nx,
        height=ny,
        positions=build_vertices(heights, terrain_scale, height_scale),
        normals=compute_normals(heights, terrain_scale, height_scale),
        colors=colorize(heights).reshape(-1, 3).astype(np.float32),
        indices=build_indices(nx, ny),
    )
