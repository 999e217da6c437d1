"""
Heightmap export utilities for PyTerraNoise.

Save generated heightmaps as numpy arrays or PNG images (grayscale or
through the terrain color ramp) for use in external viewers and engines.

Dependencies:
- numpy: array handling and .npy I/O
- pillow: PNG encoding

Author: B.G.
"""

import logging

import numpy as np
from PIL import Image

from ..terrain.colors import colorize

logger = logging.getLogger(__name__)


def _prepare(heights, normalize):
    heights = np.asarray(heights, dtype=np.float64)
    if heights.ndim != 2:
        raise ValueError("heights must be a 2D array")

    if normalize:
        h_min = np.nanmin(heights)
        h_max = np.nanmax(heights)
        if h_min == h_max:
            logger.warning("Heightmap has constant values, exporting zeros")
            heights = np.zeros_like(heights)
        else:
            heights = (heights - h_min) / (h_max - h_min)

    # FBM output may overshoot [0, 1] by rounding; NaN cells are written as 0
    return np.clip(np.nan_to_num(heights, nan=0.0), 0.0, 1.0)


def save_heightmap_npy(heights, output_path):
    """
    Save a heightmap as a .npy file.

    Raises:
        OSError: If the output file cannot be written
    """
    heights = np.asarray(heights)
    try:
        np.save(output_path, heights)
    except Exception as e:
        raise OSError(f"Failed to save numpy array to '{output_path}': {e}") from e
    logger.info("Saved heightmap %s to '%s'", heights.shape, output_path)


def heightmap_to_image(heights, uint=False, normalize=False):
    """
    Convert a heightmap to a single-band PIL image.

    Args:
        heights: 2D array of heights, nominally in [0, 1]
        uint: Produce 8-bit (0-255) instead of 16-bit (0-65535) grayscale
        normalize: Min-max rescale before conversion instead of clipping

    Returns:
        PIL.Image.Image: Mode "L" if uint else "I;16"
    """
    h = _prepare(heights, normalize)
    if uint:
        return Image.fromarray(np.round(h * 255).astype(np.uint8))
    return Image.fromarray(np.round(h * 65535).astype(np.uint16))


def save_heightmap_png(heights, output_path, uint=False, normalize=False):
    """Save a heightmap as a grayscale PNG (see :func:`heightmap_to_image`)."""
    img = heightmap_to_image(heights, uint=uint, normalize=normalize)
    img.save(output_path)
    logger.info("Saved grayscale PNG (%s) to '%s'", img.mode, output_path)
    return img


def colored_image(heights, normalize=False):
    """RGB PIL image of a heightmap rendered through the height color ramp."""
    rgb = colorize(_prepare(heights, normalize))
    return Image.fromarray(np.round(rgb * 255).astype(np.uint8))


def save_colored_png(heights, output_path, normalize=False):
    """Save a heightmap as an RGB PNG through the height color ramp."""
    img = colored_image(heights, normalize=normalize)
    img.save(output_path)
    logger.info("Saved colored PNG to '%s'", output_path)
    return img
