"""
Miscellaneous Utilities for PyTerraNoise

Export helpers that don't belong to the generators themselves.

Available Functions:
- save_heightmap_npy: Save a heightmap as a .npy file
- heightmap_to_image: Convert a heightmap to a grayscale PIL image
- save_heightmap_png: Save a heightmap as an 8/16-bit grayscale PNG
- colored_image: Render a heightmap through the height color ramp
- save_colored_png: Save the color-ramped rendering as PNG

Author: B.G.
"""

from .image_utils import (
    colored_image,
    heightmap_to_image,
    save_colored_png,
    save_heightmap_npy,
    save_heightmap_png,
)

# Export public API
__all__ = [
    "colored_image",
    "heightmap_to_image",
    "save_colored_png",
    "save_heightmap_npy",
    "save_heightmap_png",
]
