"""
Height color ramp for terrain rendering.

Piecewise-linear ramp from water through grass, hills and rock to snow,
built as a matplotlib colormap from ``constants.HEIGHT_COLOR_STOPS``.

Author: B.G.
"""

import numpy as np
from matplotlib.colors import LinearSegmentedColormap

from .. import constants as cte

# Enough entries that lookup error stays well below 8-bit color resolution
_RAMP_RESOLUTION = 4096

HEIGHT_COLORMAP = LinearSegmentedColormap.from_list(
    "pyterranoise_height", list(cte.HEIGHT_COLOR_STOPS), N=_RAMP_RESOLUTION
)


def colorize(heights):
    """
    Map normalized heights to RGB colors.

    Heights outside [0, 1] are clamped to the ramp ends.

    Args:
        heights: Array of heights (any shape)

    Returns:
        np.ndarray: float64 array of shape ``heights.shape + (3,)`` in [0, 1]
    """
    heights = np.clip(np.asarray(heights, dtype=np.float64), 0.0, 1.0)
    rgba = np.asarray(HEIGHT_COLORMAP(heights.ravel()), dtype=np.float64)
    return rgba[:, :3].reshape(heights.shape + (3,))


def color_for_height(height):
    """RGB tuple for a single normalized height."""
    r, g, b = colorize(height)
    return float(r), float(g), float(b)
