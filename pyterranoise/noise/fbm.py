"""
Fractal Brownian motion (FBM) octave combinators.

Both combinators are generic over the single-octave sampler they are given,
so the same code drives Perlin and Simplex noise:

    total     = sum(sample(x * f_k, y * f_k) * a_k)
    max_value = sum(a_k)
    result    = total / max_value

with ``a_0 = f_0 = 1``, ``a_{k+1} = a_k * persistence`` and
``f_{k+1} = f_k * lacunarity``. The result is a weighted average of
per-octave samples and is not re-clamped after summation.

Author: B.G.
"""

import math

import numpy as np

from .. import constants as cte
from .errors import NoiseConfigError, check_dimension, check_finite, check_octaves


def _raise_overflow(octave, lacunarity):
    raise NoiseConfigError(
        f"octave {octave} coordinates are not finite (lacunarity={lacunarity}); "
        "reduce lacunarity, octaves or the input coordinates"
    )


def _check_fbm_params(octaves, persistence, lacunarity):
    octaves = check_octaves(octaves)
    persistence = check_finite("persistence", persistence)
    lacunarity = check_finite("lacunarity", lacunarity)
    return octaves, persistence, lacunarity


def fbm(sample2, x, y, octaves=cte.DEFAULT_OCTAVES, persistence=cte.DEFAULT_PERSISTENCE,
        lacunarity=cte.DEFAULT_LACUNARITY):
    """
    Combine ``octaves`` samples of a 2D noise function into one value.

    Args:
        sample2: Callable ``(x, y) -> float`` returning one noise octave
        x, y: Sample coordinates
        octaves: Number of octaves, >= 1 (default: 4)
        persistence: Per-octave amplitude multiplier (default: 0.5)
        lacunarity: Per-octave frequency multiplier (default: 2.0)

    Returns:
        float: Weighted average of the octaves. With a single octave this is
        exactly ``sample2(x, y)``.

    Raises:
        NoiseConfigError: If octaves < 1, a parameter is not finite, an
            octave's scaled coordinates overflow, or the amplitudes sum to
            zero.
    """
    octaves, persistence, lacunarity = _check_fbm_params(octaves, persistence, lacunarity)

    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    max_value = 0.0

    for octave in range(octaves):
        ox = x * frequency
        oy = y * frequency
        if not (math.isfinite(ox) and math.isfinite(oy)):
            _raise_overflow(octave, lacunarity)
        total += sample2(ox, oy) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= lacunarity

    if max_value == 0.0:
        raise NoiseConfigError(
            f"octave amplitudes sum to zero (octaves={octaves}, persistence={persistence})"
        )

    return total / max_value


def fbm_grid(sample_grid, xs, ys, octaves=cte.DEFAULT_OCTAVES,
             persistence=cte.DEFAULT_PERSISTENCE, lacunarity=cte.DEFAULT_LACUNARITY):
    """
    Vectorised counterpart of :func:`fbm` over coordinate arrays.

    ``sample_grid`` takes two broadcastable arrays and returns an array of
    single-octave samples; the octave loop runs once over whole arrays.
    """
    octaves, persistence, lacunarity = _check_fbm_params(octaves, persistence, lacunarity)

    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    total = np.zeros(np.broadcast(xs, ys).shape, dtype=np.float64)
    frequency = 1.0
    amplitude = 1.0
    max_value = 0.0

    for octave in range(octaves):
        with np.errstate(over="ignore", invalid="ignore"):
            oxs = xs * frequency
            oys = ys * frequency
        if not (np.isfinite(oxs).all() and np.isfinite(oys).all()):
            _raise_overflow(octave, lacunarity)
        total += sample_grid(oxs, oys) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= lacunarity

    if max_value == 0.0:
        raise NoiseConfigError(
            f"octave amplitudes sum to zero (octaves={octaves}, persistence={persistence})"
        )

    return total / max_value


def grid_coordinates(width, height, scale=cte.NOISE_SCALE):
    """
    Sample coordinates of a ``height x width`` lattice spaced by ``scale``.

    Returns:
        tuple: ``(xs, ys)`` float64 arrays of shape (height, width), where
        ``xs[z, x] == x * scale`` and ``ys[z, x] == z * scale``.
    """
    width = check_dimension("width", width)
    height = check_dimension("height", height)
    scale = check_finite("scale", scale)
    with np.errstate(over="ignore"):
        x = np.arange(width, dtype=np.float64) * scale
        z = np.arange(height, dtype=np.float64) * scale
    if not (np.isfinite(x[-1]) and np.isfinite(z[-1])):
        raise NoiseConfigError(
            f"scale {scale!r} overflows the coordinates of a {width}x{height} grid"
        )
    xs, ys = np.meshgrid(x, z, indexing="xy")
    return xs, ys
