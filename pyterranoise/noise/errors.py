"""
Configuration errors and argument validation for the noise generators.

Author: B.G.
"""

import math
import numbers


class NoiseConfigError(ValueError):
    """Raised when a generator is given parameters it cannot honour."""


def check_seed(seed):
    """Return ``seed`` as an int, rejecting negative and non-integer seeds."""
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise NoiseConfigError(f"seed must be a non-negative integer, got {seed!r}")
    if seed < 0:
        raise NoiseConfigError(f"seed must be a non-negative integer, got {seed}")
    return int(seed)


def check_octaves(octaves):
    if isinstance(octaves, bool) or not isinstance(octaves, numbers.Integral):
        raise NoiseConfigError(f"octaves must be an integer >= 1, got {octaves!r}")
    if octaves < 1:
        raise NoiseConfigError(f"octaves must be an integer >= 1, got {octaves}")
    return int(octaves)


def check_finite(name, value):
    if not math.isfinite(value):
        raise NoiseConfigError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def check_grid_size(size):
    """
    Validate a Diamond-Square grid side length.

    The side must be ``2**n + 1`` with ``n >= 1`` (3, 5, 9, ..., 129, 257)
    so that every halving step lands on integer cell positions.
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise NoiseConfigError(f"size must be an integer of the form 2**n + 1, got {size!r}")
    n = int(size) - 1
    if n < 2 or n & (n - 1) != 0:
        raise NoiseConfigError(
            f"size must be of the form 2**n + 1 with n >= 1 (e.g. 129, 257), got {size}"
        )
    return int(size)


def check_dimension(name, value):
    """Return a grid width/height as an int, rejecting non-positive values."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise NoiseConfigError(f"{name} must be a positive integer, got {value!r}")
    return int(value)
