"""
PyTerraNoise: deterministic procedural noise for terrain generation.

Seedable scalar and heightmap generators (Perlin, Simplex, Diamond-Square)
with fractal Brownian motion combinators, plus small helpers that turn
heightmaps into terrain meshes and images.

Submodules:
- noise: Perlin, Simplex and Diamond-Square generators and FBM combinators
- terrain: heightfield sampling, mesh assembly, height color ramp
- misc: heightmap export utilities (.npy, PNG)
- cli: command line tools
- constants: default parameters

Usage:
    import pyterranoise as ptn

    h = ptn.noise.perlin_fbm(0.3, 0.7, octaves=6, seed=12345)
    grid = ptn.noise.diamond_square_generate(257, roughness=0.5, seed=1)

Author: B.G.
"""

import importlib
import logging
import sys

__version__ = "0.1.0"

_SUBMODULES = ("noise", "terrain", "misc", "cli", "constants")

__all__ = list(_SUBMODULES) + ["setup_logging", "__version__"]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def setup_logging(level=logging.INFO):
    """
    Configure console logging for the pyterranoise package.

    Library modules only emit records through ``logging.getLogger(__name__)``;
    this helper is what the CLI calls for ``--verbose``.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger(__name__).setLevel(level)


def __getattr__(name):
    if name in _SUBMODULES:
        mod = importlib.import_module(f".{name}", __name__)
        globals()[name] = mod
        return mod
    raise AttributeError(name)
