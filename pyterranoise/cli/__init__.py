"""
Command Line Interface for PyTerraNoise

This module provides command line utilities for PyTerraNoise, enabling
noise sampling and heightmap generation from the terminal without writing
Python scripts.

Available Commands:
- noise_sample: Print a single Perlin/Simplex (FBM) sample
- heightmap: Generate a heightmap to .npy or PNG
- colorize: Render a .npy heightmap through the terrain color ramp

Author: B.G.
"""

_CLI_SUBMODULES = {
    "noise_sample": (".noise_commands", "noise_sample"),
    "heightmap": (".heightmap_commands", "heightmap"),
    "colorize": (".heightmap_commands", "colorize"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
