"""
Pytest configuration and fixtures for PyTerraNoise test suite.

This file contains shared fixtures, marker registration and helpers used
across the test suite.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker, description in (
        ("unit", "fast tests of a single function or class"),
        ("integration", "tests combining several modules"),
        ("slow", "tests that take noticeably longer than the rest"),
        ("importtest", "module import checks"),
    ):
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def sample_points():
    """Reproducible coordinates spanning negative and positive values."""
    rng = np.random.default_rng(2024)
    xs = rng.uniform(-300.0, 300.0, 400)
    ys = rng.uniform(-300.0, 300.0, 400)
    zs = rng.uniform(-50.0, 50.0, 400)
    return xs, ys, zs


@pytest.fixture(params=[0, 1, 42, 12345, 2**32 - 1])
def seed(request):
    """A spread of seeds including 0 and the top of the 32-bit range."""
    return request.param


class HeightmapChecks:
    """Helper assertions for generated heightmaps."""

    @staticmethod
    def assert_normalized(heights):
        assert np.all(np.isfinite(heights))
        assert heights.min() >= 0.0
        assert heights.max() <= 1.0

    @staticmethod
    def mean_adjacent_difference(heights):
        dx = np.abs(np.diff(heights, axis=1)).mean()
        dy = np.abs(np.diff(heights, axis=0)).mean()
        return 0.5 * (dx + dy)


@pytest.fixture
def heightmap_checks():
    """Provide access to heightmap assertion helpers."""
    return HeightmapChecks()
