"""Unit tests for Diamond-Square heightmap generation."""

import numpy as np
import pytest

from pyterranoise.noise import DiamondSquareGenerator, NoiseConfigError, diamond_square_generate

CORNERS = [(0, 0), (0, -1), (-1, 0), (-1, -1)]


def corner_values(grid):
    return [grid[j, i] for j, i in CORNERS]


class TestConstruction:
    """Size validation and initial state."""

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [3, 5, 9, 17, 33, 129, 257])
    def test_valid_sizes(self, size):
        ds = DiamondSquareGenerator(size)
        assert ds.size == size
        assert ds.heightmap().shape == (size, size)
        assert not ds.heightmap().any()
        assert not ds.generated

    @pytest.mark.unit
    @pytest.mark.parametrize("size", [4, 0, 1, 2, 6, 10, 100, 256, 5.0, True, -3])
    def test_invalid_sizes_rejected(self, size):
        with pytest.raises(NoiseConfigError):
            DiamondSquareGenerator(size)

    @pytest.mark.unit
    def test_invalid_size_fails_before_any_output(self):
        with pytest.raises(NoiseConfigError, match="2\\*\\*n \\+ 1"):
            diamond_square_generate(size=4, roughness=0.5, seed=1, wrap=False)

    @pytest.mark.unit
    def test_invalid_seed_rejected(self):
        with pytest.raises(NoiseConfigError):
            DiamondSquareGenerator(9, seed=-1)

    @pytest.mark.unit
    def test_non_finite_roughness_rejected(self):
        ds = DiamondSquareGenerator(9)
        with pytest.raises(NoiseConfigError):
            ds.generate(float("nan"))
        assert not ds.generated


class TestGeneration:
    """End-to-end generation results."""

    @pytest.mark.unit
    def test_size_5_scenario(self, heightmap_checks):
        grid = diamond_square_generate(size=5, roughness=0.5, seed=1, wrap=False)
        assert grid.shape == (5, 5)
        heightmap_checks.assert_normalized(grid)
        assert len(set(corner_values(grid))) > 1

        again = diamond_square_generate(size=5, roughness=0.5, seed=1, wrap=False)
        np.testing.assert_array_equal(grid, again)
        assert corner_values(grid) == corner_values(again)

    @pytest.mark.unit
    @pytest.mark.parametrize("wrap", [False, True])
    def test_output_spans_unit_interval(self, wrap, heightmap_checks):
        grid = diamond_square_generate(65, roughness=0.5, seed=11, wrap=wrap)
        heightmap_checks.assert_normalized(grid)
        assert grid.min() == pytest.approx(0.0)
        assert grid.max() == pytest.approx(1.0)

    @pytest.mark.unit
    def test_seeds_give_different_maps(self):
        a = diamond_square_generate(33, seed=1)
        b = diamond_square_generate(33, seed=2)
        assert not np.array_equal(a, b)

    @pytest.mark.unit
    def test_wrap_changes_result(self):
        a = diamond_square_generate(33, seed=5, wrap=False)
        b = diamond_square_generate(33, seed=5, wrap=True)
        assert not np.array_equal(a, b)

    @pytest.mark.unit
    def test_instances_own_their_random_state(self):
        first = DiamondSquareGenerator(33, seed=8)
        second = DiamondSquareGenerator(33, seed=8)
        # Draws from one instance or from numpy's global state must not
        # shift another instance's stream
        first.seed_corners()
        first.diamond_pass(32, 1.0)
        np.random.seed(0)
        np.random.rand(100)
        np.testing.assert_array_equal(
            second.generate(0.5), diamond_square_generate(33, roughness=0.5, seed=8)
        )

    @pytest.mark.unit
    def test_higher_roughness_is_smoother(self, heightmap_checks):
        jagged = diamond_square_generate(65, roughness=0.0, seed=3)
        smooth = diamond_square_generate(65, roughness=1.5, seed=3)
        assert heightmap_checks.mean_adjacent_difference(jagged) > \
            heightmap_checks.mean_adjacent_difference(smooth)

    @pytest.mark.unit
    def test_generate_returns_owned_grid(self):
        ds = DiamondSquareGenerator(9, seed=4)
        grid = ds.generate()
        assert grid is ds.heightmap()
        assert ds.generated

    @pytest.mark.unit
    def test_generate_is_single_use(self):
        ds = DiamondSquareGenerator(9, seed=4)
        ds.generate()
        with pytest.raises(RuntimeError):
            ds.generate()


class TestPasses:
    """Individual passes on a 5x5 grid."""

    @pytest.mark.unit
    def test_corners_untouched_by_averaging_passes(self):
        ds = DiamondSquareGenerator(5, seed=1)
        ds.seed_corners()
        grid = ds.heightmap()
        seeded = corner_values(grid)
        assert all(-1.0 <= v <= 1.0 for v in seeded)
        # Only corners are set before any averaging step
        interior = grid.copy()
        for j, i in CORNERS:
            interior[j, i] = 0.0
        assert not interior.any()

        ds.diamond_pass(4, 1.0)
        assert corner_values(grid) == seeded
        ds.square_pass(4, 1.0)
        assert corner_values(grid) == seeded
        ds.diamond_pass(2, 0.7)
        ds.square_pass(2, 0.7)
        assert corner_values(grid) == seeded

    @pytest.mark.unit
    def test_diamond_pass_sets_only_centre(self):
        ds = DiamondSquareGenerator(5, seed=2)
        ds.seed_corners()
        grid = ds.heightmap()
        before = grid.copy()
        ds.diamond_pass(4, 0.0)

        changed = np.argwhere(grid != before)
        assert changed.tolist() == [[2, 2]]
        assert grid[2, 2] == pytest.approx(np.mean(corner_values(before)))

    @pytest.mark.unit
    def test_diamond_offset_within_range(self):
        ds = DiamondSquareGenerator(5, seed=9)
        ds.seed_corners()
        mean = np.mean(corner_values(ds.heightmap()))
        ds.diamond_pass(4, 0.25)
        assert abs(ds.heightmap()[2, 2] - mean) <= 0.25

    @pytest.mark.unit
    def test_square_pass_edges_average_three_neighbours(self):
        ds = DiamondSquareGenerator(5, seed=3)
        ds.seed_corners()
        ds.diamond_pass(4, 0.5)
        g = ds.heightmap()
        c00, c04, c40, c44, mid = g[0, 0], g[0, 4], g[4, 0], g[4, 4], g[2, 2]
        ds.square_pass(4, 0.0)

        assert g[0, 2] == pytest.approx((c04 + mid + c00) / 3.0)   # top edge
        assert g[2, 4] == pytest.approx((c04 + c44 + mid) / 3.0)   # right edge
        assert g[4, 2] == pytest.approx((mid + c44 + c40) / 3.0)   # bottom edge
        assert g[2, 0] == pytest.approx((c00 + mid + c40) / 3.0)   # left edge

    @pytest.mark.unit
    def test_square_pass_wraps_to_opposite_diamond(self):
        ds = DiamondSquareGenerator(5, seed=3, wrap=True)
        ds.seed_corners()
        ds.diamond_pass(4, 0.5)
        g = ds.heightmap()
        c00, c04, mid = g[0, 0], g[0, 4], g[2, 2]
        ds.square_pass(4, 0.0)

        # The missing neighbour above the top edge is the centre below it
        assert g[0, 2] == pytest.approx((mid + c04 + mid + c00) / 4.0)

    @pytest.mark.unit
    def test_square_pass_interior_uses_four_neighbours(self):
        ds = DiamondSquareGenerator(9, seed=6)
        ds.seed_corners()
        ds.diamond_pass(8, 0.5)
        ds.square_pass(8, 0.5)
        ds.diamond_pass(4, 0.5)
        g = ds.heightmap()
        # (y=4, x=2): up (2,2), right (4,4), down (6,2), left (4,0)
        expected = (g[2, 2] + g[4, 4] + g[6, 2] + g[4, 0]) / 4.0
        ds.square_pass(4, 0.0)
        assert g[4, 2] == pytest.approx(expected)


class TestNormalizationAndAccess:
    """Normalization edge cases and accessors."""

    @pytest.mark.unit
    def test_flat_grid_left_unchanged(self):
        ds = DiamondSquareGenerator(5)
        ds.heightmap()[:] = 0.3
        assert ds.normalize() is False
        assert np.all(ds.heightmap() == 0.3)

    @pytest.mark.unit
    def test_nearly_flat_grid_left_unchanged(self):
        ds = DiamondSquareGenerator(5)
        g = ds.heightmap()
        g[:] = 2.0
        g[1, 1] = 2.00005
        before = g.copy()
        assert ds.normalize() is False
        np.testing.assert_array_equal(g, before)

    @pytest.mark.unit
    def test_normalize_rescales(self):
        ds = DiamondSquareGenerator(3)
        g = ds.heightmap()
        g[:] = [[-2.0, 0.0, 2.0], [1.0, 1.0, 1.0], [0.0, 0.0, 0.0]]
        assert ds.normalize() is True
        np.testing.assert_allclose(g[0], [0.0, 0.5, 1.0])
        np.testing.assert_allclose(g[1], [0.75, 0.75, 0.75])

    @pytest.mark.unit
    def test_height_at_without_wrap(self):
        ds = DiamondSquareGenerator(9, seed=12)
        grid = ds.generate()
        assert ds.height_at(3, 5) == grid[5, 3]
        assert ds.height_at(-1, 0) == 0.0
        assert ds.height_at(0, 9) == 0.0
        assert ds.height_at(100, -100) == 0.0

    @pytest.mark.unit
    def test_height_at_with_wrap(self):
        ds = DiamondSquareGenerator(9, seed=12, wrap=True)
        grid = ds.generate()
        assert ds.height_at(-1, 0) == grid[0, 8]
        assert ds.height_at(9, 2) == grid[2, 0]
        assert ds.height_at(4, -10) == grid[8, 4]
