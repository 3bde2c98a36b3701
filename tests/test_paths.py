"""Tests for the path iterators."""

import numpy as np
import pytest

from geostats.domains import PointSet, RegularGrid
from geostats.errors import ConstructionError, InvalidSourceError, PathError
from geostats.paths import Path, RandomPath, ShiftedPath, SimplePath, SourcePath


@pytest.fixture
def grid():
    """A 4 x 3 grid."""
    return RegularGrid((4, 3))


@pytest.fixture
def six_points():
    """A point set with six locations."""
    return PointSet(np.arange(12, dtype=float).reshape(2, 6))


class TestSimplePath:
    """Tests for SimplePath."""

    def test_identity_order(self, grid):
        """Test that locations are visited in index order."""
        path = SimplePath(grid)

        assert isinstance(path, Path)
        assert len(path) == 12
        assert list(path) == list(range(1, 13))

    def test_restartable(self, grid):
        """Test that a path can be iterated more than once."""
        path = SimplePath(grid)
        assert list(path) == list(path)

    def test_does_not_touch_coordinates(self, grid):
        """Test that the domain is unchanged by iteration."""
        before = grid.coordinates()
        list(SimplePath(grid))
        np.testing.assert_array_equal(grid.coordinates(), before)


class TestRandomPath:
    """Tests for RandomPath."""

    def test_visits_every_location_once(self, grid):
        """Test that the path is a permutation."""
        path = RandomPath(grid, rng=42)
        locations = list(path)

        assert len(locations) == len(path) == grid.npoints
        assert set(locations) == set(range(1, grid.npoints + 1))
        assert all(isinstance(location, int) for location in locations)

    def test_replays_permutation(self, grid):
        """Test that repeated iteration yields the same order."""
        path = RandomPath(grid, rng=42)
        assert list(path) == list(path)
        assert list(path) == path.permutation.tolist()

    def test_reproducible_with_seed(self):
        """Test that equal seeds give equal paths."""
        grid = RegularGrid((20, 20))
        assert list(RandomPath(grid, rng=7)) == list(RandomPath(grid, rng=7))
        assert list(RandomPath(grid, rng=7)) != list(RandomPath(grid, rng=8))

    def test_accepts_generator(self, grid):
        """Test passing a numpy Generator."""
        rng = np.random.default_rng(3)
        path = RandomPath(grid, rng=rng)

        assert path.rng is rng
        assert sorted(path) == list(range(1, grid.npoints + 1))

    def test_warns_without_rng(self, grid):
        """Test that a missing random source is flagged."""
        with pytest.warns(UserWarning, match="non-reproducible"):
            path = RandomPath(grid)
        assert sorted(path) == list(range(1, grid.npoints + 1))

    def test_permutation_is_read_only(self, grid):
        """Test that the drawn order cannot be changed."""
        path = RandomPath(grid, rng=1)
        with pytest.raises(ValueError):
            path.permutation[0] = 1


class TestSourcePath:
    """Tests for SourcePath."""

    def test_sources_first_then_ascending(self, six_points):
        """Test seeds in order followed by the remaining locations."""
        path = SourcePath(six_points, [5, 2])

        assert list(path) == [5, 2, 1, 3, 4, 6]
        assert len(path) == 6
        assert path.sources == (5, 2)

    def test_duplicate_sources_are_dropped(self, six_points):
        """Test that repeated seeds are visited only once."""
        path = SourcePath(six_points, [5, 2, 5, 2])
        assert list(path) == [5, 2, 1, 3, 4, 6]
        assert path.sources == (5, 2)

    def test_no_sources(self, six_points):
        """Test that without seeds the path is ascending."""
        assert list(SourcePath(six_points, [])) == [1, 2, 3, 4, 5, 6]

    def test_all_sources(self, six_points):
        """Test that seeds can cover the whole domain."""
        order = [6, 4, 2, 1, 3, 5]
        assert list(SourcePath(six_points, order)) == order

    @pytest.mark.parametrize("sources", [[0], [7], [1, -3], [2, 100]])
    def test_invalid_sources(self, six_points, sources):
        """Test that seeds outside the domain fail at construction."""
        with pytest.raises(InvalidSourceError) as excinfo:
            SourcePath(six_points, sources)
        assert excinfo.value.npoints == 6

    def test_secondary_order(self, six_points):
        """Test the remaining locations following another path."""
        secondary = RandomPath(six_points, rng=11)
        path = SourcePath(six_points, [5, 2], secondary=secondary)
        locations = list(path)

        assert locations[:2] == [5, 2]
        assert locations[2:] == [
            location for location in secondary if location not in (5, 2)
        ]
        assert sorted(locations) == [1, 2, 3, 4, 5, 6]

    def test_secondary_must_match_domain(self, six_points, grid):
        """Test that the secondary path covers the same number of locations."""
        with pytest.raises(PathError, match="secondary"):
            SourcePath(six_points, [1], secondary=SimplePath(grid))

    def test_restartable(self, six_points):
        """Test that a source path can be iterated more than once."""
        path = SourcePath(six_points, [3])
        assert list(path) == list(path)


class TestShiftedPath:
    """Tests for ShiftedPath."""

    def test_rotates_left(self, six_points):
        """Test that the first offset locations move to the end."""
        path = ShiftedPath(SimplePath(six_points), 2)

        assert list(path) == [3, 4, 5, 6, 1, 2]
        assert len(path) == 6
        assert path.domain is six_points

    @pytest.mark.parametrize("offset", [0, 1, 5, 11, 12, 13, 30])
    def test_matches_rotation(self, grid, offset):
        """Test against the rotated output of the underlying path."""
        underlying = RandomPath(grid, rng=5)
        expected = list(underlying)
        k = offset % len(expected)

        assert list(ShiftedPath(underlying, offset)) == expected[k:] + expected[:k]

    def test_shift_of_shift(self, six_points):
        """Test that shifts compose."""
        path = ShiftedPath(ShiftedPath(SimplePath(six_points), 2), 3)
        assert list(path) == [6, 1, 2, 3, 4, 5]

    def test_negative_offset(self, six_points):
        """Test that a negative offset fails at construction."""
        with pytest.raises(PathError, match="offset"):
            ShiftedPath(SimplePath(six_points), -1)

    def test_restartable(self, six_points):
        """Test that a shifted path can be iterated more than once."""
        path = ShiftedPath(SimplePath(six_points), 4)
        assert list(path) == list(path)


def test_path_errors_are_construction_errors():
    """Test the place of path errors in the hierarchy."""
    assert issubclass(InvalidSourceError, PathError)
    assert issubclass(PathError, ConstructionError)
