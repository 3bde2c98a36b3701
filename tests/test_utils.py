"""Tests for boundgrid."""

import numpy as np
import pytest

from geostats.domains import PointSet, RegularGrid
from geostats.errors import EmptyDomainError, GridDimensionError
from geostats.protocols import Georeferenced
from geostats.spatialdata import PointSetData
from geostats.utils import boundgrid


def test_bounds_match_point_extremes():
    """Test that the grid spans the componentwise min and max."""
    rng = np.random.default_rng(7)
    coords = rng.normal(size=(3, 40))
    grid = boundgrid(PointSet(coords), (10, 20, 5))

    assert isinstance(grid, RegularGrid)
    assert grid.size == (10, 20, 5)
    lower, upper = np.array(grid.extent()).T
    np.testing.assert_array_equal(lower, coords.min(axis=1))
    np.testing.assert_array_equal(upper, coords.max(axis=1))
    np.testing.assert_array_equal(grid.coordinates(1), coords.min(axis=1))
    np.testing.assert_allclose(grid.coordinates(grid.npoints), coords.max(axis=1))


def test_spatial_data_source():
    """Test bounding the locations of spatial data."""
    data = PointSetData({"z": [1.0, 2.0, 3.0]}, [(0.0, 5.0), (2.0, 1.0), (4.0, 3.0)])
    grid = boundgrid(data, (5, 5))

    assert grid.extent() == ((0.0, 4.0), (1.0, 5.0))
    assert grid.spacing == (1.0, 1.0)


def test_grid_source():
    """Test that a grid bounds itself."""
    grid = RegularGrid((5, 3), (1.0, 2.0), (0.5, 0.25))
    bounds = boundgrid(grid, (5, 3))

    assert bounds.extent() == grid.extent()


def test_integer_coordinates():
    """Test that integer coordinates give a float grid."""
    grid = boundgrid(PointSet([(0, 0), (3, 6)]), (4, 4))

    assert grid.coordtype == np.float64
    assert grid.spacing == (1.0, 2.0)


def test_empty_source():
    """Test that an empty point set has no bounds."""
    with pytest.raises(EmptyDomainError):
        boundgrid(PointSet(np.empty((2, 0))), (10, 10))


def test_non_positive_dims():
    """Test that dims must be positive."""
    with pytest.raises(GridDimensionError):
        boundgrid(PointSet([(0.0, 0.0), (1.0, 1.0)]), (0, 10))


def test_flat_axis():
    """Test that points with a constant coordinate cannot be bounded."""
    with pytest.raises(GridDimensionError):
        boundgrid(PointSet([(0.0, 0.0), (1.0, 0.0)]), (10, 10))


def test_any_georeferenced_source():
    """Test that sources only need to satisfy the Georeferenced protocol."""

    class Wells:
        npoints = 2
        ndims = 2

        def coordinates(self, location=None):
            return np.array([[0.0, 2.0], [1.0, 3.0]])

    wells = Wells()
    assert isinstance(wells, Georeferenced)
    assert isinstance(PointSet([(0.0, 0.0)]), Georeferenced)
    assert boundgrid(wells, (3, 3)).extent() == ((0.0, 2.0), (1.0, 3.0))
