"""Tests for reading georeferenced tables."""

from io import StringIO

import numpy as np
import pytest

from geostats.errors import ConstructionError
from geostats.io import read_geotable
from geostats.spatialdata import PointSetData

TABLE = """x,y,z,porosity,facies
0.0,0.0,0.0,0.10,1
1.0,0.0,0.5,0.20,2
0.0,2.0,1.0,0.15,1
"""


def test_read_xyz():
    """Test the default coordinate columns."""
    data = read_geotable(StringIO(TABLE))

    assert isinstance(data, PointSetData)
    assert data.ndims == 3
    assert data.npoints == 3
    assert list(data.variables) == ["porosity", "facies"]
    np.testing.assert_array_equal(data.coordinates(2), [1.0, 0.0, 0.5])
    np.testing.assert_array_equal(data["facies"], [1, 2, 1])


def test_custom_coordnames():
    """Test choosing the coordinate columns."""
    data = read_geotable(StringIO(TABLE), coordnames=("y", "x"))

    assert data.ndims == 2
    np.testing.assert_array_equal(data.coordinates(3), [2.0, 0.0])
    assert list(data.variables) == ["z", "porosity", "facies"]


def test_missing_coordnames_are_skipped():
    """Test a 2D table read with the default names."""
    data = read_geotable(StringIO("x,y,value\n0,1,5\n2,3,6\n"))

    assert data.ndims == 2
    assert list(data.variables) == ["value"]


def test_no_coordinate_columns():
    """Test that a table without coordinates is rejected."""
    with pytest.raises(ConstructionError, match="coordnames"):
        read_geotable(StringIO("a,b\n1,2\n"))


def test_read_file_with_options(tmp_path):
    """Test reading from disk with read_csv options."""
    path = tmp_path / "samples.txt"
    path.write_text("east;north;grade\n10;20;1.5\n11;21;2.5\n")

    data = read_geotable(path, coordnames=("east", "north"), sep=";")

    assert data.npoints == 2
    np.testing.assert_array_equal(data["grade"], [1.5, 2.5])
