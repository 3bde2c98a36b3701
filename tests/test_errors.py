"""Tests for the geostats exception hierarchy."""

import pytest

import geostats
from geostats.errors import (
    ConstructionError,
    CoordinateShapeError,
    CoordinateTypeError,
    DataShapeError,
    EmptyDomainError,
    GeoStatsError,
    GridDimensionError,
    InvalidSourceError,
    LocationOutOfRangeError,
    PathError,
    RadiusError,
)


def test_message_carries_version():
    """Test that messages are prefixed with the library version."""
    error = GeoStatsError("something went wrong")

    assert str(error) == f"[geostats {geostats.__version__}] something went wrong"
    assert error.original_message == "something went wrong"
    assert error.geostats_version == geostats.__version__


def test_construction_error_with_parameter():
    """Test the two argument form."""
    error = ConstructionError("spacing", "must be positive")

    assert error.param_name == "spacing"
    assert error.original_message == "Invalid value for 'spacing': must be positive"


def test_construction_error_with_message():
    """Test the single message form."""
    error = ConstructionError("bad grid")

    assert error.param_name is None
    assert error.original_message == "bad grid"
    assert ConstructionError().original_message == "Invalid construction parameters"


@pytest.mark.parametrize(
    "error_class",
    [
        GridDimensionError,
        CoordinateShapeError,
        CoordinateTypeError,
        RadiusError,
        EmptyDomainError,
        DataShapeError,
        PathError,
    ],
)
def test_construction_errors(error_class):
    """Test that every construction failure can be caught as ConstructionError."""
    with pytest.raises(ConstructionError):
        raise error_class("param", "reason")


def test_invalid_source_error():
    """Test the attributes of InvalidSourceError."""
    error = InvalidSourceError([0, 9], 8)

    assert error.sources == [0, 9]
    assert error.npoints == 8
    assert "[1, 8]" in str(error)
    assert isinstance(error, PathError)


def test_location_out_of_range_error():
    """Test that range errors are not construction errors."""
    error = LocationOutOfRangeError(11, 10)

    assert error.location == 11
    assert error.npoints == 10
    assert isinstance(error, GeoStatsError)
    assert not isinstance(error, ConstructionError)
