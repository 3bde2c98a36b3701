"""Helpers that build domains from other spatial objects."""

from __future__ import annotations

from collections.abc import Sequence

from geostats.domains import RegularGrid
from geostats.errors import EmptyDomainError, GridDimensionError
from geostats.geostats_logging import create_module_logger, function_logger
from geostats.protocols import Georeferenced

_geostats_logger = create_module_logger()


@function_logger(__name__)
def boundgrid(source: Georeferenced, dims: Sequence[int]) -> RegularGrid:
    """Return a regular grid of the given dims covering all locations of source.

    The grid runs from the componentwise minimum to the componentwise maximum of
    the source coordinates.

    Args:
        source: a domain, spatial data, or any other georeferenced object
        dims: number of grid locations along each axis

    Returns:
        RegularGrid: the bounding grid

    Raises:
        GridDimensionError: if dims are not positive, or if the source is flat
            along some axis so the grid spacing would be zero
        EmptyDomainError: if source has no locations
    """
    if not all(dim > 0 for dim in dims):
        raise GridDimensionError("dims", "must be a sequence of positive integers")
    if source.npoints == 0:
        raise EmptyDomainError("source", "has no locations to bound")

    coords = source.coordinates()
    start = coords.min(axis=1)
    finish = coords.max(axis=1)
    _geostats_logger.debug(f"bounding box from {start} to {finish}")

    return RegularGrid.from_corners(start, finish, dims=dims)
