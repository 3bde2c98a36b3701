"""Spatial domains: regular grids, structured grids and point sets."""

from geostats.domains.domain import Domain
from geostats.domains.point_set import PointSet
from geostats.domains.regular_grid import RegularGrid
from geostats.domains.structured_grid import StructuredGrid

__all__ = [
    "Domain",
    "PointSet",
    "RegularGrid",
    "StructuredGrid",
]
