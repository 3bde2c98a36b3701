"""geostats: spatial domains and proximity queries for geostatistics.

Core Objects: RegularGrid, StructuredGrid, PointSet, BallNeighborhood,
SimplePath, RandomPath, SourcePath, ShiftedPath, BallPartitioner
"""

import datetime

import geostats.domains
import geostats.metrics
import geostats.neighborhoods
import geostats.partitions
import geostats.paths
from geostats.domains import Domain, PointSet, RegularGrid, StructuredGrid
from geostats.io import read_geotable
from geostats.metrics import Chebyshev, Cityblock, Euclidean, Metric, Minkowski
from geostats.neighborhoods import BallNeighborhood, Neighborhood
from geostats.partitions import BallPartitioner, SpatialFunctionPartitioner
from geostats.paths import Path, RandomPath, ShiftedPath, SimplePath, SourcePath
from geostats.protocols import Georeferenced
from geostats.spatialdata import (
    PointSetData,
    RegularGridData,
    SpatialData,
    StructuredGridData,
)
from geostats.utils import boundgrid

__all__ = [
    "BallNeighborhood",
    "BallPartitioner",
    "Chebyshev",
    "Cityblock",
    "Domain",
    "Euclidean",
    "Georeferenced",
    "Metric",
    "Minkowski",
    "Neighborhood",
    "Path",
    "PointSet",
    "PointSetData",
    "RandomPath",
    "RegularGrid",
    "RegularGridData",
    "ShiftedPath",
    "SimplePath",
    "SourcePath",
    "SpatialData",
    "SpatialFunctionPartitioner",
    "StructuredGrid",
    "StructuredGridData",
    "boundgrid",
    "read_geotable",
]

__title__ = "geostats"
__version__ = "0.1.0"
__license__ = "Apache 2.0"
_this_year = datetime.datetime.now(tz=datetime.UTC).date().year
__copyright__ = f"Copyright {_this_year} geostats contributors"
