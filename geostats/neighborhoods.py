"""Radius-based neighborhood queries over spatial domains.

Higher level algorithms ask one neighborhood question per location, so the spatial
index is built once, when the neighborhood is constructed, and reused by every
query. The index depends on the metric:
- Minkowski metrics use scipy's KDTree with their order ``p``
- any other callable metric uses scikit-learn's BallTree with a python distance

Only set membership of query results is part of the contract; results are returned
in ascending order for convenience.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

import numpy as np
from numpy.typing import ArrayLike
from scipy.spatial import KDTree
from sklearn.neighbors import BallTree

from geostats.domains import Domain
from geostats.errors import CoordinateTypeError, RadiusError
from geostats.geostats_logging import create_module_logger, method_logger
from geostats.metrics import Euclidean, Minkowski

D = TypeVar("D", bound=Domain)

_geostats_logger = create_module_logger()

_RADIUS_SLACK = 1e-9


class Neighborhood(ABC, Generic[D]):
    """Base class for neighborhoods over a domain.

    Attributes:
        domain (Domain): the domain whose locations are searched. The neighborhood
            does not own it, and the domain must outlive the neighborhood.
    """

    def __init__(self, domain: D) -> None:
        """Initialise the neighborhood.

        Args:
            domain: the domain to search
        """
        self.domain = domain

    @abstractmethod
    def query(self, location: int) -> np.ndarray:
        """Return the 1-based indices of the locations neighboring location."""

    def __call__(self, location: int) -> np.ndarray:  # noqa: D102
        return self.query(location)


class BallNeighborhood(Neighborhood[D]):
    """All locations within a radius of the query location under a metric.

    Attributes:
        domain (Domain): the searched domain
        radius: the (inclusive) search radius, same element type as the domain
        metric (Callable): the distance function
    """

    @method_logger(__name__)
    def __init__(
        self,
        domain: D,
        radius,
        metric: Callable[[ArrayLike, ArrayLike], float] | None = None,
    ) -> None:
        """Create a ball neighborhood and build its spatial index.

        Args:
            domain: the domain to search
            radius: positive search radius whose type matches ``domain.coordtype``
            metric: distance function, Euclidean by default

        Raises:
            RadiusError: if radius is not positive
            CoordinateTypeError: if the type of radius differs from the coordinate type
        """
        if not radius > 0:
            raise RadiusError("radius", f"must be positive, got {radius}")
        radius_type = np.asarray(radius).dtype
        if radius_type != domain.coordtype:
            raise CoordinateTypeError(
                "radius",
                f"type {radius_type} does not match domain coordinate type {domain.coordtype}",
            )

        super().__init__(domain)
        self.radius = radius
        self.metric = Euclidean() if metric is None else metric
        self._build_index()

    def _build_index(self) -> None:
        """Fit the spatial index over all domain coordinates."""
        self._points = np.asarray(self.domain.coordinates()).T
        # the index compares rounded distances, so it searches a slightly larger
        # ball and query keeps only the candidates the metric itself accepts
        self._search_radius = float(self.radius) * (1 + _RADIUS_SLACK)
        if isinstance(self.metric, Minkowski):
            self._p = self.metric.p
            self._tree = KDTree(self._points)
            self._query = self._query_kdtree
        else:
            self._tree = BallTree(self._points, metric="pyfunc", func=self.metric)
            self._query = self._query_balltree
        _geostats_logger.debug(
            f"built {type(self._tree).__name__} over {len(self._points)} locations"
        )

    def _query_kdtree(self, center: np.ndarray) -> np.ndarray:
        return np.asarray(
            self._tree.query_ball_point(center, self._search_radius, p=self._p),
            dtype=np.int64,
        )

    def _query_balltree(self, center: np.ndarray) -> np.ndarray:
        return self._tree.query_radius(center.reshape(1, -1), self._search_radius)[
            0
        ].astype(np.int64)

    def query(self, location: int) -> np.ndarray:
        """Return the locations within radius of location, including location itself.

        A location belongs to the result exactly when ``is_neighbor`` holds for its
        coordinates and those of the query location.

        Args:
            location: 1-based location index

        Returns:
            np.ndarray: ascending 1-based location indices

        Raises:
            LocationOutOfRangeError: if location is outside the domain
        """
        center = self.domain.coordinates(location)
        candidates = self._query(center)
        inside = [
            index
            for index in candidates
            if self.metric(center, self._points[index]) <= self.radius
        ]
        return np.sort(np.asarray(inside, dtype=np.int64)) + 1

    def is_neighbor(self, x: ArrayLike, y: ArrayLike) -> bool:
        """Return whether two coordinate vectors are within radius of each other.

        This does not consult the spatial index, so x and y need not be domain
        locations.
        """
        return bool(self.metric(x, y) <= self.radius)

    def __repr__(self) -> str:  # noqa: D105
        return f"BallNeighborhood(radius={self.radius}, metric={self.metric!r})"
