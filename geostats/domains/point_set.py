"""Unstructured point set domain."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from geostats.domains.domain import Domain
from geostats.errors import CoordinateShapeError, CoordinateTypeError


class PointSet(Domain):
    """A set of points with no assumption about axis structure.

    Args:
        coords: either an N x npoints numpy matrix (a 1D array is read as a single
            axis) or a sequence of N-tuples, one tuple per point

    Examples:
        The same two points in 2D::

            PointSet(np.array([[1.0, 0.0], [0.0, 1.0]]))
            PointSet([(1.0, 0.0), (0.0, 1.0)])
    """

    def __init__(self, coords: np.ndarray | Sequence[Sequence[float]]) -> None:  # noqa: D107
        if isinstance(coords, np.ndarray):
            matrix = np.atleast_2d(coords) if coords.ndim == 1 else coords
            if matrix.ndim != 2:
                raise CoordinateShapeError(
                    "coords", f"expected a matrix, got an array of shape {coords.shape}"
                )
        else:
            points = [tuple(point) for point in coords]
            if len({len(point) for point in points}) > 1:
                raise CoordinateShapeError(
                    "coords", "all points must have the same number of coordinates"
                )
            ndims = len(points[0]) if points else 0
            matrix = np.array(points).reshape(len(points), ndims).T

        if not (
            np.issubdtype(matrix.dtype, np.integer)
            or np.issubdtype(matrix.dtype, np.floating)
        ):
            raise CoordinateTypeError(
                "coords", f"{matrix.dtype} is not a real numeric type"
            )

        self._coords = np.array(matrix)
        self._coords.flags.writeable = False

    @property
    def size(self) -> tuple[int, ...]:
        """Return (npoints,)."""
        return (self._coords.shape[1],)

    @property
    def ndims(self) -> int:
        """Return the number of spatial dimensions."""
        return self._coords.shape[0]

    @property
    def coordtype(self) -> np.dtype:
        """Return the coordinate element type."""
        return self._coords.dtype

    def coordinates_into(self, buffer: np.ndarray, location: int) -> np.ndarray:
        """Write the coordinates of location into buffer and return it."""
        location = self._check_location(location)
        buffer[:] = self._coords[:, location - 1]
        return buffer

    def _coordinate_matrix(self) -> np.ndarray:
        return self._coords

    def __str__(self) -> str:  # noqa: D105
        return f"{self.ndims}×{self.npoints} PointSet{{{self.coordtype},{self.ndims}}}"

    def __repr__(self) -> str:  # noqa: D105
        return f"PointSet(npoints={self.npoints}, ndims={self.ndims})"
