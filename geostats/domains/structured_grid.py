"""Structured grid domain with explicitly stored, possibly curvilinear, coordinates."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from geostats.domains.domain import Domain
from geostats.errors import CoordinateShapeError, CoordinateTypeError


class StructuredGrid(Domain):
    """A structured grid with one coordinate array per axis.

    The arrays share one shape, which becomes the grid dimensions. Coordinates are
    stored as an N x npoints matrix, flattened with the first dimension varying
    fastest, so the geometry does not need to be affine.

    Examples:
        Locations on the Earth surface georeferenced by LAT and LON matrices::

            StructuredGrid(LAT, LON)
    """

    def __init__(self, *coord_arrays: ArrayLike) -> None:
        """Initialise the structured grid.

        Args:
            coord_arrays: one array of coordinates per axis

        Raises:
            CoordinateShapeError: if no array is given or the arrays differ in shape
            CoordinateTypeError: if the arrays are not real numeric
        """
        if not coord_arrays:
            raise CoordinateShapeError("at least one coordinate array is required")
        arrays = [np.asarray(array) for array in coord_arrays]
        shapes = {array.shape for array in arrays}
        if len(shapes) != 1:
            raise CoordinateShapeError(
                f"coordinate arrays must have the same dimensions, got {sorted(shapes)}"
            )

        dtype = np.result_type(*arrays)
        if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
            raise CoordinateTypeError(
                "coord_arrays", f"{dtype} is not a real numeric type"
            )

        self._dims = tuple(int(d) for d in arrays[0].shape)
        self._coords = np.stack([array.ravel(order="F") for array in arrays]).astype(
            dtype
        )
        self._coords.flags.writeable = False

    @property
    def size(self) -> tuple[int, ...]:
        """Return the shape shared by the coordinate arrays."""
        return self._dims

    @property
    def dims(self) -> tuple[int, ...]:
        """Convenience alias for size."""
        return self._dims

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

    def __repr__(self) -> str:  # noqa: D105
        return f"StructuredGrid(dims={self.dims}, ndims={self.ndims})"
