"""Regular grid domain with coordinates computed from an affine rule.

A RegularGrid never stores coordinates. The location with per-axis indices
``(i_1, ..., i_N)`` sits at ``origin[d] + (i_d - 1) * spacing[d]``. This gives
O(1) lookup independent of grid size, and makes ``nearest_location`` a closed-form
rounding instead of a search.

Grids can be built in three ways:
- ``RegularGrid(dims, origin, spacing)``
- ``RegularGrid.from_corners(start, finish, dims)``
- ``RegularGrid.from_extent(((xmin, xmax), (ymin, ymax)), dims)``
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence

import numpy as np

from geostats.domains.domain import Domain
from geostats.errors import CoordinateTypeError, GridDimensionError

DEFAULT_DIMS = 100


def _validate_dims(dims) -> tuple[int, ...]:
    dims = tuple(dims)
    if not dims or not all(
        isinstance(dim, numbers.Integral) and dim > 0 for dim in dims
    ):
        raise GridDimensionError(
            "dims", "must be a non-empty sequence of positive integers"
        )
    return tuple(int(dim) for dim in dims)


class RegularGrid(Domain):
    """A regular grid with lower left corner at origin and constant spacing.

    Attributes:
        dims (tuple[int, ...]): number of locations along each axis
        origin (tuple): coordinates of the first location
        spacing (tuple): distance between consecutive locations along each axis

    Examples:
        A 3D grid with 100x100x50 locations::

            RegularGrid((100, 100, 50))

        A 2D grid with origin at (10., 20.)::

            RegularGrid((100, 100), origin=(10.0, 20.0), spacing=(1.0, 1.0))

        A 1D grid from -1 to 1 with 100 locations::

            RegularGrid.from_corners((-1.0,), (1.0,), dims=(100,))
    """

    def __init__(
        self,
        dims: Sequence[int],
        origin: Sequence[float] | None = None,
        spacing: Sequence[float] | None = None,
        dtype=None,
    ) -> None:
        """Initialise a regular grid.

        Args:
            dims: number of locations along each axis
            origin: coordinates of the first location, defaults to zeros
            spacing: distance between locations along each axis, defaults to ones
            dtype: coordinate type, defaults to the common type of origin and
                spacing (float64 when neither is given)

        Raises:
            GridDimensionError: if dims or spacing are not positive, or if the
                lengths of dims, origin and spacing disagree
            CoordinateTypeError: if dtype is not a real numeric type
        """
        self._dims = _validate_dims(dims)
        ndims = len(self._dims)

        given = [np.asarray(v) for v in (origin, spacing) if v is not None]
        if dtype is None:
            dtype = np.result_type(*given) if given else np.float64
        dtype = np.dtype(dtype)
        if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
            raise CoordinateTypeError("dtype", f"{dtype} is not a real numeric type")
        self._dtype = dtype

        self._origin = (
            np.zeros(ndims, dtype=dtype)
            if origin is None
            else np.array(origin, dtype=dtype)
        )
        self._spacing = (
            np.ones(ndims, dtype=dtype)
            if spacing is None
            else np.array(spacing, dtype=dtype)
        )
        self._validate_parameters()
        self._origin.flags.writeable = False
        self._spacing.flags.writeable = False
        self._upper = self._origin + (np.asarray(self._dims) - 1) * self._spacing
        self._upper.flags.writeable = False

    @classmethod
    def from_corners(
        cls,
        start: Sequence[float],
        finish: Sequence[float],
        dims: Sequence[int] | None = None,
    ) -> RegularGrid:
        """Create a grid spanning start (lower left) to finish (upper right).

        Args:
            start: coordinates of the first location
            finish: coordinates of the last location
            dims: number of locations along each axis, 100 per axis by default

        Raises:
            GridDimensionError: if start, finish and dims disagree in length, if a
                dim is smaller than 2, or if finish does not lie above start
        """
        start = np.asarray(start)
        finish = np.asarray(finish)
        if start.ndim != 1 or start.shape != finish.shape:
            raise GridDimensionError(
                f"start {tuple(start.tolist())} and finish {tuple(finish.tolist())} "
                "must be sequences of equal length"
            )
        if dims is None:
            dims = (DEFAULT_DIMS,) * len(start)
        dims = _validate_dims(dims)
        if len(dims) != len(start):
            raise GridDimensionError(
                "dims", f"expected {len(start)} values, got {len(dims)}"
            )
        if any(dim < 2 for dim in dims):
            raise GridDimensionError(
                "dims", "must be at least 2 along every axis to span start to finish"
            )

        dtype = np.result_type(start, finish)
        if not np.issubdtype(dtype, np.floating):
            dtype = np.dtype(np.float64)
        spacing = ((finish - start) / (np.asarray(dims) - 1)).astype(dtype)
        grid = cls(dims, origin=start, spacing=spacing, dtype=dtype)
        # keep the requested corner exactly; origin + (dims - 1) * spacing can
        # miss it by a few ulps
        grid._upper = finish.astype(dtype)
        grid._upper.flags.writeable = False
        return grid

    @classmethod
    def from_extent(
        cls,
        extent: Sequence[tuple[float, float]],
        dims: Sequence[int] | None = None,
    ) -> RegularGrid:
        """Create a grid from a sequence of (lower, upper) pairs, one per axis."""
        lower = [bounds[0] for bounds in extent]
        upper = [bounds[1] for bounds in extent]
        return cls.from_corners(lower, upper, dims=dims)

    def _validate_parameters(self):
        ndims = len(self._dims)
        if self._origin.shape != (ndims,):
            raise GridDimensionError(
                "origin", f"expected {ndims} values, got shape {self._origin.shape}"
            )
        if self._spacing.shape != (ndims,):
            raise GridDimensionError(
                "spacing", f"expected {ndims} values, got shape {self._spacing.shape}"
            )
        if not np.all(self._spacing > 0):
            raise GridDimensionError("spacing", "must be positive along every axis")

    @property
    def size(self) -> tuple[int, ...]:
        """Return the grid dimensions."""
        return self._dims

    @property
    def dims(self) -> tuple[int, ...]:
        """Convenience alias for size."""
        return self._dims

    @property
    def ndims(self) -> int:
        """Return the number of spatial dimensions."""
        return len(self._dims)

    @property
    def coordtype(self) -> np.dtype:
        """Return the coordinate element type."""
        return self._dtype

    @property
    def origin(self) -> tuple:
        """Return the coordinates of the first location."""
        return tuple(self._origin.tolist())

    @property
    def spacing(self) -> tuple:
        """Return the spacing along each axis."""
        return tuple(self._spacing.tolist())

    def coordinates_into(self, buffer: np.ndarray, location: int) -> np.ndarray:
        """Write the coordinates of location into buffer and return it."""
        location = self._check_location(location)
        index = np.unravel_index(location - 1, self._dims, order="F")
        buffer[:] = self._origin + np.asarray(index) * self._spacing
        return buffer

    def _coordinate_matrix(self) -> np.ndarray:
        indices = np.unravel_index(np.arange(self.npoints), self._dims, order="F")
        matrix = (
            self._origin[:, np.newaxis]
            + np.stack(indices) * self._spacing[:, np.newaxis]
        )
        return matrix.astype(self._dtype, copy=False)

    def extent(self) -> tuple[tuple, ...]:
        """Return (lower, upper) coordinate bounds along each axis.

        For grids built with ``from_corners`` or ``from_extent`` the bounds are the
        given corners.
        """
        return tuple(zip(self._origin.tolist(), self._upper.tolist()))

    def nearest_location(self, coords: Sequence[float]) -> int:
        """Return the location closest to coords.

        The per-axis index is rounded (half to even) and clamped to the grid, so
        coordinates outside the grid map to the nearest boundary location instead
        of failing.

        Args:
            coords: coordinates of length ``ndims``

        Returns:
            int: 1-based location index

        Raises:
            ValueError: if coords does not have ``ndims`` entries, or if any of
                them is NaN or infinite
        """
        coords = np.asarray(coords)
        if coords.shape != (self.ndims,):
            raise ValueError(
                f"Coordinates {coords} do not match grid with {self.ndims} dimensions."
            )
        if not np.all(np.isfinite(coords)):
            raise ValueError(f"Coordinates {coords} must be finite.")
        units = np.rint((coords - self._origin) / self._spacing)
        index = np.clip(units, 0, np.asarray(self._dims) - 1).astype(np.int64)
        return int(np.ravel_multi_index(tuple(index), self._dims, order="F")) + 1

    def __repr__(self) -> str:  # noqa: D105
        return (
            f"RegularGrid(dims={self.dims}, origin={self.origin}, "
            f"spacing={self.spacing})"
        )
