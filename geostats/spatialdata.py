"""Named data arrays georeferenced on a spatial domain.

SpatialData pairs a mapping of variable names to numpy arrays with a domain. The
container only checks that the arrays agree with the domain:
- every array has one value per location
- on grid domains, every array has exactly the grid shape

Arrays are read in the domain's location order, with the first dimension varying
fastest, so ``data.values(name)[location - 1]`` is the value at ``location``.

Convenience constructors build the domain from the usual inputs:
- PointSetData: a coordinate matrix or a list of points
- RegularGridData: origin and spacing (or an extent) for arrays shaped like the grid
- StructuredGridData: one coordinate array per axis
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np
from numpy.typing import ArrayLike

from geostats.domains import Domain, PointSet, RegularGrid, StructuredGrid
from geostats.errors import DataShapeError


class SpatialData:
    """A mapping of variable names to arrays, georeferenced by a domain.

    Attributes:
        domain (Domain): the domain owning the locations
        data (dict[str, np.ndarray]): the variables, in insertion order
    """

    def __init__(self, data: Mapping[str, ArrayLike], domain: Domain) -> None:
        """Attach data to a domain.

        Args:
            data: mapping of variable name to array
            domain: the domain the values belong to

        Raises:
            DataShapeError: if an array does not have one value per location, or
                does not have the grid shape on a grid domain
        """
        self.domain = domain
        self.data: dict[str, np.ndarray] = {
            name: np.asarray(array) for name, array in data.items()
        }
        self._validate_data()

    def _validate_data(self):
        is_grid = isinstance(self.domain, RegularGrid | StructuredGrid)
        for name, array in self.data.items():
            if array.size != self.domain.npoints:
                raise DataShapeError(
                    name,
                    f"has {array.size} values but the domain has {self.domain.npoints} points",
                )
            if is_grid and array.shape != self.domain.size:
                raise DataShapeError(
                    name,
                    f"shape {array.shape} does not match grid dimensions {self.domain.size}",
                )

    @property
    def size(self) -> tuple[int, ...]:
        """Return the size of the domain."""
        return self.domain.size

    @property
    def npoints(self) -> int:
        """Return the number of locations."""
        return self.domain.npoints

    @property
    def ndims(self) -> int:
        """Return the number of spatial dimensions."""
        return self.domain.ndims

    @property
    def coordtype(self) -> np.dtype:
        """Return the coordinate element type."""
        return self.domain.coordtype

    @property
    def variables(self) -> dict[str, np.dtype]:
        """Return the variable names with their element types."""
        return {name: array.dtype for name, array in self.data.items()}

    def coordinates(self, location: int | None = None) -> np.ndarray:
        """Return coordinates of one location, or of all locations."""
        return self.domain.coordinates(location)

    def coordinates_into(self, buffer: np.ndarray, location: int) -> np.ndarray:
        """Write the coordinates of location into buffer and return it."""
        return self.domain.coordinates_into(buffer, location)

    def values(self, name: str) -> np.ndarray:
        """Return the values of a variable in location order."""
        return self.data[name].ravel(order="F")

    def __getitem__(self, name: str) -> np.ndarray:
        """Return the values of a variable shaped like the domain."""
        return self.values(name).reshape(self.size, order="F")

    def __contains__(self, name: str) -> bool:  # noqa: D105
        return name in self.data

    def __str__(self) -> str:  # noqa: D105
        dims = "×".join(str(d) for d in self.size)
        return f"{dims} {type(self).__name__}{{{self.coordtype},{self.ndims}}}"

    def __repr__(self) -> str:  # noqa: D105
        return f"{type(self).__name__}(variables={list(self.data)}, domain={self.domain!r})"


def _common_shape(data: Mapping[str, ArrayLike]) -> tuple[int, ...]:
    shapes = {np.shape(array) for array in data.values()}
    if not shapes:
        raise DataShapeError("data", "at least one variable is required to infer the grid")
    if len(shapes) != 1:
        raise DataShapeError(
            "data", f"dimensions must be the same for all variables, got {sorted(shapes)}"
        )
    return shapes.pop()


class PointSetData(SpatialData):
    """Data georeferenced by an unstructured set of points."""

    def __init__(
        self,
        data: Mapping[str, ArrayLike],
        coords: np.ndarray | Sequence[Sequence[float]],
    ) -> None:
        """Attach data to a point set.

        Args:
            data: mapping of variable name to array with one value per point
            coords: N x npoints matrix or sequence of N-tuples
        """
        super().__init__(data, PointSet(coords))


class RegularGridData(SpatialData):
    """Regularly spaced data georeferenced by an origin and a spacing.

    The grid dimensions are taken from the shape of the arrays.

    Examples:
        Porosity and permeability arrays on a 3D grid::

            RegularGridData({"porosity": poro, "permeability": perm}, (0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
    """

    def __init__(
        self,
        data: Mapping[str, ArrayLike],
        origin: Sequence[float] | None = None,
        spacing: Sequence[float] | None = None,
        dtype=None,
    ) -> None:
        """Attach data to a regular grid shaped like the arrays.

        Args:
            data: mapping of variable name to array, all arrays with one shape
            origin: coordinates of the first location, zeros by default
            spacing: spacing along each axis, ones by default
            dtype: coordinate type of the grid

        Raises:
            DataShapeError: if the arrays differ in shape or their rank does not
                match the length of origin or spacing
        """
        dims = _common_shape(data)
        for name, value in (("origin", origin), ("spacing", spacing)):
            if value is not None and len(value) != len(dims):
                raise DataShapeError(
                    name,
                    f"has {len(value)} values but the data has {len(dims)} dimensions",
                )
        super().__init__(data, RegularGrid(dims, origin, spacing, dtype=dtype))

    @classmethod
    def from_extent(
        cls,
        data: Mapping[str, ArrayLike],
        extent: Sequence[tuple[float, float]],
    ) -> RegularGridData:
        """Attach data to a grid spanning extent, a (lower, upper) pair per axis."""
        grid = RegularGrid.from_extent(extent, dims=_common_shape(data))
        return cls(data, grid.origin, grid.spacing, dtype=grid.coordtype)

    @property
    def origin(self) -> tuple:
        """Return the grid origin."""
        return self.domain.origin

    @property
    def spacing(self) -> tuple:
        """Return the grid spacing."""
        return self.domain.spacing


class StructuredGridData(SpatialData):
    """Data on a structured grid georeferenced by one coordinate array per axis.

    Examples:
        Climate variables on a LAT/LON grid, as commonly read from NetCDF::

            StructuredGridData({"precipitation": precip, "temperature": temp}, LAT, LON)
    """

    def __init__(self, data: Mapping[str, ArrayLike], *coord_arrays: ArrayLike) -> None:  # noqa: D107
        super().__init__(data, StructuredGrid(*coord_arrays))
