"""Base class for spatial domains.

A Domain is a finite set of georeferenced locations. Every algorithm built on
geostats addresses locations by a 1-based integer index and asks the domain where
that location is. Domain provides the shared functionality:
- Location validation
- Coordinate lookup for a single location, with or without a caller-supplied buffer
- The full N x npoints coordinate matrix

Concrete domains (regular grids, structured grids, point sets) differ only in how
they store or compute coordinates. Linear indices map to per-axis indices with the
first dimension varying fastest.
"""

from __future__ import annotations

import math
import operator
from abc import ABC, abstractmethod

import numpy as np

from geostats.errors import LocationOutOfRangeError


class Domain(ABC):
    """Base class for all spatial domains.

    Attributes:
        size (tuple[int, ...]): the per-axis extent of the domain
        npoints (int): the number of addressable locations
        ndims (int): the number of spatial dimensions
        coordtype (np.dtype): the element type of the coordinates

    Notes:
        Domains are immutable after construction and can be read from multiple
        threads without coordination.

    """

    @property
    @abstractmethod
    def size(self) -> tuple[int, ...]:
        """Return the per-axis extent of the domain."""

    @property
    @abstractmethod
    def ndims(self) -> int:
        """Return the number of spatial dimensions."""

    @property
    @abstractmethod
    def coordtype(self) -> np.dtype:
        """Return the coordinate element type."""

    @property
    def npoints(self) -> int:
        """Return the number of locations in the domain."""
        return math.prod(self.size)

    @abstractmethod
    def coordinates_into(self, buffer: np.ndarray, location: int) -> np.ndarray:
        """Write the coordinates of location into buffer and return it.

        Args:
            buffer: array of length ``ndims`` that is filled in place
            location: 1-based location index

        Raises:
            LocationOutOfRangeError: if location is outside [1, npoints]
        """

    def coordinates(self, location: int | None = None) -> np.ndarray:
        """Return coordinates of one location, or the N x npoints matrix.

        Args:
            location: 1-based location index. If None, the coordinates of all
                locations are returned as columns of a matrix.

        Returns:
            np.ndarray: vector of length ``ndims`` or matrix of shape (ndims, npoints)
        """
        if location is None:
            return self._coordinate_matrix()
        buffer = np.empty(self.ndims, dtype=self.coordtype)
        return self.coordinates_into(buffer, location)

    def _coordinate_matrix(self) -> np.ndarray:
        matrix = np.empty((self.ndims, self.npoints), dtype=self.coordtype)
        for location in range(1, self.npoints + 1):
            self.coordinates_into(matrix[:, location - 1], location)
        return matrix

    def _check_location(self, location) -> int:
        """Return location as a python int or raise if it is out of range."""
        location = operator.index(location)
        if not 1 <= location <= self.npoints:
            raise LocationOutOfRangeError(location, self.npoints)
        return location

    def __len__(self) -> int:  # noqa: D105
        return self.npoints

    def __str__(self) -> str:  # noqa: D105
        dims = "×".join(str(d) for d in self.size)
        return f"{dims} {type(self).__name__}{{{self.coordtype},{self.ndims}}}"
