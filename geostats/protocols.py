"""Protocols for objects that expose georeferenced locations.

This module provides ``Georeferenced``: the structural interface shared by domains
and by spatial data attached to a domain. Helpers such as
:func:`geostats.utils.boundgrid` accept anything that satisfies it, regardless of
class hierarchy.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Georeferenced(Protocol):
    """Protocol for any object whose locations have coordinates.

    Examples:
        Runtime checking::

            from geostats.domains import RegularGrid
            from geostats.protocols import Georeferenced

            assert isinstance(RegularGrid((10, 10)), Georeferenced)

    """

    @property
    def npoints(self) -> int:
        """The number of locations."""
        ...

    @property
    def ndims(self) -> int:
        """The number of spatial dimensions."""
        ...

    def coordinates(self, location: int | None = None) -> np.ndarray:
        """Coordinates of one location, or the N x npoints matrix of all of them."""
        ...
