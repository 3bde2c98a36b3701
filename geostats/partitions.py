"""Pairwise predicates used to group locations into partitions.

A spatial function partitioner decides, for two coordinate vectors, whether they
belong to the same group. The partitioning schemes that apply these predicates
live elsewhere; this module only provides the predicates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from numpy.typing import ArrayLike

from geostats.errors import RadiusError
from geostats.metrics import Euclidean


class SpatialFunctionPartitioner(ABC):
    """Base class for partitioners defined by a pairwise predicate."""

    @abstractmethod
    def __call__(self, x: ArrayLike, y: ArrayLike) -> bool:
        """Return whether x and y belong to the same group."""

    def predicate(self, x: ArrayLike, y: ArrayLike) -> bool:
        """Return whether x and y belong to the same group."""
        return self(x, y)


class BallPartitioner(SpatialFunctionPartitioner):
    """Group points that are strictly closer than a radius.

    Attributes:
        radius: the grouping radius
        metric (Callable): the distance function
    """

    def __init__(
        self,
        radius: float,
        metric: Callable[[ArrayLike, ArrayLike], float] | None = None,
    ) -> None:
        """Create a ball partitioner.

        Args:
            radius: positive grouping radius
            metric: distance function, Euclidean by default

        Raises:
            RadiusError: if radius is not positive
        """
        if not radius > 0:
            raise RadiusError("radius", f"must be positive, got {radius}")
        self.radius = radius
        self.metric = Euclidean() if metric is None else metric

    def __call__(self, x: ArrayLike, y: ArrayLike) -> bool:  # noqa: D102
        return bool(self.metric(x, y) < self.radius)

    def __repr__(self) -> str:  # noqa: D105
        return f"BallPartitioner(radius={self.radius}, metric={self.metric!r})"
