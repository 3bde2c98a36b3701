"""Distance metrics over coordinate vectors.

Neighborhoods and partitioners accept any callable ``metric(x, y) -> float`` that
is non-negative, symmetric and satisfies the triangle inequality. The Minkowski
family defined here additionally exposes its order ``p``, which lets a
neighborhood index the domain with a k-d tree instead of a generic ball tree.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from numpy.typing import ArrayLike
from scipy.spatial import distance


class Metric(ABC):
    """Base class for distance metrics."""

    @abstractmethod
    def __call__(self, x: ArrayLike, y: ArrayLike) -> float:
        """Return the distance between x and y."""

    def evaluate(self, x: ArrayLike, y: ArrayLike) -> float:
        """Return the distance between x and y."""
        return self(x, y)

    def __eq__(self, other) -> bool:  # noqa: D105
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:  # noqa: D105
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self) -> str:  # noqa: D105
        return f"{type(self).__name__}()"


class Minkowski(Metric):
    """Minkowski distance of order p."""

    def __init__(self, p: float) -> None:
        """Create a Minkowski metric.

        Args:
            p: the order of the norm, at least 1 (``math.inf`` gives Chebyshev)

        Raises:
            ValueError: if p is smaller than 1, which is not a metric
        """
        if p < 1:
            raise ValueError(f"Minkowski order must be at least 1, got {p}")
        self.p = p

    def __call__(self, x: ArrayLike, y: ArrayLike) -> float:  # noqa: D102
        return float(distance.minkowski(x, y, p=self.p))

    def __repr__(self) -> str:  # noqa: D105
        return f"Minkowski(p={self.p})"


class Euclidean(Minkowski):
    """Straight-line distance."""

    def __init__(self) -> None:  # noqa: D107
        super().__init__(p=2)

    def __call__(self, x: ArrayLike, y: ArrayLike) -> float:  # noqa: D102
        return float(distance.euclidean(x, y))

    def __repr__(self) -> str:  # noqa: D105
        return "Euclidean()"


class Cityblock(Minkowski):
    """Manhattan distance, the sum of absolute coordinate differences."""

    def __init__(self) -> None:  # noqa: D107
        super().__init__(p=1)

    def __call__(self, x: ArrayLike, y: ArrayLike) -> float:  # noqa: D102
        return float(distance.cityblock(x, y))

    def __repr__(self) -> str:  # noqa: D105
        return "Cityblock()"


class Chebyshev(Minkowski):
    """Maximum absolute coordinate difference."""

    def __init__(self) -> None:  # noqa: D107
        super().__init__(p=math.inf)

    def __call__(self, x: ArrayLike, y: ArrayLike) -> float:  # noqa: D102
        return float(distance.chebyshev(x, y))

    def __repr__(self) -> str:  # noqa: D105
        return "Chebyshev()"
