"""Traversal orders over the locations of a domain.

A path is a restartable sequence that visits every location of a domain exactly
once. Iterative algorithms (sequential simulation, for example) walk a path and do
their per-location work in that order. Paths only depend on the number of
locations, never on coordinates, and never modify the domain.

Available paths:
- SimplePath: 1, 2, ..., npoints
- RandomPath: a fixed random permutation, drawn once at construction
- SourcePath: seed locations first, then everything else
- ShiftedPath: another path rotated left by an offset

All parameters are validated at construction; iteration itself never fails.
"""

from __future__ import annotations

import operator
import warnings
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import Generic, TypeVar

import numpy as np

from geostats.domains import Domain
from geostats.errors import InvalidSourceError, PathError
from geostats.geostats_logging import create_module_logger

D = TypeVar("D", bound=Domain)

SeedLike = int | np.integer | Sequence[int] | np.random.SeedSequence
RNGLike = np.random.Generator | np.random.BitGenerator

_geostats_logger = create_module_logger()


class Path(ABC, Generic[D]):
    """Base class for paths over a domain.

    Attributes:
        domain (Domain): the domain whose locations are visited
    """

    def __init__(self, domain: D) -> None:
        """Initialise the path.

        Args:
            domain: the domain whose locations are visited
        """
        self.domain = domain

    @abstractmethod
    def __iter__(self) -> Iterator[int]:
        """Yield every 1-based location of the domain exactly once."""

    def __len__(self) -> int:  # noqa: D105
        return self.domain.npoints

    def __repr__(self) -> str:  # noqa: D105
        return f"{type(self).__name__}({self.domain!s})"


class SimplePath(Path[Domain]):
    """Visit locations in index order."""

    def __iter__(self) -> Iterator[int]:  # noqa: D105
        return iter(range(1, len(self) + 1))


class RandomPath(Path[Domain]):
    """Visit locations in a random order that is fixed at construction.

    Iterating the path again replays the same permutation.

    Notes:
        A `UserWarning` is issued if `rng=None`. Pass a seed or a seeded
        numpy Generator to make the permutation reproducible.
    """

    def __init__(self, domain: Domain, rng: RNGLike | SeedLike | None = None) -> None:
        """Create a random path and draw its permutation.

        Args:
            domain: the domain whose locations are visited
            rng: a numpy Generator, or anything ``numpy.random.default_rng`` accepts
        """
        super().__init__(domain)
        if rng is None:
            warnings.warn(
                "Random number generator not specified, this can make paths non-reproducible. Please pass a random number generator explicitly",
                UserWarning,
                stacklevel=2,
            )
        self.rng: np.random.Generator = np.random.default_rng(rng)
        self._permutation = self.rng.permutation(len(self)) + 1
        self._permutation.flags.writeable = False
        _geostats_logger.debug(f"drew permutation of {len(self)} locations")

    @property
    def permutation(self) -> np.ndarray:
        """Return the (read-only) order in which locations are visited."""
        return self._permutation

    def __iter__(self) -> Iterator[int]:  # noqa: D105
        for location in self._permutation:
            yield int(location)


class SourcePath(Path[Domain]):
    """Visit seed locations first, then the remaining locations.

    Attributes:
        sources (tuple[int, ...]): deduplicated seeds in the given order
        secondary (Path | None): order of the remaining locations, ascending if None

    Examples:
        Seeds [5, 2] on a domain with 6 locations give 5, 2, 1, 3, 4, 6.
    """

    def __init__(
        self,
        domain: Domain,
        sources: Iterable[int],
        secondary: Path | None = None,
    ) -> None:
        """Create a source path.

        Args:
            domain: the domain whose locations are visited
            sources: seed locations, visited first in the given order. Repeated
                seeds are visited once, at their first position.
            secondary: path giving the order of the non-seed locations

        Raises:
            InvalidSourceError: if a seed is outside [1, npoints]
            PathError: if secondary covers a different number of locations
        """
        super().__init__(domain)
        sources = [operator.index(source) for source in sources]
        invalid = [source for source in sources if not 1 <= source <= len(self)]
        if invalid:
            raise InvalidSourceError(invalid, len(self))
        if secondary is not None and len(secondary) != len(self):
            raise PathError(
                "secondary",
                f"visits {len(secondary)} locations, expected {len(self)}",
            )

        self.sources = tuple(dict.fromkeys(sources))
        self.secondary = secondary
        self._source_set = frozenset(self.sources)

    def __iter__(self) -> Iterator[int]:  # noqa: D105
        yield from self.sources
        remainder = (
            range(1, len(self) + 1) if self.secondary is None else self.secondary
        )
        for location in remainder:
            if location not in self._source_set:
                yield location


class ShiftedPath(Path[Domain]):
    """Another path rotated left by an offset.

    The first ``offset`` locations of the underlying path are moved, in order, to
    the end. Offsets beyond the path length wrap around.

    Attributes:
        path (Path): the underlying path
        offset (int): the effective rotation, in [0, len(path))
    """

    def __init__(self, path: Path, offset: int) -> None:
        """Create a shifted path.

        Args:
            path: the underlying path
            offset: number of leading locations moved to the end

        Raises:
            PathError: if offset is negative
        """
        offset = operator.index(offset)
        if offset < 0:
            raise PathError("offset", f"must be non-negative, got {offset}")
        super().__init__(path.domain)
        self.path = path
        self.offset = offset % len(path) if len(path) else 0

    def __len__(self) -> int:  # noqa: D105
        return len(self.path)

    def __iter__(self) -> Iterator[int]:  # noqa: D105
        locations = iter(self.path)
        head = list(islice(locations, self.offset))
        yield from locations
        yield from head
