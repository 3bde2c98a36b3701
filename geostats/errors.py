import geostats


class GeoStatsError(Exception):
    """Base class for all geostats-specific exceptions.
    It automatically prepends the geostats version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.geostats_version = getattr(geostats, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        full_message = f"[geostats {self.geostats_version}] {message}"
        super().__init__(full_message)


# Construction Errors
class ConstructionError(GeoStatsError):
    """Raised when an object is built from invalid or inconsistent parameters."""

    def __init__(self, param_name: str = None, reason: str = None):
        # Allow flexible usage: raise ConstructionError("Generic message")
        # OR: raise ConstructionError("spacing", "must be positive")
        if param_name and reason:
            message = f"Invalid value for '{param_name}': {reason}"
            self.param_name = param_name
        else:
            message = param_name if param_name else "Invalid construction parameters"
            self.param_name = None

        super().__init__(message)


class GridDimensionError(ConstructionError):
    """Raised when grid dimensions or spacing are invalid.
    Examples: non-positive dims, non-positive spacing, or origin/spacing
    sequences whose length differs from dims.
    """


class CoordinateShapeError(ConstructionError):
    """Raised when coordinate arrays passed to a domain do not share one shape."""


class CoordinateTypeError(ConstructionError):
    """Raised when a value's element type does not match the domain coordinate type."""


class RadiusError(ConstructionError):
    """Raised when a neighborhood or partitioner radius is not positive."""


class EmptyDomainError(ConstructionError):
    """Raised when an operation needs at least one location but the source is empty."""


class DataShapeError(ConstructionError):
    """Raised when data arrays disagree with the domain they are attached to."""


# Path Errors
class PathError(ConstructionError):
    """Raised when a path is constructed with invalid parameters."""


class InvalidSourceError(PathError):
    """Raised when SourcePath seeds fall outside the domain."""

    def __init__(self, sources, npoints):
        self.sources = sources
        self.npoints = npoints
        message = f"Source locations {sources} are outside the valid range [1, {npoints}]."
        super().__init__(message)


# Lookup Errors
class LocationOutOfRangeError(GeoStatsError):
    """Raised when a location index falls outside [1, npoints]."""

    def __init__(self, location, npoints):
        self.location = location
        self.npoints = npoints
        message = f"Location {location} is out of range for a domain with {npoints} points."
        super().__init__(message)
