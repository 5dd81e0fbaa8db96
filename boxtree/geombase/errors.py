"""Geometry errors."""


class GeometryError(Exception):
    """Base exception for geometry operations."""


class GrowthLimitError(GeometryError):
    """Box is already larger than the growth ceiling and cannot be extended."""


class RayBoxInvariantError(GeometryError):
    """Ray crosses box boundary more than twice. Means a broken box, not bad input."""
