"""
Exceptions raised by the distance map computation.

All errors derive from DistanceMapError so callers can catch the whole family,
and from the matching builtin (ValueError, OverflowError) so generic handlers
keep working.
"""


class DistanceMapError(Exception):
    """Base class for all distance map errors."""


class InvalidDimensionsError(DistanceMapError, ValueError):
    """The mask is not a 2D grid with a width and height of at least 1."""


class OverflowRiskError(DistanceMapError, OverflowError):
    """Propagated distances could exceed the range of the distance buffer."""


class InvalidWeightsError(DistanceMapError, ValueError):
    """Chamfer weights are not two or three positive integers."""


class ConfigError(DistanceMapError, ValueError):
    """Malformed distance map parameters."""
