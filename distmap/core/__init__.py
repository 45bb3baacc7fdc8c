"""Core functionality for distmap package."""

from .distance_transform import DistanceTransform5x5, compute_distance_map

__all__ = ["DistanceTransform5x5", "compute_distance_map"]
