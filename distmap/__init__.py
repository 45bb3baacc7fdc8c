"""
Chamfer distance maps of binary images.

This package computes 5x5 chamfer distance maps: each foreground pixel of a
binary mask receives the weighted distance to the nearest background pixel,
using orthogonal, diagonal and chess-knight moves.
"""

from .core.distance_transform import DistanceMapResult, DistanceTransform5x5, compute_distance_map
from .weights import ChamferPreset, ChamferWeights
from .progress import LoggingProgressSink, NullProgressSink, ProgressSink
from .errors import (DistanceMapError, InvalidDimensionsError, OverflowRiskError,
                     InvalidWeightsError, ConfigError)

__version__ = "0.1.0"
