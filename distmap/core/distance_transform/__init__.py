"""
Chamfer distance transform of binary images with a 5x5 mask.

This module computes, for each foreground pixel of a binary image, an integer
approximation of the Euclidean distance to the nearest background pixel,
using two raster scans with orthogonal, diagonal and chess-knight weights.
"""

from distmap.core.distance_transform.transform import (
    DEFAULT_MASK_LABEL,
    DistanceMapResult,
    DistanceTransform5x5,
    backward_scan,
    check_overflow,
    compute_distance_map,
    finalize,
    foreground_mask,
    forward_scan,
    initialize_buffer,
)

from distmap.core.distance_transform.buffer import DistanceBuffer, SENTINEL

from distmap.core.distance_transform.templates import (
    BACKWARD_TEMPLATE,
    FORWARD_TEMPLATE,
    DIAGONAL,
    KNIGHT,
    ORTHO,
    Offset,
    PositionClass,
    build_offset_table,
    neighbor_offsets,
    position_class,
)
