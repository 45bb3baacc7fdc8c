"""
Chamfer distance transform of binary images using a 5x5 mask.

The distance map gives, for each foreground pixel, the weighted length of the
shortest path to the nearest background pixel, using orthogonal, diagonal and
chess-knight moves. Two raster scans are enough: a forward scan (top to
bottom, left to right) with the causal half of the mask, then a backward scan
(bottom to top, right to left) with the anti-causal half.

Stages are exposed individually so the buffer can be inspected between them:

    foreground = foreground_mask(image, 255)
    buffer = initialize_buffer(foreground)
    forward_scan(buffer, foreground, weights)
    backward_scan(buffer, foreground, weights)
    max_value = finalize(buffer, foreground, weights, normalize=True)
"""

import logging
from typing import NamedTuple, Optional, Tuple, Union

import numpy as np
import torch

from distmap.core.distance_transform.buffer import DistanceBuffer, SENTINEL
from distmap.core.distance_transform.templates import (
    BACKWARD_TEMPLATE,
    FORWARD_TEMPLATE,
    Offset,
    column_range,
    row_offsets,
)
from distmap.errors import InvalidDimensionsError, OverflowRiskError
from distmap.progress import (
    PHASE_BACKWARD_SCAN,
    PHASE_FORWARD_SCAN,
    PHASE_INITIALIZATION,
    PHASE_NORMALIZATION,
    ProgressSink,
    as_sink,
)
from distmap.weights import DEFAULT_WEIGHTS, ChamferWeights, WeightsLike, as_weights

logger = logging.getLogger(__name__)

DEFAULT_MASK_LABEL = 255

MaskLike = Union[np.ndarray, torch.Tensor]


class DistanceMapResult(NamedTuple):
    """
    Output of a distance map computation.

    Attributes:
        distances: uint16 array with 0 on background and distances elsewhere
        max_value: Largest distance over the foreground, used by the caller
                   to calibrate the display range
    """

    distances: np.ndarray
    max_value: int

    def to_tensor(self) -> torch.Tensor:
        """Distances as an int32 torch tensor."""
        return torch.from_numpy(self.distances.astype(np.int32))


def foreground_mask(mask: MaskLike, foreground_label: int = DEFAULT_MASK_LABEL) -> np.ndarray:
    """
    Compute the boolean foreground of a mask image.

    Args:
        mask: 2D array or tensor. Boolean masks are used as is, otherwise
              cells equal to `foreground_label` are foreground.
        foreground_label: Value identifying foreground cells

    Returns:
        Boolean numpy array with the same shape as the mask
    """
    if isinstance(mask, torch.Tensor):
        mask = mask.detach().cpu().numpy()
    mask = np.asarray(mask)

    if mask.ndim != 2:
        raise InvalidDimensionsError(f"Expected a 2D mask, got shape {mask.shape}")
    height, width = mask.shape
    if width < 1 or height < 1:
        raise InvalidDimensionsError(f"Mask width and height must be at least 1, got {width}x{height}")

    if mask.dtype == np.bool_:
        return mask.copy()
    return mask == foreground_label


def check_overflow(width: int, height: int, weights: ChamferWeights) -> None:
    """
    Make sure no propagated distance can reach the sentinel value.

    The worst case bound is (width + height) * max(weights).
    """
    bound = (width + height) * weights.max_weight()
    if bound >= SENTINEL:
        raise OverflowRiskError(
            f"Grid of {width}x{height} with weights {weights} may produce distances up to "
            f"{bound}, which exceeds the supported maximum {SENTINEL - 1}"
        )


def initialize_buffer(foreground: np.ndarray, progress: Optional[ProgressSink] = None) -> DistanceBuffer:
    """Create the buffer: 0 on background, SENTINEL on foreground."""
    as_sink(progress).on_phase(PHASE_INITIALIZATION)
    return DistanceBuffer.from_foreground(foreground)


def forward_scan(
    buffer: DistanceBuffer,
    foreground: np.ndarray,
    weights: ChamferWeights,
    progress: Optional[ProgressSink] = None
) -> None:
    """
    Propagate distances from the top-left towards the bottom-right.

    Args:
        buffer: Distance buffer, updated in place
        foreground: Boolean foreground mask
        weights: Chamfer weights
        progress: Optional progress sink
    """
    sink = as_sink(progress)
    sink.on_phase(PHASE_FORWARD_SCAN)
    _scan(buffer, foreground, weights, FORWARD_TEMPLATE, range(buffer.height), sink)


def backward_scan(
    buffer: DistanceBuffer,
    foreground: np.ndarray,
    weights: ChamferWeights,
    progress: Optional[ProgressSink] = None
) -> None:
    """
    Propagate distances from the bottom-right towards the top-left.

    Args:
        buffer: Distance buffer, updated in place
        foreground: Boolean foreground mask
        weights: Chamfer weights
        progress: Optional progress sink
    """
    sink = as_sink(progress)
    sink.on_phase(PHASE_BACKWARD_SCAN)
    _scan(buffer, foreground, weights, BACKWARD_TEMPLATE, range(buffer.height - 1, -1, -1), sink)


def _scan(
    buffer: DistanceBuffer,
    foreground: np.ndarray,
    weights: ChamferWeights,
    template: Tuple[Offset, ...],
    rows: range,
    sink: ProgressSink
) -> None:
    """
    Single raster scan over `rows` with the given half of the mask.

    Every row only depends on rows visited before it, which are final for
    this pass, and on its own neighbor in the scan direction. Terms from
    other rows are therefore gathered for the whole row at once, then the
    in-row term is chained along the row.
    """
    values = buffer.values
    height, width = values.shape
    weight_of = (weights.ortho, weights.diagonal, weights.knight)

    for count, y in enumerate(rows, 1):
        fg_row = foreground[y]
        if fg_row.any():
            best = np.full(width, np.iinfo(np.int64).max, dtype=np.int64)
            in_row_step = 0

            for offset in row_offsets(template, y, height):
                if offset.dy == 0:
                    in_row_step = offset.dx
                    continue
                start, stop = column_range(offset.dx, width)
                if start >= stop:
                    continue
                source = values[y + offset.dy, start + offset.dx:stop + offset.dx]
                np.minimum(best[start:stop], source + weight_of[offset.weight_class],
                           out=best[start:stop])

            buffer.update_row(y, best, fg_row)
            if in_row_step and width > 1:
                buffer.update_row(y, _chain_along_row(values[y], weights.ortho, in_row_step < 0), fg_row)

        sink.on_progress(count, height)


def _chain_along_row(row: np.ndarray, weight: int, left_to_right: bool) -> np.ndarray:
    """
    Resolve v[x] = min(v[x], v[x - 1] + weight) sequentially along a row.

    The closed form is v[x] = min over k <= x of (row[k] + (x - k) * weight),
    a running minimum of row[k] - k * weight. Background cells hold 0 and can
    only lower their neighbors, so they need no special treatment.
    """
    if not left_to_right:
        return _chain_along_row(row[::-1], weight, True)[::-1]
    ramp = np.arange(row.shape[0], dtype=np.int64) * weight
    return np.minimum.accumulate(row - ramp) + ramp


def finalize(
    buffer: DistanceBuffer,
    foreground: np.ndarray,
    weights: ChamferWeights,
    normalize: bool,
    progress: Optional[ProgressSink] = None
) -> int:
    """
    Optionally normalize the buffer, and compute the maximum masked value.

    Normalization divides foreground values by the orthogonal weight, with
    truncation. Background cells stay at 0.

    Returns:
        Largest value over the foreground, 0 if there is no foreground
    """
    values = buffer.values
    if normalize:
        as_sink(progress).on_phase(PHASE_NORMALIZATION)
        values[foreground] //= weights.ortho

    if not foreground.any():
        return 0
    return int(values[foreground].max())


def compute_distance_map(
    mask: MaskLike,
    weights: WeightsLike = DEFAULT_WEIGHTS,
    normalize: bool = True,
    foreground_label: int = DEFAULT_MASK_LABEL,
    progress: Optional[ProgressSink] = None
) -> DistanceMapResult:
    """
    Compute the chamfer distance map of a binary mask.

    Args:
        mask: 2D numpy array or torch tensor
        weights: Chamfer weights, a preset, or two/three positive integers
        normalize: Divide distances by the orthogonal weight
        foreground_label: Value of foreground cells in non-boolean masks
        progress: Optional progress sink

    Returns:
        DistanceMapResult with the uint16 distance map and its maximum
        over the foreground
    """
    weights = as_weights(weights)
    foreground = foreground_mask(mask, foreground_label)
    height, width = foreground.shape
    check_overflow(width, height, weights)

    logger.debug(f"Computing {width}x{height} distance map with weights {weights}, normalize={normalize}")

    buffer = initialize_buffer(foreground, progress)
    forward_scan(buffer, foreground, weights, progress)
    backward_scan(buffer, foreground, weights, progress)
    max_value = finalize(buffer, foreground, weights, normalize, progress)

    logger.debug(f"Distance map done, max value {max_value}")
    return DistanceMapResult(buffer.to_result(), max_value)


class DistanceTransform5x5:
    """
    Reusable chamfer distance transform with a 5x5 mask.

    Attributes:
        weights: Chamfer weights (orthogonal, diagonal, knight)
        normalize: Whether results are divided by the orthogonal weight
        foreground_label: Value of foreground cells
        progress: Optional progress sink notified during computations
    """

    def __init__(
        self,
        weights: WeightsLike = DEFAULT_WEIGHTS,
        normalize: bool = True,
        foreground_label: int = DEFAULT_MASK_LABEL,
        progress: Optional[ProgressSink] = None
    ):
        self.weights = as_weights(weights)
        self.normalize = normalize
        self.foreground_label = foreground_label
        self.progress = progress

    def distance_map(self, mask: MaskLike) -> DistanceMapResult:
        """Compute the distance map of `mask`."""
        return compute_distance_map(
            mask,
            weights=self.weights,
            normalize=self.normalize,
            foreground_label=self.foreground_label,
            progress=self.progress,
        )

    def __repr__(self) -> str:
        return (f"DistanceTransform5x5(weights={tuple(self.weights)}, normalize={self.normalize}, "
                f"foreground_label={self.foreground_label})")
