"""
Neighbor templates of the 5x5 chamfer mask.

The full 5x5 mask is split into a causal half, read by the forward scan, and
an anti-causal half, read by the backward scan. Offsets are (dx, dy) pairs
relative to the current pixel, with x growing to the right and y growing
downwards, tagged with the weight class of the move.

Pixels within two rows or columns of a grid edge only see a truncated
template. Which offsets are present depends only on the position class of the
pixel, i.e. its distance to each of the four edges clamped to 2, so the
truncated templates are tabulated once per class.
"""

from functools import lru_cache
from typing import Dict, List, NamedTuple, Tuple

ORTHO = 0
DIAGONAL = 1
KNIGHT = 2

WEIGHT_CLASS_NAMES = {ORTHO: "ortho", DIAGONAL: "diagonal", KNIGHT: "knight"}

# Reach of the mask in every direction
MASK_RADIUS = 2


class Offset(NamedTuple):
    dx: int
    dy: int
    weight_class: int


# Neighbors already visited in a top-to-bottom, left-to-right scan
FORWARD_TEMPLATE: Tuple[Offset, ...] = (
    Offset(-1, 0, ORTHO),
    Offset(0, -1, ORTHO),
    Offset(-1, -1, DIAGONAL),
    Offset(1, -1, DIAGONAL),
    Offset(-2, -1, KNIGHT),
    Offset(2, -1, KNIGHT),
    Offset(-1, -2, KNIGHT),
    Offset(1, -2, KNIGHT),
)

# Mirror image, for the bottom-to-top, right-to-left scan
BACKWARD_TEMPLATE: Tuple[Offset, ...] = tuple(
    Offset(-o.dx, -o.dy, o.weight_class) for o in FORWARD_TEMPLATE
)


class PositionClass(NamedTuple):
    """Distances of a pixel to the left, right, top and bottom edges, clamped."""

    left: int
    right: int
    top: int
    bottom: int


def position_class(x: int, y: int, width: int, height: int) -> PositionClass:
    """Return the position class of pixel (x, y) in a width x height grid."""
    return PositionClass(
        min(x, MASK_RADIUS),
        min(width - 1 - x, MASK_RADIUS),
        min(y, MASK_RADIUS),
        min(height - 1 - y, MASK_RADIUS),
    )


def is_present(offset: Offset, pos: PositionClass) -> bool:
    """Check whether the neighbor at `offset` lies inside the grid."""
    if offset.dx < 0 and -offset.dx > pos.left:
        return False
    if offset.dx > 0 and offset.dx > pos.right:
        return False
    if offset.dy < 0 and -offset.dy > pos.top:
        return False
    if offset.dy > 0 and offset.dy > pos.bottom:
        return False
    return True


@lru_cache(maxsize=None)
def offsets_for_class(template: Tuple[Offset, ...], pos: PositionClass) -> Tuple[Offset, ...]:
    """Truncated template for one position class."""
    return tuple(o for o in template if is_present(o, pos))


def neighbor_offsets(
    template: Tuple[Offset, ...], x: int, y: int, width: int, height: int
) -> Tuple[Offset, ...]:
    """
    Offsets of `template` that exist for pixel (x, y).

    Args:
        template: FORWARD_TEMPLATE or BACKWARD_TEMPLATE
        x: Column of the pixel
        y: Row of the pixel
        width: Grid width
        height: Grid height

    Returns:
        Tuple of the offsets whose neighbor lies inside the grid
    """
    return offsets_for_class(template, position_class(x, y, width, height))


def build_offset_table(
    template: Tuple[Offset, ...], width: int, height: int
) -> Dict[PositionClass, Tuple[Offset, ...]]:
    """Table of the truncated templates for every position class of a grid."""
    xs = _class_coordinates(width)
    ys = _class_coordinates(height)
    table = {}
    for y in ys:
        for x in xs:
            pos = position_class(x, y, width, height)
            table[pos] = offsets_for_class(template, pos)
    return table


def _class_coordinates(size: int) -> List[int]:
    # Near-edge coordinates and one interior coordinate cover every class
    coords = set(range(min(size, MASK_RADIUS + 1)))
    coords.update(range(max(0, size - MASK_RADIUS - 1), size))
    return sorted(coords)


def column_range(dx: int, width: int) -> Tuple[int, int]:
    """
    Columns of a row for which the horizontal part of an offset is present.

    Returns:
        (start, stop) half-open range, empty when start >= stop
    """
    return max(0, -dx), min(width, width - dx)


def row_offsets(template: Tuple[Offset, ...], y: int, height: int) -> List[Offset]:
    """
    Offsets of `template` whose source row exists for row y.

    Column truncation of these offsets is given by `column_range`; together
    they select exactly the offsets of `neighbor_offsets` for each pixel.
    """
    top = min(y, MASK_RADIUS)
    bottom = min(height - 1 - y, MASK_RADIUS)
    pos = PositionClass(MASK_RADIUS, MASK_RADIUS, top, bottom)
    return list(offsets_for_class(template, pos))
