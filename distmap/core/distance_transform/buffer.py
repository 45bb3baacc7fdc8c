"""
Distance buffer updated in place by the chamfer scans.
"""

import numpy as np

# "Not yet reached" marker, the largest value representable in the result
SENTINEL = int(np.iinfo(np.uint16).max)

RESULT_DTYPE = np.uint16


class DistanceBuffer:
    """
    Mutable grid of non-negative integer distances.

    Values are stored with a wide integer type so that adding a weight to the
    sentinel never wraps around. Values only ever decrease: `update` and
    `update_row` are the only ways the scans modify the buffer.

    Attributes:
        values: Array of shape (height, width) with the current distances
    """

    def __init__(self, height: int, width: int):
        self.values = np.zeros((height, width), dtype=np.int64)

    @classmethod
    def from_foreground(cls, foreground: np.ndarray) -> "DistanceBuffer":
        """Background cells start at 0, foreground cells at SENTINEL."""
        buffer = cls(*foreground.shape)
        buffer.values[foreground] = SENTINEL
        return buffer

    @property
    def height(self) -> int:
        return self.values.shape[0]

    @property
    def width(self) -> int:
        return self.values.shape[1]

    def get(self, x: int, y: int) -> int:
        return int(self.values[y, x])

    def update(self, x: int, y: int, candidate: int) -> bool:
        """
        Store `candidate` at (x, y) if it is smaller than the current value.

        Returns:
            True if the cell was modified
        """
        if candidate < self.values[y, x]:
            self.values[y, x] = candidate
            return True
        return False

    def update_row(self, y: int, candidates: np.ndarray, where: np.ndarray) -> None:
        """
        Apply the update rule to the cells of row y selected by `where`.

        Args:
            y: Row index
            candidates: Candidate values for every column of the row
            where: Boolean array selecting the columns to update
        """
        row = self.values[y]
        np.minimum(row, candidates, out=row, where=where)

    def copy(self) -> np.ndarray:
        return self.values.copy()

    def to_result(self) -> np.ndarray:
        """Distances as an unsigned 16 bit array."""
        return np.clip(self.values, 0, SENTINEL).astype(RESULT_DTYPE)
