"""Tests for the distance buffer and its update rule."""

import unittest
import numpy as np

from distmap.core.distance_transform.buffer import DistanceBuffer, SENTINEL


class TestDistanceBuffer(unittest.TestCase):
    """Test cases for the DistanceBuffer class."""

    def setUp(self):
        """Set up test fixtures."""
        self.foreground = np.array([
            [False, True, True],
            [True, True, False],
        ])
        self.buffer = DistanceBuffer.from_foreground(self.foreground)

    def test_initialization(self):
        """Background is 0 and foreground is the sentinel."""
        self.assertEqual(self.buffer.width, 3)
        self.assertEqual(self.buffer.height, 2)
        np.testing.assert_array_equal(self.buffer.values, [
            [0, SENTINEL, SENTINEL],
            [SENTINEL, SENTINEL, 0],
        ])

    def test_update_lowers_value(self):
        """Smaller candidates replace the current value."""
        self.assertTrue(self.buffer.update(1, 0, 12))
        self.assertEqual(self.buffer.get(1, 0), 12)

    def test_update_never_raises_value(self):
        """Larger or equal candidates are ignored."""
        self.buffer.update(1, 0, 12)
        self.assertFalse(self.buffer.update(1, 0, 12))
        self.assertFalse(self.buffer.update(1, 0, 20))
        self.assertEqual(self.buffer.get(1, 0), 12)

        # Background cells cannot go above 0
        self.assertFalse(self.buffer.update(0, 0, 5))
        self.assertEqual(self.buffer.get(0, 0), 0)

    def test_update_row(self):
        """Row updates apply the same rule to the selected cells only."""
        candidates = np.array([3, 7, SENTINEL + 11], dtype=np.int64)
        self.buffer.update_row(0, candidates, self.foreground[0])
        np.testing.assert_array_equal(self.buffer.values[0], [0, 7, SENTINEL])

        where = np.array([True, False, True])
        self.buffer.update_row(1, np.array([4, 1, 9]), where)
        np.testing.assert_array_equal(self.buffer.values[1], [4, SENTINEL, 0])

    def test_to_result(self):
        """Results are unsigned 16 bit."""
        result = self.buffer.to_result()
        self.assertEqual(result.dtype, np.uint16)
        self.assertEqual(int(result.max()), SENTINEL)


if __name__ == '__main__':
    unittest.main()
