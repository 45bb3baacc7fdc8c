"""Tests for the compute_distance_map command line script."""

import json
import os
import shutil
import tempfile
import unittest

import matplotlib
matplotlib.use('Agg')
import numpy as np
from PIL import Image

import compute_distance_map as cli
from distmap import compute_distance_map


class TestCommandLine(unittest.TestCase):
    """Test cases for the command line entry point."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.mask = np.zeros((12, 10), dtype=np.uint8)
        self.mask[2:10, 1:9] = 255
        self.mask_path = self.path("mask.png")
        Image.fromarray(self.mask).save(self.mask_path)

    def tearDown(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def path(self, name):
        return os.path.join(self.temp_dir, name)

    def test_default_run(self):
        """Default parameters give the normalized chess-knight distance map."""
        output = self.path("out.npy")
        self.assertEqual(cli.main([self.mask_path, output]), 0)

        expected = compute_distance_map(self.mask).distances
        np.testing.assert_array_equal(np.load(output), expected)

    def test_params_file(self):
        """JSON parameters are applied."""
        params = self.path("params.json")
        with open(params, 'w') as f:
            json.dump({"weights": "BORGEFORS", "normalize": False}, f)

        output = self.path("out.npy")
        self.assertEqual(cli.main([self.mask_path, output, "--params", params]), 0)

        expected = compute_distance_map(self.mask, (3, 4), normalize=False).distances
        np.testing.assert_array_equal(np.load(output), expected)

    def test_flags_override_params(self):
        """Command line flags take precedence over the parameter file."""
        params = self.path("params.json")
        with open(params, 'w') as f:
            json.dump({"weights": [3, 4], "normalize": True}, f)

        output = self.path("out.npy")
        argv = [self.mask_path, output, "--params", params, "--weights", "5", "7", "11", "--no-normalize"]
        self.assertEqual(cli.main(argv), 0)

        expected = compute_distance_map(self.mask, (5, 7, 11), normalize=False).distances
        np.testing.assert_array_equal(np.load(output), expected)

    def test_image_output_and_preview(self):
        """Outputs can be 16 bit images, with an optional preview."""
        output = self.path("out.png")
        preview = self.path("preview.png")
        self.assertEqual(cli.main([self.mask_path, output, "--preset", "CHESSBOARD", "--preview", preview]), 0)

        with Image.open(output) as img:
            distances = np.array(img)
        expected = compute_distance_map(self.mask, "CHESSBOARD").distances
        np.testing.assert_array_equal(distances.astype(np.uint16), expected)
        self.assertTrue(os.path.exists(preview))

    def test_errors_exit_with_status_1(self):
        """Invalid inputs are reported with a non-zero status."""
        self.assertEqual(cli.main([self.path("missing.png"), self.path("out.npy")]), 1)
        self.assertEqual(cli.main([self.mask_path, self.path("out.npy"), "--weights", "5", "0"]), 1)

        params = self.path("bad.json")
        with open(params, 'w') as f:
            f.write("{not json")
        self.assertEqual(cli.main([self.mask_path, self.path("out.npy"), "--params", params]), 1)


if __name__ == '__main__':
    unittest.main()
