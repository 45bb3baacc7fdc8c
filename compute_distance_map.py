#!/usr/bin/env python3
"""
Compute the 5x5 chamfer distance map of a binary mask image.

White pixels (value 255 by default) are foreground; every other value is
background. The result is saved as a 16 bit image or a .npy array.

Usage:
    compute_distance_map.py <mask> <output> [--params <json-params>]
        [--weights A B [C]] [--preset NAME] [--no-normalize] [--label N]
        [--preview <png>] [--verbose]
"""

import sys
import logging
import argparse

from distmap.config import DistanceMapParams, load_params
from distmap.errors import DistanceMapError
from distmap.io import load_mask, save_distance_map
from distmap.progress import LoggingProgressSink
from distmap.weights import ChamferPreset, ChamferWeights

logger = logging.getLogger("compute_distance_map")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Compute a 5x5 chamfer distance map')
    parser.add_argument('mask', help='Binary mask image (or .npy array)')
    parser.add_argument('output', help='Output image (16 bit) or .npy file')
    parser.add_argument('--params', help='JSON parameter file')
    parser.add_argument('--weights', type=int, nargs='+', metavar='W',
                        help='Orthogonal, diagonal and optional knight weights')
    parser.add_argument('--preset', choices=[p.name for p in ChamferPreset],
                        help='Named chamfer weights')
    parser.add_argument('--no-normalize', action='store_true',
                        help='Keep distances in units of the orthogonal weight')
    parser.add_argument('--label', type=int, help='Foreground label value')
    parser.add_argument('--preview', help='Also save a calibrated preview figure')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser


def resolve_params(args) -> DistanceMapParams:
    """Parameters from the JSON file, overridden by command line flags."""
    params = load_params(args.params) if args.params else DistanceMapParams()

    if args.preset:
        params.weights = ChamferPreset[args.preset].weights
    if args.weights:
        params.weights = ChamferWeights.from_values(args.weights)
    if args.no_normalize:
        params.normalize = False
    if args.label is not None:
        params.foreground_label = args.label
    return params


def main(argv=None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        params = resolve_params(args)
        logger.info(f"Weights: {params.weights}")
        logger.info(f"Normalize: {params.normalize}")
        logger.info(f"Foreground label: {params.foreground_label}")

        mask = load_mask(args.mask)
        transform = params.create_transform(progress=LoggingProgressSink())
        result = transform.distance_map(mask)
        logger.info(f"Max distance: {result.max_value}")

        save_distance_map(args.output, result.distances)
        if args.preview:
            # matplotlib is only needed for previews
            from distmap.visualization import save_preview
            save_preview(result, args.preview, title=f"Distance map {params.weights}")
            logger.info(f"Saved preview to {args.preview}")
    except (DistanceMapError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
