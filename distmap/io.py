"""
Loading of mask images and saving of distance maps.

Files ending in .npy are read and written with numpy, any other extension
goes through Pillow.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from distmap.core.distance_transform.buffer import RESULT_DTYPE
from distmap.errors import InvalidDimensionsError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_mask(path: PathLike) -> np.ndarray:
    """
    Load a binary mask image.

    Args:
        path: Path to an image file readable by Pillow, or a .npy file

    Returns:
        2D numpy array. Images are converted to 8 bit grayscale.
    """
    path = Path(path)
    if path.suffix == ".npy":
        mask = np.load(path)
    else:
        with Image.open(path) as img:
            mask = np.array(img.convert("L"))

    if mask.ndim != 2:
        raise InvalidDimensionsError(f"Expected a 2D mask in {path}, got shape {mask.shape}")

    logger.info(f"Loaded mask {path} with shape {mask.shape}")
    return mask


def save_distance_map(path: PathLike, distances: np.ndarray) -> None:
    """
    Save a distance map.

    Args:
        path: Output path. .npy files keep the array as is, other extensions
              are written as 16 bit grayscale images.
        distances: 2D distance map
    """
    path = Path(path)
    if path.suffix == ".npy":
        np.save(path, distances)
    else:
        Image.fromarray(np.asarray(distances, dtype=RESULT_DTYPE)).save(path)
    logger.info(f"Saved distance map to {path}")
