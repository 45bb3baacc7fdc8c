"""
Parameters of a distance map computation, loaded from JSON.

Example parameter file:

    {
        "weights": [5, 7, 11],
        "normalize": true,
        "foreground_label": 255
    }

"weights" may also be a preset name such as "BORGEFORS" or a preset label
such as "Chessknight (5,7,11)". Missing keys take their default values.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from distmap.core.distance_transform import DEFAULT_MASK_LABEL, DistanceTransform5x5
from distmap.errors import ConfigError, InvalidWeightsError
from distmap.progress import ProgressSink
from distmap.weights import DEFAULT_WEIGHTS, ChamferWeights, as_weights

logger = logging.getLogger(__name__)

KNOWN_KEYS = ("weights", "normalize", "foreground_label")


@dataclass
class DistanceMapParams:
    """Settings of a distance map computation."""

    weights: ChamferWeights = field(default_factory=lambda: DEFAULT_WEIGHTS)
    normalize: bool = True
    foreground_label: int = DEFAULT_MASK_LABEL

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "DistanceMapParams":
        """
        Build parameters from a dictionary, e.g. parsed JSON.

        Args:
            params: Dictionary with optional "weights", "normalize" and
                    "foreground_label" entries

        Returns:
            DistanceMapParams instance
        """
        if not isinstance(params, dict):
            raise ConfigError(f"Parameters must be a JSON object, got {type(params).__name__}")

        for key in params:
            if key not in KNOWN_KEYS:
                logger.warning(f"Ignoring unknown parameter: {key}")

        try:
            weights = as_weights(params.get("weights", DEFAULT_WEIGHTS))
        except InvalidWeightsError as e:
            raise ConfigError(f"Invalid weights: {e}") from e

        normalize = params.get("normalize", True)
        if not isinstance(normalize, bool):
            raise ConfigError(f"'normalize' must be true or false, got {normalize!r}")

        label = params.get("foreground_label", DEFAULT_MASK_LABEL)
        if isinstance(label, bool) or not isinstance(label, int):
            raise ConfigError(f"'foreground_label' must be an integer, got {label!r}")

        return cls(weights=weights, normalize=normalize, foreground_label=label)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weights": list(self.weights),
            "normalize": self.normalize,
            "foreground_label": self.foreground_label,
        }

    def create_transform(self, progress: Optional[ProgressSink] = None) -> DistanceTransform5x5:
        return DistanceTransform5x5(
            weights=self.weights,
            normalize=self.normalize,
            foreground_label=self.foreground_label,
            progress=progress,
        )


def load_params(path: Union[str, Path]) -> DistanceMapParams:
    """Read parameters from a JSON file."""
    try:
        with open(path, 'r') as f:
            params = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Could not parse parameter file {path}: {e}") from e

    logger.info(f"Loaded parameters from {path}")
    return DistanceMapParams.from_dict(params)
