"""
Chamfer weights for the 5x5 distance transform.

A weight triple gives the cost of one orthogonal step, one diagonal step and
one "chess-knight" step ((2,1) or (1,2) offset). Weights equal to (5, 7, 11)
give a good approximation of the Euclidean distance.
"""

from enum import Enum
from numbers import Integral
from typing import NamedTuple, Sequence, Union

from distmap.errors import InvalidWeightsError


class ChamferWeights(NamedTuple):
    """Costs of orthogonal, diagonal and knight moves."""

    ortho: int
    diagonal: int
    knight: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "ChamferWeights":
        """
        Build weights from two or three positive integers.

        When only the orthogonal and diagonal weights are given, the knight
        weight is their sum.

        Args:
            values: Sequence of two or three weights

        Returns:
            ChamferWeights instance
        """
        values = list(values)
        if len(values) not in (2, 3):
            raise InvalidWeightsError(
                f"Expected two or three chamfer weights, got {len(values)}"
            )
        for value in values:
            # bool is an Integral but never a meaningful weight
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidWeightsError(f"Chamfer weights must be integers, got {value!r}")
            if value <= 0:
                raise InvalidWeightsError(f"Chamfer weights must be positive, got {value}")

        values = [int(v) for v in values]
        if len(values) == 2:
            values.append(values[0] + values[1])
        return cls(*values)

    def max_weight(self) -> int:
        return max(self)

    def __str__(self) -> str:
        return f"({self.ortho},{self.diagonal},{self.knight})"


class ChamferPreset(Enum):
    """Named chamfer weight sets."""

    CHESSBOARD = ("Chessboard (1,1)", (1, 1))
    CITY_BLOCK = ("City-Block (1,2)", (1, 2))
    QUASI_EUCLIDEAN = ("Quasi-Euclidean (1,1.41)", (10, 14))
    BORGEFORS = ("Borgefors (3,4)", (3, 4))
    WEIGHTS_23 = ("Weights (2,3)", (2, 3))
    WEIGHTS_57_11 = ("Weights (5,7,11)", (5, 7, 11))
    CHESSKNIGHT = ("Chessknight (5,7,11)", (5, 7, 11))

    def __init__(self, label: str, values: tuple):
        self.label = label
        self.values = values

    @property
    def weights(self) -> ChamferWeights:
        return ChamferWeights.from_values(self.values)

    @classmethod
    def from_label(cls, label: str) -> "ChamferPreset":
        """Find a preset from its display label."""
        for preset in cls:
            if preset.label == label:
                return preset
        raise InvalidWeightsError(f"Unknown chamfer weights label: {label!r}")

    @classmethod
    def from_name(cls, name: str) -> "ChamferPreset":
        """Find a preset from its enum name (case and dash insensitive)."""
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise InvalidWeightsError(f"Unknown chamfer weights preset: {name!r}") from None

    @classmethod
    def labels(cls):
        return [preset.label for preset in cls]


DEFAULT_WEIGHTS = ChamferPreset.CHESSKNIGHT.weights

WeightsLike = Union[ChamferWeights, ChamferPreset, str, Sequence[int]]


def as_weights(weights: WeightsLike) -> ChamferWeights:
    """
    Convert any accepted weight specification to a ChamferWeights triple.

    Args:
        weights: ChamferWeights, ChamferPreset, preset name or label, or a
                 sequence of two or three positive integers

    Returns:
        ChamferWeights instance
    """
    if isinstance(weights, ChamferWeights):
        return weights
    if isinstance(weights, ChamferPreset):
        return weights.weights
    if isinstance(weights, str):
        if weights in ChamferPreset.labels():
            return ChamferPreset.from_label(weights).weights
        return ChamferPreset.from_name(weights).weights
    try:
        values = list(weights)
    except TypeError:
        raise InvalidWeightsError(f"Cannot interpret {weights!r} as chamfer weights") from None
    return ChamferWeights.from_values(values)
