"""
Liar's Odds - Engine Base Types

Constants, enums and small immutable value types shared by every
probability engine. Nothing in this module performs I/O or keeps state.
"""

import math
from dataclasses import dataclass
from enum import Enum

# Six-sided dice
MIN_FACE = 1
MAX_FACE = 6
FACES: tuple[int, ...] = tuple(range(MIN_FACE, MAX_FACE + 1))
FACE_PROBABILITY = 1.0 / MAX_FACE

# Supported table size (total dice in play)
MIN_DICE = 1
MAX_DICE = 40

# Default cache capacities
SPECIFIC_CACHE_SIZE = 200
CONDITIONAL_CACHE_SIZE = 100

BREAK_EVEN_PROBABILITY = 0.5
MODERATE_PROBABILITY = 0.3
IMPROVEMENT_EPSILON = 0.01

FACE_NAMES: dict[int, str] = {
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
}


class ProbabilityTier(Enum):
    """Three-way classification used to pick a display colour."""
    FAVORABLE = "favorable"    # >= 50%
    MODERATE = "moderate"      # 30-49%
    UNLIKELY = "unlikely"      # < 30%

    @property
    def description(self) -> str:
        """Capitalised label shown next to a probability."""
        return self.value.capitalize()

    @classmethod
    def classify(cls, probability: float) -> "ProbabilityTier":
        """Classify a probability into its tier."""
        if probability >= BREAK_EVEN_PROBABILITY:
            return cls.FAVORABLE
        if probability >= MODERATE_PROBABILITY:
            return cls.MODERATE
        return cls.UNLIKELY


@dataclass(frozen=True)
class ProbabilityReport:
    """
    A probability together with its display forms.

    Attributes:
        probability: Value in [0, 1]
        percentage: Whole-percent string, e.g. "42%"
        tier: Colour tier for the probability
    """
    probability: float
    percentage: str
    tier: ProbabilityTier

    @classmethod
    def from_probability(cls, probability: float) -> "ProbabilityReport":
        return cls(
            probability=probability,
            percentage=format_percentage(probability),
            tier=ProbabilityTier.classify(probability),
        )

    @property
    def description(self) -> str:
        return self.tier.description


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def format_percentage(probability: float) -> str:
    """Format a probability as a whole percentage ("75%")."""
    return f"{round_half_up(probability * 100)}%"


def format_improvement(delta: float) -> str:
    """Format a probability delta as a signed percentage.

    Deltas within one percentage point of zero are shown as "±0%".
    """
    percentage = round_half_up(abs(delta) * 100)
    if delta > IMPROVEMENT_EPSILON:
        return f"+{percentage}%"
    if delta < -IMPROVEMENT_EPSILON:
        return f"-{percentage}%"
    return "±0%"
