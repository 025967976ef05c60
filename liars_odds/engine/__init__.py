"""
Liar's Odds Probability Engine.

Pure Python statistics for Liar's Dice bids: specific-face and any-face
probabilities, conditioning on the player's own dice, and break-even
search. No I/O; every query is a bounded numeric computation.
"""

from liars_odds.engine.any_face import AnyFaceEngine, ProbabilityTable
from liars_odds.engine.base import (
    FACES,
    MAX_DICE,
    ProbabilityReport,
    ProbabilityTier,
    format_improvement,
    format_percentage,
)
from liars_odds.engine.break_even import BreakEvenSearch
from liars_odds.engine.cache import BoundedCache
from liars_odds.engine.conditional import ConditionalEngine
from liars_odds.engine.hand import HandConfiguration
from liars_odds.engine.specific_face import SpecificFaceEngine
from liars_odds.engine.suite import EngineSuite, build_engine_suite

__all__ = [
    # Data Classes
    "HandConfiguration",
    "ProbabilityReport",
    # Enums
    "ProbabilityTier",
    # Engines
    "AnyFaceEngine",
    "ConditionalEngine",
    "SpecificFaceEngine",
    "EngineSuite",
    "build_engine_suite",
    # Infrastructure
    "BoundedCache",
    "BreakEvenSearch",
    "ProbabilityTable",
    # Helpers
    "FACES",
    "MAX_DICE",
    "format_improvement",
    "format_percentage",
]
