"""
Liar's Odds - Conditional Engine

Probability of a specific-face bid given the player's own dice.

Known dice showing the bid face already count towards the bid, so the
question shrinks to "how many more matches among the unknown dice":

    remaining = bid - my matches
    unknown   = total dice - my dice

and the answer is the binomial tail P(X >= remaining) with
X ~ Binomial(unknown, 1/6).

The cache is keyed by (remaining, unknown). Different hands and bids
that reduce to the same sub-problem share one entry.
"""

import logging

from liars_odds.engine.base import (
    CONDITIONAL_CACHE_SIZE,
    FACE_PROBABILITY,
    MAX_DICE,
    ProbabilityReport,
    ProbabilityTier,
    format_percentage,
)
from liars_odds.engine.binomial import binomial_tail
from liars_odds.engine.cache import BoundedCache
from liars_odds.engine.hand import HandConfiguration
from liars_odds.engine.validators import is_valid_bid

logger = logging.getLogger(__name__)


class ConditionalEngine:
    """Engine for specific-face bids conditioned on a known hand."""

    def __init__(
        self,
        max_dice: int = MAX_DICE,
        cache_size: int = CONDITIONAL_CACHE_SIZE,
    ) -> None:
        self.max_dice = max_dice
        self._cache = BoundedCache(cache_size, name="conditional cache")

    def probability(self, bid: int, total_dice: int, hand: HandConfiguration) -> float:
        """
        Probability that at least `bid` dice show the hand's bid face.

        Args:
            bid: Minimum number of matching dice across all players
            total_dice: Dice in play across all players
            hand: The player's known dice and bid face

        Returns:
            Probability in [0, 1]; 0 for invalid input or a hand with
            more dice than are in play
        """
        if not is_valid_bid(bid, total_dice, self.max_dice):
            return 0.0
        if hand.dice_count > total_dice:
            return 0.0

        matches = hand.count_matching_bid_face()
        remaining = bid - matches
        unknown = total_dice - hand.dice_count
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Conditional query: bid=%d total=%d face=%d mine=%d matches=%d "
                "remaining=%d unknown=%d (%s)",
                bid, total_dice, hand.bid_face, hand.dice_count, matches,
                remaining, unknown, hand.summary(),
            )

        if remaining <= 0:
            return 1.0
        if remaining > unknown:
            return 0.0

        key = (remaining, unknown)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = binomial_tail(remaining, unknown, FACE_PROBABILITY)
        self._cache.put(key, result)
        logger.debug("Conditional result for %s: %.6f", key, result)
        return result

    def percentage(self, bid: int, total_dice: int, hand: HandConfiguration) -> str:
        return format_percentage(self.probability(bid, total_dice, hand))

    def tier(self, bid: int, total_dice: int, hand: HandConfiguration) -> ProbabilityTier:
        return ProbabilityTier.classify(self.probability(bid, total_dice, hand))

    def report(self, bid: int, total_dice: int, hand: HandConfiguration) -> ProbabilityReport:
        return ProbabilityReport.from_probability(self.probability(bid, total_dice, hand))

    def probability_improvement(
        self,
        bid: int,
        total_dice: int,
        hand: HandConfiguration,
        baseline_probability: float,
    ) -> float:
        """Conditional probability minus a caller-supplied baseline.

        The baseline is normally the unconditioned specific-face value.
        """
        return self.probability(bid, total_dice, hand) - baseline_probability

    def clear_cache(self) -> None:
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        return len(self._cache)
