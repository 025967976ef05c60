"""
Liar's Odds - Specific Face Engine

Probability that at least k of n dice show one named face:
P(X >= k) for X ~ Binomial(n, 1/6).

Results are memoised in a bounded cache keyed by (bid, total dice).
"""

from liars_odds.engine.base import (
    FACE_PROBABILITY,
    MAX_DICE,
    SPECIFIC_CACHE_SIZE,
    ProbabilityReport,
    ProbabilityTier,
    format_percentage,
)
from liars_odds.engine.binomial import binomial_tail
from liars_odds.engine.break_even import BreakEvenSearch
from liars_odds.engine.cache import BoundedCache
from liars_odds.engine.validators import is_valid_bid


class SpecificFaceEngine:
    """
    Engine for bids on a single named face ("at least five 3s").

    Invalid input never raises; it yields a probability of 0.
    """

    def __init__(
        self,
        max_dice: int = MAX_DICE,
        cache_size: int = SPECIFIC_CACHE_SIZE,
    ) -> None:
        self.max_dice = max_dice
        self._cache = BoundedCache(cache_size, name="specific-face cache")
        self._break_even = BreakEvenSearch(self.probability, max_dice)

    def probability(self, bid: int, total_dice: int) -> float:
        """
        Probability that at least `bid` of `total_dice` dice show the face.

        Args:
            bid: Minimum number of matching dice (k)
            total_dice: Dice in play (n), 1 to max_dice

        Returns:
            Probability in [0, 1]; 0 for invalid input
        """
        if not is_valid_bid(bid, total_dice, self.max_dice):
            return 0.0
        if bid == 0:
            return 1.0

        key = (bid, total_dice)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = binomial_tail(bid, total_dice, FACE_PROBABILITY)
        self._cache.put(key, result)
        return result

    def percentage(self, bid: int, total_dice: int) -> str:
        return format_percentage(self.probability(bid, total_dice))

    def tier(self, bid: int, total_dice: int) -> ProbabilityTier:
        return ProbabilityTier.classify(self.probability(bid, total_dice))

    def report(self, bid: int, total_dice: int) -> ProbabilityReport:
        return ProbabilityReport.from_probability(self.probability(bid, total_dice))

    def break_even(self, total_dice: int) -> int:
        """Highest bid on a specific face with probability >= 50%."""
        return self._break_even.break_even(total_dice)

    def clear_cache(self) -> None:
        self._cache.clear()
        self._break_even.clear_cache()

    @property
    def cache_size(self) -> int:
        """Number of cached (bid, total dice) results."""
        return len(self._cache)
