"""
Liar's Odds - Break-Even Search

Finds the highest bid that still has at least a 50% chance of being
true, by binary search over any engine's probability function.
"""

import logging
from typing import Callable

from liars_odds.engine.base import BREAK_EVEN_PROBABILITY, MAX_DICE
from liars_odds.engine.validators import is_valid_total_dice

logger = logging.getLogger(__name__)

ProbabilityFn = Callable[[int, int], float]


class BreakEvenSearch:
    """
    Break-even bid lookup layered on a probability function.

    The function must be non-increasing in the bid for a fixed total.
    Results are remembered per total dice; the memo is unbounded since
    there are at most max_dice distinct keys.
    """

    def __init__(self, probability: ProbabilityFn, max_dice: int = MAX_DICE) -> None:
        self._probability = probability
        self._max_dice = max_dice
        self._cache: dict[int, int] = {}

    def break_even(self, total_dice: int) -> int:
        """Largest bid k in [0, total_dice] with P(k, total_dice) >= 0.5.

        Returns 0 for an unsupported total.
        """
        if not is_valid_total_dice(total_dice, self._max_dice):
            return 0

        cached = self._cache.get(total_dice)
        if cached is not None:
            return cached

        left, right = 0, total_dice
        result = 0
        while left <= right:
            mid = (left + right) // 2
            if self._probability(mid, total_dice) >= BREAK_EVEN_PROBABILITY:
                result = mid
                left = mid + 1
            else:
                right = mid - 1

        self._cache[total_dice] = result
        logger.debug("Break-even for %d dice: %d", total_dice, result)
        return result

    def clear_cache(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
