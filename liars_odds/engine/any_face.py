"""
Liar's Odds - Any Face Engine

Probability that SOME face value appears at least k times among n dice.

An exact answer needs a sum over partitions of n dice into six faces,
so the engine approximates instead and stores every answer for
0 <= k <= n <= max_dice in a triangular table built once at startup:

- k = 0 or k = 1: always true.
- k = 2 with n <= 10: exact complement of "all dice distinct".
- k past the skew threshold n/6 + 3*sqrt(5n/36): Poisson tail summed
  over the six faces, tightened with a Chernoff bound in the deep tail.
- everything else: per-face Poisson tail combined as 1 - (1 - p)^6.

The thresholds are empirical. Changing any of them changes the
percentages users see, so re-check the table after any edit.
"""

import logging
import math

from liars_odds.engine.base import (
    MAX_DICE,
    MAX_FACE,
    ProbabilityReport,
    ProbabilityTier,
    format_percentage,
)
from liars_odds.engine.binomial import poisson_tail
from liars_odds.engine.break_even import BreakEvenSearch
from liars_odds.engine.validators import is_valid_bid

logger = logging.getLogger(__name__)

EXACT_PAIR_MAX_DICE = 10


def table_index(n: int, k: int) -> int:
    """Position of (n, k) in the flattened triangular table."""
    return n * (n + 1) // 2 + k


def table_length(max_dice: int) -> int:
    """Number of (n, k) cells for 0 <= k <= n <= max_dice."""
    return table_index(max_dice + 1, 0)


def skew_threshold(n: int) -> float:
    """Bid above which (n, k) is treated as the extreme right tail."""
    return n / MAX_FACE + 3.0 * math.sqrt(5.0 * n / 36.0)


def all_distinct_probability(n: int) -> float:
    """Probability that n dice all show different faces (0 once n > 6)."""
    if n > MAX_FACE:
        return 0.0
    result = 1.0
    for i in range(n):
        result *= (MAX_FACE - i) / MAX_FACE
    return result


def _general_estimate(n: int, k: int) -> float:
    rate = n / MAX_FACE
    per_face = poisson_tail(k, n, rate)
    return min(1.0 - (1.0 - per_face) ** MAX_FACE, 1.0)


def _high_bid_estimate(n: int, k: int) -> float:
    rate = n / MAX_FACE
    estimate = min(MAX_FACE * poisson_tail(k, n, rate), 1.0)
    if k > rate + 4.0 * math.sqrt(rate):
        chernoff = MAX_FACE * math.exp(-((k - rate) ** 2) / (2.0 * rate))
        estimate = min(estimate, chernoff)
    return estimate


def any_face_estimate(n: int, k: int) -> float:
    """
    Estimate P(some face shows at least k times among n dice).

    Args:
        n: Dice in play (n >= 0)
        k: Required repeat count, 0 <= k <= n

    Returns:
        Estimated probability in [0, 1]
    """
    if k < 0 or k > n:
        return 0.0
    if k <= 1:
        return 1.0
    # Exact pair case takes precedence over the tail path (only n = 2 is affected).
    if k == 2 and n <= EXACT_PAIR_MAX_DICE:
        return 1.0 - all_distinct_probability(n)
    if k > skew_threshold(n):
        return _high_bid_estimate(n, k)
    return _general_estimate(n, k)


class ProbabilityTable:
    """Immutable triangular table of any-face estimates."""

    def __init__(self, max_dice: int = MAX_DICE) -> None:
        self.max_dice = max_dice
        values: list[float] = []
        for n in range(max_dice + 1):
            for k in range(n + 1):
                values.append(any_face_estimate(n, k))
        self._values: tuple[float, ...] = tuple(values)
        logger.info(
            "Built any-face lookup table for up to %d dice (%d entries)",
            max_dice, len(self._values),
        )

    def lookup(self, n: int, k: int) -> float:
        """Stored estimate for (n, k); 0 outside the table."""
        if not (0 <= n <= self.max_dice and 0 <= k <= n):
            return 0.0
        return self._values[table_index(n, k)]

    def __len__(self) -> int:
        return len(self._values)


class AnyFaceEngine:
    """
    Engine for bids where the face is left open ("at least five of a kind").

    The table is built eagerly in the constructor so lookups never
    write shared state.
    """

    def __init__(self, max_dice: int = MAX_DICE) -> None:
        self.max_dice = max_dice
        self._table = ProbabilityTable(max_dice)
        self._break_even = BreakEvenSearch(self.probability, max_dice)

    @property
    def table(self) -> ProbabilityTable:
        return self._table

    def probability(self, bid: int, total_dice: int) -> float:
        """Probability that some face shows at least `bid` times.

        Returns 0 for invalid input.
        """
        if not is_valid_bid(bid, total_dice, self.max_dice):
            return 0.0
        return self._table.lookup(total_dice, bid)

    def percentage(self, bid: int, total_dice: int) -> str:
        return format_percentage(self.probability(bid, total_dice))

    def tier(self, bid: int, total_dice: int) -> ProbabilityTier:
        return ProbabilityTier.classify(self.probability(bid, total_dice))

    def report(self, bid: int, total_dice: int) -> ProbabilityReport:
        return ProbabilityReport.from_probability(self.probability(bid, total_dice))

    def break_even(self, total_dice: int) -> int:
        """Highest any-face bid with probability >= 50% (K0)."""
        return self._break_even.break_even(total_dice)

    def clear_cache(self) -> None:
        """Forget memoised break-even bids. The table itself is fixed."""
        self._break_even.clear_cache()
