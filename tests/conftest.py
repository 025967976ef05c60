"""
Liar's Odds - Test Configuration and Fixtures

Common fixtures and reference values for all test modules.
"""

import math
from typing import Callable

import pytest

from liars_odds.config.settings import Settings, get_settings
from liars_odds.engine.any_face import AnyFaceEngine
from liars_odds.engine.conditional import ConditionalEngine
from liars_odds.engine.hand import HandConfiguration
from liars_odds.engine.specific_face import SpecificFaceEngine


# =============================================================================
# REFERENCE VALUES
# =============================================================================

def exact_binomial_tail(k: int, n: int, p: float = 1.0 / 6.0) -> float:
    """Reference P(X >= k) using exact integer coefficients."""
    return sum(math.comb(n, x) * p ** x * (1.0 - p) ** (n - x) for x in range(k, n + 1))


def birthday_complement(n: int) -> float:
    """Reference P(at least two of n dice share a face)."""
    distinct = 1.0
    for i in range(n):
        distinct *= (6 - i) / 6
    return 1.0 - distinct


@pytest.fixture
def binomial_reference() -> Callable[..., float]:
    return exact_binomial_tail


@pytest.fixture
def birthday_reference() -> Callable[[int], float]:
    return birthday_complement


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def specific_engine() -> SpecificFaceEngine:
    """Fresh specific-face engine with default limits."""
    return SpecificFaceEngine()


@pytest.fixture(scope="session")
def any_face_engine() -> AnyFaceEngine:
    """Any-face engine; the table is immutable so one per session is enough."""
    return AnyFaceEngine()


@pytest.fixture
def conditional_engine() -> ConditionalEngine:
    """Fresh conditional engine with default limits."""
    return ConditionalEngine()


@pytest.fixture
def make_hand() -> Callable[..., HandConfiguration]:
    """
    Factory for hands with preset dice.

    Usage:
        make_hand([1, 1, None], bid_face=1)
    """
    def _make(values: list[int | None], bid_face: int = 1) -> HandConfiguration:
        hand = HandConfiguration(dice_count=len(values), bid_face=bid_face)
        for index, value in enumerate(values):
            hand.set_die(index, value)
        return hand
    return _make


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Strip LIARS_ODDS_* variables and reset the cached settings."""
    for key in ("MAX_DICE", "SPECIFIC_CACHE_SIZE", "CONDITIONAL_CACHE_SIZE", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(f"LIARS_ODDS_{key}", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def small_settings() -> Settings:
    """Settings for a 20-dice table with tiny caches."""
    return Settings(max_dice=20, specific_cache_size=10, conditional_cache_size=5)
