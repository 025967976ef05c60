"""
Liar's Odds - Engine Suite

Composition root for the probability engines. Callers build one suite
and hand it to whatever presents the numbers; there are no module-level
engine singletons.
"""

import logging
from dataclasses import dataclass

from liars_odds.config.settings import Settings, get_settings
from liars_odds.engine.any_face import AnyFaceEngine
from liars_odds.engine.conditional import ConditionalEngine
from liars_odds.engine.specific_face import SpecificFaceEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSuite:
    """
    The three engines a calculator screen needs.

    Attributes:
        specific_face: Bids on one named face
        any_face: Bids on "some face" (default screen, owns K0)
        conditional: Specific-face bids given the player's own dice
    """
    specific_face: SpecificFaceEngine
    any_face: AnyFaceEngine
    conditional: ConditionalEngine

    def break_even(self, total_dice: int) -> int:
        """Break-even bid on the any-face screen."""
        return self.any_face.break_even(total_dice)

    def clear_caches(self) -> None:
        self.specific_face.clear_cache()
        self.any_face.clear_cache()
        self.conditional.clear_cache()


def build_engine_suite(settings: Settings | None = None) -> EngineSuite:
    """Build a fresh set of engines from settings (defaults to get_settings())."""
    settings = settings or get_settings()
    suite = EngineSuite(
        specific_face=SpecificFaceEngine(
            max_dice=settings.max_dice,
            cache_size=settings.specific_cache_size,
        ),
        any_face=AnyFaceEngine(max_dice=settings.max_dice),
        conditional=ConditionalEngine(
            max_dice=settings.max_dice,
            cache_size=settings.conditional_cache_size,
        ),
    )
    logger.info("Engine suite ready (max %d dice)", settings.max_dice)
    return suite
