"""
Liar's Odds Codec.

JSON serialisation for the player's hand configuration.
"""

from liars_odds.codec.models import HandConfigurationModel, dump_hand, load_hand

__all__ = ["HandConfigurationModel", "dump_hand", "load_hand"]
