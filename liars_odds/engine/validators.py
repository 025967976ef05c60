"""
Liar's Odds - Input Validation Utilities

Range checks for engine inputs. Unlike a form validator these never
raise: engines answer 0 for anything out of range, so every check
simply reports whether the input is usable.
"""

from liars_odds.engine.base import MAX_DICE, MAX_FACE, MIN_DICE, MIN_FACE


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_total_dice(total_dice: int, max_dice: int = MAX_DICE) -> bool:
    """True if total_dice is an integer in [1, max_dice]."""
    return _is_int(total_dice) and MIN_DICE <= total_dice <= max_dice


def is_valid_bid(bid: int, total_dice: int, max_dice: int = MAX_DICE) -> bool:
    """
    Check a (bid, total dice) pair.

    Args:
        bid: Number of dice claimed
        total_dice: Dice in play across all players
        max_dice: Largest supported total

    Returns:
        True if both are integers, 1 <= total_dice <= max_dice and
        0 <= bid <= total_dice
    """
    return (
        is_valid_total_dice(total_dice, max_dice)
        and _is_int(bid)
        and 0 <= bid <= total_dice
    )


def is_valid_face(face: int) -> bool:
    """True if face is an integer die face (1-6)."""
    return _is_int(face) and MIN_FACE <= face <= MAX_FACE


def is_valid_index(index: int, dice_count: int) -> bool:
    """True if index is an integer addressing one of dice_count slots."""
    return _is_int(index) and 0 <= index < dice_count
