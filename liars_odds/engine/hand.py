"""
Liar's Odds - Hand Configuration

The player's own dice: a fixed number of slots, each either unset or
showing a face 1-6, plus the face currently being bid on.

Mutators follow the engine convention of reporting failure with a
False return instead of raising. The only hard error is building a
hand with no dice at all.
"""

from typing import Iterable, Sequence

from liars_odds.engine.base import FACE_NAMES, FACES, MAX_FACE, MIN_FACE
from liars_odds.engine.validators import is_valid_face, is_valid_index


class HandConfiguration:
    """
    Known dice for the querying player.

    Attributes:
        dice_count: Number of dice the player owns (fixed)
        face_values: Per-slot face value, None when unset
        bid_face: Face currently being bid on (1-6)
    """

    def __init__(self, dice_count: int, bid_face: int = MIN_FACE) -> None:
        if dice_count <= 0:
            raise ValueError(f"Dice count must be positive, got {dice_count}.")
        self._dice_count = dice_count
        self._face_values: list[int | None] = [None] * dice_count
        if isinstance(bid_face, bool) or not isinstance(bid_face, int):
            bid_face = MIN_FACE
        self._bid_face = max(MIN_FACE, min(MAX_FACE, bid_face))

    @property
    def dice_count(self) -> int:
        return self._dice_count

    @property
    def face_values(self) -> tuple[int | None, ...]:
        return tuple(self._face_values)

    @property
    def bid_face(self) -> int:
        return self._bid_face

    @bid_face.setter
    def bid_face(self, face: int) -> None:
        """Change the bid face. Anything but a face 1-6 is ignored."""
        if is_valid_face(face):
            self._bid_face = face

    def set_die(self, index: int, value: int | None) -> bool:
        """
        Set (or clear, with None) the face of one die.

        Args:
            index: Die index, 0-based
            value: Face 1-6, or None to clear the slot

        Returns:
            True on success; False (and no change) for a bad index or face
        """
        if not is_valid_index(index, self._dice_count):
            return False
        if value is not None and not is_valid_face(value):
            return False
        self._face_values[index] = value
        return True

    def get_die(self, index: int) -> int | None:
        """Face of one die, or None if unset or the index is out of range."""
        if not is_valid_index(index, self._dice_count):
            return None
        return self._face_values[index]

    def set_dice(self, indices: Iterable[int], value: int | None) -> bool:
        """Apply set_die to several dice.

        Best effort: valid indices are updated even when others fail.
        Returns True only if every individual update succeeded.
        """
        success = True
        for index in indices:
            if not self.set_die(index, value):
                success = False
        return success

    def reset_die(self, index: int) -> bool:
        return self.set_die(index, None)

    def reset(self) -> None:
        self._face_values = [None] * self._dice_count

    def count_matching(self, face: int) -> int:
        """Number of set dice showing face (0 for a face outside 1-6)."""
        if not is_valid_face(face):
            return 0
        return sum(1 for value in self._face_values if value == face)

    def count_matching_bid_face(self) -> int:
        return self.count_matching(self._bid_face)

    def count_set_dice(self) -> int:
        """Number of dice whose face has been entered."""
        return sum(1 for value in self._face_values if value is not None)

    def is_complete(self) -> bool:
        return all(value is not None for value in self._face_values)

    def has_any_dice_set(self) -> bool:
        return any(value is not None for value in self._face_values)

    def summary(self) -> str:
        """Describe the hand, e.g. "1 one, 1 three, 2 fives"."""
        parts = []
        for face in FACES:
            count = self.count_matching(face)
            if count > 0:
                name = FACE_NAMES[face]
                if count > 1:
                    name += "es" if name.endswith("x") else "s"
                parts.append(f"{count} {name}")
        if not parts:
            return "No dice set"
        return ", ".join(parts)

    def resized(self, dice_count: int) -> "HandConfiguration":
        """
        Build a hand for a new dice count, keeping what carries over.

        The slot count of a hand never changes, so a new instance is
        returned with the same bid face and every set value whose index
        exists in both hands.
        """
        hand = HandConfiguration(dice_count, self._bid_face)
        for index in range(min(self._dice_count, dice_count)):
            value = self._face_values[index]
            if value is not None:
                hand.set_die(index, value)
        return hand

    @classmethod
    def from_values(
        cls,
        values: Sequence[int | None],
        bid_face: int = MIN_FACE,
    ) -> "HandConfiguration":
        """Build a hand from per-slot values; invalid faces are left unset."""
        hand = cls(len(values), bid_face)
        for index, value in enumerate(values):
            hand.set_die(index, value)
        return hand

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandConfiguration):
            return NotImplemented
        return (
            self._dice_count == other._dice_count
            and self._face_values == other._face_values
            and self._bid_face == other._bid_face
        )

    __hash__ = None  # mutable

    def __len__(self) -> int:
        return self._dice_count

    def __repr__(self) -> str:
        return (
            f"HandConfiguration(dice_count={self._dice_count}, "
            f"face_values={self._face_values!r}, bid_face={self._bid_face})"
        )
