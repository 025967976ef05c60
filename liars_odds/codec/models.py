"""
Liar's Odds - Serialisation Models

Pydantic models for moving a hand configuration in and out of JSON.
"""

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from liars_odds.engine.base import MAX_FACE, MIN_FACE
from liars_odds.engine.hand import HandConfiguration

Face = Annotated[int, Field(ge=MIN_FACE, le=MAX_FACE)]


class HandConfigurationModel(BaseModel):
    """Mirrors HandConfiguration field for field."""

    dice_count: int = Field(gt=0)
    face_values: list[Face | None]
    bid_face: Face = MIN_FACE

    @model_validator(mode="after")
    def _check_slot_count(self) -> "HandConfigurationModel":
        if len(self.face_values) != self.dice_count:
            raise ValueError(
                f"face_values has {len(self.face_values)} slots, "
                f"expected {self.dice_count}."
            )
        return self

    @classmethod
    def from_hand(cls, hand: HandConfiguration) -> "HandConfigurationModel":
        return cls(
            dice_count=hand.dice_count,
            face_values=list(hand.face_values),
            bid_face=hand.bid_face,
        )

    def to_hand(self) -> HandConfiguration:
        hand = HandConfiguration(self.dice_count, self.bid_face)
        for index, value in enumerate(self.face_values):
            hand.set_die(index, value)
        return hand


def dump_hand(hand: HandConfiguration) -> str:
    """Serialise a hand to a JSON string."""
    return HandConfigurationModel.from_hand(hand).model_dump_json()


def load_hand(data: str | bytes) -> HandConfiguration:
    """Parse a JSON string into a hand.

    Raises:
        pydantic.ValidationError: If the payload is malformed
    """
    return HandConfigurationModel.model_validate_json(data).to_hand()
