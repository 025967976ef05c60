"""
Liar's Odds - Codec Model Tests
"""

import json

import pytest
from pydantic import ValidationError

from liars_odds.codec.models import HandConfigurationModel, dump_hand, load_hand
from liars_odds.engine.hand import HandConfiguration


class TestHandConfigurationModel:
    """Tests for HandConfigurationModel."""

    def test_from_hand(self):
        hand = HandConfiguration.from_values([2, None, 6], bid_face=6)
        model = HandConfigurationModel.from_hand(hand)
        assert model.dice_count == 3
        assert model.face_values == [2, None, 6]
        assert model.bid_face == 6

    def test_to_hand_restores_equal_hand(self):
        hand = HandConfiguration.from_values([1, 1, None, 4], bid_face=4)
        assert HandConfigurationModel.from_hand(hand).to_hand() == hand

    def test_slot_count_must_match(self):
        with pytest.raises(ValidationError, match="expected 3"):
            HandConfigurationModel(dice_count=3, face_values=[1, 2])

    @pytest.mark.parametrize("payload", [
        {"dice_count": 0, "face_values": [], "bid_face": 1},
        {"dice_count": 2, "face_values": [1, 7], "bid_face": 1},
        {"dice_count": 2, "face_values": [1, 2], "bid_face": 0},
    ])
    def test_rejects_invalid_payload(self, payload):
        with pytest.raises(ValidationError):
            HandConfigurationModel.model_validate(payload)


class TestJsonHelpers:
    """Tests for dump_hand / load_hand."""

    def test_dump_keys(self):
        data = json.loads(dump_hand(HandConfiguration.from_values([3, None], bid_face=3)))
        assert data == {"dice_count": 2, "face_values": [3, None], "bid_face": 3}

    def test_load(self):
        hand = load_hand('{"dice_count": 3, "face_values": [5, null, 5], "bid_face": 5}')
        assert hand.count_matching_bid_face() == 2
        assert hand.get_die(1) is None

    def test_load_rejects_bad_json(self):
        with pytest.raises(ValidationError):
            load_hand('{"dice_count": 2}')
