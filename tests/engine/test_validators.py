"""
Liar's Odds - Validator Tests
"""

import pytest

from liars_odds.engine.validators import (
    is_valid_bid,
    is_valid_face,
    is_valid_index,
    is_valid_total_dice,
)


class TestFaceAndIndex:
    """Faces and slot indices must be plain integers in range."""

    @pytest.mark.parametrize("face", [1, 3, 6])
    def test_valid_face(self, face):
        assert is_valid_face(face) is True

    @pytest.mark.parametrize("face", [0, 7, 2.5, 3.0, True, "3", None])
    def test_invalid_face(self, face):
        assert is_valid_face(face) is False

    def test_valid_index(self):
        assert is_valid_index(0, 3) is True
        assert is_valid_index(2, 3) is True

    @pytest.mark.parametrize("index", [-1, 3, 1.5, 1.0, False, "0"])
    def test_invalid_index(self, index):
        assert is_valid_index(index, 3) is False


class TestBidAndTotal:
    """Bid and total checks accept integers only."""

    def test_valid_pair(self):
        assert is_valid_bid(0, 1) is True
        assert is_valid_bid(40, 40) is True

    @pytest.mark.parametrize("bid,n", [(1, 0), (1, 41), (-1, 5), (6, 5), (2.0, 5), (2, 5.0), (True, 5)])
    def test_invalid_pair(self, bid, n):
        assert is_valid_bid(bid, n) is False

    def test_total_respects_custom_limit(self):
        assert is_valid_total_dice(12, max_dice=12) is True
        assert is_valid_total_dice(13, max_dice=12) is False
        assert is_valid_total_dice(12.0, max_dice=12) is False
