"""Tests for card index decoding."""

import pytest
from lightning_poker.cards import Card, Rank, Suit, DECK_SIZE


# ── Card basics ──────────────────────────────────────────────────────

class TestCard:
    def test_creation(self):
        c = Card(Rank.ACE, Suit.SPADES)
        assert c.rank == Rank.ACE
        assert c.suit == Suit.SPADES

    def test_repr(self):
        assert repr(Card(Rank.ACE, Suit.HEARTS)) == "Ah"
        assert repr(Card(Rank.TEN, Suit.CLUBS)) == "Tc"
        assert repr(Card(Rank.TWO, Suit.DIAMONDS)) == "2d"


# ── Index mapping ────────────────────────────────────────────────────

class TestIndex:
    def test_first_and_last(self):
        assert repr(Card.from_index(0)) == "2h"
        assert repr(Card.from_index(51)) == "As"

    def test_rank_is_index_mod_13(self):
        assert Card.from_index(19).rank == Rank.EIGHT
        assert Card.from_index(25).rank == Rank.ACE

    def test_suit_is_index_div_13(self):
        assert Card.from_index(12).suit == Suit.HEARTS
        assert Card.from_index(13).suit == Suit.DIAMONDS
        assert Card.from_index(26).suit == Suit.CLUBS
        assert Card.from_index(39).suit == Suit.SPADES

    def test_every_index_distinct(self):
        names = {repr(Card.from_index(i)) for i in range(DECK_SIZE)}
        assert len(names) == DECK_SIZE

    @pytest.mark.parametrize("bad", [-1, 52, 100])
    def test_out_of_range(self, bad):
        with pytest.raises(ValueError, match="out of range"):
            Card.from_index(bad)
