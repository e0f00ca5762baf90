"""Card index decoding for display.

The engine deals flat indices in ``[0, 52)``. A Card is only built when a
player view needs something readable.
"""

from __future__ import annotations

from enum import IntEnum, Enum

DECK_SIZE = 52
RANKS_PER_SUIT = 13


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit order follows index // 13
_SUIT_ORDER = list(Suit)


class Card:
    __slots__ = ("rank", "suit")

    def __init__(self, rank: Rank, suit: Suit) -> None:
        self.rank = rank
        self.suit = suit

    def __repr__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{self.suit.value}"

    @classmethod
    def from_index(cls, index: int) -> Card:
        """``rank = index % 13`` (two first), ``suit = index // 13``."""
        if not 0 <= index < DECK_SIZE:
            raise ValueError(f"Card index out of range: {index}")
        rank = Rank(Rank.TWO + index % RANKS_PER_SUIT)
        suit = _SUIT_ORDER[index // RANKS_PER_SUIT]
        return cls(rank, suit)
