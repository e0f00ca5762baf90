"""Seeded card assignment.

A Lehmer (Park-Miller) generator over unsigned 64-bit arithmetic. It is not
cryptographically secure: anyone who knows the seed and the timestamp can
reproduce every hand.
"""

from __future__ import annotations

from lightning_poker.cards import DECK_SIZE

MULTIPLIER = 48271
MODULUS = 2147483647  # 2**31 - 1
_U64_MASK = (1 << 64) - 1


class DeterministicShuffler:
    """Stream of card indices seeded from ``seed + timestamp``."""

    def __init__(self, seed: int, timestamp: int) -> None:
        # Both inputs are treated as u64; the sum wraps.
        self.state = (seed + timestamp) & _U64_MASK

    def advance(self) -> int:
        self.state = ((self.state * MULTIPLIER) & _U64_MASK) % MODULUS
        return self.state

    def next_card(self) -> int:
        """Card index for the current state, then advance."""
        card = self.state % DECK_SIZE
        self.advance()
        return card

    def deal_pair(self) -> tuple[int, int]:
        card1 = self.next_card()
        card2 = self.next_card()
        return card1, card2

    def deal(self, n_players: int) -> list[tuple[int, int]]:
        """Two cards for each of ``n_players`` seats, in seat order.

        Duplicates are possible both across and within seats.
        """
        return [self.deal_pair() for _ in range(n_players)]
