"""Placeholder showdown scoring.

A player's score is the plain sum of their two card indices. This is not a
poker hand ranking.
"""

from __future__ import annotations

from typing import Optional, Sequence

from lightning_poker.state import PlayerSlot


def score(slot: PlayerSlot) -> int:
    """Sum of both card indices; an undealt card counts as zero."""
    return (slot.card1 or 0) + (slot.card2 or 0)


def select_winner(players: Sequence[PlayerSlot]) -> Optional[int]:
    """Seat index of the best non-folded player, or None if everyone folded.

    Only a strictly greater score replaces the current leader, so ties go to
    the lowest seat.
    """
    winner_idx: Optional[int] = None
    best_score = -1
    for i, p in enumerate(players):
        if p.folded:
            continue
        s = score(p)
        if s > best_score:
            best_score = s
            winner_idx = i
    return winner_idx


def rank_players(players: Sequence[PlayerSlot]) -> list[tuple[int, int]]:
    """(seat, score) for non-folded players, best first, seat order on ties."""
    ranked = [(i, score(p)) for i, p in enumerate(players) if not p.folded]
    ranked.sort(key=lambda t: (-t[1], t[0]))
    return ranked
