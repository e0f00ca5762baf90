"""Authoritative game record: configuration, pot, seats and turn pointer.

All mutation goes through :mod:`lightning_poker.engine`. This module only
holds data, encodes it for storage, and checks the structural invariants.
"""

from __future__ import annotations

from typing import Any, Optional

from lightning_poker.cards import DECK_SIZE, Card
from lightning_poker.models import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    Action,
    GameView,
    Phase,
    SlotView,
)


class PlayerSlot:
    """One occupied seat."""

    def __init__(self, identity: str, chips: int) -> None:
        self.identity = identity
        self.chips = chips
        self.bet: int = 0
        self.folded: bool = False
        self.card1: Optional[int] = None
        self.card2: Optional[int] = None

    @property
    def has_cards(self) -> bool:
        return self.card1 is not None and self.card2 is not None

    def cards(self) -> list[Card]:
        if not self.has_cards:
            return []
        return [Card.from_index(self.card1), Card.from_index(self.card2)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "identity": self.identity,
            "chips": self.chips,
            "bet": self.bet,
            "folded": self.folded,
            "card1": self.card1,
            "card2": self.card2,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerSlot:
        slot = cls(data["identity"], data["chips"])
        slot.bet = data.get("bet", 0)
        slot.folded = data.get("folded", False)
        slot.card1 = data.get("card1")
        slot.card2 = data.get("card2")
        return slot


class ActionRecord:
    """Records a single accepted play."""

    def __init__(self, identity: str, action: Action, amount: int) -> None:
        self.identity = identity
        self.action = action
        self.amount = amount

    def to_dict(self) -> dict[str, Any]:
        return {
            "identity": self.identity,
            "action": self.action.name.lower(),
            "amount": self.amount,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ActionRecord:
        return cls(data["identity"], Action[data["action"].upper()], data["amount"])


class GameState:
    """A single game table."""

    def __init__(
        self,
        authority: str,
        buy_in: int,
        start_quorum: int = MIN_PLAYERS,
    ) -> None:
        self.authority = authority
        self.buy_in = buy_in
        self.start_quorum = start_quorum
        self.pot: int = 0
        self.phase: Phase = Phase.LOBBY
        self.players: list[PlayerSlot] = []
        self.current_turn: int = 0
        self.winner: Optional[int] = None
        self.history: list[ActionRecord] = []

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def is_full(self) -> bool:
        return self.player_count >= MAX_PLAYERS

    def find_seat(self, identity: str) -> Optional[int]:
        for i, p in enumerate(self.players):
            if p.identity == identity:
                return i
        return None

    def check_invariants(self) -> None:
        """Raise ValueError if the record is structurally inconsistent."""
        if not 0 <= self.player_count <= MAX_PLAYERS:
            raise ValueError(f"too many seats: {self.player_count}")
        identities = [p.identity for p in self.players]
        if len(set(identities)) != len(identities):
            raise ValueError("duplicate identity")
        if not MIN_PLAYERS <= self.start_quorum <= MAX_PLAYERS:
            raise ValueError(f"start_quorum out of range: {self.start_quorum}")
        if self.phase == Phase.ACTIVE and not 0 <= self.current_turn < self.player_count:
            raise ValueError(f"turn out of range: {self.current_turn}")
        for p in self.players:
            if p.chips < 0:
                raise ValueError(f"negative chips for {p.identity}")
            for card in (p.card1, p.card2):
                if card is not None and not 0 <= card < DECK_SIZE:
                    raise ValueError(f"card out of range for {p.identity}: {card}")
        if self.phase != Phase.FINISHED:
            contributed = self.buy_in * self.player_count + sum(
                p.bet for p in self.players
            )
            if self.pot != contributed:
                raise ValueError("pot does not match contributions")
        elif self.pot != 0:
            raise ValueError("pot not paid out")
        elif self.winner is None or not 0 <= self.winner < self.player_count:
            raise ValueError(f"winner out of range: {self.winner}")

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def get_player_view(self, viewer: str) -> GameView:
        """State as seen by ``viewer``; other players' cards stay hidden."""
        reveal_all = self.phase == Phase.FINISHED
        seats = []
        for i, p in enumerate(self.players):
            visible = p.has_cards and (reveal_all or p.identity == viewer)
            seats.append(
                SlotView(
                    seat=i,
                    identity=p.identity,
                    chips=p.chips,
                    bet=p.bet,
                    folded=p.folded,
                    cards=[repr(c) for c in p.cards()] if visible else None,
                    score=p.card1 + p.card2 if visible else None,
                )
            )
        return GameView(
            authority=self.authority,
            buy_in=self.buy_in,
            pot=self.pot,
            phase=self.phase,
            player_count=self.player_count,
            current_turn=self.current_turn if self.phase == Phase.ACTIVE else None,
            players=seats,
            winner=self.winner,
        )

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "authority": self.authority,
            "buy_in": self.buy_in,
            "start_quorum": self.start_quorum,
            "pot": self.pot,
            "phase": self.phase.value,
            "players": [p.to_dict() for p in self.players],
            "current_turn": self.current_turn,
            "winner": self.winner,
            "history": [r.to_dict() for r in self.history],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        state = cls(
            authority=data["authority"],
            buy_in=data["buy_in"],
            start_quorum=data.get("start_quorum", MIN_PLAYERS),
        )
        state.pot = data["pot"]
        state.phase = Phase(data["phase"])
        state.players = [PlayerSlot.from_dict(p) for p in data.get("players", [])]
        state.current_turn = data.get("current_turn", 0)
        state.winner = data.get("winner")
        state.history = [ActionRecord.from_dict(r) for r in data.get("history", [])]
        state.check_invariants()
        return state
