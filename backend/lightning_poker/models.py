"""Pydantic models for game configuration, action payloads and player views."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

MIN_PLAYERS = 2
MAX_PLAYERS = 6


class Phase(str, Enum):
    LOBBY = "lobby"
    ACTIVE = "active"
    FINISHED = "finished"


class Action(IntEnum):
    """Wire codes for a player's move."""

    FOLD = 0
    CALL = 1
    RAISE = 2


# --- Request models ---


class GameConfig(BaseModel):
    buy_in: int = Field(default=100, ge=0)
    start_quorum: int = Field(default=MIN_PLAYERS, ge=MIN_PLAYERS, le=MAX_PLAYERS)


class DealRequest(BaseModel):
    seed: int = Field(..., ge=0)


class PlayRequest(BaseModel):
    action: Action
    amount: int = Field(default=0, ge=0)

    @field_validator("amount")
    @classmethod
    def _fold_moves_no_chips(cls, v: int, info: ValidationInfo) -> int:
        if info.data.get("action") == Action.FOLD and v != 0:
            raise ValueError("fold does not take an amount")
        return v


# --- Response / view models ---


class SlotView(BaseModel):
    """One seat as seen by a particular viewer."""

    seat: int
    identity: str
    chips: int
    bet: int
    folded: bool
    cards: Optional[list[str]] = None  # hidden unless own seat or game over
    score: Optional[int] = None


class GameView(BaseModel):
    authority: str
    buy_in: int
    pot: int
    phase: Phase
    player_count: int
    current_turn: Optional[int] = None
    players: list[SlotView]
    winner: Optional[int] = None
