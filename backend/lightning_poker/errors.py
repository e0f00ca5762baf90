"""Game rule violations raised by the transition engine."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    GAME_FULL = "game_full"
    GAME_ALREADY_STARTED = "game_already_started"
    ALREADY_JOINED = "already_joined"
    INVALID_STATE = "invalid_state"
    PLAYER_NOT_FOUND = "player_not_found"
    NOT_YOUR_TURN = "not_your_turn"
    UNAUTHORIZED = "unauthorized"
    INVALID_ACTION = "invalid_action"
    INSUFFICIENT_CHIPS = "insufficient_chips"
    NO_ACTIVE_PLAYERS = "no_active_players"


ERROR_MESSAGES = {
    ErrorCode.GAME_FULL: "Game is full",
    ErrorCode.GAME_ALREADY_STARTED: "Game already started",
    ErrorCode.ALREADY_JOINED: "Player already joined",
    ErrorCode.INVALID_STATE: "Invalid game state",
    ErrorCode.PLAYER_NOT_FOUND: "Player not found",
    ErrorCode.NOT_YOUR_TURN: "Not your turn",
    ErrorCode.UNAUTHORIZED: "Unauthorized",
    ErrorCode.INVALID_ACTION: "Invalid action",
    ErrorCode.INSUFFICIENT_CHIPS: "Insufficient chips",
    ErrorCode.NO_ACTIVE_PLAYERS: "No active players",
}


class GameError(ValueError):
    """A rejected transition. Nothing was mutated when this is raised."""

    def __init__(self, code: ErrorCode, detail: str = "") -> None:
        self.code = code
        self.detail = detail
        message = ERROR_MESSAGES[code]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
