"""Environment-driven defaults for new games."""

from __future__ import annotations

import os

from lightning_poker.models import MIN_PLAYERS, GameConfig

DEFAULT_BUY_IN = int(os.getenv("POKER_DEFAULT_BUY_IN", "100"))
START_QUORUM = int(os.getenv("POKER_START_QUORUM", str(MIN_PLAYERS)))


def default_game_config() -> GameConfig:
    """Validated config built from the environment defaults."""
    return GameConfig(buy_in=DEFAULT_BUY_IN, start_quorum=START_QUORUM)
