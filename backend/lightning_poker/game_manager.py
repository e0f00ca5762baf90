"""Game manager: serialized access to stored games.

The engine trusts whoever calls it. This layer is that caller: it checks the
actor through an injected verifier, loads the game from an injected store,
applies exactly one transition under a per-game lock and saves the result.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Callable, Optional, Protocol

from lightning_poker import engine
from lightning_poker.config import default_game_config
from lightning_poker.errors import ErrorCode, GameError
from lightning_poker.models import DealRequest, GameConfig, GameView, PlayRequest
from lightning_poker.state import GameState

logger = logging.getLogger(__name__)

GAME_SEED = "poker_game"


def game_key(authority: str) -> str:
    """Storage key for the game owned by ``authority``."""
    return f"{GAME_SEED}:{authority}"


class GameExistsError(ValueError):
    pass


class GameNotFoundError(ValueError):
    pass


# ------------------------------------------------------------------
# Capabilities
# ------------------------------------------------------------------


class GameStore(Protocol):
    async def create(self, key: str, data: dict[str, Any]) -> None: ...

    async def load(self, key: str) -> dict[str, Any]: ...

    async def save(self, key: str, data: dict[str, Any]) -> None: ...


class IdentityVerifier(Protocol):
    def verify(self, identity: str, credential: Optional[str]) -> bool: ...


class MemoryGameStore:
    """Keeps each game as a JSON string, keyed like the redis layout."""

    def __init__(self) -> None:
        self._games: dict[str, str] = {}

    async def create(self, key: str, data: dict[str, Any]) -> None:
        if key in self._games:
            raise GameExistsError(f"Game already exists: {key}")
        self._games[key] = json.dumps(data)

    async def load(self, key: str) -> dict[str, Any]:
        raw = self._games.get(key)
        if raw is None:
            raise GameNotFoundError(f"Game not found: {key}")
        return json.loads(raw)

    async def save(self, key: str, data: dict[str, Any]) -> None:
        if key not in self._games:
            raise GameNotFoundError(f"Game not found: {key}")
        self._games[key] = json.dumps(data)


class TrustedCallerVerifier:
    """Accepts every caller; authentication happened upstream."""

    def verify(self, identity: str, credential: Optional[str]) -> bool:
        return True


def wall_clock() -> int:
    return int(time.time())


# ------------------------------------------------------------------
# Manager
# ------------------------------------------------------------------


class GameManager:
    """Applies engine transitions to stored games, one at a time per game."""

    def __init__(
        self,
        store: Optional[GameStore] = None,
        verifier: Optional[IdentityVerifier] = None,
        clock: Callable[[], int] = wall_clock,
    ) -> None:
        self.store: GameStore = store if store is not None else MemoryGameStore()
        self.verifier: IdentityVerifier = (
            verifier if verifier is not None else TrustedCallerVerifier()
        )
        self.clock = clock
        self._locks: dict[str, asyncio.Lock] = {}

    def _get_lock(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    def _verify(self, identity: str, credential: Optional[str]) -> None:
        if not self.verifier.verify(identity, credential):
            logger.warning("Rejected unverified caller %s", identity)
            raise GameError(ErrorCode.UNAUTHORIZED, "identity could not be verified")

    async def _apply(
        self, authority: str, transition: Callable[[GameState], GameState]
    ) -> GameState:
        key = game_key(authority)
        async with self._get_lock(key):
            state = GameState.from_dict(await self.store.load(key))
            try:
                state = transition(state)
            except GameError as e:
                logger.warning("Rejected action on %s: %s", key, e)
                raise
            await self.store.save(key, state.to_dict())
            return state

    async def create_game(
        self,
        authority: str,
        config: Optional[GameConfig] = None,
        credential: Optional[str] = None,
    ) -> GameState:
        """Create a game keyed by its authority. Raises GameExistsError on reuse."""
        self._verify(authority, credential)
        config = config or default_game_config()
        key = game_key(authority)
        async with self._get_lock(key):
            state = engine.initialize(authority, config.buy_in, config.start_quorum)
            await self.store.create(key, state.to_dict())
        return state

    async def join_game(
        self, authority: str, player: str, credential: Optional[str] = None
    ) -> GameState:
        self._verify(player, credential)
        return await self._apply(authority, lambda s: engine.join(s, player))

    async def deal_cards(
        self,
        authority: str,
        caller: str,
        req: DealRequest,
        credential: Optional[str] = None,
    ) -> GameState:
        self._verify(caller, credential)
        timestamp = self.clock()
        return await self._apply(
            authority, lambda s: engine.deal(s, caller, req.seed, timestamp)
        )

    async def play_action(
        self,
        authority: str,
        player: str,
        req: PlayRequest,
        credential: Optional[str] = None,
    ) -> GameState:
        self._verify(player, credential)
        return await self._apply(
            authority, lambda s: engine.play(s, player, req.action, req.amount)
        )

    async def end_game(
        self, authority: str, caller: str, credential: Optional[str] = None
    ) -> GameState:
        self._verify(caller, credential)
        state = await self._apply(authority, lambda s: engine.end(s, caller))
        # A finished game accepts no further transitions
        self._locks.pop(game_key(authority), None)
        return state

    async def get_view(
        self, authority: str, viewer: str, credential: Optional[str] = None
    ) -> GameView:
        """Read-only snapshot for ``viewer``; hole cards are private to their owner."""
        self._verify(viewer, credential)
        state = GameState.from_dict(await self.store.load(game_key(authority)))
        return state.get_player_view(viewer)
