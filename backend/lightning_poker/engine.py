"""Transition engine for a single pot-and-two-cards game.

Each operation takes the current :class:`GameState`, checks every
precondition first, then mutates the state in place and returns it. A
rejected operation raises :class:`GameError` and leaves the state untouched.
The engine does no I/O and no locking; callers serialize access per game.
"""

from __future__ import annotations

import logging

from lightning_poker import resolver
from lightning_poker.errors import ErrorCode, GameError
from lightning_poker.models import MAX_PLAYERS, MIN_PLAYERS, Action, Phase
from lightning_poker.shuffler import DeterministicShuffler
from lightning_poker.state import ActionRecord, GameState, PlayerSlot

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Lifecycle
# ------------------------------------------------------------------


def initialize(
    authority: str, buy_in: int, start_quorum: int = MIN_PLAYERS
) -> GameState:
    """Create a game in the lobby with an empty pot."""
    if buy_in < 0:
        raise ValueError("buy_in must be non-negative")
    if not MIN_PLAYERS <= start_quorum <= MAX_PLAYERS:
        raise ValueError(
            f"start_quorum must be between {MIN_PLAYERS} and {MAX_PLAYERS}"
        )
    state = GameState(authority, buy_in, start_quorum=start_quorum)
    logger.info("Game initialized: authority=%s buy_in=%d", authority, buy_in)
    return state


def join(state: GameState, identity: str) -> GameState:
    """Seat ``identity`` and add the buy-in to the pot.

    The game starts on its own once ``start_quorum`` players are seated.
    """
    if state.is_full:
        raise GameError(ErrorCode.GAME_FULL)
    if state.phase != Phase.LOBBY:
        raise GameError(ErrorCode.GAME_ALREADY_STARTED)
    if state.find_seat(identity) is not None:
        raise GameError(ErrorCode.ALREADY_JOINED, identity)

    state.players.append(PlayerSlot(identity, state.buy_in))
    state.pot += state.buy_in
    logger.info("Player joined: %s (total %d)", identity, state.player_count)

    if state.player_count >= state.start_quorum:
        state.phase = Phase.ACTIVE
        state.current_turn = 0
        logger.info("Game started with %d players", state.player_count)
    return state


def deal(state: GameState, caller: str, seed: int, timestamp: int) -> GameState:
    """Assign two cards to every seat. Dealing again replaces all cards."""
    if state.phase != Phase.ACTIVE:
        raise GameError(ErrorCode.INVALID_STATE, "cards can only be dealt in an active game")
    if caller != state.authority:
        raise GameError(ErrorCode.UNAUTHORIZED)

    shuffler = DeterministicShuffler(seed, timestamp)
    for p, (card1, card2) in zip(state.players, shuffler.deal(state.player_count)):
        p.card1 = card1
        p.card2 = card2
        logger.debug("Dealt %s: %d %d", p.identity, card1, card2)

    logger.info("Cards dealt to %d players", state.player_count)
    return state


def play(state: GameState, caller: str, action: int, amount: int = 0) -> GameState:
    """Apply a fold, call or raise for the player whose turn it is.

    Call and raise move chips identically; sizing is up to the caller. The
    turn then passes to the next seat, folded or not.
    """
    if state.phase != Phase.ACTIVE:
        raise GameError(ErrorCode.INVALID_STATE, "game is not active")
    idx = state.find_seat(caller)
    if idx is None:
        raise GameError(ErrorCode.PLAYER_NOT_FOUND, caller)
    if idx != state.current_turn:
        raise GameError(ErrorCode.NOT_YOUR_TURN)
    try:
        move = Action(action)
    except ValueError:
        raise GameError(ErrorCode.INVALID_ACTION, f"unknown action code {action!r}") from None
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise GameError(ErrorCode.INVALID_ACTION, f"amount must be an integer, got {amount!r}")
    if amount < 0:
        raise GameError(ErrorCode.INVALID_ACTION, "amount must be non-negative")

    p = state.players[idx]
    if move == Action.FOLD:
        p.folded = True
        amount = 0
        logger.info("Player %s folded", caller)
    else:
        if amount > p.chips:
            raise GameError(
                ErrorCode.INSUFFICIENT_CHIPS, f"has {p.chips}, tried {amount}"
            )
        p.chips -= amount
        p.bet += amount
        state.pot += amount
        logger.info("Player %s %s %d", caller, move.name.lower(), amount)

    state.history.append(ActionRecord(caller, move, amount))
    state.current_turn = (state.current_turn + 1) % state.player_count
    return state


def end(state: GameState, caller: str) -> GameState:
    """Pay the whole pot to the best non-folded player and finish the game."""
    if state.phase != Phase.ACTIVE:
        raise GameError(ErrorCode.INVALID_STATE, "game is not active")
    if caller != state.authority:
        raise GameError(ErrorCode.UNAUTHORIZED)
    winner_idx = resolver.select_winner(state.players)
    if winner_idx is None:
        raise GameError(ErrorCode.NO_ACTIVE_PLAYERS, "every player has folded")

    logger.debug("Standings: %s", resolver.rank_players(state.players))
    won = state.pot
    state.players[winner_idx].chips += won
    state.pot = 0
    state.winner = winner_idx
    state.phase = Phase.FINISHED

    logger.info(
        "Winner: seat %d (%s) won %d chips",
        winner_idx,
        state.players[winner_idx].identity,
        won,
    )
    return state
