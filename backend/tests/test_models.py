"""Tests for request/config models, error types and environment config."""

import importlib

import pytest
from pydantic import ValidationError

from lightning_poker import config
from lightning_poker.errors import ERROR_MESSAGES, ErrorCode, GameError
from lightning_poker.models import Action, DealRequest, GameConfig, PlayRequest


class TestGameConfig:
    def test_defaults(self):
        c = GameConfig()
        assert c.buy_in == 100
        assert c.start_quorum == 2

    def test_negative_buy_in(self):
        with pytest.raises(ValidationError):
            GameConfig(buy_in=-1)

    @pytest.mark.parametrize("quorum", [0, 1, 7])
    def test_quorum_bounds(self, quorum):
        with pytest.raises(ValidationError):
            GameConfig(start_quorum=quorum)


class TestPlayRequest:
    def test_action_from_code(self):
        req = PlayRequest(action=2, amount=40)
        assert req.action == Action.RAISE

    def test_unknown_action_code(self):
        with pytest.raises(ValidationError):
            PlayRequest(action=5, amount=1)

    def test_negative_amount(self):
        with pytest.raises(ValidationError):
            PlayRequest(action=Action.CALL, amount=-1)

    def test_fold_with_amount(self):
        with pytest.raises(ValidationError, match="fold does not take an amount"):
            PlayRequest(action=Action.FOLD, amount=10)

    def test_fold_default_amount(self):
        assert PlayRequest(action=Action.FOLD).amount == 0


class TestDealRequest:
    def test_seed_non_negative(self):
        with pytest.raises(ValidationError):
            DealRequest(seed=-3)


class TestGameError:
    def test_is_value_error(self):
        assert issubclass(GameError, ValueError)

    def test_message_and_detail(self):
        e = GameError(ErrorCode.PLAYER_NOT_FOUND, "ghost")
        assert str(e) == "Player not found: ghost"
        assert e.code == ErrorCode.PLAYER_NOT_FOUND

    def test_every_code_has_message(self):
        assert set(ERROR_MESSAGES) == set(ErrorCode)


class TestEnvConfig:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("POKER_DEFAULT_BUY_IN", "500")
        monkeypatch.setenv("POKER_START_QUORUM", "4")
        try:
            importlib.reload(config)
            c = config.default_game_config()
            assert c.buy_in == 500
            assert c.start_quorum == 4
        finally:
            monkeypatch.undo()
            importlib.reload(config)

    def test_invalid_env_quorum(self, monkeypatch):
        monkeypatch.setattr(config, "START_QUORUM", 9)
        with pytest.raises(ValidationError):
            config.default_game_config()
