"""Unit tests for GameFairy and GameFairyGateway."""

import logging

import pytest

from gamefairy.adapters.gateway.game_fairy_gateway import GameFairyGateway
from gamefairy.adapters.oracle.game_fairy import GameFairy
from gamefairy.core.errors import GameFairyError, IndeterminateOracleError
from gamefairy.core.game import Game
from gamefairy.core.models import MysticVision


class TestGameFairy:
    """The fairy interprets its visions."""

    def test_defaults_to_tie(self) -> None:
        assert GameFairy().mystic_visions == MysticVision.TIE.value

    def test_tie_is_not_a_win(self) -> None:
        assert GameFairy("tie").proclamation() is False

    def test_win(self) -> None:
        assert GameFairy("win").proclamation() is True

    @pytest.mark.parametrize("visions", ["", "WIN", "lose", "stalemate?"])
    def test_anything_else_is_indeterminate(self, visions: str) -> None:
        with pytest.raises(IndeterminateOracleError) as exc_info:
            GameFairy(visions).proclamation()

        assert exc_info.value.mystic_visions == visions
        assert isinstance(exc_info.value, GameFairyError)

    def test_logs_indeterminate_visions(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            with pytest.raises(IndeterminateOracleError):
                GameFairy("haze").proclamation()

        assert "haze" in caplog.text


class TestGameFairyGateway:
    """The gateway builds a fresh fairy per lookup."""

    def test_returns_game_fairy(self) -> None:
        assert isinstance(GameFairyGateway().get_oracle(), GameFairy)

    def test_builds_fresh_fairy_each_call(self) -> None:
        gateway = GameFairyGateway()
        assert gateway.get_oracle() is not gateway.get_oracle()

    def test_seeds_fairy_with_visions(self) -> None:
        fairy = GameFairyGateway(mystic_visions="win").get_oracle()
        assert fairy.mystic_visions == "win"


class TestRealWiring:
    """Game with the real gateway and fairy, no doubles."""

    def test_tie(self) -> None:
        assert Game(GameFairyGateway("tie")).is_done() is False

    def test_win(self) -> None:
        assert Game(GameFairyGateway("win")).is_done() is True

    def test_indeterminate_propagates_through_game(self) -> None:
        with pytest.raises(IndeterminateOracleError):
            Game(GameFairyGateway("clouded")).is_done()
