"""押注与回合结算测试"""
import pytest
import numpy as np

from core.choices import (
    DuelOutcome,
    EvenOddChoice,
    GameMode,
    GuessOneChoice,
    HighLowChoice,
)
from core.messages import LOSE_MESSAGES, WIN_MESSAGES, MessagePicker
from core.state import Bet, DuelResult, RoundResult, resolve_duel, resolve_round


class TestBet:
    """Bet 测试"""

    def test_create(self):
        bet = Bet(GameMode.HIGH_LOW, HighLowChoice.HIGH)
        assert bet.mode == GameMode.HIGH_LOW
        assert bet.choice == HighLowChoice.HIGH

    def test_mismatched_choice(self):
        with pytest.raises(ValueError):
            Bet(GameMode.EVEN_ODD, HighLowChoice.HIGH)
        with pytest.raises(ValueError):
            Bet(GameMode.EXACT_NUMBER, GuessOneChoice.YES)
        with pytest.raises(ValueError):
            Bet(GameMode.GUESS_ONE, 1)

    def test_bool_is_not_a_guess(self):
        with pytest.raises(ValueError):
            Bet(GameMode.EXACT_NUMBER, True)

    def test_exact_number_accepts_any_int(self):
        # 范围不校验
        assert Bet(GameMode.EXACT_NUMBER, 9).choice == 9

    def test_immutable(self):
        bet = Bet(GameMode.EVEN_ODD, EvenOddChoice.ODD)
        with pytest.raises(AttributeError):
            bet.choice = EvenOddChoice.EVEN

    def test_hashable(self):
        a = Bet(GameMode.EVEN_ODD, EvenOddChoice.ODD)
        b = Bet(GameMode.EVEN_ODD, EvenOddChoice.ODD)
        assert a == b
        assert len({a, b}) == 1


class TestBetParse:
    """Bet.parse 测试"""

    def test_enum_modes(self):
        assert Bet.parse(GameMode.EVEN_ODD, "Even").choice == EvenOddChoice.EVEN
        assert Bet.parse(GameMode.HIGH_LOW, " low ").choice == HighLowChoice.LOW
        assert Bet.parse(GameMode.GUESS_ONE, "no").choice == GuessOneChoice.NO

    def test_exact_number(self):
        assert Bet.parse(GameMode.EXACT_NUMBER, "4").choice == 4

    def test_invalid(self):
        with pytest.raises(ValueError, match="Valid: even, odd"):
            Bet.parse(GameMode.EVEN_ODD, "high")
        with pytest.raises(ValueError):
            Bet.parse(GameMode.EXACT_NUMBER, "four")

    def test_to_dict(self):
        assert Bet.parse(GameMode.EXACT_NUMBER, "2").to_dict() == {
            "mode": "exact_number", "choice": 2,
        }
        assert Bet(GameMode.GUESS_ONE, GuessOneChoice.YES).to_dict() == {
            "mode": "guess_one", "choice": "yes",
        }


class TestResolveRound:
    """resolve_round 测试"""

    def test_win(self):
        bet = Bet(GameMode.EVEN_ODD, EvenOddChoice.EVEN)
        result = resolve_round(bet, 4, MessagePicker(np.random.default_rng(0)))
        assert isinstance(result, RoundResult)
        assert result.won
        assert result.die == 4
        assert result.message in WIN_MESSAGES

    def test_lose(self):
        bet = Bet(GameMode.GUESS_ONE, GuessOneChoice.YES)
        result = resolve_round(bet, 6)
        assert not result.won
        assert result.message in LOSE_MESSAGES

    def test_out_of_range_die(self):
        bet = Bet(GameMode.HIGH_LOW, HighLowChoice.LOW)
        assert resolve_round(bet, 0).won
        assert not resolve_round(bet, 7).won

    def test_to_dict(self):
        bet = Bet(GameMode.EXACT_NUMBER, 3)
        d = resolve_round(bet, 3).to_dict()
        assert d["mode"] == "exact_number"
        assert d["choice"] == 3
        assert d["die"] == 3
        assert d["won"] is True
        assert d["message"] in WIN_MESSAGES


class TestResolveDuel:
    """resolve_duel 测试"""

    def test_outcomes(self):
        assert resolve_duel(5, 3).outcome == DuelOutcome.FIRST_WINS
        assert resolve_duel(2, 4).outcome == DuelOutcome.SECOND_WINS
        assert resolve_duel(3, 3).outcome == DuelOutcome.TIE

    def test_fields(self):
        duel = resolve_duel(6, 1)
        assert isinstance(duel, DuelResult)
        assert duel.bot_die == 6
        assert duel.user_die == 1
        assert duel.text == DuelOutcome.FIRST_WINS.text
