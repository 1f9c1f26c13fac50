"""
回合定义

使用不可变数据结构，支持:
- 哈希
- 线程安全
- 易于序列化
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .choices import Choice, DuelOutcome, GameMode
from .messages import MessagePicker
from .rules import RuleEngine


@dataclass(frozen=True)
class Bet:
    """
    一次押注

    Attributes:
        mode: 游戏模式
        choice: 押注选项, 类型必须与模式一致 (猜点数为 int)
    """
    mode: GameMode
    choice: Choice

    def __post_init__(self):
        expected = self.mode.choice_type
        # bool 是 int 的子类, 猜点数时需单独排除
        if not isinstance(self.choice, expected) or isinstance(self.choice, bool):
            raise ValueError(
                f"Invalid choice {self.choice!r} for mode {self.mode.value}, "
                f"expected {expected.__name__}"
            )

    @classmethod
    def parse(cls, mode: GameMode, raw: str) -> 'Bet':
        """
        从文本构造押注

        Args:
            mode: 游戏模式
            raw: 文本, 如 "even", "high", "yes", "4"

        Returns:
            Bet 实例
        """
        text = raw.strip().lower()
        if mode == GameMode.EXACT_NUMBER:
            try:
                return cls(mode=mode, choice=int(text))
            except ValueError:
                raise ValueError(f"Invalid number: {raw!r}") from None
        try:
            return cls(mode=mode, choice=mode.choice_type(text))
        except ValueError:
            valid = ", ".join(c.value for c in mode.choices())
            raise ValueError(
                f"Invalid choice {raw!r} for mode {mode.value}. Valid: {valid}"
            ) from None

    def to_dict(self) -> Dict[str, Any]:
        choice = self.choice if isinstance(self.choice, int) else self.choice.value
        return {"mode": self.mode.value, "choice": choice}


@dataclass(frozen=True)
class RoundResult:
    """
    单回合结果

    Attributes:
        bet: 押注
        die: 骰子点数
        won: 玩家是否获胜
        message: 胜负提示文案
    """
    bet: Bet
    die: int
    won: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.bet.to_dict(),
            "die": self.die,
            "won": self.won,
            "message": self.message,
        }


@dataclass(frozen=True)
class DuelResult:
    """双骰比较结果 (bot 对 user)"""
    bot_die: int
    user_die: int
    outcome: DuelOutcome

    @property
    def text(self) -> str:
        return self.outcome.text


def resolve_round(
    bet: Bet,
    die: int,
    picker: Optional[MessagePicker] = None,
) -> RoundResult:
    """
    结算一个回合

    Args:
        bet: 押注
        die: 骰子点数 (由外部掷出, 不做范围校验)
        picker: 文案选择器, None 表示使用默认随机源

    Returns:
        回合结果
    """
    picker = picker or MessagePicker()
    won = RuleEngine.check(bet.mode, die, bet.choice)
    return RoundResult(bet=bet, die=die, won=won, message=picker.message_for(won))


def resolve_duel(bot_die: int, user_die: int) -> DuelResult:
    """结算双骰比较"""
    return DuelResult(
        bot_die=bot_die,
        user_die=user_die,
        outcome=RuleEngine.compare_dice(bot_die, user_die),
    )
