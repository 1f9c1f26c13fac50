"""
选项与游戏模式定义

四种押注玩法:
- 单双 (even/odd)
- 大小 (high/low, 4-6 为大, 1-3 为小)
- 猜点数 (exact number)
- 猜一点 (guess one)

以及双骰比大小 (duel) 的结果标签
"""
from enum import Enum
from typing import Tuple, Union


# 骰子点数范围 (规则层不校验, 仅作约定)
DIE_MIN = 1
DIE_MAX = 6
DIE_FACES: Tuple[int, ...] = tuple(range(DIE_MIN, DIE_MAX + 1))


class EvenOddChoice(Enum):
    """单双押注"""
    EVEN = "even"  # 双
    ODD = "odd"    # 单


class HighLowChoice(Enum):
    """大小押注"""
    HIGH = "high"  # 大 (4-6)
    LOW = "low"    # 小 (1-3)


class GuessOneChoice(Enum):
    """猜一点押注"""
    YES = "yes"  # 会出 1 点
    NO = "no"    # 不会出 1 点


Choice = Union[EvenOddChoice, HighLowChoice, GuessOneChoice, int]


class GameMode(Enum):
    """游戏模式"""
    EVEN_ODD = "even_odd"
    HIGH_LOW = "high_low"
    EXACT_NUMBER = "exact_number"
    GUESS_ONE = "guess_one"

    def choices(self) -> Tuple[Choice, ...]:
        """该模式下所有可选项 (顺序固定, 用作动作索引)"""
        if self == GameMode.EXACT_NUMBER:
            return DIE_FACES
        return tuple(_MODE_TO_CHOICE_TYPE[self])

    @property
    def choice_type(self) -> type:
        return _MODE_TO_CHOICE_TYPE[self]


_MODE_TO_CHOICE_TYPE = {
    GameMode.EVEN_ODD: EvenOddChoice,
    GameMode.HIGH_LOW: HighLowChoice,
    GameMode.EXACT_NUMBER: int,
    GameMode.GUESS_ONE: GuessOneChoice,
}


class DuelOutcome(Enum):
    """
    双骰比大小结果

    第一个骰子属于电脑 (bot), 第二个属于玩家 (user)
    """
    FIRST_WINS = "first_wins"
    SECOND_WINS = "second_wins"
    TIE = "tie"

    @property
    def text(self) -> str:
        """展示文本"""
        return DUEL_OUTCOME_TEXT[self]


DUEL_OUTCOME_TEXT = {
    DuelOutcome.FIRST_WINS: "🤖 Компьютер победил!",
    DuelOutcome.SECOND_WINS: "🎉 Пользователь победил!",
    DuelOutcome.TIE: "🤝 Ничья!",
}
