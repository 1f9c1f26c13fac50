"""
Core Layer - 纯游戏逻辑 (无模拟依赖)

Modules:
    choices: 押注选项与游戏模式
    rules: 规则引擎
    messages: 胜负提示文案
    state: 押注与回合结果
"""
from .choices import (
    DIE_MIN,
    DIE_MAX,
    DIE_FACES,
    EvenOddChoice,
    HighLowChoice,
    GuessOneChoice,
    GameMode,
    DuelOutcome,
)

from .rules import RuleEngine

from .messages import (
    WIN_MESSAGES,
    LOSE_MESSAGES,
    MessagePicker,
    win_message,
    lose_message,
)

from .state import (
    Bet,
    RoundResult,
    DuelResult,
    resolve_round,
    resolve_duel,
)

__all__ = [
    # choices
    "DIE_MIN",
    "DIE_MAX",
    "DIE_FACES",
    "EvenOddChoice",
    "HighLowChoice",
    "GuessOneChoice",
    "GameMode",
    "DuelOutcome",
    # rules
    "RuleEngine",
    # messages
    "WIN_MESSAGES",
    "LOSE_MESSAGES",
    "MessagePicker",
    "win_message",
    "lose_message",
    # state
    "Bet",
    "RoundResult",
    "DuelResult",
    "resolve_round",
    "resolve_duel",
]
