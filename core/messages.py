"""
胜负提示文案

每次调用都独立均匀抽取 (有放回), 不保留任何状态
随机源可注入, 便于测试替换为确定性实现
"""
from typing import Optional, Protocol, Sequence, Tuple
import threading

import numpy as np


WIN_MESSAGES: Tuple[str, ...] = (
    "🎉 Поздравляю! Вы угадали!",
    "🎊 Отлично! Правильный ответ!",
    "✨ Великолепно! Вы победили!",
    "🏆 Браво! Точное попадание!",
    "🎯 Превосходно! Вы угадали!",
)

LOSE_MESSAGES: Tuple[str, ...] = (
    "😔 Не угадали, но не расстраивайтесь!",
    "🎲 В этот раз не повезло, попробуйте еще!",
    "💪 Ничего страшного, удача улыбнется в следующий раз!",
    "🌟 Не переживайте, у вас все получится!",
    "🎮 Попытка не пытка, играем еще!",
)


class RandomSource(Protocol):
    """随机源接口 (与 numpy.random.Generator.integers 兼容)"""

    def integers(self, low: int) -> int:
        """只传一个参数时返回 [0, low) 内的整数"""
        ...


# 每个线程独立的默认随机源
_local = threading.local()


def _thread_rng() -> np.random.Generator:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


class MessagePicker:
    """
    提示文案选择器

    Args:
        rng: 随机源, None 表示使用当前线程的默认 Generator
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self._rng = rng

    @property
    def rng(self) -> RandomSource:
        return self._rng if self._rng is not None else _thread_rng()

    def _pick(self, messages: Sequence[str]) -> str:
        index = int(self.rng.integers(len(messages)))
        return messages[index]

    def win_message(self) -> str:
        """随机获胜文案"""
        return self._pick(WIN_MESSAGES)

    def lose_message(self) -> str:
        """随机失败文案"""
        return self._pick(LOSE_MESSAGES)

    def message_for(self, won: bool) -> str:
        return self.win_message() if won else self.lose_message()


def win_message(rng: Optional[RandomSource] = None) -> str:
    """随机获胜文案"""
    return MessagePicker(rng).win_message()


def lose_message(rng: Optional[RandomSource] = None) -> str:
    """随机失败文案"""
    return MessagePicker(rng).lose_message()
