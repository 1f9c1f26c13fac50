"""
评估指标

定义和计算各种评估指标
"""
from typing import Dict, List, Optional
from collections import defaultdict
import numpy as np

from core.choices import Choice, GameMode
from core.rules import RuleEngine
from core.state import RoundResult


def _choice_key(choice: Choice) -> str:
    return str(choice) if isinstance(choice, int) else choice.value


class MetricsCollector:
    """
    指标收集器

    收集回合结果并按模式计算指标
    """

    def __init__(self):
        self.rounds: List[RoundResult] = []
        self._by_mode: Dict[GameMode, List[RoundResult]] = defaultdict(list)

    def add_round(self, result: RoundResult):
        """添加回合结果"""
        self.rounds.append(result)
        self._by_mode[result.bet.mode].append(result)

    def compute_metrics(self, mode: Optional[GameMode] = None) -> Dict[str, float]:
        """
        计算指标

        Args:
            mode: 指定模式，None 表示全局

        Returns:
            指标字典
        """
        rounds = self.rounds if mode is None else self._by_mode[mode]
        if not rounds:
            return {}

        metrics = {
            "rounds": len(rounds),
            "win_rate": float(np.mean([r.won for r in rounds])),
            "avg_die": float(np.mean([r.die for r in rounds])),
        }
        if mode is not None:
            # 理论胜率按实际押注分布加权
            metrics["expected_win_rate"] = float(np.mean([
                RuleEngine.win_probability(r.bet.mode, r.bet.choice) for r in rounds
            ]))
        return metrics

    def choice_win_rates(self, mode: GameMode) -> Dict[str, float]:
        """各押注选项的实际胜率"""
        grouped: Dict[str, List[bool]] = defaultdict(list)
        for r in self._by_mode[mode]:
            grouped[_choice_key(r.bet.choice)].append(r.won)
        return {k: float(np.mean(v)) for k, v in grouped.items()}

    def reset(self):
        """重置"""
        self.rounds.clear()
        self._by_mode.clear()


class RunningStats:
    """
    运行时统计

    在线计算均值和方差
    """

    def __init__(self):
        self.n = 0
        self.mean = 0.0
        self.M2 = 0.0
        self.min_val = float('inf')
        self.max_val = float('-inf')

    def update(self, x: float):
        """更新统计"""
        self.n += 1
        delta = x - self.mean
        self.mean += delta / self.n
        delta2 = x - self.mean
        self.M2 += delta * delta2
        self.min_val = min(self.min_val, x)
        self.max_val = max(self.max_val, x)

    @property
    def variance(self) -> float:
        """方差"""
        if self.n < 2:
            return 0.0
        return self.M2 / (self.n - 1)

    @property
    def std(self) -> float:
        """标准差"""
        return float(np.sqrt(self.variance))

    def to_dict(self) -> Dict[str, float]:
        """转换为字典"""
        return {
            "count": self.n,
            "mean": self.mean,
            "std": self.std,
            "min": self.min_val if self.n > 0 else 0.0,
            "max": self.max_val if self.n > 0 else 0.0,
        }


def theoretical_win_rate(mode: GameMode, choice: Choice) -> float:
    """
    公平六面骰下的理论胜率

    Args:
        mode: 游戏模式
        choice: 押注选项

    Returns:
        获胜概率
    """
    return RuleEngine.win_probability(mode, choice)


def win_rate_table() -> Dict[str, Dict[str, float]]:
    """所有模式、所有选项的理论胜率表"""
    return {
        mode.value: {
            _choice_key(choice): theoretical_win_rate(mode, choice)
            for choice in mode.choices()
        }
        for mode in GameMode
    }
