"""
奖励函数

支持两种奖励设计:
- 胜负奖励 (sparse): 赢 +1, 输 -1
- 赔率奖励 (payout): 按公平赔率结算, 期望为 0
"""
from dataclasses import dataclass
from typing import Optional
from enum import Enum

from core.choices import DuelOutcome
from core.rules import RuleEngine
from core.state import RoundResult


class RewardType(Enum):
    """奖励类型"""
    SPARSE = "sparse"    # 仅胜负
    PAYOUT = "payout"    # 公平赔率


@dataclass
class RewardConfig:
    """奖励配置"""
    reward_type: RewardType = RewardType.SPARSE
    win_reward: float = 1.0
    lose_reward: float = -1.0
    draw_reward: float = 0.0

    @classmethod
    def from_dict(cls, d: dict) -> 'RewardConfig':
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        if "reward_type" in filtered:
            filtered["reward_type"] = RewardType(filtered["reward_type"])
        return cls(**filtered)


class RewardCalculator:
    """
    奖励计算器

    根据配置计算不同类型的奖励 (玩家视角)
    """

    def __init__(self, config: Optional[RewardConfig] = None):
        self.config = config or RewardConfig()

    def compute(self, result: RoundResult) -> float:
        """
        计算回合奖励

        Args:
            result: 回合结果

        Returns:
            奖励值
        """
        if not result.won:
            return self.config.lose_reward

        if self.config.reward_type == RewardType.PAYOUT:
            return self._payout(result)
        return self.config.win_reward

    def _payout(self, result: RoundResult) -> float:
        """
        公平赔率: 获胜概率为 p 时赢得 (1 - p) / p 倍

        Returns:
            按赔率放大的获胜奖励
        """
        p = RuleEngine.win_probability(result.bet.mode, result.bet.choice)
        if p == 0.0:
            # 超范围骰子命中超范围押注, 按基础奖励结算
            return self.config.win_reward
        return self.config.win_reward * (1.0 - p) / p

    def compute_duel(self, outcome: DuelOutcome) -> float:
        """双骰比较奖励, 玩家为第二个骰子"""
        if outcome == DuelOutcome.SECOND_WINS:
            return self.config.win_reward
        if outcome == DuelOutcome.FIRST_WINS:
            return self.config.lose_reward
        return self.config.draw_reward


def create_reward_calculator(
    reward_type: str = "sparse",
    **kwargs
) -> RewardCalculator:
    """
    工厂函数：创建奖励计算器

    Args:
        reward_type: 奖励类型 ("sparse", "payout")
        **kwargs: 其他配置参数

    Returns:
        RewardCalculator 实例
    """
    config = RewardConfig(
        reward_type=RewardType(reward_type),
        **kwargs
    )
    return RewardCalculator(config)
