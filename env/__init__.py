"""
Environment Layer - Gymnasium 兼容环境

Modules:
    dice_env: 押注环境与双骰比大小环境
    reward: 奖励函数
"""
from .dice_env import (
    DiceEnvBase,
    DiceGameEnv,
    DiceDuelEnv,
    make_env,
    mode_one_hot,
)

from .reward import (
    RewardType,
    RewardConfig,
    RewardCalculator,
    create_reward_calculator,
)

__all__ = [
    # env
    "DiceEnvBase",
    "DiceGameEnv",
    "DiceDuelEnv",
    "make_env",
    "mode_one_hot",
    # reward
    "RewardType",
    "RewardConfig",
    "RewardCalculator",
    "create_reward_calculator",
]
