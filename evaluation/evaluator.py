"""
评估器

评估押注策略在环境中的表现
"""
from typing import Dict, List, Optional, Callable, Any
from dataclasses import dataclass, field
from collections import Counter
import numpy as np
import logging

from core.choices import DuelOutcome

from .metrics import MetricsCollector, RunningStats

logger = logging.getLogger(__name__)


@dataclass
class EvalResult:
    """评估结果"""
    win_rate: float
    avg_reward: float
    games_played: int
    loss_rate: float = 0.0
    draw_rate: float = 0.0
    reward_std: float = 0.0
    choice_counts: Dict[int, int] = field(default_factory=dict)

    def __repr__(self) -> str:
        return (
            f"EvalResult(win_rate={self.win_rate:.2%}, "
            f"avg_reward={self.avg_reward:.2f}, "
            f"games={self.games_played})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "win_rate": self.win_rate,
            "loss_rate": self.loss_rate,
            "draw_rate": self.draw_rate,
            "avg_reward": self.avg_reward,
            "reward_std": self.reward_std,
            "games_played": self.games_played,
            "choice_counts": {str(k): v for k, v in sorted(self.choice_counts.items())},
        }


class Agent:
    """智能体基类"""

    def __init__(self, name: str = "agent"):
        self.name = name

    def act(self, obs: np.ndarray, legal_actions: List[int]) -> int:
        """选择动作"""
        raise NotImplementedError

    def reset(self):
        """重置状态"""
        pass


class RandomAgent(Agent):
    """随机押注"""

    def __init__(self, name: str = "random", seed: Optional[int] = None):
        super().__init__(name)
        self._rng = np.random.default_rng(seed)

    def act(self, obs: np.ndarray, legal_actions: List[int]) -> int:
        if not legal_actions:
            return 0
        idx = self._rng.integers(len(legal_actions))
        return legal_actions[idx]


class FixedChoiceAgent(Agent):
    """始终押同一个选项"""

    def __init__(self, action: int, name: str = "fixed"):
        super().__init__(name)
        self.action = action

    def act(self, obs: np.ndarray, legal_actions: List[int]) -> int:
        if self.action not in legal_actions:
            raise ValueError(
                f"Action {self.action} not in legal actions {legal_actions}"
            )
        return self.action


def _outcome(info: Dict[str, Any]) -> int:
    """从 info 中取出玩家视角的胜负: 1 胜, 0 平, -1 负"""
    if "outcome" in info:
        outcome = DuelOutcome(info["outcome"])
        if outcome == DuelOutcome.SECOND_WINS:
            return 1
        if outcome == DuelOutcome.FIRST_WINS:
            return -1
        return 0
    return 1 if info["won"] else -1


class Evaluator:
    """
    评估器

    评估智能体在环境中的表现
    """

    def __init__(self, env_fn: Callable):
        self.env_fn = env_fn

    def evaluate(
        self,
        agent: Agent,
        n_games: int = 100,
        seed: Optional[int] = None,
        verbose: bool = False,
        collector: Optional[MetricsCollector] = None,
    ) -> EvalResult:
        """
        评估智能体

        Args:
            agent: 待评估智能体
            n_games: 游戏数量
            seed: 随机种子, 第 i 局使用 seed + i
            verbose: 是否输出详情
            collector: 指标收集器, 收集每局回合结果 (双骰环境无回合结果)

        Returns:
            评估结果
        """
        env = self.env_fn()
        legal_actions = list(range(env.action_space.n))

        wins = 0
        losses = 0
        draws = 0
        rewards = RunningStats()
        choice_counts: Counter = Counter()

        for game_idx in range(n_games):
            game_seed = seed + game_idx if seed is not None else None
            obs, info = env.reset(seed=game_seed)
            agent.reset()

            action = agent.act(obs, legal_actions)
            obs, reward, terminated, truncated, info = env.step(action)

            choice_counts[int(action)] += 1
            rewards.update(reward)

            last_result = getattr(env, "last_result", None)
            if collector is not None and last_result is not None:
                collector.add_round(last_result)

            result = _outcome(info)
            if result > 0:
                wins += 1
            elif result < 0:
                losses += 1
            else:
                draws += 1

            if verbose and (game_idx + 1) % 100 == 0:
                logger.info(f"Game {game_idx + 1}/{n_games}, Win rate: {wins/(game_idx+1):.2%}")

        return EvalResult(
            win_rate=wins / n_games if n_games > 0 else 0.0,
            loss_rate=losses / n_games if n_games > 0 else 0.0,
            draw_rate=draws / n_games if n_games > 0 else 0.0,
            avg_reward=rewards.mean,
            reward_std=rewards.std,
            games_played=n_games,
            choice_counts=dict(choice_counts),
        )

    def compare(
        self,
        agent1: Agent,
        agent2: Agent,
        n_games: int = 100,
        seed: int = 0,
    ) -> Dict[str, float]:
        """
        对比两个智能体

        两者使用相同的种子序列, 即面对相同的骰子

        Args:
            agent1: 智能体1
            agent2: 智能体2
            n_games: 游戏数量
            seed: 随机种子

        Returns:
            对比结果
        """
        result1 = self.evaluate(agent1, n_games=n_games, seed=seed)
        result2 = self.evaluate(agent2, n_games=n_games, seed=seed)

        return {
            "agent1_win_rate": result1.win_rate,
            "agent2_win_rate": result2.win_rate,
            "agent1_avg_reward": result1.avg_reward,
            "agent2_avg_reward": result2.avg_reward,
            "win_rate_diff": result1.win_rate - result2.win_rate,
        }
