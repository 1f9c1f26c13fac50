"""
骰子押注 Gymnasium 环境

遵循标准 Gymnasium API, 每局只有一次押注
"""
from typing import Dict, Any, Tuple, Optional, Union
import numpy as np

import gymnasium as gym
from gymnasium import spaces

from core.choices import DIE_MIN, DIE_MAX, GameMode
from core.messages import MessagePicker
from core.state import Bet, RoundResult, DuelResult, resolve_round, resolve_duel

from .reward import RewardCalculator, RewardConfig


MODES: Tuple[GameMode, ...] = tuple(GameMode)


def mode_one_hot(mode: GameMode) -> np.ndarray:
    """游戏模式 one-hot 编码"""
    obs = np.zeros(len(MODES), dtype=np.float32)
    obs[MODES.index(mode)] = 1.0
    return obs


class DiceEnvBase(gym.Env):
    """
    单步骰子环境基类

    负责种子、回合结束标记、掷骰与渲染分派
    """

    metadata = {
        "render_modes": ["human", "ansi"],
    }

    def __init__(
        self,
        render_mode: Optional[str] = None,
        reward_config: Optional[RewardConfig] = None,
        seed: Optional[int] = None,
    ):
        """
        Args:
            render_mode: 渲染模式 ("human", "ansi", None)
            reward_config: 奖励配置
            seed: 随机种子
        """
        super().__init__()

        self.render_mode = render_mode
        self._seed = seed
        self._reward_calculator = RewardCalculator(reward_config)
        self._started = False
        self._done = True

    def _reset_episode(self, seed: Optional[int]):
        """重置种子与回合标记"""
        # 使用提供的种子或初始种子 (初始种子只用一次)
        if seed is None:
            seed, self._seed = self._seed, None
        super().reset(seed=seed)
        self._started = True
        self._done = False

    def _check_step(self, action: int):
        """校验能否执行 step"""
        if not self._started:
            raise RuntimeError("Environment not reset. Call reset() first.")
        if self._done:
            raise RuntimeError("Episode finished. Call reset() first.")
        if not self.action_space.contains(action):
            raise ValueError(
                f"Invalid action index: {action}. "
                f"Valid range: 0-{self.action_space.n - 1}"
            )

    def roll(self) -> int:
        """掷一次骰子"""
        return int(self.np_random.integers(DIE_MIN, DIE_MAX + 1))

    def render(self) -> Optional[str]:
        """渲染最近一次结果"""
        if self.render_mode == "ansi":
            return self._render_text()
        if self.render_mode == "human":
            print(self._render_text())
        return None

    def _render_text(self) -> str:
        raise NotImplementedError


class DiceGameEnv(DiceEnvBase):
    """
    骰子押注环境

    动作为该模式下选项的索引 (见 GameMode.choices()),
    step 时由环境掷骰并结算, 一步即终止

    API:
    - reset() -> observation, info
    - step(action) -> observation, reward, terminated, truncated, info
    """

    metadata = {
        "render_modes": ["human", "ansi"],
        "name": "DiceBet-v1",
    }

    def __init__(
        self,
        mode: Union[str, GameMode] = GameMode.EVEN_ODD,
        render_mode: Optional[str] = None,
        reward_config: Optional[RewardConfig] = None,
        seed: Optional[int] = None,
    ):
        super().__init__(render_mode=render_mode, reward_config=reward_config, seed=seed)

        self.mode = GameMode(mode)
        self._choices = self.mode.choices()

        self.action_space = spaces.Discrete(len(self._choices))
        self.observation_space = spaces.Box(0, 1, shape=(len(MODES),), dtype=np.float32)

        self._picker: Optional[MessagePicker] = None
        self._last_result: Optional[RoundResult] = None

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        重置环境

        Args:
            seed: 随机种子
            options: 额外选项

        Returns:
            (observation, info) 元组
        """
        self._reset_episode(seed)

        # 文案与掷骰共用同一随机源, 保证可复现
        self._picker = MessagePicker(self.np_random)
        self._last_result = None

        return mode_one_hot(self.mode), {"mode": self.mode.value}

    def step(
        self,
        action: int,
    ) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        执行押注

        Args:
            action: 选项索引

        Returns:
            (observation, reward, terminated, truncated, info) 元组
        """
        self._check_step(action)

        bet = Bet(mode=self.mode, choice=self._choices[int(action)])
        die = self.roll()
        result = resolve_round(bet, die, self._picker)
        self._last_result = result
        self._done = True

        reward = self._reward_calculator.compute(result)
        info = result.to_dict()

        if self.render_mode == "human":
            self.render()

        return mode_one_hot(self.mode), reward, True, False, info

    def _render_text(self) -> str:
        if self._last_result is None:
            return f"[{self.mode.value}] waiting for bet"
        r = self._last_result
        choice = r.bet.to_dict()["choice"]
        return f"[{self.mode.value}] bet={choice} die={r.die} | {r.message}"

    @property
    def last_result(self) -> Optional[RoundResult]:
        """最近一次回合结果 (用于调试)"""
        return self._last_result


class DiceDuelEnv(DiceEnvBase):
    """
    双骰比大小环境

    智能体只有一个动作 (掷骰), 电脑与玩家各掷一次
    """

    metadata = {
        "render_modes": ["human", "ansi"],
        "name": "DiceDuel-v1",
    }

    def __init__(
        self,
        render_mode: Optional[str] = None,
        reward_config: Optional[RewardConfig] = None,
        seed: Optional[int] = None,
    ):
        super().__init__(render_mode=render_mode, reward_config=reward_config, seed=seed)

        self.action_space = spaces.Discrete(1)
        self.observation_space = spaces.Box(0, 1, shape=(1,), dtype=np.float32)
        self._last_duel: Optional[DuelResult] = None

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        self._reset_episode(seed)
        self._last_duel = None
        return np.zeros(1, dtype=np.float32), {"mode": "duel"}

    def step(
        self,
        action: int = 0,
    ) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        self._check_step(action)

        bot_die = self.roll()
        user_die = self.roll()
        duel = resolve_duel(bot_die, user_die)
        self._last_duel = duel
        self._done = True

        reward = self._reward_calculator.compute_duel(duel.outcome)
        info = {
            "mode": "duel",
            "bot_die": bot_die,
            "user_die": user_die,
            "outcome": duel.outcome.value,
            "message": duel.text,
        }

        if self.render_mode == "human":
            self.render()

        return np.zeros(1, dtype=np.float32), reward, True, False, info

    def _render_text(self) -> str:
        if self._last_duel is None:
            return "[duel] waiting for roll"
        d = self._last_duel
        return f"[duel] bot={d.bot_die} user={d.user_die} | {d.text}"

    @property
    def last_duel(self) -> Optional[DuelResult]:
        return self._last_duel


def make_env(
    mode: str = "even_odd",
    **kwargs
) -> DiceEnvBase:
    """
    工厂函数：创建环境

    Args:
        mode: 游戏模式, "duel" 表示双骰比大小
        **kwargs: 环境参数

    Returns:
        DiceGameEnv 或 DiceDuelEnv 实例
    """
    if mode == "duel":
        return DiceDuelEnv(**kwargs)
    return DiceGameEnv(mode=mode, **kwargs)
