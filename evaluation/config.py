"""
评估配置

定义评估脚本使用的配置
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
from pathlib import Path
import json


@dataclass
class EvalConfig:
    """
    评估配置

    Attributes:
        mode: 游戏模式 ("even_odd", "high_low", "exact_number", "guess_one", "duel")
        agent: 智能体类型 ("random", "fixed")
        choice: fixed 智能体的押注文本, 如 "even", "4"
        n_games: 游戏数量
        seed: 随机种子
        reward_type: 奖励类型 ("sparse", "payout")
        verbose: 是否输出进度
    """
    mode: str = "even_odd"
    agent: str = "random"
    choice: Optional[str] = None
    n_games: int = 1000
    seed: Optional[int] = None
    reward_type: str = "sparse"
    verbose: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> 'EvalConfig':
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        return cls(**filtered)

    @classmethod
    def from_json(cls, path: str) -> 'EvalConfig':
        with open(Path(path), "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
