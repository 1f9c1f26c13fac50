"""
Evaluation Layer - 评估框架

Modules:
    evaluator: 评估器和智能体
    metrics: 评估指标
    config: 评估配置
"""
from .evaluator import (
    EvalResult,
    Agent,
    RandomAgent,
    FixedChoiceAgent,
    Evaluator,
)
from .metrics import (
    MetricsCollector,
    RunningStats,
    theoretical_win_rate,
    win_rate_table,
)
from .config import EvalConfig

__all__ = [
    # evaluator
    "EvalResult",
    "Agent",
    "RandomAgent",
    "FixedChoiceAgent",
    "Evaluator",
    # metrics
    "MetricsCollector",
    "RunningStats",
    "theoretical_win_rate",
    "win_rate_table",
    # config
    "EvalConfig",
]
