#!/usr/bin/env python3
"""
评估脚本

Usage:
    python scripts/evaluate.py --mode even_odd --agent random --games 1000
    python scripts/evaluate.py --mode exact_number --agent fixed --choice 4 --reward-type payout
    python scripts/evaluate.py --mode duel --games 500 --output results.json
    python scripts/evaluate.py --config eval.json --verbose
"""
import argparse
import logging
import sys
from pathlib import Path
import json

# 添加项目根目录到路径
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from core.choices import GameMode
from core.state import Bet
from env import make_env, RewardConfig, RewardType
from evaluation import (
    Agent,
    EvalConfig,
    Evaluator,
    FixedChoiceAgent,
    MetricsCollector,
    RandomAgent,
    theoretical_win_rate,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Dice Bet Evaluation")

    parser.add_argument("--config", type=str, help="JSON config file")
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in GameMode] + ["duel"],
        help="Game mode",
    )
    parser.add_argument(
        "--agent",
        type=str,
        choices=["random", "fixed"],
        help="Agent type",
    )
    parser.add_argument("--choice", type=str, help="Bet for fixed agent (e.g. even, high, yes, 4)")
    parser.add_argument("--games", type=int, help="Number of games")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--reward-type",
        type=str,
        choices=[t.value for t in RewardType],
        help="Reward type",
    )
    parser.add_argument("--output", type=str, help="Output file for results")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    return parser.parse_args(argv)


def build_config(args) -> EvalConfig:
    """配置文件为基础, 命令行参数覆盖"""
    config = EvalConfig.from_json(args.config) if args.config else EvalConfig()
    overrides = {
        "mode": args.mode,
        "agent": args.agent,
        "choice": args.choice,
        "n_games": args.games,
        "seed": args.seed,
        "reward_type": args.reward_type,
    }
    merged = config.to_dict()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    if args.verbose:
        merged["verbose"] = True
    return EvalConfig.from_dict(merged)


def build_agent(config: EvalConfig) -> Agent:
    """根据配置创建智能体"""
    if config.agent == "random":
        return RandomAgent(seed=config.seed)
    if config.agent == "fixed":
        if config.mode == "duel":
            return FixedChoiceAgent(0)
        if config.choice is None:
            raise ValueError("Fixed agent requires a choice")
        mode = GameMode(config.mode)
        bet = Bet.parse(mode, config.choice)
        choices = mode.choices()
        if bet.choice not in choices:
            raise ValueError(f"Choice {config.choice!r} is not a die face")
        return FixedChoiceAgent(choices.index(bet.choice), name=f"fixed:{config.choice}")
    raise ValueError(f"Unknown agent: {config.agent}")


def run(config: EvalConfig) -> dict:
    """运行评估"""
    reward_config = RewardConfig(reward_type=RewardType(config.reward_type))
    agent = build_agent(config)

    def env_fn():
        return make_env(config.mode, reward_config=reward_config)

    collector = MetricsCollector()
    evaluator = Evaluator(env_fn=env_fn)

    logger.info(f"Evaluating {agent.name} on {config.mode} for {config.n_games} games")
    result = evaluator.evaluate(
        agent,
        n_games=config.n_games,
        seed=config.seed,
        verbose=config.verbose,
        collector=collector,
    )

    logger.info("=" * 50)
    logger.info("Evaluation Results")
    logger.info("=" * 50)
    logger.info(f"Win Rate: {result.win_rate:.2%}")
    logger.info(f"Loss Rate: {result.loss_rate:.2%}")
    if config.mode == "duel":
        logger.info(f"Draw Rate: {result.draw_rate:.2%}")
    logger.info(f"Average Reward: {result.avg_reward:.3f} (std {result.reward_std:.3f})")

    output = {"config": config.to_dict(), "result": result.to_dict()}

    if config.mode != "duel":
        mode = GameMode(config.mode)
        metrics = collector.compute_metrics(mode)
        logger.info(f"Expected Win Rate: {metrics.get('expected_win_rate', 0.0):.2%}")
        for choice, rate in sorted(collector.choice_win_rates(mode).items()):
            bet = Bet.parse(mode, choice)
            logger.info(
                f"  {choice}: {rate:.2%} "
                f"(theory {theoretical_win_rate(mode, bet.choice):.2%})"
            )
        output["metrics"] = metrics
    logger.info("=" * 50)

    return output


def main(argv=None):
    args = parse_args(argv)

    try:
        config = build_config(args)
        output = run(config)
    except (ValueError, OSError) as e:
        logger.error(str(e))
        sys.exit(1)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2, ensure_ascii=False)
        logger.info(f"Results saved to {args.output}")


if __name__ == "__main__":
    main()
