"""
规则引擎 - 押注判定、双骰比较

所有方法都是纯函数，无状态
骰子点数不做范围校验: 超出 1-6 的值按字面算术规则照常判定
押注选项也不做类型校验: 各判定信任调用方, 不匹配的选项一律落入第二个分支
类型校验在 core.state.Bet 构造时完成
"""
from .choices import (
    DIE_FACES,
    Choice,
    DuelOutcome,
    EvenOddChoice,
    GameMode,
    GuessOneChoice,
    HighLowChoice,
)


# 大小分界 (保留字面阈值, 1-6 之外两者不互补)
HIGH_MIN = 4
LOW_MAX = 3


class RuleEngine:
    """
    骰子押注规则引擎

    提供四种玩法的胜负判定与双骰比较
    所有方法都是静态方法，无状态
    """

    @staticmethod
    def check_even_odd(die: int, choice: EvenOddChoice) -> bool:
        """
        单双判定

        Args:
            die: 骰子点数
            choice: 玩家押注 (非 EVEN 一律按 ODD 判定)

        Returns:
            玩家是否获胜
        """
        is_even = die % 2 == 0
        if choice == EvenOddChoice.EVEN:
            return is_even
        return not is_even

    @staticmethod
    def check_high_low(die: int, choice: HighLowChoice) -> bool:
        """
        大小判定

        Args:
            die: 骰子点数
            choice: 玩家押注 (非 HIGH 一律按 LOW 判定)

        Returns:
            玩家是否获胜
        """
        if choice == HighLowChoice.HIGH:
            return die >= HIGH_MIN
        return die <= LOW_MAX

    @staticmethod
    def check_exact_number(die: int, guess: int) -> bool:
        """猜点数判定"""
        return die == guess

    @staticmethod
    def check_guess_one(die: int, choice: GuessOneChoice) -> bool:
        """猜一点判定 (非 YES 一律按 NO 判定)"""
        is_one = die == 1
        if choice == GuessOneChoice.YES:
            return is_one
        return not is_one

    @staticmethod
    def compare_dice(first: int, second: int) -> DuelOutcome:
        """
        比较两个骰子

        Args:
            first: 电脑的骰子
            second: 玩家的骰子

        Returns:
            比较结果标签
        """
        if first > second:
            return DuelOutcome.FIRST_WINS
        if second > first:
            return DuelOutcome.SECOND_WINS
        return DuelOutcome.TIE

    @staticmethod
    def check(mode: GameMode, die: int, choice: Choice) -> bool:
        """
        按模式分派判定

        Args:
            mode: 游戏模式
            die: 骰子点数
            choice: 玩家押注, 类型需与模式一致, 此处不校验 (由 Bet 保证)

        Returns:
            玩家是否获胜
        """
        if mode == GameMode.EVEN_ODD:
            return RuleEngine.check_even_odd(die, choice)
        if mode == GameMode.HIGH_LOW:
            return RuleEngine.check_high_low(die, choice)
        if mode == GameMode.EXACT_NUMBER:
            return RuleEngine.check_exact_number(die, choice)
        return RuleEngine.check_guess_one(die, choice)

    @staticmethod
    def win_probability(mode: GameMode, choice: Choice) -> float:
        """公平六面骰下押注获胜的概率"""
        wins = sum(1 for face in DIE_FACES if RuleEngine.check(mode, face, choice))
        return wins / len(DIE_FACES)
