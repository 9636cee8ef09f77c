"""
Monty Hall Simulator - repeated paired rounds and strategy statistics
"""

from typing import Dict, List, Optional, Tuple
import numpy as np
from scipy import stats as scipy_stats
from loguru import logger

from ..exceptions import InvalidArgumentError
from ..game.engine import MontyHallGame
from ..game.models import Outcome, RoundResult, Strategy
from ..game.rng import RandomSource
from .models import BatchResult, SimulationConfig, StrategySummary
from .report import log_summary


def validate_num_games(n) -> int:
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise InvalidArgumentError(f"Number of games must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgumentError(f"Number of games must be positive, got {n}")
    return int(n)


def summarize_rounds(
    rounds: List[RoundResult],
    confidence_level: float = 0.95
) -> Tuple[Dict[Strategy, StrategySummary], Optional[float]]:
    """
    Calculate per-strategy statistics from a list of rounds

    Args:
        rounds: Round results
        confidence_level: Confidence level of the Wilson interval on win rates

    Returns:
        (summary per strategy, two-sided p-value of switch vs stay)
    """
    if not rounds:
        return {}, None

    n = len(rounds)
    wins = {
        strategy: np.array([r.outcome_for(strategy) == Outcome.WIN for r in rounds])
        for strategy in Strategy
    }

    summaries = {}
    for strategy, won in wins.items():
        k = int(won.sum())
        ci = scipy_stats.binomtest(k, n).proportion_ci(
            confidence_level=confidence_level, method="wilson"
        )
        summaries[strategy] = StrategySummary(
            strategy=strategy,
            wins=k,
            losses=n - k,
            win_rate=k / n,
            lose_rate=(n - k) / n,
            ci_low=float(ci.low),
            ci_high=float(ci.high)
        )

    # Exact McNemar: binomial test on rounds where the strategies disagree
    stay_won, switch_won = wins[Strategy.STAY], wins[Strategy.SWITCH]
    discordant = int(np.sum(stay_won != switch_won))
    if discordant == 0:
        pvalue = 1.0
    else:
        switch_only = int(np.sum(switch_won & ~stay_won))
        pvalue = float(scipy_stats.binomtest(switch_only, discordant, p=0.5).pvalue)

    return summaries, pvalue


class MontyHallSimulator:
    """
    Batch runner for the Monty Hall game

    Plays many rounds, each comparing stay and switch on the same board,
    and summarizes the win rate of both strategies.
    """

    def __init__(
        self,
        num_games: int = 100,
        random_seed: Optional[int] = None,
        confidence_level: float = 0.95,
        rng: Optional[RandomSource] = None
    ):
        """
        Initialize Monty Hall Simulator

        Args:
            num_games: Default number of games per batch
            random_seed: Random seed for reproducibility
            confidence_level: Confidence level for win-rate intervals
            rng: Random source to use instead of a seeded one
        """
        self.config = SimulationConfig(
            num_games=validate_num_games(num_games),
            random_seed=random_seed,
            confidence_level=confidence_level
        )

        self.game = MontyHallGame(rng=rng, random_seed=random_seed)

        logger.info(
            f"MontyHallSimulator initialized: "
            f"{num_games} games, seed={random_seed}"
        )

    def play_game(self) -> RoundResult:
        return self.game.play_game()

    def play_n_games(self, n: Optional[int] = None, report: bool = True) -> BatchResult:
        """
        Play n rounds and summarize both strategies

        Args:
            n: Number of rounds (defaults to the configured num_games)
            report: Log the proportion table when done

        Returns:
            BatchResult with every round and the per-strategy summary
        """
        n = validate_num_games(self.config.num_games if n is None else n)

        logger.info(f"Playing {n:,} games")

        rounds = [self.game.play_game() for _ in range(n)]
        summaries, pvalue = summarize_rounds(rounds, self.config.confidence_level)

        result = BatchResult(
            config=self.config.model_copy(update={"num_games": n}),
            rounds=rounds,
            summaries=summaries,
            switch_advantage_pvalue=pvalue
        )

        if report:
            log_summary(result)

        return result


def play_n_games(
    n: int = 100,
    report: bool = True,
    random_seed: Optional[int] = None,
    rng: Optional[RandomSource] = None
) -> BatchResult:
    """Play n games on a fresh simulator, seeded or driven by rng when given"""
    simulator = MontyHallSimulator(num_games=n, random_seed=random_seed, rng=rng)
    return simulator.play_n_games(n, report=report)
