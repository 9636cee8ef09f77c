"""
Data models for batch simulation
"""

from typing import Dict, List, Optional
import numpy as np
from pydantic import BaseModel, Field

from ..game.models import Outcome, RoundResult, Strategy


class SimulationConfig(BaseModel):
    """Configuration for a batch of games"""
    num_games: int = Field(default=100, ge=1)
    random_seed: Optional[int] = Field(default=None)
    confidence_level: float = Field(default=0.95, gt=0, lt=1)


class StrategySummary(BaseModel):
    """Win/lose statistics for one strategy"""
    strategy: Strategy
    wins: int = Field(ge=0)
    losses: int = Field(ge=0)
    win_rate: float = Field(ge=0, le=1)
    lose_rate: float = Field(ge=0, le=1)
    ci_low: float = Field(description="Lower bound of the win-rate confidence interval")
    ci_high: float = Field(description="Upper bound of the win-rate confidence interval")

    @property
    def games(self) -> int:
        return self.wins + self.losses

    def to_dict(self) -> Dict[str, float]:
        return {
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": round(self.win_rate, 4),
            "lose_rate": round(self.lose_rate, 4),
            "ci_low": round(self.ci_low, 4),
            "ci_high": round(self.ci_high, 4),
        }


class BatchResult(BaseModel):
    """Complete results of a batch of paired rounds"""
    config: SimulationConfig = Field(default_factory=SimulationConfig)

    rounds: List[RoundResult] = Field(
        default_factory=list,
        description="Per-round results in play order"
    )

    summaries: Dict[Strategy, StrategySummary] = Field(default_factory=dict)

    # Exact McNemar test on the paired outcomes
    switch_advantage_pvalue: Optional[float] = None

    @property
    def num_games(self) -> int:
        return len(self.rounds)

    def to_rows(self) -> List[Dict[str, str]]:
        """Flatten to 2 * n rows of {strategy, outcome}"""
        return [row for game in self.rounds for row in game.to_rows()]

    def outcomes_array(self, strategy: Strategy) -> np.ndarray:
        """1 for each won round, 0 for each lost round"""
        strategy = Strategy(strategy)
        return np.array(
            [game.outcome_for(strategy) == Outcome.WIN for game in self.rounds],
            dtype=int
        )

    def running_win_rates(self, strategy: Strategy) -> np.ndarray:
        """Win proportion after each round"""
        wins = self.outcomes_array(strategy)
        if wins.size == 0:
            return np.array([])
        return np.cumsum(wins) / np.arange(1, wins.size + 1)

    def win_rates(self) -> Dict[Strategy, float]:
        return {strategy: s.win_rate for strategy, s in self.summaries.items()}

    def proportion_table(self, decimals: int = 2) -> Dict[str, Dict[str, float]]:
        """Strategy x outcome table, normalized by row"""
        return {
            strategy.value: {
                Outcome.LOSE.value: round(s.lose_rate, decimals),
                Outcome.WIN.value: round(s.win_rate, decimals),
            }
            for strategy, s in self.summaries.items()
        }

    def summary(self) -> Dict:
        """Get summary dictionary"""
        return {
            "num_games": self.num_games,
            "random_seed": self.config.random_seed,
            "confidence_level": self.config.confidence_level,
            "strategies": {
                strategy.value: s.to_dict() for strategy, s in self.summaries.items()
            },
            "switch_advantage_pvalue": self.switch_advantage_pvalue,
        }
