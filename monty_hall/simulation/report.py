"""
Text rendering of batch results
"""

from typing import TYPE_CHECKING
from loguru import logger

from ..game.models import Outcome, Strategy

if TYPE_CHECKING:
    from .models import BatchResult


def format_proportion_table(result: "BatchResult", decimals: int = 2) -> str:
    """
    Render the strategy x outcome proportion table

        outcome   LOSE   WIN
        stay      0.66  0.34
        switch    0.34  0.66
    """
    table = result.proportion_table(decimals)
    outcomes = [Outcome.LOSE.value, Outcome.WIN.value]

    lines = [f"{'outcome':<9}" + "".join(f"{o:>6}" for o in outcomes)]
    for strategy in Strategy:
        row = table.get(strategy.value)
        if row is None:
            continue
        lines.append(
            f"{strategy.value:<9}" + "".join(f"{row[o]:>6.{decimals}f}" for o in outcomes)
        )
    return "\n".join(lines)


def log_summary(result: "BatchResult") -> None:
    """Write the proportion table and interval estimates to the log"""
    logger.info("=" * 50)
    logger.info(f"Monty Hall Simulation Complete: {result.num_games:,} games")
    for line in format_proportion_table(result).splitlines():
        logger.info(f"  {line}")

    level = result.config.confidence_level
    for strategy, s in result.summaries.items():
        logger.info(
            f"  {strategy.value:<7} win rate {s.win_rate:.2%} "
            f"({level:.0%} CI {s.ci_low:.2%} - {s.ci_high:.2%})"
        )
    if result.switch_advantage_pvalue is not None:
        logger.info(f"  Switch vs stay p-value: {result.switch_advantage_pvalue:.3g}")
    logger.info("=" * 50)
