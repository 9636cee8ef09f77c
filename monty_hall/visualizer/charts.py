"""
Chart generation for simulation results
"""

import os
from typing import Any, List, Optional
import numpy as np
import matplotlib.pyplot as plt
from loguru import logger

from ..game.models import Strategy
from ..simulation.models import BatchResult
from .styles import ChartStyles


class Visualizer:
    """
    Simulation chart generator

    Creates win-rate and convergence charts for a batch of Monty Hall games.
    """

    def __init__(
        self,
        output_dir: str = "output/charts",
        dpi: int = 150,
        figsize: tuple = (12, 8)
    ):
        """
        Initialize Visualizer

        Args:
            output_dir: Directory for saving charts
            dpi: DPI for saved images
            figsize: Default figure size
        """
        self.output_dir = output_dir
        self.dpi = dpi
        self.figsize = figsize

        os.makedirs(output_dir, exist_ok=True)
        ChartStyles.setup_matplotlib()

        logger.info(f"Visualizer initialized. Output dir: {output_dir}")

    def _save(self, fig: Any, name: str) -> str:
        path = os.path.join(self.output_dir, name)
        fig.savefig(path, dpi=self.dpi, bbox_inches="tight")
        plt.close(fig)
        logger.debug(f"Saved chart to {path}")
        return path

    def plot_win_rates(
        self,
        result: BatchResult,
        save: bool = True
    ) -> Optional[Any]:
        """
        Create bar chart of win rate per strategy

        Error bars show the confidence interval; dashed lines mark the
        theoretical 1/3 and 2/3 win probabilities.

        Args:
            result: Batch result
            save: Whether to save the chart

        Returns:
            Figure object
        """
        logger.info("Generating win rate chart...")

        strategies = [s for s in Strategy if s in result.summaries]
        summaries = [result.summaries[s] for s in strategies]
        rates = np.array([s.win_rate for s in summaries])
        yerr = np.array([
            [max(s.win_rate - s.ci_low, 0.0) for s in summaries],
            [max(s.ci_high - s.win_rate, 0.0) for s in summaries],
        ])

        fig, ax = plt.subplots(figsize=self.figsize)

        bars = ax.bar(
            [s.value for s in strategies],
            rates,
            yerr=yerr,
            capsize=8,
            color=[ChartStyles.STRATEGY_COLORS[s] for s in strategies],
            alpha=0.85,
            edgecolor=ChartStyles.COLORS["dark"]
        )

        for strategy in strategies:
            ax.axhline(
                ChartStyles.THEORETICAL_WIN_RATES[strategy],
                linestyle="--",
                linewidth=1,
                color=ChartStyles.STRATEGY_COLORS[strategy]
            )

        for bar, rate in zip(bars, rates):
            ax.text(
                bar.get_x() + bar.get_width() / 2, rate + 0.02,
                ChartStyles.format_percentage(rate),
                ha="center", va="bottom", fontsize=11,
                color=ChartStyles.COLORS["dark"]
            )

        ax.set_ylim(0, 1)
        ax.set_ylabel("Win Rate", color=ChartStyles.COLORS["muted"])
        ax.set_title(
            f"Monty Hall Win Rate by Strategy ({result.num_games:,} games)",
            fontsize=14, fontweight="bold", color=ChartStyles.COLORS["dark"]
        )

        if save:
            self._save(fig, "win_rates.png")

        return fig

    def plot_convergence(
        self,
        result: BatchResult,
        save: bool = True
    ) -> Optional[Any]:
        """
        Create line chart of the running win rate per strategy

        Args:
            result: Batch result
            save: Whether to save the chart

        Returns:
            Figure object
        """
        logger.info("Generating convergence chart...")

        fig, ax = plt.subplots(figsize=self.figsize)
        games = np.arange(1, result.num_games + 1)

        for strategy in Strategy:
            color = ChartStyles.STRATEGY_COLORS[strategy]
            ax.plot(games, result.running_win_rates(strategy), color=color,
                    linewidth=1.5, label=strategy.value)
            ax.axhline(ChartStyles.THEORETICAL_WIN_RATES[strategy], color=color,
                       linestyle="--", linewidth=1, alpha=0.7)

        if result.num_games > 100:
            ax.set_xscale("log")
        ax.set_ylim(0, 1)
        ax.set_xlabel("Games Played", color=ChartStyles.COLORS["muted"])
        ax.set_ylabel("Cumulative Win Rate", color=ChartStyles.COLORS["muted"])
        ax.set_title("Win Rate Convergence", fontsize=14, fontweight="bold",
                     color=ChartStyles.COLORS["dark"])
        ax.legend(loc="upper right")

        if save:
            self._save(fig, "convergence.png")

        return fig

    def plot_all(self, result: BatchResult) -> List[str]:
        """Generate every chart and return the saved file paths"""
        self.plot_win_rates(result)
        self.plot_convergence(result)
        return [
            os.path.join(self.output_dir, "win_rates.png"),
            os.path.join(self.output_dir, "convergence.png"),
        ]
