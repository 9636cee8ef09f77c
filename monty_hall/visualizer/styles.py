"""
Chart styling configuration
"""

import matplotlib.pyplot as plt
from loguru import logger

from ..game.models import Strategy


class ChartStyles:
    """Chart styling utilities"""

    COLORS = {
        "dark": "#343A40",
        "muted": "#6C757D",
    }

    STRATEGY_COLORS = {
        Strategy.STAY: "#2E86AB",
        Strategy.SWITCH: "#F18F01",
    }

    # Exact win probabilities of the standard game
    THEORETICAL_WIN_RATES = {
        Strategy.STAY: 1 / 3,
        Strategy.SWITCH: 2 / 3,
    }

    @classmethod
    def setup_matplotlib(cls) -> None:
        """Setup matplotlib with custom styling"""
        for style in ("seaborn-v0_8-whitegrid", "seaborn-whitegrid", "ggplot"):
            try:
                plt.style.use(style)
                break
            except OSError:
                logger.debug(f"Matplotlib style {style} not available")

        plt.rcParams.update({
            "figure.figsize": (12, 8),
            "figure.dpi": 150,
            "axes.labelsize": 12,
            "axes.titlesize": 14,
            "xtick.labelsize": 10,
            "ytick.labelsize": 10,
            "legend.fontsize": 10,
        })

    @classmethod
    def format_percentage(cls, value: float) -> str:
        """Format value as percentage"""
        return f"{value * 100:.1f}%"
