"""
Batch Simulation Module
"""

from .simulator import MontyHallSimulator, play_n_games, summarize_rounds
from .models import BatchResult, SimulationConfig, StrategySummary
from .report import format_proportion_table, log_summary

__all__ = [
    "MontyHallSimulator",
    "play_n_games",
    "summarize_rounds",
    "BatchResult",
    "SimulationConfig",
    "StrategySummary",
    "format_proportion_table",
    "log_summary"
]
