"""
Monty Hall Game Module
"""

from .rng import RandomSource
from .models import Board, Prize, Strategy, Outcome, StrategyOutcome, RoundResult
from .engine import (
    MontyHallGame,
    remaining_doors,
    create_game,
    select_door,
    open_goat_door,
    change_door,
    determine_winner,
    play_game,
)

__all__ = [
    "RandomSource",
    "Board",
    "Prize",
    "Strategy",
    "Outcome",
    "StrategyOutcome",
    "RoundResult",
    "MontyHallGame",
    "remaining_doors",
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    "play_game",
]
