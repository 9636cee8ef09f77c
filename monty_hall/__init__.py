"""
Monty Hall Simulation

Simulates the three-door Monty Hall game and compares the win rates of
the "stay" and "switch" strategies over many paired rounds.
"""

__version__ = "0.1.0"
__author__ = "Monty Hall Simulation Team"

from .exceptions import MontyHallError, InvalidArgumentError
from .game import (
    Board, Prize, Strategy, Outcome, RoundResult, MontyHallGame, RandomSource,
    create_game, select_door, open_goat_door, change_door, determine_winner,
    play_game,
)
from .simulation import MontyHallSimulator, BatchResult, play_n_games

__all__ = [
    "MontyHallError",
    "InvalidArgumentError",
    "Board",
    "Prize",
    "Strategy",
    "Outcome",
    "RoundResult",
    "MontyHallGame",
    "RandomSource",
    "MontyHallSimulator",
    "BatchResult",
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    "play_game",
    "play_n_games",
]
