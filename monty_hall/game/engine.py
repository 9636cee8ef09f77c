"""
Monty Hall game engine - board setup, host behaviour and strategy resolution
"""

from typing import List, Optional, Sequence, Union
import numpy as np
from loguru import logger
from pydantic import ValidationError

from ..exceptions import InvalidArgumentError
from .models import (
    DOORS, Board, Outcome, Prize, RoundResult, Strategy, StrategyOutcome
)
from .rng import RandomSource

StrategyLike = Union[Strategy, str, bool]
BoardLike = Union[Board, Sequence[str]]


def validate_door(door, name: str = "door") -> int:
    """Return door as an int, or raise if it is not one of 1, 2, 3"""
    if isinstance(door, (bool, np.bool_)) or not isinstance(door, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer door number, got {door!r}")
    if int(door) not in DOORS:
        raise InvalidArgumentError(f"{name} must be one of {list(DOORS)}, got {door}")
    return int(door)


def validate_board(board: BoardLike, name: str = "board") -> Board:
    """Return board as a Board, converting three "goat"/"car" labels"""
    if isinstance(board, Board):
        return board
    if not isinstance(board, (list, tuple, np.ndarray)):
        raise InvalidArgumentError(f"{name} must be a Board or three labels, got {board!r}")
    try:
        return Board.from_labels(list(board))
    except (ValidationError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid {name} {list(board)!r}: {e}") from None


def resolve_strategy(strategy: StrategyLike) -> Strategy:
    """Accept a Strategy, its value ("stay"/"switch") or a stay flag"""
    if isinstance(strategy, (bool, np.bool_)):
        return Strategy.from_stay(bool(strategy))
    try:
        return Strategy(strategy)
    except ValueError:
        raise InvalidArgumentError(f"Unknown strategy: {strategy!r}") from None


def remaining_doors(*excluded: int) -> List[int]:
    """Doors not in excluded, in ascending order"""
    return [door for door in DOORS if door not in excluded]


class MontyHallGame:
    """
    Single round of the Monty Hall game

    The host always opens a goat door the contestant did not pick. When the
    contestant already holds the car the host picks between the two goats at
    random; otherwise the host has exactly one door available.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        random_seed: Optional[int] = None
    ):
        """
        Initialize the game engine

        Args:
            rng: Random source to draw from (takes precedence over random_seed)
            random_seed: Seed for a fresh random source
        """
        self.rng = rng if rng is not None else RandomSource(random_seed)

    def create_game(self) -> Board:
        """Place two goats and one car behind the doors in random order"""
        return Board(doors=tuple(self.rng.shuffle([Prize.GOAT, Prize.GOAT, Prize.CAR])))

    def select_door(self) -> int:
        """Contestant's initial pick, uniform over the doors"""
        return int(self.rng.choice(DOORS))

    def open_goat_door(self, board: BoardLike, pick: int) -> int:
        """
        Host opens a door hiding a goat

        Args:
            board: Current board, or its three labels
            pick: Contestant's pick

        Returns:
            Door number opened by the host, never the pick and never the car
        """
        board = validate_board(board)
        pick = validate_door(pick, "pick")

        if board[pick] == Prize.CAR:
            opened = int(self.rng.choice(remaining_doors(pick)))
        else:
            # Forced: the only door that is neither the pick nor the car
            (opened,) = remaining_doors(pick, board.car_door)

        assert opened != pick and board[opened] == Prize.GOAT
        return opened

    @staticmethod
    def change_door(strategy: StrategyLike, opened_door: int, pick: int) -> int:
        """
        Final pick under a strategy

        Args:
            strategy: Strategy, "stay"/"switch", or a stay flag
            opened_door: Door the host opened
            pick: Contestant's initial pick

        Returns:
            The pick itself for STAY, the one unopened other door for SWITCH
        """
        strategy = resolve_strategy(strategy)
        opened_door = validate_door(opened_door, "opened_door")
        pick = validate_door(pick, "pick")
        if opened_door == pick:
            raise InvalidArgumentError("opened_door and pick must differ")

        if strategy == Strategy.STAY:
            return pick
        (final_pick,) = remaining_doors(opened_door, pick)
        return final_pick

    @staticmethod
    def determine_winner(final_pick: int, board: BoardLike) -> Outcome:
        board = validate_board(board)
        final_pick = validate_door(final_pick, "final_pick")
        return Outcome.WIN if board[final_pick] == Prize.CAR else Outcome.LOSE

    def play_game(self) -> RoundResult:
        """Play one round and evaluate both strategies on the same board"""
        board = self.create_game()
        pick = self.select_door()
        opened_door = self.open_goat_door(board, pick)

        records = {}
        for strategy in (Strategy.STAY, Strategy.SWITCH):
            final_pick = self.change_door(strategy, opened_door, pick)
            records[strategy] = StrategyOutcome(
                strategy=strategy,
                final_pick=final_pick,
                outcome=self.determine_winner(final_pick, board)
            )

        logger.debug(
            f"Round: board={board.labels()}, pick={pick}, opened={opened_door}, "
            f"stay={records[Strategy.STAY].outcome.value}, "
            f"switch={records[Strategy.SWITCH].outcome.value}"
        )

        return RoundResult(
            board=board,
            pick=pick,
            opened_door=opened_door,
            stay=records[Strategy.STAY],
            switch=records[Strategy.SWITCH]
        )


_default_game = MontyHallGame()


def _game(rng: Optional[RandomSource]) -> MontyHallGame:
    # Module-level calls share one unseeded engine unless a source is injected
    return _default_game if rng is None else MontyHallGame(rng=rng)


def create_game(rng: Optional[RandomSource] = None) -> Board:
    return _game(rng).create_game()


def select_door(rng: Optional[RandomSource] = None) -> int:
    return _game(rng).select_door()


def open_goat_door(game: BoardLike, pick: int, rng: Optional[RandomSource] = None) -> int:
    return _game(rng).open_goat_door(game, pick)


def change_door(stay: StrategyLike, opened_door: int, pick: int) -> int:
    return MontyHallGame.change_door(stay, opened_door, pick)


def determine_winner(final_pick: int, game: BoardLike) -> Outcome:
    return MontyHallGame.determine_winner(final_pick, game)


def play_game(rng: Optional[RandomSource] = None) -> RoundResult:
    return _game(rng).play_game()
