"""
Data models for a single Monty Hall round
"""

from enum import Enum
from typing import Dict, Iterator, List, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

NUM_DOORS = 3
DOORS: Tuple[int, ...] = tuple(range(1, NUM_DOORS + 1))


class Prize(str, Enum):
    GOAT = "goat"
    CAR = "car"


class Strategy(str, Enum):
    STAY = "stay"
    SWITCH = "switch"

    @classmethod
    def from_stay(cls, stay: bool) -> "Strategy":
        return cls.STAY if stay else cls.SWITCH


class Outcome(str, Enum):
    WIN = "WIN"
    LOSE = "LOSE"


class Board(BaseModel):
    """
    Arrangement of one car and two goats behind doors 1..3

    Indexing is by door number, so ``board[1]`` is the first door.
    """
    model_config = ConfigDict(frozen=True)

    doors: Tuple[Prize, Prize, Prize] = Field(description="Prize behind doors 1, 2 and 3")

    @model_validator(mode="after")
    def _check_single_car(self) -> "Board":
        cars = sum(1 for prize in self.doors if prize == Prize.CAR)
        if cars != 1:
            raise ValueError(f"Board must hold exactly one car, got {cars}")
        return self

    @classmethod
    def from_labels(cls, labels: Sequence[str]) -> "Board":
        """Create from plain labels such as ["goat", "car", "goat"]"""
        return cls(doors=tuple(Prize(label) for label in labels))

    def __getitem__(self, door: int) -> Prize:
        return self.doors[door - 1]

    def __len__(self) -> int:
        return len(self.doors)

    def __iter__(self) -> Iterator[Prize]:
        return iter(self.doors)

    def __contains__(self, prize: object) -> bool:
        return prize in self.doors

    @property
    def car_door(self) -> int:
        return self.doors.index(Prize.CAR) + 1

    def labels(self) -> List[str]:
        return [prize.value for prize in self.doors]


class StrategyOutcome(BaseModel):
    """Final pick and result for one strategy within a round"""
    model_config = ConfigDict(frozen=True)

    strategy: Strategy
    final_pick: int = Field(ge=1, le=NUM_DOORS)
    outcome: Outcome


class RoundResult(BaseModel):
    """
    Paired result of one round

    Both records are evaluated against the same board and the same opened
    door, so they are correlated rather than independent trials.
    """
    model_config = ConfigDict(frozen=True)

    board: Board
    pick: int = Field(ge=1, le=NUM_DOORS, description="Contestant's initial pick")
    opened_door: int = Field(ge=1, le=NUM_DOORS, description="Door opened by the host")
    stay: StrategyOutcome
    switch: StrategyOutcome

    @model_validator(mode="after")
    def _check_pairing(self) -> "RoundResult":
        if self.stay.strategy != Strategy.STAY or self.switch.strategy != Strategy.SWITCH:
            raise ValueError("RoundResult needs one STAY and one SWITCH record")
        return self

    @property
    def records(self) -> Tuple[StrategyOutcome, StrategyOutcome]:
        return (self.stay, self.switch)

    def outcome_for(self, strategy: Strategy) -> Outcome:
        return self.stay.outcome if Strategy(strategy) == Strategy.STAY else self.switch.outcome

    def to_rows(self) -> List[Dict[str, str]]:
        """Two rows of {strategy, outcome}, stay first"""
        return [
            {"strategy": record.strategy.value, "outcome": record.outcome.value}
            for record in self.records
        ]
