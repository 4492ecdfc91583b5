"""Shared constants and enumerations for the ricochet puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Dict, Optional, Tuple


GRID_SIZE = 5

MAX_GENERATION_ATTEMPTS = 100
ISLAND_PROBABILITY = 0.7
RANDOM_WALL_COUNT = 3
SEARCH_MARGIN = 10
FALLBACK_MOVE_CAP = 25


class Direction(Enum):
    """Compass directions the token can slide in, as (row, col) deltas."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @staticmethod
    def from_name(name: str) -> "Direction":
        key = name.strip().upper()
        for direction in Direction:
            if key in (direction.name, direction.name[0]):
                return direction
        raise ValueError(f"Unknown direction: {name}")


class Difficulty(str, Enum):
    """Puzzle difficulty levels."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"

    @staticmethod
    def from_name(name: "str | Difficulty") -> "Difficulty":
        if isinstance(name, Difficulty):
            return name
        try:
            return Difficulty[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown difficulty: {name}") from exc


class Collected(IntFlag):
    """Which of the two collectibles have been visited."""

    NONE = 0
    FIRST = 1
    SECOND = 2
    BOTH = FIRST | SECOND


@dataclass(frozen=True)
class DifficultyBand:
    """Inclusive range of optimal solution lengths."""

    minimum: int
    maximum: int

    def contains(self, moves: int) -> bool:
        return self.minimum <= moves <= self.maximum


DIFFICULTY_BANDS: Dict[Difficulty, DifficultyBand] = {
    Difficulty.EASY: DifficultyBand(6, 10),
    Difficulty.MEDIUM: DifficultyBand(10, 14),
    Difficulty.HARD: DifficultyBand(14, 20),
}


def difficulty_for_moves(moves: Optional[int]) -> Difficulty:
    """Easiest difficulty whose band holds ``moves``.

    Counts below every band read as EASY; counts above every band, and
    layouts with no known solution, read as HARD.
    """

    if moves is None:
        return Difficulty.HARD
    for difficulty, band in DIFFICULTY_BANDS.items():
        if band.contains(moves):
            return difficulty
    if moves < DIFFICULTY_BANDS[Difficulty.EASY].minimum:
        return Difficulty.EASY
    return Difficulty.HARD


@dataclass(frozen=True)
class Bounds:
    """Square grid bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
