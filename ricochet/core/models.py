"""Value types shared by the movement engine, game state and solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .constants import Direction
from .exceptions import LayoutError


@dataclass(frozen=True, order=True)
class Cell:
    """A grid coordinate. Cells outside the grid are valid values too."""

    row: int
    col: int

    def step(self, direction: Direction) -> "Cell":
        d_row, d_col = direction.vector
        return Cell(self.row + d_row, self.col + d_col)

    def is_adjacent(self, other: "Cell") -> bool:
        return abs(self.row - other.row) + abs(self.col - other.col) == 1

    def to_jsonable(self) -> List[int]:
        return [self.row, self.col]

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Wall:
    """Blocks movement between two adjacent cells, in either direction.

    Endpoints are stored in sorted order so ``Wall.between(a, b)`` and
    ``Wall.between(b, a)`` compare and hash equal.
    """

    first: Cell
    second: Cell

    def __post_init__(self) -> None:
        if not self.first.is_adjacent(self.second):
            raise LayoutError(f"Wall endpoints {self.first} and {self.second} are not adjacent")
        if self.second < self.first:
            raise LayoutError("Wall endpoints must be ordered; use Wall.between()")

    @classmethod
    def between(cls, a: Cell, b: Cell) -> "Wall":
        return cls(a, b) if a <= b else cls(b, a)

    def blocks(self, a: Cell, b: Cell) -> bool:
        return (a, b) in ((self.first, self.second), (self.second, self.first))

    def is_border(self, size: int) -> bool:
        return not all(0 <= c.row < size and 0 <= c.col < size for c in (self.first, self.second))

    def to_jsonable(self) -> List[List[int]]:
        return [self.first.to_jsonable(), self.second.to_jsonable()]


@dataclass(frozen=True)
class SlideResult:
    """Outcome of a single ricochet slide."""

    final: Cell
    path: Tuple[Cell, ...]

    @property
    def moved(self) -> bool:
        return len(self.path) > 1

    @property
    def entered(self) -> Tuple[Cell, ...]:
        return self.path[1:]


class MoveOutcome(str, Enum):
    """Why a move did or did not change the game state."""

    MOVED = "MOVED"
    BLOCKED = "BLOCKED"
    GAME_COMPLETE = "GAME_COMPLETE"


@dataclass
class MoveResult:
    """What a renderer needs to animate one move."""

    moved: bool
    origin: Cell
    destination: Cell
    collected_now: bool = False
    won: bool = False
    outcome: MoveOutcome = MoveOutcome.MOVED
    path: Tuple[Cell, ...] = field(default_factory=tuple)

    def to_jsonable(self) -> dict:
        return {
            "moved": self.moved,
            "from": self.origin.to_jsonable(),
            "to": self.destination.to_jsonable(),
            "collected_now": self.collected_now,
            "won": self.won,
            "outcome": self.outcome.value,
        }
