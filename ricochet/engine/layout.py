"""Immutable puzzle layout: grid size, walls and element positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.constants import Bounds, Collected
from ..core.exceptions import LayoutError
from ..core.models import Cell
from .validator import LayoutValidator
from .walls import WallSet


CellLike = Tuple[int, int]


def as_cell(value: "Cell | CellLike") -> Cell:
    if isinstance(value, Cell):
        return value
    row, col = value
    return Cell(int(row), int(col))


@dataclass(frozen=True)
class Layout:
    """Everything about a puzzle that stays fixed while it is played."""

    size: int
    walls: WallSet
    start: Cell
    goal: Cell
    collectibles: Tuple[Cell, Cell]

    def __post_init__(self) -> None:
        if len(self.collectibles) != 2:
            raise LayoutError(f"Expected exactly two collectibles, got {len(self.collectibles)}")
        result = LayoutValidator().validate(self)
        if not result.ok:
            raise LayoutError("; ".join(result.messages))

    @classmethod
    def build(
        cls,
        size: int,
        *,
        start: "Cell | CellLike",
        goal: "Cell | CellLike",
        collectibles: Sequence["Cell | CellLike"],
        walls: Iterable[Tuple["Cell | CellLike", "Cell | CellLike"]] = (),
        border: bool = True,
    ) -> "Layout":
        """Convenience constructor taking plain ``(row, col)`` tuples."""

        wall_set = WallSet.border(size) if border else WallSet()
        wall_set = wall_set.union(
            WallSet.from_pairs((as_cell(a), as_cell(b)) for a, b in walls)
        )
        return cls(
            size=size,
            walls=wall_set,
            start=as_cell(start),
            goal=as_cell(goal),
            collectibles=tuple(as_cell(c) for c in collectibles),  # type: ignore[arg-type]
        )

    @property
    def bounds(self) -> Bounds:
        return Bounds(self.size)

    def contains(self, cell: Cell) -> bool:
        return self.bounds.contains(cell.row, cell.col)

    def elements(self) -> List[Tuple[str, Cell]]:
        return [
            ("start", self.start),
            ("goal", self.goal),
            ("collectible 1", self.collectibles[0]),
            ("collectible 2", self.collectibles[1]),
        ]

    def collectible_flag(self, cell: Cell) -> Collected:
        if cell == self.collectibles[0]:
            return Collected.FIRST
        if cell == self.collectibles[1]:
            return Collected.SECOND
        return Collected.NONE

    def collected_cells(self, collected: Collected) -> frozenset:
        cells = set()
        if collected & Collected.FIRST:
            cells.add(self.collectibles[0])
        if collected & Collected.SECOND:
            cells.add(self.collectibles[1])
        return frozenset(cells)

    def to_jsonable(self, optimal_moves: Optional[int] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "size": self.size,
            "walls": self.walls.to_jsonable(),
            "start": self.start.to_jsonable(),
            "goal": self.goal.to_jsonable(),
            "collectibles": [cell.to_jsonable() for cell in self.collectibles],
        }
        if optimal_moves is not None:
            payload["optimal_moves"] = optimal_moves
        return payload
