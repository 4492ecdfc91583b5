"""Mutable game progress over a fixed layout."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Optional

from ..core.constants import Collected, Direction
from ..core.models import Cell, MoveOutcome, MoveResult
from ..utils.logger import get_logger
from .layout import Layout
from .movement import slide, sweep_path


LOGGER = get_logger(__name__)


class PuzzleState:
    """Token position, collectibles visited, move counter and win flag.

    All mutation goes through :meth:`apply_move` and :meth:`reset`;
    renderers should read :meth:`snapshot` rather than poke attributes.
    """

    def __init__(self, layout: Layout, optimal_moves: Optional[int] = None) -> None:
        self.layout = layout
        self.optimal_moves = optimal_moves
        self.position: Cell = layout.start
        self.collected: Collected = Collected.NONE
        self.move_count: int = 0
        self.won: bool = False

    @property
    def visited(self) -> FrozenSet[Cell]:
        return self.layout.collected_cells(self.collected)

    def reset(self) -> None:
        self.position = self.layout.start
        self.collected = Collected.NONE
        self.move_count = 0
        self.won = False

    def apply_move(self, direction: Direction) -> MoveResult:
        origin = self.position
        if self.won:
            return MoveResult(
                moved=False,
                origin=origin,
                destination=origin,
                outcome=MoveOutcome.GAME_COMPLETE,
                won=True,
            )

        result = slide(self.layout, origin, direction)
        if not result.moved:
            return MoveResult(
                moved=False,
                origin=origin,
                destination=origin,
                outcome=MoveOutcome.BLOCKED,
                path=result.path,
            )

        collected, reached_goal = sweep_path(self.layout, result.path, self.collected)
        collected_now = collected != self.collected
        self.position = result.final
        self.collected = collected
        self.move_count += 1
        if reached_goal:
            self.won = True
            LOGGER.info("Puzzle solved in %d moves (optimal %s)", self.move_count, self.optimal_moves)

        return MoveResult(
            moved=True,
            origin=origin,
            destination=result.final,
            collected_now=collected_now,
            won=self.won,
            path=result.path,
        )

    def snapshot(self) -> Dict[str, Any]:
        return {
            "position": self.position.to_jsonable(),
            "start": self.layout.start.to_jsonable(),
            "goal": self.layout.goal.to_jsonable(),
            "collectibles": [cell.to_jsonable() for cell in self.layout.collectibles],
            "visited": sorted(cell.to_jsonable() for cell in self.visited),
            "move_count": self.move_count,
            "won": self.won,
            "optimal_moves": self.optimal_moves,
        }

    def __repr__(self) -> str:
        return (
            f"PuzzleState(position={self.position}, collected={self.collected!r}, "
            f"moves={self.move_count}, won={self.won})"
        )
