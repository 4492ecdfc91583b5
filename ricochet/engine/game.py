"""Session facade handed to renderers and input handlers."""

from __future__ import annotations

from typing import List, Optional

from ..core.constants import Difficulty, Direction, difficulty_for_moves
from ..core.exceptions import GameNotStartedError
from ..core.models import MoveResult
from ..utils.logger import get_logger
from .generator import GeneratedPuzzle, GeneratorConfig, PuzzleGenerator
from .layout import Layout
from .search import shortest_solution_path
from .state import PuzzleState


LOGGER = get_logger(__name__)


class RicochetGame:
    """Owns the current puzzle and routes every state change through it."""

    def __init__(self, generator: Optional[PuzzleGenerator] = None) -> None:
        self.generator = generator or PuzzleGenerator(GeneratorConfig())
        self._puzzle: Optional[GeneratedPuzzle] = None
        self._state: Optional[PuzzleState] = None

    @classmethod
    def from_layout(
        cls,
        layout: Layout,
        optimal_moves: Optional[int] = None,
        difficulty: "Difficulty | str | None" = None,
    ) -> "RicochetGame":
        """Start a session on an existing layout instead of a generated one.

        A missing ``optimal_moves`` is measured with an uncapped search, and
        a missing ``difficulty`` is read off the optimal count.
        """

        if optimal_moves is None:
            path = shortest_solution_path(layout)
            optimal_moves = len(path) if path is not None else None
        if difficulty is None:
            difficulty = difficulty_for_moves(optimal_moves)
        game = cls()
        game._puzzle = GeneratedPuzzle(
            layout=layout,
            optimal_moves=optimal_moves,
            difficulty=Difficulty.from_name(difficulty),
            attempts=0,
        )
        game._state = PuzzleState(layout, optimal_moves)
        return game

    @property
    def puzzle(self) -> GeneratedPuzzle:
        if self._puzzle is None:
            raise GameNotStartedError("No puzzle has been generated yet")
        return self._puzzle

    @property
    def layout(self) -> Layout:
        return self.puzzle.layout

    @property
    def state(self) -> PuzzleState:
        if self._state is None:
            raise GameNotStartedError("No puzzle has been generated yet")
        return self._state

    def new_game(self, difficulty: "Difficulty | str" = Difficulty.MEDIUM) -> PuzzleState:
        self._puzzle = self.generator.generate(difficulty)
        self._state = PuzzleState(self._puzzle.layout, self._puzzle.optimal_moves)
        return self._state

    def apply_move(self, direction: Direction) -> MoveResult:
        return self.state.apply_move(direction)

    def reset(self) -> PuzzleState:
        self.state.reset()
        return self.state

    def solution_path(self) -> Optional[List[Direction]]:
        """Shortest solution from the start position; replay it after :meth:`reset`."""

        return shortest_solution_path(self.layout)

    def hint(self) -> Optional[Direction]:
        """Next move of a shortest solution from the current state, if one exists."""

        state = self.state
        if state.won:
            return None
        path = shortest_solution_path(self.layout, origin=state.position, collected=state.collected)
        if not path:
            LOGGER.info("No known solution from %s", state.position)
            return None
        return path[0]
