"""Random layout generation with a solver-verified difficulty band.

Each attempt builds a candidate layout, asks the solver for its optimal move
count and keeps it only when that count falls inside the requested band.
Attempts are bounded; when they run out a fixed, known-solvable layout is
returned instead, so ``generate`` never fails.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.constants import (
    DIFFICULTY_BANDS,
    FALLBACK_MOVE_CAP,
    GRID_SIZE,
    ISLAND_PROBABILITY,
    MAX_GENERATION_ATTEMPTS,
    RANDOM_WALL_COUNT,
    SEARCH_MARGIN,
    Difficulty,
)
from ..core.models import Cell, Wall
from ..utils.logger import get_logger
from .layout import Layout
from .search import shortest_solution_length, shortest_solution_path
from .walls import WallSet


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    size: int = GRID_SIZE
    seed: Optional[int] = None
    max_attempts: int = MAX_GENERATION_ATTEMPTS
    island_probability: float = ISLAND_PROBABILITY
    random_wall_count: int = RANDOM_WALL_COUNT
    search_margin: int = SEARCH_MARGIN
    fallback_move_cap: int = FALLBACK_MOVE_CAP


@dataclass
class GeneratedPuzzle:
    layout: Layout
    optimal_moves: Optional[int]
    difficulty: Difficulty
    attempts: int
    used_fallback: bool = False
    seed: Optional[int] = None


def island_walls(size: int) -> List[List[Tuple[Cell, Cell]]]:
    """Wall pairs that fence off the four corner regions, one group per corner."""

    last = size - 1
    return [
        [(Cell(0, 0), Cell(0, 1)), (Cell(0, 0), Cell(1, 0))],
        [(Cell(0, last - 1), Cell(0, last)), (Cell(0, last), Cell(1, last))],
        [(Cell(last - 1, 0), Cell(last, 0)), (Cell(last, 0), Cell(last, 1))],
        [(Cell(last - 1, last - 1), Cell(last - 1, last)), (Cell(last, last - 1), Cell(last, last))],
    ]


def fallback_layout(size: int = GRID_SIZE) -> Layout:
    """The layout used once every random attempt has been rejected.

    On the reference grid all four corner islands are present plus one wall
    under (2, 3), which turns the stops into a single long loop. The second
    collectible sits in the middle row, first reachable on move 10, and the
    goal is on the row above it, so the shortest solution is 12 moves.
    Other sizes use the bare corner layout, which is always solvable in
    4 moves.
    """

    if size == GRID_SIZE:
        pairs = [pair for group in island_walls(size) for pair in group]
        pairs.append((Cell(2, 3), Cell(3, 3)))
        return Layout.build(
            size,
            walls=pairs,
            start=(4, 4),
            goal=(1, 2),
            collectibles=((3, 2), (2, 2)),
        )
    last = size - 1
    return Layout.build(
        size,
        start=(0, 0),
        goal=(last, last),
        collectibles=((0, last), (last, 0)),
    )


class PuzzleGenerator:
    """Builds layouts whose optimal solution length falls in a difficulty band."""

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, difficulty: "Difficulty | str" = Difficulty.MEDIUM) -> GeneratedPuzzle:
        difficulty = Difficulty.from_name(difficulty)
        band = DIFFICULTY_BANDS[difficulty]
        move_cap = band.maximum + self.config.search_margin

        for attempt in range(1, self.config.max_attempts + 1):
            layout = self._build_candidate()
            length = shortest_solution_length(layout, move_cap)
            if length is not None and band.contains(length):
                LOGGER.info(
                    "Accepted %s puzzle on attempt %d/%d (optimal %d moves)",
                    difficulty.value,
                    attempt,
                    self.config.max_attempts,
                    length,
                )
                return GeneratedPuzzle(
                    layout=layout,
                    optimal_moves=length,
                    difficulty=difficulty,
                    attempts=attempt,
                    seed=self.config.seed,
                )
            LOGGER.debug(
                "Attempt %d rejected: optimal %s outside [%d, %d]",
                attempt,
                length,
                band.minimum,
                band.maximum,
            )

        LOGGER.warning(
            "No %s puzzle after %d attempts, using fallback layout",
            difficulty.value,
            self.config.max_attempts,
        )
        layout = fallback_layout(self.config.size)
        optimal = shortest_solution_length(layout, self.config.fallback_move_cap)
        if optimal is None:
            path = shortest_solution_path(layout)
            optimal = len(path) if path is not None else None
            LOGGER.warning(
                "Fallback layout not solved within %d moves, uncapped optimal %s",
                self.config.fallback_move_cap,
                optimal,
            )
        return GeneratedPuzzle(
            layout=layout,
            optimal_moves=optimal,
            difficulty=difficulty,
            attempts=self.config.max_attempts,
            used_fallback=True,
            seed=self.config.seed,
        )

    # ------------------------------------------------------------------
    # Candidate construction
    # ------------------------------------------------------------------
    def _build_candidate(self) -> Layout:
        size = self.config.size
        walls = WallSet.border(size).union(
            Wall.between(a, b) for a, b in self._island_walls() + self._random_walls()
        )
        start, goal, first, second = self._random_cells(4)
        return Layout(size=size, walls=walls, start=start, goal=goal, collectibles=(first, second))

    def _island_walls(self) -> List[Tuple[Cell, Cell]]:
        pairs: List[Tuple[Cell, Cell]] = []
        for group in island_walls(self.config.size):
            if self.rng.random() < self.config.island_probability:
                pairs.extend(group)
        return pairs

    def _random_walls(self) -> List[Tuple[Cell, Cell]]:
        pairs: List[Tuple[Cell, Cell]] = []
        limit = self.config.size - 2
        for _ in range(self.config.random_wall_count):
            row = self.rng.randint(0, limit)
            col = self.rng.randint(0, limit)
            origin = Cell(row, col)
            if self.rng.random() < 0.5:
                pairs.append((origin, Cell(row + 1, col)))
            else:
                pairs.append((origin, Cell(row, col + 1)))
        return pairs

    def _random_cells(self, count: int) -> List[Cell]:
        size = self.config.size
        cells = [Cell(row, col) for row in range(size) for col in range(size)]
        return self.rng.sample(cells, count)
