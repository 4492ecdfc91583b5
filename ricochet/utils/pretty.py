"""Pretty-print helpers for ricochet layouts."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

from ..core.models import Cell

if TYPE_CHECKING:
    from ..engine.generator import GeneratedPuzzle
    from ..engine.layout import Layout
    from ..engine.state import PuzzleState


SYMBOLS = {
    "token": "@",
    "start": "S",
    "goal": "G",
    "visited": "x",
    "empty": ".",
}


def cell_symbol(layout: Layout, cell: Cell, state: Optional[PuzzleState] = None) -> str:
    if state is not None and cell == state.position:
        return SYMBOLS["token"]
    if cell == layout.goal:
        return SYMBOLS["goal"]
    for index, collectible in enumerate(layout.collectibles, start=1):
        if cell == collectible:
            if state is not None and cell in state.visited:
                return SYMBOLS["visited"]
            return str(index)
    if cell == layout.start:
        return SYMBOLS["start"]
    return SYMBOLS["empty"]


def format_board(layout: Layout, state: Optional[PuzzleState] = None) -> str:
    """Render the grid with walls drawn between cells."""

    size = layout.size
    lines = ["    " + "".join(f"{col:^3} " for col in range(size))]
    for row in range(size + 1):
        segments = [
            "---" if layout.walls.blocks(Cell(row - 1, col), Cell(row, col)) else "   "
            for col in range(size)
        ]
        lines.append("   +" + "+".join(segments) + "+")
        if row == size:
            break
        parts: List[str] = []
        for col in range(size + 1):
            parts.append("|" if layout.walls.blocks(Cell(row, col - 1), Cell(row, col)) else " ")
            if col < size:
                parts.append(f" {cell_symbol(layout, Cell(row, col), state)} ")
        lines.append(f"{row:>2} " + "".join(parts))
    return "\n".join(lines)


def pretty_print_board(
    layout: Layout,
    state: Optional[PuzzleState] = None,
    *,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(layout, state), file=stream)


def print_puzzle_stats(
    puzzle: GeneratedPuzzle,
    state: Optional[PuzzleState] = None,
    *,
    stream=None,
) -> None:
    """Print board + generation stats for a puzzle."""

    stream = stream or sys.stdout
    layout = puzzle.layout
    print(format_board(layout, state), file=stream)

    interior = layout.walls.interior(layout.size)
    print(file=stream)
    print("--- Puzzle ---", file=stream)
    print(f"  Size:          {layout.size} x {layout.size}", file=stream)
    print(f"  Difficulty:    {puzzle.difficulty.value}", file=stream)
    print(f"  Optimal moves: {puzzle.optimal_moves if puzzle.optimal_moves is not None else '-'}", file=stream)
    print(f"  Interior walls:{len(interior):>3}", file=stream)
    print(f"  Attempts:      {puzzle.attempts}{' (fallback)' if puzzle.used_fallback else ''}", file=stream)

    if state is not None:
        print(file=stream)
        print("--- Progress ---", file=stream)
        print(f"  Moves:         {state.move_count}", file=stream)
        print(f"  Collected:     {len(state.visited)}/2", file=stream)
        print(f"  Won:           {'yes' if state.won else 'no'}", file=stream)

    if puzzle.seed is not None:
        print(file=stream)
        print(f"Seed: {puzzle.seed}", file=stream)
