"""Ricochet slide rule shared by live play and the solver."""

from __future__ import annotations

from typing import Sequence, Tuple

from ..core.constants import Collected, Direction
from ..core.models import Cell, SlideResult
from .layout import Layout


def slide(layout: Layout, start: Cell, direction: Direction) -> SlideResult:
    """Slide from ``start`` until the next step would leave the grid or cross a wall.

    ``path`` always begins with ``start``. A path of length one means the
    first step was already blocked and the move is a no-op.
    """

    current = start
    path = [start]
    while True:
        nxt = current.step(direction)
        if not layout.contains(nxt) or layout.walls.blocks(current, nxt):
            return SlideResult(final=current, path=tuple(path))
        current = nxt
        path.append(current)


def sweep_path(
    layout: Layout, path: Sequence[Cell], collected: Collected
) -> Tuple[Collected, bool]:
    """Apply collection and goal rules to the cells entered along ``path``.

    ``path[0]`` is the origin and is skipped. Cells are visited in order, so
    the goal only counts when it is entered while both collectibles are
    already held, whether the token stops there or slides through it.
    """

    collected = Collected(collected)
    reached_goal = False
    for cell in path[1:]:
        collected |= layout.collectible_flag(cell)
        if cell == layout.goal and collected == Collected.BOTH:
            reached_goal = True
    return collected, reached_goal
