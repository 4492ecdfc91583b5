"""Breadth-first search over (position, collectibles) states.

Every move costs one, so the first solution BFS discovers is a shortest one.
The node space is at most ``size * size * 4``, which keeps the uncapped path
search finite even on layouts with no solution.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, NamedTuple, Optional, Tuple

from ..core.constants import Collected, Direction
from ..core.models import Cell
from ..utils.logger import get_logger
from .layout import Layout
from .movement import slide, sweep_path


LOGGER = get_logger(__name__)


class SearchNode(NamedTuple):
    position: Cell
    collected: Collected


Parents = Dict[SearchNode, Optional[Tuple[SearchNode, Direction]]]


def _successors(layout: Layout, node: SearchNode):
    """Yield ``(direction, next_node, reached_goal)`` for every displacing move."""

    for direction in Direction:
        result = slide(layout, node.position, direction)
        if not result.moved:
            continue
        collected, reached_goal = sweep_path(layout, result.path, node.collected)
        yield direction, SearchNode(result.final, collected), reached_goal


def _breadth_first(
    layout: Layout,
    origin: SearchNode,
    move_cap: Optional[int],
) -> Tuple[Optional[int], Optional[List[Direction]], int]:
    """Shared BFS. Returns ``(length, path, expanded)``; length/path are None when unsolved."""

    parents: Parents = {origin: None}
    depth: Dict[SearchNode, int] = {origin: 0}
    frontier: Deque[SearchNode] = deque([origin])
    expanded = 0

    while frontier:
        node = frontier.popleft()
        node_depth = depth[node]
        if move_cap is not None and node_depth >= move_cap:
            continue
        expanded += 1
        for direction, nxt, reached_goal in _successors(layout, node):
            if reached_goal:
                return node_depth + 1, _rebuild(parents, node) + [direction], expanded
            if nxt in depth:
                continue
            depth[nxt] = node_depth + 1
            parents[nxt] = (node, direction)
            frontier.append(nxt)

    return None, None, expanded


def _rebuild(parents: Parents, node: SearchNode) -> List[Direction]:
    directions: List[Direction] = []
    link = parents[node]
    while link is not None:
        node, direction = link
        directions.append(direction)
        link = parents[node]
    directions.reverse()
    return directions


def _origin(layout: Layout, origin: Optional[Cell], collected: Collected) -> SearchNode:
    return SearchNode(origin if origin is not None else layout.start, Collected(collected))


def shortest_solution_length(
    layout: Layout,
    move_cap: int,
    origin: Optional[Cell] = None,
    collected: Collected = Collected.NONE,
) -> Optional[int]:
    """Length of the shortest winning move sequence, or None if it exceeds ``move_cap``."""

    length, _, expanded = _breadth_first(layout, _origin(layout, origin, collected), move_cap)
    LOGGER.debug("Length search expanded %d nodes (cap %d): %s", expanded, move_cap, length)
    return length


def shortest_solution_path(
    layout: Layout,
    origin: Optional[Cell] = None,
    collected: Collected = Collected.NONE,
) -> Optional[List[Direction]]:
    """A shortest winning direction sequence, or None when the goal is unreachable."""

    _, path, expanded = _breadth_first(layout, _origin(layout, origin, collected), None)
    LOGGER.debug(
        "Path search expanded %d nodes: %s",
        expanded,
        "no solution" if path is None else f"{len(path)} moves",
    )
    return path


def distance_map(
    layout: Layout,
    origin: Optional[Cell] = None,
    collected: Collected = Collected.NONE,
) -> Dict[SearchNode, int]:
    """BFS distance to every reachable node, ignoring the goal."""

    start = _origin(layout, origin, collected)
    depth: Dict[SearchNode, int] = {start: 0}
    frontier: Deque[SearchNode] = deque([start])
    while frontier:
        node = frontier.popleft()
        for _, nxt, _ in _successors(layout, node):
            if nxt not in depth:
                depth[nxt] = depth[node] + 1
                frontier.append(nxt)
    return depth
