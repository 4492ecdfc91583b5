"""Undirected wall collection used by the movement engine."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, List, Tuple

from ..core.models import Cell, Wall


class WallSet:
    """Immutable, de-duplicated set of walls that keeps insertion order.

    Order only matters for snapshots handed to renderers. Membership uses the
    normalised walls; ``blocks`` checks a set holding both orientations.
    """

    def __init__(self, walls: Iterable[Wall] = ()) -> None:
        ordered: List[Wall] = []
        seen = set()
        for wall in walls:
            if wall in seen:
                continue
            seen.add(wall)
            ordered.append(wall)
        self._ordered: Tuple[Wall, ...] = tuple(ordered)
        self._lookup: FrozenSet[Wall] = frozenset(seen)
        # Both orientations, so blocks() needs no normalisation per step.
        self._pairs: FrozenSet[Tuple[Cell, Cell]] = frozenset(
            pair for wall in ordered for pair in ((wall.first, wall.second), (wall.second, wall.first))
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Cell, Cell]]) -> "WallSet":
        return cls(Wall.between(a, b) for a, b in pairs)

    @classmethod
    def border(cls, size: int) -> "WallSet":
        """Walls between every edge cell and its out-of-grid neighbour."""

        pairs = []
        for i in range(size):
            pairs.append((Cell(0, i), Cell(-1, i)))
            pairs.append((Cell(size - 1, i), Cell(size, i)))
            pairs.append((Cell(i, 0), Cell(i, -1)))
            pairs.append((Cell(i, size - 1), Cell(i, size)))
        return cls.from_pairs(pairs)

    def blocks(self, a: Cell, b: Cell) -> bool:
        return (a, b) in self._pairs

    def union(self, other: Iterable[Wall]) -> "WallSet":
        return WallSet(list(self._ordered) + list(other))

    def interior(self, size: int) -> List[Wall]:
        return [wall for wall in self._ordered if not wall.is_border(size)]

    def __contains__(self, wall: object) -> bool:
        return wall in self._lookup

    def __iter__(self) -> Iterator[Wall]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallSet):
            return NotImplemented
        return self._lookup == other._lookup

    def __hash__(self) -> int:
        return hash(self._lookup)

    def __repr__(self) -> str:
        return f"WallSet({len(self._ordered)} walls)"

    def to_jsonable(self) -> List[List[List[int]]]:
        return [wall.to_jsonable() for wall in self._ordered]
