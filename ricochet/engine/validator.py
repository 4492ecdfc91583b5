"""Deterministic invariant checks for puzzle layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from ..core.exceptions import LayoutError
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .layout import Layout


LOGGER = get_logger(__name__)

MIN_GRID_SIZE = 3


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LayoutValidator:
    """Runs the structural checks a generated layout must always pass."""

    def validate(self, layout: Layout) -> ValidationResult:
        try:
            self._check_size(layout)
            self._check_elements_in_bounds(layout)
            self._check_elements_distinct(layout)
            self._check_walls(layout)
        except LayoutError as exc:
            LOGGER.error("Layout validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_size(self, layout: Layout) -> None:
        if layout.size < MIN_GRID_SIZE:
            raise LayoutError(f"Grid size {layout.size} is below the minimum of {MIN_GRID_SIZE}")

    def _check_elements_in_bounds(self, layout: Layout) -> None:
        for label, cell in layout.elements():
            if not layout.contains(cell):
                raise LayoutError(f"{label} {cell} lies outside the {layout.size}x{layout.size} grid")

    def _check_elements_distinct(self, layout: Layout) -> None:
        seen = {}
        for label, cell in layout.elements():
            if cell in seen:
                raise LayoutError(f"{label} shares cell {cell} with {seen[cell]}")
            seen[cell] = label

    def _check_walls(self, layout: Layout) -> None:
        for wall in layout.walls:
            inside = [cell for cell in (wall.first, wall.second) if layout.contains(cell)]
            if not inside:
                raise LayoutError(f"Wall {wall.first}-{wall.second} lies entirely outside the grid")
