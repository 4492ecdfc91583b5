"""Ricochet sliding-token puzzle engine.

This package exposes the public API surface via:

- ``ricochet.engine.game.RicochetGame``: session facade for renderers and input handlers.
- ``ricochet.engine.generator.PuzzleGenerator``: solver-verified random layouts.
- ``ricochet.engine.search``: breadth-first shortest solution length and path.
- ``ricochet.engine.movement.slide``: the ricochet slide rule.
"""

from .core.constants import Difficulty, Direction
from .core.models import Cell, MoveResult, Wall
from .engine.game import RicochetGame
from .engine.generator import GeneratedPuzzle, GeneratorConfig, PuzzleGenerator
from .engine.layout import Layout
from .engine.movement import slide
from .engine.search import shortest_solution_length, shortest_solution_path
from .engine.state import PuzzleState

__all__ = [
    "Cell",
    "Difficulty",
    "Direction",
    "GeneratedPuzzle",
    "GeneratorConfig",
    "Layout",
    "MoveResult",
    "PuzzleGenerator",
    "PuzzleState",
    "RicochetGame",
    "Wall",
    "shortest_solution_length",
    "shortest_solution_path",
    "slide",
]

__version__ = "0.1.0"
