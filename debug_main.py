"""Convenience entrypoint with predefined generator settings for debugging.

Usage in a Python console (Jupyter-style)::

    import debug_main
    state = debug_main.prepare_state(seed=7)
    debug_main.step_build_candidate(state)
    debug_main.step_measure(state)
    debug_main.step_solve(state)
    debug_main.step_replay(state)

Call :func:`run_debug` for a one-liner, or :func:`sweep_seeds` to see how
often each difficulty band is hit before the fallback kicks in.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from typing import Any, Dict, Iterable, Optional

from ricochet.core.constants import DIFFICULTY_BANDS, Difficulty
from ricochet.engine.generator import GeneratorConfig, PuzzleGenerator
from ricochet.engine.search import distance_map, shortest_solution_length, shortest_solution_path
from ricochet.engine.state import PuzzleState
from ricochet.utils.logger import configure_logging
from ricochet.utils.pretty import pretty_print_board

DEFAULT_DEBUG_ARGS: Dict[str, Any] = {
    "difficulty": Difficulty.MEDIUM,
    "seed": None,
    "max_attempts": 100,
    "island_probability": 0.7,
    "random_wall_count": 3,
}

LOGGER = logging.getLogger(__name__)


def prepare_state(**overrides: Any) -> Dict[str, Any]:
    args = {**DEFAULT_DEBUG_ARGS, **overrides}
    difficulty = Difficulty.from_name(args.pop("difficulty"))
    config = GeneratorConfig(**args)
    return {
        "config": config,
        "difficulty": difficulty,
        "generator": PuzzleGenerator(config),
        "layout": None,
        "optimal_moves": None,
        "solution": None,
    }


def step_build_candidate(state: Dict[str, Any]):
    state["layout"] = state["generator"]._build_candidate()
    state["optimal_moves"] = None
    state["solution"] = None
    pretty_print_board(state["layout"], label="Candidate layout")
    return state["layout"]


def step_measure(state: Dict[str, Any]):
    band = DIFFICULTY_BANDS[state["difficulty"]]
    cap = band.maximum + state["config"].search_margin
    state["optimal_moves"] = shortest_solution_length(state["layout"], cap)
    LOGGER.info(
        "Optimal %s (band %d-%d, reachable states %d)",
        state["optimal_moves"],
        band.minimum,
        band.maximum,
        len(distance_map(state["layout"])),
    )
    return state["optimal_moves"]


def step_solve(state: Dict[str, Any]):
    state["solution"] = shortest_solution_path(state["layout"])
    if state["solution"] is None:
        LOGGER.info("Layout has no solution")
    else:
        LOGGER.info("Solution: %s", " ".join(d.name for d in state["solution"]))
    return state["solution"]


def step_replay(state: Dict[str, Any]) -> PuzzleState:
    puzzle_state = PuzzleState(state["layout"], state["optimal_moves"])
    for direction in state["solution"] or []:
        result = puzzle_state.apply_move(direction)
        LOGGER.info(
            "%-5s %s -> %s%s",
            direction.name,
            result.origin,
            result.destination,
            " (collected)" if result.collected_now else "",
        )
    pretty_print_board(state["layout"], puzzle_state, label=f"Won: {puzzle_state.won}")
    return puzzle_state


def run_debug(**overrides: Any) -> PuzzleState:
    configure_logging(logging.INFO)
    state = prepare_state(**overrides)
    puzzle = state["generator"].generate(state["difficulty"])
    state["layout"] = puzzle.layout
    state["optimal_moves"] = puzzle.optimal_moves
    step_solve(state)
    return step_replay(state)


def sweep_seeds(
    seeds: Iterable[int],
    difficulties: Optional[Iterable["Difficulty | str"]] = None,
    **overrides: Any,
) -> Dict[str, Dict[str, Any]]:
    """Generate one puzzle per seed and difficulty and summarise the outcomes."""

    summary: Dict[str, Dict[str, Any]] = {}
    seeds = list(seeds)
    for difficulty in [Difficulty.from_name(name) for name in difficulties or Difficulty]:
        started = time.perf_counter()
        optimal = Counter()
        fallbacks = 0
        attempts = 0
        for seed in seeds:
            config = GeneratorConfig(**{**overrides, "seed": seed})
            puzzle = PuzzleGenerator(config).generate(difficulty)
            optimal[puzzle.optimal_moves] += 1
            fallbacks += int(puzzle.used_fallback)
            attempts += puzzle.attempts
        summary[difficulty.value] = {
            "puzzles": len(seeds),
            "fallbacks": fallbacks,
            "mean_attempts": attempts / len(seeds) if seeds else 0.0,
            "optimal_moves": dict(sorted(optimal.items())),
            "seconds": round(time.perf_counter() - started, 3),
        }
        LOGGER.info("%s: %s", difficulty.value, summary[difficulty.value])
    return summary


if __name__ == "__main__":  # pragma: no cover
    run_debug()
