"""CLI entrypoint for the ricochet puzzle generator and solver."""

from __future__ import annotations

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Any, Dict, List

from ricochet.core.constants import Difficulty, Direction
from ricochet.engine.game import RicochetGame
from ricochet.engine.generator import GeneratorConfig, PuzzleGenerator
from ricochet.utils.logger import configure_logging
from ricochet.utils.pretty import print_puzzle_stats


def parse_moves(text: str) -> List[Direction]:
    """Parse ``"E S W"``, ``"east,south"`` or a compact ``"ESWN"`` into directions."""

    tokens = [token for token in re.split(r"[\s,]+", text.strip()) if token]
    if len(tokens) == 1 and re.fullmatch(r"[NSEWnsew]{2,}", tokens[0]):
        tokens = list(tokens[0])
    return [Direction.from_name(token) for token in tokens]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and solve ricochet sliding-token puzzles",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="Difficulty band for the optimal solution length",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=GeneratorConfig.max_attempts,
        help="Random layouts to try before using the fallback layout",
    )
    parser.add_argument(
        "--moves",
        type=str,
        default="",
        help="Moves to replay from the start, e.g. 'E S W' or 'ESW'",
    )
    parser.add_argument(
        "--solve",
        action="store_true",
        help="Include a shortest solution path in the output",
    )
    parser.add_argument(
        "--board",
        action="store_true",
        help="Print the board and stats to stderr",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.max_attempts < 1:
        parser.error("--max-attempts must be at least 1")
    try:
        moves = parse_moves(args.moves) if args.moves else []
    except ValueError as exc:
        parser.error(str(exc))

    config = GeneratorConfig(seed=args.seed, max_attempts=args.max_attempts)
    game = RicochetGame(PuzzleGenerator(config))
    state = game.new_game(args.difficulty)
    puzzle = game.puzzle

    payload: Dict[str, Any] = {
        "difficulty": puzzle.difficulty.value,
        "attempts": puzzle.attempts,
        "used_fallback": puzzle.used_fallback,
        "seed": puzzle.seed,
        "layout": puzzle.layout.to_jsonable(optimal_moves=puzzle.optimal_moves),
    }

    if args.solve:
        solution = game.solution_path()
        payload["solution"] = [d.name for d in solution] if solution is not None else None

    if moves:
        payload["moves"] = [
            {"direction": direction.name, **game.apply_move(direction).to_jsonable()}
            for direction in moves
        ]

    payload["state"] = state.snapshot()

    if args.board:
        print_puzzle_stats(puzzle, state, stream=sys.stderr)

    output_text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
