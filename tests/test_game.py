import io
import json
import logging
import tempfile
import unittest
from pathlib import Path

from ricochet.core.constants import Difficulty, Direction
from ricochet.core.exceptions import GameNotStartedError
from ricochet.core.models import Cell
from ricochet.engine.game import RicochetGame
from ricochet.engine.generator import GeneratorConfig, PuzzleGenerator, fallback_layout
from ricochet.engine.layout import Layout
from ricochet.engine.state import PuzzleState
from ricochet.utils.logger import configure_logging, get_logger, resolve_level
from ricochet.utils.pretty import format_board, print_puzzle_stats

import debug_main
import main


def corner_layout() -> Layout:
    return Layout.build(5, start=(0, 0), goal=(4, 4), collectibles=((0, 4), (4, 0)))


class RicochetGameTests(unittest.TestCase):
    def test_requires_new_game(self) -> None:
        game = RicochetGame()
        with self.assertRaises(GameNotStartedError):
            game.apply_move(Direction.EAST)
        with self.assertRaises(GameNotStartedError):
            game.solution_path()

    def test_new_game_and_solution_replay(self) -> None:
        game = RicochetGame(PuzzleGenerator(GeneratorConfig(seed=9)))
        state = game.new_game("medium")
        self.assertEqual(game.puzzle.difficulty, Difficulty.MEDIUM)
        self.assertEqual(state.move_count, 0)
        self.assertEqual(state.optimal_moves, game.puzzle.optimal_moves)

        path = game.solution_path()
        self.assertIsNotNone(path)
        self.assertEqual(state.position, game.layout.start)
        for direction in path:
            game.apply_move(direction)
        self.assertTrue(game.state.won)
        self.assertEqual(game.state.move_count, len(path))
        self.assertIsNone(game.hint())

        game.reset()
        self.assertFalse(game.state.won)
        self.assertEqual(game.state.position, game.layout.start)

    def test_hint_tracks_current_state(self) -> None:
        game = RicochetGame.from_layout(corner_layout(), optimal_moves=4)
        self.assertEqual(game.hint(), game.solution_path()[0])
        game.apply_move(Direction.EAST)
        self.assertEqual(game.hint(), Direction.SOUTH)

    def test_hint_without_solution(self) -> None:
        layout = Layout.build(
            5,
            walls=[((1, 1), (1, 2)), ((2, 1), (3, 1)), ((2, 3), (2, 4)), ((3, 2), (4, 2))],
            start=(0, 0),
            goal=(4, 4),
            collectibles=((1, 3), (3, 1)),
        )
        game = RicochetGame.from_layout(layout)
        self.assertIsNone(game.hint())
        self.assertIsNone(game.solution_path())
        self.assertIsNone(game.puzzle.optimal_moves)
        self.assertEqual(game.puzzle.difficulty, Difficulty.HARD)

    def test_from_layout_reads_difficulty_from_optimal(self) -> None:
        game = RicochetGame.from_layout(corner_layout())
        self.assertEqual(game.puzzle.optimal_moves, 4)
        self.assertEqual(game.state.optimal_moves, 4)
        self.assertEqual(game.puzzle.difficulty, Difficulty.EASY)

        game = RicochetGame.from_layout(fallback_layout())
        self.assertEqual(game.puzzle.optimal_moves, 12)
        self.assertEqual(game.puzzle.difficulty, Difficulty.MEDIUM)

        game = RicochetGame.from_layout(corner_layout(), optimal_moves=4, difficulty="hard")
        self.assertEqual(game.puzzle.difficulty, Difficulty.HARD)


class PrettyTests(unittest.TestCase):
    def test_format_board(self) -> None:
        state = PuzzleState(corner_layout())
        lines = format_board(state.layout, state).splitlines()
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[1], "   +---+---+---+---+---+")
        self.assertEqual(lines[2], " 0 | @   .   .   .   1 |")
        self.assertEqual(lines[3], "   +   +   +   +   +   +")
        self.assertEqual(lines[10], " 4 | 2   .   .   .   G |")

    def test_interior_walls_are_drawn(self) -> None:
        lines = format_board(fallback_layout()).splitlines()
        self.assertEqual(lines[2], " 0 | . | .   .   . | . |")
        self.assertEqual(lines[3], "   +---+   +   +   +---+")
        self.assertEqual(lines[4], " 1 | .   .   G   .   . |")
        self.assertEqual(lines[7], "   +   +   +   +---+   +")

    def test_stats_output(self) -> None:
        puzzle = PuzzleGenerator(GeneratorConfig(seed=1, max_attempts=0)).generate("EASY")
        stream = io.StringIO()
        print_puzzle_stats(puzzle, stream=stream)
        text = stream.getvalue()
        self.assertIn("Optimal moves: 12", text)
        self.assertIn("(fallback)", text)


class CliTests(unittest.TestCase):
    def test_parse_moves(self) -> None:
        expected = [Direction.EAST, Direction.SOUTH, Direction.WEST]
        self.assertEqual(main.parse_moves("ESW"), expected)
        self.assertEqual(main.parse_moves("east, south west"), expected)
        self.assertEqual(main.parse_moves("E S W"), expected)
        with self.assertRaises(ValueError):
            main.parse_moves("E X")

    def test_cli_solves_and_replays(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            main.main(["--seed", "4", "--difficulty", "EASY", "--solve", "--output", str(output)])
            payload = json.loads(output.read_text(encoding="utf-8"))
            self.assertEqual(payload["layout"]["size"], 5)
            self.assertEqual(len(payload["solution"]), payload["layout"]["optimal_moves"])
            self.assertEqual(payload["state"]["move_count"], 0)

            replay = Path(tmpdir) / "replay.json"
            main.main(
                [
                    "--seed", "4",
                    "--difficulty", "EASY",
                    "--moves", " ".join(payload["solution"]),
                    "--output", str(replay),
                ]
            )
            replayed = json.loads(replay.read_text(encoding="utf-8"))
            self.assertTrue(replayed["state"]["won"])
            self.assertEqual(replayed["state"]["move_count"], len(payload["solution"]))
            self.assertTrue(all(move["moved"] for move in replayed["moves"]))


class DebugHelperTests(unittest.TestCase):
    def test_sweep_seeds_accepts_names(self) -> None:
        summary = debug_main.sweep_seeds(range(2), ["easy", Difficulty.HARD], max_attempts=0)
        self.assertEqual(list(summary), ["EASY", "HARD"])
        self.assertEqual(summary["EASY"]["puzzles"], 2)
        self.assertEqual(summary["EASY"]["fallbacks"], 2)
        self.assertEqual(summary["HARD"]["optimal_moves"], {12: 2})


class LoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved = (list(root.handlers), root.level)

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self._saved[0]
        root.setLevel(self._saved[1])

    def test_resolve_level(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" Info "), logging.INFO)
        self.assertEqual(resolve_level(15), 15)
        self.assertEqual(resolve_level("chatty"), logging.WARNING)

    def test_configure_logging_writes_to_stream(self) -> None:
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        get_logger("ricochet.test").info("accepted")
        get_logger("ricochet.test").debug("hidden")
        output = stream.getvalue()
        self.assertIn("| INFO    | ricochet.test | accepted", output)
        self.assertNotIn("hidden", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
