import unittest

from ricochet.core.constants import Collected
from ricochet.core.exceptions import LayoutError
from ricochet.core.models import Cell, Wall
from ricochet.engine.layout import Layout
from ricochet.engine.validator import LayoutValidator
from ricochet.engine.walls import WallSet


class LayoutValidationTests(unittest.TestCase):
    def test_valid_layout_builds(self) -> None:
        layout = Layout.build(5, start=(0, 0), goal=(4, 4), collectibles=((0, 4), (4, 0)))
        self.assertEqual(layout.start, Cell(0, 0))
        self.assertEqual(len(layout.walls), 20)
        self.assertTrue(LayoutValidator().validate(layout).ok)

    def test_duplicate_positions_rejected(self) -> None:
        with self.assertRaises(LayoutError):
            Layout.build(5, start=(0, 0), goal=(0, 0), collectibles=((0, 4), (4, 0)))
        with self.assertRaises(LayoutError):
            Layout.build(5, start=(0, 0), goal=(4, 4), collectibles=((2, 2), (2, 2)))

    def test_out_of_bounds_element_rejected(self) -> None:
        with self.assertRaises(LayoutError):
            Layout.build(5, start=(0, 5), goal=(4, 4), collectibles=((0, 4), (4, 0)))

    def test_grid_below_minimum_rejected(self) -> None:
        with self.assertRaises(LayoutError):
            Layout.build(2, start=(0, 0), goal=(1, 1), collectibles=((0, 1), (1, 0)))

    def test_wall_outside_grid_rejected(self) -> None:
        with self.assertRaises(LayoutError):
            Layout.build(
                5,
                walls=[((-1, 0), (-2, 0))],
                start=(0, 0),
                goal=(4, 4),
                collectibles=((0, 4), (4, 0)),
            )

    def test_wrong_collectible_count_rejected(self) -> None:
        with self.assertRaises(LayoutError):
            Layout(
                size=5,
                walls=WallSet(),
                start=Cell(0, 0),
                goal=Cell(4, 4),
                collectibles=(Cell(0, 4),),  # type: ignore[arg-type]
            )

    def test_border_wall_endpoint_may_sit_outside(self) -> None:
        layout = Layout(
            size=3,
            walls=WallSet([Wall.between(Cell(0, 1), Cell(-1, 1))]),
            start=Cell(0, 0),
            goal=Cell(2, 2),
            collectibles=(Cell(0, 2), Cell(2, 0)),
        )
        self.assertEqual(len(layout.walls), 1)


class LayoutHelperTests(unittest.TestCase):
    def setUp(self) -> None:
        self.layout = Layout.build(5, start=(0, 0), goal=(4, 4), collectibles=((0, 4), (4, 0)))

    def test_collectible_flags(self) -> None:
        self.assertEqual(self.layout.collectible_flag(Cell(0, 4)), Collected.FIRST)
        self.assertEqual(self.layout.collectible_flag(Cell(4, 0)), Collected.SECOND)
        self.assertEqual(self.layout.collectible_flag(Cell(2, 2)), Collected.NONE)
        self.assertEqual(
            self.layout.collected_cells(Collected.BOTH), frozenset({Cell(0, 4), Cell(4, 0)})
        )

    def test_to_jsonable(self) -> None:
        payload = self.layout.to_jsonable(optimal_moves=4)
        self.assertEqual(payload["size"], 5)
        self.assertEqual(payload["start"], [0, 0])
        self.assertEqual(payload["collectibles"], [[0, 4], [4, 0]])
        self.assertEqual(payload["optimal_moves"], 4)
        self.assertEqual(payload["walls"][0], [[-1, 0], [0, 0]])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
