from __future__ import annotations

import math
import unittest

from freehand import angle
from freehand.conics.bounds import Bounds, Pos, calc_error, local_point
from freehand.conics.edge import DIAGONAL, Edge, Line
from freehand.pt import Pt


class BoundsTests(unittest.TestCase):
    def test_decision_variable_starts_at_one_minus_r(self) -> None:
        for r in (1, 5, 190):
            self.assertEqual(calc_error(0, r, r), 1 - r)

    def test_natural_walk_matches_the_classic_midpoint_octant(self) -> None:
        pos = Pos.start(1, 10)
        pts = []
        while not pos.stop():
            pts.append((pos.x, pos.y))
            pos.inc()
        self.assertEqual(pts, [(0, 10), (1, 10), (2, 10), (3, 10), (4, 9), (5, 9), (6, 8), (7, 7)])

    def test_running_decision_variable_tracks_the_position(self) -> None:
        pos = Pos.start(3, 57)
        while not pos.stop():
            self.assertEqual(pos.d, calc_error(pos.x, pos.y, 57))
            pos.inc()

    def test_even_octants_swap_start_and_stop(self) -> None:
        lo, hi = math.radians(60), math.radians(80)
        self.assertEqual(Bounds.from_angles(2, lo, hi), Bounds(oct=2, start=hi, stop=lo))
        self.assertEqual(Bounds.from_angles(3, math.radians(100), None), Bounds(oct=3, start=math.radians(100)))

    def test_angles_on_the_octant_boundary_are_natural(self) -> None:
        b = Bounds.from_angles(3, angle.octant_start_angle(3), angle.octant_end_angle(3) - angle.TINY)
        self.assertEqual(b, Bounds(oct=3))
        self.assertAlmostEqual(b.start_angle(), math.pi / 2.0)
        self.assertAlmostEqual(b.stop_angle(), 0.75 * math.pi)
        even = Bounds(oct=4)
        self.assertAlmostEqual(even.start_angle(), math.pi)
        self.assertAlmostEqual(even.stop_angle(), 0.75 * math.pi)

    def test_start_bounds_only_clip_the_end_without_revisit(self) -> None:
        start, end = Edge.entering(math.radians(100)), Edge.new(math.radians(95))
        self.assertIsNone(Bounds.start_bounds(start, end, True).stop)
        self.assertIsNone(Bounds.bounds_from_edges(3, start, end, True).stop)
        self.assertIsNotNone(Bounds.bounds_from_edges(3, start, end, False).stop)

    def test_partial_start_uses_the_rounded_circle_point(self) -> None:
        self.assertEqual(local_point(math.radians(30), 40, 1).rounded(), Pt(20, 35))
        pos = Pos.new(Bounds(oct=1, start=math.radians(30), stop=math.radians(40)), 40)
        self.assertEqual((pos.start_x, pos.start_y), (20, 35))
        self.assertEqual(pos.stop_pt(), Pt(26, 31))

    def test_matching_y_follows_the_walk(self) -> None:
        pos = Pos.start(1, 10)
        self.assertEqual(pos.matching_y(0), 10)
        self.assertEqual(pos.matching_y(4), 9)
        self.assertEqual(pos.matching_y(7), 7)
        self.assertIsNone(pos.matching_y(8))
        self.assertTrue(pos.started(8))

    def test_chord_lines(self) -> None:
        self.assertIsNone(Line.through(Pt(3, 1), Pt(3, 9)))
        line = Line.through(Pt(0, 1), Pt(2, 5))
        self.assertEqual(line.y_at(1), 3)
        edge = Edge(angle=0.0, oct=1)
        self.assertEqual(edge.y_at(6, DIAGONAL), 6)


if __name__ == "__main__":
    unittest.main()
