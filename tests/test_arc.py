from __future__ import annotations

import math
import unittest

import numpy as np

from freehand import InvalidOctantError, InvalidRadiusError, arc, circle
from freehand.conics import Arc
from freehand.pt import Pt
from freehand.raster.canvas import new_canvas


INK = (0, 0, 0, 255)
C = Pt(200, 200)


def points(a: Arc) -> set[tuple[int, int]]:
    return {(p.x, p.y) for p in a}


def offsets(pts: set[tuple[int, int]], c: Pt = C) -> set[tuple[int, int]]:
    return {(x - c.x, y - c.y) for x, y in pts}


def inked(img: np.ndarray) -> set[tuple[int, int]]:
    ys, xs = np.nonzero(img[:, :, 0] == 0)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


def pixel_angle(dx: float, dy: float) -> float:
    return math.atan2(-dy, dx) % (2.0 * math.pi)


def within_range(theta: float, a: float, b: float, tol: float) -> bool:
    """`theta` lies on the counter-clockwise sweep from `a` to `b`, give or take `tol`."""
    two_pi = 2.0 * math.pi
    span = (b - a) % two_pi
    off = (theta - a) % two_pi
    return off <= span + tol or off >= two_pi - tol


class ArcTests(unittest.TestCase):
    def test_full_circle_has_octant_symmetry(self) -> None:
        pts = offsets(points(Arc(0, 360, 57, C)))
        self.assertEqual(pts, {(dy, dx) for dx, dy in pts})
        self.assertEqual(pts, {(-dx, dy) for dx, dy in pts})
        self.assertEqual(pts, {(dx, -dy) for dx, dy in pts})

    def test_full_circle_points_lie_near_the_radius(self) -> None:
        for r in (1, 2, 7, 190):
            for dx, dy in offsets(points(Arc(0, 360, r, C))):
                self.assertLessEqual(abs(math.hypot(dx, dy) - r), 1.0, msg=f"r={r} ({dx}, {dy})")

    def test_octant_seams_are_continuous(self) -> None:
        walk = Arc(0, 360, 190, C)
        by_octant: dict[int, list[Pt]] = {}
        for p in walk:
            by_octant.setdefault(walk.current_octant, []).append(p)
        self.assertEqual(sorted(by_octant), list(range(1, 9)))
        for k in range(1, 9):
            nxt = k % 8 + 1
            if k % 2 == 1:
                # Odd octant k and even octant k+1 both finish on their shared diagonal.
                a, b = by_octant[k][-1], by_octant[nxt][-1]
            else:
                # Both start on the shared axis.
                a, b = by_octant[k][0], by_octant[nxt][0]
            self.assertLessEqual(a.chebyshev(b), 1, msg=f"seam {k}/{nxt}")

    def test_upper_semicircle_matches_full_circle_restricted(self) -> None:
        full = points(Arc(0, 360, 190, C))
        upper = points(Arc(0, 180, 190, C))
        self.assertEqual(upper, {(x, y) for x, y in full if y <= C.y})

    def test_radian_span_beyond_a_turn_is_a_full_circle(self) -> None:
        self.assertEqual(points(Arc(0.0, 8.0, 190, C)), points(Arc(0, 360, 190, C)))

    def test_equal_angles_are_a_full_circle(self) -> None:
        self.assertEqual(points(Arc(90, 90, 30, C)), points(Arc(0, 360, 30, C)))

    def test_single_octants_compose_the_full_circle(self) -> None:
        union: set[tuple[int, int]] = set()
        for oct in range(1, 9):
            union |= points(Arc.octant(oct, 40, C))
        self.assertEqual(union, points(Arc(0, 360, 40, C)))

    def test_partial_arcs_stay_inside_their_range(self) -> None:
        r = 100
        tol = 2.0 / r
        for start, end in ((30, 100), (60, 80), (100, 95), (350, 10), (200, 340), (0.3, 2.9)):
            a = math.radians(start) if isinstance(start, int) else start
            b = math.radians(end) if isinstance(end, int) else end
            pts = offsets(points(Arc(start, end, r, C)))
            self.assertTrue(pts, msg=f"{start}..{end}")
            for dx, dy in pts:
                self.assertTrue(
                    within_range(pixel_angle(dx, dy), a, b, tol),
                    msg=f"{start}..{end}: ({dx}, {dy}) outside",
                )

    def test_partial_arcs_cover_their_range(self) -> None:
        r = 100
        tol = 2.0 / r
        full = offsets(points(Arc(0, 360, r, C)))
        for start, end in ((30, 100), (60, 80), (100, 95), (350, 10)):
            a, b = math.radians(start), math.radians(end)
            pts = offsets(points(Arc(start, end, r, C)))
            for dx, dy in full:
                theta = pixel_angle(dx, dy)
                if not within_range(theta, a + tol, b - tol, 0.0):
                    continue
                near = any(max(abs(dx - px), abs(dy - py)) <= 1 for px, py in pts)
                self.assertTrue(near, msg=f"{start}..{end}: ({dx}, {dy}) not covered")

    def test_revisit_leaves_only_the_gap_undrawn(self) -> None:
        r = 100
        tol = 2.0 / r
        pts = offsets(points(Arc(100, 95, r, C)))
        for dx, dy in pts:
            theta = pixel_angle(dx, dy)
            self.assertFalse(
                within_range(theta, math.radians(95) + tol, math.radians(100) - tol, 0.0),
                msg=f"({dx}, {dy}) drawn inside the gap",
            )
        self.assertIn((r, 0), pts)
        self.assertIn((0, r), pts)

    def test_draw_writes_the_iterated_points(self) -> None:
        img = new_canvas(400, 400)
        arc(img, 20, 250, 150, C, INK)
        self.assertEqual(inked(img), points(Arc(20, 250, 150, C)))

    def test_circle_clips_at_the_buffer_edge(self) -> None:
        img = new_canvas(20, 20)
        circle(img, 10, (0, 0), INK)
        drawn = inked(img)
        self.assertIn((10, 0), drawn)
        self.assertIn((0, 10), drawn)
        self.assertTrue(all(x >= 0 and y >= 0 for x, y in drawn))

    def test_drawing_is_deterministic(self) -> None:
        a = new_canvas(100, 100)
        b = new_canvas(100, 100)
        for img in (a, b):
            arc(img, 0.4, 5.1, 40, (50, 50), INK)
        np.testing.assert_array_equal(a, b)

    def test_invalid_radius_raises_before_drawing(self) -> None:
        img = new_canvas(50, 50)
        for radius in (-5, 0):
            with self.assertRaises(InvalidRadiusError):
                arc(img, 0, 360, radius, (25, 25), INK)
        with self.assertRaises(ValueError):
            circle(img, -1, (25, 25), INK)
        self.assertEqual(inked(img), set())

    def test_octant_must_be_one_through_eight(self) -> None:
        with self.assertRaises(InvalidOctantError):
            Arc.octant(9, 10, C)
        with self.assertRaises(InvalidOctantError):
            Arc.octant(0, 10, C)

    def test_points_returns_the_walk_in_order(self) -> None:
        pts = Arc.octant(1, 10, (0, 0)).points()
        self.assertEqual(pts[0], Pt(10, 0))
        self.assertEqual(pts[-1], Pt(7, -7))
        self.assertEqual(len(pts), 8)

    def test_accessors(self) -> None:
        a = Arc(0, 90, 12, (3, 4))
        self.assertEqual(a.center, Pt(3, 4))
        self.assertEqual(a.radius, 12)
        self.assertEqual(a.current_octant, 1)
        self.assertIs(iter(a), a)


if __name__ == "__main__":
    unittest.main()
