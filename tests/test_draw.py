from __future__ import annotations

import unittest

import numpy as np

import freehand
from freehand import Draw, new, new_canvas


INK = (0, 0, 0, 255)
BLUE = (0, 0, 255, 255)


class DrawTests(unittest.TestCase):
    def test_every_call_returns_the_wrapper(self) -> None:
        img = new_canvas(120, 120)
        d = new(img)
        self.assertIsInstance(d, Draw)
        out = (
            d.line((0, 0), (10, 10), INK)
            .line_alpha((0, 5), (10, 5), 0.5, INK)
            .dashed_line((0, 20), (30, 20), 2, INK)
            .dashed_line_alpha((0, 22), (30, 22), 2, 0.5, INK)
            .path([(0, 30), (10, 30), (10, 40)], INK)
            .rectangle((50, 5), 10, 10, INK)
            .rectangle_filled((70, 5), 10, 10, INK)
            .rectangle_alpha((90, 5), 10, 10, 0.5, INK)
            .rectangle_filled_alpha((105, 5), 10, 10, 0.5, INK)
            .arc(0, 90, 20, (60, 60), INK)
            .circle(10, (60, 60), INK)
            .annulus(0, 180, 25, 30, (60, 60), INK)
            .pie_slice_filled(180, 270, 15, (60, 60), INK)
            .thick_arc(270, 360, 40, 3, (60, 60), INK)
            .thick_circle(50, 2, (60, 60), INK)
            .antialiased_arc(0, 180, 55, (60, 60), INK)
            .antialiased_circle(5, (100, 100), INK)
            .pixel((119, 119), BLUE)
            .blend((118, 119), 0.5, BLUE)
        )
        self.assertIs(out, d)
        self.assertIs(d.image, img)
        self.assertEqual(d.size, (120, 120))
        self.assertEqual(tuple(img[119, 119]), BLUE)

    def test_wrapper_matches_module_functions(self) -> None:
        a = new_canvas(100, 100)
        Draw(a).circle(30, (50, 50), INK).annulus(10, 200, 10, 20, (50, 50), BLUE).line((0, 99), (99, 0), INK)
        b = new_canvas(100, 100)
        freehand.circle(b, 30, (50, 50), INK)
        freehand.annulus(b, 10, 200, 10, 20, (50, 50), BLUE)
        freehand.lines.line(b, (0, 99), (99, 0), INK)
        np.testing.assert_array_equal(a, b)

    def test_conic_methods_match_their_functions(self) -> None:
        calls = [
            ("arc", (0, 200, 30, (50, 50)), freehand.arc),
            ("circle", (30, (50, 50)), freehand.circle),
            ("annulus", (20, 300, 15, 30, (50, 50)), freehand.annulus),
            ("pie_slice_filled", (45, 135, 30, (50, 50)), freehand.pie_slice_filled),
            ("thick_arc", (10, 250, 30, 4, (50, 50)), freehand.thick_arc),
            ("thick_circle", (30, 3, (50, 50)), freehand.thick_circle),
            ("antialiased_arc", (0, 90, 30.5, (50, 50)), freehand.antialiased_arc),
            ("antialiased_circle", (30.5, (50, 50)), freehand.antialiased_circle),
        ]
        for name, args, func in calls:
            a = new_canvas(100, 100)
            d = Draw(a)
            self.assertIs(getattr(d, name)(*args, INK), d, msg=name)
            b = new_canvas(100, 100)
            func(b, *args, INK)
            self.assertTrue(np.any(b[:, :, 0] < 255), msg=name)
            np.testing.assert_array_equal(a, b, err_msg=name)

    def test_lines_and_shapes_are_importable_modules(self) -> None:
        from freehand.raster import lines, shapes

        self.assertIs(freehand.lines, lines)
        self.assertIs(freehand.shapes, shapes)

    def test_rejects_non_rgba_buffers(self) -> None:
        with self.assertRaises(ValueError):
            Draw(np.zeros((10, 10, 3), dtype=np.uint8))


if __name__ == "__main__":
    unittest.main()
