from __future__ import annotations

import numpy as np

from freehand.pt import PointLike, as_int_pt
from freehand.raster.canvas import RGBA, blend_hspan, fill_hspan
from freehand.raster.lines import (
    horizontal_line,
    horizontal_line_alpha,
    vertical_line,
    vertical_line_alpha,
)


def rectangle(dst: np.ndarray, pt: PointLike, height: int, width: int, color: RGBA) -> None:
    """Outline of a `width` x `height` rectangle whose top-left corner is `pt`."""
    x0, y0, x1, y1 = _corners(pt, height, width)
    if x1 < x0 or y1 < y0:
        return
    horizontal_line(dst, y0, x0, x1, color)
    horizontal_line(dst, y1, x0, x1, color)
    vertical_line(dst, x0, y0, y1, color)
    vertical_line(dst, x1, y0, y1, color)


def rectangle_filled(dst: np.ndarray, pt: PointLike, height: int, width: int, color: RGBA) -> None:
    x0, y0, x1, y1 = _corners(pt, height, width)
    for y in range(y0, y1 + 1):
        fill_hspan(dst, y, x0, x1, color)


def rectangle_alpha(dst: np.ndarray, pt: PointLike, height: int, width: int, opacity: float, color: RGBA) -> None:
    x0, y0, x1, y1 = _corners(pt, height, width)
    if x1 < x0 or y1 < y0:
        return
    horizontal_line_alpha(dst, y0, x0, x1, opacity, color)
    if y1 != y0:
        horizontal_line_alpha(dst, y1, x0, x1, opacity, color)
    # Corners already belong to the horizontal edges.
    if y1 - y0 > 1:
        vertical_line_alpha(dst, x0, y0 + 1, y1 - 1, opacity, color)
        if x1 != x0:
            vertical_line_alpha(dst, x1, y0 + 1, y1 - 1, opacity, color)


def rectangle_filled_alpha(
    dst: np.ndarray, pt: PointLike, height: int, width: int, opacity: float, color: RGBA
) -> None:
    x0, y0, x1, y1 = _corners(pt, height, width)
    for y in range(y0, y1 + 1):
        blend_hspan(dst, y, x0, x1, opacity, color)


def _corners(pt: PointLike, height: int, width: int) -> tuple[int, int, int, int]:
    if height < 0 or width < 0:
        raise ValueError("rectangle width/height must be >= 0")
    p = as_int_pt(pt)
    return (p.x, p.y, p.x + width - 1, p.y + height - 1)
