from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from freehand.pt import PointLike, as_int_pt
from freehand.raster.canvas import (
    RGBA,
    blend_at,
    blend_hspan,
    blend_vspan,
    fill_hspan,
    fill_vspan,
    put_pixel,
)


def horizontal_line(dst: np.ndarray, y: int, x0: int, x1: int, color: RGBA) -> None:
    fill_hspan(dst, y, x0, x1, color)


def vertical_line(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    fill_vspan(dst, x, y0, y1, color)


def horizontal_line_alpha(dst: np.ndarray, y: int, x0: int, x1: int, opacity: float, color: RGBA) -> None:
    blend_hspan(dst, y, x0, x1, opacity, color)


def vertical_line_alpha(dst: np.ndarray, x: int, y0: int, y1: int, opacity: float, color: RGBA) -> None:
    blend_vspan(dst, x, y0, y1, opacity, color)


def horizontal_dashed_line(dst: np.ndarray, y: int, x0: int, x1: int, dash_width: int, color: RGBA) -> None:
    """Alternates `dash_width` drawn pixels with `dash_width` skipped pixels."""
    _check_dash_width(dash_width)
    if dash_width == 0:
        return
    lo, hi = min(x0, x1), max(x0, x1)
    for x in range(lo, hi + 1):
        if _in_dash(x - lo, dash_width):
            put_pixel(dst, x, y, color)


def vertical_dashed_line(dst: np.ndarray, x: int, y0: int, y1: int, dash_width: int, color: RGBA) -> None:
    _check_dash_width(dash_width)
    if dash_width == 0:
        return
    lo, hi = min(y0, y1), max(y0, y1)
    for y in range(lo, hi + 1):
        if _in_dash(y - lo, dash_width):
            put_pixel(dst, x, y, color)


def diagonal_line(dst: np.ndarray, a: PointLike, b: PointLike, color: RGBA) -> None:
    """Draws a 45° line from `a` for as many steps as the longer axis of `b - a`."""
    for x, y in _diagonal_points(a, b):
        put_pixel(dst, x, y, color)


def diagonal_line_alpha(dst: np.ndarray, a: PointLike, b: PointLike, opacity: float, color: RGBA) -> None:
    for x, y in _diagonal_points(a, b):
        blend_at(dst, x, y, opacity, color)


def line(dst: np.ndarray, a: PointLike, b: PointLike, color: RGBA) -> None:
    for x, y in line_points(a, b):
        put_pixel(dst, x, y, color)


def line_alpha(dst: np.ndarray, a: PointLike, b: PointLike, opacity: float, color: RGBA) -> None:
    for x, y in line_points(a, b):
        blend_at(dst, x, y, opacity, color)


def dashed_line(dst: np.ndarray, a: PointLike, b: PointLike, dash_width: int, color: RGBA) -> None:
    _check_dash_width(dash_width)
    if dash_width == 0:
        return
    for i, (x, y) in enumerate(line_points(a, b)):
        if _in_dash(i, dash_width):
            put_pixel(dst, x, y, color)


def dashed_line_alpha(
    dst: np.ndarray, a: PointLike, b: PointLike, dash_width: int, opacity: float, color: RGBA
) -> None:
    _check_dash_width(dash_width)
    if dash_width == 0:
        return
    for i, (x, y) in enumerate(line_points(a, b)):
        if _in_dash(i, dash_width):
            blend_at(dst, x, y, opacity, color)


def path(dst: np.ndarray, points: Iterable[PointLike], color: RGBA) -> None:
    """Draws a line from each point to the next.  The path is not closed."""
    pts = [as_int_pt(p) for p in points]
    for p0, p1 in zip(pts, pts[1:]):
        line(dst, p0, p1, color)


def line_points(a: PointLike, b: PointLike) -> Iterator[tuple[int, int]]:
    p0 = as_int_pt(a)
    p1 = as_int_pt(b)
    x0, y0, x1, y1 = int(p0.x), int(p0.y), int(p1.x), int(p1.y)
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        yield (x0, y0)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _diagonal_points(a: PointLike, b: PointLike) -> Iterator[tuple[int, int]]:
    p0 = as_int_pt(a)
    p1 = as_int_pt(b)
    sx = 1 if p1.x >= p0.x else -1
    sy = 1 if p1.y >= p0.y else -1
    steps = max(abs(p1.x - p0.x), abs(p1.y - p0.y))
    for i in range(steps + 1):
        yield (p0.x + sx * i, p0.y + sy * i)


def _in_dash(i: int, dash_width: int) -> bool:
    return (i // dash_width) % 2 == 0


def _check_dash_width(dash_width: int) -> None:
    if dash_width < 0:
        raise ValueError(f"dash width must be >= 0, got {dash_width}")
