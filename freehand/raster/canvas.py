from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def canvas_size(dst: np.ndarray) -> tuple[int, int]:
    """Returns `(width, height)`."""
    return (dst.shape[1], dst.shape[0])


def in_bounds(dst: np.ndarray, x: int, y: int) -> bool:
    return 0 <= y < dst.shape[0] and 0 <= x < dst.shape[1]


def put_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if not in_bounds(dst, x, y):
        return
    dst[y, x] = color


def blend_at(dst: np.ndarray, x: int, y: int, opacity: float, color: RGBA) -> None:
    """Blend `color` into the pixel at `(x, y)` with `opacity` in `[0, 1]`.

    The color's own alpha is ignored for the mix; the resulting alpha is the
    `opacity` composited over the existing alpha.
    """
    if not in_bounds(dst, x, y):
        return
    a = min(1.0, max(0.0, float(opacity)))
    if a <= 0.0:
        return
    inv = 1.0 - a
    current = dst[y, x].astype(np.float32)
    rgb = np.asarray(color[0:3], dtype=np.float32) * a + current[0:3] * inv
    alpha = 255.0 * a + current[3] * inv
    dst[y, x, 0:3] = np.clip(np.round(rgb), 0, 255).astype(np.uint8)
    dst[y, x, 3] = np.uint8(min(255.0, round(alpha)))


def fill_hspan(dst: np.ndarray, y: int, x0: int, x1: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    dst[y, xa : xb + 1] = color


def fill_vspan(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    dst[ya : yb + 1, x] = color


def blend_hspan(dst: np.ndarray, y: int, x0: int, x1: int, opacity: float, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    _blend_segment(dst[y, xa : xb + 1], opacity, color)


def blend_vspan(dst: np.ndarray, x: int, y0: int, y1: int, opacity: float, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    _blend_segment(dst[ya : yb + 1, x], opacity, color)


def _blend_segment(segment: np.ndarray, opacity: float, color: RGBA) -> None:
    a = min(1.0, max(0.0, float(opacity)))
    if a <= 0.0:
        return
    inv = 1.0 - a
    current = segment.astype(np.float32)
    rgb = np.asarray(color[0:3], dtype=np.float32) * a + current[:, :3] * inv
    alpha = 255.0 * a + current[:, 3] * inv
    segment[:, :3] = np.clip(np.round(rgb), 0, 255).astype(np.uint8)
    segment[:, 3] = np.clip(np.round(alpha), 0, 255).astype(np.uint8)


def to_image(dst: np.ndarray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(dst))


def save_png(dst: np.ndarray, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    to_image(dst).save(out, format="PNG")
    return out
