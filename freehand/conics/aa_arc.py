from __future__ import annotations

import logging
import math
from typing import Iterator, NamedTuple

import numpy as np

from freehand import angle
from freehand.errors import InvalidRadiusError
from freehand.pt import PointLike, Pt, as_int_pt
from freehand.raster.canvas import RGBA, blend_at
from freehand.translate import quad_to_real


LOGGER = logging.getLogger(__name__)


class AAStep(NamedTuple):
    """Two adjacent pixels straddling the circle and where the circle falls between them.

    `coverage` is the fractional distance from `a` towards `b`.
    """

    a: Pt
    b: Pt
    coverage: float


def antialiased_arc(
    image: np.ndarray,
    start_angle: angle.Angle,
    end_angle: angle.Angle,
    radius: float,
    center: PointLike,
    color: RGBA,
) -> None:
    """Draws an antialiased circular arc counter-clockwise from `start_angle` to `end_angle`.

    Integer angles are degrees and floating-point angles are radians.
    """
    AntialiasedArc(start_angle, end_angle, radius, center).draw(image, color)


def antialiased_circle(image: np.ndarray, radius: float, center: PointLike, color: RGBA) -> None:
    AntialiasedArc(0, 360, radius, center).draw(image, color)


def opacity(coverage: float) -> int:
    return int(round(coverage * 255.0)) % 256


class AntialiasedArc:
    """Quadrant walk producing antialiasing pairs along a circle.

    There is no decision variable: each step advances the fast axis by one
    and recomputes the slow axis from `x² + y² = r²`.
    """

    def __init__(self, start_angle: angle.Angle, end_angle: angle.Angle, radius: float, center: PointLike) -> None:
        r = float(radius)
        if not r > 0.0:
            raise InvalidRadiusError(f"radius must be > 0, got {radius}")
        start, end = angle.arc_range(start_angle, end_angle)

        self._r = r
        self._r2 = r * r
        self._c = as_int_pt(center)
        self._start = start
        self._end = end
        self._quad = angle.entering_quadrant(start)
        self._end_quad = angle.angle_to_quadrant(end)
        self._revisit = angle.is_revisit(start, end, self._quad, self._end_quad)
        self._steps = 0
        self._load(lo=start, hi=end if self._quad == self._end_quad and not self._revisit else None)

    @property
    def center(self) -> Pt:
        return self._c

    @property
    def radius(self) -> float:
        return self._r

    def __iter__(self) -> Iterator[AAStep]:
        return self

    def __next__(self) -> AAStep:
        while True:
            if self._y <= 0.0 or self._past_end:
                if self._quad == self._end_quad and not self._revisit:
                    LOGGER.debug("antialiased arc r=%.2f finished after %d steps", self._r, self._steps)
                    raise StopIteration
                self._next_quad()
                continue
            step = self._step()
            if step is not None:
                self._steps += 1
                return step

    def draw(self, image: np.ndarray, color: RGBA) -> None:
        for a, b, coverage in self:
            o = opacity(coverage)
            blend_at(image, a.x, a.y, (255 - o) / 255.0, color)
            blend_at(image, b.x, b.y, o / 255.0, color)

    def _load(self, lo: float | None, hi: float | None) -> None:
        self._x = 0.0
        self._y = self._r
        self._past_end = False
        base = angle.quadrant_start_angle(self._quad)
        if lo is not None and angle.on_boundary(lo, base):
            lo = None
        if hi is not None and angle.on_boundary(hi, angle.quadrant_end_angle(self._quad)):
            hi = None
        # Boundary directions in local coordinates; a point at local angle φ
        # (measured from the local y axis) lies at (sin φ, cos φ).
        self._lo = None if lo is None else (math.sin(lo - base), math.cos(lo - base))
        self._hi = None if hi is None else (math.sin(hi - base), math.cos(hi - base))

    def _next_quad(self) -> None:
        quad = self._quad % 4 + 1
        LOGGER.debug("antialiased arc r=%.2f quadrant %d -> %d", self._r, self._quad, quad)
        self._quad = quad
        hi = self._end if quad == self._end_quad and not self._revisit else None
        self._revisit = False
        self._load(lo=None, hi=hi)

    def _slow(self, fast: float) -> float:
        return math.sqrt(max(0.0, self._r2 - fast * fast))

    def _step(self) -> AAStep | None:
        x, y = self._x, self._y
        if self._hi is not None and _cross(self._hi, x, y) > 0.0:
            self._past_end = True
            return None
        if x <= y:
            a = math.floor(y)
            first, second, coverage = (x, a), (x, a + 1), y - a
            self._x = x + 1.0
            self._y = self._slow(self._x)
            if self._x > self._y:
                # Hand over to y as the fast axis on whole rows.
                self._y = float(math.floor(self._y))
                self._x = self._slow(self._y)
        else:
            a = math.floor(x)
            first, second, coverage = (a, y), (a + 1, y), x - a
            self._y = y - 1.0
            self._x = self._slow(self._y)
        if self._lo is not None and _cross(self._lo, x, y) < 0.0:
            return None
        return AAStep(
            a=quad_to_real(int(first[0]), int(first[1]), self._quad, self._c),
            b=quad_to_real(int(second[0]), int(second[1]), self._quad, self._c),
            coverage=coverage,
        )


def _cross(direction: tuple[float, float], x: float, y: float) -> float:
    """Positive when `(x, y)` lies past `direction` in walk order."""
    sin_a, cos_a = direction
    return x * cos_a - y * sin_a
