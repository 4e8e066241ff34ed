from __future__ import annotations

import logging
import operator
from typing import Iterator

import numpy as np

from freehand import angle
from freehand.conics.bounds import Bounds, Pos
from freehand.conics.edge import Edge
from freehand.errors import InvalidRadiusError
from freehand.pt import PointLike, Pt, as_int_pt
from freehand.raster.canvas import RGBA, put_pixel
from freehand.translate import iter_to_real, octant_frame


LOGGER = logging.getLogger(__name__)


def arc(
    image: np.ndarray,
    start_angle: angle.Angle,
    end_angle: angle.Angle,
    radius: int,
    center: PointLike,
    color: RGBA,
) -> None:
    """Draws a circular arc counter-clockwise from `start_angle` to `end_angle`.

    Integer angles are degrees and floating-point angles are radians.
    """
    Arc(start_angle, end_angle, radius, center).draw(image, color)


def circle(image: np.ndarray, radius: int, center: PointLike, color: RGBA) -> None:
    Arc(0, 360, radius, center).draw(image, color)


class Arc:
    """Iterates over the pixels of a circular arc, one octant at a time.

    Points come out in walk order: odd octants run with increasing angle and
    even octants against it, so the sequence is not sorted by angle.  An
    `Arc` is consumed by a single traversal.
    """

    def __init__(self, start_angle: angle.Angle, end_angle: angle.Angle, radius: int, center: PointLike) -> None:
        r = _check_radius(radius)
        start, end = angle.arc_range(start_angle, end_angle)

        self._c = as_int_pt(center)
        self._r = r
        self._start = Edge.entering(start)
        self._end = Edge.new(end)
        # Set when the range starts and ends in the same octant but has to go
        # round every other octant first.
        self._revisit = angle.is_revisit(start, end, self._start.oct, self._end.oct)
        self._pos = Pos.new(Bounds.start_bounds(self._start, self._end, self._revisit), r)
        LOGGER.debug(
            "arc r=%d c=(%d, %d) start=%.6f oct=%d end=%.6f oct=%d revisit=%s",
            r,
            self._c.x,
            self._c.y,
            self._start.angle,
            self._start.oct,
            self._end.angle,
            self._end.oct,
            self._revisit,
        )

    @classmethod
    def octant(cls, oct: int, radius: int, center: PointLike) -> "Arc":
        """An arc covering exactly one octant."""
        octant_frame(oct)
        return cls(angle.octant_start_angle(oct), angle.octant_end_angle(oct), radius, center)

    @property
    def center(self) -> Pt:
        return self._c

    @property
    def radius(self) -> int:
        return self._r

    @property
    def current_octant(self) -> int:
        return self._pos.oct

    def __iter__(self) -> Iterator[Pt]:
        return self

    def __next__(self) -> Pt:
        while self._pos.stop():
            if self._at_end():
                raise StopIteration
            self._restart()
        pt = self.pt()
        self._pos.inc()
        return pt

    def points(self) -> list[Pt]:
        """Consumes the walk and returns its points in walk order."""
        return list(self)

    def pt(self) -> Pt:
        return iter_to_real(self._pos.x, self._pos.y, self._pos.oct, self._c)

    def draw(self, image: np.ndarray, color: RGBA) -> None:
        for pt in self:
            put_pixel(image, pt.x, pt.y, color)

    def _at_end(self) -> bool:
        return self._pos.oct == self._end.oct and not self._revisit

    def _restart(self) -> None:
        oct = self._pos.oct % 8 + 1
        bounds = Bounds.bounds_from_edges(oct, self._start, self._end, self._revisit)
        LOGGER.debug("arc r=%d octant %d -> %d", self._r, self._pos.oct, oct)
        self._pos = Pos.new(bounds, self._r)
        self._revisit = False


def _check_radius(radius: int) -> int:
    r = operator.index(radius)
    if r <= 0:
        raise InvalidRadiusError(f"radius must be > 0, got {r}")
    return r
