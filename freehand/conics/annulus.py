from __future__ import annotations

import logging
import operator
from typing import Iterator

import numpy as np

from freehand import angle
from freehand.conics.bounds import Bounds, Pos
from freehand.conics.edge import DIAGONAL, Edge, Line
from freehand.errors import InvalidRadiusError
from freehand.pt import PointLike, Pt, as_int_pt
from freehand.raster.canvas import RGBA, fill_hspan, fill_vspan
from freehand.translate import iter_to_real


LOGGER = logging.getLogger(__name__)

Span = tuple[Pt, Pt]


def annulus(
    image: np.ndarray,
    start_angle: angle.Angle,
    end_angle: angle.Angle,
    inner_radius: int,
    outer_radius: int,
    center: PointLike,
    color: RGBA,
) -> None:
    """Draws a filled, possibly partial, ring between two radii.

    Integer angles are degrees and floating-point angles are radians.
    """
    Annulus(start_angle, end_angle, inner_radius, outer_radius, center).draw(image, color)


def pie_slice_filled(
    image: np.ndarray,
    start_angle: angle.Angle,
    end_angle: angle.Angle,
    radius: int,
    center: PointLike,
    color: RGBA,
) -> None:
    Annulus(start_angle, end_angle, 0, radius, center).draw(image, color)


def thick_arc(
    image: np.ndarray,
    start_angle: angle.Angle,
    end_angle: angle.Angle,
    radius: int,
    thickness: int,
    center: PointLike,
    color: RGBA,
) -> None:
    """Draws an arc `thickness` pixels wide, centered on `radius`."""
    ri, ro = _thick_radii(radius, thickness)
    Annulus(start_angle, end_angle, ri, ro, center).draw(image, color)


def thick_circle(image: np.ndarray, radius: int, thickness: int, center: PointLike, color: RGBA) -> None:
    thick_arc(image, 0, 360, radius, thickness, center, color)


class Annulus:
    """Fills the ring between an inner and an outer circle.

    Both radii are walked with the midpoint algorithm over a shared column
    cursor.  Each column yields one span, which is a horizontal or vertical
    run in image space.  Where one radius has no pixel in a column, the span
    ends on the straight chord that caps the ring at its angular edge.
    """

    def __init__(
        self,
        start_angle: angle.Angle,
        end_angle: angle.Angle,
        inner_radius: int,
        outer_radius: int,
        center: PointLike,
    ) -> None:
        ri, ro = _check_radii(inner_radius, outer_radius)
        start, end = angle.arc_range(start_angle, end_angle)

        self._c = as_int_pt(center)
        self._ri = ri
        self._ro = ro
        self._start = Edge.entering(start)
        self._end = Edge.new(end)
        self._revisit = angle.is_revisit(start, end, self._start.oct, self._end.oct)
        self._load(Bounds.start_bounds(self._start, self._end, self._revisit))
        LOGGER.debug(
            "annulus ri=%d ro=%d start=%.6f oct=%d end=%.6f oct=%d revisit=%s",
            ri,
            ro,
            self._start.angle,
            self._start.oct,
            self._end.angle,
            self._end.oct,
            self._revisit,
        )

    @property
    def center(self) -> Pt:
        return self._c

    @property
    def current_octant(self) -> int:
        return self._oct

    def inner_start(self) -> Pt:
        return self._inr.start_pt()

    def outer_start(self) -> Pt:
        return self._otr.start_pt()

    def inner_end(self) -> Pt | None:
        return self._inr.stop_pt()

    def outer_end(self) -> Pt | None:
        return self._otr.stop_pt()

    def __iter__(self) -> Iterator[Span]:
        return self

    def __next__(self) -> Span:
        while True:
            x = self._x
            yi = self._inr.matching_y(x)
            yo = self._otr.matching_y(x)
            if yo is None and self._otr.started(x):
                if self._at_end():
                    raise StopIteration
                self._restart()
                continue
            if yi is None:
                yi = self._cur_end.y_at(x, DIAGONAL)
            if yo is None:
                yo = self._cur_start.y_at(x, self._flat_start())
            self._x += 1
            return (
                iter_to_real(x, max(yi, x), self._oct, self._c),
                iter_to_real(x, max(yo, x), self._oct, self._c),
            )

    def draw(self, image: np.ndarray, color: RGBA) -> None:
        for a, b in self:
            if a.x == b.x:
                fill_vspan(image, a.x, a.y, b.y, color)
            else:
                fill_hspan(image, a.y, a.x, b.x, color)

    def _load(self, bounds: Bounds) -> None:
        self._oct = bounds.oct
        self._inr = Pos.new(bounds, self._ri)
        self._otr = Pos.new(bounds, self._ro)
        self._cur_start = Edge.chord(bounds.start_angle(), bounds.oct, self._inr.start_pt(), self._otr.start_pt())
        inner_stop = self._inr.stop_pt()
        outer_stop = self._otr.stop_pt()
        if inner_stop is None or outer_stop is None:
            self._cur_end = Edge(angle=bounds.stop_angle(), oct=bounds.oct, line=DIAGONAL)
        else:
            self._cur_end = Edge.chord(bounds.stop_angle(), bounds.oct, inner_stop, outer_stop)
        self._x = min(self._inr.x, self._otr.x)

    def _flat_start(self) -> Line:
        return Line(slope=0.0, intercept=float(self._otr.start_y))

    def _at_end(self) -> bool:
        return self._oct == self._end.oct and not self._revisit

    def _restart(self) -> None:
        oct = self._oct % 8 + 1
        LOGGER.debug("annulus ri=%d ro=%d octant %d -> %d", self._ri, self._ro, self._oct, oct)
        self._load(Bounds.bounds_from_edges(oct, self._start, self._end, self._revisit))
        self._revisit = False


def _check_radii(inner_radius: int, outer_radius: int) -> tuple[int, int]:
    ri = operator.index(inner_radius)
    ro = operator.index(outer_radius)
    if ri < 0 or ro < 0:
        raise InvalidRadiusError(f"radii must not be negative, got inner={ri} outer={ro}")
    if ri > ro:
        ri, ro = ro, ri
    if ro == 0:
        raise InvalidRadiusError("outer radius must be > 0")
    return ri, ro


def _thick_radii(radius: int, thickness: int) -> tuple[int, int]:
    r = operator.index(radius)
    t = operator.index(thickness)
    if t < 1:
        raise ValueError(f"thickness must be >= 1, got {t}")
    ri = r - t // 2
    if ri < 0:
        raise InvalidRadiusError(f"thickness {t} is too large for radius {r}")
    return ri, ri + t - 1
