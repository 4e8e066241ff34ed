from __future__ import annotations

from dataclasses import dataclass

from freehand import angle
from freehand.pt import Pt


@dataclass(frozen=True)
class Line:
    """`y = slope * x + intercept` in octant-local coordinates."""

    slope: float
    intercept: float

    @classmethod
    def through(cls, a: Pt, b: Pt) -> "Line | None":
        if a.x == b.x:
            return None
        slope = (b.y - a.y) / (b.x - a.x)
        return cls(slope=slope, intercept=a.y - slope * a.x)

    def y_at(self, x: int) -> int:
        return int(round(self.slope * x + self.intercept))


DIAGONAL = Line(slope=1.0, intercept=0.0)


@dataclass(frozen=True)
class Edge:
    """One angular boundary of a range, with the octant it falls in.

    Annulus edges also carry the chord joining the inner and outer radius at
    that angle, used to cap partial rings with a straight edge.
    """

    angle: float
    oct: int
    line: Line | None = None

    @classmethod
    def new(cls, a: float) -> "Edge":
        return cls(angle=a, oct=angle.angle_to_octant(a))

    @classmethod
    def entering(cls, a: float) -> "Edge":
        """Start edge: an angle on an octant boundary belongs to the octant it opens."""
        return cls(angle=a, oct=angle.entering_octant(a))

    @classmethod
    def chord(cls, a: float, oct: int, inner: Pt, outer: Pt) -> "Edge":
        return cls(angle=a, oct=oct, line=Line.through(inner, outer))

    def y_at(self, x: int, fallback: Line) -> int:
        return (self.line or fallback).y_at(x)
