from __future__ import annotations

from dataclasses import dataclass

from freehand import angle
from freehand.conics.edge import Edge
from freehand.pt import Pt
from freehand.translate import octant_frame


_ORIGIN = Pt(0, 0)


@dataclass(frozen=True)
class Bounds:
    """Angular clip of one octant, in local walk order.

    `start` is the angle the walk begins at and `stop` the angle it ends at.
    `None` means the natural boundary: local x = 0 for `start` and the
    diagonal x = y for `stop`.  Odd octants walk with increasing angle, even
    octants against it, so the range's edges swap roles on even octants.
    """

    oct: int
    start: float | None = None
    stop: float | None = None

    @classmethod
    def start_bounds(cls, start: Edge, end: Edge, revisit: bool) -> "Bounds":
        hi = end.angle if start.oct == end.oct and not revisit else None
        return cls.from_angles(start.oct, start.angle, hi)

    @classmethod
    def bounds_from_edges(cls, oct: int, start: Edge, end: Edge, revisit: bool) -> "Bounds":
        """Bounds for an octant entered after the first one."""
        hi = end.angle if oct == end.oct and not revisit else None
        return cls.from_angles(oct, None, hi)

    @classmethod
    def from_angles(cls, oct: int, lo: float | None, hi: float | None) -> "Bounds":
        if lo is not None and angle.on_boundary(lo, angle.octant_start_angle(oct)):
            lo = None
        if hi is not None and angle.on_boundary(hi, angle.octant_end_angle(oct)):
            hi = None
        if oct % 2 == 1:
            return cls(oct=oct, start=lo, stop=hi)
        return cls(oct=oct, start=hi, stop=lo)

    def start_angle(self) -> float:
        if self.start is not None:
            return self.start
        return angle.octant_start_angle(self.oct) if self.oct % 2 == 1 else angle.octant_end_angle(self.oct)

    def stop_angle(self) -> float:
        if self.stop is not None:
            return self.stop
        return angle.octant_end_angle(self.oct) if self.oct % 2 == 1 else angle.octant_start_angle(self.oct)


def local_point(a: float, r: int, oct: int) -> Pt:
    """Exact point at angle `a` on a circle of radius `r`, in `oct`'s local coordinates."""
    real = Pt.from_radian(a, r, _ORIGIN)
    x, y = octant_frame(oct).from_offset(real.x, real.y)
    return Pt(x, y)


def calc_error(x: int, y: int, r: int) -> int:
    """Midpoint decision variable at `(x, y)`: `(x+1)² + (y-½)² - r²`, rounded."""
    return (x + 1) * (x + 1) + y * y - y - r * r


@dataclass
class Pos:
    """Midpoint circle iteration state for one radius within one octant."""

    oct: int
    x: int
    y: int
    d: int
    start_x: int
    start_y: int
    stop_x: int | None = None
    stop_y: int | None = None

    @classmethod
    def start(cls, oct: int, r: int) -> "Pos":
        return cls.new(Bounds(oct=oct), r)

    @classmethod
    def new(cls, bounds: Bounds, r: int) -> "Pos":
        if bounds.start is None:
            x, y = 0, r
        else:
            p = local_point(bounds.start, r, bounds.oct).rounded()
            x, y = int(p.x), int(p.y)
        stop_x = stop_y = None
        if bounds.stop is not None:
            s = local_point(bounds.stop, r, bounds.oct).rounded()
            stop_x, stop_y = int(s.x), int(s.y)
        return cls(
            oct=bounds.oct,
            x=x,
            y=y,
            d=calc_error(x, y, r),
            start_x=x,
            start_y=y,
            stop_x=stop_x,
            stop_y=stop_y,
        )

    def stop(self) -> bool:
        if self.x > self.y:
            return True
        return self.stop_x is not None and self.x > self.stop_x

    def inc(self) -> None:
        self.x += 1
        if self.d > 0:
            self.y -= 1
            self.d += 2 * (self.x - self.y) + 1
        else:
            self.d += 2 * self.x + 1

    def started(self, x: int) -> bool:
        return x >= self.start_x

    def matching_y(self, x: int) -> int | None:
        """The walk's y for column `x`, or None before the walk starts or after it stops.

        Columns must be requested in increasing order.
        """
        while self.x < x and not self.stop():
            self.inc()
        if self.x != x or self.stop():
            return None
        return self.y

    def start_pt(self) -> Pt:
        return Pt(self.start_x, self.start_y)

    def stop_pt(self) -> Pt | None:
        if self.stop_x is None or self.stop_y is None:
            return None
        return Pt(self.stop_x, self.stop_y)
