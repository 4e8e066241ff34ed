from __future__ import annotations

from dataclasses import dataclass

from freehand.errors import InvalidOctantError
from freehand.pt import Number, Pt


@dataclass(frozen=True)
class OctantFrame:
    """Maps octant-local `(x, y)` to an image offset from the center.

    `x_axis`/`y_axis` name the image axis each local coordinate lands on
    (0 = image x, 1 = image y) and the signs give its direction.
    """

    x_axis: int
    x_sign: int
    y_sign: int

    def to_offset(self, x: Number, y: Number) -> tuple[Number, Number]:
        if self.x_axis == 0:
            return (self.x_sign * x, self.y_sign * y)
        return (self.y_sign * y, self.x_sign * x)

    def from_offset(self, dx: Number, dy: Number) -> tuple[Number, Number]:
        if self.x_axis == 0:
            return (self.x_sign * dx, self.y_sign * dy)
        return (self.x_sign * dy, self.y_sign * dx)


# Octant k covers angles [(k-1)*45°, k*45°) counter-clockwise from +x with
# image y pointing down.  Local x starts at 0 on the axis-aligned side.
_OCTANTS: dict[int, OctantFrame] = {
    1: OctantFrame(x_axis=1, x_sign=-1, y_sign=1),
    2: OctantFrame(x_axis=0, x_sign=1, y_sign=-1),
    3: OctantFrame(x_axis=0, x_sign=-1, y_sign=-1),
    4: OctantFrame(x_axis=1, x_sign=-1, y_sign=-1),
    5: OctantFrame(x_axis=1, x_sign=1, y_sign=-1),
    6: OctantFrame(x_axis=0, x_sign=-1, y_sign=1),
    7: OctantFrame(x_axis=0, x_sign=1, y_sign=1),
    8: OctantFrame(x_axis=1, x_sign=1, y_sign=1),
}


def octant_frame(oct: int) -> OctantFrame:
    try:
        return _OCTANTS[oct]
    except KeyError:
        raise InvalidOctantError(f"invalid octant {oct!r}; valid octants are 1 through 8") from None


def quadrant_frame(quad: int) -> OctantFrame:
    if quad not in (1, 2, 3, 4):
        raise InvalidOctantError(f"invalid quadrant {quad!r}; valid quadrants are 1 through 4")
    return _OCTANTS[2 * quad - 1]


def iter_to_real(x: Number, y: Number, oct: int, center: Pt) -> Pt:
    """Translate octant-local coordinates into image coordinates."""
    dx, dy = octant_frame(oct).to_offset(x, y)
    return Pt(center.x + dx, center.y + dy)


def real_to_iter(pt: Pt, oct: int, center: Pt) -> Pt:
    """Translate image coordinates into octant-local coordinates."""
    x, y = octant_frame(oct).from_offset(pt.x - center.x, pt.y - center.y)
    return Pt(x, y)


def quad_to_real(x: Number, y: Number, quad: int, center: Pt) -> Pt:
    """Translate quadrant-local coordinates into image coordinates."""
    dx, dy = quadrant_frame(quad).to_offset(x, y)
    return Pt(center.x + dx, center.y + dy)
