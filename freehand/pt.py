from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence, Union


Number = Union[int, float]


@dataclass(frozen=True)
class Pt:
    """A 2D point.  Integer points are pixels, float points are continuous positions."""

    x: Number
    y: Number

    @classmethod
    def from_radian(cls, angle: float, radius: Number, center: "Pt") -> "Pt":
        """Point on the circle at `angle`, in image space (y grows downward)."""
        return cls(
            center.x + radius * math.cos(angle),
            center.y - radius * math.sin(angle),
        )

    def rounded(self) -> "Pt":
        return Pt(int(round(self.x)), int(round(self.y)))

    def offset(self, dx: Number, dy: Number) -> "Pt":
        return Pt(self.x + dx, self.y + dy)

    def swap(self) -> "Pt":
        return Pt(self.y, self.x)

    def chebyshev(self, other: "Pt") -> Number:
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def __iter__(self):
        yield self.x
        yield self.y


PointLike = Union[Pt, Sequence[Number]]


def as_pt(value: PointLike) -> Pt:
    if isinstance(value, Pt):
        return value
    x, y = value
    return Pt(x, y)


def as_int_pt(value: PointLike) -> Pt:
    pt = as_pt(value)
    return Pt(int(pt.x), int(pt.y))
