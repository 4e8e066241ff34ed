from __future__ import annotations

import math
import numbers
import sys
from typing import Union


Angle = Union[int, float]

# Range of a single octant in radians.
RADS = math.pi / 4.0
# Range of a single quadrant in radians.
QUAD = math.pi / 2.0
# Radians in a full circle.
PI2 = math.pi * 2.0
# Subtracted from end angles so a range that ends on a sector boundary stays in the sector it is leaving.
TINY = sys.float_info.epsilon * 3.0
# Angles this close to a sector boundary are treated as lying on it.
BOUNDARY_TOLERANCE = 1e-12


def radians(angle: Angle) -> float:
    """Integers are degrees, floats are radians."""
    if isinstance(angle, bool):
        raise TypeError("angle must be an int (degrees) or a float (radians), got bool")
    if isinstance(angle, numbers.Integral):
        return math.radians(int(angle))
    if isinstance(angle, numbers.Real):
        return float(angle)
    raise TypeError(f"angle must be an int (degrees) or a float (radians), got {type(angle).__name__}")


def normalize(angle: float) -> float:
    a = angle % PI2
    return a if a < PI2 else 0.0


def angle_to_octant(angle: float) -> int:
    return min(8, int(normalize(angle) // RADS) + 1)


def angle_to_quadrant(angle: float) -> int:
    return min(4, int(normalize(angle) // QUAD) + 1)


def entering_octant(angle: float) -> int:
    """Octant a range starting at `angle` walks first.

    Unlike `angle_to_octant`, an angle that rounds to just below a boundary
    belongs to the octant after it.
    """
    return _entering(angle, RADS, 8)


def entering_quadrant(angle: float) -> int:
    return _entering(angle, QUAD, 4)


def _entering(angle: float, width: float, count: int) -> int:
    a = normalize(angle)
    sector = min(count, int(a // width) + 1)
    if on_boundary(a, sector * width):
        sector = sector % count + 1
    return sector


def octant_start_angle(oct: int) -> float:
    return (oct - 1) * RADS


def octant_end_angle(oct: int) -> float:
    return oct * RADS


def quadrant_start_angle(quad: int) -> float:
    return (quad - 1) * QUAD


def quadrant_end_angle(quad: int) -> float:
    return quad * QUAD


def on_boundary(angle: float, boundary: float) -> bool:
    return abs(angle - boundary) <= BOUNDARY_TOLERANCE


def arc_range(start_angle: Angle, end_angle: Angle) -> tuple[float, float]:
    """Resolve a caller supplied range into normalized `(start, end)` radians.

    Ranges run counter-clockwise from start to end.  A span of a full turn or
    more is clamped to exactly one turn, and equal angles mean a full circle:
    in both cases the end lands just before the start.
    """
    a = radians(start_angle)
    b = radians(end_angle)
    start = normalize(a)
    if on_boundary(start, PI2):
        start = 0.0
    end = start if abs(b - a) >= PI2 else normalize(b)
    return start, normalize(end - TINY)


def is_revisit(start: float, end: float, start_sector: int, end_sector: int) -> bool:
    """True when the walk must leave the start sector and come back to it to finish."""
    return start_sector == end_sector and end < start
