from __future__ import annotations

from typing import Iterable

import numpy as np

from freehand.angle import Angle
from freehand.conics.aa_arc import antialiased_arc, antialiased_circle
from freehand.conics.annulus import annulus, pie_slice_filled, thick_arc, thick_circle
from freehand.conics.arc import arc, circle
from freehand.pt import PointLike
from freehand.raster import canvas, lines, shapes
from freehand.raster.canvas import RGBA


def new(image: np.ndarray) -> "Draw":
    return Draw(image)


class Draw:
    """Chains drawing calls against one image buffer.

    Every method draws immediately and returns the wrapper:

        Draw(img).circle(40, (50, 50), RED).line((0, 0), (99, 99), BLUE)
    """

    def __init__(self, image: np.ndarray) -> None:
        if image.ndim != 3 or image.shape[2] != 4:
            raise ValueError(f"image must have shape (height, width, 4), got {image.shape}")
        self.image = image

    @property
    def size(self) -> tuple[int, int]:
        return canvas.canvas_size(self.image)

    def pixel(self, pt: PointLike, color: RGBA) -> "Draw":
        x, y = pt
        canvas.put_pixel(self.image, int(x), int(y), color)
        return self

    def blend(self, pt: PointLike, opacity: float, color: RGBA) -> "Draw":
        x, y = pt
        canvas.blend_at(self.image, int(x), int(y), opacity, color)
        return self

    def line(self, a: PointLike, b: PointLike, color: RGBA) -> "Draw":
        lines.line(self.image, a, b, color)
        return self

    def line_alpha(self, a: PointLike, b: PointLike, opacity: float, color: RGBA) -> "Draw":
        lines.line_alpha(self.image, a, b, opacity, color)
        return self

    def dashed_line(self, a: PointLike, b: PointLike, dash_width: int, color: RGBA) -> "Draw":
        lines.dashed_line(self.image, a, b, dash_width, color)
        return self

    def dashed_line_alpha(self, a: PointLike, b: PointLike, dash_width: int, opacity: float, color: RGBA) -> "Draw":
        lines.dashed_line_alpha(self.image, a, b, dash_width, opacity, color)
        return self

    def path(self, points: Iterable[PointLike], color: RGBA) -> "Draw":
        lines.path(self.image, points, color)
        return self

    def rectangle(self, pt: PointLike, height: int, width: int, color: RGBA) -> "Draw":
        shapes.rectangle(self.image, pt, height, width, color)
        return self

    def rectangle_filled(self, pt: PointLike, height: int, width: int, color: RGBA) -> "Draw":
        shapes.rectangle_filled(self.image, pt, height, width, color)
        return self

    def rectangle_alpha(self, pt: PointLike, height: int, width: int, opacity: float, color: RGBA) -> "Draw":
        shapes.rectangle_alpha(self.image, pt, height, width, opacity, color)
        return self

    def rectangle_filled_alpha(self, pt: PointLike, height: int, width: int, opacity: float, color: RGBA) -> "Draw":
        shapes.rectangle_filled_alpha(self.image, pt, height, width, opacity, color)
        return self

    def arc(self, start_angle: Angle, end_angle: Angle, radius: int, center: PointLike, color: RGBA) -> "Draw":
        arc(self.image, start_angle, end_angle, radius, center, color)
        return self

    def circle(self, radius: int, center: PointLike, color: RGBA) -> "Draw":
        circle(self.image, radius, center, color)
        return self

    def annulus(
        self,
        start_angle: Angle,
        end_angle: Angle,
        inner_radius: int,
        outer_radius: int,
        center: PointLike,
        color: RGBA,
    ) -> "Draw":
        annulus(self.image, start_angle, end_angle, inner_radius, outer_radius, center, color)
        return self

    def pie_slice_filled(
        self, start_angle: Angle, end_angle: Angle, radius: int, center: PointLike, color: RGBA
    ) -> "Draw":
        pie_slice_filled(self.image, start_angle, end_angle, radius, center, color)
        return self

    def thick_arc(
        self,
        start_angle: Angle,
        end_angle: Angle,
        radius: int,
        thickness: int,
        center: PointLike,
        color: RGBA,
    ) -> "Draw":
        thick_arc(self.image, start_angle, end_angle, radius, thickness, center, color)
        return self

    def thick_circle(self, radius: int, thickness: int, center: PointLike, color: RGBA) -> "Draw":
        thick_circle(self.image, radius, thickness, center, color)
        return self

    def antialiased_arc(
        self, start_angle: Angle, end_angle: Angle, radius: float, center: PointLike, color: RGBA
    ) -> "Draw":
        antialiased_arc(self.image, start_angle, end_angle, radius, center, color)
        return self

    def antialiased_circle(self, radius: float, center: PointLike, color: RGBA) -> "Draw":
        antialiased_circle(self.image, radius, center, color)
        return self
