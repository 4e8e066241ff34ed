from .canvas import RGBA, blend_at, canvas_size, in_bounds, new_canvas, put_pixel, save_png, to_image
from .lines import (
    dashed_line,
    dashed_line_alpha,
    diagonal_line,
    diagonal_line_alpha,
    horizontal_dashed_line,
    horizontal_line,
    horizontal_line_alpha,
    line,
    line_alpha,
    path,
    vertical_dashed_line,
    vertical_line,
    vertical_line_alpha,
)
from .shapes import rectangle, rectangle_alpha, rectangle_filled, rectangle_filled_alpha

__all__ = [
    "RGBA",
    "blend_at",
    "canvas_size",
    "dashed_line",
    "dashed_line_alpha",
    "diagonal_line",
    "diagonal_line_alpha",
    "horizontal_dashed_line",
    "horizontal_line",
    "horizontal_line_alpha",
    "in_bounds",
    "line",
    "line_alpha",
    "new_canvas",
    "path",
    "put_pixel",
    "rectangle",
    "rectangle_alpha",
    "rectangle_filled",
    "rectangle_filled_alpha",
    "save_png",
    "to_image",
    "vertical_dashed_line",
    "vertical_line",
    "vertical_line_alpha",
]
