from freehand.conics import (
    Annulus,
    AntialiasedArc,
    Arc,
    annulus,
    antialiased_arc,
    antialiased_circle,
    arc,
    circle,
    pie_slice_filled,
    thick_arc,
    thick_circle,
)
from freehand.draw import Draw, new
from freehand.errors import FreehandError, InvalidOctantError, InvalidRadiusError
from freehand.pt import Pt
from freehand.raster import lines, shapes
from freehand.raster.canvas import blend_at, canvas_size, new_canvas, put_pixel, save_png, to_image

__all__ = [
    "Annulus",
    "AntialiasedArc",
    "Arc",
    "Draw",
    "FreehandError",
    "InvalidOctantError",
    "InvalidRadiusError",
    "Pt",
    "annulus",
    "antialiased_arc",
    "antialiased_circle",
    "arc",
    "blend_at",
    "canvas_size",
    "circle",
    "lines",
    "new",
    "new_canvas",
    "pie_slice_filled",
    "put_pixel",
    "save_png",
    "shapes",
    "thick_arc",
    "thick_circle",
    "to_image",
]
