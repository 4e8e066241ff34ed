from .aa_arc import AAStep, AntialiasedArc, antialiased_arc, antialiased_circle, opacity
from .annulus import Annulus, annulus, pie_slice_filled, thick_arc, thick_circle
from .arc import Arc, arc, circle
from .bounds import Bounds, Pos
from .edge import Edge, Line

__all__ = [
    "AAStep",
    "Annulus",
    "AntialiasedArc",
    "Arc",
    "Bounds",
    "Edge",
    "Line",
    "Pos",
    "annulus",
    "antialiased_arc",
    "antialiased_circle",
    "arc",
    "circle",
    "opacity",
    "pie_slice_filled",
    "thick_arc",
    "thick_circle",
]
