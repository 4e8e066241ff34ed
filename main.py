from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
from pathlib import Path

from freehand import Draw, new_canvas, save_png
from freehand.angle import Angle
from freehand.raster.canvas import RGBA


LOGGER = logging.getLogger("freehand.demo")

SHAPES = ("arc", "annulus", "aa-arc", "circle", "all")


@dataclass(frozen=True)
class RenderOptions:
    shape: str = "all"
    start: Angle = 0
    end: Angle = 360
    radius: int = 190
    inner_radius: int = 150
    width: int = 400
    height: int = 400
    center: tuple[int, int] | None = None
    color: RGBA = (0, 0, 0, 255)
    background: RGBA = (255, 255, 255, 255)
    out: Path = Path("freehand.png")

    def __post_init__(self) -> None:
        if self.shape not in SHAPES:
            raise ValueError(f"unknown shape {self.shape!r}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")

    def resolved_center(self) -> tuple[int, int]:
        if self.center is not None:
            return self.center
        return (self.width // 2, self.height // 2)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="freehand")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Draw circle primitives into a PNG.")
    render.add_argument("--shape", choices=SHAPES, default="all")
    render.add_argument(
        "--start",
        type=_parse_angle,
        default=0,
        help="Start angle. Integers are degrees, decimals are radians.",
    )
    render.add_argument("--end", type=_parse_angle, default=360, help="End angle, same convention as --start.")
    render.add_argument("--radius", type=int, default=190)
    render.add_argument("--inner-radius", type=int, default=150, help="Inner radius for --shape annulus.")
    render.add_argument("--width", type=int, default=400)
    render.add_argument("--height", type=int, default=400)
    render.add_argument("--center", type=_parse_pair, default=None, help="Center as X,Y. Default: image center.")
    render.add_argument("--color", type=_parse_color, default=(0, 0, 0, 255), help="R,G,B[,A] in 0..255.")
    render.add_argument("--out", type=Path, default=Path("freehand.png"))
    render.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    args = parser.parse_args(argv)

    if args.command == "render":
        logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
        options = RenderOptions(
            shape=args.shape,
            start=args.start,
            end=args.end,
            radius=args.radius,
            inner_radius=args.inner_radius,
            width=args.width,
            height=args.height,
            center=args.center,
            color=args.color,
            out=args.out,
        )
        out = render_png(options)
        print(f"wrote {out}")
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def render_png(options: RenderOptions) -> Path:
    image = new_canvas(options.width, options.height, options.background)
    draw = Draw(image)
    center = options.resolved_center()
    shape = options.shape
    LOGGER.info(
        "rendering %s start=%r end=%r r=%d at %s into %dx%d",
        shape,
        options.start,
        options.end,
        options.radius,
        center,
        options.width,
        options.height,
    )
    if shape in ("annulus", "all"):
        draw.annulus(options.start, options.end, options.inner_radius, options.radius, center, options.color)
    if shape == "arc":
        draw.arc(options.start, options.end, options.radius, center, options.color)
    if shape == "circle":
        draw.circle(options.radius, center, options.color)
    if shape == "aa-arc":
        draw.antialiased_arc(options.start, options.end, options.radius, center, options.color)
    if shape == "all":
        inner = max(1, options.inner_radius - 10)
        draw.arc(options.start, options.end, inner, center, options.color)
        draw.antialiased_arc(options.start, options.end, options.radius + 5, center, options.color)
    return save_png(image, options.out)


def _parse_angle(text: str) -> Angle:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid angle: {text!r}") from None


def _parse_pair(text: str) -> tuple[int, int]:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}")
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integers in X,Y, got {text!r}") from None


def _parse_color(text: str) -> RGBA:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) not in (3, 4):
        raise argparse.ArgumentTypeError(f"expected R,G,B[,A], got {text!r}")
    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integers in R,G,B[,A], got {text!r}") from None
    if any(v < 0 or v > 255 for v in values):
        raise argparse.ArgumentTypeError(f"color components must be in 0..255, got {text!r}")
    if len(values) == 3:
        values.append(255)
    return (values[0], values[1], values[2], values[3])


if __name__ == "__main__":
    main()
