"""SVG rendering of a 3-D surface function."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator

from kitbag.tempconv import _format_g

WIDTH, HEIGHT = 600, 320
CELLS = 100
XYRANGE = 30.0
XYSCALE = WIDTH / 2 / XYRANGE
ZSCALE = HEIGHT * 0.4
ANGLE = math.pi / 6

_SIN30, _COS30 = math.sin(ANGLE), math.cos(ANGLE)


def f(x: float, y: float) -> float:
    """Surface height at ``(x, y)``: sin(r)/r, NaN at the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell ``(i, j)`` onto the SVG canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def _polygons() -> Iterator[str]:
    for i in range(CELLS):
        for j in range(CELLS):
            points = (corner(i + 1, j), corner(i, j), corner(i, j + 1), corner(i + 1, j + 1))
            coords = " ".join(f"{_format_g(x)},{_format_g(y)}" for x, y in points)
            yield f"<polygon points='{coords}'/>\n"


def render_svg() -> str:
    """Return the whole SVG document for the surface."""
    header = (
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    )
    return header + "".join(_polygons()) + "</svg>\n"


def main(argv: list[str] | None = None) -> int:
    """Write the surface SVG to standard output."""
    argparse.ArgumentParser(
        prog="surface", description="Render a 3-D surface as SVG."
    ).parse_args(argv)
    sys.stdout.write(render_svg())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())