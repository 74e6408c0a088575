"""Fractal, Lissajous and JPEG conversion image tools."""

from __future__ import annotations

import argparse
import cmath
import io
import math
import random
import sys
from collections.abc import Callable
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

Color = tuple[int, int, int]

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
_BLACK: Color = (0, 0, 0)

_CYCLES = 5
_RES = 0.001
_SIZE = 100
_NFRAMES = 64
_DELAY = 8
_PALETTE = [255, 255, 255, 0, 0, 0]
_WHITE_INDEX, _BLACK_INDEX = 0, 1

_DECODERS = ["PNG", "JPEG"]


def _gray(v: int) -> Color:
    v &= 0xFF
    return (v, v, v)


def _uint8(x: float) -> int:
    return int(x) & 0xFF


def _ycbcr_to_rgb(y: int, cb: int, cr: int) -> Color:
    yy1 = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128

    def clamp(v: int) -> int:
        if 0 <= v < 1 << 24:
            return v >> 16
        return 0 if v < 0 else 255

    return (
        clamp(yy1 + 91881 * cr1),
        clamp(yy1 - 22554 * cb1 - 46802 * cr1),
        clamp(yy1 + 116130 * cb1),
    )


def mandelbrot(z: complex) -> Color:
    """Shade ``z`` by how quickly it escapes the Mandelbrot iteration."""
    iterations, contrast = 200, 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return _BLACK


def newton(z: complex) -> Color:
    """Shade ``z`` by how quickly Newton's method finds a root of z^4 - 1."""
    iterations, contrast = 37, 7
    try:
        for i in range(iterations):
            z -= (z - 1 / (z * z * z)) / 4
            if abs(z * z * z * z - 1) < 1e-6:
                return _gray(255 - contrast * i)
    except (ZeroDivisionError, OverflowError):
        pass
    return _BLACK


def acos(z: complex) -> Color:
    """Colour ``z`` by its complex arc cosine."""
    v = cmath.acos(z)
    blue = (_uint8(v.real * 128) + 127) & 0xFF
    red = (_uint8(v.imag * 128) + 127) & 0xFF
    return _ycbcr_to_rgb(192, blue, red)


def sqrt(z: complex) -> Color:
    """Colour ``z`` by its complex square root."""
    v = cmath.sqrt(z)
    blue = (_uint8(v.real * 128) + 127) & 0xFF
    red = (_uint8(v.imag * 128) + 127) & 0xFF
    return _ycbcr_to_rgb(128, blue, red)


def render_fractal(
    color_of: Callable[[complex], Color] = mandelbrot,
    width: int = 1024,
    height: int = 1024,
) -> Image.Image:
    """Render ``color_of`` over the square [-2, 2] x [-2, 2] of the complex plane."""
    img = Image.new("RGB", (width, height))
    img.putdata(
        [
            color_of(
                complex(
                    px / width * (XMAX - XMIN) + XMIN,
                    py / height * (YMAX - YMIN) + YMIN,
                )
            )
            for py in range(height)
            for px in range(width)
        ]
    )
    return img


def _angles() -> list[float]:
    limit = _CYCLES * 2 * math.pi
    angles = []
    t = 0.0
    while t < limit:
        angles.append(t)
        t += _RES
    return angles


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a random Lissajous figure to ``out``."""
    rng = rng if rng is not None else random.Random()
    freq = rng.random() * 3.0
    side = 2 * _SIZE + 1
    angles = _angles()
    xs = [_SIZE + int(math.sin(t) * _SIZE + 0.5) for t in angles]
    frames = []
    phase = 0.0
    for _ in range(_NFRAMES):
        pixels = bytearray([_WHITE_INDEX]) * (side * side)
        for t, x in zip(angles, xs):
            y = _SIZE + int(math.sin(t * freq + phase) * _SIZE + 0.5)
            pixels[y * side + x] = _BLACK_INDEX
        frame = Image.frombytes("P", (side, side), bytes(pixels))
        frame.putpalette(_PALETTE)
        frames.append(frame)
        phase += 0.1
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=_DELAY * 10,
        loop=_NFRAMES,
        optimize=False,
    )


def to_jpeg(infile: BinaryIO, outfile: BinaryIO) -> None:
    """Decode a PNG or JPEG image from ``infile`` and write it as JPEG."""
    try:
        img = Image.open(infile, formats=_DECODERS)
        img.load()
    except UnidentifiedImageError as err:
        raise ValueError("image: unknown format") from err
    print(f"Input format = {img.format.lower()}", file=sys.stderr)
    if img.mode not in ("L", "RGB"):
        img = img.convert("RGB")
    img.save(outfile, format="JPEG", quality=95)


_FUNCTIONS: dict[str, Callable[[complex], Color]] = {
    "mandelbrot": mandelbrot,
    "newton": newton,
    "acos": acos,
    "sqrt": sqrt,
}


def main(argv: list[str] | None = None) -> int:
    """Write a fractal PNG, a Lissajous GIF, or convert standard input to JPEG."""
    parser = argparse.ArgumentParser(prog="images", description="Image tools.")
    sub = parser.add_subparsers(dest="command", required=True)
    fractal = sub.add_parser("mandelbrot", help="write a fractal as PNG")
    fractal.add_argument("--function", choices=sorted(_FUNCTIONS), default="mandelbrot")
    fractal.add_argument("--size", type=int, default=1024)
    sub.add_parser("lissajous", help="write an animated Lissajous GIF")
    sub.add_parser("jpeg", help="convert a PNG on standard input to JPEG")
    options = parser.parse_args(argv)

    out = sys.stdout.buffer
    if options.command == "mandelbrot":
        image = render_fractal(_FUNCTIONS[options.function], options.size, options.size)
        image.save(out, format="PNG")
    elif options.command == "lissajous":
        lissajous(out)
    else:
        try:
            to_jpeg(io.BytesIO(sys.stdin.buffer.read()), out)
        except (ValueError, OSError) as err:
            print(f"jpeg: {err}", file=sys.stderr)
            return 1
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())