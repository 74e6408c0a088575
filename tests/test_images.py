import io
import random
import sys
import types

import pytest
from PIL import Image

from kitbag.images import (
    XMIN,
    YMIN,
    acos,
    lissajous,
    main,
    mandelbrot,
    newton,
    render_fractal,
    sqrt,
    to_jpeg,
)


def _png_bytes(mode="RGB", size=(8, 6)):
    buf = io.BytesIO()
    Image.new(mode, size, (10, 20, 30) if mode == "RGB" else 40).save(buf, format="PNG")
    return buf.getvalue()


def test_mandelbrot_inside_is_black():
    assert mandelbrot(0j) == (0, 0, 0)
    assert mandelbrot(-1 + 0j) == mandelbrot(0j)


def test_mandelbrot_far_point_is_white():
    assert mandelbrot(10 + 10j) == (255, 255, 255)


def test_mandelbrot_is_gray():
    r, g, b = mandelbrot(0.5 + 0.5j)
    assert r == g == b


def test_newton_at_root_and_origin():
    assert newton(1 + 0j) == mandelbrot(10 + 10j)
    assert newton(0j) == mandelbrot(0j)


@pytest.mark.parametrize("fn", [acos, sqrt])
@pytest.mark.parametrize("z", [0j, 1 + 1j, -1.5 + 0.3j, 2 - 2j])
def test_colour_functions_give_bytes(fn, z):
    color = fn(z)
    assert len(color) == 3
    assert all(0 <= c <= 255 for c in color)


def test_render_fractal_size_and_corner():
    img = render_fractal(mandelbrot, 5, 3)
    assert img.size == (5, 3)
    assert img.getpixel((0, 0)) == mandelbrot(complex(XMIN, YMIN))


def test_render_fractal_uses_colour_function():
    img = render_fractal(lambda z: (1, 2, 3), 2, 2)
    assert set(img.getdata()) == {(1, 2, 3)}


def test_lissajous_gif():
    out = io.BytesIO()
    lissajous(out, random.Random(1))
    data = out.getvalue()
    assert data[:3] == b"GIF"
    with Image.open(io.BytesIO(data)) as gif:
        assert gif.size == (201, 201)
        assert gif.n_frames == 64
        assert gif.info["loop"] == 64
        assert gif.info["duration"] == 80
        lum = gif.convert("L")
        assert lum.getextrema() == (0, 255)


def test_lissajous_is_deterministic_with_seed():
    first, second = io.BytesIO(), io.BytesIO()
    lissajous(first, random.Random(3))
    lissajous(second, random.Random(3))
    assert first.getvalue() == second.getvalue()


@pytest.mark.parametrize("mode", ["RGB", "L"])
def test_to_jpeg(capsys, mode):
    out = io.BytesIO()
    to_jpeg(io.BytesIO(_png_bytes(mode)), out)
    assert "Input format = png" in capsys.readouterr().err
    data = out.getvalue()
    assert data[:2] == b"\xff\xd8"
    with Image.open(io.BytesIO(data)) as img:
        assert img.format == "JPEG"
        assert img.size == (8, 6)


def test_to_jpeg_unknown_format():
    with pytest.raises(ValueError, match="image: unknown format"):
        to_jpeg(io.BytesIO(b"not an image at all"), io.BytesIO())


def test_main_jpeg_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", types.SimpleNamespace(buffer=io.BytesIO(b"junk")))
    monkeypatch.setattr(sys, "stdout", types.SimpleNamespace(buffer=io.BytesIO()))
    assert main(["jpeg"]) == 1
    assert "jpeg: image: unknown format" in capsys.readouterr().err


def test_main_mandelbrot_png(monkeypatch):
    out = io.BytesIO()
    monkeypatch.setattr(sys, "stdout", types.SimpleNamespace(buffer=out))
    assert main(["mandelbrot", "--size", "8", "--function", "newton"]) == 0
    with Image.open(io.BytesIO(out.getvalue())) as img:
        assert img.format == "PNG"
        assert img.size == (8, 8)