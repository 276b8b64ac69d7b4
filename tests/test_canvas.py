from PIL import Image
import pytest

from sketchcity.render.canvas import (DrawCommand, RecordingCanvas,
                                      RoughCanvas, parse_color)
from sketchcity.render.pipeline import StyleOptions


def _options(**overrides):
    values = dict(
        stroke='#040106',
        stroke_width=2,
        roughness=1.0,
        bowing=1.0,
        disable_multi_stroke=True,
        seed=42,
    )
    values.update(overrides)
    return StyleOptions(**values)


SQUARE = ((20.0, 20.0), (80.0, 20.0), (80.0, 80.0), (20.0, 80.0))


def test_parse_color():
    assert parse_color('#D3CFD1') == (0xD3, 0xCF, 0xD1, 255)
    assert parse_color('rgba(0, 0, 0, 0.2)') == (0, 0, 0, 51)
    assert parse_color('transparent') is None
    assert parse_color(None) is None


def test_background_is_painted():
    canvas = RoughCanvas(50, 40, '#F1ECEF')
    assert canvas.image.size == (50, 40)
    assert canvas.image.getpixel((10, 10)) == (0xF1, 0xEC, 0xEF, 255)


def test_polygon_fills_interior():
    canvas = RoughCanvas(100, 100, '#FFFFFF')
    canvas.draw_polygon(SQUARE, _options(fill='#D3CFD1', fill_style='solid', stroke='transparent'))
    assert canvas.image.getpixel((50, 50)) == (0xD3, 0xCF, 0xD1, 255)
    assert canvas.image.getpixel((5, 5)) == (255, 255, 255, 255)


def test_translucent_fill_blends():
    canvas = RoughCanvas(100, 100, '#FFFFFF')
    canvas.draw_polygon(SQUARE, _options(fill='rgba(0, 0, 0, 0.2)', fill_style='solid', stroke='transparent'))
    r, g, b, a = canvas.image.getpixel((50, 50))
    assert 180 < r < 230
    assert a == 255


def test_unsupported_fill_style():
    canvas = RoughCanvas(100, 100)
    with pytest.raises(ValueError):
        canvas.draw_polygon(SQUARE, _options(fill='#000000', fill_style='hachure'))


def test_path_is_deterministic_per_seed():
    first = RoughCanvas(100, 100, '#FFFFFF')
    second = RoughCanvas(100, 100, '#FFFFFF')
    for canvas in (first, second):
        canvas.draw_path(((10.0, 10.0), (90.0, 40.0), (30.0, 90.0)), _options())
    assert first.to_png_bytes() == second.to_png_bytes()
    assert first.image.getcolors(100 * 100) != [(100 * 100, (255, 255, 255, 255))]


def test_save_png(tmp_path):
    canvas = RoughCanvas(64, 32, '#F1ECEF')
    canvas.draw_path(((1.0, 1.0), (60.0, 30.0)), _options(seed=-17))
    path = tmp_path / 'out.png'
    canvas.save(str(path))
    with Image.open(path) as image:
        assert image.size == (64, 32)


def test_recording_canvas_dispatch():
    canvas = RecordingCanvas()
    polygon = DrawCommand('polygon', SQUARE, _options(fill='#fff', fill_style='solid'))
    path = DrawCommand('path', SQUARE[:2], _options())
    polygon.draw_on(canvas)
    path.draw_on(canvas)
    assert canvas.commands == [polygon, path]
    assert path.to_dict()['options']['strokeWidth'] == 2
