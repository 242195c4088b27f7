import pytest

from rastersvg.color import Color
from rastersvg.rasterizer import LevelSampleMethod, PixelSampleMethod, Rasterizer


def make(width=4, height=4):
    raster = Rasterizer(PixelSampleMethod.NEAREST, LevelSampleMethod.ZERO, width, height, 1)
    fb = bytearray(3 * width * height)
    raster.set_framebuffer_target(fb, width, height)
    raster.clear_buffers()
    return raster, fb


def black_pixels(fb, width, height):
    return {
        (x, y)
        for y in range(height)
        for x in range(width)
        if fb[3 * (y * width + x):3 * (y * width + x) + 3] == b"\x00\x00\x00"
    }


def test_clear_fills_white():
    _, fb = make(3, 2)
    assert fb == bytearray(b"\xff" * 18)


def test_point_fills_containing_pixel():
    raster, fb = make()
    raster.rasterize_point(1.5, 2.7, Color.BLACK)
    raster.resolve_to_framebuffer()
    assert black_pixels(fb, 4, 4) == {(1, 2)}


def test_point_outside_is_ignored():
    raster, fb = make()
    raster.rasterize_point(-0.5, 1.0, Color.BLACK)
    raster.rasterize_point(4.0, 1.0, Color.BLACK)
    raster.rasterize_point(1.0, 10.0, Color.BLACK)
    raster.resolve_to_framebuffer()
    assert black_pixels(fb, 4, 4) == set()


def test_horizontal_line():
    raster, fb = make()
    raster.rasterize_line(0, 1, 3, 1, Color.BLACK)
    raster.resolve_to_framebuffer()
    assert black_pixels(fb, 4, 4) == {(0, 1), (1, 1), (2, 1), (3, 1)}


def test_vertical_line():
    raster, fb = make()
    raster.rasterize_line(2, 0, 2, 2, Color.BLACK)
    raster.resolve_to_framebuffer()
    assert black_pixels(fb, 4, 4) == {(2, 0), (2, 1), (2, 2)}


def test_diagonal_line():
    raster, fb = make()
    raster.rasterize_line(0, 0, 3, 3, Color.BLACK)
    raster.resolve_to_framebuffer()
    assert black_pixels(fb, 4, 4) == {(0, 0), (1, 1), (2, 2), (3, 3)}


@pytest.mark.parametrize("line", [(0, 0, 3, 1), (0.5, 3.5, 1.5, 0.2), (3, 0, 0, 3)])
def test_line_direction_does_not_matter(line):
    x0, y0, x1, y1 = line
    forward, fb_forward = make()
    backward, fb_backward = make()
    forward.rasterize_line(x0, y0, x1, y1, Color.BLACK)
    backward.rasterize_line(x1, y1, x0, y0, Color.BLACK)
    forward.resolve_to_framebuffer()
    backward.resolve_to_framebuffer()
    assert fb_forward == fb_backward


def test_steep_line_covers_every_row():
    raster, fb = make()
    raster.rasterize_line(0.5, 0.5, 1.5, 3.5, Color.BLACK)
    raster.resolve_to_framebuffer()
    rows = {y for _, y in black_pixels(fb, 4, 4)}
    assert rows == {0, 1, 2, 3}


def test_degenerate_line_draws_one_point():
    raster, fb = make()
    raster.rasterize_line(1.2, 1.2, 1.2, 1.2, Color.BLACK)
    raster.resolve_to_framebuffer()
    assert black_pixels(fb, 4, 4) == {(1, 1)}


def test_resolve_writes_channels():
    raster, fb = make(2, 1)
    raster.fill_pixel(1, 0, Color(1.0, 0.0, 0.0))
    raster.resolve_to_framebuffer()
    assert bytes(fb) == b"\xff\xff\xff\xff\x00\x00"


def test_clear_resets_samples():
    raster, fb = make()
    raster.rasterize_point(0, 0, Color.BLACK)
    raster.clear_buffers()
    raster.resolve_to_framebuffer()
    assert black_pixels(fb, 4, 4) == set()


def test_fill_pixel_out_of_range():
    raster, _ = make()
    with pytest.raises(IndexError):
        raster.fill_pixel(4, 0, Color.BLACK)


def test_clear_without_target():
    raster = Rasterizer(PixelSampleMethod.NEAREST, LevelSampleMethod.ZERO, 2, 2, 1)
    with pytest.raises(RuntimeError):
        raster.clear_buffers()


def test_framebuffer_too_small():
    raster = Rasterizer(PixelSampleMethod.NEAREST, LevelSampleMethod.ZERO, 0, 0, 1)
    with pytest.raises(ValueError):
        raster.set_framebuffer_target(bytearray(5), 2, 2)


def test_sample_rate_and_methods():
    raster, _ = make()
    raster.set_sample_rate(4)
    raster.set_psm(PixelSampleMethod.BILINEAR)
    raster.set_lsm(LevelSampleMethod.BILINEAR)
    assert raster.sample_rate == 4
    assert raster.psm is PixelSampleMethod.BILINEAR
    assert raster.lsm is LevelSampleMethod.BILINEAR


def test_invalid_sample_rate():
    raster, _ = make()
    with pytest.raises(ValueError):
        raster.set_sample_rate(0)