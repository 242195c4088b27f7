"""Software rasterizer that draws points and lines into an RGB framebuffer."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional

from .color import Color


class PixelSampleMethod(IntEnum):
    """How texels are sampled within a texture level."""

    NEAREST = 0
    BILINEAR = 1


class LevelSampleMethod(IntEnum):
    """How mipmap levels are chosen when texturing."""

    ZERO = 0
    NEAREST = 1
    BILINEAR = 2


def _to_byte(value: float) -> int:
    return int(min(255.0, max(0.0, value * 255.0)))


class Rasterizer:
    """Draws into a sample buffer and resolves it into an 8-bit RGB framebuffer.

    The framebuffer target is any mutable byte buffer (such as a ``bytearray``)
    holding ``3 * width * height`` values, row by row.
    """

    def __init__(self, psm: PixelSampleMethod = PixelSampleMethod.NEAREST,
                 lsm: LevelSampleMethod = LevelSampleMethod.ZERO,
                 width: int = 0, height: int = 0, sample_rate: int = 1) -> None:
        self.psm = PixelSampleMethod(psm)
        self.lsm = LevelSampleMethod(lsm)
        self.width = width
        self.height = height
        self.sample_rate = sample_rate
        self.framebuffer: Optional[bytearray] = None
        self.sample_buffer: list[Color] = [Color.WHITE] * (width * height * sample_rate)

    def _resize_samples(self, count: int) -> None:
        del self.sample_buffer[count:]
        self.sample_buffer.extend([Color.WHITE] * (count - len(self.sample_buffer)))

    def set_sample_rate(self, rate: int) -> None:
        """Change the number of samples per pixel."""
        if rate < 1:
            raise ValueError("sample rate must be at least 1")
        self.sample_rate = rate
        self._resize_samples(self.width * self.height)

    def set_psm(self, psm: PixelSampleMethod) -> None:
        self.psm = PixelSampleMethod(psm)

    def set_lsm(self, lsm: LevelSampleMethod) -> None:
        self.lsm = LevelSampleMethod(lsm)

    def fill_pixel(self, x: int, y: int, color: Color) -> None:
        """Set every sample of pixel ``(x, y)`` to ``color``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        self.sample_buffer[y * self.width + x] = color

    def rasterize_point(self, x: float, y: float, color: Color) -> None:
        """Fill the pixel containing ``(x, y)``; points off the buffer are ignored."""
        if not (math.isfinite(x) and math.isfinite(y)):
            return
        sx = math.floor(x)
        sy = math.floor(y)
        if not (0 <= sx < self.width and 0 <= sy < self.height):
            return
        self.fill_pixel(sx, sy, color)

    def rasterize_line(self, x0: float, y0: float, x1: float, y1: float,
                       color: Color) -> None:
        """Draw a line by stepping one pixel along its major axis."""
        if x0 > x1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        dx = x1 - x0
        dy = y1 - y0
        if dx == 0:
            if dy == 0:
                self.rasterize_point(x0, y0, color)
                return
            step_x, step_y = 0.0, math.copysign(1.0, dy)
        else:
            slope = dy / dx
            if abs(slope) > 1:
                step_x, step_y = 1.0 / abs(slope), math.copysign(1.0, slope)
            else:
                step_x, step_y = 1.0, slope

        px, py = x0, y0
        last_column = math.floor(x1)
        while math.floor(px) <= last_column and abs(py - y0) <= abs(dy):
            self.rasterize_point(px, py, color)
            px += step_x
            py += step_y

    def set_framebuffer_target(self, framebuffer: bytearray, width: int,
                               height: int) -> None:
        """Attach an RGB framebuffer of ``3 * width * height`` bytes."""
        if width < 0 or height < 0:
            raise ValueError("framebuffer size must not be negative")
        if len(framebuffer) < 3 * width * height:
            raise ValueError("framebuffer is too small for the given size")
        self.width = width
        self.height = height
        self.framebuffer = framebuffer
        self._resize_samples(width * height)

    def _target(self) -> bytearray:
        if self.framebuffer is None:
            raise RuntimeError("no framebuffer target has been set")
        return self.framebuffer

    def clear_buffers(self) -> None:
        """Reset the framebuffer and all samples to white."""
        target = self._target()
        size = 3 * self.width * self.height
        target[:size] = b"\xff" * size
        self.sample_buffer[:] = [Color.WHITE] * len(self.sample_buffer)

    def resolve_to_framebuffer(self) -> None:
        """Write the sample buffer into the framebuffer as 8-bit RGB."""
        target = self._target()
        count = self.width * self.height
        for index, color in enumerate(self.sample_buffer[:count]):
            target[3 * index:3 * index + 3] = bytes(_to_byte(c) for c in color)