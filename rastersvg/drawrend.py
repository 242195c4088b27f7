"""Interactive SVG drawing renderer built on the software rasterizer."""

from __future__ import annotations

import logging
import math
import os
import struct
import time
import zlib
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from .color import Color
from .rasterizer import LevelSampleMethod, PixelSampleMethod, Rasterizer
from .renderer import Renderer
from .vectors import Vector2D

logger = logging.getLogger(__name__)

MOUSE_LEFT = 0
MOUSE_RIGHT = 1
MOUSE_MIDDLE = 2

EVENT_RELEASE = 0
EVENT_PRESS = 1
EVENT_REPEAT = 2

_LEVEL_STRINGS = {
    LevelSampleMethod.ZERO: "level zero",
    LevelSampleMethod.NEAREST: "nearest level",
    LevelSampleMethod.BILINEAR: "bilinear level interpolation",
}
_PIXEL_STRINGS = {
    PixelSampleMethod.NEAREST: "nearest pixel",
    PixelSampleMethod.BILINEAR: "bilinear pixel interpolation",
}

_ZOOM_REGION = 32
_ZOOM_FACTOR = 16
# Single-precision 0.3, the weight that lightens pixel boundaries in the zoom view.
_HIGHLIGHT = 0.30000001192092896

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class Drawable(Protocol):
    """An SVG document as the renderer sees it."""

    width: float
    height: float

    def draw(self, rasterizer: Rasterizer, transform: "_Matrix3") -> None: ...


@dataclass(frozen=True)
class _Matrix3:
    """A 3x3 matrix acting on 2D points in homogeneous coordinates."""

    rows: tuple[tuple[float, float, float], ...]

    @classmethod
    def of(cls, values: Iterable[float]) -> "_Matrix3":
        v = [float(x) for x in values]
        return cls((tuple(v[0:3]), tuple(v[3:6]), tuple(v[6:9])))

    @classmethod
    def identity(cls) -> "_Matrix3":
        return cls.of((1, 0, 0, 0, 1, 0, 0, 0, 1))

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        return self.rows[i][j]

    def __matmul__(self, other: object):
        if isinstance(other, _Matrix3):
            cols = list(zip(*other.rows))
            return _Matrix3(tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in cols)
                for row in self.rows))
        if isinstance(other, (Vector2D, tuple, list)):
            x, y = other
            hx, hy, hz = (r[0] * x + r[1] * y + r[2] for r in self.rows)
            return Vector2D(hx / hz, hy / hz)
        return NotImplemented


def encode_png(path: str | os.PathLike, rgba: bytes, width: int, height: int) -> None:
    """Write 8-bit RGBA pixels, stored row by row from the top, as a PNG file."""
    if width <= 0 or height <= 0:
        raise ValueError("image size must be positive")
    data = bytes(rgba)
    stride = 4 * width
    if len(data) != stride * height:
        raise ValueError("pixel data does not match the image size")

    def chunk(tag: bytes, payload: bytes) -> bytes:
        crc = zlib.crc32(tag + payload) & 0xFFFFFFFF
        return struct.pack(">I", len(payload)) + tag + payload + struct.pack(">I", crc)

    raw = b"".join(b"\x00" + data[top:top + stride] for top in range(0, len(data), stride))
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    with open(path, "wb") as fh:
        fh.write(_PNG_SIGNATURE)
        fh.write(chunk(b"IHDR", header))
        fh.write(chunk(b"IDAT", zlib.compress(raw)))
        fh.write(chunk(b"IEND", b""))


def _rgb_to_rgba(rgb: bytes) -> bytes:
    out = bytearray()
    for offset in range(0, len(rgb), 3):
        out += rgb[offset:offset + 3]
        out.append(255)
    return bytes(out)


class DrawRend(Renderer):
    """Renders one of several SVG documents, with pan, zoom and sampling controls."""

    def __init__(self, svgs: Sequence[Drawable]) -> None:
        self.svgs = list(svgs)
        if not self.svgs:
            raise ValueError("at least one SVG document is needed")
        self.current_svg = 0
        self.svg_to_ndc: list[_Matrix3] = []
        self.ndc_to_screen = _Matrix3.identity()
        self.framebuffer = bytearray()
        self.frame = b""
        self.width = 0
        self.height = 0
        self.cursor_x = 0.0
        self.cursor_y = 0.0
        self.left_clicked = False
        self.show_zoom = 0
        self.sample_rate = 1
        self.psm = PixelSampleMethod.NEAREST
        self.lsm = LevelSampleMethod.ZERO
        self.gl = True
        self.software_rasterizer: Rasterizer | None = None

    def init(self) -> None:
        """Set default parameters and the initial view of every document."""
        self.gl = True
        self.sample_rate = 1
        self.left_clicked = False
        self.show_zoom = 0
        self.svg_to_ndc = [_Matrix3.identity()] * len(self.svgs)
        for index in range(len(self.svgs)):
            self.current_svg = index
            self.view_init()
        self.current_svg = 0
        self.psm = PixelSampleMethod.NEAREST
        self.lsm = LevelSampleMethod.ZERO
        self.width = self.height = 0
        self.software_rasterizer = Rasterizer(self.psm, self.lsm, self.width,
                                              self.height, self.sample_rate)

    @property
    def rasterizer(self) -> Rasterizer:
        if self.software_rasterizer is None:
            raise RuntimeError("renderer has not been initialised")
        return self.software_rasterizer

    def render(self) -> bytes:
        """Return the displayed RGB image, with the zoom window if it is shown."""
        frame = bytearray(self.framebuffer)
        if self.show_zoom:
            size, pixels = self.zoom_pixels()
            row_bytes = 3 * size
            left = 3 * (self.width - size)
            for row in range(size):
                start = 3 * row * self.width + left
                frame[start:start + row_bytes] = pixels[row * row_bytes:(row + 1) * row_bytes]
        self.frame = bytes(frame)
        return self.frame

    def resize(self, width: int, height: int) -> None:
        """Resize the framebuffer and reset the device-to-screen transform."""
        self.width, self.height = width, height
        self.framebuffer = bytearray(3 * width * height)
        scale = float(min(width, height))
        self.ndc_to_screen = _Matrix3.of((
            scale, 0, (width - scale) / 2,
            0, scale, (height - scale) / 2,
            0, 0, 1,
        ))
        self.rasterizer.set_framebuffer_target(self.framebuffer, width, height)
        self.redraw()

    def name(self) -> str:
        return "Draw"

    def info(self) -> str:
        method = f"{_LEVEL_STRINGS[self.lsm]}, {_PIXEL_STRINGS[self.psm]}"
        return (f"Resolution {self.width} x {self.height}. "
                f"Using {method} sampling. "
                f"Supersample rate {self.sample_rate} per pixel. ")

    def cursor_event(self, x: float, y: float) -> None:
        """Pan the view while the left button is held; remember the cursor."""
        if self.left_clicked:
            svg = self.svgs[self.current_svg]
            dx = (x - self.cursor_x) / self.width * svg.width
            dy = (y - self.cursor_y) / self.height * svg.height
            self.move_view(dx, dy, 1)
            self.redraw()
        self.cursor_x = x
        self.cursor_y = y

    def scroll_event(self, offset_x: float, offset_y: float) -> None:
        """Zoom the view by the scroll amount, limited to [0.5, 1.5] per event."""
        if offset_x or offset_y:
            scale = 1 + 0.05 * (offset_x + offset_y)
            scale = min(1.5, max(0.5, scale))
            self.move_view(0, 0, scale)
            self.redraw()

    def mouse_event(self, key: int, event: int, mods: int) -> None:
        if key == MOUSE_LEFT:
            if event == EVENT_PRESS:
                self.left_clicked = True
            if event == EVENT_RELEASE:
                self.left_clicked = False

    def keyboard_event(self, key: int, event: int, mods: int) -> None:
        """Handle tab switching, view reset, sampling toggles, zoom and screenshots."""
        if event != EVENT_PRESS:
            return
        if ord("1") <= key <= ord("9") and key - ord("1") < len(self.svgs):
            self.current_svg = key - ord("1")
            self.redraw()
            return
        char = chr(key) if 0 <= key < 0x110000 else ""
        if char == " ":
            self.view_init()
            self.redraw()
        elif char == "=":
            if self.sample_rate < 16:
                root = math.sqrt(self.sample_rate)
                self._change_sample_rate(int(int(root + 1) * (root + 1)))
        elif char == "-":
            if self.sample_rate > 1:
                root = math.sqrt(self.sample_rate)
                self._change_sample_rate(int(int(root - 1) * (root - 1)))
        elif char == "S":
            self._write_screenshot()
        elif char == "P":
            self.psm = PixelSampleMethod((self.psm + 1) % 2)
            self.rasterizer.set_psm(self.psm)
            self.redraw()
        elif char == "L":
            self.lsm = LevelSampleMethod((self.lsm + 1) % 3)
            self.rasterizer.set_lsm(self.lsm)
            self.redraw()
        elif char == "Z":
            self.show_zoom = (self.show_zoom + 1) % 2

    def _change_sample_rate(self, rate: int) -> None:
        self.sample_rate = rate
        self.rasterizer.set_sample_rate(rate)
        self.redraw()

    def set_gl(self, enabled: bool) -> None:
        """Choose whether redraws refresh the displayed frame."""
        self.gl = enabled

    def _write_screenshot(self) -> str:
        self.redraw()
        frame = self.render()
        stamp = time.localtime()
        path = (f"screenshot_{stamp.tm_mon}-{stamp.tm_mday}_"
                f"{stamp.tm_hour}-{stamp.tm_min}-{stamp.tm_sec}.png")
        logger.info("Writing file %s", path)
        encode_png(path, _rgb_to_rgba(frame), self.width, self.height)
        return path

    def write_framebuffer(self, path: str | os.PathLike = "test.png") -> str | os.PathLike:
        """Write the framebuffer, with opaque alpha, to a PNG file."""
        encode_png(path, _rgb_to_rgba(bytes(self.framebuffer)), self.width, self.height)
        logger.info("Wrote framebuffer to %s", path)
        return path

    def redraw(self) -> None:
        """Rasterize the current document and its canvas outline into the framebuffer."""
        rasterizer = self.rasterizer
        rasterizer.clear_buffers()
        svg = self.svgs[self.current_svg]
        transform = self.ndc_to_screen @ self.svg_to_ndc[self.current_svg]
        svg.draw(rasterizer, transform)

        a = transform @ Vector2D(0, 0)
        b = transform @ Vector2D(svg.width, 0)
        c = transform @ Vector2D(0, svg.height)
        d = transform @ Vector2D(svg.width, svg.height)
        a = Vector2D(a.x - 1, a.y + 1)
        b = Vector2D(b.x + 1, b.y + 1)
        c = Vector2D(c.x - 1, c.y - 1)
        d = Vector2D(d.x + 1, d.y - 1)
        for p, q in ((a, b), (a, c), (d, b), (d, c)):
            rasterizer.rasterize_line(p.x, p.y, q.x, q.y, Color.BLACK)

        rasterizer.resolve_to_framebuffer()
        if self.gl:
            self.frame = bytes(self.framebuffer)

    def zoom_pixels(self) -> tuple[int, bytes]:
        """Return the side length and RGB pixels of the magnified view around the cursor.

        The zoom window never covers more than 40% of the framebuffer side; it is
        empty when the framebuffer is too small to magnify at all.
        """
        factor = _ZOOM_FACTOR
        buffer_size = min(self.width, self.height)
        if _ZOOM_REGION * factor > buffer_size * 0.4:
            factor = int(buffer_size * 0.4 / _ZOOM_REGION)
        size = _ZOOM_REGION * factor
        if size == 0:
            return 0, b""

        half = _ZOOM_REGION // 2
        cx = max(half, min(self.width - half - 1, int(max(0.0, self.cursor_x))))
        from_bottom = self.height - int(max(0.0, self.cursor_y))
        if from_bottom < 0:
            from_bottom = self.height
        cy = max(half, min(self.height - half - 1, from_bottom))

        top = self.height - 1 - (cy + half)
        left = cx - half
        out = bytearray()
        for row in range(top, top + _ZOOM_REGION):
            start = 3 * (row * self.width + left)
            pixels = bytes(self.framebuffer[start:start + 3 * _ZOOM_REGION])
            plain = bytearray()
            edge = bytearray()
            for offset in range(0, len(pixels), 3):
                pixel = pixels[offset:offset + 3]
                light = bytes(int((1.0 - 2.0 * _HIGHLIGHT) * v + _HIGHLIGHT * 255.0)
                              for v in pixel)
                plain += light + pixel * (factor - 1)
                edge += light * factor
            out += plain * (factor - 1) + edge
        return size, bytes(out)

    @property
    def view(self) -> tuple[float, float, float]:
        """The current view as (center x, center y, span) in SVG units."""
        m = self.svg_to_ndc[self.current_svg]
        span = m[2, 2] / 2.0
        return span - m[0, 2], span - m[1, 2], span

    def view_init(self) -> None:
        """Center the current document with a small margin around it."""
        svg = self.svgs[self.current_svg]
        w, h = svg.width, svg.height
        self.set_view(w / 2, h / 2, 1.2 * max(w, h) / 2)

    def set_view(self, x: float, y: float, span: float) -> None:
        """View centered at (x, y), extending ``span`` units in every direction."""
        self.svg_to_ndc[self.current_svg] = _Matrix3.of((
            1, 0, -x + span,
            0, 1, -y + span,
            0, 0, 2 * span,
        ))

    def move_view(self, dx: float, dy: float, zoom: float) -> None:
        """Shift the view by (dx, dy) and scale its span by ``zoom``."""
        x, y, span = self.view
        self.set_view(x - dx, y - dy, span * zoom)