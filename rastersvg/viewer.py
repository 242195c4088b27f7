"""Headless viewer that drives a renderer and keeps an on-screen status display."""

from __future__ import annotations

import time
from typing import Any, Optional

from .color import Color
from .osdtext import OSDText
from .renderer import Renderer

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

ACTION_RELEASE = 0
ACTION_PRESS = 1
ACTION_REPEAT = 2

KEY_GRAVE_ACCENT = 96
KEY_ESCAPE = 256

_OSD_GREEN = Color(0.15, 0.5, 0.15)
_OSD_RED = Color(1.0, 0.35, 0.35)
_SLOW_FRAMERATE = 20


class Viewer:
    """Forwards window events to a renderer and maintains framerate and info text.

    The viewer does no drawing of its own: it owns the on-screen display lines
    and the event plumbing, and asks the renderer for frames.
    """

    def __init__(self, renderer: Optional[Renderer] = None) -> None:
        self.renderer = renderer
        self.hdpi = False
        self.show_info = True
        self.should_close = False
        self.title = ""
        self.buffer_w = 0
        self.buffer_h = 0
        self.framecount = 0
        self.osd_text: Optional[OSDText] = None
        self.line_id_renderer = -1
        self.line_id_framerate = -1
        self._last: Optional[float] = None

    def set_renderer(self, renderer: Optional[Renderer]) -> None:
        self.renderer = renderer

    @property
    def _osd(self) -> OSDText:
        if self.osd_text is None:
            raise RuntimeError("viewer has not been initialised")
        return self.osd_text

    def init(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
             framebuffer_width: Optional[int] = None,
             framebuffer_height: Optional[int] = None) -> None:
        """Set up the window state, the renderer and the status display.

        The framebuffer size defaults to the window size; a framebuffer wider
        than the default window marks the display as high-DPI.
        """
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self.title = f"Viewer: {self.renderer.name()}" if self.renderer else "Viewer"
        self.buffer_w = width if framebuffer_width is None else framebuffer_width
        self.buffer_h = height if framebuffer_height is None else framebuffer_height
        if self.buffer_w > DEFAULT_WIDTH:
            self.hdpi = True

        if self.renderer is not None:
            if self.hdpi:
                self.renderer.use_hdpi_render_target()
            self.renderer.init()

        self.osd_text = OSDText(self.hdpi)
        self.line_id_renderer = self.osd_text.add_line(-0.95, 0.90, "Renderer", 18, _OSD_GREEN)
        self.line_id_framerate = self.osd_text.add_line(-0.98, -0.96, "Framerate", 14, _OSD_GREEN)

        self.resize_callback(self.buffer_w, self.buffer_h)

    def update(self, now: Optional[float] = None) -> Any:
        """Run one frame: render, refresh the status display, and return the frame."""
        frame = self.renderer.render() if self.renderer is not None else None
        if self.show_info:
            self.draw_info(now)
        return frame

    def draw_info(self, now: Optional[float] = None) -> None:
        """Update the framerate once a second and the renderer description every frame."""
        osd = self._osd
        if now is None:
            now = time.monotonic()
        if self._last is None:
            self._last = now

        if now - self._last >= 1.0:
            color = _OSD_RED if self.framecount < _SLOW_FRAMERATE else _OSD_GREEN
            osd.set_color(self.line_id_framerate, color)
            osd.set_text(self.line_id_framerate, f"Framerate: {self.framecount} fps")
            self.framecount = 0
            self._last = now
        else:
            self.framecount += 1

        info = self.renderer.info() if self.renderer is not None else "No input renderer"
        osd.set_text(self.line_id_renderer, info)

    def resize_callback(self, width: int, height: int) -> None:
        """Record a new framebuffer size and pass it on."""
        self.buffer_w, self.buffer_h = width, height
        if width > 0 and height > 0:
            self._osd.resize(width, height)
        if self.renderer is not None:
            self.renderer.resize(width, height)

    def cursor_callback(self, xpos: float, ypos: float) -> None:
        """Forward a cursor move, scaled to framebuffer pixels on high-DPI displays."""
        if self.renderer is None:
            return
        scale = 2 if self.hdpi else 1
        self.renderer.cursor_event(scale * xpos, scale * ypos)

    def scroll_callback(self, xoffset: float, yoffset: float) -> None:
        if self.renderer is not None:
            self.renderer.scroll_event(xoffset, yoffset)

    def mouse_button_callback(self, button: int, action: int, mods: int) -> None:
        if self.renderer is not None:
            self.renderer.mouse_event(button, action, mods)

    def key_callback(self, key: int, scancode: int, action: int, mods: int) -> None:
        """Escape closes the viewer, the grave accent toggles the info display."""
        if action == ACTION_PRESS:
            if key == KEY_ESCAPE:
                self.should_close = True
                return
            if key == KEY_GRAVE_ACCENT:
                self.show_info = not self.show_info
        if self.renderer is not None:
            self.renderer.keyboard_event(key, action, mods)