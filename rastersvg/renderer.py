"""Abstract interface for renderers driven by a viewer."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Renderer(ABC):
    """A user-space renderer; the viewer forwards drawing and input events to it."""

    use_hdpi: bool = False

    @abstractmethod
    def init(self) -> None:
        """Prepare the renderer before its first use."""

    @abstractmethod
    def render(self) -> None:
        """Draw one frame."""

    @abstractmethod
    def resize(self, width: int, height: int) -> None:
        """Respond to a change of the drawing buffer size."""

    @abstractmethod
    def name(self) -> str:
        """Return a short name for the renderer."""

    @abstractmethod
    def info(self) -> str:
        """Return a one-line description for the on-screen display."""

    def cursor_event(self, x: float, y: float) -> None:
        """Respond to a cursor move in screen coordinates."""

    def scroll_event(self, offset_x: float, offset_y: float) -> None:
        """Respond to a scroll wheel event."""

    def mouse_event(self, key: int, event: int, mods: int) -> None:
        """Respond to a mouse button event."""

    def keyboard_event(self, key: int, event: int, mods: int) -> None:
        """Respond to a key event."""

    def use_hdpi_render_target(self) -> None:
        """Mark the render target as high-DPI."""
        self.use_hdpi = True