"""Software rasterizer, headless drawing renderer and viewer with PNG output."""

__version__ = "0.1.0"