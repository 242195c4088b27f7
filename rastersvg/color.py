"""RGB colors with floating-point channels in [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator
import string


def _format_component(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Color:
    """An additive RGB color; each channel is nominally in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]

    def __add__(self, other: object) -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: object) -> "Color":
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Color":
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __getitem__(self, index: int) -> float:
        return (self.r, self.g, self.b)[index]

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b))

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a ``#rrggbb`` (or ``rrggbb``) string."""
        digits = text.strip()
        if digits.startswith("#"):
            digits = digits[1:]
        if len(digits) != 6 or any(ch not in string.hexdigits for ch in digits):
            raise ValueError(f"invalid hex color: {text!r}")
        return cls.from_bytes(bytes.fromhex(digits))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Color":
        """Build a color from the first three 8-bit channel values."""
        if len(data) < 3:
            raise ValueError("need at least three channel bytes")
        return cls(data[0] / 255.0, data[1] / 255.0, data[2] / 255.0)

    def to_hex(self) -> str:
        """Return the ``#rrggbb`` encoding of this color, clamped to 8 bits."""
        channels = (round(min(1.0, max(0.0, c)) * 255) for c in self)
        return "#" + "".join(f"{c:02x}" for c in channels)

    def __str__(self) -> str:
        return "(" + ",".join(_format_component(c) for c in self) + ")"


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)