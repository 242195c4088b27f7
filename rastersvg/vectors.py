"""Small 2D, 3D and 4D vector types."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, TypeVar

_V = TypeVar("_V", bound="_Vector")


class _Vector:
    """Shared component-wise arithmetic for the dataclass vectors."""

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]

    def __getitem__(self, index: int) -> float:
        return tuple(self)[index]

    def __len__(self) -> int:
        return len(fields(self))  # type: ignore[arg-type]

    def __add__(self: _V, other: object) -> _V:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))  # type: ignore[call-overload]

    def __sub__(self: _V, other: object) -> _V:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))  # type: ignore[call-overload]

    def __neg__(self: _V) -> _V:
        return type(self)(*(-a for a in self))

    def __mul__(self: _V, scalar: object) -> _V:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return type(self)(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __truediv__(self: _V, scalar: object) -> _V:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return type(self)(*(a / scalar for a in self))

    def dot(self: _V, other: _V) -> float:
        """Return the dot product with a vector of the same kind."""
        return sum(a * b for a, b in zip(self, other))

    def _text(self) -> str:
        return "(" + ",".join(f"{c:g}" for c in self) + ")"


@dataclass
class Vector2D(_Vector):
    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return self._text()


@dataclass
class Vector3D(_Vector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return self._text()


@dataclass
class Vector4D(_Vector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __str__(self) -> str:
        return self._text()

    def to_3d(self) -> Vector3D:
        """Drop the w component."""
        return Vector3D(self.x, self.y, self.z)

    def project_to_3d(self) -> Vector3D:
        """Divide x, y and z by w."""
        inv_w = 1.0 / self.w
        return Vector3D(self.x * inv_w, self.y * inv_w, self.z * inv_w)