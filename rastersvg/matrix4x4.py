"""4x4 matrices of floats."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence, Union

from .vectors import Vector4D

_Key = Union[int, tuple]


def _rows_from(data: Iterable) -> list[list[float]]:
    items = list(data)
    if len(items) == 16 and all(isinstance(v, (int, float)) for v in items):
        return [[float(v) for v in items[i * 4:(i + 1) * 4]] for i in range(4)]
    rows = [[float(v) for v in row] for row in items]
    if len(rows) != 4 or any(len(row) != 4 for row in rows):
        raise ValueError("a 4x4 matrix needs 16 values or 4 rows of 4")
    return rows


class Matrix4x4:
    """A 4x4 matrix; ``m[i, j]`` is row ``i``, column ``j`` and ``m[i]`` is column ``i``."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable | None = None) -> None:
        self._rows = [[0.0] * 4 for _ in range(4)] if rows is None else _rows_from(rows)

    def zero(self, value: float = 0.0) -> None:
        """Set every entry to ``value``."""
        self._rows = [[float(value)] * 4 for _ in range(4)]

    def det(self) -> float:
        """Return the determinant."""
        a = [row[:] for row in self._rows]
        result = 1.0
        for col in range(4):
            pivot = max(range(col, 4), key=lambda r: abs(a[r][col]))
            if a[pivot][col] == 0.0:
                return 0.0
            if pivot != col:
                a[col], a[pivot] = a[pivot], a[col]
                result = -result
            result *= a[col][col]
            for r in range(col + 1, 4):
                factor = a[r][col] / a[col][col]
                a[r] = [x - factor * y for x, y in zip(a[r], a[col])]
        return result

    def norm(self) -> float:
        """Return the Frobenius norm."""
        return math.sqrt(sum(v * v for row in self._rows for v in row))

    @classmethod
    def identity(cls) -> "Matrix4x4":
        return cls([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])

    def column(self, index: int) -> Vector4D:
        return Vector4D(*(row[index] for row in self._rows))

    def transpose(self) -> "Matrix4x4":
        return Matrix4x4([list(col) for col in zip(*self._rows)])

    def inverse(self) -> "Matrix4x4":
        """Return the inverse; raise ValueError for a singular matrix."""
        scale = max(1.0, self.norm())
        a = [row[:] + [1.0 if i == j else 0.0 for j in range(4)]
             for i, row in enumerate(self._rows)]
        for col in range(4):
            pivot = max(range(col, 4), key=lambda r: abs(a[r][col]))
            if abs(a[pivot][col]) <= 1e-12 * scale:
                raise ValueError("matrix is singular")
            a[col], a[pivot] = a[pivot], a[col]
            p = a[col][col]
            a[col] = [v / p for v in a[col]]
            for r in range(4):
                if r != col and a[r][col] != 0.0:
                    factor = a[r][col]
                    a[r] = [x - factor * y for x, y in zip(a[r], a[col])]
        return Matrix4x4([row[4:] for row in a])

    def rows(self) -> list[list[float]]:
        """Return a copy of the entries as a list of rows."""
        return [row[:] for row in self._rows]

    def __getitem__(self, key: _Key) -> float | Vector4D:
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        return self.column(key)

    def __setitem__(self, key: _Key, value) -> None:
        if isinstance(key, tuple):
            i, j = key
            self._rows[i][j] = float(value)
            return
        values = list(value)
        if len(values) != 4:
            raise ValueError("a column needs 4 values")
        for row, v in zip(self._rows, values):
            row[key] = float(v)

    def __iter__(self) -> Iterator[Vector4D]:
        return (self.column(i) for i in range(4))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._rows == other._rows

    def __add__(self, other: object) -> "Matrix4x4":
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4([[a + b for a, b in zip(r, s)] for r, s in zip(self._rows, other._rows)])

    def __neg__(self) -> "Matrix4x4":
        return Matrix4x4([[-v for v in row] for row in self._rows])

    def __sub__(self, other: object) -> "Matrix4x4":
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4([[a - b for a, b in zip(r, s)] for r, s in zip(self._rows, other._rows)])

    def __mul__(self, other: object):
        if isinstance(other, (int, float)):
            return Matrix4x4([[v * other for v in row] for row in self._rows])
        if isinstance(other, Matrix4x4):
            cols = list(zip(*other._rows))
            return Matrix4x4([[sum(a * b for a, b in zip(row, col)) for col in cols]
                              for row in self._rows])
        if isinstance(other, Vector4D):
            return Vector4D(*(sum(a * b for a, b in zip(row, other)) for row in self._rows))
        return NotImplemented

    def __rmul__(self, other: object) -> "Matrix4x4":
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, value: object) -> "Matrix4x4":
        if not isinstance(value, (int, float)):
            return NotImplemented
        return Matrix4x4([[v / value for v in row] for row in self._rows])

    def __str__(self) -> str:
        return "\n".join("[ " + " ".join(f"{v:g}" for v in row) + " ]" for row in self._rows)

    def __repr__(self) -> str:
        return f"Matrix4x4({self._rows!r})"


def outer(u: Sequence[float], v: Sequence[float]) -> Matrix4x4:
    """Return the outer product ``u v^T``."""
    return Matrix4x4([[a * b for b in v] for a in u])