"""Small fixed-size vectors, matrices and quaternions for rigid-body models."""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence

_AXES = (0, 1, 2)


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, slots=True)
class Vector3d:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3d) -> Vector3d:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3d) -> Vector3d:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3d:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3d(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3d:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3d(scalar * self.x, scalar * self.y, scalar * self.z)

    def __truediv__(self, scalar: float) -> Vector3d:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("vector division by zero")
        return Vector3d(self.x / scalar, self.y / scalar, self.z / scalar)

    def __getitem__(self, index: int) -> float:
        if index not in _AXES:
            raise IndexError("Index out of range")
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"

    def dot(self, other: Vector3d) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3d) -> Vector3d:
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def mag(self) -> float:
        """Alias for :meth:`norm`."""
        return self.norm()

    def unit(self) -> Vector3d:
        """Return the vector scaled to length one; a zero vector is returned unchanged."""
        length = self.norm()
        if length == 0:
            return self
        return Vector3d(self.x / length, self.y / length, self.z / length)

    def normalized(self) -> Vector3d:
        """Return the unit vector, or the x axis with a warning when the length is zero."""
        length = self.norm()
        if length != 0:
            return Vector3d(self.x / length, self.y / length, self.z / length)
        warnings.warn("Length Is Zero!!!", RuntimeWarning, stacklevel=2)
        return Vector3d(1.0, 0.0, 0.0)


class Matrix3d:
    """An immutable 3x3 matrix."""

    __slots__ = ("_m",)

    def __init__(self, value: float = 0.0) -> None:
        v = float(value)
        self._m: tuple[tuple[float, float, float], ...] = tuple((v, v, v) for _ in _AXES)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix3d:
        data = tuple(tuple(float(v) for v in row) for row in rows)
        if len(data) != 3 or any(len(row) != 3 for row in data):
            raise ValueError("a 3x3 matrix needs three rows of three values")
        matrix = cls()
        matrix._m = data
        return matrix

    @classmethod
    def identity(cls) -> Matrix3d:
        return cls.from_rows(((1, 0, 0), (0, 1, 0), (0, 0, 1)))

    def __add__(self, other: Matrix3d) -> Matrix3d:
        if not isinstance(other, Matrix3d):
            return NotImplemented
        return Matrix3d.from_rows(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._m, other._m)
        )

    def __sub__(self, other: Matrix3d) -> Matrix3d:
        if not isinstance(other, Matrix3d):
            return NotImplemented
        return Matrix3d.from_rows(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._m, other._m)
        )

    def __mul__(self, other):
        if isinstance(other, Matrix3d):
            cols = tuple(zip(*other._m))
            return Matrix3d.from_rows(
                [sum(a * b for a, b in zip(row, col)) for col in cols] for row in self._m
            )
        if isinstance(other, Vector3d):
            return Vector3d(*(sum(a * b for a, b in zip(row, other)) for row in self._m))
        return NotImplemented

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        if i not in _AXES or j not in _AXES:
            raise IndexError("Index out of range")
        return self._m[i][j]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3d):
            return NotImplemented
        return self._m == other._m

    def __hash__(self) -> int:
        return hash(self._m)

    def __repr__(self) -> str:
        return f"Matrix3d.from_rows({self._m!r})"

    def __str__(self) -> str:
        return "\n".join(", ".join(_fmt(v) for v in row) for row in self._m)

    def transpose(self) -> Matrix3d:
        return Matrix3d.from_rows(zip(*self._m))

    def determinant(self) -> float:
        m = self._m
        return (
            m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
            - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
            + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
        )

    def inverse(self) -> Matrix3d:
        det = self.determinant()
        if det == 0:
            raise ValueError("Matrix is singular and cannot be inverted.")
        m = self._m
        return Matrix3d.from_rows(
            (
                (
                    (m[1][1] * m[2][2] - m[1][2] * m[2][1]) / det,
                    (m[0][2] * m[2][1] - m[0][1] * m[2][2]) / det,
                    (m[0][1] * m[1][2] - m[0][2] * m[1][1]) / det,
                ),
                (
                    (m[1][2] * m[2][0] - m[1][0] * m[2][2]) / det,
                    (m[0][0] * m[2][2] - m[0][2] * m[2][0]) / det,
                    (m[0][2] * m[1][0] - m[0][0] * m[1][2]) / det,
                ),
                (
                    (m[1][0] * m[2][1] - m[1][1] * m[2][0]) / det,
                    (m[0][1] * m[2][0] - m[0][0] * m[2][1]) / det,
                    (m[0][0] * m[1][1] - m[0][1] * m[1][0]) / det,
                ),
            )
        )

    def col(self, index: int) -> Vector3d:
        if index not in _AXES:
            raise IndexError("Index out of range")
        return Vector3d(*(row[index] for row in self._m))

    def rows(self) -> tuple[tuple[float, float, float], ...]:
        return self._m


@dataclass(frozen=True, slots=True)
class Quaterniond:
    """An immutable quaternion w + xi + yj + zk; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Quaterniond) -> Quaterniond:
        if not isinstance(other, Quaterniond):
            return NotImplemented
        return Quaterniond(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Quaterniond) -> Quaterniond:
        if not isinstance(other, Quaterniond):
            return NotImplemented
        return Quaterniond(self.w - other.w, self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Quaterniond) -> Quaterniond:
        if not isinstance(other, Quaterniond):
            return NotImplemented
        w, x, y, z = self.w, self.x, self.y, self.z
        return Quaterniond(
            w * other.w - x * other.x - y * other.y - z * other.z,
            w * other.x + x * other.w + y * other.z - z * other.y,
            w * other.y - x * other.z + y * other.w + z * other.x,
            w * other.z + x * other.y - y * other.x + z * other.w,
        )

    def __truediv__(self, scalar: float) -> Quaterniond:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return Quaterniond(self.w / scalar, self.x / scalar, self.y / scalar, self.z / scalar)

    def __str__(self) -> str:
        return f"[{_fmt(self.w)}, {_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)}]"

    def normalized(self) -> Quaterniond:
        norm = math.sqrt(self.w ** 2 + self.x ** 2 + self.y ** 2 + self.z ** 2)
        if norm <= 0.0:
            raise ValueError("Cannot normalize a zero quaternion")
        return Quaterniond(self.w / norm, self.x / norm, self.y / norm, self.z / norm)

    def to_rotation_matrix(self) -> Matrix3d:
        w, x, y, z = self.w, self.x, self.y, self.z
        return Matrix3d.from_rows(
            (
                (1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)),
                (2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)),
                (2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)),
            )
        )


@dataclass(frozen=True, slots=True)
class Vector2d:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __getitem__(self, index: int) -> float:
        if index not in (0, 1):
            raise IndexError("Index out of range")
        return (self.x, self.y)[index]

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"


@dataclass(frozen=True, slots=True)
class Matrix2d:
    """An immutable 2x2 matrix given row by row."""

    a11: float = 0.0
    a12: float = 0.0
    a21: float = 0.0
    a22: float = 0.0

    def __mul__(self, vec: Vector2d) -> Vector2d:
        if not isinstance(vec, Vector2d):
            return NotImplemented
        return Vector2d(
            self.a11 * vec.x + self.a12 * vec.y,
            self.a21 * vec.x + self.a22 * vec.y,
        )

    def __rmul__(self, vec: Vector2d) -> Vector2d:
        if not isinstance(vec, Vector2d):
            return NotImplemented
        return Vector2d(
            vec.x * self.a11 + vec.y * self.a21,
            vec.x * self.a12 + vec.y * self.a22,
        )

    def __str__(self) -> str:
        return f"[{_fmt(self.a11)}, {_fmt(self.a12)}]\n[{_fmt(self.a21)}, {_fmt(self.a22)}]"