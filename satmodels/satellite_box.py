"""Satellite modelled as a uniform cube: corner points, mass properties and inertia."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from satmodels.linalg import Matrix3d, Vector3d

RotationLike = Union[Matrix3d, Sequence[Sequence[float]]]

CORNER_COUNT = 8


@dataclass(frozen=True)
class Point:
    """A point in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


def _corner_signs(index: int) -> tuple[int, int, int]:
    sx = (-1) ** math.ceil(index / 2.0)
    sy = (-1) ** math.floor(index / 2.0)
    sz = (-1) ** math.ceil((index + 1) / 4.0)
    return sx, sy, sz


class SatelliteBox:
    """A cube of uniform density described by its mass and side length.

    The corner points start at the origin until :meth:`initialize_points`
    lays them out around a centre.  The inertia tensor is computed on demand
    by :meth:`calc_inertia` and stays zero until then.
    """

    def __init__(self, mass: float = 400.0, side_length: float = 0.0) -> None:
        self.mass = mass
        self.side_length = side_length
        self._corners = [Vector3d() for _ in range(CORNER_COUNT)]
        self._inertia = Matrix3d()
        self._inverse_inertia = Matrix3d()

    def initialize(self, mass: float, side_length: float) -> None:
        """Set the mass and side length."""
        self.mass = mass
        self.side_length = side_length

    @property
    def volume(self) -> float:
        return self.side_length ** 3

    @property
    def density(self) -> float:
        """Mass per volume; zero while the box has no volume."""
        volume = self.volume
        if volume == 0:
            return 0.0
        return self.mass / volume

    def initialize_points(self, x: float, y: float, z: float) -> None:
        """Place the eight corners around the centre ``(x, y, z)``."""
        half = self.side_length / 2.0
        center = Vector3d(x, y, z)
        self._corners = [
            center + Vector3d(*(sign * half for sign in _corner_signs(i)))
            for i in range(CORNER_COUNT)
        ]

    def state_update(self, center: Iterable[float], orientation: RotationLike) -> None:
        """Move every corner to ``center + R * (center - corner)``."""
        c = Vector3d(*(float(v) for v in center))
        rotation = (
            orientation if isinstance(orientation, Matrix3d) else Matrix3d.from_rows(orientation)
        )
        self._corners = [c + rotation * (c - corner) for corner in self._corners]

    def calc_inertia(self) -> None:
        """Compute the inertia tensor of the cube and its inverse.

        Raises ValueError when the side length or mass is zero, since the
        tensor is then singular.
        """
        moment = 1.0 / 12.0 * self.mass * (self.side_length ** 2 + self.side_length ** 2)
        inertia = Matrix3d.from_rows(((moment, 0, 0), (0, moment, 0), (0, 0, moment)))
        inverse = inertia.inverse()
        self._inertia = inertia
        self._inverse_inertia = inverse

    def inertia(self) -> Matrix3d:
        return self._inertia

    def inverse_inertia(self) -> Matrix3d:
        return self._inverse_inertia

    def points(self) -> list[Point]:
        """The eight corner points."""
        return [Point(c.x, c.y, c.z) for c in self._corners]