"""Accumulator for the net force and torque acting on a body."""

from __future__ import annotations

from typing import Iterable

from satmodels.linalg import Vector3d


class ForceTorqueTracker:
    """Sums forces applied at body-relative positions, and pure torques."""

    def __init__(self) -> None:
        self._force = Vector3d()
        self._torque = Vector3d()

    def add_force(self, force: Iterable[float], position: Iterable[float]) -> None:
        """Add a force applied at ``position``; its torque is ``force x position``."""
        f = Vector3d(*force)
        r = Vector3d(*position)
        self._force = self._force + f
        self._torque = self._torque + f.cross(r)

    def add_torque(self, torque: Iterable[float]) -> None:
        self._torque = self._torque + Vector3d(*torque)

    def net_force(self) -> Vector3d:
        return self._force

    def net_torque(self) -> Vector3d:
        return self._torque

    def reset(self) -> None:
        self._force = Vector3d()
        self._torque = Vector3d()