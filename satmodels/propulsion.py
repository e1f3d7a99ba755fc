"""Propulsion system joining three xenon tanks to seven Hall thrusters."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from satmodels.hall_thruster import HallThruster
from satmodels.linalg import Matrix3d, Vector3d
from satmodels.tank import XenonTank

THRUSTER_COUNT = 7
"""Thrusters on the element: 0 centre, 1-2 outer large, 3-4 left small, 5-6 right small."""

TANK_COUNT = 3

DEFAULT_ORIENTATION = (0.0, 0.0, -1.0)

RotationLike = Union[Matrix3d, Sequence[Sequence[float]]]


class PropulsionSystem:
    """Seven thrusters fed from three tanks that are drained one after another.

    Give either no dimensions or all five of ``length``, ``height``, ``depth``,
    ``d1`` and ``d2``; with dimensions the thruster reference positions are
    laid out at once.  Every thruster points along ``(0, 0, -1)`` to start.
    """

    def __init__(
        self,
        length: Optional[float] = None,
        height: Optional[float] = None,
        depth: Optional[float] = None,
        d1: Optional[float] = None,
        d2: Optional[float] = None,
    ) -> None:
        self._total_massflow = 0.0
        self._tanks = [XenonTank() for _ in range(TANK_COUNT)]
        self._thrusters = [HallThruster() for _ in range(THRUSTER_COUNT)]

        dims = (length, height, depth, d1, d2)
        if any(v is not None for v in dims):
            if any(v is None for v in dims):
                raise TypeError("length, height, depth, d1 and d2 must be given together")
            self.set_all_thruster_ref_pos(length, height, depth, d1, d2)

        self.set_all_thruster_ref_ori(DEFAULT_ORIENTATION)
        self._available_mass = self._tank_total()

    def _tank_total(self) -> float:
        return sum(tank.mass for tank in self._tanks)

    def _thruster(self, index: int) -> HallThruster:
        if not 0 <= index < THRUSTER_COUNT:
            raise IndexError(f"thruster index {index} out of range")
        return self._thrusters[index]

    def _first_nonempty_tank(self) -> Optional[XenonTank]:
        return next((tank for tank in self._tanks if tank.mass > 0.0), None)

    @property
    def thrusters(self) -> tuple[HallThruster, ...]:
        return tuple(self._thrusters)

    @property
    def tanks(self) -> tuple[XenonTank, ...]:
        return tuple(self._tanks)

    @property
    def available_mass(self) -> float:
        """Propellant in all tanks as of the last tank update."""
        return self._available_mass

    def set_all_thruster_ref_pos(
        self, length: float, height: float, depth: float, d1: float, d2: float
    ) -> None:
        """Lay out the thrusters on the rear face; ``height`` does not affect the layout."""
        z = -depth / 2
        half = length / 2
        layout = (
            (0.0, 0.0, z),
            (half, 0.0, z),
            (-half, 0.0, z),
            (half + d1, 0.0, z),
            (half + d2, 0.0, z),
            (-half - d1, 0.0, z),
            (-half - d2, 0.0, z),
        )
        for thruster, position in zip(self._thrusters, layout):
            thruster.set_reference_pos(position)

    def set_all_thruster_ref_ori(self, orientation: Iterable[float]) -> None:
        direction = Vector3d(*(float(v) for v in orientation))
        for thruster in self._thrusters:
            thruster.set_reference_ori(direction)

    def set_all_thruster_specs(
        self, power: float, discharge_voltage: float, efficiency: float
    ) -> None:
        for thruster in self._thrusters:
            thruster.initialize_state(power, discharge_voltage, efficiency)

    def set_thruster_specs(
        self, index: int, power: float, discharge_voltage: float, efficiency: float
    ) -> None:
        self._thruster(index).initialize_state(power, discharge_voltage, efficiency)

    def update_all_pos_ori(self, position: Iterable[float], rotation: RotationLike) -> None:
        """Move every thruster with the satellite centre and rotation."""
        center = Vector3d(*(float(v) for v in position))
        matrix = rotation if isinstance(rotation, Matrix3d) else Matrix3d.from_rows(rotation)
        for thruster in self._thrusters:
            thruster.update_pos_ori(center, matrix)

    def all_force(self) -> tuple[Vector3d, Vector3d]:
        """Net force and mean point of application over the firing thrusters.

        Every thruster adds a contribution: a firing one its own force and
        position, an idle one the contribution of the last firing thruster
        before it (zero if none fired yet).  The summed position is divided by
        the number of firing thrusters, so ZeroDivisionError is raised when
        none is on.
        """
        total_force = Vector3d()
        total_pos = Vector3d()
        added_force = Vector3d()
        added_pos = Vector3d()
        firing = 0
        for thruster in self._thrusters:
            if thruster.is_on():
                added_force, added_pos = thruster.force(self._available_mass)
                firing += 1
            total_force = total_force + added_force
            total_pos = total_pos + added_pos
        return total_force, total_pos / firing

    def thruster_force(self, index: int) -> tuple[Vector3d, Vector3d]:
        """Force of one thruster and the point it acts on."""
        return self._thruster(index).force(self._available_mass)

    def turn_thruster_on(self, index: int) -> None:
        self._thruster(index).switch_on()

    def turn_all_on(self) -> None:
        for thruster in self._thrusters:
            thruster.switch_on()

    def turn_thruster_off(self, index: int) -> None:
        self._thruster(index).switch_off()

    def turn_all_off(self) -> None:
        for thruster in self._thrusters:
            thruster.switch_off()

    def total_massflow(self) -> float:
        """Sum of the mass flow of the firing thrusters, in kg/s."""
        self._total_massflow = sum(t.massflow() for t in self._thrusters if t.is_on())
        return self._total_massflow

    def current_tank_mass(self) -> float:
        """Mass of the first tank that still holds propellant, or zero."""
        tank = self._first_nonempty_tank()
        return tank.mass if tank is not None else 0.0

    def update_tank_mass(self, mass: float) -> None:
        """Write the integrated mass into the tank currently being drained."""
        tank = self._first_nonempty_tank()
        if tank is None:
            self._available_mass = 0.0
            return
        tank.mass = mass
        self._available_mass = self._tank_total()