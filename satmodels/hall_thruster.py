"""Simplified Hall-effect thruster producing a force in the global frame."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Union

from satmodels.linalg import Matrix3d, Vector3d

ION_CHARGE = 1.602e-19
"""Charge of a singly ionised xenon atom, in coulombs."""

ION_MASS = 2.18e-25
"""Mass of a xenon ion, in kilograms."""

RotationLike = Union[Matrix3d, Sequence[Sequence[float]]]


def _as_matrix(rotation: RotationLike) -> Matrix3d:
    if isinstance(rotation, Matrix3d):
        return rotation
    return Matrix3d.from_rows(rotation)


def _as_vector(values: Iterable[float]) -> Vector3d:
    if isinstance(values, Vector3d):
        return values
    return Vector3d(*(float(v) for v in values))


class HallThruster:
    """A thruster mounted on a satellite at a fixed reference position and direction.

    Set the reference position and orientation once, then update the global
    position and orientation from the satellite state on every step before
    asking for the force.
    """

    def __init__(
        self,
        power: Optional[float] = None,
        discharge_voltage: Optional[float] = None,
        efficiency: Optional[float] = None,
    ) -> None:
        self._power = 0.0
        self._discharge_voltage = 0.0
        self._efficiency = 0.0
        self._power_out = 0.0
        self._ion_velocity = 0.0
        self._thrust = 0.0
        self._massflow = 0.0
        self._on = False

        self._ref_pos = Vector3d()
        self._ref_ori = Vector3d()
        self._pos = Vector3d()
        self._ori = Vector3d()
        self._rotation = Matrix3d.identity()

        specs = (power, discharge_voltage, efficiency)
        if all(v is None for v in specs):
            return
        if any(v is None for v in specs):
            raise TypeError("power, discharge_voltage and efficiency must be given together")
        self.initialize_state(power, discharge_voltage, efficiency)

    def initialize_state(
        self, power: float, discharge_voltage: float, efficiency: float
    ) -> None:
        """Set the electrical specs and recompute thrust and mass flow."""
        self._discharge_voltage = discharge_voltage
        self._power = power
        self._efficiency = efficiency

        self._power_out = power * efficiency
        self._ion_velocity = math.sqrt((2.0 * ION_CHARGE * discharge_voltage) / ION_MASS)
        self._thrust = (2 * self._power_out) / self._ion_velocity
        self._massflow = self._thrust / self._ion_velocity

    @property
    def thrust(self) -> float:
        """Thrust magnitude in newtons for the current specs."""
        return self._thrust

    def set_reference_pos(self, position: Iterable[float]) -> None:
        """Position relative to the satellite centre; also becomes the global position."""
        self._ref_pos = _as_vector(position)
        self._pos = self._ref_pos

    def set_reference_ori(self, orientation: Iterable[float]) -> None:
        """Direction relative to the satellite; also becomes the global orientation."""
        self._ref_ori = _as_vector(orientation)
        self._ori = self._ref_ori

    def update_rotation(self, rotation: RotationLike) -> None:
        """Store the satellite rotation matrix for later updates."""
        self._rotation = _as_matrix(rotation)

    def update_pos(
        self, center: Iterable[float], rotation: Optional[RotationLike] = None
    ) -> None:
        """Move the thruster with the satellite centre, using ``rotation`` or the stored one."""
        if rotation is not None:
            self._rotation = _as_matrix(rotation)
        self._pos = _as_vector(center) + self._rotation * self._ref_pos

    def update_ori(self, rotation: Optional[RotationLike] = None) -> None:
        """Turn the thruster direction by the inverse of ``rotation``.

        Without a rotation the stored matrix is only checked for invertibility
        and the orientation is left as it is.
        """
        if rotation is None:
            self._rotation.inverse()
            return
        self._rotation = _as_matrix(rotation)
        self._ori = self._rotation.inverse() * self._ref_ori

    def update_pos_ori(
        self, center: Iterable[float], rotation: Optional[RotationLike] = None
    ) -> None:
        """Update position and orientation together."""
        if rotation is not None:
            self._rotation = _as_matrix(rotation)
        self._pos = _as_vector(center) + self._rotation * self._ref_pos
        self._ori = self._rotation.inverse() * self._ref_ori

    def position(self) -> Vector3d:
        return self._pos

    def orientation(self) -> Vector3d:
        return self._ori

    def force(self, available_mass: float) -> tuple[Vector3d, Vector3d]:
        """Return the global force and the point it acts on.

        Both are zero when the thruster is off or no propellant is left; in
        that case the mass flow, output power and ion velocity drop to zero
        until the specs are set again.
        """
        reference_force = self._thrust * self._ref_ori
        global_force = self._rotation.inverse() * reference_force

        if available_mass <= 0 or not self._on:
            self._massflow = 0.0
            self._power_out = 0.0
            self._ion_velocity = 0.0
            return Vector3d(), Vector3d()
        return global_force, self._pos

    def switch_on(self) -> None:
        self._on = True

    def switch_off(self) -> None:
        self._on = False

    def is_on(self) -> bool:
        return self._on

    def massflow(self) -> float:
        """Propellant mass flow rate in kg/s."""
        return self._massflow