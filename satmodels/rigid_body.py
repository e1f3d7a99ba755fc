"""Rigid-body translation and rotation for a cube-shaped satellite."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Union

from satmodels.linalg import Matrix3d, Quaterniond, Vector3d
from satmodels.satellite_box import SatelliteBox

RotationLike = Union[Matrix3d, Sequence[Sequence[float]]]

DEFAULT_MASS = 400.0
DEFAULT_SIDE_LENGTH = 15.0


def _as_vector(values: Iterable[float]) -> Vector3d:
    if isinstance(values, Vector3d):
        return values
    return Vector3d(*(float(v) for v in values))


def _as_matrix(rotation: RotationLike) -> Matrix3d:
    if isinstance(rotation, Matrix3d):
        return rotation
    return Matrix3d.from_rows(rotation)


def _columns_to_matrix(cx: Vector3d, cy: Vector3d, cz: Vector3d) -> Matrix3d:
    return Matrix3d.from_rows(zip(cx, cy, cz))


class RigidBody:
    """Linear and angular state of a satellite body.

    The derivative methods return values meant for an outside integrator,
    which writes the integrated state back through the ``update_*`` methods.

    With no arguments the body starts at rest at the origin.  Given all of
    ``position``, ``velocity`` and ``acceleration`` the motion starts there,
    and the body keeps the inertia tensor itself where the inverse inertia
    would otherwise be used, until :meth:`initialize_body` is called.
    """

    def __init__(
        self,
        position: Optional[Iterable[float]] = None,
        velocity: Optional[Iterable[float]] = None,
        acceleration: Optional[Iterable[float]] = None,
    ) -> None:
        motion = (position, velocity, acceleration)
        given = any(v is not None for v in motion)
        if given and any(v is None for v in motion):
            raise TypeError("position, velocity and acceleration must be given together")

        self._position = Vector3d()
        self._velocity = Vector3d()
        self._acceleration = Vector3d()
        if given:
            self.initialize_motion(position, velocity, acceleration)
        self._force = Vector3d()

        self._quaternion = Quaterniond()
        self._rotation = self._quaternion.to_rotation_matrix()
        self._angular_velocity = Vector3d()
        self._angular_momentum = Vector3d()
        self._alpha = Vector3d()
        self._d_angular_momentum = Vector3d()
        self._torque = Vector3d()

        self._box = SatelliteBox()
        self._box.initialize(DEFAULT_MASS, DEFAULT_SIDE_LENGTH)
        self._box.initialize_points(*self._position)
        self._box.calc_inertia()
        self._inv_inertia = self._box.inertia() if given else self._box.inverse_inertia()

    def initialize_body(self, mass: float, side_length: float) -> None:
        """Rebuild the body as a cube of ``mass`` and ``side_length``.

        Raises ValueError when the inertia tensor would be singular.
        """
        self._box.initialize(mass, side_length)
        self._box.initialize_points(*self._position)
        self._box.calc_inertia()
        self._inv_inertia = self._box.inverse_inertia()

    def initialize_motion(
        self,
        position: Iterable[float],
        velocity: Iterable[float],
        acceleration: Iterable[float],
    ) -> None:
        self._position = _as_vector(position)
        self._velocity = _as_vector(velocity)
        self._acceleration = _as_vector(acceleration)

    @property
    def box(self) -> SatelliteBox:
        return self._box

    @property
    def mass(self) -> float:
        return self._box.mass

    @property
    def position(self) -> Vector3d:
        return self._position

    @property
    def velocity(self) -> Vector3d:
        return self._velocity

    @property
    def acceleration(self) -> Vector3d:
        """Linear acceleration as last computed or set."""
        return self._acceleration

    @property
    def force(self) -> Vector3d:
        return self._force

    @property
    def torque(self) -> Vector3d:
        return self._torque

    @property
    def angular_momentum(self) -> Vector3d:
        return self._angular_momentum

    @property
    def angular_velocity(self) -> Vector3d:
        return self._angular_velocity

    @property
    def angular_acceleration(self) -> Vector3d:
        """Angular acceleration as last computed."""
        return self._alpha

    @property
    def rotation(self) -> Matrix3d:
        return self._rotation

    @property
    def quaternion(self) -> Quaterniond:
        return self._quaternion

    @property
    def inverse_inertia(self) -> Matrix3d:
        """The matrix used as inverse inertia in the rotational equations."""
        return self._inv_inertia

    def update_force(self, x: float, y: float, z: float) -> None:
        self._force = Vector3d(x, y, z)

    def update_torque(self, x: float, y: float, z: float) -> None:
        self._torque = Vector3d(x, y, z)

    def update_angular_momentum(self, x: float, y: float, z: float) -> None:
        """Set the angular momentum and derive ``w = R * I0^-1 * R^T * L``."""
        self._angular_momentum = Vector3d(x, y, z)
        r = self._rotation
        self._angular_velocity = r * self._inv_inertia * r.transpose() * self._angular_momentum

    def update_angular_velocity(self, x: float, y: float, z: float) -> None:
        self._angular_velocity = Vector3d(x, y, z)

    def update_velocity(self, x: float, y: float, z: float) -> None:
        self._velocity = Vector3d(x, y, z)

    def update_position(self, x: float, y: float, z: float) -> None:
        self._position = Vector3d(x, y, z)

    def update_rotation(self, rotation: RotationLike) -> None:
        """Add ``rotation`` to the current rotation matrix."""
        self._rotation = self._rotation + _as_matrix(rotation)

    def update_quaternion(self, quaternion: Union[Quaterniond, Sequence[float]]) -> None:
        """Set the orientation from ``(w, x, y, z)``, normalised; raises ValueError for zero."""
        if not isinstance(quaternion, Quaterniond):
            quaternion = Quaterniond(*(float(v) for v in quaternion))
        self._quaternion = quaternion.normalized()
        self._rotation = self._quaternion.to_rotation_matrix()

    def rotate_by_angle(self, angle: float) -> None:
        """Turn the rotation matrix by ``angle`` about the angular-momentum axis.

        The quaternion orientation is left unchanged.
        """
        axis = self._angular_momentum.unit()
        half = angle / 2
        r = Quaterniond(math.cos(half), *(math.sin(half) * c for c in axis))
        r_inv = Quaterniond(math.cos(half), *(math.sin(-half) * c for c in axis))

        def turn(column: Vector3d) -> Vector3d:
            q = r * Quaterniond(0.0, *column) * r_inv
            return Vector3d(q.x, q.y, q.z)

        self._rotation = _columns_to_matrix(*(turn(self._rotation.col(i)) for i in range(3)))

    def state_deriv_accel(self) -> Vector3d:
        """Linear acceleration ``F / m``."""
        self._acceleration = self._force / self._box.mass
        return self._acceleration

    def state_deriv_angular_momentum(self) -> Vector3d:
        """Rate of change of angular momentum, equal to the torque."""
        self._d_angular_momentum = self._torque
        return self._d_angular_momentum

    def state_deriv_alpha(self) -> Vector3d:
        """Angular acceleration ``I^-1 * (T - w x (I^-1 * w))``."""
        w = self._angular_velocity
        inv = self._inv_inertia
        self._alpha = inv * (self._torque - w.cross(inv * w))
        return self._alpha

    def state_deriv_cross(self) -> Matrix3d:
        """Rate of change of the rotation matrix: each column is ``w x column``."""
        w = self._angular_velocity
        return _columns_to_matrix(*(w.cross(self._rotation.col(i)) for i in range(3)))

    def state_deriv_quaternion(self) -> Quaterniond:
        """Half the pure quaternion of the angular velocity, ``(0, w) / 2``."""
        w = self._angular_velocity
        return Quaterniond(0.0, 0.5 * w.x, 0.5 * w.y, 0.5 * w.z)

    def angular_speed(self) -> float:
        """Magnitude of the angular velocity."""
        return self._angular_velocity.norm()