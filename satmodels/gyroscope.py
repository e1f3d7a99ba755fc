"""Single-axis vibrating MEMS gyroscope based on the Coriolis effect."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Gyroscope:
    """Proof mass driven along one axis and sensed along another.

    Drive axis: ``m*a_x + c*v_x + k*x = F_d``.
    Sense axis: ``m*a_y + c*v_y + k*y = 2*m*omega*v_x``.

    The position and velocity attributes are meant to be written back by an
    outside integrator after each step.
    """

    mass: float = 0.01
    spring_constant: float = 100.0
    damping: float = 0.005
    drive_force: float = 1.0
    drive_position: float = field(default=0.0, init=False)
    drive_velocity: float = field(default=0.0, init=False)
    sense_position: float = field(default=0.0, init=False)
    sense_velocity: float = field(default=0.0, init=False)
    drive_accel: float = field(default=0.0, init=False)
    sense_accel: float = field(default=0.0, init=False)

    def initialize(
        self, mass: float, spring_constant: float, damping: float, drive_force: float
    ) -> None:
        """Set the parameters and put the proof mass back at rest."""
        self.mass = mass
        self.spring_constant = spring_constant
        self.damping = damping
        self.drive_force = drive_force
        self.drive_position = 0.0
        self.drive_velocity = 0.0
        self.sense_position = 0.0
        self.sense_velocity = 0.0

    def drive_acceleration(self) -> float:
        """Acceleration along the drive axis; it is also stored."""
        self.drive_accel = (
            self.drive_force
            - self.damping * self.drive_velocity
            - self.spring_constant * self.drive_position
        ) / self.mass
        return self.drive_accel

    def sense_acceleration(self, omega: float) -> float:
        """Acceleration along the sense axis for angular rate ``omega``; it is also stored."""
        self.sense_accel = (
            2 * self.mass * omega * self.drive_velocity
            - self.damping * self.sense_velocity
            - self.spring_constant * self.sense_position
        ) / self.mass
        return self.sense_accel

    def angular_velocity(self) -> float:
        """Angular rate recovered from the sense-axis state.

        Raises ZeroDivisionError while the drive velocity is zero.
        """
        return (
            self.mass * self.sense_accel
            + self.damping * self.sense_velocity
            + self.spring_constant * self.sense_position
        ) / (2 * self.mass * self.drive_velocity)