"""Single-axis MEMS accelerometer modelled as a spring-mass-damper."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Accelerometer:
    """Proof mass on a spring with damping: ``m*a + c*v + k*x = F``.

    ``position`` and ``velocity`` hold the proof mass state and are meant to be
    written back by an outside integrator after each step.  ``accel`` is the
    most recently computed proof-mass acceleration.
    """

    mass: float = 0.01
    spring_constant: float = 100.0
    sensitivity: float = 10.0
    damping: float = 0.005
    offset: float = 0.0
    position: float = 0.0
    velocity: float = 0.0
    accel: float = 9.81

    def initialize(
        self,
        mass: float,
        spring_constant: float,
        sensitivity: float,
        damping: float,
        offset: float,
        position: float,
        velocity: float,
        acceleration: float,
    ) -> None:
        """Reset every parameter and the proof-mass state."""
        self.mass = mass
        self.spring_constant = spring_constant
        self.sensitivity = sensitivity
        self.damping = damping
        self.offset = offset
        self.position = position
        self.velocity = velocity
        self.accel = acceleration

    @property
    def natural_frequency(self) -> float:
        """Resonant frequency ``sqrt(k/m)``."""
        return math.sqrt(self.spring_constant / self.mass)

    @property
    def damping_ratio(self) -> float:
        """Damping ratio ``c / (2*sqrt(k*m))``."""
        return self.damping / (2 * math.sqrt(self.spring_constant * self.mass))

    def state_deriv_accel(self, external_force: float, velocity: float, position: float) -> float:
        """Proof-mass acceleration for the given force and state; it is also stored."""
        self.accel = (
            external_force - self.damping * velocity - self.spring_constant * position
        ) / self.mass
        return self.accel

    def acceleration(self, mass: float) -> float:
        """Acceleration of a body of ``mass`` that would produce the stored spring state."""
        return (
            self.accel * self.mass
            + self.damping * self.velocity
            + self.spring_constant * self.position
        ) / mass

    def signal(self) -> float:
        """Output signal ``k_a * a + w + d``."""
        return self.sensitivity * self.accel + self.natural_frequency + self.offset