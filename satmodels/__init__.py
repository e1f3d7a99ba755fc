"""Physical models of satellite subsystems for step-wise simulation."""

__version__ = "0.1.0"

__all__ = [
    "linalg",
    "functions",
    "force_torque",
    "accelerometer",
    "gyroscope",
    "tank",
    "hall_thruster",
    "propulsion",
    "satellite_box",
    "rigid_body",
]