# satmodels

Small, dependency-free models of satellite subsystems, meant to be stepped by
an integrator that you supply. Each model exposes *state derivatives* for the
integrator to consume and *update* methods (or plain attributes) that take the
integrated state back in.

## Contents

| Module | What it holds |
| --- | --- |
| `satmodels.linalg` | immutable `Vector3d`, `Matrix3d`, `Quaterniond`, `Vector2d`, `Matrix2d` |
| `satmodels.functions` | `grav_force_magnitude`, `get_unit_dir`, `unit_dir`, `collision_ray_sphere` |
| `satmodels.force_torque` | `ForceTorqueTracker`: sums forces and torques |
| `satmodels.accelerometer` | `Accelerometer`: single-axis spring–mass–damper sensor |
| `satmodels.gyroscope` | `Gyroscope`: single-axis vibrating Coriolis gyroscope |
| `satmodels.tank` | `XenonTank`: propellant mass, 1500 kg by default |
| `satmodels.hall_thruster` | `HallThruster`: thrust, mass flow and global force of one thruster |
| `satmodels.propulsion` | `PropulsionSystem`: seven thrusters fed from three tanks |
| `satmodels.satellite_box` | `SatelliteBox`, `Point`: cube corners, volume, density and inertia |
| `satmodels.rigid_body` | `RigidBody`: linear and angular motion of a cube-shaped body |

## Installation

```
pip install .
```

## Examples

Accumulating forces applied at offsets from the centre of mass. The torque of
each force is taken as `force x position`:

```python
from satmodels.force_torque import ForceTorqueTracker

tracker = ForceTorqueTracker()
tracker.add_force((2, 1, 0), (0, 2, 0))
tracker.add_force((2, 4, 0), (0, 1, 1))
tracker.add_torque((0, 0, 1))
print(tracker.net_force(), tracker.net_torque())
tracker.reset()
```

Stepping a gyroscope with a simple integrator of your own:

```python
from satmodels.gyroscope import Gyroscope

gyro = Gyroscope(mass=10, spring_constant=1, damping=5, drive_force=10)
dt = 0.01
for _ in range(100):
    a_d = gyro.drive_acceleration()
    a_s = gyro.sense_acceleration(omega=134)
    gyro.drive_velocity += a_d * dt
    gyro.sense_velocity += a_s * dt
    gyro.drive_position += gyro.drive_velocity * dt
    gyro.sense_position += gyro.sense_velocity * dt
print(gyro.angular_velocity())
```

`Gyroscope.angular_velocity()` raises `ZeroDivisionError` while the drive
velocity is zero.

Driving the propulsion system:

```python
from satmodels.propulsion import PropulsionSystem

system = PropulsionSystem()
system.set_all_thruster_ref_pos(10, 10, 20, 5, 4)
system.set_all_thruster_ref_ori((0, 0, -1))
system.set_all_thruster_specs(6000, 700, 0.57)
system.update_all_pos_ori((0, 0, 0), [[0.707, -0.707, 0], [0.707, 0.707, 0], [0, 0, 1]])
system.turn_all_on()
force, position = system.all_force()
print(system.total_massflow())
```

`all_force()` divides the summed point of application by the number of firing
thrusters, so it raises `ZeroDivisionError` when none is on. Thruster indices
run from 0 to 6; others raise `IndexError`. The tanks are drained one after
another: `current_tank_mass()` and `update_tank_mass()` work on the first tank
that still holds propellant.

Rotating a rigid body about its angular-momentum axis:

```python
from satmodels.rigid_body import RigidBody

body = RigidBody()
body.update_angular_momentum(9000, 1000, -6000)
body.rotate_by_angle(body.angular_speed())
print(body.rotation)
```

A `RigidBody` starts as a 400 kg cube with 15 m sides; call
`initialize_body(mass, side_length)` to change that.

## Behaviour worth knowing

- `get_unit_dir(p1, p2)` takes the z component as `p2[2] - p1[1]`, and returns
  a zero vector unchanged; `unit_dir` uses the true difference.
- `collision_ray_sphere` uses the radius unsquared in its discriminant.
- `Vector3d.normalized()` returns the x axis and issues a `RuntimeWarning` for
  a zero vector; `Vector3d.unit()` returns the zero vector unchanged.
- `Matrix3d.inverse()` raises `ValueError` for a singular matrix, and
  `Quaterniond.normalized()` raises `ValueError` for a zero quaternion.
- `HallThruster.force()` returns zeros when the thruster is off or no
  propellant is left, and then drops the mass flow to zero until the specs are
  set again.
- `RigidBody` built with `position`, `velocity` and `acceleration` keeps the
  inertia tensor itself where the inverse inertia would otherwise be used,
  until `initialize_body` is called.
- `RigidBody.update_rotation` adds the given matrix to the current rotation.

## What the package does not do

It has no command-line program, no built-in integrator or simulation loop, and
writes no output files or plots. You step the models and record results
yourself.

## Running the tests

```
pip install .[test]
pytest
```