import math

import pytest

from satmodels.linalg import Matrix3d, Quaterniond, Vector3d
from satmodels.rigid_body import RigidBody


def _flat(matrix):
    return [v for row in matrix.rows() for v in row]


def test_default_body_state():
    body = RigidBody()
    assert tuple(body.position) == (0.0, 0.0, 0.0)
    assert body.quaternion == Quaterniond(1.0, 0.0, 0.0, 0.0)
    assert body.rotation == Matrix3d.identity()
    assert body.mass == 400.0


def test_angular_momentum_gives_angular_velocity():
    body = RigidBody()
    body.update_angular_momentum(9000, 1000, -6000)
    # cube of 400 kg and side 15 m: moment of inertia 15000
    assert tuple(body.angular_velocity) == pytest.approx((0.6, 1000 / 15000, -0.4))
    assert tuple(body.angular_momentum) == (9000, 1000, -6000)


def test_quaternion_unchanged_after_momentum():
    body = RigidBody()
    body.update_angular_momentum(9000, 1000, -6000)
    assert body.quaternion == Quaterniond(1.0, 0.0, 0.0, 0.0)


def test_rotate_by_angular_speed_is_proper_rotation():
    body = RigidBody()
    body.update_angular_momentum(9000, 1000, -6000)
    theta = body.angular_speed()
    assert theta == pytest.approx(math.sqrt(0.36 + (1 / 15) ** 2 + 0.16))
    body.rotate_by_angle(theta)
    r = body.rotation
    assert r.determinant() == pytest.approx(1.0)
    assert _flat(r * r.transpose()) == pytest.approx(_flat(Matrix3d.identity()), abs=1e-12)
    axis = Vector3d(9000, 1000, -6000).unit()
    assert tuple(r * axis) == pytest.approx(tuple(axis))
    trace = r[0, 0] + r[1, 1] + r[2, 2]
    assert trace == pytest.approx(1 + 2 * math.cos(theta))
    assert body.quaternion == Quaterniond()


def test_rotate_quarter_turn_about_z():
    body = RigidBody()
    body.update_angular_momentum(0, 0, 5)
    body.rotate_by_angle(math.pi / 2)
    assert _flat(body.rotation) == pytest.approx([0, -1, 0, 1, 0, 0, 0, 0, 1], abs=1e-12)


def test_motion_constructor_keeps_inertia_in_place_of_inverse():
    body = RigidBody((1, 2, 3), (4, 5, 6), (7, 8, 9))
    assert tuple(body.position) == (1, 2, 3)
    assert tuple(body.velocity) == (4, 5, 6)
    assert tuple(body.acceleration) == (7, 8, 9)
    body.update_angular_momentum(1, 0, 0)
    assert tuple(body.angular_velocity) == pytest.approx((15000.0, 0.0, 0.0))


def test_partial_motion_arguments_rejected():
    with pytest.raises(TypeError):
        RigidBody((1, 2, 3))


def test_initialize_body_sets_mass_and_inertia():
    body = RigidBody()
    body.initialize_body(100, 2)
    assert body.mass == 100
    body.update_angular_momentum(1, 0, 0)
    assert tuple(body.angular_velocity) == pytest.approx((0.015, 0.0, 0.0))


def test_initialize_body_singular_raises():
    body = RigidBody()
    with pytest.raises(ValueError):
        body.initialize_body(100, 0)


def test_initialize_motion():
    body = RigidBody()
    body.initialize_motion([1, 1, 1], [2, 2, 2], [3, 3, 3])
    assert tuple(body.position) == (1, 1, 1)
    assert tuple(body.velocity) == (2, 2, 2)
    assert tuple(body.acceleration) == (3, 3, 3)


def test_state_deriv_accel():
    body = RigidBody()
    body.update_force(800, 0, -400)
    assert tuple(body.state_deriv_accel()) == pytest.approx((2.0, 0.0, -1.0))
    assert tuple(body.acceleration) == pytest.approx((2.0, 0.0, -1.0))


def test_state_deriv_angular_momentum_is_torque():
    body = RigidBody()
    body.update_torque(1, -2, 3)
    assert tuple(body.state_deriv_angular_momentum()) == (1, -2, 3)


def test_state_deriv_alpha():
    body = RigidBody()
    body.update_torque(15000, 0, 30000)
    body.update_angular_velocity(1, 2, 3)
    assert tuple(body.state_deriv_alpha()) == pytest.approx((1.0, 0.0, 2.0))


def test_state_deriv_cross():
    body = RigidBody()
    body.update_angular_velocity(0, 0, 1)
    assert _flat(body.state_deriv_cross()) == pytest.approx([0, -1, 0, 1, 0, 0, 0, 0, 0])


def test_state_deriv_quaternion():
    body = RigidBody()
    body.update_angular_velocity(2, 4, 6)
    assert body.state_deriv_quaternion() == Quaterniond(0.0, 1.0, 2.0, 3.0)


def test_update_quaternion_normalises():
    body = RigidBody()
    body.update_quaternion((2, 0, 0, 0))
    assert body.quaternion == Quaterniond(1.0, 0.0, 0.0, 0.0)
    body.update_quaternion((0, 0, 0, 1))
    assert _flat(body.rotation) == pytest.approx([-1, 0, 0, 0, -1, 0, 0, 0, 1])


def test_update_quaternion_zero_raises():
    body = RigidBody()
    with pytest.raises(ValueError):
        body.update_quaternion((0, 0, 0, 0))


def test_update_rotation_adds():
    body = RigidBody()
    body.update_rotation(((1, 0, 0), (0, 1, 0), (0, 0, 1)))
    assert _flat(body.rotation) == [2, 0, 0, 0, 2, 0, 0, 0, 2]


def test_setters():
    body = RigidBody()
    body.update_velocity(1, 2, 3)
    body.update_position(4, 5, 6)
    body.update_angular_velocity(3, 4, 0)
    assert tuple(body.velocity) == (1, 2, 3)
    assert tuple(body.position) == (4, 5, 6)
    assert body.angular_speed() == pytest.approx(5.0)