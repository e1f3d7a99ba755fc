import math

import pytest

from satmodels.accelerometer import Accelerometer


def _trapezoid(value, before, after, dt):
    return value + 0.5 * (before + after) * dt


def test_default_parameters():
    accel = Accelerometer()
    assert accel.mass == 0.01
    assert accel.spring_constant == 100.0
    assert accel.accel == 9.81
    assert accel.natural_frequency == pytest.approx(100.0)
    assert accel.damping_ratio == pytest.approx(0.0025)


def test_default_signal():
    accel = Accelerometer()
    assert accel.signal() == pytest.approx(10 * 9.81 + 100.0)


def test_state_derivative_from_rest():
    accel = Accelerometer(10.0, 10.0, 3.0, 100, 0.0, 0.0, 0.0, 0.0)
    assert accel.state_deriv_accel(12, 0.0, 0.0) == pytest.approx(1.2)
    assert accel.accel == pytest.approx(1.2)
    assert accel.acceleration(1) == pytest.approx(12.0)


def test_state_derivative_uses_arguments_not_stored_state():
    accel = Accelerometer(2.0, 4.0, 1.0, 3.0, 0.0, 100.0, 100.0, 0.0)
    assert accel.state_deriv_accel(10.0, 1.0, 2.0) == pytest.approx((10 - 3 - 8) / 2)


def test_acceleration_recovers_applied_force():
    accel = Accelerometer(10.0, 10.0, 3.0, 100, 0.0, 0.0, 0.0, 0.0)
    accel.position = 0.3
    accel.velocity = -0.05
    accel.state_deriv_accel(12, accel.velocity, accel.position)
    assert accel.acceleration(4.34) == pytest.approx(12 / 4.34)


def test_initialize_resets_everything():
    accel = Accelerometer()
    accel.initialize(2.0, 8.0, 5.0, 1.0, 0.5, 1.0, 2.0, 3.0)
    assert accel == Accelerometer(2.0, 8.0, 5.0, 1.0, 0.5, 1.0, 2.0, 3.0)
    assert accel.natural_frequency == pytest.approx(2.0)
    assert accel.signal() == pytest.approx(5.0 * 3.0 + 2.0 + 0.5)


def test_simulation_loop_follows_force_profile():
    accel = Accelerometer(10.0, 10.0, 3.0, 100, 0.0, 0.0, 0.0, 0.0)
    v = x = 0.0
    spring_accel = 0.0
    dt = 0.01
    force = 12.0
    state_at_four = None
    t = 0.0
    first_step = None
    while t < 10:
        if t > 4:
            force = 0.0
            if state_at_four is None:
                state_at_four = (x, v)
        if t > 6:
            force = -9.0
        v_prev, accel_prev = v, spring_accel
        spring_accel = accel.state_deriv_accel(force, v, x)
        v = _trapezoid(v, accel_prev, spring_accel, dt)
        x = _trapezoid(x, v_prev, v, dt)
        accel.velocity = v
        accel.position = x
        if first_step is None:
            first_step = (spring_accel, v, x)
        t += dt

    assert first_step[0] == pytest.approx(1.2)
    assert first_step[1] == pytest.approx(0.006)
    assert first_step[2] == pytest.approx(0.00003)
    assert state_at_four[0] > 0
    assert state_at_four[1] > 0
    assert v < 0
    assert math.isfinite(x)