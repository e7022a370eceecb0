#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Check the model against a worked example: a 75 kg rider on a 7 kg bike,
default position and drivetrain, riding on the flat, up a 5% climb and down
a 5% descent. Then run the speed solver backwards over the same numbers,
where it can be run backwards.

"""
import numpy as np
import pytest

from grimpeur import (
    ConvergenceWarning,
    EnvironmentConfig,
    PowerCalculator,
    RiderBikeConfig,
)


calculator = PowerCalculator(RiderBikeConfig(75, 7))
flat = EnvironmentConfig()
up = EnvironmentConfig(0.05)
down = EnvironmentConfig(-0.05)


def close(a, b):
    return np.isclose(a, b, rtol=0, atol=0.01)


def test_forces_flat():
    forces = calculator.calculate_forces(30)
    assert forces.gravity == 0


def test_forces_uphill():
    forces = calculator.calculate_forces(30, up)
    assert close(forces.gravity, 40.16)
    assert close(forces.rolling, 4.02)
    assert close(forces.drag, 13.65)
    assert close(forces.total, 40.16 + 4.02 + 13.65)


def test_forces_uphill_backwards():
    forces = calculator.calculate_forces(-30, up)
    assert close(forces.rolling, -4.02)
    assert close(forces.drag, -13.65)


def test_power_flat():
    power = calculator.calculate_power(30)
    assert close(power.leg, 150.27)
    assert close(power.wheel, 147.26)
    assert close(power.drivetrain_loss, 3.01)
    assert power.braking == 0
    assert close(power.gravity, 0)
    assert close(power.rolling, 33.51)
    assert close(power.drag, 113.76)


def test_power_uphill():
    power = calculator.calculate_power(20, up)
    assert close(power.leg, 284.81)
    assert power.braking == 0
    assert np.isclose(power.gravity, 223.1, rtol=0, atol=0.05)


def test_power_downhill():
    power = calculator.calculate_power(40, down)
    assert close(power.leg, -131.93)
    assert close(power.braking, 131.93)
    assert power.drivetrain_loss == 0


def test_speed_recovers_example_speeds():
    for velocity, env in ((30, flat), (20, up)):
        power = calculator.calculate_power(velocity, env).leg
        assert np.isclose(calculator.calculate_speed(power, env), velocity,
                          rtol=0, atol=1e-3)


def test_speed_on_the_descent():
    # Pedalling downhill: faster than the 40 km/h that needed braking.
    velocity = calculator.calculate_speed(200, down)
    assert velocity > 40
    assert np.isclose(calculator.calculate_power(velocity, down).leg, 200,
                      rtol=0, atol=1e-3)


def test_braking_power_cannot_be_inverted():
    # The first midpoint is a standstill (0 W), which sends a negative
    # target into the backwards half, where drag makes leg power hugely
    # positive at every later midpoint.
    with pytest.warns(ConvergenceWarning):
        velocity = calculator.calculate_speed(-131.93, down)
    assert velocity < 0
