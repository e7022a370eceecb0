#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The business end of this package.

Resistive forces acting on a bike moving at a given speed are decomposed into
gravity, rolling resistance and aerodynamic drag [1]_. Multiplying by speed
gives the power at the wheel; leg power follows from the drivetrain loss
when the rider is driving, or equals wheel power (and is dissipated through
the brakes) when the resistive forces alone would push the bike faster.

Speeds are in km/h throughout, forces in newtons and powers in watts.

Vectorised math operations are used, so velocities can be scalars or arrays.

References
----------
.. [1] https://www.gribble.org/cycling/power_v_speed.html

"""
from collections import namedtuple

import numpy as np
from scipy import constants

import grimpeur._util as util
from grimpeur.params import DEFAULT_ENVIRONMENT


GRAVITY = 9.8067            # m/s^2

KMH = constants.kmh         # 1 km/h in m/s

SPEED_BOUNDS = (-1000, 1000)   # km/h, bracket for the speed search
SPEED_TOL = 1e-4               # W
SPEED_MAXITER = 100


class ForceResult(namedtuple('ForceResult', 'gravity rolling drag')):
    """Forces opposing forward motion, in newtons."""

    __slots__ = ()

    @property
    def total(self):
        return self.gravity + self.rolling + self.drag


PowerResult = namedtuple(
    'PowerResult',
    'leg wheel drivetrain_loss braking gravity rolling drag')
PowerResult.__doc__ = """Power breakdown, in watts.

leg : power produced at the pedals.
wheel : power absorbed by gravity, rolling resistance and drag.
drivetrain_loss : power lost between pedals and wheel (driving only).
braking : power dissipated by the brakes (coasting only).
gravity, rolling, drag : contributions of each force to `wheel`.
"""


def calculate_forces(velocity, rider_bike, env=DEFAULT_ENVIRONMENT):
    """Compute the forces applied to rider and bike.

    Parameters
    ----------
    velocity : scalar number or array
        Bike speed in km/h; negative values are travel against the course
        direction.
    rider_bike : RiderBikeConfig
    env : EnvironmentConfig, optional
        Defaults to flat, calm conditions.

    Returns
    -------
    ForceResult
        Positive components oppose travel along the course direction. The
        rolling and drag components change sign with the direction of
        travel and of the airflow respectively.
    """
    velocity = np.asarray(velocity, dtype=np.float64)

    angle = np.arctan(env.gradient)
    weight = rider_bike.total_weight

    gravity = GRAVITY * weight * np.sin(angle)
    rolling = GRAVITY * weight * np.cos(angle) * env.crr * np.sign(velocity)

    air_velocity = velocity + env.head_wind
    wind_speed = air_velocity * KMH
    drag_strength = rider_bike.frontal_area * rider_bike.drag_coef * env.rho
    # The square loses the direction of the airflow, so put it back.
    drag = 0.5 * drag_strength * wind_speed**2 * np.sign(air_velocity)

    gravity = np.full(velocity.shape, gravity)

    return ForceResult(util.unwrap(gravity),
                       util.unwrap(rolling),
                       util.unwrap(drag))


def calculate_power(velocity, rider_bike, env=DEFAULT_ENVIRONMENT):
    """Compute the power needed to hold a given speed.

    Parameters
    ----------
    velocity : scalar number or array
        Bike speed in km/h.
    rider_bike : RiderBikeConfig
    env : EnvironmentConfig, optional
        Defaults to flat, calm conditions.

    Returns
    -------
    PowerResult
        When the wheel needs power, leg power covers it plus the drivetrain
        loss. Otherwise the rider coasts, leg power equals (non-positive)
        wheel power and its opposite is dissipated by braking. At most one
        of `drivetrain_loss` and `braking` is nonzero.
    """
    velocity = np.asarray(velocity, dtype=np.float64)
    forces = calculate_forces(velocity, rider_bike, env)

    wheel = np.asarray(forces.total) * velocity * KMH

    drivetrain_fraction = np.where(
        wheel > 0, 1 - rider_bike.drivetrain_loss, 1)
    leg = wheel / drivetrain_fraction

    driving = leg > 0
    drivetrain_loss = np.where(driving, leg - wheel, 0)
    braking = np.where(driving, 0, -leg)

    gravity, rolling, drag = (np.asarray(force) * velocity * KMH
                              for force in forces)

    return PowerResult(*(util.unwrap(value) for value in (
        leg, wheel, drivetrain_loss, braking, gravity, rolling, drag)))


def calculate_speed(power, rider_bike, env=DEFAULT_ENVIRONMENT):
    """Solve for the speed that a given leg power sustains.

    Bisection is used on leg power between -1000 and 1000 km/h, which
    assumes leg power increases with speed over that range. The search
    returns as soon as leg power is within 1e-4 W of `power`; if that never
    happens within 100 iterations a ``grimpeur.ConvergenceWarning`` is
    issued and the last midpoint is returned anyway.

    Parameters
    ----------
    power : scalar number
        Leg power in watts. Negative values mean braking.
    rider_bike : RiderBikeConfig
    env : EnvironmentConfig, optional
        Defaults to flat, calm conditions.

    Returns
    -------
    float
        Speed in km/h.
    """
    def leg_power(velocity):
        return calculate_power(velocity, rider_bike, env).leg

    lower, upper = SPEED_BOUNDS
    return util.bisect(leg_power, power, lower, upper,
                       tol=SPEED_TOL, maxiter=SPEED_MAXITER)


class PowerCalculator:
    """Model functions bound to a single rider and bike.

    Examples
    --------
        >>> from grimpeur import RiderBikeConfig
        >>> calculator = PowerCalculator(RiderBikeConfig(75, 7))
        >>> round(calculator.calculate_power(30).leg, 2)
        150.27
    """
    def __init__(self, rider_bike):
        self.rider_bike = rider_bike

    def __repr__(self):
        return 'PowerCalculator({!r})'.format(self.rider_bike)

    def calculate_forces(self, velocity, env=DEFAULT_ENVIRONMENT):
        return calculate_forces(velocity, self.rider_bike, env)

    def calculate_power(self, velocity, env=DEFAULT_ENVIRONMENT):
        return calculate_power(velocity, self.rider_bike, env)

    def calculate_speed(self, power, env=DEFAULT_ENVIRONMENT):
        return calculate_speed(power, self.rider_bike, env)
