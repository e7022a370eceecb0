#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Flat-argument entry points for spreadsheet-style custom functions.

Spreadsheet custom functions can only pass plain numbers, so these wrappers
take every rider, bike and environment parameter positionally, build the
parameter records and delegate to the model.

"""
from grimpeur._modelling import calculate_power, calculate_speed
from grimpeur.params import EnvironmentConfig, RiderBikeConfig


def _configs(gradient, rider_weight, bike_weight, frontal_area, drag_coef,
             drivetrain_loss, air_density, wind_speed, rolling_resistance):
    rider_bike = RiderBikeConfig(rider_weight, bike_weight, frontal_area,
                                 drag_coef, drivetrain_loss)
    env = EnvironmentConfig(gradient, wind_speed, rolling_resistance,
                            air_density)
    return rider_bike, env


def compute_power_from_speed(velocity, gradient, rider_weight, bike_weight,
                             frontal_area, drag_coef, drivetrain_loss,
                             air_density, wind_speed, rolling_resistance):
    """Compute the leg power needed to hold a speed.

    Parameters
    ----------
    velocity : scalar number
        Average speed, km/h.
    gradient : scalar number
        Average slope as a decimal fraction (0.01 for 1%).
    rider_weight : scalar number
        Weight of the rider, kg.
    bike_weight : scalar number
        Weight of the bike and gear, kg.
    frontal_area : scalar number
        System frontal area, m**2.
    drag_coef : scalar number
        Aerodynamic drag coefficient.
    drivetrain_loss : scalar number
        Fraction of leg power lost in the drivetrain (0.02 for 2%).
    air_density : scalar number
        kg/m**3.
    wind_speed : scalar number
        Headwind speed, km/h (negative for a tailwind).
    rolling_resistance : scalar number
        Coefficient of rolling resistance.

    Returns
    -------
    float
        Average leg power, watts.

    Examples
    --------
        >>> round(compute_power_from_speed(
        ...     30, 0, 75, 7, 0.509, 0.63, 0.02, 1.22601, 0, 0.005), 2)
        150.27
    """
    rider_bike, env = _configs(gradient, rider_weight, bike_weight,
                               frontal_area, drag_coef, drivetrain_loss,
                               air_density, wind_speed, rolling_resistance)
    return float(calculate_power(velocity, rider_bike, env).leg)


def compute_speed_from_power(power, gradient, rider_weight, bike_weight,
                             frontal_area, drag_coef, drivetrain_loss,
                             air_density, wind_speed, rolling_resistance):
    """Estimate the speed a leg power sustains.

    Takes the same parameters as `compute_power_from_speed`, with `power`
    (average leg power, watts) in place of `velocity`. Returns the speed in
    km/h.

    Examples
    --------
        >>> round(compute_speed_from_power(
        ...     150.27, 0, 75, 7, 0.509, 0.63, 0.02, 1.22601, 0, 0.005), 1)
        30.0
    """
    rider_bike, env = _configs(gradient, rider_weight, bike_weight,
                               frontal_area, drag_coef, drivetrain_loss,
                               air_density, wind_speed, rolling_resistance)
    return float(calculate_speed(power, rider_bike, env))
