#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cycling power <-> speed modelling.

    >>> from grimpeur import RiderBikeConfig, EnvironmentConfig
    >>> from grimpeur import calculate_power, calculate_speed
    >>> rider = RiderBikeConfig(rider_weight=75, bike_weight=7)
    >>> climb = EnvironmentConfig(gradient=0.05)
    >>> round(calculate_power(20, rider, climb).leg, 2)
    284.81
    >>> round(calculate_speed(284.81, rider, climb), 2)
    20.0

"""
from grimpeur._exceptions import (
    GrimpeurException,
    ParamsError,
    SolverError,
    ValueError,
    TypeError,
    ConvergenceWarning,
)
from grimpeur._modelling import (
    ForceResult,
    PowerResult,
    PowerCalculator,
    calculate_forces,
    calculate_power,
    calculate_speed,
)
from grimpeur._util import calculate_air_density, head_wind_component
from grimpeur.params import (
    DEFAULT_ENVIRONMENT,
    EnvironmentConfig,
    RiderBikeConfig,
)
from grimpeur.sheets import compute_power_from_speed, compute_speed_from_power


__version__ = '0.1.0'
