#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Immutable parameter records for the power/speed model.

`RiderBikeConfig` describes what is being propelled (rider, bike, position),
`EnvironmentConfig` describes where it's being propelled (slope, wind, road
surface, air). `DEFAULT_ENVIRONMENT` is flat, calm, sea-level riding and is
used by every model function when no environment is supplied.

"""
from collections import namedtuple

import grimpeur._util as util


RIDER_BIKE_DEFAULTS = (
    # (name, default, unit)

    ('rider_weight', None, 'kg'),
    ('bike_weight', None, 'kg'),          # including all gear
    ('frontal_area', 0.509, 'm^2'),
    ('drag_coef', 0.63, 'au'),
    ('drivetrain_loss', 0.02, 'fraction'),
)


ENVIRONMENT_DEFAULTS = (
    # (name, default, unit)

    ('gradient', 0, 'fraction'),          # rise/run, negative downhill
    ('head_wind', 0, 'km/h'),             # negative for a tailwind
    ('crr', 0.005, 'au'),                 # coefficient of rolling resistance
    ('rho', 1.22601, 'kg/m^3'),           # air density
)


def _field_names(table):
    return [key for key, *ignore in table]


def _table_str(record, table):
    """Pretty tabular representation of a parameter record."""
    return util.format_table(
        (key, util.print_value(getattr(record, key)), unit)
        for key, _, unit in table)


class RiderBikeConfig(namedtuple('RiderBikeConfig',
                                 _field_names(RIDER_BIKE_DEFAULTS))):
    """Physical parameters of the rider and bike.

    =========================   ==================   =========================
    parameter name              units                short description
    =========================   ==================   =========================
    rider_weight                kg                   Required.
    bike_weight                 kg                   Required. Bike plus gear.
    frontal_area                m**2                 Rider + bike surface
                                                     facing the air.
    drag_coef                   a.u.                 Drag coefficient of
                                                     rider + bike.
    drivetrain_loss             decimal fraction     e.g. 0.02 (2%) of leg
                                                     power lost before the
                                                     wheel.
    =========================   ==================   =========================

    Masses, frontal area and drag coefficient must be positive and the
    drivetrain loss must lie in [0, 1); anything else raises
    ``grimpeur.ValueError``.

    Examples
    --------
        >>> RiderBikeConfig(75, 7)
        RiderBikeConfig(rider_weight=75.0, bike_weight=7.0, frontal_area=0.509, drag_coef=0.63, drivetrain_loss=0.02)
        >>> RiderBikeConfig(75, 7).total_weight
        82.0
    """

    __slots__ = ()

    def __new__(cls, rider_weight, bike_weight, frontal_area=0.509,
                drag_coef=0.63, drivetrain_loss=0.02):

        pars = dict(rider_weight=rider_weight,
                    bike_weight=bike_weight,
                    frontal_area=frontal_area,
                    drag_coef=drag_coef,
                    drivetrain_loss=drivetrain_loss)
        pars = {key: util.process_new_par(value, key)
                for key, value in pars.items()}

        for key in ('rider_weight', 'bike_weight', 'frontal_area',
                    'drag_coef'):
            util.check_range(pars[key], key, lower=0)

        util.check_range(pars['drivetrain_loss'], 'drivetrain_loss',
                         lower=0, upper=1, lower_inclusive=True)

        return super().__new__(cls, **pars)

    @classmethod
    def _make(cls, iterable):
        # namedtuple._make (and so _replace) would skip the checks above.
        return cls(*iterable)

    @property
    def total_weight(self):
        return self.rider_weight + self.bike_weight

    @classmethod
    def defaults(cls):
        """Display parameter defaults."""
        return {key: value for key, value, _ in RIDER_BIKE_DEFAULTS
                if value is not None}

    def __str__(self):
        return _table_str(self, RIDER_BIKE_DEFAULTS)


class EnvironmentConfig(namedtuple('EnvironmentConfig',
                                   _field_names(ENVIRONMENT_DEFAULTS))):
    """Environmental parameters.

    =========================   ==================   =========================
    parameter name              units                short description
    =========================   ==================   =========================
    gradient                    decimal fraction     Rise over run, e.g. 0.05
                                                     (5%); negative downhill.
    head_wind                   km/h                 Wind speed projected on
                                                     the course direction;
                                                     negative for tailwind.
    crr                         a.u.                 Coefficient of rolling
                                                     resistance.
    rho                         kg/m**3              Air density.
    =========================   ==================   =========================

    Examples
    --------
        >>> EnvironmentConfig()
        EnvironmentConfig(gradient=0.0, head_wind=0.0, crr=0.005, rho=1.22601)
        >>> EnvironmentConfig(0.05) == EnvironmentConfig(gradient=0.05)
        True
    """

    __slots__ = ()

    def __new__(cls, gradient=0, head_wind=0, crr=0.005, rho=1.22601):

        pars = dict(gradient=gradient, head_wind=head_wind, crr=crr, rho=rho)
        pars = {key: util.process_new_par(value, key)
                for key, value in pars.items()}

        util.check_range(pars['crr'], 'crr', lower=0, lower_inclusive=True)
        util.check_range(pars['rho'], 'rho', lower=0)

        return super().__new__(cls, **pars)

    @classmethod
    def _make(cls, iterable):
        # namedtuple._make (and so _replace) would skip the checks above.
        return cls(*iterable)

    @classmethod
    def from_weather(cls, temperature_C, mmHg, rel_humidity, *, gradient=0,
                     wind_speed=0, wind_direction=0, travel_direction=0,
                     crr=0.005):
        """Build an environment from weather observations.

        Parameters
        ----------
        temperature_C : scalar number
            Atmospheric temperature in degrees celsius.
        mmHg : scalar number
            Atmospheric pressure in Torr.
        rel_humidity : scalar number
            Relative humidity as a decimal fraction.
        gradient : scalar number, optional
            Rise over run.
        wind_speed : scalar number, optional
            Wind speed in km/h.
        wind_direction : scalar number, optional
            Direction the wind blows from, in degrees.
        travel_direction : scalar number, optional
            Direction of travel, in degrees.
        crr : scalar number, optional
            Coefficient of rolling resistance.

        Examples
        --------
            >>> env = EnvironmentConfig.from_weather(22, 750, 0.5,
            ...                                      wind_speed=10)
            >>> round(env.rho, 4), env.head_wind
            (1.1743, 10.0)
        """
        rho = util.calculate_air_density(temperature_C, mmHg, rel_humidity)
        head_wind = util.head_wind_component(
            wind_speed, wind_direction, travel_direction)
        return cls(gradient=gradient, head_wind=head_wind, crr=crr, rho=rho)

    @classmethod
    def defaults(cls):
        """Display parameter defaults."""
        return {key: value for key, value, _ in ENVIRONMENT_DEFAULTS}

    def __str__(self):
        return _table_str(self, ENVIRONMENT_DEFAULTS)


DEFAULT_ENVIRONMENT = EnvironmentConfig()
