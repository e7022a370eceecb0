#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Miscellaneous utility functions.

"""
import math
import numbers
from warnings import warn

import numpy as np
from scipy import constants

import grimpeur._exceptions as exc


MOLAR_MASS_DRY = 0.0289644     # kg/mol
MOLAR_MASS_VAPOUR = 0.018016   # kg/mol


def process_new_par(value, key=None):
    """Check an incoming configuration parameter and return it as a float.

    Parameters
    ----------
    value : real number
        The parameter value to be checked.
    key : str, optional
        The name of the parameter; used for error messages.

    Examples
    --------
        >>> process_new_par(3)
        3.0
        >>> process_new_par('3', 'bike_weight')
        Traceback (most recent call last):
            ...
        grimpeur._exceptions.TypeError: bike_weight should be a real number, got '3'
    """
    # bool is a numbers.Real, but True kg is almost certainly a mistake.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise exc.TypeError(
            '%s should be a real number, got %r' % (key, value))

    value = float(value)
    if not math.isfinite(value):
        raise exc.ValueError('%s should be finite, got %r' % (key, value))

    return value


def check_range(value, key, *, lower=None, upper=None,
                lower_inclusive=False, upper_inclusive=False):
    """Raise ``grimpeur.ValueError`` if `value` falls outside the bounds.

        >>> check_range(0.02, 'drivetrain_loss', lower=0, upper=1,
        ...             lower_inclusive=True)
        >>> check_range(1, 'drivetrain_loss', lower=0, upper=1,
        ...             lower_inclusive=True)
        Traceback (most recent call last):
            ...
        grimpeur._exceptions.ValueError: drivetrain_loss should be in [0, 1), got 1
    """
    too_low = lower is not None and (
        value < lower if lower_inclusive else value <= lower)
    too_high = upper is not None and (
        value > upper if upper_inclusive else value >= upper)

    if too_low or too_high:
        interval = '%s%s, %s%s' % (
            '[' if lower_inclusive else '(',
            '-inf' if lower is None else lower,
            'inf' if upper is None else upper,
            ']' if upper_inclusive else ')')
        raise exc.ValueError(
            '%s should be in %s, got %s' % (key, interval, format_number(value)))


def format_number(x):
    """ 1.0 --> '1', 0.25 --> '0.25' """
    return format(x, 'g')


def unwrap(x):
    """Return plain floats for scalar results, arrays otherwise.

        >>> unwrap(np.float64(2.5))
        2.5
        >>> unwrap(np.array(2.5))
        2.5
        >>> unwrap(np.array([1, 2]))
        array([1, 2])
    """
    if np.ndim(x) == 0:
        return float(x)
    return np.asarray(x)


def print_value(value, ndigits=3):
    """Prepare a parameter value for printing, used in ``__str__`` tables."""
    return format(value, '.%df' % ndigits)


def format_table(rows):
    """Lay out (parameter, value, unit) rows as a text table."""
    rows = [('Parameter', 'Value', 'Unit')] + list(rows)   # header

    colwidths = [max(len(col) for col in cols) + 3   # spacing
                 for cols in zip(*rows)]

    # Include an underline.
    rows.insert(1, tuple('-' * (width - 1) for width in colwidths))

    row_fmt = '{{:<{0}}}{{:>{1}}}{{:<{2}}}'.format(*colwidths)

    lines = (row_fmt.format(par, val, '  ' + unit)   # padding
             for par, val, unit in rows)
    return '\n'.join(lines)


def bisect(func, target, lower, upper, *, tol=1e-4, maxiter=100):
    """Find `x` in [`lower`, `upper`] such that ``func(x)`` is close to
    `target`, assuming `func` is non-decreasing over that interval.

    The search stops early as soon as ``abs(func(mid) - target) < tol``.
    Otherwise the midpoint of the final iteration is returned and a
    ``ConvergenceWarning`` is issued. Monotonicity is *not* checked; if it
    doesn't hold the result is meaningless.

    Parameters
    ----------
    func : callable
        Scalar function of one scalar argument.
    target : scalar number
        The value `func` should produce.
    lower, upper : scalar numbers
        Initial bracket.
    tol : scalar number, optional
        Absolute tolerance on ``func(x) - target``.
    maxiter : int, optional
        Maximum number of evaluations of `func`.

    Examples
    --------
        >>> round(bisect(lambda x: x ** 3, 8, 0, 10), 4)
        2.0
    """
    mid = (lower + upper) / 2
    for _ in range(maxiter):
        mid = (lower + upper) / 2
        value = func(mid)

        if abs(value - target) < tol:
            return mid

        if value > target:
            upper = mid
        else:
            lower = mid

    warn('bisection stopped after %d iterations at x=%r without reaching '
         'the target %r (tolerance %r); the target may be out of range'
         % (maxiter, mid, target, tol), exc.ConvergenceWarning, stacklevel=3)
    return mid


def head_wind_component(wind_speed, wind_direction, travel_direction):
    """Project a wind onto the direction of travel.

    Parameters
    ----------
    wind_speed : scalar number
        Any speed unit; the result is in the same unit.
    wind_direction : scalar number
        Direction the wind blows *from*, degrees.
    travel_direction : scalar number
        Direction of travel, degrees.

    Returns positive values for a headwind, negative for a tailwind.

        >>> head_wind_component(20, 0, 0)
        20.0
        >>> round(head_wind_component(20, 90, 0), 9)
        0.0
        >>> head_wind_component(20, 180, 0)
        -20.0
    """
    return float(wind_speed * np.cos(np.radians(
        travel_direction - wind_direction)))


def calculate_air_density(temperature_C, mmHg, rel_humidity):
    """Density of moist air, kg/m**3.

    Dry air and water vapour are treated as ideal gases sharing the
    volume, each contributing its partial pressure times its molar mass.

    Parameters
    ----------
    temperature_C : scalar number
        Atmospheric temperature in degrees celsius.
    mmHg : scalar number
        Atmospheric pressure in Torr.
    rel_humidity : scalar number
        Relative humidity as a decimal fraction.

    Examples
    --------
        >>> round(calculate_air_density(22, 750, 0.5), 3)
        1.174
        >>> round(calculate_air_density(15, 760, 0), 3)   # ISA sea level
        1.225
    """
    p_vapour = rel_humidity * vapour_pressure(temperature_C)
    partials = np.array([mmHg * constants.mmHg - p_vapour, p_vapour])
    molar_masses = np.array([MOLAR_MASS_DRY, MOLAR_MASS_VAPOUR])

    temperature_K = constants.convert_temperature(
        temperature_C, 'Celsius', 'Kelvin')

    return float(partials @ molar_masses / (constants.R * temperature_K))


def vapour_pressure(temperature_C):
    """Saturation pressure of water vapour in pascals (Tetens).

        >>> round(vapour_pressure(22) / constants.hecto, 2)   # in hPa
        26.44
    """
    exponent = 7.5 * temperature_C / (temperature_C + 237.3)
    return float(6.1078 * constants.hecto * np.power(10.0, exponent))
