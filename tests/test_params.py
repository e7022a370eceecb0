#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import pickle

import pytest

import grimpeur
from grimpeur import DEFAULT_ENVIRONMENT, EnvironmentConfig, RiderBikeConfig


class TestRiderBikeConfig:
    def test_defaults(self):
        rider = RiderBikeConfig(75, 7)
        assert rider.frontal_area == 0.509
        assert rider.drag_coef == 0.63
        assert rider.drivetrain_loss == 0.02
        assert rider.total_weight == 82

    def test_keywords(self):
        rider = RiderBikeConfig(rider_weight=60, bike_weight=8.5,
                                frontal_area=0.4, drag_coef=0.7,
                                drivetrain_loss=0.03)
        assert rider == RiderBikeConfig(60, 8.5, 0.4, 0.7, 0.03)

    def test_immutable(self):
        rider = RiderBikeConfig(75, 7)
        with pytest.raises(AttributeError):
            rider.rider_weight = 80
        with pytest.raises(AttributeError):
            rider.new_field = 1

    def test_hashable_and_picklable(self):
        rider = RiderBikeConfig(75, 7)
        assert {rider: 1}[RiderBikeConfig(75.0, 7.0)] == 1
        assert pickle.loads(pickle.dumps(rider)) == rider

    def test_rider_weight_required(self):
        with pytest.raises(TypeError):
            RiderBikeConfig(75)

    @pytest.mark.parametrize('field', ['rider_weight', 'bike_weight',
                                       'frontal_area', 'drag_coef'])
    @pytest.mark.parametrize('value', [0, -1])
    def test_positive_fields(self, field, value):
        kwargs = dict(rider_weight=75, bike_weight=7)
        kwargs[field] = value
        with pytest.raises(grimpeur.ValueError, match=field):
            RiderBikeConfig(**kwargs)

    @pytest.mark.parametrize('loss', [-0.01, 1, 1.5])
    def test_drivetrain_loss_range(self, loss):
        with pytest.raises(grimpeur.ParamsError):
            RiderBikeConfig(75, 7, drivetrain_loss=loss)

    def test_zero_drivetrain_loss_allowed(self):
        assert RiderBikeConfig(75, 7, drivetrain_loss=0).drivetrain_loss == 0

    @pytest.mark.parametrize('value', ['75', None, True, [75]])
    def test_non_numeric(self, value):
        with pytest.raises(grimpeur.TypeError):
            RiderBikeConfig(value, 7)

    @pytest.mark.parametrize('value', [float('nan'), float('inf')])
    def test_non_finite(self, value):
        with pytest.raises(ValueError):
            RiderBikeConfig(75, value)

    def test_replace_keeps_valid_records(self):
        rider = RiderBikeConfig(75, 7)._replace(drivetrain_loss=0.03)
        assert rider == RiderBikeConfig(75, 7, drivetrain_loss=0.03)
        assert type(rider) is RiderBikeConfig

    def test_replace_is_checked(self):
        rider = RiderBikeConfig(75, 7)
        with pytest.raises(grimpeur.ValueError, match='drivetrain_loss'):
            rider._replace(drivetrain_loss=1)
        with pytest.raises(grimpeur.TypeError, match='rider_weight'):
            rider._replace(rider_weight='75')

    def test_make_is_checked(self):
        assert RiderBikeConfig._make([75, 7]) == RiderBikeConfig(75, 7)
        with pytest.raises(grimpeur.ValueError, match='drivetrain_loss'):
            RiderBikeConfig._make([75, 7, 0.509, 0.63, -3.0])

    def test_exceptions_are_also_builtins(self):
        assert issubclass(grimpeur.ValueError, ValueError)
        assert issubclass(grimpeur.TypeError, TypeError)
        assert issubclass(grimpeur.ValueError, grimpeur.GrimpeurException)

    def test_defaults_table(self):
        assert RiderBikeConfig.defaults() == {
            'frontal_area': 0.509, 'drag_coef': 0.63,
            'drivetrain_loss': 0.02}

    def test_str(self):
        lines = str(RiderBikeConfig(75, 7)).splitlines()
        assert lines[0].split() == ['Parameter', 'Value', 'Unit']
        assert lines[2].split() == ['rider_weight', '75.000', 'kg']
        assert len(lines) == 2 + 5


class TestEnvironmentConfig:
    def test_default_environment(self):
        assert DEFAULT_ENVIRONMENT == EnvironmentConfig()
        assert DEFAULT_ENVIRONMENT.gradient == 0
        assert DEFAULT_ENVIRONMENT.head_wind == 0
        assert DEFAULT_ENVIRONMENT.crr == 0.005
        assert DEFAULT_ENVIRONMENT.rho == 1.22601

    def test_positional_order(self):
        env = EnvironmentConfig(0.05, -10, 0.004, 1.2)
        assert env.gradient == 0.05
        assert env.head_wind == -10
        assert env.crr == 0.004
        assert env.rho == 1.2

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_ENVIRONMENT.gradient = 0.1

    def test_negative_gradient_and_wind_allowed(self):
        env = EnvironmentConfig(gradient=-0.12, head_wind=-30)
        assert env.gradient == -0.12

    def test_zero_crr_allowed(self):
        assert EnvironmentConfig(crr=0).crr == 0

    @pytest.mark.parametrize('kwargs', [dict(crr=-0.001), dict(rho=0),
                                        dict(rho=-1.2)])
    def test_ranges(self, kwargs):
        with pytest.raises(grimpeur.ValueError):
            EnvironmentConfig(**kwargs)

    def test_replace_is_checked(self):
        env = DEFAULT_ENVIRONMENT._replace(gradient=0.05)
        assert env == EnvironmentConfig(0.05)
        with pytest.raises(grimpeur.ValueError, match='rho'):
            DEFAULT_ENVIRONMENT._replace(rho=0)
        with pytest.raises(grimpeur.TypeError, match='crr'):
            DEFAULT_ENVIRONMENT._replace(crr='0.005')

    def test_make_is_checked(self):
        with pytest.raises(grimpeur.ValueError, match='crr'):
            EnvironmentConfig._make([0, 0, -0.1, 1.2])

    def test_from_weather(self):
        env = EnvironmentConfig.from_weather(
            22, 750, 0.5, gradient=0.03, wind_speed=20,
            wind_direction=180, travel_direction=0, crr=0.004)
        assert env.rho == pytest.approx(1.1743, abs=1e-4)
        assert env.head_wind == pytest.approx(-20)
        assert env.gradient == 0.03
        assert env.crr == 0.004

    def test_from_weather_is_denser_when_cold(self):
        cold = EnvironmentConfig.from_weather(0, 760, 0.5)
        hot = EnvironmentConfig.from_weather(35, 760, 0.5)
        assert cold.rho > hot.rho

    def test_defaults_table(self):
        assert EnvironmentConfig.defaults() == dict(
            gradient=0, head_wind=0, crr=0.005, rho=1.22601)
