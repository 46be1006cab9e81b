# -*- coding: utf-8 -*-

from datetime import datetime

import pytest

from CanopyLSM.Utils import InvalidInput, solar_angle, cos_zenith
from CanopyLSM.Utils.calculate_solar_geometry import eccentricity
from CanopyLSM.Utils.calculate_solar_geometry import partial_day
from CanopyLSM.Utils.calculate_solar_geometry import atmospheric_refraction
from CanopyLSM.SPAC.radiation import planck, stefan_boltzmann
from CanopyLSM.SPAC.radiation import blackbody_temp, blackbody_temperature
from CanopyLSM.SPAC.radiation import ephoton, energy2photon
from CanopyLSM.SPAC.radiation import PAR_to_shortwave


def test_blackbody_emission():

    assert planck(0.5e-6, 6000.) == pytest.approx(3.1757e13, rel=1.e-4)
    assert planck(10.e-6, 288.) == pytest.approx(8.1142e6, rel=1.e-4)
    assert stefan_boltzmann(298.15) == pytest.approx(448.0753, rel=1.e-5)
    assert blackbody_temp(240.) == pytest.approx(255.0644, rel=1.e-5)
    assert blackbody_temperature(stefan_boltzmann(310.)) == pytest.approx(
        310.)


def test_blackbody_temperature_needs_positive_flux():

    with pytest.raises(InvalidInput):
        blackbody_temperature(0.)


def test_photons():

    assert ephoton(0.5e-6) == pytest.approx(3.97289e-19, rel=1.e-5)
    assert energy2photon(300., 0.5e-6) == pytest.approx(0.0012539, rel=1.e-4)


def test_PAR_to_shortwave():

    assert PAR_to_shortwave(1500.) == pytest.approx(743.6, rel=1.e-3)
    assert PAR_to_shortwave(0.) == 0.


def test_orbit_and_time_of_day():

    assert eccentricity(1.) == pytest.approx(0.01627, rel=1.e-3)
    assert eccentricity(-1.) == pytest.approx(0.01712, rel=1.e-3)
    assert partial_day(datetime(2017, 6, 5, 11, 15)) == 0.46875

    with pytest.raises(InvalidInput):
        eccentricity(1.5)


def test_atmospheric_refraction():

    assert atmospheric_refraction(40.) == pytest.approx(0.0192007, rel=1.e-5)
    assert atmospheric_refraction(-1.) == pytest.approx(0.3305949, rel=1.e-5)
    assert atmospheric_refraction(88.) == 0.


def test_sunrise_and_sunset_in_los_angeles():

    sun = solar_angle(datetime(2018, 9, 20, 12), 34.069444, -118.445278,
                      tz=-7.)
    two_minutes = 2. / 1440.

    assert sun['sunrise'] == pytest.approx(0.27778, abs=two_minutes)
    assert sun['sunset'] == pytest.approx(0.78611, abs=two_minutes)
    assert sun['sunrise'] < sun['solar noon'] < sun['sunset']
    assert 0. < sun['solar elevation angle'] < 90.
    assert (sun['corrected solar elevation angle'] >
            sun['solar elevation angle'])


def test_no_sun_at_midnight():

    assert cos_zenith(datetime(2018, 9, 20), 34.069444, -118.445278,
                      tz=-7.) == 0.
    assert 0. < cos_zenith(datetime(2018, 9, 20, 13), 34.069444,
                           -118.445278, tz=-7.) <= 1.
