# -*- coding: utf-8 -*-

"""
Solar geometry at a location: the position of the sun in the sky,
sunrise and sunset, following the NOAA solar calculator. The times of
day are given as fractions of a day in local time.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Meeus, J. (1991). Astronomical algorithms. Willmann-Bell,
  Richmond, VA.
* NOAA Global Monitoring Division. General Solar Position Calculations.
  https://gml.noaa.gov/grad/solcalc/calcdetails.html
* Simon, J. L., Bretagnon, P., Chapront, J., Chapront-Touzé, M.,
  Francou, G., & Laskar, J. (1994). Numerical expressions for precession
  formulae and mean elements for the Moon and the planets. Astronomy
  and Astrophysics, 282, 663-683.

"""

__title__ = "Solar geometry at a location"
__author__ = ["Manon E. B. Sabot", "Martin De Kauwe"]
__version__ = "4.0 (03.02.2021)"
__email__ = ["m.e.b.sabot@gmail.com", "mdekauwe@gmail.com"]


# ======================================================================

# general modules
from datetime import datetime, timedelta  # dates & times of day
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM.Utils.errors import InvalidInput


# ======================================================================

def _sind(x):

    return np.sin(np.radians(x))


def _cosd(x):

    return np.cos(np.radians(x))


def _tand(x):

    return np.tan(np.radians(x))


def _acosd(x):

    return np.degrees(np.arccos(np.clip(x, -1., 1.)))


def _days(delta):

    return delta.total_seconds() / 86400.


def eccentricity(t):

    """
    Eccentricity of the Earth's orbit (Simon et al., 1994).

    Arguments:
    ----------
    t: float or datetime
        number of millennia since J2000, or a date

    Returns:
    --------
    The eccentricity [-].

    """

    if isinstance(t, datetime):
        t = _days(t - datetime(2000, 1, 1)) / 365250.

    if abs(t) > 1.:
        raise InvalidInput('the eccentricity is only applicable between '
                           'years 1000 and 3000 AD')

    return (0.0167086342 - 4.203654e-4 * t - 1.26734e-5 * t * t +
            1.444e-7 * t ** 3. - 2.e-10 * t ** 4. + 3.e-10 * t ** 5.)


def partial_day(dt):

    """
    Fraction of the day elapsed at the time of dt [0-1].

    """

    return (dt.hour / 24. + dt.minute / 1440. +
            (dt.second + dt.microsecond * 1.e-6) / 86400.)


def atmospheric_refraction(angle):

    """
    Approximate atmospheric refraction of the sun rays.

    Arguments:
    ----------
    angle: float
        solar elevation angle [deg]

    Returns:
    --------
    The refraction correction to add to the elevation angle [deg].

    """

    if angle > 85.:
        return 0.

    if angle > 5.:
        x = 1. / _tand(angle)

        return (58.1 * x - 0.07 * x ** 3. + 8.6e-5 * x ** 5.) / 3600.

    if angle > -0.575:
        return np.polynomial.polynomial.polyval(
            angle, (1735., -518.2, 103.4, -12.79, 0.711)) / 3600.

    return -20.774 / (3600. * _tand(angle))


def solar_angle(dt, lat, lon, tz=0.):

    """
    Position of the sun and times of sunrise and sunset.

    Arguments:
    ----------
    dt: datetime
        local date and time

    lat: float
        latitude [deg], positive to the north

    lon: float
        longitude [deg], positive to the east

    tz: float
        time zone [h], positive to the east of Greenwich

    Returns:
    --------
    A dictionary with the 'solar noon', 'sunrise', and 'sunset' local
    times and the 'sunlight duration' [fraction of day], as well as the
    'hour angle', 'solar zenith angle', 'solar elevation angle', 'solar
    azimuth angle', 'atmospheric refraction', 'corrected solar zenith
    angle', and 'corrected solar elevation angle' [deg].

    """

    julian_day = 2440000.5 + _days(dt - datetime(1968, 5, 24)) - tz / 24.
    julian_century = (julian_day - 2451545.) / 36525.

    # orbital elements of the sun, deg
    mean_lon = (280.46646 + julian_century *
                (36000.76983 + julian_century * 0.0003032)) % 360.
    mean_anom = 357.52911 + julian_century * (35999.05029 - 0.0001537 *
                                              julian_century)
    ecc = eccentricity(dt - timedelta(hours=tz))
    eq_ctr = (_sind(mean_anom) * (1.914602 - julian_century *
                                  (0.004817 + 1.4e-5 * julian_century)) +
              _sind(2. * mean_anom) * (0.019993 - 0.000101 * julian_century) +
              _sind(3. * mean_anom) * 0.000289)
    app_lon = (mean_lon + eq_ctr - 0.00569 - 0.00478 *
               _sind(125.04 - 1934.136 * julian_century))

    # obliquity of the ecliptic & declination, deg
    mean_obliq = 23. + (26. + (21.448 - julian_century *
                               (46.815 + julian_century *
                                (0.00059 - julian_century * 0.001813))) /
                        60.) / 60.
    obliq = mean_obliq + 0.00256 * _cosd(125.04 - 1934.136 * julian_century)
    declin = np.degrees(np.arcsin(_sind(obliq) * _sind(app_lon)))

    # equation of time, min
    y = _tand(0.5 * obliq) ** 2.
    eq_time = 4. * np.degrees(y * _sind(2. * mean_lon) -
                              2. * ecc * _sind(mean_anom) +
                              4. * ecc * y * _sind(mean_anom) *
                              _cosd(2. * mean_lon) -
                              0.5 * y * y * _sind(4. * mean_lon) -
                              1.25 * ecc * ecc * _sind(2. * mean_anom))

    # sunrise & sunset, fraction of day
    HA_sunrise = _acosd(_cosd(90.833) / (_cosd(lat) * _cosd(declin)) -
                        _tand(lat) * _tand(declin))
    noon = (720. - 4. * lon - eq_time + tz * 60.) / 1440.

    # position of the sun, deg
    true_solar_time = (partial_day(dt) * 1440. + eq_time + 4. * lon -
                       60. * tz) % 1440.  # min
    hour_angle = true_solar_time / 4. - 180.
    zenith = _acosd(_sind(lat) * _sind(declin) + _cosd(lat) * _cosd(declin) *
                    _cosd(hour_angle))
    x = _acosd((_sind(lat) * _cosd(zenith) - _sind(declin)) /
               (_cosd(lat) * _sind(zenith)))

    if hour_angle > 0.:
        azimuth = (x + 180.) % 360.

    else:
        azimuth = (540. - x) % 360.

    refraction = atmospheric_refraction(90. - zenith)

    return {'solar noon': noon,
            'sunrise': noon - HA_sunrise * 4. / 1440.,
            'sunset': noon + HA_sunrise * 4. / 1440.,
            'sunlight duration': 8. * HA_sunrise / 1440.,
            'hour angle': hour_angle,
            'solar zenith angle': zenith,
            'solar elevation angle': 90. - zenith,
            'solar azimuth angle': azimuth,
            'atmospheric refraction': refraction,
            'corrected solar zenith angle': zenith - refraction,
            'corrected solar elevation angle': 90. - zenith + refraction}


def cos_zenith(dt, lat, lon, tz=0.):

    """
    Cosine of the solar zenith angle, zero when the sun is below the
    horizon.

    Arguments:
    ----------
    dt: datetime
        local date and time

    lat: float
        latitude [deg]

    lon: float
        longitude [deg]

    tz: float
        time zone [h]

    Returns:
    --------
    The cosine of the zenith angle [0-1].

    """

    zenith = solar_angle(dt, lat, lon, tz=tz)['solar zenith angle']

    return np.clip(_cosd(zenith), 0., 1.)
