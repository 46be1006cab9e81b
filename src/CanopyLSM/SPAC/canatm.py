# -*- coding: utf-8 -*-

"""
Functions describing the state of the air surrounding the canopy: molar
concentration and density of moist air, and the empirical long-wave
radiation it emits.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Abramowitz, G., Pouyanné, L., & Ajami, H. (2012). On the information
  content of surface meteorology for downward atmospheric long‐wave
  radiation synthesis. Geophysical Research Letters, 39(4).
* Norman, J. M., & Campbell, G. S. (1998). An introduction to
  environmental biophysics. Springer, New York.

"""

__title__ = "Canopy atmospheric processes"
__author__ = "Manon E. B. Sabot"
__version__ = "3.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM import cst  # general constants
from CanopyLSM.Utils.errors import check_temperature, check_pressure
from CanopyLSM.Utils.errors import check_fraction
from CanopyLSM.SPAC.water import e_sat, vapor_mole_frac


# ======================================================================

def air_molar(T, P):

    """
    Calculates the molar concentration of air from the ideal gas law.

    Arguments:
    ----------
    T: array or float
        air temperature [degK]

    P: array or float
        air pressure [Pa]

    Returns:
    --------
    The molar concentration of air [mol m-3].

    """

    check_temperature(T)
    check_pressure(P)

    return P / (cst.R * T)


def air_density(T, P, RH):

    """
    Calculates the density of moist air, where the mean molar mass is
    weighted by the water vapour mole fraction.

    Arguments:
    ----------
    T: array or float
        air temperature [degK]

    P: array or float
        air pressure [Pa]

    RH: array or float
        relative humidity [0-1]

    Returns:
    --------
    The density of moist air [kg m-3].

    """

    x_w = vapor_mole_frac(T, P, RH)

    return ((1. - x_w) * cst.Mair + x_w * cst.MH2O) * air_molar(T, P)


def atmospheric_emissivity(T, RH):

    """
    Calculates the emissivity of the atmosphere by deriving it from the
    empirical long-wave down estimate proposed by Abramowitz et al.
    (2012): LWdown = 0.031 * ea + 2.84 * T - 522.5 (W m-2)

    Arguments:
    ----------
    T: array or float
        air temperature [degK]

    RH: array or float
        relative humidity [0-1]

    Returns:
    --------
    The apparent emissivity at air temperature [unitless].

    """

    return longwave_down(T, RH) / (cst.sigma * T ** 4.)


def longwave_down(T, RH):

    """
    Empirical downwelling long-wave radiation [W m-2] (Abramowitz et
    al., 2012), from air temperature [degK] and relative humidity [0-1].

    """

    check_fraction(RH)
    ea = RH * e_sat(T)  # actual vapour pressure, Pa

    return np.maximum(0., 0.031 * ea + 2.84 * T - 522.5)
