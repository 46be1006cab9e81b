# -*- coding: utf-8 -*-

"""
Properties of liquid water, ice, and water vapour: density, ionic
product, latent heats, saturation vapour pressures (Goff-Gratch) and
humidity variables derived from them.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Bandura, A. V., & Lvov, S. N. (2006). The ionization constant of
  water over wide ranges of temperature and density. Journal of
  Physical and Chemical Reference Data, 35(1), 15-30.
* Goff, J. A., & Gratch, S. (1946). Low-pressure properties of water
  from -160 to 212 F. Transactions of the American Society of Heating
  and Ventilating Engineers, 95-122.
* Henderson-Sellers, B. (1984). A new formula for latent heat of
  vaporization of water as a function of temperature. Quarterly Journal
  of the Royal Meteorological Society, 110(466), 1186-1190.
* Murphy, D. M., & Koop, T. (2005). Review of the vapour pressures of
  ice and supercooled water for atmospheric applications. Quarterly
  Journal of the Royal Meteorological Society, 131(608), 1539-1565.
* Wagner, W., & Pruss, A. (2002). The IAPWS formulation 1995 for the
  thermodynamic properties of ordinary water substance for general and
  scientific use. Journal of Physical and Chemical Reference Data,
  31(2), 387-535.

"""

__title__ = "Water and water vapour properties"
__author__ = "Manon E. B. Sabot"
__version__ = "1.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM import cst  # general constants
from CanopyLSM.Utils.errors import check_temperature, check_pressure
from CanopyLSM.Utils.errors import check_fraction


# ======================================================================

def water_density(T):

    """
    Density of saturated liquid water, IAPWS-95 auxiliary equation
    (Wagner & Pruss, 2002).

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    Returns:
    --------
    The density of water [kg m-3].

    """

    check_temperature(T)

    T_crit = 647.096  # critical temperature, degK
    rho_crit = 322.  # critical density, kg m-3
    theta = 1. - T / T_crit

    rho_ratio = (1. + 1.99274064 * theta ** (1. / 3.) +
                 1.09965342 * theta ** (2. / 3.) -
                 0.510839303 * theta ** (5. / 3.) -
                 1.7549349 * theta ** (16. / 3.) -
                 45.5170352 * theta ** (43. / 3.) -
                 6.74694450e5 * theta ** (110. / 3.))

    return rho_crit * rho_ratio


def water_dissoc(T):

    """
    Ionic product of water along the saturation curve (Bandura & Lvov,
    2006).

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    Returns:
    --------
    pKw, the negative log10 of the dissociation constant [-].

    """

    n = 6.
    rho_w = water_density(T) * 1.e-3  # g cm-3

    Z = rho_w * np.exp(-0.864671 + 8659.19 / T - 22786.2 / T ** 2. *
                       rho_w ** (2. / 3.))
    pKw_G = 0.61415 + 48251.33 / T - 67707.93 / T ** 2. + 10102100. / T ** 3.

    return (-2. * n * (np.log10(1. + Z) - Z / (Z + 1.) * rho_w *
            (0.642044 - 56.8534 / T - 0.375754 * rho_w)) + pKw_G +
            2. * np.log10(cst.MH2O))


def latent_heat_vap(T):

    """
    Molar latent heat of vaporisation, Henderson-Sellers (1984) above
    freezing and Murphy & Koop (2005) for supercooled water.

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    Returns:
    --------
    The latent heat of vaporisation [J mol-1].

    """

    check_temperature(T)

    return np.where(T < cst.T0,
                    56579. - 42.212 * T + np.exp(0.1149 * (281.6 - T)),
                    1.91846e6 * (T / (T - 33.91)) ** 2. * cst.MH2O)[()]


def latent_heat_sub(T):

    """
    Molar latent heat of sublimation of ice (Murphy & Koop, 2005),
    [J mol-1], with T in degK.

    """

    check_temperature(T)

    return (46782.5 + 35.8925 * T - 0.07414 * T ** 2. +
            541.5 * np.exp(-(T / 123.75) ** 2.))


def e_sat(T):

    """
    Saturation vapour pressure over a flat surface of liquid water,
    Goff-Gratch equation.

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    Returns:
    --------
    The saturation vapour pressure [Pa].

    """

    check_temperature(T)

    u = 373.16 / T
    v = T / 373.16
    log10_e = (-7.90298 * (u - 1.) + 5.02808 * np.log10(u) -
               1.3816e-7 * (10. ** (11.344 * (1. - v)) - 1.) +
               8.1328e-3 * (10. ** (-3.49149 * (u - 1.)) - 1.) +
               np.log10(1013.246) + 2.)

    return 10. ** log10_e


def e_sat_prime(T):

    """
    Analytical temperature derivative of the Goff-Gratch saturation
    vapour pressure over liquid water [Pa K-1], with T in degK.

    """

    dlne_dT = ((6790.4984743899386 +
                np.exp(12.068003566856145 - 3000.0022166762069 / T)) /
               T ** 2. - 5.02808 / T +
               np.exp(8.5004184700093912 - 0.069998191914793798 * T))

    return e_sat(T) * dlne_dT


def e_sat_ice(T):

    """
    Saturation vapour pressure over a flat surface of ice, Goff-Gratch
    equation.

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    Returns:
    --------
    The saturation vapour pressure over ice [Pa].

    """

    check_temperature(T)

    u = 273.16 / T
    v = T / 273.16
    log10_e = (-9.09718 * (u - 1.) - 3.56654 * np.log10(u) +
               0.876793 * (1. - v) + np.log10(6.1071) + 2.)

    return 10. ** log10_e


def e_sat_ice_prime(T):

    """
    Derivative of the saturation vapour pressure over ice [Pa K-1].

    """

    return e_sat_ice(T) * (5721.891003334422 / T ** 2. + 3.56654 / T -
                           0.007390871618983484)


def vapor_pressure_deficit(T, RH):

    """
    Vapour pressure deficit of air at temperature T [degK] and relative
    humidity RH [0-1], in Pa.

    """

    check_fraction(RH)

    return e_sat(T) * (1. - RH)


def vapor_mole_frac(T, P, RH):

    """
    Mole fraction of water vapour in moist air.

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    P: array or float
        ambient pressure [Pa]

    RH: array or float
        relative humidity [0-1]

    Returns:
    --------
    The water vapour mole fraction [mol mol-1].

    """

    check_pressure(P)
    check_fraction(RH)

    return e_sat(T) * RH / P


def mole_frac_vapor_deficit(T, P, RH):

    """
    Water vapour deficit expressed as a mole fraction [mol mol-1].

    """

    check_pressure(P)

    return vapor_pressure_deficit(T, RH) / P
