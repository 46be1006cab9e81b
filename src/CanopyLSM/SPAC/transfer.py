# -*- coding: utf-8 -*-

"""
Molecular transfer properties of moist air and water: viscosities,
thermal conductivities, heat capacities and diffusivities, along with
the dimensionless numbers used in boundary-layer theory. All the
properties of moist air are mixed from their dry air and water vapour
counterparts following Tsilingiris (2008).

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Massman, W. J. (1998). A review of the molecular diffusivities of
  H2O, CO2, CH4, CO, O3, SO2, NH3, N2O, NO, and NO2 in air, O2 and N2
  near STP. Atmospheric Environment, 32(6), 1111-1127.
* Moldrup, P., Olesen, T., Komatsu, T., Schjønning, P., & Rolston, D.
  E. (2001). Tortuosity, diffusivity, and permeability in the soil
  liquid and gaseous phases. Soil Science Society of America Journal,
  65(3), 613-623.
* Clapp, R. B., & Hornberger, G. M. (1978). Empirical equations for
  some soil hydraulic properties. Water Resources Research, 14(4),
  601-604.
* Jähne, B., Heinz, G., & Dietrich, W. (1987). Measurement of the
  diffusion coefficients of sparingly soluble gases in water. Journal
  of Geophysical Research: Oceans, 92(C10), 10767-10776.
* Tsilingiris, P. T. (2008). Thermophysical and transport properties of
  humid air at temperature range between 0 and 100°C. Energy Conversion
  and Management, 49(5), 1098-1110.
* Ulshöfer, V. S., Uher, G., & Andreae, M. O. (1995). Evidence for a
  winter sink of atmospheric carbonyl sulfide in the northeast Atlantic
  Ocean. Geophysical Research Letters, 22(19), 2601-2604.

"""

__title__ = "Momentum, heat, and mass transfer properties"
__author__ = "Manon E. B. Sabot"
__version__ = "1.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
from enum import Enum  # closed sets of supported species
from types import MappingProxyType  # read-only lookup tables
import numpy as np  # array manipulations, math operators
from numpy.polynomial import polynomial as npp  # polynomial fits

# own modules
from CanopyLSM import cst  # general constants
from CanopyLSM.Utils.errors import InvalidInput, check_temperature
from CanopyLSM.Utils.errors import check_pressure
from CanopyLSM.SPAC.water import vapor_mole_frac
from CanopyLSM.SPAC.canatm import air_density


# ======================================================================

class GasSpecies(Enum):

    H2O = 'h2o'
    CO2 = 'co2'
    CH4 = 'ch4'
    CO = 'co'
    SO2 = 'so2'
    O3 = 'o3'
    NH3 = 'nh3'
    N2O = 'n2o'
    NO = 'no'
    NO2 = 'no2'
    N2 = 'n2'
    O2 = 'o2'
    COS = 'cos'
    HE = 'he'
    NE = 'ne'
    KR = 'kr'
    XE = 'xe'
    RN = 'rn'
    H2 = 'h2'


class SoilTexture(Enum):

    SAND = 'sand'
    LOAMY_SAND = 'loamy sand'
    SANDY_LOAM = 'sandy loam'
    SILT_LOAM = 'silt loam'
    LOAM = 'loam'
    SANDY_CLAY_LOAM = 'sandy clay loam'
    SILTY_CLAY_LOAM = 'silty clay loam'
    CLAY_LOAM = 'clay loam'
    SANDY_CLAY = 'sandy clay'
    SILTY_CLAY = 'silty clay'
    CLAY = 'clay'


# diffusivities in air at STP, m2 s-1 (Massman, 1998), COS from the
# CO2 value and the 1.21 diffusivity ratio of Stimler et al. (2010)
DIFFUS_AIR_STP = MappingProxyType({
    GasSpecies.H2O: 2.178e-5,
    GasSpecies.CO2: 1.381e-5,
    GasSpecies.CH4: 1.952e-5,
    GasSpecies.CO: 1.807e-5,
    GasSpecies.SO2: 1.089e-5,
    GasSpecies.O3: 1.444e-5,
    GasSpecies.NH3: 1.978e-5,
    GasSpecies.N2O: 1.436e-5,
    GasSpecies.NO: 1.802e-5,
    GasSpecies.NO2: 1.361e-5,
    GasSpecies.N2: 1.788e-5,
    GasSpecies.O2: 1.820e-5,
    GasSpecies.COS: 1.381e-5 / 1.21})

# Arrhenius parameters of the diffusivities in water: pre-exponential
# factor (m2 s-1) & activation energy (J mol-1), Jähne et al. (1987),
# Ulshöfer et al. (1995) for COS
DIFFUS_WATER_ARRH = MappingProxyType({
    GasSpecies.HE: (818.e-9, 11.70e3),
    GasSpecies.NE: (1608.e-9, 14.84e3),
    GasSpecies.KR: (6393.e-9, 20.20e3),
    GasSpecies.XE: (9007.e-9, 21.61e3),
    GasSpecies.RN: (15877.e-9, 23.26e3),
    GasSpecies.H2: (3338.e-9, 16.06e3),
    GasSpecies.CH4: (3047.e-9, 18.36e3),
    GasSpecies.CO2: (5019.e-9, 19.51e3),
    GasSpecies.COS: (4.735872481253359e-6, 19336.20405260121),
    GasSpecies.CO: (0.407e-4, 24518.24),
    GasSpecies.NO: (39.8e-4, 34978.24)})

# Clapp & Hornberger (1978) pore-size distribution parameter b
SOIL_SHAPE_PARAM = MappingProxyType({
    SoilTexture.SAND: 4.05,
    SoilTexture.LOAMY_SAND: 4.38,
    SoilTexture.SANDY_LOAM: 4.9,
    SoilTexture.SILT_LOAM: 5.30,
    SoilTexture.LOAM: 5.39,
    SoilTexture.SANDY_CLAY_LOAM: 7.12,
    SoilTexture.SILTY_CLAY_LOAM: 7.75,
    SoilTexture.CLAY_LOAM: 8.52,
    SoilTexture.SANDY_CLAY: 10.4,
    SoilTexture.SILTY_CLAY: 10.4,
    SoilTexture.CLAY: 11.4})


def _lookup(table, key, kind):

    """
    Fetches a table entry by enum member or by its string value.

    """

    try:
        member = type(next(iter(table)))(key)

        return table[member]

    except (ValueError, KeyError):
        raise InvalidInput('unsupported %s: %s' % (kind, key))


# ======================================================================

# ~~~ Momentum transfer ~~~

def dyn_visc_dryair(T):

    """
    Dynamic viscosity of dry air [Pa s], with T in degK.

    """

    check_temperature(T)

    return npp.polyval(T, (-9.8601e-1, 9.080125e-2, -1.17635575e-4,
                           1.2349703e-7, -5.7971299e-11)) * 1.e-6


def dyn_visc_vapor(T):

    """
    Dynamic viscosity of water vapour [Pa s], with T in degK.

    """

    check_temperature(T)

    return -2.869368957406498e-6 + 4.000549451e-8 * T


def viscosity_interaction_terms(T):

    """
    Sutherland-Wassiljewa interaction parameters of the dry air - water
    vapour mixture.

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    Returns:
    --------
    phi_dw: array or float
        dry air - water vapour interaction term [-]

    phi_wd: array or float
        water vapour - dry air interaction term [-]

    """

    mu_d = dyn_visc_dryair(T)
    mu_w = dyn_visc_vapor(T)
    Md = cst.Mair
    Mw = cst.MH2O

    phi_dw = (2. ** 0.5 / 4. * (1. + Md / Mw) ** -0.5 *
              (1. + (mu_d / mu_w) ** 0.5 * (Mw / Md) ** 0.25) ** 2.)
    phi_wd = (2. ** 0.5 / 4. * (1. + Mw / Md) ** -0.5 *
              (1. + (mu_w / mu_d) ** 0.5 * (Md / Mw) ** 0.25) ** 2.)

    return phi_dw, phi_wd


def _mix(x, prop_d, prop_w, phi_dw, phi_wd):

    return ((1. - x) * prop_d / ((1. - x) + x * phi_dw) +
            x * prop_w / (x + (1. - x) * phi_wd))


def dyn_visc_moistair(T, P, RH):

    """
    Dynamic viscosity of moist air.

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    P: array or float
        air pressure [Pa]

    RH: array or float
        relative humidity [0-1]

    Returns:
    --------
    The dynamic viscosity of moist air [Pa s].

    """

    x = vapor_mole_frac(T, P, RH)
    phi_dw, phi_wd = viscosity_interaction_terms(T)

    return _mix(x, dyn_visc_dryair(T), dyn_visc_vapor(T), phi_dw, phi_wd)


def kin_visc_moistair(T, P, RH):

    """
    Kinematic viscosity of moist air [m2 s-1].

    """

    return dyn_visc_moistair(T, P, RH) / air_density(T, P, RH)


# ~~~ Heat transfer ~~~

def therm_cond_dryair(T):

    """
    Thermal conductivity of dry air [W m-1 K-1], with T in degK.

    """

    check_temperature(T)

    return npp.polyval(T, (-2.276501e-3, 1.2598485e-4, -1.4815235e-7,
                           1.73550646e-10, -1.066657e-13, 2.47663035e-17))


def therm_cond_vapor(T):

    """
    Thermal conductivity of water vapour [W m-1 K-1], with T in degK.

    """

    check_temperature(T)

    return npp.polyval(T - cst.T0, (1.761758242e-2, 5.558941059e-5,
                                    1.663336663e-7))


def therm_cond_moistair(T, P, RH):

    """
    Thermal conductivity of moist air [W m-1 K-1].

    """

    x = vapor_mole_frac(T, P, RH)
    phi_dw, phi_wd = viscosity_interaction_terms(T)

    return _mix(x, therm_cond_dryair(T), therm_cond_vapor(T), phi_dw,
                phi_wd)


def heat_cap_dryair(T):

    """
    Isobaric molar heat capacity of dry air [J mol-1 K-1], with T in
    degK.

    """

    check_temperature(T)

    return npp.polyval(T, (1.03409, -0.284887e-3, 0.7816818e-6,
                           -0.4970786e-9, 0.1077024e-12)) * 1.e3 * cst.Mair


def heat_cap_vapor(T):

    """
    Isobaric molar heat capacity of water vapour [J mol-1 K-1], with T
    in degK.

    """

    check_temperature(T)

    return npp.polyval(T - cst.T0, (1.86910989, -2.578421578e-4,
                                    1.941058941e-5)) * 1.e3 * cst.MH2O


def heat_cap_moistair(T, P, RH):

    """
    Isobaric molar heat capacity of moist air.

    Arguments:
    ----------
    T: array or float
        temperature [degK]

    P: array or float
        air pressure [Pa]

    RH: array or float
        relative humidity [0-1]

    Returns:
    --------
    The molar heat capacity of moist air [J mol-1 K-1].

    """

    x = vapor_mole_frac(T, P, RH)

    return (1. - x) * heat_cap_dryair(T) + x * heat_cap_vapor(T)


def heat_cap_mass_moistair(T, P, RH):

    """
    Isobaric specific heat capacity of moist air [J kg-1 K-1].

    """

    x = vapor_mole_frac(T, P, RH)

    return (heat_cap_moistair(T, P, RH) /
            ((1. - x) * cst.Mair + x * cst.MH2O))


def therm_diff_moistair(T, P, RH):

    """
    Thermal diffusivity of moist air [m2 s-1].

    """

    return (therm_cond_moistair(T, P, RH) /
            (air_density(T, P, RH) * heat_cap_mass_moistair(T, P, RH)))


def prandtl(T, P, RH):

    """
    Prandtl number of moist air, the ratio of its momentum diffusivity
    to its thermal diffusivity [-].

    """

    return (dyn_visc_moistair(T, P, RH) * heat_cap_mass_moistair(T, P, RH) /
            therm_cond_moistair(T, P, RH))


# ~~~ Mass transfer ~~~

def diffus_air_stp(species):

    """
    Molecular diffusivity of a gas species in air at 273.15 K and 1 atm
    [m2 s-1]. Raises InvalidInput for a species with no tabulated value.

    """

    return _lookup(DIFFUS_AIR_STP, species, 'gas species in air')


def diffus_air(species, T, P):

    """
    Molecular diffusivity of a gas species in air, scaled from its STP
    value (Massman, 1998).

    Arguments:
    ----------
    species: GasSpecies or str
        the diffusing gas, e.g. 'h2o', 'co2'

    T: array or float
        temperature [degK]

    P: array or float
        air pressure [Pa]

    Returns:
    --------
    The diffusivity [m2 s-1].

    """

    check_temperature(T)
    check_pressure(P)

    return diffus_air_stp(species) * (cst.atm / P) * (T / cst.T0) ** 1.81


def diffus_water(species, T):

    """
    Molecular diffusivity of a dissolved gas species in water [m2 s-1],
    Arrhenius type dependency on T [degK].

    """

    check_temperature(T)
    preexp, Ea = _lookup(DIFFUS_WATER_ARRH, species, 'gas species in water')

    return preexp * np.exp(-Ea / (cst.R * T))


def diffus_soil_air(species, texture, T, theta_sat, theta_w, P=cst.atm):

    """
    Effective diffusivity of a gas through the soil air-filled pores,
    including the tortuosity factor of Moldrup et al. (2001).

    Arguments:
    ----------
    species: GasSpecies or str
        the diffusing gas, e.g. 'co2'

    texture: SoilTexture or str
        soil texture class, e.g. 'loam'

    T: array or float
        soil temperature [degK]

    theta_sat: float
        soil porosity [m3 m-3]

    theta_w: array or float
        water-filled porosity [m3 m-3]

    P: array or float
        air pressure [Pa]

    Returns:
    --------
    The gaseous phase diffusivity [m2 s-1].

    """

    b = _lookup(SOIL_SHAPE_PARAM, texture, 'soil texture')
    theta_a = theta_sat - theta_w  # air-filled porosity
    tau_a = theta_a * (theta_a / theta_sat) ** (3. / b)  # tortuosity

    return diffus_air(species, T, P) * theta_a * tau_a


def diffus_soil_water(species, texture, T, theta_sat, theta_w):

    """
    Effective diffusivity of a dissolved gas through soil water [m2
    s-1] (Moldrup et al., 2001).

    """

    b = _lookup(SOIL_SHAPE_PARAM, texture, 'soil texture')
    tau_w = theta_w * (theta_w / theta_sat) ** (b / 3. - 1.)  # tortuosity

    return diffus_water(species, T) * theta_w * tau_w


def diffus_soil(species, texture, T, theta_sat, theta_w, P=cst.atm):

    """
    Total diffusivity of a gas through the soil gaseous and aqueous
    phases [m2 s-1]. The species must be tabulated both in air and in
    water (e.g. CO2, CH4, CO, NO, COS).

    """

    return (diffus_soil_water(species, texture, T, theta_sat, theta_w) +
            diffus_soil_air(species, texture, T, theta_sat, theta_w, P))
