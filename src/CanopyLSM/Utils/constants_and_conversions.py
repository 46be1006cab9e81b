# -*- coding: utf-8 -*-

"""
General physical constants and unit conversion factors used throughout
the model. Single instances of both classes are created when the
package is imported (cst and conv).

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Tiesinga, E., Mohr, P. J., Newell, D. B., & Taylor, B. N. (2021).
  CODATA recommended values of the fundamental physical constants:
  2018. Reviews of Modern Physics, 93(2), 025010.
* Massman, W. J. (1998). A review of the molecular diffusivities of
  H2O, CO2, CH4, CO, O3, SO2, NH3, N2O, NO, and NO2 in air, O2 and N2
  near STP. Atmospheric Environment, 32(6), 1111-1127.
* Stimler, K., Montzka, S. A., Berry, J. A., Rudich, Y., & Yakir, D.
  (2010). Relationships between carbonyl sulfide (COS) and CO2 during
  leaf gas exchange. New Phytologist, 186(4), 869-878.

"""

__title__ = "Constants and unit conversions"
__author__ = "Manon E. B. Sabot"
__version__ = "2.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

class Constants(object):  # physical constants, CODATA 2018

    def __init__(self):

        # electromagnetic radiation
        self.c = 2.99792458e8  # speed of light in vacuum, m s-1
        self.h = 6.62607015e-34  # Planck constant, J s
        self.c_1 = 3.741771852e-16  # first radiation constant, W m2
        self.c_1L = 1.191042972e-16  # 1st rad. cst for spectral radiance
        self.c_2 = 1.438776877e-2  # second radiation constant, m K
        self.sigma = 5.670374419e-8  # Stefan-Boltzmann, W m-2 K-4

        # thermodynamics
        self.k_B = 1.380649e-23  # Boltzmann constant, J K-1
        self.N_A = 6.02214076e23  # Avogadro constant, mol-1
        self.R = 8.314462618  # molar gas constant, J mol-1 K-1

        # standard conditions & planetary boundary layer
        self.atm = 101325.  # standard atmospheric pressure, Pa
        self.g0 = 9.80665  # gravitational acceleration, m s-2
        self.T0 = 273.15  # zero Celsius, degK
        self.kappa = 0.4  # von Karman constant, unitless

        # molar masses
        self.MH2O = 18.01528e-3  # water, kg mol-1
        self.MCO2 = 44.010e-3  # carbon dioxide, kg mol-1
        self.Mair = 28.9645e-3  # dry air, kg mol-1

        # molar heat capacity of dry air at constant pressure
        self.Cp = 1.004e3 * self.Mair  # J mol-1 K-1

        # ambient O2 mole fraction
        self.O2 = 209460.  # umol mol-1

        # numerical zero
        self.zero = 1.e-17

        return


class ConvertUnits(object):  # multiplicative unit converters

    def __init__(self):

        # temperature
        self.C_2_K = 273.15  # degC to degK

        # metric prefixes
        self.MILI = 1.e3
        self.FROM_MILI = 1.e-3
        self.MEGA = 1.e6
        self.U = 1.e-6  # from micro
        self.FROM_U = 1.e6  # to micro

        # pressure
        self.KPA_2_PA = 1.e3
        self.PA_2_KPA = 1.e-3

        # diffusivity ratios of the boundary layer & stomata
        self.GbvGbc = 1.37  # H2O vs CO2 through the boundary layer
        self.GwvGc = 1.6  # H2O vs CO2 through stomata
        self.GbvGbcos = 1.56  # H2O vs COS through the boundary layer
        self.GwvGcos = 1.94  # H2O vs COS through stomata
        self.GbcvGb = 1. / self.GbvGbc
        self.GcvGw = 1. / self.GwvGc

        # PAR (umol m-2 s-1) to shortwave (W m-2), Meek et al. (1984)
        self.PAR_2_SW = 0.495785820525533
        self.PAR_2_SW_OFFSET = -0.08081308874566188  # W m-2

        return


# ======================================================================

def c2k(T):

    """
    Converts a temperature in degC to degK.

    """

    return T + ConvertUnits().C_2_K


def k2c(T):

    """
    Converts a temperature in degK to degC.

    """

    return T - ConvertUnits().C_2_K
