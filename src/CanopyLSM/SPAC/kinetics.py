# -*- coding: utf-8 -*-

"""
Temperature dependencies of rate constants and other chemical kinetics
needed in the model: the three temperature response laws (Q10,
Arrhenius, and enzyme with an optimum), gas solubilities in water, and
the hydrolysis of carbonyl sulfide.

Each rate parameter of the leaf is described by one of the TempDep
variants below, i.e. by its value at a reference temperature and the
law by which it scales with temperature.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Elliott, S., Lu, E., & Rowland, F. S. (1989). Rates and mechanisms
  for the hydrolysis of carbonyl sulfide in natural waters.
  Environmental Science & Technology, 23(4), 458-461.
* Johnson, F. H., Eyring, H., & Williams, R. W. (1942). The nature of
  enzyme inhibitions in bacterial luminescence: sulfanilamide,
  urethane, temperature and pressure. Journal of Cellular and
  Comparative Physiology, 20(3), 247-268.
* Medlyn et al. (2002). Temperature response of parameters of a
  biochemically based model of photosynthesis. II. A review of
  experimental data. Plant, Cell & Environment, 25(9), 1167-1179.
* Murray, C. N., & Riley, J. P. (1971). The solubility of gases in
  distilled water and sea water-IV. Carbon dioxide. Deep Sea Research,
  18(5), 533-541.
* Sun, W., Maseyk, K., Lett, C., & Seibt, U. (2015). A soil
  diffusion–reaction model for surface COS flux: COSSM v1. Geoscientific
  Model Development, 8(10), 3055-3070.

"""

__title__ = "Chemical kinetics and temperature dependencies"
__author__ = "Manon E. B. Sabot"
__version__ = "1.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import warnings  # out of range evaluations
from collections import namedtuple  # immutable parameter records
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM import cst  # general constants
from CanopyLSM.Utils.errors import TemperatureRangeWarning
from CanopyLSM.Utils.errors import check_temperature
from CanopyLSM.SPAC.water import water_dissoc
from CanopyLSM.SPAC.canatm import air_molar


# ======================================================================

# ~~~ Temperature response laws ~~~

def arrhenius(E, Tref, T):

    """
    Arrhenius temperature response, normalised to 1 at Tref.

    Arguments:
    ----------
    E: float
        activation energy [J mol-1]

    Tref: float
        reference temperature [degK]

    T: array or float
        temperature [degK]

    Returns:
    --------
    The rate ratio k(T) / k(Tref) [-].

    """

    check_temperature(T)

    return np.exp(E * (T - Tref) / (cst.R * Tref * T))


def q10_temp_dep(q10, Tref, T):

    """
    Q10 temperature response, normalised to 1 at Tref [-].

    """

    check_temperature(T)

    return q10 ** ((T - Tref) / 10.)


def _enzyme_activity(T, dGa, dHd, dSd):

    return (np.exp(-dGa / (cst.R * T)) /
            (1. + np.exp((dSd - dHd / T) / cst.R)))


def enzyme_temp_dep(dGa, dHd, dSd, Tref, T):

    """
    Temperature response of an enzyme-catalysed rate that deactivates
    at high temperature (Johnson et al., 1942), normalised to 1 at Tref.

    Arguments:
    ----------
    dGa: float
        Gibbs energy of activation [J mol-1]

    dHd: float
        enthalpy of deactivation [J mol-1]

    dSd: float
        entropy of deactivation [J mol-1 K-1]

    Tref: float
        reference temperature [degK]

    T: array or float
        temperature [degK]

    Returns:
    --------
    The rate ratio k(T) / k(Tref) [-].

    """

    check_temperature(T)

    return (_enzyme_activity(T, dGa, dHd, dSd) /
            _enzyme_activity(Tref, dGa, dHd, dSd))


def enzyme_temp_optimum(dGa, dHd, dSd):

    """
    Temperature [degK] at which the enzyme response peaks.

    """

    return dHd / (dSd + cst.R * np.log(dHd / dGa - 1.))


# ~~~ TempDep variants ~~~

class _TempDep(object):

    __slots__ = ()

    def rate_ratio(self, T):

        raise NotImplementedError

    def evaluate(self, T):

        """
        Value of the rate parameter at temperature T [degK]. A
        TemperatureRangeWarning is issued if T falls outside of the
        range over which the law applies.

        """

        lo, hi = self.temp_range

        if np.any(np.asarray(T) < lo) or np.any(np.asarray(T) > hi):
            warnings.warn('%s evaluated at %s degK, outside of its [%s, %s] '
                          'degK range' % (type(self).__name__, T, lo, hi),
                          TemperatureRangeWarning, stacklevel=2)

        return self.ref_value * self.rate_ratio(T)


class Q10(_TempDep, namedtuple('Q10', ['ref_value', 'q10', 'temp_ref',
                                       'temp_range'],
                               defaults=(298.15, (250., 330.)))):

    __slots__ = ()

    def rate_ratio(self, T):

        return q10_temp_dep(self.q10, self.temp_ref, T)


class Arrhenius(_TempDep, namedtuple('Arrhenius', ['ref_value', 'E_act',
                                                   'temp_ref', 'temp_range'],
                                     defaults=(298.15, (250., 330.)))):

    __slots__ = ()

    def rate_ratio(self, T):

        return arrhenius(self.E_act, self.temp_ref, T)


class EnzymeOptimum(_TempDep, namedtuple('EnzymeOptimum',
                                         ['ref_value', 'dGa', 'dHd', 'dSd',
                                          'temp_ref', 'temp_range'],
                                         defaults=(298.15, (250., 330.)))):

    __slots__ = ()

    def rate_ratio(self, T):

        return enzyme_temp_dep(self.dGa, self.dHd, self.dSd, self.temp_ref, T)

    @property
    def temp_optimum(self):

        return enzyme_temp_optimum(self.dGa, self.dHd, self.dSd)


def eval_temp_dep(tempdep, T):

    """
    Evaluates any of the TempDep variants at temperature T [degK].

    """

    if not isinstance(tempdep, (Q10, Arrhenius, EnzymeOptimum)):
        raise TypeError('not a temperature dependence: %r' % (tempdep, ))

    return tempdep.evaluate(T)


# ======================================================================

# ~~~ Solubility ~~~

def solub_co2(T, salinity=0., bunsen=True):

    """
    Solubility of CO2 in natural waters (Murray & Riley, 1971).

    Arguments:
    ----------
    T: array or float
        water temperature [degK]

    salinity: array or float
        salinity [g kg-1]

    bunsen: bool
        if True, the dimensionless Bunsen coefficient is returned,
        otherwise the Henry coefficient [mol L-1 atm-1]

    Returns:
    --------
    The solubility coefficient.

    """

    check_temperature(T)

    t = T * 1.e-2
    kcp = np.exp(-58.0931 + 90.5069 / t + 22.2940 * np.log(t) +
                 salinity * (0.027766 - 0.025888 * t + 0.0050578 * t * t))

    if bunsen:
        return kcp * 1.e3 / air_molar(T, cst.atm)

    return kcp


def solub_cos(T, bunsen=True):

    """
    Solubility of COS in pure water (Elliott et al., 1989), either
    Bunsen [-] or Henry [mol L-1 atm-1] coefficient, T in degK.

    """

    check_temperature(T)

    k = T * np.exp(4050.32 / T - 20.0007)

    if bunsen:
        return k

    return k * air_molar(T, cst.atm) * 1.e-3


# ~~~ Reactions ~~~

def hydrolysis_cos(T, pH=7., seawater=False):

    """
    First-order rate constant of COS hydrolysis in natural waters,
    fitted by Sun et al. (2015) to Elliott et al. (1989). Applicable
    between 5 and 30 degC, for pH 4-10.

    Arguments:
    ----------
    T: array or float
        water temperature [degK]

    pH: array or float
        pH of the water

    seawater: bool
        True for seawater, False for fresh water

    Returns:
    --------
    The hydrolysis rate constant [s-1].

    """

    c_OH = 10. ** (pH - water_dissoc(T))  # hydroxide ions, mol L-1
    dT = 1. / T - 1. / 298.15

    if seawater:
        return (1.63838819502e-5 * np.exp(-6444.02904777 * dT) +
                11.7115101829 * np.exp(-2427.27401921 * dT) * c_OH)

    return (2.11834513803e-5 * np.exp(-10418.3722377 * dT) +
            14.16881179 * np.exp(-6469.11889197 * dT) * c_OH)
