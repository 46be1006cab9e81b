# -*- coding: utf-8 -*-

"""
Immutable records describing the environment a leaf is exposed to,
the leaf itself, and the solution of its coupled energy, water, and
carbon balance.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

"""

__title__ = "Environment and leaf states"
__author__ = "Manon E. B. Sabot"
__version__ = "1.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
from collections import namedtuple  # immutable records
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM.Utils.errors import InvalidInput, check_temperature
from CanopyLSM.Utils.errors import check_pressure, check_fraction
from CanopyLSM.SPAC.radiation import PAR_to_shortwave


# ======================================================================

class EnvironmentState(namedtuple('EnvironmentState',
                                  ['Tair', 'Patm', 'RH', 'u', 'PPFD', 'CO2',
                                   'O2', 'sw_rad', 'lw_down'],
                                  defaults=(None, None))):

    """
    Air conditions around the leaf.

    Tair: air temperature [degK]
    Patm: air pressure [Pa]
    RH: relative humidity [0-1]
    u: wind speed [m s-1]
    PPFD: photosynthetic photon flux density [umol m-2 s-1]
    CO2: ambient CO2 mole fraction [umol mol-1]
    O2: ambient O2 mole fraction [umol mol-1]
    sw_rad: incoming shortwave radiation [W m-2], derived from PPFD when
            None
    lw_down: incoming long-wave radiation [W m-2], ignored when None

    """

    __slots__ = ()

    @property
    def shortwave(self):

        if self.sw_rad is None:
            return PAR_to_shortwave(self.PPFD)

        return self.sw_rad

    def validate(self):

        check_temperature(self.Tair, name='air temperature')
        check_pressure(self.Patm, name='air pressure')
        check_fraction(self.RH)

        if not self.u > 0.:
            raise InvalidInput('wind speed must be > 0 m s-1, got %s' %
                               (self.u, ))

        if not (self.PPFD >= 0. and self.CO2 > 0. and self.O2 >= 0.):
            raise InvalidInput('PPFD and gas mole fractions must be > 0')

        if self.sw_rad is not None and not self.sw_rad >= 0.:
            raise InvalidInput('shortwave radiation must be >= 0 W m-2')

        if self.lw_down is not None and not self.lw_down >= 0.:
            raise InvalidInput('long-wave radiation must be >= 0 W m-2')

        return self


class LeafGeometry(namedtuple('LeafGeometry',
                              ['d_leaf', 'emissivity', 'sw_absorptance'],
                              defaults=(0.97, 0.5))):

    """
    d_leaf: characteristic leaf dimension [m]
    emissivity: long-wave emissivity (and absorptivity) [0-1]
    sw_absorptance: fraction of the incoming shortwave absorbed [0-1]

    """

    __slots__ = ()

    def validate(self):

        if not self.d_leaf > 0.:
            raise InvalidInput('leaf dimension must be > 0 m, got %s' %
                               (self.d_leaf, ))

        check_fraction(self.emissivity, name='leaf emissivity')
        check_fraction(self.sw_absorptance, name='leaf absorptance')

        return self


# Tleaf [degK], Ci & Cs [umol mol-1], An [umol m-2 s-1], conductances
# [mol m-2 s-1], E [mol m-2 s-1], energy fluxes [W m-2], vpd_leaf [Pa]
LeafState = namedtuple('LeafState', ['Tleaf', 'Ci', 'Cs', 'An', 'gs', 'gbH',
                                     'gbW', 'E', 'Rnet', 'H', 'LE', 'residual',
                                     'vpd_leaf', 'rubisco_limited'])


def is_finite_state(state):

    """
    Checks that none of the numerical fields of a LeafState is NaN or
    infinite.

    """

    return all(np.isfinite(getattr(state, f)) for f in state._fields
               if f != 'rubisco_limited')
