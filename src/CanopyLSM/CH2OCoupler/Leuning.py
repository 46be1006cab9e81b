# -*- coding: utf-8 -*-

"""
The Leuning model of stomatal conductance, a Ball-Berry type model
where the humidity response is expressed through the leaf VPD.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
----------
* Leuning, R. (1995). A critical appraisal of a combined
  stomatal‐photosynthesis model for C3 plants. Plant, Cell &
  Environment, 18(4), 339-355.

"""

__title__ = "The Leuning model"
__author__ = "Manon E. B. Sabot"
__version__ = "1.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
from collections import namedtuple  # immutable parameter records
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM.Utils.errors import InvalidInput


# ======================================================================

def stom_cond_leuning(An, Cs, vpd, a1, vpd_0, g_min):

    """
    Leuning (1995) stomatal conductance, floored to the minimum
    conductance.

    Arguments:
    ----------
    An: array or float
        net assimilation rate [umol m-2 s-1]

    Cs: array or float
        CO2 concentration at the leaf surface [umol mol-1]

    vpd: array or float
        leaf-to-air vapour pressure deficit [Pa]

    a1: float
        slope parameter [-]

    vpd_0: float
        empirical sensitivity of the stomata to the VPD [Pa]

    g_min: float
        minimum stomatal conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    The stomatal conductance to water vapour [mol m-2 s-1].

    """

    return np.maximum(a1 * An / Cs / (1. + vpd / vpd_0), g_min)


class Leuning(namedtuple('Leuning', ['a1', 'g_min', 'vpd_0', 'vpd_min'],
                         defaults=(1500., 0.))):

    """
    a1: slope parameter [-]
    g_min: minimum stomatal conductance to water vapour [mol m-2 s-1]
    vpd_0: VPD sensitivity [Pa]
    vpd_min: floor applied to the leaf VPD [Pa], dew is ignored

    """

    __slots__ = ()

    def validate(self):

        if not (self.a1 >= 0. and self.g_min > 0. and self.vpd_0 > 0. and
                self.vpd_min >= 0.):
            raise InvalidInput('Leuning parameters must be positive: %r' %
                               (self, ))

        return self

    def evaluate(self, An, Cs, rh_s, vpd):

        return stom_cond_leuning(An, Cs, np.maximum(self.vpd_min, vpd),
                                 self.a1, self.vpd_0, self.g_min)
