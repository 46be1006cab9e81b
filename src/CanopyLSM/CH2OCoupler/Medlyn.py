# -*- coding: utf-8 -*-

"""
The Medlyn (USO) model of stomatal conductance, i.e. the optimal
stomatal behaviour model for which the marginal water cost of carbon
gain is constant.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
----------
* Medlyn, B. E., Duursma, R. A., Eamus, D., Ellsworth, D. S., Prentice,
  I. C., Barton, C. V., ... & Wingate, L. (2011). Reconciling the
  optimal and empirical approaches to modelling stomatal conductance.
  Global Change Biology, 17(6), 2134-2144.

"""

__title__ = "The USO model"
__author__ = "Manon E. B. Sabot"
__version__ = "3.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
from collections import namedtuple  # immutable parameter records
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM import conv  # unit converter
from CanopyLSM.Utils.errors import InvalidInput


# ======================================================================

def stom_cond_medlyn(An, Cs, vpd, g1, g_min):

    """
    Medlyn et al. (2011) stomatal conductance, floored to the minimum
    conductance.

    Arguments:
    ----------
    An: array or float
        net assimilation rate [umol m-2 s-1]

    Cs: array or float
        CO2 concentration at the leaf surface [umol mol-1]

    vpd: array or float
        leaf-to-air vapour pressure deficit [Pa]

    g1: float
        slope parameter [Pa0.5]

    g_min: float
        minimum stomatal conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    The stomatal conductance to water vapour [mol m-2 s-1].

    """

    raw = conv.GwvGc * (1. + g1 / np.sqrt(vpd)) * An / Cs

    return np.maximum(raw, g_min)


class Medlyn(namedtuple('Medlyn', ['g1', 'g_min', 'vpd_min'],
                        defaults=(50., ))):

    """
    g1: slope parameter [Pa0.5], i.e. 4 kPa0.5 is ~126.5 Pa0.5
    g_min: minimum stomatal conductance to water vapour [mol m-2 s-1]
    vpd_min: leaf VPD below which the model is not valid [Pa]

    """

    __slots__ = ()

    def validate(self):

        if not (self.g1 >= 0. and self.g_min > 0. and self.vpd_min > 0.):
            raise InvalidInput('Medlyn parameters must be positive: %r' %
                               (self, ))

        return self

    def evaluate(self, An, Cs, rh_s, vpd):

        return stom_cond_medlyn(An, Cs, np.maximum(self.vpd_min, vpd),
                                self.g1, self.g_min)
