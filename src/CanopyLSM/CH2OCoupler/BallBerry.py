# -*- coding: utf-8 -*-

"""
The Ball-Berry empirical model of stomatal conductance, which responds
to the relative humidity at the leaf surface.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
----------
* Ball, J. T., Woodrow, I. E., & Berry, J. A. (1987). A model
  predicting stomatal conductance and its contribution to the control
  of photosynthesis under different environmental conditions. In
  Progress in photosynthesis research (pp. 221-224). Springer,
  Dordrecht.
* Collatz et al. (1991). Regulation of stomatal conductance and
  transpiration: a physiological model of canopy processes. Agric. For.
  Meteorol, 54, 107-136.

"""

__title__ = "The Ball-Berry model"
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

def stom_cond_ball_berry(An, Cs, rh_s, m, g_min):

    """
    Ball et al. (1987) stomatal conductance, floored to the minimum
    conductance.

    Arguments:
    ----------
    An: array or float
        net assimilation rate [umol m-2 s-1]

    Cs: array or float
        CO2 concentration at the leaf surface [umol mol-1]

    rh_s: array or float
        relative humidity at the leaf surface [0-1]

    m: float
        slope parameter [-]

    g_min: float
        minimum stomatal conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    The stomatal conductance to water vapour [mol m-2 s-1].

    """

    return np.maximum(m * An * rh_s / Cs, g_min)


class BallBerry(namedtuple('BallBerry', ['m', 'g_min'])):

    __slots__ = ()

    def validate(self):

        if not (self.m >= 0. and self.g_min > 0.):
            raise InvalidInput('Ball-Berry parameters must be positive: %r' %
                               (self, ))

        return self

    def evaluate(self, An, Cs, rh_s, vpd):

        return stom_cond_ball_berry(An, Cs, rh_s, self.m, self.g_min)
