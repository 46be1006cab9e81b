# -*- coding: utf-8 -*-

"""
Support functions for the coupling schemes: combination of the leaf
conductances in series, and the resulting fluxes and concentrations.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Medlyn et al. (2007). Linking leaf and tree water use with an
  individual-tree model. Tree Physiology, 27(12), 1687-1699.
* Stimler, K., Montzka, S. A., Berry, J. A., Rudich, Y., & Yakir, D.
  (2010). Relationships between carbonyl sulfide (COS) and CO2 during
  leaf gas exchange. New Phytologist, 186(4), 869-878.

"""

__title__ = "useful ancillary coupling functions"
__author__ = "Manon Sabot"
__version__ = "2.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM import conv, cst  # unit converter & general constants


# ======================================================================

def _in_series(*g):

    """
    Total conductance of conductances in series, zero as soon as one of
    them is zero.

    """

    if any(np.isclose(gi, 0., rtol=cst.zero, atol=cst.zero) for gi in g):
        return 0.

    return 1. / sum(1. / gi for gi in g)


def total_cond_vapor(gbW, gsw):

    """
    Total leaf conductance to water vapour, the boundary layer and
    stomatal conductances acting in series (Medlyn et al., 2007).

    Arguments:
    ----------
    gbW: float
        boundary layer conductance to water vapour [mol m-2 s-1]

    gsw: float
        stomatal conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    The total conductance to water vapour [mol m-2 s-1].

    """

    return _in_series(gbW, gsw)


def total_cond_co2(gbW, gsw, gmc=None):

    """
    Total leaf conductance to CO2 from the free air to the chloroplasts.
    The mesophyll conductance is left out when it is None or infinite.

    Arguments:
    ----------
    gbW: float
        boundary layer conductance to water vapour [mol m-2 s-1]

    gsw: float
        stomatal conductance to water vapour [mol m-2 s-1]

    gmc: float
        mesophyll conductance to CO2 [mol m-2 s-1]

    Returns:
    --------
    The total conductance to CO2 [mol m-2 s-1].

    """

    if gmc is None or np.isinf(gmc):
        return _in_series(gbW * conv.GbcvGb, gsw * conv.GcvGw)

    return _in_series(gbW * conv.GbcvGb, gsw * conv.GcvGw, gmc)


def total_cond_cos(gbW, gsw, gic=None):

    """
    Total leaf conductance to COS (Stimler et al., 2010), gic being the
    optional internal conductance set by carbonic anhydrase activity
    [mol m-2 s-1].

    """

    gbcos = gbW / conv.GbvGbcos
    gscos = gsw / conv.GwvGcos

    if gic is None or np.isinf(gic):
        return _in_series(gbcos, gscos)

    return _in_series(gbcos, gscos, gic)


def transpiration(P, vpd, gbW, gsw):

    """
    Leaf transpiration rate.

    Arguments:
    ----------
    P: float
        air pressure [Pa]

    vpd: float
        leaf-to-air vapour pressure deficit [Pa]

    gbW: float
        boundary layer conductance to water vapour [mol m-2 s-1]

    gsw: float
        stomatal conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    The transpiration rate [mol m-2 s-1].

    """

    return total_cond_vapor(gbW, gsw) * vpd / P


def internal_co2(CO2, An, gtc):

    """
    CO2 concentration at the carboxylation site [umol mol-1], from the
    ambient concentration CO2 [umol mol-1], the net assimilation rate
    An [umol m-2 s-1], and the total conductance to CO2 gtc [mol m-2
    s-1].

    """

    return CO2 - An / gtc


def surface_co2(CO2, An, gbW):

    """
    CO2 concentration at the leaf surface [umol mol-1].

    """

    return CO2 - An * conv.GbvGbc / gbW
