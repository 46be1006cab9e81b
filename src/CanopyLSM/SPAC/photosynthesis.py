# -*- coding: utf-8 -*-

"""
Leaf photosynthesis: the Farquhar et al. (1980) model of C3 carbon
assimilation, with the electron transport rate given by the empirical
non-rectangular hyperbola, and an optional triose phosphate
utilisation (substrate) limitation.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Bernacchi, C. J., Singsaas, E. L., Pimentel, C., Portis Jr, A. R., &
  Long, S. P. (2001). Improved temperature response functions for
  models of Rubisco‐limited photosynthesis. Plant, Cell & Environment,
  24(2), 253-259.
* Farquhar, G. D., von Caemmerer, S. V., & Berry, J. A. (1980). A
  biochemical model of photosynthetic CO2 assimilation in leaves of C3
  species. Planta, 149(1), 78-90.
* Harley, P. C., Thomas, R. B., Reynolds, J. F., & Strain, B. R.
  (1992). Modelling photosynthesis of cotton grown in elevated CO2.
  Plant, Cell & Environment, 15(3), 271-282.
* von Caemmerer, S. (2000). Biochemical models of leaf photosynthesis.
  CSIRO publishing.

"""

__title__ = "Leaf level photosynthetic processes"
__author__ = "Manon E. B. Sabot"
__version__ = "4.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
from collections import namedtuple  # immutable parameter records
from enum import Enum  # photosynthetic pathways
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM import cst  # general constants
from CanopyLSM.Utils.errors import PhotorespirationDominant


# ======================================================================

class PhotosynPathway(Enum):

    C3 = 'C3'
    C4 = 'C4'
    CAM = 'CAM'
    C2 = 'C2'


class PhotosynthesisParameters(namedtuple(
        'PhotosynthesisParameters',
        ['vcmax', 'kc', 'ko', 'gamma', 'rd', 'jmax', 'f_abs', 'f_spec',
         'theta', 'tp', 'alpha', 'gm', 'temp_ref', 'pathway',
         'flag_substrate_limitation', 'theta_min'],
        defaults=(None, 298.15, PhotosynPathway.C3, False, 1.e-6))):

    """
    The rate parameters are TempDep objects, in umol m-2 s-1 for vcmax,
    jmax, rd, tp, in umol mol-1 for kc, ko, gamma (at 1 atm), and in
    mol m-2 s-1 for the mesophyll conductance gm (None for an infinite
    mesophyll conductance).

    f_abs: leaf absorptance of PAR [-]
    f_spec: spectral correction factor [-]
    theta: curvature of the light response of electron transport [-]
    alpha: fraction of glycolate carbon not returned to the chloroplast
    temp_ref: reference temperature of the rate parameters [degK]
    flag_substrate_limitation: True to account for the TPU limitation
    theta_min: curvature below which the response is a rectangular
               hyperbola

    """

    __slots__ = ()


# rates evaluated at a given leaf temperature & pressure
C3Biochemistry = namedtuple('C3Biochemistry', ['vcmax', 'jmax', 'kc', 'ko',
                                               'gamma', 'rd', 'tp'])

# net assimilation & limiting gross rates, umol m-2 s-1
C3Rates = namedtuple('C3Rates', ['An', 'Aj', 'Ac', 'Ap', 'Rd'])


# ======================================================================

def c3_biochemistry(params, Tleaf, P):

    """
    Evaluates the temperature dependencies of all the C3 parameters at
    leaf temperature. The Michaelis-Menten constants, defined at 1 atm,
    are corrected for the ambient pressure.

    Arguments:
    ----------
    params: PhotosynthesisParameters
        the photosynthetic parameters

    Tleaf: float
        leaf temperature [degK]

    P: float
        air pressure [Pa]

    Returns:
    --------
    A C3Biochemistry record.

    """

    tp = None

    if params.flag_substrate_limitation:
        tp = params.tp.evaluate(Tleaf)

    return C3Biochemistry(params.vcmax.evaluate(Tleaf),
                          params.jmax.evaluate(Tleaf),
                          params.kc.evaluate(Tleaf) * cst.atm / P,
                          params.ko.evaluate(Tleaf) * cst.atm / P,
                          params.gamma.evaluate(Tleaf),
                          params.rd.evaluate(Tleaf), tp)


def electron_transport(PPFD, jmax, params):

    """
    Electron transport rate as the smaller root of the non-rectangular
    hyperbola in the light absorbed by photosystem II.

    Arguments:
    ----------
    PPFD: array or float
        photosynthetic photon flux density [umol m-2 s-1]

    jmax: array or float
        maximum electron transport rate [umol m-2 s-1]

    params: PhotosynthesisParameters
        the photosynthetic parameters

    Returns:
    --------
    The electron transport rate [umol m-2 s-1].

    """

    I = PPFD * params.f_abs * (1. - params.f_spec) * 0.5  # PSII light
    x = I + jmax

    if params.theta < params.theta_min:
        return I * jmax / x

    return ((x - np.sqrt(x * x - 4. * params.theta * I * jmax)) /
            (2. * params.theta))


def electron_transport_empirical(PPFD, Tleaf, params):

    """
    Electron transport rate [umol m-2 s-1] at leaf temperature Tleaf
    [degK].

    """

    return electron_transport(PPFD, params.jmax.evaluate(Tleaf), params)


def photosynthesis_c3(bio, PPFD, O2, Cc, params):

    """
    Farquhar et al. (1980) C3 photosynthesis model: the gross rate is
    the minimum of the Rubisco-limited, electron transport-limited, and
    optionally TPU-limited rates.

    Arguments:
    ----------
    bio: C3Biochemistry
        rate parameters at leaf temperature

    PPFD: float
        photosynthetic photon flux density [umol m-2 s-1]

    O2: float
        O2 mole fraction [umol mol-1]

    Cc: float
        CO2 mole fraction at the carboxylation site [umol mol-1]

    params: PhotosynthesisParameters
        the photosynthetic parameters

    Returns:
    --------
    A C3Rates record.

    """

    if not Cc > bio.gamma:
        raise PhotorespirationDominant(Cc, bio.gamma)

    J = electron_transport(PPFD, bio.jmax, params)
    Aj = (Cc - bio.gamma) / (4. * Cc + 8. * bio.gamma) * J
    Ac = (Cc - bio.gamma) * bio.vcmax / (Cc + bio.kc * (1. + O2 / bio.ko))
    Ag = min(Aj, Ac)
    Ap = np.inf

    if params.flag_substrate_limitation:
        denom = Cc - (1. + 1.5 * params.alpha) * bio.gamma

        if not denom > 0.:
            raise PhotorespirationDominant(Cc, (1. + 1.5 * params.alpha) *
                                           bio.gamma)

        Ap = 3. * bio.tp * (Cc - bio.gamma) / denom
        Ag = min(Ag, Ap)

    return C3Rates(Ag - bio.rd, Aj, Ac, Ap, bio.rd)


def assimilation_c3(P, PPFD, Tleaf, O2, Cc, params):

    """
    Net C3 assimilation rate.

    Arguments:
    ----------
    P: float
        air pressure [Pa]

    PPFD: float
        photosynthetic photon flux density [umol m-2 s-1]

    Tleaf: float
        leaf temperature [degK]

    O2: float
        O2 mole fraction [umol mol-1]

    Cc: float
        CO2 mole fraction at the carboxylation site [umol mol-1]

    params: PhotosynthesisParameters
        the photosynthetic parameters

    Returns:
    --------
    The net assimilation rate [umol m-2 s-1].

    """

    bio = c3_biochemistry(params, Tleaf, P)

    return photosynthesis_c3(bio, PPFD, O2, Cc, params).An


def assimilate_c3(env, PPFD, Tleaf, Ci, params):

    """
    Net assimilation [umol m-2 s-1] of a leaf at temperature Tleaf
    [degK] in the environment env, for an internal CO2 concentration Ci
    [umol mol-1]. Only the C3 pathway is available.

    """

    if params.pathway is not PhotosynPathway.C3:
        raise NotImplementedError('the %s photosynthetic pathway is not '
                                  'implemented' % (params.pathway.value, ))

    return assimilation_c3(env.Patm, PPFD, Tleaf, env.O2, Ci, params)


def rubisco_limit(Aj, Ac):

    """
    Tests whether the standard model for photosynthesis is rubisco
    limited or not, in which case it is limited by electron transport.

    Arguments:
    ----------
    Aj: float
        electron transport-limited photosynthesis rate [umol m-2 s-1]

    Ac: float
        rubisco-limited photosynthesis rate [umol m-2 s-1]

    Returns:
    --------
    True if the C assimilation is rubisco limited, False otherwise.

    """

    return bool((np.minimum(Ac, Aj) > 0.) and Ac <= Aj)
