# -*- coding: utf-8 -*-

"""
Coupled solver of the leaf energy balance, stomatal conductance, and
photosynthesis. The leaf temperature is iterated upon until the energy
balance closes, and at each leaf temperature the internal CO2 at which
the net assimilation rate and the stomatal conductance it drives are
consistent is found by bracketed root finding.

The outcome of a solve is always returned, never raised: it is either
Converged, DidNotConverge (with the last iterate), or Infeasible (with
the cause and the last iterate). Only invalid inputs raise.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
----------
* Collatz et al. (1991). Regulation of stomatal conductance and
  transpiration: a physiological model of canopy processes. Agric. For.
  Meteorol, 54, 107-136.
* Jones, H. G. (2013). Plants and microclimate: a quantitative approach
  to environmental plant physiology. Cambridge university press.
* Kowalczyk, E. A., Wang, Y. P., Law, R. M., Davies, H. L., McGregor,
  J. L., & Abramowitz, G. (2006). The CSIRO Atmosphere Biosphere Land
  Exchange (CABLE) model for use in climate models and as an offline
  model. CSIRO Marine and Atmospheric Research Paper, 13, 42.

"""

__title__ = "Iterative solving of the coupled leaf"
__author__ = "Manon E. B. Sabot"
__version__ = "3.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import logging  # iteration diagnostics
from collections import namedtuple  # immutable records

# own modules
from CanopyLSM.Utils.errors import PhotorespirationDominant
from CanopyLSM.Utils.errors import NoPhysicalSolution
from CanopyLSM.SPAC.states import LeafState, is_finite_state
from CanopyLSM.SPAC.leaf import bl_cond_heat, bl_cond_vapor
from CanopyLSM.SPAC.leaf import leaf_vapor_deficit, leaf_surface_rh
from CanopyLSM.SPAC.leaf import leaf_energy_fluxes, energy_imbalance_slope
from CanopyLSM.SPAC.leaf import mesophyll_conductance
from CanopyLSM.SPAC.photosynthesis import PhotosynPathway, c3_biochemistry
from CanopyLSM.SPAC.photosynthesis import photosynthesis_c3, rubisco_limit
from CanopyLSM.CH2OCoupler.coupler_utils import total_cond_co2
from CanopyLSM.CH2OCoupler.coupler_utils import internal_co2, surface_co2

logger = logging.getLogger(__name__)


# ======================================================================

class SolverConfig(namedtuple('SolverConfig',
                              ['inner_rtol', 'inner_iter_max', 'outer_tol',
                               'outer_iter_max', 'ci_init_ratio', 'dT_max',
                               'max_step'],
                              defaults=(1.e-6, 100, 1.e-3, 100, 0.7, 40.,
                                        10.))):

    """
    inner_rtol: relative tolerance on Ci & gs [-]
    inner_iter_max: cap on the root finding iterations on Ci, and on
                    the stomatal conductance - surface humidity coupling
    outer_tol: tolerance on the energy balance residual [W m-2]
    outer_iter_max: cap on the iterations on leaf temperature
    ci_init_ratio: initial Ci to ambient CO2 ratio [-]
    dT_max: largest leaf-to-air temperature difference [degK]
    max_step: largest update of the leaf temperature [degK]

    """

    __slots__ = ()


class _SolverResult(object):

    __slots__ = ()
    converged = False

    @property
    def status(self):

        return type(self).__name__


class Converged(_SolverResult, namedtuple('Converged', ['state', 'n_iter'])):

    __slots__ = ()
    converged = True

    @property
    def last_iterate(self):

        return self.state


class DidNotConverge(_SolverResult,
                     namedtuple('DidNotConverge', ['last_iterate', 'n_iter'])):

    __slots__ = ()

    @property
    def state(self):

        return self.last_iterate


class Infeasible(_SolverResult,
                 namedtuple('Infeasible', ['cause', 'last_iterate',
                                           'n_iter'])):

    __slots__ = ()

    @property
    def state(self):

        return self.last_iterate


# ======================================================================

def _close(a, b, rtol):

    return abs(a - b) <= rtol * max(abs(a), abs(b), 1.)


def stomatal_response(env, gs_model, config, Tleaf, An, Cs, vpd, gbW):

    """
    Stomatal conductance consistent with the humidity at the leaf
    surface, which itself depends on the stomatal conductance. Only the
    models that respond to the surface humidity need more than one
    iteration.

    Arguments:
    ----------
    env: EnvironmentState
        air conditions around the leaf

    gs_model: BallBerry, Leuning, or Medlyn
        the stomatal conductance model

    config: SolverConfig
        tolerances and caps of the solver

    Tleaf: float
        leaf temperature [degK]

    An: float
        net assimilation rate [umol m-2 s-1]

    Cs: float
        CO2 concentration at the leaf surface [umol mol-1]

    vpd: float
        leaf-to-air vapour pressure deficit [Pa]

    gbW: float
        boundary layer conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    gs: float
        stomatal conductance to water vapour [mol m-2 s-1]

    converged: bool
        False if the iteration cap was hit first

    """

    gs = gs_model.g_min

    for __ in range(config.inner_iter_max):

        rh_s = leaf_surface_rh(Tleaf, env.Tair, env.RH, gs, gbW)
        new_gs = gs_model.evaluate(An, Cs, rh_s, vpd)

        if _close(new_gs, gs, config.inner_rtol):
            return new_gs, True

        gs = new_gs

    return gs, False


def solve_Ci_gs_An(env, params, gs_model, config, Tleaf, Ci, gbW):

    """
    Finds the internal CO2 concentration at which the net assimilation
    rate, the stomatal conductance it drives, and the diffusion of CO2
    into the leaf are mutually consistent, at fixed leaf temperature.

    The root of F(Ci) = Ci - (Ca - An(Ci) / gtc(gs(An(Ci)))) is
    bracketed between the compensation point, where F < 0, and the
    ambient CO2 (or above it for a respiring leaf), where F > 0. The
    bracket is then narrowed by regula falsi with the Illinois
    modification, which cannot diverge however steep F gets, e.g. when
    the stomata sit at their minimum conductance.

    Arguments:
    ----------
    env: EnvironmentState
        air conditions around the leaf

    params: PhotosynthesisParameters
        the photosynthetic parameters

    gs_model: BallBerry, Leuning, or Medlyn
        the stomatal conductance model

    config: SolverConfig
        tolerances and caps of the solver

    Tleaf: float
        leaf temperature [degK]

    Ci: float
        first guess of the internal CO2 [umol mol-1], used to narrow
        the bracket when it lies within it

    gbW: float
        boundary layer conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    An: float
        net assimilation rate [umol m-2 s-1]

    gs: float
        stomatal conductance to water vapour [mol m-2 s-1]

    Ci: float
        internal CO2 concentration [umol mol-1]

    Cs: float
        CO2 concentration at the leaf surface [umol mol-1]

    rates: C3Rates
        the limiting rates behind An

    converged: bool
        False if the iteration cap was hit first

    """

    bio = c3_biochemistry(params, Tleaf, env.Patm)
    gmc = None

    if params.gm is not None:
        gmc = mesophyll_conductance(Tleaf, params.gm)

    vpd = leaf_vapor_deficit(Tleaf, env.Tair, env.RH)  # Pa

    def imbalance(Ci):

        rates = photosynthesis_c3(bio, env.PPFD, env.O2, Ci, params)
        Cs = surface_co2(env.CO2, rates.An, gbW)
        gs, gs_ok = stomatal_response(env, gs_model, config, Tleaf, rates.An,
                                      Cs, vpd, gbW)
        target = internal_co2(env.CO2, rates.An,
                              total_cond_co2(gbW, gs, gmc))

        return Ci - target, (rates, gs, Cs, gs_ok)

    # lowest Ci at which the limiting rates are defined
    gamma = bio.gamma

    if params.flag_substrate_limitation:
        gamma *= 1. + 1.5 * params.alpha

    lo = gamma + 1.e-9 * max(gamma, 1.)
    F_lo, out = imbalance(lo)

    if not F_lo < 0.:  # no consistent Ci above the compensation point
        raise PhotorespirationDominant(lo - F_lo, bio.gamma)

    # a respiring leaf has its root above the ambient CO2
    hi = max(env.CO2, 2. * lo)
    F_hi, out = imbalance(hi)

    for __ in range(config.inner_iter_max):

        if F_hi > 0.:
            break

        hi += 1. - 2. * F_hi
        F_hi, out = imbalance(hi)

    else:
        rates, gs, Cs, __ = out

        return rates.An, gs, hi, Cs, rates, False

    # narrow the bracket around the first guess
    if (Ci is not None) and (lo < Ci < hi):
        F, out = imbalance(Ci)

        if F < 0.:
            lo, F_lo = Ci, F

        elif F > 0.:
            hi, F_hi = Ci, F

        else:
            rates, gs, Cs, gs_ok = out

            return rates.An, gs, Ci, Cs, rates, gs_ok

    side = 0
    converged = False

    for __ in range(config.inner_iter_max):

        Ci = (lo * F_hi - hi * F_lo) / (F_hi - F_lo)

        if not lo < Ci < hi:
            Ci = 0.5 * (lo + hi)

        F, out = imbalance(Ci)
        tol = config.inner_rtol * max(Ci, 1.)

        if abs(F) <= tol:
            converged = True

            break

        if F < 0.:
            lo, F_lo = Ci, F

            if side == -1:
                F_hi *= 0.5

            side = -1

        else:
            hi, F_hi = Ci, F

            if side == 1:
                F_lo *= 0.5

            side = 1

    rates, gs, Cs, gs_ok = out

    return rates.An, gs, Ci, Cs, rates, converged and gs_ok


def leaf_state(env, leaf, params, gs_model, config, Tleaf, Ci, gbH, gbW):

    """
    State of the leaf at a given leaf temperature, the inner loop being
    solved first. Returns the LeafState and whether the inner loop
    converged.

    """

    An, gs, Ci, Cs, rates, converged = solve_Ci_gs_An(env, params, gs_model,
                                                      config, Tleaf, Ci, gbW)
    Rnet, H, LE, E, vpd = leaf_energy_fluxes(env, leaf, Tleaf, gs, gbH, gbW)

    state = LeafState(Tleaf, Ci, Cs, An, gs, gbH, gbW, E, Rnet, H, LE,
                      Rnet - H - LE, vpd, rubisco_limit(rates.Aj, rates.Ac))

    return state, converged


def solve_leaf(env, leaf, params, gs_model, config, init=None):

    """
    Looks for the leaf temperature at which the leaf energy balance is
    closed, given the stomatal conductance and photosynthesis consistent
    with that leaf temperature. The first update of the leaf temperature
    follows from the linearised energy balance, the next ones are secant
    steps, which fall back to bisection once the solution is bracketed.

    Arguments:
    ----------
    env: EnvironmentState
        air conditions around the leaf

    leaf: LeafGeometry
        leaf dimension & radiative properties

    params: PhotosynthesisParameters
        the photosynthetic parameters

    gs_model: BallBerry, Leuning, or Medlyn
        the stomatal conductance model

    config: SolverConfig
        tolerances and caps of the solver

    init: LeafState
        previous solution used as a first guess for the leaf temperature
        and internal CO2, otherwise the leaf starts at air temperature

    Returns:
    --------
    Converged, DidNotConverge, or Infeasible.

    """

    env.validate()
    leaf.validate()
    gs_model.validate()

    if params.pathway is not PhotosynPathway.C3:
        raise NotImplementedError('the %s photosynthetic pathway is not '
                                  'implemented' % (params.pathway.value, ))

    # boundary layer conductances only depend on the air
    gbH = bl_cond_heat(env, leaf)
    gbW = bl_cond_vapor(env, leaf)

    # physically plausible leaf temperatures
    T_lo = env.Tair - config.dT_max
    T_hi = env.Tair + config.dT_max

    if init is None:
        Tleaf = env.Tair
        Ci = config.ci_init_ratio * env.CO2

    else:
        Tleaf = min(max(init.Tleaf, T_lo), T_hi)
        Ci = init.Ci

    state = None
    previous = None  # last (Tleaf, residual) pair
    below = None  # warmest Tleaf known to be too cold
    above = None  # coldest Tleaf known to be too warm

    iter = 0

    while True:

        iter += 1

        try:
            state, inner_ok = leaf_state(env, leaf, params, gs_model, config,
                                         Tleaf, Ci, gbH, gbW)

        except PhotorespirationDominant as e:
            logger.warning('infeasible leaf at Tleaf = %.3f degK: %s', Tleaf,
                           e)

            return Infeasible(e, state, iter)

        if not is_finite_state(state):
            e = NoPhysicalSolution('non-finite leaf state at Tleaf = %s degK'
                                   % (Tleaf, ))
            logger.warning('infeasible leaf: %s', e)

            return Infeasible(e, state, iter)

        R = state.residual
        logger.debug('iteration %d: Tleaf = %.5f degK, residual = %.3e W m-2',
                     iter, Tleaf, R)

        if (abs(R) < config.outer_tol) and inner_ok:
            return Converged(state, iter)

        if iter >= config.outer_iter_max:
            logger.warning('no convergence after %d iterations, last '
                           'residual = %.3e W m-2', iter, R)

            return DidNotConverge(state, iter)

        # the root cannot be reached within the plausible window
        if (R > 0. and Tleaf >= T_hi) or (R < 0. and Tleaf <= T_lo):
            e = NoPhysicalSolution('no energy balance closure within %s '
                                   'degK of the air temperature'
                                   % (config.dT_max, ))
            logger.warning('infeasible leaf: %s', e)

            return Infeasible(e, state, iter)

        if R > 0.:
            below = Tleaf if below is None else max(below, Tleaf)

        elif R < 0.:
            above = Tleaf if above is None else min(above, Tleaf)

        # secant slope, or linearised balance when it cannot be trusted
        slope = None

        if previous is not None and Tleaf != previous[0]:
            slope = (R - previous[1]) / (Tleaf - previous[0])

        if slope is None or not slope < 0.:
            slope = energy_imbalance_slope(env, leaf, Tleaf, state.gs, gbH,
                                           gbW)

        step = min(max(-R / slope, -config.max_step), config.max_step)
        new_Tleaf = Tleaf + step

        if ((below is not None) and (above is not None) and
           not (below < new_Tleaf < above)):
            new_Tleaf = 0.5 * (below + above)

        previous = (Tleaf, R)
        Tleaf = min(max(new_Tleaf, T_lo), T_hi)
        Ci = state.Ci
