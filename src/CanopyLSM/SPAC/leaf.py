# -*- coding: utf-8 -*-

"""
Functions related to leaf processes: used to calculate the boundary
layer conductances, the radiative, sensible, and latent heat exchanges
of a leaf, and the residual of its energy balance.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Bernacchi, C. J., Portis, A. R., Nakano, H., von Caemmerer, S., &
  Long, S. P. (2002). Temperature response of mesophyll conductance.
  Plant Physiology, 130(4), 1992-1998.
* Collatz et al. (1991). Regulation of stomatal conductance and
  transpiration: a physiological model of canopy processes. Agric. For.
  Meteorol, 54, 107-136.
* Jones, H. G. (2013). Plants and microclimate: a quantitative approach
  to environmental plant physiology. Cambridge university press.
* Monteith, J. L., & Unsworth, M. H. (1990). Principles of environmental
  physics. Arnold. SE, London, UK.
* Norman, J. M., & Campbell, G. S. (1998). An introduction to
  environmental biophysics. Springer, New York.

"""

__title__ = "Leaf energy balance"
__author__ = "Manon E. B. Sabot"
__version__ = "4.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM import cst  # general constants
from CanopyLSM.Utils.errors import InvalidInput
from CanopyLSM.SPAC.water import e_sat, e_sat_prime, latent_heat_vap
from CanopyLSM.SPAC.water import vapor_pressure_deficit
from CanopyLSM.SPAC.canatm import air_molar, air_density
from CanopyLSM.SPAC.transfer import dyn_visc_moistair, prandtl
from CanopyLSM.SPAC.transfer import therm_diff_moistair, diffus_air
from CanopyLSM.SPAC.transfer import heat_cap_moistair, heat_cap_mass_moistair
from CanopyLSM.SPAC.transfer import GasSpecies
from CanopyLSM.SPAC.radiation import stefan_boltzmann
from CanopyLSM.CH2OCoupler.coupler_utils import total_cond_vapor
from CanopyLSM.CH2OCoupler.coupler_utils import transpiration


# ======================================================================

def _forced_convection(env, leaf):

    if not env.u > 0.:
        raise InvalidInput('wind speed must be > 0 m s-1, got %s' % (env.u, ))

    if not leaf.d_leaf > 0.:
        raise InvalidInput('leaf dimension must be > 0 m, got %s' %
                           (leaf.d_leaf, ))

    # kinematic viscosity
    nu = (dyn_visc_moistair(env.Tair, env.Patm, env.RH) /
          air_density(env.Tair, env.Patm, env.RH))  # m2 s-1

    return nu, np.sqrt(env.u / (leaf.d_leaf * nu))


def bl_cond_heat(env, leaf):

    """
    Leaf boundary layer conductance to heat under forced convection, for
    a flat plate in laminar flow (Norman & Campbell, 1998), with a 1.4
    enhancement factor for outdoor turbulence.

    Arguments:
    ----------
    env: EnvironmentState
        air conditions around the leaf

    leaf: LeafGeometry
        leaf dimension & radiative properties

    Returns:
    --------
    The boundary layer conductance to heat [mol m-2 s-1].

    """

    __, shear = _forced_convection(env, leaf)
    Pr = prandtl(env.Tair, env.Patm, env.RH)

    return (1.4 * 0.664 * np.cbrt(Pr) * air_molar(env.Tair, env.Patm) *
            therm_diff_moistair(env.Tair, env.Patm, env.RH) * shear)


def bl_cond_vapor(env, leaf):

    """
    Leaf boundary layer conductance to water vapour, same as for heat
    but with the Schmidt number in lieu of the Prandtl number.

    Arguments:
    ----------
    env: EnvironmentState
        air conditions around the leaf

    leaf: LeafGeometry
        leaf dimension & radiative properties

    Returns:
    --------
    The boundary layer conductance to water vapour [mol m-2 s-1].

    """

    nu, shear = _forced_convection(env, leaf)
    Dw = diffus_air(GasSpecies.H2O, env.Tair, env.Patm)  # m2 s-1
    Sc = nu / Dw  # Schmidt number

    return (1.4 * 0.664 * np.cbrt(Sc) * air_molar(env.Tair, env.Patm) * Dw *
            shear)


def leaf_net_radiation(env, leaf, Tleaf):

    """
    Net radiation absorbed by the leaf: absorbed shortwave, plus the
    absorbed long-wave when it is given, minus the leaf's own thermal
    emission.

    Arguments:
    ----------
    env: EnvironmentState
        air conditions around the leaf

    leaf: LeafGeometry
        leaf dimension & radiative properties

    Tleaf: float
        leaf temperature [degK]

    Returns:
    --------
    The leaf net radiation [W m-2].

    """

    Rabs = leaf.sw_absorptance * env.shortwave

    if env.lw_down is not None:
        Rabs += leaf.emissivity * env.lw_down

    return Rabs - leaf.emissivity * stefan_boltzmann(Tleaf)


def sensible_heat(Tleaf, Tair, cp, gbH):

    """
    Sensible heat lost by both sides of the leaf [W m-2], with cp the
    molar heat capacity of air [J mol-1 K-1] and gbH the one-sided
    boundary layer conductance to heat [mol m-2 s-1].

    """

    return 2. * gbH * cp * (Tleaf - Tair)


def leaf_vapor_deficit(Tleaf, Tair, RH):

    """
    Leaf-to-air vapour pressure deficit [Pa], assuming saturated
    intercellular spaces.

    """

    return e_sat(Tleaf) - e_sat(Tair) * RH


def latent_heat(Tleaf, E):

    """
    Latent heat flux carried by the transpiration stream E [mol m-2
    s-1], in W m-2.

    """

    return E * latent_heat_vap(Tleaf)


def leaf_surface_rh(Tleaf, Tair, RH, gsw, gbW):

    """
    Relative humidity at the leaf surface, i.e. within the boundary
    layer, as used by the Ball-Berry model (Collatz et al., 1991). The
    surface vapour pressure follows from the continuity of the water
    flux through the stomata and the boundary layer.

    Arguments:
    ----------
    Tleaf: float
        leaf temperature [degK]

    Tair: float
        air temperature [degK]

    RH: float
        relative humidity of the air [0-1]

    gsw: float
        stomatal conductance to water vapour [mol m-2 s-1]

    gbW: float
        boundary layer conductance to water vapour [mol m-2 s-1]

    Returns:
    --------
    The leaf surface relative humidity [0-1].

    """

    ei = e_sat(Tleaf)  # Pa
    es = (gsw * ei + gbW * RH * e_sat(Tair)) / (gsw + gbW)  # Pa

    return np.minimum(1., np.maximum(0., es / ei))


def leaf_energy_fluxes(env, leaf, Tleaf, gsw, gbH, gbW):

    """
    Energy fluxes of a leaf at temperature Tleaf, given its stomatal
    and boundary layer conductances.

    Returns:
    --------
    Rnet: float
        net radiation [W m-2]

    H: float
        sensible heat flux [W m-2]

    LE: float
        latent heat flux [W m-2]

    E: float
        transpiration [mol m-2 s-1]

    vpd: float
        leaf-to-air vapour pressure deficit [Pa]

    """

    cp = heat_cap_moistair(Tleaf, env.Patm, env.RH)  # J mol-1 K-1
    vpd = leaf_vapor_deficit(Tleaf, env.Tair, env.RH)
    E = transpiration(env.Patm, vpd, gbW, gsw)

    Rnet = leaf_net_radiation(env, leaf, Tleaf)
    H = sensible_heat(Tleaf, env.Tair, cp, gbH)
    LE = latent_heat(Tleaf, E)

    return Rnet, H, LE, E, vpd


def energy_imbalance(env, leaf, Tleaf, gsw):

    """
    Residual of the leaf energy balance, Rnet - H - LE [W m-2], at
    leaf temperature Tleaf [degK] and stomatal conductance to water
    vapour gsw [mol m-2 s-1]. A positive residual means the leaf
    gains energy and needs to warm up.

    """

    gbH = bl_cond_heat(env, leaf)
    gbW = bl_cond_vapor(env, leaf)
    Rnet, H, LE, __, __ = leaf_energy_fluxes(env, leaf, Tleaf, gsw, gbH, gbW)

    return Rnet - H - LE


def energy_imbalance_slope(env, leaf, Tleaf, gsw, gbH, gbW):

    """
    Derivative of the energy balance residual with respect to leaf
    temperature at fixed conductances [W m-2 K-1], i.e. the radiative,
    sensible, and latent heat terms of the linearised balance (Jones,
    2013).

    """

    gr = 4. * leaf.emissivity * cst.sigma * Tleaf ** 3.
    gh = 2. * gbH * heat_cap_moistair(Tleaf, env.Patm, env.RH)
    ge = (latent_heat_vap(Tleaf) * total_cond_vapor(gbW, gsw) *
          e_sat_prime(Tleaf) / env.Patm)

    return -(gr + gh + ge)


def mesophyll_conductance(Tleaf, tempdep):

    """
    Mesophyll conductance to CO2 [mol m-2 s-1] at leaf temperature
    [degK], described by any TempDep variant (Bernacchi et al., 2002).

    """

    return tempdep.evaluate(Tleaf)


# ======================================================================

def psychrometric_constant(T, P, RH):

    """
    Calculates the psychrometric constant.

    Arguments:
    ----------
    T: array or float
        air temperature [degK]

    P: array or float
        air pressure [Pa]

    RH: array or float
        relative humidity [0-1]

    Returns:
    --------
    The psychrometric constant [Pa K-1].

    """

    return (heat_cap_mass_moistair(T, P, RH) * P * cst.Mair /
            latent_heat_vap(T))


def penman_monteith(T, P, RH, Qavail, Ga, Gs, evap=False):

    """
    Penman-Monteith equation for the latent heat flux of a surface
    (Monteith & Unsworth, 1990).

    Arguments:
    ----------
    T: array or float
        air temperature [degK]

    P: array or float
        air pressure [Pa]

    RH: array or float
        relative humidity [0-1]

    Qavail: array or float
        available energy, i.e. net radiation minus ground heat [W m-2]

    Ga: array or float
        aerodynamic conductance [m s-1]

    Gs: array or float
        surface conductance [m s-1]

    evap: bool
        if True, the evaporation rate is returned instead of the latent
        heat flux

    Returns:
    --------
    The latent heat flux [W m-2] or evaporation [mol m-2 s-1].

    """

    Delta = e_sat_prime(T)  # Pa K-1
    gamma = psychrometric_constant(T, P, RH)  # Pa K-1
    rho_cp = air_density(T, P, RH) * heat_cap_mass_moistair(T, P, RH)
    D = vapor_pressure_deficit(T, RH)  # Pa

    LE = ((Delta * Qavail + rho_cp * D * Ga) /
          (Delta + gamma * (1. + Ga / Gs)))

    if evap:
        return LE / latent_heat_vap(T)

    return LE
