# -*- coding: utf-8 -*-

"""
Default parameter class, and the functions that turn those defaults
into the records the model functions expect. Nothing in the model reads
these defaults implicitly: they must be passed on explicitly.

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
* Bernacchi, C. J., Portis, A. R., Nakano, H., von Caemmerer, S., &
  Long, S. P. (2002). Temperature response of mesophyll conductance.
  Plant Physiology, 130(4), 1992-1998.
* Campbell, G. S., & Norman, J. M. “An Introduction to Environmental
  Biophysics” 2nd Edition, Springer-Verlag, New York, 1998.
* Kattge, J., & Knorr, W. (2007). Temperature acclimation in a
  biochemical model of photosynthesis: a reanalysis of data from 36
  species. Plant, cell & environment, 30(9), 1176-1190.
* Medlyn, B. E., Dreyer, E., Ellsworth, D., Forstreuter, M., Harley,
  P. C., Kirschbaum, M. U. F., ... & Wang, K. (2002). Temperature
  response of parameters of a biochemically based model of
  photosynthesis. II. A review of experimental data. Plant, Cell &
  Environment, 25(9), 1167-1179.
* Medlyn, B. E., Duursma, R. A., Eamus, D., Ellsworth, D. S., Prentice,
  I. C., Barton, C. V., ... & Wingate, L. (2011). Reconciling the
  optimal and empirical approaches to modelling stomatal conductance.
  Global Change Biology, 17(6), 2134-2144.

"""

__title__ = "Default parameter class necessary to run the model"
__author__ = "Manon E. B. Sabot"
__version__ = "9.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# own modules
from CanopyLSM.SPAC.kinetics import Q10, Arrhenius, EnzymeOptimum
from CanopyLSM.SPAC.states import EnvironmentState, LeafGeometry
from CanopyLSM.SPAC.photosynthesis import PhotosynthesisParameters
from CanopyLSM.SPAC.photosynthesis import PhotosynPathway
from CanopyLSM.CH2OCoupler.BallBerry import BallBerry
from CanopyLSM.CH2OCoupler.Leuning import Leuning
from CanopyLSM.CH2OCoupler.Medlyn import Medlyn
from CanopyLSM.CH2OCoupler.LeafSolver import SolverConfig


# ======================================================================

class default_params(object):  # default inputs needed to run model

    def __init__(self):

        # met conditions
        self.Tair = 298.15  # degK
        self.Patm = 101325.  # Pa
        self.RH = 0.7  # relative humidity, 0-1
        self.u = 2.  # m s-1
        self.PPFD = 1500.  # umol m-2 s-1

        # gas concentrations
        self.CO2 = 400.  # umol mol-1
        self.O2 = 209460.  # umol mol-1

        # leaf
        self.d_leaf = 0.05  # characteristic dimension, m
        self.eps_l = 0.97  # leaf emissivity
        self.sw_abs = 0.5  # leaf absorptance of shortwave

        # photosynthesis related
        self.Tref = 298.15  # ref T for Vmax25, Jmax25, Kc25, Ko25 (degK)
        self.Vmax25 = 60.  # max carboxyl rate @ Tref (umol m-2 s-1)
        self.JV = 1.67  # Jmax25 to Vmax25 ratio (Medlyn et al., 2002)
        self.Rlref = self.Vmax25 * 0.015  # resp @ Tref (umol m-2 s-1)
        self.Tp25 = self.Vmax25 / 6.  # triose phosphate use (umol m-2 s-1)
        self.Kc25 = 404.9  # Michaelis-Menten cst, carboxylation (umol mol-1)
        self.Ko25 = 278400.  # Michaelis-Menten cst, oxygenation (umol mol-1)
        self.gamstar25 = 42.75  # CO2 compensation point @ Tref (umol mol-1)
        self.gm25 = 0.4  # mesophyll conductance @ Tref (mol m-2 s-1)
        self.f_abs = 0.85  # leaf absorptance of PAR
        self.f_spec = 0.15  # spectral correction
        self.c1 = 0.7  # curvature of light response
        self.alpha = 0.  # glycolate carbon not returned to the chloroplast

        # energies of activation
        self.Ev = 60000.  # Vcmax, J mol-1
        self.Ej = 30000.  # Jmax, J mol-1
        self.Ec = 79430.  # carboxylation, J mol-1
        self.Eo = 36380.  # oxygenation, J mol-1
        self.Egamstar = 37830.  # gamstar, J mol-1
        self.Etp = 53100.  # triose phosphate use, J mol-1
        self.Egm = 49600.  # mesophyll conductance, J mol-1
        self.Q10_Rl = 2.  # leaf respiration

        # inhibition at higher temperatures (Kattge & Knorr, 2007)
        self.deltaSv = 650.  # Vcmax entropy factor (J mol-1 K-1)
        self.deltaSj = 650.  # Jmax entropy factor (J mol-1 K-1)
        self.deltaSgm = 1400.  # gm entropy factor (J mol-1 K-1)
        self.Hdv = 200000.  # Vcmax decrease rate above opt T (J mol-1)
        self.Hdj = 200000.  # Jmax decrease rate above opt T (J mol-1)
        self.Hdgm = 437400.  # gm decrease rate above opt T (J mol-1)

        # stomatal conductance
        self.g1 = 4. * 1000. ** 0.5  # Medlyn slope, 4 kPa0.5 in Pa0.5
        self.g0 = 0.01  # minimum conductance (mol m-2 s-1)
        self.m_BB = 9.  # Ball-Berry slope
        self.a1_L = 12.  # Leuning slope
        self.D0 = 1500.  # Leuning VPD sensitivity (Pa)

        return


# ======================================================================

def default_environment(p=None):

    """
    Builds an EnvironmentState from the met conditions of p, or from the
    default ones.

    """

    if p is None:
        p = default_params()

    return EnvironmentState(p.Tair, p.Patm, p.RH, p.u, p.PPFD, p.CO2, p.O2)


def default_leaf(p=None):

    if p is None:
        p = default_params()

    return LeafGeometry(p.d_leaf, p.eps_l, p.sw_abs)


def default_c3_params(p=None):

    """
    Builds the PhotosynthesisParameters of a typical C3 leaf, for which
    Vcmax, Jmax, and gm are deactivated at high temperatures, the
    Michaelis-Menten constants and the compensation point follow
    Bernacchi et al. (2001), and leaf respiration has a Q10 of 2.

    Arguments:
    ----------
    p: class or pandas series
        parameters, the default ones if None

    Returns:
    --------
    A PhotosynthesisParameters record.

    """

    if p is None:
        p = default_params()

    return PhotosynthesisParameters(
        vcmax=EnzymeOptimum(p.Vmax25, p.Ev, p.Hdv, p.deltaSv, p.Tref),
        kc=Arrhenius(p.Kc25, p.Ec, p.Tref),
        ko=Arrhenius(p.Ko25, p.Eo, p.Tref),
        gamma=Arrhenius(p.gamstar25, p.Egamstar, p.Tref),
        rd=Q10(p.Rlref, p.Q10_Rl, p.Tref),
        jmax=EnzymeOptimum(p.JV * p.Vmax25, p.Ej, p.Hdj, p.deltaSj, p.Tref),
        f_abs=p.f_abs, f_spec=p.f_spec, theta=p.c1,
        tp=Arrhenius(p.Tp25, p.Etp, p.Tref), alpha=p.alpha,
        gm=EnzymeOptimum(p.gm25, p.Egm, p.Hdgm, p.deltaSgm, p.Tref),
        temp_ref=p.Tref, pathway=PhotosynPathway.C3,
        flag_substrate_limitation=False)


def default_gs_model(model='Medlyn', p=None):

    """
    Stomatal conductance model ('Medlyn', 'BallBerry', or 'Leuning')
    parameterised with the defaults.

    """

    if p is None:
        p = default_params()

    if model == 'Medlyn':
        return Medlyn(p.g1, p.g0)

    if model == 'BallBerry':
        return BallBerry(p.m_BB, p.g0)

    if model == 'Leuning':
        return Leuning(p.a1_L, p.g0, p.D0)

    raise ValueError('unknown stomatal conductance model: %s' % (model, ))


def default_solver_config():

    return SolverConfig()
