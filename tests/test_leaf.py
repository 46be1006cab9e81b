# -*- coding: utf-8 -*-

import numpy as np
import pytest

from CanopyLSM import cst
from CanopyLSM.Utils import InvalidInput
from CanopyLSM.SPAC.states import EnvironmentState, LeafGeometry
from CanopyLSM.SPAC.water import vapor_pressure_deficit, latent_heat_vap
from CanopyLSM.SPAC.radiation import PAR_to_shortwave, stefan_boltzmann
from CanopyLSM.SPAC.leaf import bl_cond_heat, bl_cond_vapor
from CanopyLSM.SPAC.leaf import leaf_net_radiation, leaf_vapor_deficit
from CanopyLSM.SPAC.leaf import leaf_surface_rh, leaf_energy_fluxes
from CanopyLSM.SPAC.leaf import energy_imbalance, energy_imbalance_slope
from CanopyLSM.SPAC.leaf import psychrometric_constant, penman_monteith


def test_boundary_layer_conductances(env, leaf):

    gbH = bl_cond_heat(env, leaf)
    gbW = bl_cond_vapor(env, leaf)

    assert 1. < gbH < 1.4
    assert 1.1 < gbW < 1.5
    assert gbW > gbH

    # forced convection scales with the square root of wind speed
    assert (bl_cond_heat(env._replace(u=4. * env.u), leaf) ==
            pytest.approx(2. * gbH))
    assert (bl_cond_vapor(env, leaf._replace(d_leaf=4. * leaf.d_leaf)) ==
            pytest.approx(0.5 * gbW))


def test_still_air_is_rejected(env, leaf):

    with pytest.raises(InvalidInput):
        bl_cond_heat(env._replace(u=0.), leaf)


def test_states_validation(env, leaf):

    assert env.validate() is env
    assert leaf.validate() is leaf

    with pytest.raises(InvalidInput):
        env._replace(RH=1.5).validate()

    with pytest.raises(InvalidInput):
        env._replace(Tair=-5.).validate()

    with pytest.raises(InvalidInput):
        LeafGeometry(0.).validate()

    with pytest.raises(InvalidInput):
        LeafGeometry(0.05, emissivity=1.2).validate()


def test_shortwave_from_PAR_unless_given(env):

    assert env.shortwave == pytest.approx(PAR_to_shortwave(env.PPFD))
    assert env._replace(sw_rad=300.).shortwave == 300.


def test_net_radiation(env, leaf):

    Rnet = leaf_net_radiation(env, leaf, 298.15)

    assert Rnet == pytest.approx(0.5 * env.shortwave - 0.97 * 448.0753,
                                 rel=1.e-5)

    # long-wave from the sky is absorbed when known
    sky = env._replace(lw_down=400.)

    assert (leaf_net_radiation(sky, leaf, 298.15) ==
            pytest.approx(Rnet + 0.97 * 400.))


def test_leaf_vapour_deficit():

    assert (leaf_vapor_deficit(298.15, 298.15, 0.6) ==
            pytest.approx(vapor_pressure_deficit(298.15, 0.6)))
    assert leaf_vapor_deficit(300.15, 298.15, 0.6) > leaf_vapor_deficit(
        298.15, 298.15, 0.6)


def test_leaf_surface_humidity():

    # the surface is as humid as the air with closed stomata, and close
    # to saturation when the boundary layer is the limiting step
    assert leaf_surface_rh(298.15, 298.15, 0.5, 0., 1.) == pytest.approx(0.5)
    assert leaf_surface_rh(298.15, 298.15, 0.5, 100., 1.e-3) > 0.99
    assert 0.5 < leaf_surface_rh(298.15, 298.15, 0.5, 0.3, 1.3) < 1.


def test_energy_fluxes(env, leaf):

    gbH = bl_cond_heat(env, leaf)
    gbW = bl_cond_vapor(env, leaf)
    Rnet, H, LE, E, vpd = leaf_energy_fluxes(env, leaf, env.Tair, 0.3, gbH,
                                             gbW)

    assert H == 0.
    assert E > 0.
    assert LE == pytest.approx(E * latent_heat_vap(env.Tair))
    assert energy_imbalance(env, leaf, env.Tair, 0.3) == pytest.approx(
        Rnet - H - LE)


def test_energy_imbalance_decreases_with_leaf_temperature(env, leaf):

    T = env.Tair + np.array([-5., 0., 5.])
    R = [energy_imbalance(env, leaf, t, 0.3) for t in T]

    assert R[0] > R[1] > R[2]


def test_energy_imbalance_slope(env, leaf):

    gbH = bl_cond_heat(env, leaf)
    gbW = bl_cond_vapor(env, leaf)
    h = 1.e-3
    fd = (energy_imbalance(env, leaf, env.Tair + h, 0.3) -
          energy_imbalance(env, leaf, env.Tair - h, 0.3)) / (2. * h)

    assert energy_imbalance_slope(env, leaf, env.Tair, 0.3, gbH, gbW) == \
        pytest.approx(fd, rel=2.e-2)


def test_psychrometric_constant():

    assert psychrometric_constant(298.15, cst.atm, 0.7) == pytest.approx(
        67.914, rel=1.e-3)
    assert psychrometric_constant(283.15, cst.atm, 0.9) == pytest.approx(
        66.5431, rel=1.e-3)


def test_penman_monteith():

    T, P, RH = 298.15, cst.atm, 0.6
    LE = penman_monteith(T, P, RH, 400., 0.02, 0.01)

    assert LE > 0.
    assert penman_monteith(T, P, RH, 400., 0.02, 0.005) < LE
    assert (penman_monteith(T, P, RH, 400., 0.02, 0.01, evap=True) ==
            pytest.approx(LE / latent_heat_vap(T)))
