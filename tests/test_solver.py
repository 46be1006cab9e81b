# -*- coding: utf-8 -*-

import logging

import pytest

from CanopyLSM import solve_leaf
from CanopyLSM.Utils import InvalidInput, PhotorespirationDominant
from CanopyLSM.Utils import NoPhysicalSolution
from CanopyLSM.Utils.default_params import default_gs_model
from CanopyLSM.SPAC.leaf import bl_cond_vapor, energy_imbalance
from CanopyLSM.SPAC.leaf import mesophyll_conductance
from CanopyLSM.SPAC.photosynthesis import PhotosynPathway
from CanopyLSM.CH2OCoupler.coupler_utils import internal_co2, total_cond_co2
from CanopyLSM.CH2OCoupler.LeafSolver import solve_Ci_gs_An
from CanopyLSM.CH2OCoupler.LeafSolver import Converged, DidNotConverge
from CanopyLSM.CH2OCoupler.LeafSolver import Infeasible


def test_inner_loop_reaches_a_fixed_point(env, leaf, params, medlyn, config):

    gbW = bl_cond_vapor(env, leaf)
    An, gs, Ci, Cs, rates, converged = solve_Ci_gs_An(env, params, medlyn,
                                                      config, 297.15, 280.,
                                                      gbW)
    gtc = total_cond_co2(gbW, gs, mesophyll_conductance(297.15, params.gm))

    assert converged
    assert An == rates.An
    assert Ci == pytest.approx(internal_co2(env.CO2, An, gtc), rel=1.e-5)
    assert Ci < Cs < env.CO2


def test_sunny_leaf(env, leaf, params, medlyn, config):

    res = solve_leaf(env, leaf, params, medlyn, config)
    state = res.state

    assert isinstance(res, Converged)
    assert res.converged and res.status == 'Converged'
    assert 290. < state.Tleaf < 300.
    assert 10. <= state.An <= 25.
    assert 0.1 <= state.gs <= 0.4
    assert 0. < state.Ci < state.Cs < env.CO2
    assert state.E > 0. and state.LE > 0.
    assert isinstance(state.rubisco_limited, bool)


def test_energy_balance_closes(env, leaf, params, medlyn, config):

    state = solve_leaf(env, leaf, params, medlyn, config).state

    assert abs(state.residual) < config.outer_tol
    assert state.residual == pytest.approx(state.Rnet - state.H - state.LE)
    assert energy_imbalance(env, leaf, state.Tleaf, state.gs) == \
        pytest.approx(state.residual, abs=1.e-6)


def test_night_leaf_only_respires(night_env, leaf, params, medlyn, config):

    res = solve_leaf(night_env, leaf, params, medlyn, config)
    state = res.state

    assert res.converged
    assert state.Tleaf < night_env.Tair
    assert state.An == pytest.approx(-params.rd.evaluate(state.Tleaf))
    assert state.gs == medlyn.g_min
    assert state.Ci > night_env.CO2


def test_restart_from_solution(env, leaf, params, medlyn, config):

    first = solve_leaf(env, leaf, params, medlyn, config)
    again = solve_leaf(env, leaf, params, medlyn, config, init=first.state)

    assert again.converged
    assert again.n_iter <= 2
    assert again.state.Tleaf == pytest.approx(first.state.Tleaf, abs=1.e-3)


@pytest.mark.parametrize('model', ['BallBerry', 'Leuning'])
def test_other_conductance_models(env, leaf, params, config, model):

    res = solve_leaf(env, leaf, params, default_gs_model(model), config)

    assert res.converged
    assert res.state.gs > 0.01
    assert abs(res.state.residual) < config.outer_tol


def test_iteration_cap(env, leaf, params, medlyn, config, caplog):

    with caplog.at_level(logging.WARNING,
                         logger='CanopyLSM.CH2OCoupler.LeafSolver'):
        res = solve_leaf(env, leaf, params, medlyn,
                         config._replace(outer_iter_max=1))

    assert isinstance(res, DidNotConverge)
    assert not res.converged
    assert res.n_iter == 1
    assert res.last_iterate.Tleaf == env.Tair
    assert 'no convergence' in caplog.text


def test_no_closure_near_air_temperature(env, leaf, params, medlyn, config):

    res = solve_leaf(env, leaf, params, medlyn, config._replace(dT_max=0.01))

    assert isinstance(res, Infeasible)
    assert res.status == 'Infeasible'
    assert isinstance(res.cause, NoPhysicalSolution)
    assert res.last_iterate.Tleaf == pytest.approx(env.Tair - 0.01)


def test_co2_below_compensation_point(env, leaf, params, medlyn, config):

    res = solve_leaf(env._replace(CO2=30.), leaf, params, medlyn, config)

    # the leaf respires, its internal CO2 rising above the ambient
    assert res.converged
    assert res.state.An < 0.
    assert res.state.Ci > 30.


def test_no_internal_co2_above_compensation_point(env, leaf, params, medlyn,
                                                  config):

    # wide open stomata cannot sustain any Ci above the compensation point
    res = solve_leaf(env._replace(CO2=5.), leaf, params,
                     medlyn._replace(g_min=10.), config)

    assert isinstance(res, Infeasible)
    assert isinstance(res.cause, PhotorespirationDominant)


def test_invalid_inputs_raise(env, leaf, params, medlyn, config):

    with pytest.raises(InvalidInput):
        solve_leaf(env._replace(RH=1.5), leaf, params, medlyn, config)

    with pytest.raises(InvalidInput):
        solve_leaf(env, leaf, params, medlyn._replace(g_min=0.), config)

    with pytest.raises(NotImplementedError):
        solve_leaf(env, leaf, params._replace(pathway=PhotosynPathway.CAM),
                   medlyn, config)


def test_inner_loop_with_closed_stomata(env, leaf, params, config):

    dry = env._replace(RH=0.2)
    gbW = bl_cond_vapor(dry, leaf)
    An, gs, Ci, Cs, rates, converged = solve_Ci_gs_An(
        dry, params, default_gs_model('BallBerry'), config, 297., 280., gbW)
    gtc = total_cond_co2(gbW, gs, mesophyll_conductance(297., params.gm))

    assert converged
    assert gs == pytest.approx(0.01)
    assert Ci == pytest.approx(76.48, rel=1.e-2)
    assert An == pytest.approx(1.98, rel=2.e-2)
    assert Ci == pytest.approx(internal_co2(dry.CO2, An, gtc), rel=1.e-5)


@pytest.mark.parametrize('model', ['BallBerry', 'Leuning'])
@pytest.mark.parametrize('Tair, RH', [(298.15, 0.2), (298.15, 0.),
                                      (313.15, 0.05)])
def test_dry_air(env, leaf, params, config, model, Tair, RH):

    res = solve_leaf(env._replace(Tair=Tair, RH=RH), leaf, params,
                     default_gs_model(model), config)

    assert isinstance(res, Converged)
    assert abs(res.state.residual) < config.outer_tol
    assert res.state.gs >= 0.01
    assert res.state.Ci > 0.
