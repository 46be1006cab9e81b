# -*- coding: utf-8 -*-

import numpy as np
import pytest

from CanopyLSM import cst
from CanopyLSM.Utils import InvalidInput
from CanopyLSM.CH2OCoupler import BallBerry, Leuning, Medlyn
from CanopyLSM.CH2OCoupler.Medlyn import stom_cond_medlyn
from CanopyLSM.CH2OCoupler.BallBerry import stom_cond_ball_berry
from CanopyLSM.CH2OCoupler.Leuning import stom_cond_leuning
from CanopyLSM.CH2OCoupler.coupler_utils import total_cond_vapor
from CanopyLSM.CH2OCoupler.coupler_utils import total_cond_co2
from CanopyLSM.CH2OCoupler.coupler_utils import total_cond_cos
from CanopyLSM.CH2OCoupler.coupler_utils import transpiration
from CanopyLSM.CH2OCoupler.coupler_utils import internal_co2, surface_co2


G1 = 4. * 1000. ** 0.5  # Pa0.5


def test_medlyn_conductance():

    assert stom_cond_medlyn(10., 380., 1000., G1, 0.01) == pytest.approx(
        1.6 * 5. * 10. / 380.)


def test_ball_berry_conductance():

    assert stom_cond_ball_berry(10., 400., 0.8, 9., 0.01) == pytest.approx(
        0.18)


def test_leuning_conductance():

    assert stom_cond_leuning(10., 400., 1500., 12., 1500., 0.01) == \
        pytest.approx(0.15)


def test_conductances_are_floored_at_the_minimum():

    An = np.array([-2., -0.5, 0.])

    assert np.all(stom_cond_medlyn(An, 410., 1000., G1, 0.02) == 0.02)
    assert np.all(stom_cond_ball_berry(An, 410., 0.7, 9., 0.02) == 0.02)
    assert np.all(stom_cond_leuning(An, 410., 1000., 12., 1500., 0.02) ==
                  0.02)


def test_models_share_one_interface():

    for model in (Medlyn(G1, 0.01), BallBerry(9., 0.01),
                  Leuning(12., 0.01)):
        gs = model.validate().evaluate(12., 390., 0.75, 1200.)

        assert gs > model.g_min


def test_medlyn_vpd_floor():

    model = Medlyn(G1, 0.01)

    assert (model.evaluate(10., 400., 1., 0.) ==
            model.evaluate(10., 400., 1., model.vpd_min))
    assert np.isfinite(model.evaluate(10., 400., 1., -30.))


@pytest.mark.parametrize('model', [Medlyn(G1, 0.), Medlyn(-1., 0.01),
                                   BallBerry(9., 0.), Leuning(12., 0.01, 0.)])
def test_invalid_parameters_raise(model):

    with pytest.raises(InvalidInput):
        model.validate()


def test_conductances_in_series():

    assert total_cond_vapor(1., 0.25) == pytest.approx(0.2)
    assert total_cond_vapor(1., 0.) == 0.
    assert total_cond_co2(1., 0.25) == pytest.approx(1. / (1.37 + 6.4))
    assert total_cond_co2(1., 0.25, 0.4) == pytest.approx(
        1. / (1.37 + 6.4 + 2.5))
    assert total_cond_co2(1., 0.25, np.inf) == total_cond_co2(1., 0.25)
    assert total_cond_cos(1., 0.25) == pytest.approx(1. / (1.56 + 7.76))


def test_conductances_in_series_over_a_grid():

    g = np.logspace(-3., 1., 13)

    for gb in g:

        for gs in g:

            gt = total_cond_vapor(gb, gs)

            assert gt == pytest.approx(total_cond_vapor(gs, gb))
            assert 0. < gt <= min(gb, gs)


def test_transpiration():

    assert transpiration(cst.atm, 0.01 * cst.atm, 1., 0.25) == pytest.approx(
        2.e-3)


def test_co2_drawdown():

    Ci = internal_co2(400., 10., total_cond_co2(1.5, 0.3))
    Cs = surface_co2(400., 10., 1.5)

    assert Ci < Cs < 400.
    assert internal_co2(400., -1., 0.2) > 400.
