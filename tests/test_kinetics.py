# -*- coding: utf-8 -*-

import warnings

import numpy as np
import pytest

from CanopyLSM.Utils import InvalidInput, TemperatureRangeWarning
from CanopyLSM.SPAC.kinetics import arrhenius, q10_temp_dep
from CanopyLSM.SPAC.kinetics import enzyme_temp_dep, enzyme_temp_optimum
from CanopyLSM.SPAC.kinetics import Q10, Arrhenius, EnzymeOptimum
from CanopyLSM.SPAC.kinetics import eval_temp_dep
from CanopyLSM.SPAC.kinetics import solub_co2, solub_cos, hydrolysis_cos


def test_temperature_response_laws():

    assert arrhenius(5.e4, 298.15, 283.15) == pytest.approx(0.34352,
                                                            rel=1.e-4)
    assert q10_temp_dep(2., 298.15, 283.15) == pytest.approx(0.35355,
                                                             rel=1.e-4)
    assert (enzyme_temp_dep(4.e4, 2.e5, 660., 298.15, 283.15) ==
            pytest.approx(0.539322, rel=1.e-4))
    assert enzyme_temp_optimum(4.e4, 2.e5, 660.) == pytest.approx(297.829,
                                                                  rel=1.e-5)


def test_laws_are_normalised_at_the_reference_temperature():

    assert arrhenius(6.e4, 298.15, 298.15) == 1.
    assert q10_temp_dep(2.3, 298.15, 298.15) == 1.
    assert enzyme_temp_dep(6.e4, 2.e5, 650., 298.15, 298.15) == 1.


def test_laws_reject_non_positive_temperatures():

    with pytest.raises(InvalidInput):
        arrhenius(5.e4, 298.15, 0.)

    with pytest.raises(InvalidInput):
        enzyme_temp_dep(4.e4, 2.e5, 660., 298.15, np.array([290., -1.]))


def test_variants_evaluate_their_law():

    assert Q10(1., 2.).evaluate(308.15) == pytest.approx(2.)
    assert (Arrhenius(404.9, 79430.).evaluate(288.15) ==
            pytest.approx(404.9 * arrhenius(79430., 298.15, 288.15)))

    vcmax = EnzymeOptimum(60., 6.e4, 2.e5, 650.)

    assert vcmax.evaluate(298.15) == pytest.approx(60.)
    assert vcmax.evaluate(vcmax.temp_optimum) > vcmax.evaluate(
        vcmax.temp_optimum - 5.)
    assert vcmax.evaluate(vcmax.temp_optimum) > vcmax.evaluate(
        vcmax.temp_optimum + 5.)


def test_variants_accept_arrays():

    T = np.linspace(280., 310., 7)

    assert np.all(np.diff(Arrhenius(1., 5.e4).evaluate(T)) > 0.)


def test_evaluation_outside_range_warns():

    with pytest.warns(TemperatureRangeWarning):
        Arrhenius(1., 5.e4).evaluate(340.)

    with pytest.warns(TemperatureRangeWarning):
        Q10(1., 2., temp_range=(280., 300.)).evaluate(np.array([290., 275.]))


def test_evaluation_within_range_is_silent():

    with warnings.catch_warnings():
        warnings.simplefilter('error')
        EnzymeOptimum(60., 6.e4, 2.e5, 650.).evaluate(300.)


def test_eval_temp_dep():

    assert eval_temp_dep(Q10(0.9, 2.), 298.15) == pytest.approx(0.9)

    with pytest.raises(TypeError):
        eval_temp_dep((0.9, 2.), 298.15)


def test_gas_solubilities():

    assert solub_co2(298.15) == pytest.approx(0.831005, rel=1.e-4)
    assert solub_cos(298.15) == pytest.approx(0.487598, rel=1.e-4)
    assert solub_cos(298.15, bunsen=False) == pytest.approx(0.0199301,
                                                            rel=1.e-4)

    # gases are less soluble in warm & salty water
    assert solub_co2(308.15) < solub_co2(298.15)
    assert solub_co2(298.15, salinity=35.) < solub_co2(298.15)


def test_cos_hydrolysis():

    assert hydrolysis_cos(288.15) == pytest.approx(6.6018e-6, rel=1.e-4)
    assert hydrolysis_cos(288.15, pH=9.) == pytest.approx(3.64899e-5,
                                                          rel=1.e-4)
    assert (hydrolysis_cos(288.15, pH=8.2, seawater=True) ==
            pytest.approx(1.40695e-5, rel=1.e-4))
