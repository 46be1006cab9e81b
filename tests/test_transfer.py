# -*- coding: utf-8 -*-

import numpy as np
import pytest

from CanopyLSM import cst
from CanopyLSM.Utils import InvalidInput
from CanopyLSM.SPAC.canatm import air_molar, air_density
from CanopyLSM.SPAC.canatm import atmospheric_emissivity, longwave_down
from CanopyLSM.SPAC.transfer import GasSpecies, SoilTexture
from CanopyLSM.SPAC.transfer import dyn_visc_moistair, kin_visc_moistair
from CanopyLSM.SPAC.transfer import therm_cond_moistair, heat_cap_moistair
from CanopyLSM.SPAC.transfer import heat_cap_mass_moistair, prandtl
from CanopyLSM.SPAC.transfer import diffus_air, diffus_air_stp
from CanopyLSM.SPAC.transfer import diffus_water, diffus_soil_air
from CanopyLSM.SPAC.transfer import diffus_soil_water, diffus_soil


def test_air_concentration_and_density():

    assert air_molar(298.15, cst.atm) == pytest.approx(40.874, rel=1.e-4)
    assert air_density(273.15, cst.atm, 0.) == pytest.approx(1.29225,
                                                             rel=1.e-3)
    assert air_density(298.15, cst.atm, 1.) == pytest.approx(1.16992,
                                                             rel=1.e-3)

    # moist air is lighter than dry air
    assert air_density(298.15, cst.atm, 1.) < air_density(298.15, cst.atm, 0.)


def test_longwave_down_and_emissivity():

    assert longwave_down(298.15, 0.7) > 0.
    assert longwave_down(150., 0.) == 0.
    assert 0. < atmospheric_emissivity(298.15, 0.7) < 1.


def test_moist_air_properties_have_plausible_magnitudes():

    T, P, RH = 298.15, cst.atm, 0.7

    assert 1.7e-5 < dyn_visc_moistair(T, P, RH) < 1.9e-5
    assert 1.4e-5 < kin_visc_moistair(T, P, RH) < 1.7e-5
    assert 0.024 < therm_cond_moistair(T, P, RH) < 0.028
    assert 29. < heat_cap_moistair(T, P, RH) < 29.6
    assert 1000. < heat_cap_mass_moistair(T, P, RH) < 1030.
    assert 0.68 < prandtl(T, P, RH) < 0.75


def test_diffusivity_in_air():

    assert diffus_air('h2o', 273.15, cst.atm) == pytest.approx(2.178e-5)
    assert (diffus_air(GasSpecies.H2O, 298.15, cst.atm) ==
            diffus_air('h2o', 298.15, cst.atm))

    # diffusion is faster in warm, thin air
    assert diffus_air('co2', 298.15, cst.atm) > diffus_air('co2', 273.15,
                                                           cst.atm)
    assert diffus_air('co2', 273.15, 0.5 * cst.atm) == pytest.approx(
        2. * diffus_air_stp(GasSpecies.CO2))


def test_cos_diffuses_slower_than_co2():

    assert (diffus_air_stp('co2') / diffus_air_stp('cos') ==
            pytest.approx(1.21))


@pytest.mark.parametrize('species', ['xe', 'unobtainium', 42])
def test_untabulated_species_in_air_raise(species):

    with pytest.raises(InvalidInput):
        diffus_air(species, 298.15, cst.atm)


def test_diffusivity_in_water():

    D = diffus_water('co2', 298.15)

    assert 1.5e-9 < D < 2.5e-9
    assert diffus_water(GasSpecies.CO2, 308.15) > D

    with pytest.raises(InvalidInput):
        diffus_water('so2', 298.15)


def test_soil_diffusivities():

    T, theta_sat = 293.15, 0.45

    # no gas diffusion through saturated pores, and vice versa
    assert diffus_soil_air('co2', 'loam', T, theta_sat, theta_sat) == 0.
    assert diffus_soil_water('co2', 'loam', T, theta_sat, 0.) == 0.

    theta_w = np.array([0.1, 0.2, 0.3])
    D_air = diffus_soil_air('co2', SoilTexture.LOAM, T, theta_sat, theta_w)
    D_wat = diffus_soil_water('co2', SoilTexture.LOAM, T, theta_sat, theta_w)

    assert np.all(np.diff(D_air) < 0.)
    assert np.all(np.diff(D_wat) > 0.)
    assert np.allclose(diffus_soil('co2', 'loam', T, theta_sat, theta_w),
                       D_air + D_wat)

    # gaseous diffusion dominates in dry soils
    assert D_air[0] > D_wat[0]


def test_unknown_soil_texture_raises():

    with pytest.raises(InvalidInput):
        diffus_soil_air('co2', 'peat', 293.15, 0.45, 0.2)
