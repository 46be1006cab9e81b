# -*- coding: utf-8 -*-

"""
Blackbody radiation and conversions between radiant energy and photon
fluxes.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

References:
-----------
* Meek, D. W., Hatfield, J. L., Howell, T. A., Idso, S. B., &
  Reginato, R. J. (1984). A generalized relationship between
  photosynthetically active radiation and solar radiation. Agronomy
  Journal, 76(6), 939-945.
* Norman, J. M., & Campbell, G. S. (1998). An introduction to
  environmental biophysics. Springer, New York.

"""

__title__ = "Blackbody radiation"
__author__ = "Manon E. B. Sabot"
__version__ = "1.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators

# own modules
from CanopyLSM import conv, cst  # unit converter & general constants
from CanopyLSM.Utils.errors import InvalidInput, check_temperature


# ======================================================================

def ephoton(wl):

    """
    Energy of a single photon of wavelength wl [m], in J.

    """

    return cst.h * cst.c / wl


def energy2photon(flux, wl):

    """
    Converts a monochromatic energy flux into a photon flux.

    Arguments:
    ----------
    flux: array or float
        energy flux [W m-2]

    wl: array or float
        wavelength [m]

    Returns:
    --------
    The photon flux [mol m-2 s-1].

    """

    return flux * wl / (cst.N_A * cst.h * cst.c)


def planck(wl, T):

    """
    Spectral radiance emitted by a blackbody, Planck's law.

    Arguments:
    ----------
    wl: array or float
        wavelength [m]

    T: array or float
        temperature of the emitter [degK]

    Returns:
    --------
    The spectral radiance [W m-2 sr-1 m-1].

    """

    check_temperature(T)

    return cst.c_1L * wl ** -5. / np.expm1(cst.c_2 / (wl * T))


def stefan_boltzmann(T):

    """
    Total energy flux emitted by a blackbody at temperature T [degK],
    in W m-2.

    """

    check_temperature(T)

    return cst.sigma * T ** 4.


def blackbody_temperature(flux):

    """
    Inverts the Stefan-Boltzmann law: temperature [degK] of a blackbody
    emitting the energy flux [W m-2].

    """

    if not np.all(np.asarray(flux) > 0.):
        raise InvalidInput('the emitted flux must be > 0 W m-2, got %s' %
                           (flux, ))

    return (flux / cst.sigma) ** 0.25


blackbody_temp = blackbody_temperature


def PAR_to_shortwave(PAR):

    """
    Converts photosynthetically active radiation into global shortwave
    radiation, using the empirical linear fit of Meek et al. (1984).
    The result is floored to zero.

    Arguments:
    ----------
    PAR: array or float
        photosynthetic photon flux density [umol m-2 s-1]

    Returns:
    --------
    The shortwave radiation [W m-2].

    """

    return np.maximum(0., conv.PAR_2_SW * PAR + conv.PAR_2_SW_OFFSET)
