# -*- coding: utf-8 -*-

"""
Exceptions and warnings raised by the model.

Domain violations in the property functions raise InvalidInput straight
away. Failures of the coupled leaf solver are not raised, they are
returned as result objects (see CH2OCoupler.LeafSolver), with the
exceptions below carried as their cause.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

"""

__title__ = "Model errors and warnings"
__author__ = "Manon E. B. Sabot"
__version__ = "1.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import numpy as np  # array manipulations, math operators


# ======================================================================

class CanopyLSMError(Exception):

    """
    Base class of all the model's exceptions.

    """

    pass


class InvalidInput(CanopyLSMError, ValueError):

    """
    An input lies outside the physical domain of a function, e.g. a
    non-positive absolute temperature or a relative humidity outside of
    [0, 1], or an unsupported gas species / soil texture.

    """

    pass


class PhotorespirationDominant(CanopyLSMError, ArithmeticError):

    """
    The CO2 concentration at the carboxylation site is at or below the
    photorespiratory compensation point, so the Farquhar limiting rates
    are no longer defined.

    """

    def __init__(self, co2, gamma, msg=None):

        self.co2 = co2
        self.gamma = gamma

        if msg is None:
            msg = ('CO2 at the carboxylation site (%s umol mol-1) does not '
                   'exceed the compensation point (%s umol mol-1)'
                   % (co2, gamma))

        super(PhotorespirationDominant, self).__init__(msg)


class NoPhysicalSolution(CanopyLSMError):

    """
    The leaf energy balance has no root within the physically plausible
    leaf temperature window.

    """

    pass


class TemperatureRangeWarning(UserWarning):

    """
    A temperature dependence law was evaluated outside its stated range
    of applicability.

    """

    pass


# ======================================================================

def check_temperature(T, name='temperature'):

    """
    Raises InvalidInput if any absolute temperature is not strictly
    positive (or not a number).

    """

    if not np.all(np.asarray(T) > 0.):
        raise InvalidInput('%s must be > 0 degK, got %s' % (name, T))

    return


def check_pressure(P, name='pressure'):

    if not np.all(np.asarray(P) > 0.):
        raise InvalidInput('%s must be > 0 Pa, got %s' % (name, P))

    return


def check_fraction(x, name='relative humidity'):

    x = np.asarray(x)

    if not np.all((x >= 0.) & (x <= 1.)):
        raise InvalidInput('%s must lie within [0, 1], got %s' % (name, x))

    return
