# -*- coding: utf-8 -*-

"""
Solves the coupled leaf for a batch of independent conditions, e.g. the
rows of a gas exchange dataset, each row holding the air conditions the
leaf is exposed to.

This file is part of the CanopyLSM model.

Copyright (c) 2022 Manon E. B. Sabot

Please refer to the terms of the MIT License, which you should have
received along with the CanopyLSM.

"""

__title__ = "Run the coupled leaf over a batch of conditions"
__author__ = "Manon E. B. Sabot"
__version__ = "9.0 (03.02.2021)"
__email__ = "m.e.b.sabot@gmail.com"


# ======================================================================

# general modules
import collections  # ordered dictionaries
import logging  # flag the failed rows
import numpy as np  # maths operations
import pandas as pd  # read/write dataframes

# own modules
from CanopyLSM.SPAC.states import EnvironmentState, LeafState
from CanopyLSM.CH2OCoupler.LeafSolver import solve_leaf

logger = logging.getLogger(__name__)

# input columns, the last two being optional
INPUT_KEYS = ['Tair', 'Patm', 'RH', 'u', 'PPFD', 'CO2', 'O2', 'sw_rad',
              'lw_down']


# ======================================================================

def _optional(row, key):

    try:
        value = row[key]

    except (IndexError, KeyError, ValueError):
        return None

    if np.isnan(value):
        return None

    return float(value)


def environment(row):

    """
    Builds the EnvironmentState of a single row of forcing, which can be
    a record, a pandas series, or a dictionary.

    """

    return EnvironmentState(*[float(row[key]) for key in INPUT_KEYS[:-2]],
                            sw_rad=_optional(row, 'sw_rad'),
                            lw_down=_optional(row, 'lw_down'))


def over_rows(force, step, leaf, params, gs_model, config, previous=None):

    """
    Solves the leaf at a given row of the forcing.

    Arguments:
    ----------
    force: recarray object
        all input data

    step: int
        current row

    leaf: LeafGeometry
        leaf dimension & radiative properties

    params: PhotosynthesisParameters
        the photosynthetic parameters

    gs_model: BallBerry, Leuning, or Medlyn
        the stomatal conductance model

    config: SolverConfig
        tolerances and caps of the solver

    previous: LeafState
        solution used as a first guess, if any

    Returns:
    --------
    The solver's outcome.

    """

    res = solve_leaf(environment(force[step]), leaf, params, gs_model, config,
                     init=previous)

    if not res.converged:
        logger.info('row %d: %s after %d iterations', step, res.status,
                    res.n_iter)

    return res


def run(df, leaf, params, gs_model, config, warm_start=False):

    """
    Solves the coupled leaf energy balance, stomatal conductance, and
    photosynthesis for every row of df. Rows for which the solver did
    not converge are kept, with NaN outputs, and flagged by their
    status.

    Arguments:
    ----------
    df: pandas dataframe
        dataframe containing the input conditions: Tair [degK], Patm
        [Pa], RH [0-1], u [m s-1], PPFD [umol m-2 s-1], CO2 & O2 [umol
        mol-1], and optionally sw_rad & lw_down [W m-2]

    leaf: LeafGeometry
        leaf dimension & radiative properties

    params: PhotosynthesisParameters
        the photosynthetic parameters

    gs_model: BallBerry, Leuning, or Medlyn
        the stomatal conductance model

    config: SolverConfig
        tolerances and caps of the solver

    warm_start: bool
        if True, each row is initialised from the last converged row,
        which speeds up the solving of gradually changing conditions

    Returns:
    --------
    df2: pandas dataframe
        dataframe of the outputs, indexed like df:
            Tleaf, Ci, Cs, An, gs, gbH, gbW, E, Rnet, H, LE, residual,
            vpd_leaf, rubisco_limited, status, n_iter

    """

    # from pandas to recarray object for execution speed
    force = df.to_records(index=False)

    results = []
    previous = None

    for step in range(len(force)):

        res = over_rows(force, step, leaf, params, gs_model, config,
                        previous=previous if warm_start else None)

        if res.converged:
            previous = res.state
            results.append(tuple(res.state) + (res.status, res.n_iter))

        else:
            results.append((np.nan, ) * len(LeafState._fields) +
                           (res.status, res.n_iter))

    # for the output dic, the order of the keys matters!
    output_dic = collections.OrderedDict()
    keys = list(LeafState._fields) + ['status', 'n_iter']
    tpl_out = list(zip(*results))

    for i, key in enumerate(keys):

        if len(tpl_out) > 0:
            output_dic[key] = tpl_out[i]

        else:
            output_dic[key] = []

    return pd.DataFrame(output_dic, index=df.index)
