# -*- coding: utf-8 -*-

"""
Shared fixtures: a sunny, well-watered C3 leaf in a mild afternoon.

"""

import pytest

from CanopyLSM.Utils.default_params import default_environment, default_leaf
from CanopyLSM.Utils.default_params import default_c3_params
from CanopyLSM.Utils.default_params import default_gs_model
from CanopyLSM.Utils.default_params import default_solver_config


@pytest.fixture
def env():

    return default_environment()


@pytest.fixture
def night_env(env):

    return env._replace(PPFD=0.)


@pytest.fixture
def leaf():

    return default_leaf()


@pytest.fixture
def params():

    return default_c3_params()


@pytest.fixture
def medlyn():

    return default_gs_model('Medlyn')


@pytest.fixture
def config():

    return default_solver_config()
