from CanopyLSM.Utils.constants_and_conversions import ConvertUnits
from CanopyLSM.Utils.constants_and_conversions import Constants

# initialization of the unit and constant "libraries"
conv = ConvertUnits()  # unit converter
cst = Constants()  # general constants

# save default inputs
from CanopyLSM.Utils.default_params import default_params

dparams = default_params()  # default parameter class

# other modules
from CanopyLSM.CH2OCoupler.LeafSolver import solve_leaf
from CanopyLSM.run_leaf_level import run as hrun
