from CanopyLSM.CH2OCoupler.coupler_utils import total_cond_vapor
from CanopyLSM.CH2OCoupler.coupler_utils import total_cond_co2
from CanopyLSM.CH2OCoupler.coupler_utils import transpiration
from CanopyLSM.CH2OCoupler.BallBerry import BallBerry
from CanopyLSM.CH2OCoupler.Leuning import Leuning
from CanopyLSM.CH2OCoupler.Medlyn import Medlyn
