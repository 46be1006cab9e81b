from CanopyLSM.Utils.constants_and_conversions import c2k, k2c
from CanopyLSM.Utils.errors import CanopyLSMError, InvalidInput
from CanopyLSM.Utils.errors import PhotorespirationDominant
from CanopyLSM.Utils.errors import NoPhysicalSolution, TemperatureRangeWarning
from CanopyLSM.Utils.calculate_solar_geometry import solar_angle, cos_zenith
