from CanopyLSM.SPAC.water import e_sat, e_sat_prime, e_sat_ice
from CanopyLSM.SPAC.water import latent_heat_vap, latent_heat_sub
from CanopyLSM.SPAC.water import vapor_pressure_deficit, vapor_mole_frac
from CanopyLSM.SPAC.canatm import air_molar, air_density, longwave_down
from CanopyLSM.SPAC.transfer import GasSpecies, SoilTexture, diffus_air
from CanopyLSM.SPAC.transfer import heat_cap_moistair, dyn_visc_moistair
from CanopyLSM.SPAC.radiation import stefan_boltzmann, PAR_to_shortwave
from CanopyLSM.SPAC.kinetics import Q10, Arrhenius, EnzymeOptimum
from CanopyLSM.SPAC.kinetics import eval_temp_dep
from CanopyLSM.SPAC.states import EnvironmentState, LeafGeometry, LeafState
from CanopyLSM.SPAC.photosynthesis import PhotosynPathway
from CanopyLSM.SPAC.photosynthesis import PhotosynthesisParameters
from CanopyLSM.SPAC.photosynthesis import assimilate_c3, rubisco_limit
from CanopyLSM.SPAC.leaf import bl_cond_heat, bl_cond_vapor
from CanopyLSM.SPAC.leaf import leaf_energy_fluxes, energy_imbalance
from CanopyLSM.SPAC.leaf import psychrometric_constant, penman_monteith
