"""
Forward and inverse distance, volume and time calculations for FLRW cosmologies.
"""

__version__ = "0.1.0"

from .parameters import CosmologyParameters, Curvature
from .cosmology import Cosmology, FlatCosmology
from .exceptions import (
    CosmologyError,
    DomainError,
    IntegrationError,
    InvalidArgument,
    RootFindingError,
    RootNotBracketed,
    RootNotConverged,
    DegradedResultWarning,
)
from .integration import adaptive_simpson
from .distances import (
    e_func,
    h_at_z,
    hubble_distance,
    comoving_distance,
    comoving_transverse_distance,
    luminosity_distance,
    angular_diameter_distance,
    distance_modulus,
    comoving_volume,
    kpc_per_arcsecond_comoving,
    kpc_per_arcsecond_physical,
)
from .times import hubble_time, look_back_time, universe_age_now, universe_age
from .inverse import (
    solve_redshift,
    inverse_age,
    inverse_lookback_time,
    inverse_comoving_distance,
    inverse_luminosity_distance,
    inverse_comoving_volume,
)
from .batch import (
    batch_map,
    comoving_distances,
    comoving_transverse_distances,
    luminosity_distances,
    angular_diameter_distances,
    dist_mods,
    comoving_volumes,
    look_back_times,
    universe_ages,
    inverse_ages,
    inverse_lookback_times,
    inverse_comoving_distances,
    inverse_luminosity_distances,
    inverse_comoving_volumes,
)
