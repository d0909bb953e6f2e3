"""
Physical constants, unit conversions and default parameters used by cosmocalc.
"""

import math

# Speed of light
SPEED_OF_LIGHT = 299_792.458  # km/s

# Hubble time conversion: (km per Mpc) / (seconds per year), scaled to Gyr.
KM_PER_MPC = 3.08568025e19
SECONDS_PER_YEAR = 31_556_926.0
YEARS_PER_GYR = 1e9

RADIANS_PER_ARCSEC = math.pi / 648_000.0

KPC_PER_MPC = 1e3
MPC3_PER_GPC3 = 1e9

# Defaults for callers (the engine itself never applies them)
DEFAULT_OMEGA_M = 0.3
DEFAULT_OMEGA_K = 0.0
DEFAULT_OMEGA_L = 0.7
DEFAULT_H0 = 70.0  # km/s/Mpc

# Comoving distance integration
DISTANCE_TOLERANCE = 1e-6
DISTANCE_MIN_STEP = 1e-8

# Lookback time / age integration
TIME_TOLERANCE = 1e-8
TIME_MIN_STEP = 1e-11

# Stand-in for infinity when integrating the age of the universe.
AGE_UPPER_REDSHIFT = 1200.0

# Redshift inversion
INVERSE_LOWER_REDSHIFT = 1e-9
INVERSE_UPPER_REDSHIFT = 1500.0
# Distance-like inversions start above the comoving distance minimum step.
INVERSE_DISTANCE_LOWER_REDSHIFT = 1e-7
INVERSE_TOLERANCE = 1e-8
INVERSE_MAX_ITER = 30
INVERSE_FALLBACK = 0.0

# Redshifts above this are flagged when validating input.
LARGE_REDSHIFT = 1100.0
