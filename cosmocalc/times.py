"""
Lookback time and age of the universe, in Gyr.
"""

from .constants import (
    KM_PER_MPC,
    SECONDS_PER_YEAR,
    YEARS_PER_GYR,
    TIME_TOLERANCE,
    TIME_MIN_STEP,
    AGE_UPPER_REDSHIFT,
)
from .distances import e_func
from .exceptions import DomainError
from .integration import adaptive_simpson


def hubble_time(h0: float) -> float:
    """
    Hubble time 1/H0 in Gyr, for H0 in km/s/Mpc.
    """
    if h0 == 0:
        raise DomainError("Hubble time is undefined for a Hubble constant of zero.")
    return (KM_PER_MPC / (h0 * SECONDS_PER_YEAR)) / YEARS_PER_GYR


def _time_integral(upper: float, omega_m: float, omega_k: float, omega_l: float) -> float:
    return adaptive_simpson(
        lambda z: 1.0 / (e_func(z, omega_m, omega_k, omega_l) * (1.0 + z)),
        0.0,
        upper,
        TIME_MIN_STEP,
        TIME_TOLERANCE,
    )


def look_back_time(z: float, omega_m: float, omega_k: float, omega_l: float, h0: float) -> float:
    """
    Time elapsed since light left an object at redshift z.

    Redshifts at or below the minimum integration step return 0.
    """
    if z <= TIME_MIN_STEP:
        return 0.0
    return hubble_time(h0) * _time_integral(z, omega_m, omega_k, omega_l)


def universe_age_now(omega_m: float, omega_k: float, omega_l: float, h0: float) -> float:
    """
    Present age of the universe in Gyr.

    The integral to infinity is truncated at ``AGE_UPPER_REDSHIFT``.
    """
    return hubble_time(h0) * _time_integral(AGE_UPPER_REDSHIFT, omega_m, omega_k, omega_l)


def universe_age(z: float, omega_m: float, omega_k: float, omega_l: float, h0: float) -> float:
    """Age of the universe at redshift z in Gyr."""
    return universe_age_now(omega_m, omega_k, omega_l, h0) - look_back_time(
        z, omega_m, omega_k, omega_l, h0
    )
