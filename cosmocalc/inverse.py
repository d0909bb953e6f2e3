"""
Recover redshift from a distance, volume or time by bracketed root finding.
"""

import logging
import math
import warnings
from typing import Callable

from scipy.optimize import brentq

from .constants import (
    INVERSE_LOWER_REDSHIFT,
    INVERSE_DISTANCE_LOWER_REDSHIFT,
    INVERSE_UPPER_REDSHIFT,
    INVERSE_TOLERANCE,
    INVERSE_MAX_ITER,
    INVERSE_FALLBACK,
)
from .distances import comoving_distance, luminosity_distance, comoving_volume
from .exceptions import (
    InvalidArgument,
    RootFindingError,
    RootNotBracketed,
    RootNotConverged,
    DegradedResultWarning,
)
from .times import look_back_time, universe_age_now

logger = logging.getLogger(__name__)


def solve_redshift(
    func: Callable[[float], float],
    target: float,
    lower: float = INVERSE_LOWER_REDSHIFT,
    upper: float = INVERSE_UPPER_REDSHIFT,
    xtol: float = INVERSE_TOLERANCE,
    maxiter: int = INVERSE_MAX_ITER,
    fallback: float = INVERSE_FALLBACK,
    strict: bool = False,
) -> float:
    """
    Solve ``func(z) == target`` for z in ``[lower, upper]`` with Brent's method.

    The search runs in ln(1+z), where distance and time measures are close to
    linear, and the root is mapped back to redshift.

    Parameters
    ----------
    func : callable
        Monotone forward function of redshift.
    target : float
        Value of ``func`` to solve for.
    lower, upper : float
        Redshift bracket.
    xtol : float
        Absolute convergence tolerance in ln(1+z).
    maxiter : int
        Iteration budget for Brent's method.
    fallback : float
        Value returned when no root can be found and ``strict`` is False.
    strict : bool
        Raise ``RootNotBracketed``/``RootNotConverged`` instead of returning ``fallback``.

    Returns
    -------
    float
        The redshift, or ``fallback`` for a degraded result.
    """

    def _residual(x):
        return func(math.expm1(x)) - target

    x_lower = math.log1p(lower)
    x_upper = math.log1p(upper)
    try:
        f_lower = _residual(x_lower)
        f_upper = _residual(x_upper)
        if f_lower == 0:
            return lower
        if f_upper == 0:
            return upper
        if (f_lower > 0) == (f_upper > 0):
            raise RootNotBracketed(
                f"No sign change for target {target} between z={lower} and z={upper}."
            )
        root, result = brentq(
            _residual,
            x_lower,
            x_upper,
            xtol=xtol,
            maxiter=maxiter,
            full_output=True,
            disp=False,
        )
        if not result.converged:
            raise RootNotConverged(
                f"Brent's method did not converge for target {target} "
                f"within {maxiter} iterations."
            )
    except RootFindingError as err:
        if strict:
            raise
        logger.warning("%s Returning %s.", err, fallback)
        warnings.warn(f"{err} Returning {fallback}.", DegradedResultWarning, stacklevel=3)
        return fallback
    return math.expm1(root)


def inverse_age(
    age: float, omega_m: float, omega_k: float, omega_l: float, h0: float, strict: bool = False
) -> float:
    """
    Redshift at which the universe had the given age in Gyr.

    Raises
    ------
    InvalidArgument
        If ``age`` is negative or older than the universe today.
    """
    age_now = universe_age_now(omega_m, omega_k, omega_l, h0)
    if age > age_now:
        raise InvalidArgument(
            f"Age {age} Gyr is older than the current age of the universe ({age_now:.4f} Gyr)."
        )
    if age < 0:
        raise InvalidArgument("Can't pass a negative age.")

    return solve_redshift(
        lambda z: age_now - look_back_time(z, omega_m, omega_k, omega_l, h0),
        age,
        strict=strict,
    )


def inverse_lookback_time(
    time: float, omega_m: float, omega_k: float, omega_l: float, h0: float, strict: bool = False
) -> float:
    """Redshift with the given lookback time in Gyr."""
    age_now = universe_age_now(omega_m, omega_k, omega_l, h0)
    if time > age_now:
        raise InvalidArgument(
            f"Lookback time {time} Gyr exceeds the current age of the universe ({age_now:.4f} Gyr)."
        )
    if time < 0:
        raise InvalidArgument("Can't pass a negative lookback time.")
    if time == 0:
        return 0.0

    return solve_redshift(
        lambda z: look_back_time(z, omega_m, omega_k, omega_l, h0), time, strict=strict
    )


def _inverse_distance_like(func, value, name, omega_m, omega_k, omega_l, h0, strict):
    if value < 0:
        raise InvalidArgument(f"Can't pass a negative {name}.")
    if value == 0:
        return 0.0
    return solve_redshift(
        lambda z: func(z, omega_m, omega_k, omega_l, h0),
        value,
        lower=INVERSE_DISTANCE_LOWER_REDSHIFT,
        strict=strict,
    )


def inverse_comoving_distance(
    distance: float, omega_m: float, omega_k: float, omega_l: float, h0: float, strict: bool = False
) -> float:
    """Redshift at the given comoving distance in Mpc."""
    return _inverse_distance_like(
        comoving_distance, distance, "comoving distance", omega_m, omega_k, omega_l, h0, strict
    )


def inverse_luminosity_distance(
    distance: float, omega_m: float, omega_k: float, omega_l: float, h0: float, strict: bool = False
) -> float:
    """Redshift at the given luminosity distance in Mpc."""
    return _inverse_distance_like(
        luminosity_distance, distance, "luminosity distance", omega_m, omega_k, omega_l, h0, strict
    )


def inverse_comoving_volume(
    volume: float, omega_m: float, omega_k: float, omega_l: float, h0: float, strict: bool = False
) -> float:
    """Redshift enclosing the given comoving volume in Mpc^3."""
    return _inverse_distance_like(
        comoving_volume, volume, "comoving volume", omega_m, omega_k, omega_l, h0, strict
    )
