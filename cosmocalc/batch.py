"""
Parallel batch evaluation of the scalar cosmology functions.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Callable, Sequence

import numpy as np

from .distances import (
    comoving_distance,
    comoving_transverse_distance,
    luminosity_distance,
    angular_diameter_distance,
    distance_modulus,
    comoving_volume,
)
from .times import look_back_time, universe_age
from .inverse import (
    inverse_age,
    inverse_lookback_time,
    inverse_comoving_distance,
    inverse_luminosity_distance,
    inverse_comoving_volume,
)

logger = logging.getLogger(__name__)


def _apply(func: Callable[..., float], args: tuple, value: float) -> float:
    return func(value, *args)


def batch_map(
    func: Callable[..., float],
    values: Sequence[float],
    *args: float,
    max_workers: int | None = None,
) -> np.ndarray:
    """
    Evaluate ``func(value, *args)`` for every value using a process pool.

    The output is index aligned with ``values``. Short inputs are evaluated
    serially. Any failing element fails the whole batch. The result has the
    same shape as ``values``.
    """
    shape = np.shape(values)
    values = [float(value) for value in np.ravel(values)]
    if len(values) < 2:
        return np.array([func(value, *args) for value in values], dtype=float).reshape(shape)

    workers = min(max_workers or os.cpu_count() or 1, len(values))
    chunksize = max(1, len(values) // (4 * workers))
    logger.debug(
        "Evaluating %s over %d values on %d workers.", func.__name__, len(values), workers
    )
    with ProcessPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(partial(_apply, func, args), values, chunksize=chunksize))
    return np.array(results, dtype=float).reshape(shape)


def comoving_distances(redshifts, omega_m, omega_k, omega_l, h0):
    """Comoving distances in Mpc for many redshifts."""
    return batch_map(comoving_distance, redshifts, omega_m, omega_k, omega_l, h0)


def comoving_transverse_distances(redshifts, omega_m, omega_k, omega_l, h0):
    """Transverse comoving distances in Mpc for many redshifts."""
    return batch_map(comoving_transverse_distance, redshifts, omega_m, omega_k, omega_l, h0)


def luminosity_distances(redshifts, omega_m, omega_k, omega_l, h0):
    return batch_map(luminosity_distance, redshifts, omega_m, omega_k, omega_l, h0)


def angular_diameter_distances(redshifts, omega_m, omega_k, omega_l, h0):
    return batch_map(angular_diameter_distance, redshifts, omega_m, omega_k, omega_l, h0)


def dist_mods(redshifts, omega_m, omega_k, omega_l, h0):
    """Distance moduli for many redshifts."""
    return batch_map(distance_modulus, redshifts, omega_m, omega_k, omega_l, h0)


def comoving_volumes(redshifts, omega_m, omega_k, omega_l, h0):
    """Comoving volumes in Mpc^3 for many redshifts."""
    return batch_map(comoving_volume, redshifts, omega_m, omega_k, omega_l, h0)


def look_back_times(redshifts, omega_m, omega_k, omega_l, h0):
    return batch_map(look_back_time, redshifts, omega_m, omega_k, omega_l, h0)


def universe_ages(redshifts, omega_m, omega_k, omega_l, h0):
    """Ages of the universe in Gyr at many redshifts."""
    return batch_map(universe_age, redshifts, omega_m, omega_k, omega_l, h0)


def inverse_ages(ages, omega_m, omega_k, omega_l, h0):
    """Redshifts at many ages in Gyr."""
    return batch_map(inverse_age, ages, omega_m, omega_k, omega_l, h0)


def inverse_lookback_times(times, omega_m, omega_k, omega_l, h0):
    return batch_map(inverse_lookback_time, times, omega_m, omega_k, omega_l, h0)


def inverse_comoving_distances(distances, omega_m, omega_k, omega_l, h0):
    return batch_map(inverse_comoving_distance, distances, omega_m, omega_k, omega_l, h0)


def inverse_luminosity_distances(distances, omega_m, omega_k, omega_l, h0):
    return batch_map(inverse_luminosity_distance, distances, omega_m, omega_k, omega_l, h0)


def inverse_comoving_volumes(volumes, omega_m, omega_k, omega_l, h0):
    return batch_map(inverse_comoving_volume, volumes, omega_m, omega_k, omega_l, h0)
