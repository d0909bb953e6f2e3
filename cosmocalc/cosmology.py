"""
Cosmology module wrapping the distance, time and inverse calculations in a single object.
"""

import math
from typing import Callable

import numpy as np

from . import distances, times, inverse
from .batch import batch_map
from .constants import DEFAULT_OMEGA_M, DEFAULT_OMEGA_K, DEFAULT_OMEGA_L, DEFAULT_H0
from .helper_funcs import validate, ValidationType
from .parameters import CosmologyParameters, Curvature


class Cosmology:
    """
    Core cosmology class.

    Every method accepts either a single value, returning a float, or an array,
    returning an ndarray evaluated in parallel.
    """

    def __init__(
        self,
        omega_m: float = DEFAULT_OMEGA_M,
        omega_k: float = DEFAULT_OMEGA_K,
        omega_lambda: float = DEFAULT_OMEGA_L,
        hubble_constant: float = DEFAULT_H0,
    ) -> None:
        for density in (omega_m, omega_k, omega_lambda):
            validate(density, ValidationType.DENSITY)
        validate(hubble_constant, ValidationType.HUBBLE_CONSTANT)

        self.omega_m = float(omega_m)
        self.omega_k = float(omega_k)
        self.omega_lambda = float(omega_lambda)
        self.hubble_constant = float(hubble_constant)
        self.h = self.hubble_constant / 100

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(omega_m={self.omega_m}, omega_k={self.omega_k}, "
            f"omega_lambda={self.omega_lambda}, hubble_constant={self.hubble_constant})"
        )

    @property
    def params(self) -> CosmologyParameters:
        return CosmologyParameters(
            self.omega_m, self.omega_k, self.omega_lambda, self.hubble_constant
        )

    @property
    def curvature(self) -> Curvature:
        return Curvature.from_omega_k(self.omega_k)

    @property
    def is_flat(self) -> bool:
        """True if the densities sum to one."""
        return math.isclose(self.params.omega_total, 1.0)

    def _evaluate(
        self, func: Callable[..., float], values, valid_type: ValidationType
    ) -> float | np.ndarray:
        validate(values, valid_type)
        if np.ndim(values) == 0:
            return func(float(values), *self.params)
        return batch_map(func, values, *self.params)

    def e_func(self, redshift):
        """Dimensionless expansion rate E(z)."""
        validate(redshift, ValidationType.REDSHIFT)
        if np.ndim(redshift) == 0:
            return distances.e_func(float(redshift), self.omega_m, self.omega_k, self.omega_lambda)
        return np.array(
            [
                distances.e_func(z, self.omega_m, self.omega_k, self.omega_lambda)
                for z in np.ravel(redshift)
            ]
        ).reshape(np.shape(redshift))

    def h_at_z(self, redshift):
        """Hubble parameter H(z) in km/s/Mpc."""
        return self.hubble_constant * self.e_func(redshift)

    def hubble_distance(self) -> float:
        return distances.hubble_distance(self.hubble_constant)

    def hubble_time(self) -> float:
        return times.hubble_time(self.hubble_constant)

    def comoving_distance(self, redshift):
        """
        Comoving distance in Mpc.
        """
        return self._evaluate(distances.comoving_distance, redshift, ValidationType.REDSHIFT)

    def comoving_transverse_distance(self, redshift):
        """
        Transverse comoving distance in Mpc.
        """
        return self._evaluate(
            distances.comoving_transverse_distance, redshift, ValidationType.REDSHIFT
        )

    def luminosity_distance(self, redshift):
        return self._evaluate(distances.luminosity_distance, redshift, ValidationType.REDSHIFT)

    def angular_diameter_distance(self, redshift):
        return self._evaluate(
            distances.angular_diameter_distance, redshift, ValidationType.REDSHIFT
        )

    def dist_mod(self, redshift):
        """
        Distance modulus in magnitudes. Raises DomainError at z = 0.
        """
        return self._evaluate(distances.distance_modulus, redshift, ValidationType.REDSHIFT)

    def comoving_volume(self, redshift):
        """
        Comoving volume in Mpc^3. Divide by 1e9 for Gpc^3.
        """
        return self._evaluate(distances.comoving_volume, redshift, ValidationType.REDSHIFT)

    def kpc_per_arcsecond_comoving(self, redshift):
        return self._evaluate(
            distances.kpc_per_arcsecond_comoving, redshift, ValidationType.REDSHIFT
        )

    def kpc_per_arcsecond_physical(self, redshift):
        return self._evaluate(
            distances.kpc_per_arcsecond_physical, redshift, ValidationType.REDSHIFT
        )

    def look_back_time(self, redshift):
        """
        Lookback time in Gyr.
        """
        return self._evaluate(times.look_back_time, redshift, ValidationType.REDSHIFT)

    def age(self, redshift):
        """
        Age of the universe in Gyr at the given redshift.
        """
        return self._evaluate(times.universe_age, redshift, ValidationType.REDSHIFT)

    def age_now(self) -> float:
        return times.universe_age_now(*self.params)

    def inverse_age(self, age):
        """
        Redshift at which the universe had the given age in Gyr.
        """
        return self._evaluate(inverse.inverse_age, age, ValidationType.AGE)

    def inverse_lookback_time(self, lookback_time):
        return self._evaluate(
            inverse.inverse_lookback_time, lookback_time, ValidationType.LOOKBACK_TIME
        )

    def inverse_comoving_distance(self, distance):
        """
        Redshift at the given comoving distance in Mpc.
        """
        return self._evaluate(inverse.inverse_comoving_distance, distance, ValidationType.DISTANCE)

    def inverse_luminosity_distance(self, distance):
        return self._evaluate(
            inverse.inverse_luminosity_distance, distance, ValidationType.DISTANCE
        )

    def inverse_comoving_volume(self, volume):
        """
        Redshift enclosing the given comoving volume in Mpc^3.
        """
        return self._evaluate(inverse.inverse_comoving_volume, volume, ValidationType.VOLUME)


class FlatCosmology(Cosmology):
    """
    Flat LCDM cosmology built from h and omega_matter.
    """

    def __init__(self, h: float, omega_matter: float) -> None:
        """
        Read in h and Om0 and build cosmology from that.
        """
        super().__init__(
            omega_m=omega_matter,
            omega_k=0.0,
            omega_lambda=1 - omega_matter,
            hubble_constant=100 * h,
        )
