"""
Cosmological parameter bundle and the curvature classification derived from it.
"""

from enum import Enum
from typing import NamedTuple


class CosmologyParameters(NamedTuple):
    """
    Immutable set of density parameters and Hubble constant.

    Unpacks directly into the functional API, e.g. ``comoving_distance(z, *params)``.
    Flatness is not enforced.
    """

    omega_m: float
    omega_k: float
    omega_l: float
    h0: float

    @property
    def curvature(self) -> "Curvature":
        return Curvature.from_omega_k(self.omega_k)

    @property
    def omega_total(self) -> float:
        return self.omega_m + self.omega_k + self.omega_l


class Curvature(Enum):
    """
    Spatial curvature of the model, keyed on the sign of omega_k.
    """

    FLAT = "flat"
    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def from_omega_k(cls, omega_k: float) -> "Curvature":
        if omega_k > 0:
            return cls.OPEN
        if omega_k < 0:
            return cls.CLOSED
        return cls.FLAT
