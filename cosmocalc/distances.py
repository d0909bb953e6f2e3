"""
Expansion function and the distance measures built on the comoving distance integral.

All distances are in Mpc and volumes in Mpc^3. Every function takes the redshift
followed by ``omega_m, omega_k, omega_l, h0`` so a ``CosmologyParameters`` can be
unpacked straight into the call.
"""

import math

from .constants import (
    SPEED_OF_LIGHT,
    RADIANS_PER_ARCSEC,
    KPC_PER_MPC,
    DISTANCE_TOLERANCE,
    DISTANCE_MIN_STEP,
)
from .exceptions import DomainError
from .integration import adaptive_simpson
from .parameters import Curvature


def e_func(z: float, omega_m: float, omega_k: float, omega_l: float) -> float:
    """
    Dimensionless expansion rate E(z) = H(z)/H0.
    """
    zp1 = 1.0 + z
    radicand = omega_m * zp1**3 + omega_k * zp1**2 + omega_l
    if not radicand >= 0.0:
        raise DomainError(
            f"E(z) is undefined at z={z}: negative radicand {radicand} "
            f"for omega_m={omega_m}, omega_k={omega_k}, omega_l={omega_l}."
        )
    return math.sqrt(radicand)


def h_at_z(z: float, omega_m: float, omega_k: float, omega_l: float, h0: float) -> float:
    """Hubble parameter at redshift z in km/s/Mpc."""
    return h0 * e_func(z, omega_m, omega_k, omega_l)


def hubble_distance(h0: float) -> float:
    """
    Hubble distance c/H0 in Mpc.
    """
    if h0 == 0:
        raise DomainError("Hubble distance is undefined for a Hubble constant of zero.")
    return SPEED_OF_LIGHT / h0


def comoving_distance(z: float, omega_m: float, omega_k: float, omega_l: float, h0: float) -> float:
    """
    Line-of-sight comoving distance.

    Parameters
    ----------
    z : float
        Redshift.
    omega_m : float
        Matter density (often 0.3 in LCDM).
    omega_k : float
        Curvature density (often 0 in LCDM).
    omega_l : float
        Dark energy density (often 0.7 in LCDM).
    h0 : float
        Hubble constant in km/s/Mpc.

    Returns
    -------
    float
        Comoving distance in Mpc.

    Raises
    ------
    IntegrationError
        If ``z`` is nonzero but too close to zero to integrate.
    """
    if z == 0:
        return 0.0
    integral = adaptive_simpson(
        lambda x: 1.0 / e_func(x, omega_m, omega_k, omega_l),
        0.0,
        z,
        DISTANCE_MIN_STEP,
        DISTANCE_TOLERANCE,
    )
    return hubble_distance(h0) * integral


def comoving_transverse_distance(
    z: float, omega_m: float, omega_k: float, omega_l: float, h0: float
) -> float:
    """
    Transverse comoving distance D_M, which folds the spatial curvature into D_C.
    """
    co_dist = comoving_distance(z, omega_m, omega_k, omega_l, h0)
    h_dist = hubble_distance(h0)

    match Curvature.from_omega_k(omega_k):
        case Curvature.OPEN:
            sqrt_ok = math.sqrt(omega_k)
            return h_dist / sqrt_ok * math.sinh(sqrt_ok * co_dist / h_dist)
        case Curvature.CLOSED:
            sqrt_ok = math.sqrt(abs(omega_k))
            return h_dist / sqrt_ok * math.sin(sqrt_ok * co_dist / h_dist)
        case Curvature.FLAT:
            return co_dist


def luminosity_distance(z: float, omega_m: float, omega_k: float, omega_l: float, h0: float) -> float:
    """Luminosity distance D_M (1+z) in Mpc."""
    return comoving_transverse_distance(z, omega_m, omega_k, omega_l, h0) * (1.0 + z)


def angular_diameter_distance(
    z: float, omega_m: float, omega_k: float, omega_l: float, h0: float
) -> float:
    """Angular diameter distance D_M / (1+z) in Mpc."""
    if 1.0 + z == 0:
        raise DomainError("Angular diameter distance is undefined at z = -1.")
    return comoving_transverse_distance(z, omega_m, omega_k, omega_l, h0) / (1.0 + z)


def distance_modulus(z: float, omega_m: float, omega_k: float, omega_l: float, h0: float) -> float:
    """
    Distance modulus 5 log10(D_L / 10 pc).

    Raises
    ------
    DomainError
        If the luminosity distance is not positive, which includes z = 0.
    """
    lum_dist = luminosity_distance(z, omega_m, omega_k, omega_l, h0)
    if lum_dist <= 0:
        raise DomainError(
            f"Distance modulus is undefined at z={z}: luminosity distance is {lum_dist} Mpc."
        )
    return 5.0 * math.log10(lum_dist) + 25.0


def comoving_volume(z: float, omega_m: float, omega_k: float, omega_l: float, h0: float) -> float:
    """
    Comoving volume out to redshift z in Mpc^3.

    The curved branches follow the long-standing cosmocalc expressions, which do
    not match Hogg (1999): the asinh form is used for omega_k < 0 (with
    sin(|omega_k|) in place of sqrt(|omega_k|)), and the open branch returns the
    sinh expression alone. Only the flat branch is a true volume.
    """
    h_dist = hubble_distance(h0)
    co_dist_tran = comoving_transverse_distance(z, omega_m, omega_k, omega_l, h0)
    ratio = co_dist_tran / h_dist

    match Curvature.from_omega_k(omega_k):
        case Curvature.FLAT:
            return (4.0 / 3.0) * math.pi * co_dist_tran**3
        case Curvature.CLOSED:
            radicand = 1.0 + omega_k * ratio**2
            if radicand < 0:
                raise DomainError(
                    f"Comoving volume is undefined at z={z}: negative radicand {radicand}."
                )
            return (4.0 * math.pi * h_dist**3 / (2.0 * omega_k)) * (
                ratio * math.sqrt(radicand)
                - (1.0 / math.sqrt(abs(omega_k))) * math.asinh(math.sin(abs(omega_k)) * ratio)
            )
        case _:
            return h_dist * (1.0 / math.sqrt(omega_k)) * math.sinh(math.sqrt(omega_k) * ratio)


def kpc_per_arcsecond_comoving(
    z: float, omega_m: float, omega_k: float, omega_l: float, h0: float
) -> float:
    """Comoving transverse scale in kpc per arcsecond."""
    co_dist_tran = comoving_transverse_distance(z, omega_m, omega_k, omega_l, h0)
    return co_dist_tran * KPC_PER_MPC * RADIANS_PER_ARCSEC


def kpc_per_arcsecond_physical(
    z: float, omega_m: float, omega_k: float, omega_l: float, h0: float
) -> float:
    """Proper (physical) transverse scale in kpc per arcsecond."""
    ang_dist = angular_diameter_distance(z, omega_m, omega_k, omega_l, h0)
    return ang_dist * KPC_PER_MPC * RADIANS_PER_ARCSEC
