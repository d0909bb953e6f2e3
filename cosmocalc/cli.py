"""
Command line cosmology calculator.
"""

import argparse
import logging
import sys
import warnings

from .constants import (
    DEFAULT_OMEGA_M,
    DEFAULT_OMEGA_K,
    DEFAULT_OMEGA_L,
    DEFAULT_H0,
    MPC3_PER_GPC3,
    KPC_PER_MPC,
)
from .cosmology import Cosmology
from .exceptions import CosmologyError, DomainError, DegradedResultWarning

logger = logging.getLogger(__name__)


def _parse_float(string: str) -> float:
    try:
        return float(string)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Value {string!r} is not a valid number.") from None


def _add_cosmology_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-m", "--omega-m", dest="omega_m", type=_parse_float, default=DEFAULT_OMEGA_M,
        help=f"Omega matter, mass density of the universe. [default {DEFAULT_OMEGA_M}]",
    )
    parser.add_argument(
        "-l", "--omega-l", dest="omega_l", type=_parse_float, default=DEFAULT_OMEGA_L,
        help=f"Omega lambda, effective mass density of dark energy. [default {DEFAULT_OMEGA_L}]",
    )
    parser.add_argument(
        "-k", "--omega-k", dest="omega_k", type=_parse_float, default=DEFAULT_OMEGA_K,
        help=f"Omega k, curvature density. [default {DEFAULT_OMEGA_K}]",
    )
    parser.add_argument(
        "-H", "--hubble-const", "--hubble-constant", dest="h0", type=_parse_float,
        default=DEFAULT_H0,
        help=f"Hubble constant in km/s/Mpc. [default {DEFAULT_H0}]",
    )
    parser.add_argument(
        "--allow-curved", action="store_true",
        help="Accept parameters that do not sum to one.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cosmocalc", description="Cosmology calculator.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debugging output.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary = subparsers.add_parser(
        "all", aliases=["sum", "summary"],
        help="Print out a summary of values for the given redshift.",
    )
    summary.set_defaults(calc="all")
    summary.add_argument("z", type=_parse_float, help="Redshift.")
    _add_cosmology_args(summary)

    invertible = [
        ("codist", ["co_dist", "comoving_distance", "CoDist"],
         "Calculate comoving distance in Mpc.", "comoving distance in Mpc"),
        ("lumdist", ["lum_dist", "luminosity_distance", "LumDist"],
         "Calculate the luminosity distance in Mpc.", "luminosity distance in Mpc"),
        ("covol", ["co_vol", "comoving_volume", "CoVol"],
         "Calculate the comoving volume in Gpc^3.", "comoving volume in Gpc^3"),
        ("lookback", ["look_back", "look_back_time", "lookback_time", "TravelTime"],
         "Calculate the lookback time in Gyr.", "lookback time in Gyr"),
        ("age", ["Age", "UniAge"],
         "Calculate the age of the universe in Gyr at a given redshift.", "age in Gyr"),
    ]
    for name, aliases, about, quantity in invertible:
        sub = subparsers.add_parser(name, aliases=aliases, help=about)
        sub.set_defaults(calc=name)
        sub.add_argument("input", type=_parse_float, help=f"Either redshift or {quantity}.")
        sub.add_argument(
            "-i", "--inverse", action="store_true",
            help=f"Inverse. Redshift at a given {quantity}.",
        )
        _add_cosmology_args(sub)

    distmod = subparsers.add_parser(
        "distmod", aliases=["DistanceMod", "DistMod", "Distmod", "distance_modulus", "dist_mod"],
        help="Distance modulus at a given redshift.",
    )
    distmod.set_defaults(calc="distmod")
    distmod.add_argument("z", type=_parse_float, help="Redshift.")
    _add_cosmology_args(distmod)

    for name, aliases, about in [
        ("angscale_phys", ["angscale", "angular_scale", "angular_scale_physical", "angscale_physical"],
         "The physical angular scale on sky in kpc/arcsec."),
        ("angscale_co", ["angular_scale_comoving", "angscale_comoving"],
         "The comoving angular scale on sky in kpc/arcsec."),
    ]:
        sub = subparsers.add_parser(name, aliases=aliases, help=about)
        sub.set_defaults(calc=name)
        sub.add_argument("z", type=_parse_float, help="Redshift.")
        sub.add_argument(
            "-M", "--mpc-per-arcmin", dest="mpc", action="store_true",
            help="Return the angular scale in units of Mpc/arcmin.",
        )
        _add_cosmology_args(sub)

    return parser


def _summary(cosmo: Cosmology, z: float) -> list[str]:
    if 1.0 + z == 0:
        raise DomainError("Summary is undefined at z = -1: the scale factor diverges.")
    try:
        dist_mod = f"{cosmo.dist_mod(z):.4f} mag"
    except DomainError:
        dist_mod = "undefined"
    return [
        f"Redshift (z): {z}",
        f"Expansion factor (a): {1. / (1. + z):.4f}",
        "",
        f"Comoving distance: {cosmo.comoving_distance(z):.4f} Mpc",
        f"Luminosity distance: {cosmo.luminosity_distance(z):.4f} Mpc",
        f"Angular diameter distance: {cosmo.angular_diameter_distance(z):.4f} Mpc",
        f"Comoving transverse distance: {cosmo.comoving_transverse_distance(z):.4f} Mpc",
        f"Distance Modulus: {dist_mod}",
        f"Physical angular scale: {cosmo.kpc_per_arcsecond_physical(z):.4f} kpc/arcsec",
        f"Comoving angular scale: {cosmo.kpc_per_arcsecond_comoving(z):.4f} kpc/arcsec",
        f"Comoving Volume: {cosmo.comoving_volume(z) / MPC3_PER_GPC3:.4f} Gpc³",
        "",
        f"H(z): {cosmo.h_at_z(z):.4f}",
        f"Expansion rate: {cosmo.h_at_z(z) / (1. + z):.4f}",
        "",
        f"Age: {cosmo.age(z):.4f} Gyr",
        f"Look back time: {cosmo.look_back_time(z):.4f} Gyr",
        f"Universe Age Now: {cosmo.age_now():.4f} Gyr",
        f"Hubble Time: {cosmo.hubble_time():.4f} Gyr",
    ]


def run(cosmo: Cosmology, args: argparse.Namespace) -> list[str]:
    """
    Evaluate a parsed command and return the lines to print.
    """
    match args.calc:
        case "all":
            return _summary(cosmo, args.z)
        case "codist":
            if args.inverse:
                return [f"redshift = {cosmo.inverse_comoving_distance(args.input)}"]
            return [f"{cosmo.comoving_distance(args.input)} Mpc"]
        case "lumdist":
            if args.inverse:
                return [f"redshift = {cosmo.inverse_luminosity_distance(args.input)}"]
            return [f"{cosmo.luminosity_distance(args.input)} Mpc"]
        case "covol":
            if args.inverse:
                return [f"redshift = {cosmo.inverse_comoving_volume(args.input * MPC3_PER_GPC3)}"]
            return [f"{cosmo.comoving_volume(args.input) / MPC3_PER_GPC3} Gpc³"]
        case "lookback":
            if args.inverse:
                return [f"redshift = {cosmo.inverse_lookback_time(args.input)}"]
            return [f"{cosmo.look_back_time(args.input)} Gyr"]
        case "age":
            if args.inverse:
                return [f"redshift = {cosmo.inverse_age(args.input)}"]
            return [f"{cosmo.age(args.input)} Gyr"]
        case "distmod":
            return [f"distance modulus = {cosmo.dist_mod(args.z)}"]
        case "angscale_phys":
            scale = cosmo.kpc_per_arcsecond_physical(args.z)
            if args.mpc:
                return [f"Angular scale = {scale * 60. / KPC_PER_MPC} pMpc/arcmin"]
            return [f"Angular scale = {scale} pkpc/arcsec"]
        case "angscale_co":
            scale = cosmo.kpc_per_arcsecond_comoving(args.z)
            if args.mpc:
                return [f"Angular scale = {scale * 60. / KPC_PER_MPC} cMpc/arcmin"]
            return [f"Angular scale = {scale} ckpc/arcsec"]
        case _:
            raise ValueError(f"Command not recognized: {args.calc}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.captureWarnings(True)
    # Degraded inverse results are already logged by the solver.
    warnings.simplefilter("ignore", DegradedResultWarning)

    try:
        cosmo = Cosmology(args.omega_m, args.omega_k, args.omega_l, args.h0)
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    if not args.allow_curved and not cosmo.is_flat:
        print(
            "Chosen cosmology is not flat. Pass --allow-curved to use a non-flat cosmology.",
            file=sys.stderr,
        )
        return 1

    try:
        lines = run(cosmo, args)
    except (CosmologyError, ValueError) as err:
        logger.debug("Calculation failed", exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1
    print("\n".join(lines))
    return 0
