"""
Unit tests for the expansion function and distance measures.

Reference values for (omega_m, omega_k, omega_l, h0) = (0.3, 0, 0.7, 70) at z = 1
follow Wright (2006): D_C = 3303.8 Mpc, D_L = 6607.7 Mpc, mu = 44.10 mag.
"""

import math

import numpy as np
import pytest

from cosmocalc import (
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
    Curvature,
    DomainError,
    IntegrationError,
)


class TestExpansionFunction:
    """Test suite for E(z) and H(z)."""

    def test_unity_today_for_flat(self, flat):
        assert e_func(0.0, flat.omega_m, flat.omega_k, flat.omega_l) == pytest.approx(1.0)

    def test_closed_form(self):
        expected = math.sqrt(0.3 * 8 + 0.1 * 4 + 0.6)
        assert e_func(1.0, 0.3, 0.1, 0.6) == pytest.approx(expected)

    @pytest.mark.parametrize("omega_m, omega_k, omega_l", [
        (0.3, 0.0, 0.7),
        (0.3, 0.1, 0.6),
        (1.0, 0.0, 0.0),
        (0.0, 0.5, 0.5),
    ])
    def test_monotone_non_decreasing(self, omega_m, omega_k, omega_l):
        z = np.linspace(0.0, 20.0, 200)
        values = np.array([e_func(zi, omega_m, omega_k, omega_l) for zi in z])
        assert np.all(np.diff(values) >= 0)

    def test_negative_radicand_is_domain_error(self):
        with pytest.raises(DomainError):
            e_func(1.0, -1.0, 0.0, 0.0)

    def test_h_at_z(self, flat):
        assert h_at_z(0.0, *flat) == pytest.approx(70.0)
        assert h_at_z(1.0, *flat) == pytest.approx(70.0 * math.sqrt(0.3 * 8 + 0.7))


class TestHubbleDistance:

    def test_value(self):
        assert hubble_distance(70.0) == pytest.approx(299792.458 / 70.0)

    def test_zero_hubble_constant(self):
        with pytest.raises(DomainError):
            hubble_distance(0.0)


class TestComovingDistance:
    """Test suite for the comoving distance integral."""

    def test_zero_redshift_is_exactly_zero(self, flat, open_universe, closed_universe):
        for params in (flat, open_universe, closed_universe):
            assert comoving_distance(0.0, *params) == 0.0

    def test_reference_value(self, flat):
        assert comoving_distance(1.0, *flat) == pytest.approx(3303.8, abs=1.0)

    def test_increases_with_redshift(self, flat):
        z = [0.1, 0.5, 1.0, 2.0, 5.0]
        distances = [comoving_distance(zi, *flat) for zi in z]
        assert np.all(np.diff(distances) > 0)

    def test_low_redshift_hubble_law(self, flat):
        z = 0.001
        assert comoving_distance(z, *flat) == pytest.approx(z * hubble_distance(70.0), rel=1e-3)

    def test_redshift_too_close_to_zero(self, flat):
        with pytest.raises(IntegrationError):
            comoving_distance(1e-9, *flat)

    def test_zero_hubble_constant(self):
        with pytest.raises(DomainError):
            comoving_distance(1.0, 0.3, 0.0, 0.7, 0.0)

    def test_unphysical_parameters_raise(self):
        with pytest.raises(DomainError):
            comoving_distance(1.0, -1.0, 0.0, 0.0, 70.0)


class TestTransverseDistance:
    """Test suite for the curvature dispatch of D_M."""

    def test_curvature_classification(self):
        assert Curvature.from_omega_k(0.0) is Curvature.FLAT
        assert Curvature.from_omega_k(0.2) is Curvature.OPEN
        assert Curvature.from_omega_k(-0.2) is Curvature.CLOSED

    @pytest.mark.parametrize("z", [0.0, 0.3, 1.0, 3.0])
    def test_flat_equals_comoving(self, flat, z):
        assert comoving_transverse_distance(z, *flat) == comoving_distance(z, *flat)

    def test_open(self, open_universe):
        d_c = comoving_distance(1.0, *open_universe)
        d_h = hubble_distance(open_universe.h0)
        expected = d_h / math.sqrt(0.1) * math.sinh(math.sqrt(0.1) * d_c / d_h)
        d_m = comoving_transverse_distance(1.0, *open_universe)
        assert d_m == pytest.approx(expected)
        assert d_m > d_c

    def test_closed(self, closed_universe):
        d_c = comoving_distance(1.0, *closed_universe)
        d_h = hubble_distance(closed_universe.h0)
        expected = d_h / math.sqrt(0.1) * math.sin(math.sqrt(0.1) * d_c / d_h)
        d_m = comoving_transverse_distance(1.0, *closed_universe)
        assert d_m == pytest.approx(expected)
        assert d_m < d_c


class TestDerivedDistances:

    def test_luminosity_distance(self, flat):
        assert luminosity_distance(1.0, *flat) == pytest.approx(6607.7, abs=2.0)

    def test_angular_diameter_distance(self, flat):
        d_l = luminosity_distance(1.0, *flat)
        d_a = angular_diameter_distance(1.0, *flat)
        assert d_l == pytest.approx(d_a * 4.0)

    def test_angular_diameter_distance_at_minus_one(self, flat):
        with pytest.raises(DomainError):
            angular_diameter_distance(-1.0, *flat)

    def test_distance_modulus(self, flat):
        assert distance_modulus(1.0, *flat) == pytest.approx(44.10, abs=0.05)

    def test_distance_modulus_at_zero_redshift(self, flat):
        """z = 0 has zero luminosity distance, so the logarithm is undefined."""
        with pytest.raises(DomainError):
            distance_modulus(0.0, *flat)

    def test_angular_scales(self, flat):
        comoving = kpc_per_arcsecond_comoving(1.0, *flat)
        physical = kpc_per_arcsecond_physical(1.0, *flat)
        assert physical == pytest.approx(8.01, abs=0.05)
        assert comoving == pytest.approx(2.0 * physical)


class TestComovingVolume:
    """
    Test suite for comoving volume.

    Only the flat branch is a true volume. The curved branches reproduce the
    established cosmocalc expressions, which disagree with Hogg (1999); the tests
    pin them down and check the disagreement explicitly.
    """

    def test_flat_is_euclidean_ball(self, flat):
        d_m = comoving_transverse_distance(1.0, *flat)
        assert comoving_volume(1.0, *flat) == pytest.approx(4.0 / 3.0 * math.pi * d_m**3)
        assert comoving_volume(1.0, *flat) / 1e9 == pytest.approx(151.0, abs=1.0)

    def test_zero_redshift(self, flat):
        assert comoving_volume(0.0, *flat) == 0.0

    def test_closed_branch_expression(self, closed_universe):
        omega_k = closed_universe.omega_k
        d_h = hubble_distance(closed_universe.h0)
        ratio = comoving_transverse_distance(1.0, *closed_universe) / d_h
        expected = (4 * math.pi * d_h**3 / (2 * omega_k)) * (
            ratio * math.sqrt(1 + omega_k * ratio**2)
            - (1 / math.sqrt(abs(omega_k))) * math.asinh(math.sin(abs(omega_k)) * ratio)
        )
        assert comoving_volume(1.0, *closed_universe) == pytest.approx(expected)

    def test_closed_branch_differs_from_hogg(self, closed_universe):
        omega_k = closed_universe.omega_k
        d_h = hubble_distance(closed_universe.h0)
        ratio = comoving_transverse_distance(1.0, *closed_universe) / d_h
        hogg = (4 * math.pi * d_h**3 / (2 * omega_k)) * (
            ratio * math.sqrt(1 + omega_k * ratio**2)
            - (1 / math.sqrt(abs(omega_k))) * math.asin(math.sqrt(abs(omega_k)) * ratio)
        )
        assert comoving_volume(1.0, *closed_universe) != pytest.approx(hogg, rel=1e-3)

    def test_open_branch_expression(self, open_universe):
        omega_k = open_universe.omega_k
        d_h = hubble_distance(open_universe.h0)
        ratio = comoving_transverse_distance(1.0, *open_universe) / d_h
        expected = d_h / math.sqrt(omega_k) * math.sinh(math.sqrt(omega_k) * ratio)
        assert comoving_volume(1.0, *open_universe) == pytest.approx(expected)

    def test_open_branch_is_not_a_volume(self, open_universe):
        """The open branch returns a length-scaled quantity, far below a ball of radius D_M."""
        d_m = comoving_transverse_distance(1.0, *open_universe)
        assert comoving_volume(1.0, *open_universe) < d_m**2
