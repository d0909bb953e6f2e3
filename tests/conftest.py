import pytest

from cosmocalc import CosmologyParameters


@pytest.fixture
def flat():
    return CosmologyParameters(omega_m=0.3, omega_k=0.0, omega_l=0.7, h0=70.0)


@pytest.fixture
def open_universe():
    return CosmologyParameters(omega_m=0.3, omega_k=0.1, omega_l=0.6, h0=70.0)


@pytest.fixture
def closed_universe():
    return CosmologyParameters(omega_m=0.3, omega_k=-0.1, omega_l=0.8, h0=70.0)
