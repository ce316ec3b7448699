"""
Pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def standard_params():
    """Standard at-the-money option parameters."""
    return {
        "S": 100.0,
        "K": 100.0,
        "T": 1.0,
        "r": 0.05,
        "sigma": 0.20,
    }


@pytest.fixture
def itm_call_params():
    """In-the-money call parameters."""
    return {
        "S": 110.0,
        "K": 100.0,
        "T": 1.0,
        "r": 0.05,
        "sigma": 0.20,
    }


@pytest.fixture
def short_expiry_params():
    """Near-expiry, high-volatility parameters."""
    return {
        "S": 95.0,
        "K": 100.0,
        "T": 0.1,
        "r": 0.03,
        "sigma": 0.45,
    }


@pytest.fixture
def brownian_params():
    """Small Brownian motion run for fast tests."""
    return {
        "drift": 0.05,
        "diffusion": 0.2,
        "time_horizon": 1.0,
        "steps": 20,
        "initial_value": 100.0,
    }
