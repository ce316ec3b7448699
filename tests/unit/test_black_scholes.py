"""
Unit tests for Black-Scholes pricing and Greeks calculations.

This module validates:
1. Known analytical solutions from textbooks
2. Put-call parity relationship
3. Expiry boundary (T = 0) and convergence as T → 0
4. Greeks accuracy via finite-difference comparison
5. Monotonicity properties
6. Input validation
"""

import math

import pytest

from optionlab.core.black_scholes import (
    black_scholes_call,
    black_scholes_put,
    calculate_greeks,
    d1,
    d2,
    delta,
    gamma,
    intrinsic_value,
    option_price,
    rho,
    theta,
    vega,
)
from optionlab.utils.exceptions import InvalidParameterError
from optionlab.utils.types import OptionParams


# ===========================
# Known Solutions Tests
# ===========================


def test_atm_call_known_solution(standard_params):
    """
    Hull's textbook example: S=100, K=100, T=1, r=5%, σ=20% → Call ≈ 10.4506
    """
    price = black_scholes_call(**standard_params)
    assert abs(price - 10.4506) < 1e-4, f"Expected ~10.4506, got {price}"


def test_atm_put_known_solution(standard_params):
    """S=100, K=100, T=1, r=5%, σ=20% → Put ≈ 5.5735"""
    price = black_scholes_put(**standard_params)
    assert abs(price - 5.5735) < 1e-4, f"Expected ~5.5735, got {price}"


def test_atm_call_greeks_known_solution(standard_params):
    greeks = calculate_greeks(**standard_params, option_type="call")

    assert abs(greeks.delta - 0.6368) < 1e-4
    assert abs(greeks.gamma - 0.0188) < 1e-4
    assert abs(greeks.vega - 0.3752) < 1e-4
    assert abs(greeks.theta - (-0.0176)) < 1e-4
    assert abs(greeks.rho - 0.5323) < 1e-4


def test_atm_put_delta_known_solution(standard_params):
    assert abs(delta(**standard_params, option_type="put") - (-0.3632)) < 1e-4


def test_itm_call_known_solution():
    """S=120, K=100, T=0.5, r=5%, σ=20% → Call ≈ 22.95"""
    price = black_scholes_call(S=120, K=100, T=0.5, r=0.05, sigma=0.20)
    assert 22.5 < price < 23.5, f"Expected ~22.95, got {price}"


# ===========================
# Put-Call Parity Tests
# ===========================


@pytest.mark.parametrize(
    "S,K,T,r,sigma",
    [
        (100, 100, 1.0, 0.05, 0.20),  # ATM
        (110, 100, 1.0, 0.05, 0.20),  # ITM call
        (90, 100, 1.0, 0.05, 0.20),  # OTM call
        (100, 100, 0.25, 0.05, 0.30),  # High vol, short expiry
        (100, 120, 2.0, 0.03, 0.15),  # Long expiry
        (50, 150, 0.5, -0.01, 0.50),  # Negative rate, deep OTM call
    ],
)
def test_put_call_parity(S, K, T, r, sigma):
    """C - P = S - K·e^(-rT)"""
    lhs = option_price(S, K, T, r, sigma, "call") - option_price(S, K, T, r, sigma, "put")
    rhs = S - K * math.exp(-r * T)

    assert abs(lhs - rhs) < 1e-9, f"Put-call parity violated: {lhs} != {rhs}"


# ===========================
# Expiry Boundary Tests
# ===========================


@pytest.mark.parametrize("S,K", [(105.0, 100.0), (95.0, 100.0), (100.0, 100.0)])
def test_price_at_expiry_is_intrinsic(S, K):
    assert option_price(S, K, 0.0, 0.05, 0.20, "call") == max(0.0, S - K)
    assert option_price(S, K, 0.0, 0.05, 0.20, "put") == max(0.0, K - S)


def test_price_converges_to_intrinsic_near_expiry():
    S, K = 105.0, 100.0
    price = black_scholes_call(S, K, T=1e-8, r=0.05, sigma=0.20)
    assert abs(price - intrinsic_value(S, K, "call")) < 1e-3

    price = black_scholes_put(S - 10, K, T=1e-8, r=0.05, sigma=0.20)
    assert abs(price - intrinsic_value(S - 10, K, "put")) < 1e-3


def test_greeks_at_expiry_itm_call():
    greeks = calculate_greeks(110.0, 100.0, 0.0, 0.05, 0.20, "call")
    assert greeks.delta == 1.0
    assert greeks.gamma == 0.0
    assert greeks.theta == 0.0
    assert greeks.vega == 0.0
    assert greeks.rho == 0.0


def test_greeks_at_expiry_itm_put():
    greeks = calculate_greeks(90.0, 100.0, 0.0, 0.05, 0.20, "put")
    assert greeks.delta == -1.0
    assert greeks.gamma == 0.0


@pytest.mark.parametrize("option_type", ["call", "put"])
def test_delta_at_expiry_out_of_the_money(option_type):
    S = 90.0 if option_type == "call" else 110.0
    assert delta(S, 100.0, 0.0, 0.05, 0.20, option_type) == 0.0
    # At the money has no intrinsic value either
    assert delta(100.0, 100.0, 0.0, 0.05, 0.20, option_type) == 0.0


def test_d1_at_expiry_is_signed_infinity():
    assert d1(110, 100, 0.0, 0.05, 0.2) == math.inf
    assert d1(90, 100, 0.0, 0.05, 0.2) == -math.inf


# ===========================
# d1 and d2 Tests
# ===========================


def test_d1_d2_relationship(standard_params):
    """Verify d2 = d1 - σ√T."""
    d1_val = d1(**standard_params)
    d2_val = d2(**standard_params)

    expected_d2 = d1_val - standard_params["sigma"] * math.sqrt(standard_params["T"])
    assert abs(d2_val - expected_d2) < 1e-12


def test_d1_known_value(standard_params):
    """ATM: d1 = (r + σ²/2)·T / σ = 0.35"""
    assert abs(d1(**standard_params) - 0.35) < 1e-12


def test_d1_sign_follows_moneyness():
    assert d1(S=120, K=100, T=1.0, r=0.05, sigma=0.20) > 0
    assert d1(S=80, K=100, T=1.0, r=0.05, sigma=0.20) < 0


# ===========================
# Input Validation Tests
# ===========================


@pytest.mark.parametrize(
    "S,K,T,sigma,name",
    [
        (-100, 100, 1.0, 0.2, "S"),
        (0, 100, 1.0, 0.2, "S"),
        (100, -100, 1.0, 0.2, "K"),
        (100, 100, -1.0, 0.2, "T"),
        (100, 100, 1.0, 0.0, "sigma"),
        (100, 100, 1.0, -0.2, "sigma"),
    ],
)
def test_invalid_inputs_raise(S, K, T, sigma, name):
    with pytest.raises(InvalidParameterError) as excinfo:
        option_price(S, K, T, 0.05, sigma, "call")
    assert excinfo.value.name == name


def test_invalid_option_type_raises(standard_params):
    with pytest.raises(InvalidParameterError):
        option_price(**standard_params, option_type="straddle")


def test_invalid_parameter_is_value_error():
    """Callers guarding with ValueError still catch pricing errors."""
    with pytest.raises(ValueError):
        black_scholes_call(S=100, K=100, T=1.0, r=0.05, sigma=0.0)


def test_option_params_validation():
    with pytest.raises(InvalidParameterError):
        OptionParams(S=100, K=0, T=1.0, r=0.05, sigma=0.2)

    params = OptionParams(S=100, K=100, T=1.0, r=0.05, sigma=0.2, option_type="put")
    assert option_price(*params.as_args()) == pytest.approx(5.5735, abs=1e-4)


# ===========================
# Pricing Function Tests
# ===========================


def test_option_price_dispatch(standard_params):
    assert option_price(**standard_params, option_type="call") == black_scholes_call(**standard_params)
    assert option_price(**standard_params, option_type="put") == black_scholes_put(**standard_params)


# ===========================
# Greeks Tests
# ===========================


def test_call_delta_range(standard_params):
    assert 0.0 <= delta(**standard_params, option_type="call") <= 1.0


def test_put_delta_range(standard_params):
    assert -1.0 <= delta(**standard_params, option_type="put") <= 0.0


def test_call_put_delta_differ_by_one(itm_call_params):
    call_delta = delta(**itm_call_params, option_type="call")
    put_delta = delta(**itm_call_params, option_type="put")
    assert abs(call_delta - put_delta - 1.0) < 1e-12


@pytest.mark.parametrize("S", [50.0, 80.0, 100.0, 120.0, 150.0])
@pytest.mark.parametrize("sigma", [0.1, 0.3, 0.5])
def test_gamma_non_negative(S, sigma):
    assert gamma(S, 100.0, 1.0, 0.05, sigma) >= 0.0


def test_vega_positive(standard_params):
    assert vega(**standard_params) > 0.0


def test_call_theta_negative(standard_params):
    assert theta(**standard_params, option_type="call") < 0.0


def test_call_rho_positive(standard_params):
    assert rho(**standard_params, option_type="call") > 0.0


def test_put_rho_negative(standard_params):
    assert rho(**standard_params, option_type="put") < 0.0


def test_calculate_greeks_consistency(short_expiry_params):
    for option_type in ("call", "put"):
        greeks = calculate_greeks(**short_expiry_params, option_type=option_type)

        assert greeks.delta == delta(**short_expiry_params, option_type=option_type)
        assert greeks.gamma == gamma(**short_expiry_params)
        assert greeks.vega == vega(**short_expiry_params)
        assert greeks.theta == theta(**short_expiry_params, option_type=option_type)
        assert greeks.rho == rho(**short_expiry_params, option_type=option_type)


# ===========================
# Greeks Finite-Difference Validation
# ===========================


def test_gamma_finite_difference(standard_params):
    """Γ ≈ (V(S+h) - 2V(S) + V(S-h)) / h²"""
    S = standard_params["S"]
    h = 0.01

    price = black_scholes_call(**standard_params)
    price_up = black_scholes_call(**{**standard_params, "S": S + h})
    price_down = black_scholes_call(**{**standard_params, "S": S - h})

    gamma_numerical = (price_up - 2 * price + price_down) / (h * h)

    assert abs(gamma(**standard_params) - gamma_numerical) < 1e-3


def test_vega_finite_difference(standard_params):
    """Vega is reported per 1% so the raw derivative is divided by 100."""
    sigma = standard_params["sigma"]
    h = 0.001

    price_up = black_scholes_call(**{**standard_params, "sigma": sigma + h})
    price_down = black_scholes_call(**{**standard_params, "sigma": sigma - h})
    vega_numerical = (price_up - price_down) / (2 * h) / 100

    assert abs(vega(**standard_params) - vega_numerical) < 1e-5


def test_theta_finite_difference(standard_params):
    """Theta per day ≈ V(T - 1 day) - V(T)."""
    T = standard_params["T"]
    h = 1.0 / 365.0

    price = black_scholes_call(**standard_params)
    price_down = black_scholes_call(**{**standard_params, "T": T - h})

    assert abs(theta(**standard_params, option_type="call") - (price_down - price)) < 1e-3


@pytest.mark.parametrize("option_type", ["call", "put"])
def test_rho_finite_difference(standard_params, option_type):
    """Rho is reported per 1% so the raw derivative is divided by 100."""
    r = standard_params["r"]
    h = 0.0001

    price_up = option_price(**{**standard_params, "r": r + h}, option_type=option_type)
    price_down = option_price(**{**standard_params, "r": r - h}, option_type=option_type)
    rho_numerical = (price_up - price_down) / (2 * h) / 100

    assert abs(rho(**standard_params, option_type=option_type) - rho_numerical) < 1e-5


# ===========================
# Monotonicity Tests
# ===========================


def test_call_price_increases_with_underlying():
    prices = [black_scholes_call(S, 100, 1.0, 0.05, 0.20) for S in range(50, 151, 10)]
    assert all(b >= a for a, b in zip(prices, prices[1:]))


def test_call_price_increases_with_volatility():
    prices = [black_scholes_call(100, 100, 1.0, 0.05, v / 100) for v in range(5, 100, 5)]
    assert all(b >= a for a, b in zip(prices, prices[1:]))


def test_call_price_increases_with_time():
    prices = [black_scholes_call(100, 100, t / 4, 0.05, 0.20) for t in range(0, 12)]
    assert all(b >= a for a, b in zip(prices, prices[1:]))


def test_call_price_decreases_with_strike():
    base_price = black_scholes_call(S=100, K=100, T=1.0, r=0.05, sigma=0.20)
    lower_price = black_scholes_call(S=100, K=105, T=1.0, r=0.05, sigma=0.20)
    assert lower_price < base_price


def test_put_price_decreases_with_underlying():
    base_price = black_scholes_put(S=100, K=100, T=1.0, r=0.05, sigma=0.20)
    lower_price = black_scholes_put(S=105, K=100, T=1.0, r=0.05, sigma=0.20)
    assert lower_price < base_price
