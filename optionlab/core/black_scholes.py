"""
Black-Scholes option pricing model for European options.

This module implements the classical Black-Scholes formula for European
calls and puts on a non-dividend-paying asset, together with the
closed-form Greeks. Expiry (T = 0) is handled explicitly as the
intrinsic-value boundary.

Mathematical Background:
    The Black-Scholes formula prices European options under assumptions:
    - Log-normal asset price distribution
    - Constant volatility and interest rate
    - No transaction costs or taxes
    - Continuous trading possible

References:
    Black, F., & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
    Journal of Political Economy, 81(3), 637-654.
"""

import math

from optionlab.core.distributions import normal_cdf, normal_pdf
from optionlab.utils.constants import DAYS_PER_YEAR, PERCENT
from optionlab.utils.exceptions import InvalidParameterError
from optionlab.utils.types import Greeks, OptionType


def _validate_inputs(S: float, K: float, T: float, sigma: float) -> None:
    """
    Validate option pricing inputs.

    Args:
        S: Underlying price
        K: Strike price
        T: Time to maturity (years)
        sigma: Volatility

    Raises:
        InvalidParameterError: If any input is outside the model's domain
    """
    if not S > 0:
        raise InvalidParameterError("S", S, "Underlying price must be positive")
    if not K > 0:
        raise InvalidParameterError("K", K, "Strike price must be positive")
    if not T >= 0:
        raise InvalidParameterError("T", T, "Time to maturity cannot be negative")
    if not sigma > 0:
        raise InvalidParameterError("sigma", sigma, "Volatility must be positive")


def validate_option_type(option_type: str) -> None:
    if option_type not in ("call", "put"):
        raise InvalidParameterError(
            "option_type", option_type, "option_type must be 'call' or 'put'"
        )


def intrinsic_value(S: float, K: float, option_type: OptionType = "call") -> float:
    """
    Payoff of the option if exercised now: max(0, S - K) or max(0, K - S).
    """
    validate_option_type(option_type)
    if option_type == "call":
        return max(0.0, S - K)
    return max(0.0, K - S)


def d1(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    Calculate d1 parameter in Black-Scholes formula.

    Args:
        S: Current underlying price
        K: Strike price
        T: Time to maturity in years
        r: Risk-free interest rate (annualized, continuous)
        sigma: Volatility (annualized standard deviation)

    Returns:
        The d1 parameter

    Formula:
        d1 = [ln(S/K) + (r + σ²/2)T] / (σ√T)

    Notes:
        At T = 0 the ratio is undefined; returns +inf when S > K and
        -inf otherwise.
    """
    _validate_inputs(S, K, T, sigma)

    if T == 0:
        return math.inf if S > K else -math.inf

    # log(S/K) = log(S) - log(K) avoids overflow of the ratio
    log_moneyness = math.log(S) - math.log(K)
    drift = (r + 0.5 * sigma * sigma) * T
    diffusion = sigma * math.sqrt(T)

    return (log_moneyness + drift) / diffusion


def d2(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    Calculate d2 parameter in Black-Scholes formula.

    Formula:
        d2 = d1 - σ√T

    Notes:
        For a call, N(d2) is the risk-neutral probability of exercise.
    """
    d1_value = d1(S, K, T, r, sigma)
    return d1_value - sigma * math.sqrt(T)


def black_scholes_call(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    Calculate European call option price using Black-Scholes formula.

    Args:
        S: Current underlying price
        K: Strike price
        T: Time to maturity in years
        r: Risk-free interest rate (annualized, continuous)
        sigma: Volatility (annualized standard deviation)

    Returns:
        Call option price

    Formula:
        C = S·N(d1) - K·e^(-rT)·N(d2)

    Examples:
        >>> price = black_scholes_call(100, 100, 1.0, 0.05, 0.20)
        >>> abs(price - 10.4506) < 1e-4
        True

    Edge Cases:
        - T = 0: Returns max(S - K, 0) (intrinsic value)
    """
    _validate_inputs(S, K, T, sigma)

    if T == 0:
        return intrinsic_value(S, K, "call")

    d1_value = d1(S, K, T, r, sigma)
    d2_value = d1_value - sigma * math.sqrt(T)
    discount_strike = K * math.exp(-r * T)

    return S * normal_cdf(d1_value) - discount_strike * normal_cdf(d2_value)


def black_scholes_put(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    Calculate European put option price using Black-Scholes formula.

    Formula:
        P = K·e^(-rT)·N(-d2) - S·N(-d1)

    Examples:
        >>> price = black_scholes_put(100, 100, 1.0, 0.05, 0.20)
        >>> abs(price - 5.5735) < 1e-4
        True
    """
    _validate_inputs(S, K, T, sigma)

    if T == 0:
        return intrinsic_value(S, K, "put")

    d1_value = d1(S, K, T, r, sigma)
    d2_value = d1_value - sigma * math.sqrt(T)
    discount_strike = K * math.exp(-r * T)

    return discount_strike * normal_cdf(-d2_value) - S * normal_cdf(-d1_value)


def option_price(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
) -> float:
    """
    Calculate European option price (call or put).

    Args:
        S: Current underlying price
        K: Strike price
        T: Time to maturity in years
        r: Risk-free interest rate
        sigma: Volatility
        option_type: "call" or "put"

    Returns:
        Option price

    Raises:
        InvalidParameterError: If option_type is not "call" or "put", or a
            numeric input is outside the model's domain
    """
    validate_option_type(option_type)
    if option_type == "call":
        return black_scholes_call(S, K, T, r, sigma)
    return black_scholes_put(S, K, T, r, sigma)


# ===========================
# Greeks Calculations
# ===========================


def delta(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
) -> float:
    """
    Calculate option delta (∂V/∂S).

    Formulas:
        Call delta: Δ_c = N(d1)
        Put delta:  Δ_p = N(d1) - 1

    At expiry delta is +1 for an in-the-money call, -1 for an
    in-the-money put, and 0 otherwise.
    """
    validate_option_type(option_type)
    _validate_inputs(S, K, T, sigma)

    if T == 0:
        if intrinsic_value(S, K, option_type) > 0:
            return 1.0 if option_type == "call" else -1.0
        return 0.0

    n_d1 = normal_cdf(d1(S, K, T, r, sigma))
    if option_type == "call":
        return n_d1
    return n_d1 - 1.0


def gamma(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    Calculate option gamma (∂²V/∂S²), identical for calls and puts.

    Formula:
        Γ = φ(d1) / (S · σ · √T)
    """
    _validate_inputs(S, K, T, sigma)

    if T == 0:
        return 0.0

    pdf_d1 = normal_pdf(d1(S, K, T, r, sigma))
    return pdf_d1 / (S * sigma * math.sqrt(T))


def vega(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """
    Calculate option vega (∂V/∂σ) per 1 percentage point of volatility.

    Formula:
        ν = S · √T · φ(d1) / 100

    Interpretation:
        Vega of 0.35 means: for a move from 20% to 21% volatility,
        option price increases by $0.35.
    """
    _validate_inputs(S, K, T, sigma)

    if T == 0:
        return 0.0

    pdf_d1 = normal_pdf(d1(S, K, T, r, sigma))
    return S * math.sqrt(T) * pdf_d1 / PERCENT


def theta(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
) -> float:
    """
    Calculate option theta, reported per calendar day.

    Formulas (annualized, then divided by 365):
        Call: Θ_c = -S·φ(d1)·σ/(2√T) - r·K·e^(-rT)·N(d2)
        Put:  Θ_p = -S·φ(d1)·σ/(2√T) + r·K·e^(-rT)·N(-d2)
    """
    validate_option_type(option_type)
    _validate_inputs(S, K, T, sigma)

    if T == 0:
        return 0.0

    sqrt_T = math.sqrt(T)
    d1_value = d1(S, K, T, r, sigma)
    d2_value = d1_value - sigma * sqrt_T
    discount_strike = K * math.exp(-r * T)

    # Diffusion contribution, same for call and put
    term1 = -(S * normal_pdf(d1_value) * sigma) / (2.0 * sqrt_T)

    if option_type == "call":
        term2 = -r * discount_strike * normal_cdf(d2_value)
    else:
        term2 = r * discount_strike * normal_cdf(-d2_value)

    return (term1 + term2) / DAYS_PER_YEAR


def rho(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
) -> float:
    """
    Calculate option rho (∂V/∂r) per 1 percentage point of interest rate.

    Formulas:
        Call rho: ρ_c = K·T·e^(-rT)·N(d2) / 100
        Put rho:  ρ_p = -K·T·e^(-rT)·N(-d2) / 100
    """
    validate_option_type(option_type)
    _validate_inputs(S, K, T, sigma)

    if T == 0:
        return 0.0

    d2_value = d2(S, K, T, r, sigma)
    discount_strike = K * T * math.exp(-r * T)

    if option_type == "call":
        return discount_strike * normal_cdf(d2_value) / PERCENT
    return -discount_strike * normal_cdf(-d2_value) / PERCENT


def calculate_greeks(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
) -> Greeks:
    """
    Calculate all Greeks for an option in one pass.

    Returns:
        Greeks dataclass with delta, gamma, theta, vega, rho

    Example:
        >>> greeks = calculate_greeks(100, 100, 1.0, 0.05, 0.20)
        >>> print(f"Delta: {greeks.delta:.4f}")
        Delta: 0.6368
    """
    return Greeks(
        delta=delta(S, K, T, r, sigma, option_type),
        gamma=gamma(S, K, T, r, sigma),
        theta=theta(S, K, T, r, sigma, option_type),
        vega=vega(S, K, T, r, sigma),
        rho=rho(S, K, T, r, sigma, option_type),
    )
