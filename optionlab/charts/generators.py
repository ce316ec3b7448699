"""
Chart data generators.

Each generator sweeps one or two inputs over a fixed grid and evaluates
the Black-Scholes price or Greeks at every grid point. Grids are built by
index (x_i = start + i·step) so the upper bound is always included and no
floating-point drift accumulates across steps.

All generators are pure: they take explicit parameters and return fresh
lists of result objects.
"""

import logging
import math
from typing import Optional

import numpy as np

from optionlab.core.black_scholes import (
    calculate_greeks,
    delta,
    option_price,
    validate_option_type,
)
from optionlab.core.distributions import normal_cdf, normal_pdf
from optionlab.utils.constants import (
    APPROX_INTERVALS,
    APPROX_RANGE,
    ATM_VOL_MAX,
    ATM_VOL_MIN,
    ATM_VOL_STEP,
    DEFAULT_POINTS,
    DEFAULT_PRICE_RANGE,
    DEFAULT_STRIKE_RANGE,
    DELTA_VOL_MAX,
    DELTA_VOL_MIN,
    FD_STEP_SPOT,
    MIN_CHART_PRICE,
    NORMAL_INTERVALS_PER_SIDE,
    NORMAL_SPAN_STD,
    PERCENT,
    PRICE_VOL_MAX,
    PRICE_VOL_MIN,
    TANGENT_RANGE,
    TANGENT_INTERVALS,
    VOL_DECIMALS,
    VOL_LEVEL_TOLERANCE,
    VOL_STEP,
)
from optionlab.utils.exceptions import InvalidParameterError
from optionlab.utils.types import (
    ChartPoint,
    ChartSeries,
    DeltaApproximationPoint,
    OptionType,
    PriceDeltaPoint,
    VolatilityGreeksPoint,
)

logger = logging.getLogger(__name__)


# ===========================
# Grid helpers
# ===========================


def price_grid(center: float, price_range: float, points: int) -> list[float]:
    """
    Evenly spaced underlying prices over center·(1 ± price_range), both ends included.

    Raises:
        InvalidParameterError: If points < 2 or price_range is outside (0, 1)
    """
    if points < 2:
        raise InvalidParameterError("points", points, "A sweep needs at least 2 points")
    if not 0 < price_range < 1:
        raise InvalidParameterError(
            "price_range", price_range, "Price range must lie strictly between 0 and 1"
        )
    grid = np.linspace(center * (1.0 - price_range), center * (1.0 + price_range), points)
    return [float(x) for x in grid]


def volatility_levels(min_vol: float, max_vol: float, vol_step: float) -> list[float]:
    """
    Volatility levels min_vol, min_vol + step, ..., up to and including max_vol.

    Levels are rounded to 2 decimals; duplicates produced by rounding a
    step finer than 0.01 are dropped.

    Examples:
        >>> volatility_levels(0.2, 0.5, 0.1)
        [0.2, 0.3, 0.4, 0.5]

    Raises:
        InvalidParameterError: If vol_step is not positive or min_vol is not positive
    """
    if not vol_step > 0:
        raise InvalidParameterError("vol_step", vol_step, "Volatility step must be positive")
    if not min_vol > 0:
        raise InvalidParameterError("min_vol", min_vol, "Volatility must be positive")
    if max_vol < min_vol:
        return []

    steps = int(math.floor((max_vol - min_vol) / vol_step + VOL_LEVEL_TOLERANCE))
    levels = [round(min_vol + i * vol_step, VOL_DECIMALS) for i in range(steps + 1)]
    # Rounding may collapse neighbours (or hit 0.0 for tiny min_vol)
    return [v for v in dict.fromkeys(levels) if v > 0]


def _vol_label(vol: float) -> str:
    return f"{vol:.{VOL_DECIMALS}f}"


# ===========================
# Single-curve sweeps
# ===========================


def price_series(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
    price_range: float = DEFAULT_PRICE_RANGE,
    points: int = DEFAULT_POINTS,
) -> list[ChartPoint]:
    """
    Option price as the underlying moves ±price_range around the current price.

    Args:
        S, K, T, r, sigma: Standard Black-Scholes parameters
        option_type: "call" or "put"
        price_range: Fractional half-width of the sweep around S, default 0.3
        points: Number of grid points, default 50

    Returns:
        ChartPoints with x = underlying price, y = option price, x ascending
    """
    grid = price_grid(S, price_range, points)
    logger.debug("price_series: %d points over [%.4f, %.4f]", points, grid[0], grid[-1])
    return [ChartPoint(x=s, y=option_price(s, K, T, r, sigma, option_type)) for s in grid]


def approximate_delta(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
    shift: float = FD_STEP_SPOT,
) -> float:
    """
    Central finite-difference estimate of delta.

    Formula:
        Δ ≈ (V(S + h) - V(S - h)) / (2h)

    This is independent of the closed-form delta and agrees with it to
    O(h²) away from expiry.
    """
    price_plus = option_price(S + shift, K, T, r, sigma, option_type)
    price_minus = option_price(S - shift, K, T, r, sigma, option_type)
    return (price_plus - price_minus) / (2.0 * shift)


def delta_approximation_series(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
    shift: float = FD_STEP_SPOT,
    strike_fraction: float = APPROX_RANGE,
    intervals: int = APPROX_INTERVALS,
) -> list[DeltaApproximationPoint]:
    """
    Sweep the underlying around S and compare finite-difference and analytic delta.

    The grid spans [max(1, S - f·K), S + f·K] in `intervals` equal steps,
    where f is strike_fraction.
    """
    if intervals < 1:
        raise InvalidParameterError("intervals", intervals, "A sweep needs at least 1 interval")
    half_width = K * strike_fraction
    lower = max(MIN_CHART_PRICE, S - half_width)
    grid = np.linspace(lower, S + half_width, intervals + 1)

    result = []
    for s in grid:
        s = float(s)
        price_plus = option_price(s + shift, K, T, r, sigma, option_type)
        price_minus = option_price(s - shift, K, T, r, sigma, option_type)
        result.append(
            DeltaApproximationPoint(
                underlying_price=s,
                option_price=option_price(s, K, T, r, sigma, option_type),
                approximate_delta=(price_plus - price_minus) / (2.0 * shift),
                analytic_delta=delta(s, K, T, r, sigma, option_type),
                price_minus=price_minus,
                price_plus=price_plus,
            )
        )
    return result


def price_delta_series(
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: OptionType = "call",
    strike_fraction: float = TANGENT_RANGE,
    intervals: int = TANGENT_INTERVALS,
) -> list[PriceDeltaPoint]:
    """
    Option price and delta over [max(1, K - f·K), K + f·K], the data behind
    the delta tangent chart.
    """
    if intervals < 1:
        raise InvalidParameterError("intervals", intervals, "A sweep needs at least 1 interval")
    half_width = K * strike_fraction
    grid = np.linspace(max(MIN_CHART_PRICE, K - half_width), K + half_width, intervals + 1)

    return [
        PriceDeltaPoint(
            underlying_price=float(s),
            option_price=option_price(float(s), K, T, r, sigma, option_type),
            delta=delta(float(s), K, T, r, sigma, option_type),
        )
        for s in grid
    ]


def tangent_line(point: PriceDeltaPoint, half_width: float) -> tuple[ChartPoint, ChartPoint]:
    """
    End points of the tangent to the price curve at `point`.

    Delta is the slope: y = Δ·x + (V - Δ·S). The line spans
    [max(1, S - half_width), S + half_width].
    """
    slope = point.delta
    intercept = point.option_price - slope * point.underlying_price
    x1 = max(MIN_CHART_PRICE, point.underlying_price - half_width)
    x2 = point.underlying_price + half_width
    return (
        ChartPoint(x=x1, y=slope * x1 + intercept, label="tangent"),
        ChartPoint(x=x2, y=slope * x2 + intercept, label="tangent"),
    )


# ===========================
# Multi-series sweeps by volatility
# ===========================


def volatility_series(
    S: float,
    K: float,
    T: float,
    r: float,
    option_type: OptionType = "call",
    min_vol: float = PRICE_VOL_MIN,
    max_vol: float = PRICE_VOL_MAX,
    vol_step: float = VOL_STEP,
    price_range: float = DEFAULT_STRIKE_RANGE,
    points: int = DEFAULT_POINTS,
) -> list[ChartSeries]:
    """
    Option price against underlying price, one series per volatility level.

    The x-axis is centered on the strike (K·(1 ± price_range)) so every
    curve shares the same domain regardless of the current underlying
    price. S is accepted for call symmetry with the other generators but
    does not move the grid.

    Returns:
        One ChartSeries per volatility level, labelled e.g. "0.20"
    """
    validate_option_type(option_type)
    grid = price_grid(K, price_range, points)
    levels = volatility_levels(min_vol, max_vol, vol_step)
    logger.debug("volatility_series: %d levels x %d points", len(levels), len(grid))

    series = []
    for vol in levels:
        label = _vol_label(vol)
        pts = [
            ChartPoint(x=s, y=option_price(s, K, T, r, vol, option_type), label=label)
            for s in grid
        ]
        series.append(ChartSeries(label=label, points=pts, volatility=vol))
    return series


def delta_underlying_series(
    S: float,
    K: float,
    T: float,
    r: float,
    option_type: OptionType = "call",
    min_vol: float = DELTA_VOL_MIN,
    max_vol: float = DELTA_VOL_MAX,
    vol_step: float = VOL_STEP,
    price_range: float = DEFAULT_STRIKE_RANGE,
    points: int = DEFAULT_POINTS,
) -> list[ChartSeries]:
    """
    Delta against underlying price, one series per volatility level.

    Same grid as volatility_series, with y = delta instead of price.
    """
    validate_option_type(option_type)
    grid = price_grid(K, price_range, points)
    levels = volatility_levels(min_vol, max_vol, vol_step)
    logger.debug("delta_underlying_series: %d levels x %d points", len(levels), len(grid))

    series = []
    for vol in levels:
        label = _vol_label(vol)
        pts = [
            ChartPoint(x=s, y=delta(s, K, T, r, vol, option_type), label=label)
            for s in grid
        ]
        series.append(ChartSeries(label=label, points=pts, volatility=vol))
    return series


def delta_volatility_series(
    K: float,
    T: float,
    r: float,
    option_type: OptionType = "call",
    min_vol: float = ATM_VOL_MIN,
    max_vol: float = ATM_VOL_MAX,
    vol_step: float = ATM_VOL_STEP,
) -> list[VolatilityGreeksPoint]:
    """
    Full Greeks of an at-the-money option (S = K) as volatility varies.

    Returns:
        One VolatilityGreeksPoint per level, volatility expressed in percent
    """
    levels = volatility_levels(min_vol, max_vol, vol_step)
    logger.debug("delta_volatility_series: %d levels", len(levels))

    result = []
    for vol in levels:
        greeks = calculate_greeks(K, K, T, r, vol, option_type)
        result.append(
            VolatilityGreeksPoint(
                volatility=round(vol * PERCENT, VOL_DECIMALS),
                delta=greeks.delta,
                gamma=greeks.gamma,
                theta=greeks.theta,
                vega=greeks.vega,
                rho=greeks.rho,
            )
        )
    return result


# ===========================
# Normal distribution curves
# ===========================


def normal_distribution_series(
    mean: float = 0.0,
    std_dev: float = 1.0,
    x_value: Optional[float] = None,
) -> dict:
    """
    PDF and CDF curves of a normal distribution over mean ± 4·std_dev.

    Args:
        mean: Distribution mean
        std_dev: Standard deviation (must be positive)
        x_value: Point at which to report PDF and CDF values, default mean

    Returns:
        Dictionary with keys:
            - pdf: ChartSeries of densities (x rounded to 2 decimals)
            - cdf: ChartSeries of cumulative probabilities
            - pdf_value, cdf_value: Values at x_value
    """
    if not std_dev > 0:
        raise InvalidParameterError("std_dev", std_dev, "Standard deviation must be positive")
    if x_value is None:
        x_value = mean

    span = NORMAL_SPAN_STD * std_dev
    count = 2 * NORMAL_INTERVALS_PER_SIDE
    xs = [round(mean - span + i * span / NORMAL_INTERVALS_PER_SIDE, 2) for i in range(count + 1)]

    pdf = ChartSeries(
        label="pdf", points=[ChartPoint(x=x, y=normal_pdf(x, mean, std_dev)) for x in xs]
    )
    cdf = ChartSeries(
        label="cdf", points=[ChartPoint(x=x, y=normal_cdf(x, mean, std_dev)) for x in xs]
    )
    return {
        "pdf": pdf,
        "cdf": cdf,
        "pdf_value": normal_pdf(x_value, mean, std_dev),
        "cdf_value": normal_cdf(x_value, mean, std_dev),
    }
