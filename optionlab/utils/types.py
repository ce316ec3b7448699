"""
Data types and structures for options pricing and visualization.

This module defines dataclasses and types used throughout the toolkit
for representing options, Greeks, chart series and simulated paths.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional

from optionlab.utils.exceptions import InvalidParameterError

OptionType = Literal["call", "put"]


@dataclass(frozen=True)
class OptionParams:
    """
    Immutable container for option parameters.

    Attributes:
        S: Current price of the underlying asset
        K: Strike price
        T: Time to maturity in years
        r: Risk-free interest rate (annualized, continuous compounding)
        sigma: Volatility (annualized standard deviation)
        option_type: Either "call" or "put"
    """
    S: float
    K: float
    T: float
    r: float
    sigma: float
    option_type: OptionType = "call"

    def __post_init__(self) -> None:
        """Validate parameters are positive where required."""
        if self.S <= 0:
            raise InvalidParameterError("S", self.S, "Underlying price must be positive")
        if self.K <= 0:
            raise InvalidParameterError("K", self.K, "Strike price must be positive")
        if self.T < 0:
            raise InvalidParameterError("T", self.T, "Time to maturity must be non-negative")
        if self.sigma <= 0:
            raise InvalidParameterError("sigma", self.sigma, "Volatility must be positive")
        if self.option_type not in ("call", "put"):
            raise InvalidParameterError(
                "option_type", self.option_type, "Option type must be 'call' or 'put'"
            )

    def as_args(self) -> tuple:
        """Positional arguments in engine order (S, K, T, r, sigma, option_type)."""
        return (self.S, self.K, self.T, self.r, self.sigma, self.option_type)


@dataclass
class Greeks:
    """
    Container for option Greeks.

    Attributes:
        delta: Rate of change of option price with respect to underlying price (∂V/∂S)
        gamma: Rate of change of delta with respect to underlying price (∂²V/∂S²)
        theta: Rate of change of option price with respect to time, per day
        vega: Rate of change of option price with respect to volatility, per 1% vol
        rho: Rate of change of option price with respect to interest rate, per 1% rate
    """
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float


@dataclass
class ChartPoint:
    """Single (x, y) sample of a chart curve."""
    x: float
    y: float
    label: Optional[str] = None


@dataclass
class ChartSeries:
    """
    One curve of a chart.

    Attributes:
        label: Series label, e.g. the volatility level as a string
        points: Samples ordered by ascending x
        volatility: Volatility level for volatility sweeps, None otherwise
    """
    label: str
    points: list[ChartPoint] = field(default_factory=list)
    volatility: Optional[float] = None

    @property
    def xs(self) -> list[float]:
        return [p.x for p in self.points]

    @property
    def ys(self) -> list[float]:
        return [p.y for p in self.points]


@dataclass
class VolatilityGreeksPoint:
    """Greeks of an at-the-money option at one volatility level (in percent)."""
    volatility: float
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float


@dataclass
class DeltaApproximationPoint:
    """
    Central-difference delta next to the analytic value at one underlying price.

    Attributes:
        underlying_price: Underlying price at which the option is evaluated
        option_price: Option price at underlying_price
        approximate_delta: (V(S+h) - V(S-h)) / 2h
        analytic_delta: Closed-form delta
        price_minus: Option price at S - h
        price_plus: Option price at S + h
    """
    underlying_price: float
    option_price: float
    approximate_delta: float
    analytic_delta: float
    price_minus: float
    price_plus: float


@dataclass
class PriceDeltaPoint:
    """Option price and its delta at one underlying price."""
    underlying_price: float
    option_price: float
    delta: float


@dataclass
class BrownianPath:
    """One simulated trajectory: values[i] is the process value at times[i]."""
    times: list[float]
    values: list[float]


@dataclass
class BrownianSimulation:
    """
    Result of a Brownian motion simulation run.

    Attributes:
        times: Shared time grid 0, dt, ..., T
        paths: One list of values per simulated path
        expected: Deterministic expected path S0·e^(μt)
        seeds: Seed used for each path
    """
    times: list[float]
    paths: list[list[float]]
    expected: list[float]
    seeds: list[int] = field(default_factory=list)
