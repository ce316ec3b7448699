"""
Geometric Brownian Motion path simulator.

Paths follow the Euler discretisation of dS = μ·S·dt + σ·S·dW:

    S_{t+1} = S_t + μ·S_t·dt + σ·S_t·√dt·Z,   Z ~ N(0, 1)

Normal draws come from a seeded sampler so that the same seed always
produces the same path. Two samplers are provided: a small linear
congruential generator with a Box-Muller transform (for demos, not
statistically rigorous) and numpy's PCG64 generator.
"""

import logging
import math
import time
from typing import Callable, Optional, Protocol

import numpy as np

from optionlab.utils.constants import (
    BM_DIFFUSION,
    BM_DRIFT,
    BM_INITIAL_VALUE,
    BM_PATHS,
    BM_SEED_STRIDE,
    BM_STEPS,
    BM_TIME_HORIZON,
    LCG_INCREMENT,
    LCG_MODULUS,
    LCG_MULTIPLIER,
)
from optionlab.utils.exceptions import InvalidParameterError
from optionlab.utils.types import BrownianPath, BrownianSimulation

logger = logging.getLogger(__name__)


class NormalSampler(Protocol):
    """Source of approximately standard normal draws."""

    def next_normal(self) -> float:
        ...


class LCGNormalSampler:
    """
    Box-Muller transform over a linear congruential generator.

    The uniform generator is seed' = (seed·9301 + 49297) mod 233280.
    Each normal draw consumes two uniforms; a zero first uniform is
    skipped since log(0) is undefined.
    """

    def __init__(self, seed: int):
        self.state = int(seed) % LCG_MODULUS

    def _next_uniform(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def next_normal(self) -> float:
        u1 = self._next_uniform()
        while u1 == 0.0:
            u1 = self._next_uniform()
        u2 = self._next_uniform()
        return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


class NumpyNormalSampler:
    """Standard normal draws from numpy's default generator (PCG64)."""

    def __init__(self, seed: int):
        self._rng = np.random.default_rng(seed)

    def next_normal(self) -> float:
        return float(self._rng.standard_normal())


SamplerFactory = Callable[[int], NormalSampler]


def _validate_grid(time_horizon: float, steps: int, initial_value: float) -> None:
    if not time_horizon > 0:
        raise InvalidParameterError("time_horizon", time_horizon, "Time horizon must be positive")
    if steps < 1:
        raise InvalidParameterError("steps", steps, "At least one time step is required")
    if not initial_value > 0:
        raise InvalidParameterError(
            "initial_value", initial_value, "Initial value must be positive"
        )


def time_grid(time_horizon: float, steps: int) -> list[float]:
    """Times 0, dt, 2dt, ..., T with dt = T / steps."""
    dt = time_horizon / steps
    return [t * dt for t in range(steps + 1)]


def simulate_path(
    drift: float,
    diffusion: float,
    time_horizon: float,
    steps: int,
    initial_value: float,
    sampler: NormalSampler,
) -> BrownianPath:
    """
    Simulate one GBM trajectory.

    Args:
        drift: μ, annualized drift coefficient
        diffusion: σ, annualized diffusion coefficient
        time_horizon: T in years
        steps: Number of time steps N
        initial_value: S₀
        sampler: Seeded normal sampler; consumed by this call

    Returns:
        BrownianPath with steps + 1 points starting at (0, S₀)
    """
    _validate_grid(time_horizon, steps, initial_value)
    dt = time_horizon / steps
    sqrt_dt = math.sqrt(dt)

    values = [initial_value]
    current = initial_value
    for _ in range(steps):
        drift_component = drift * current * dt
        random_component = diffusion * current * sqrt_dt * sampler.next_normal()
        current = current + drift_component + random_component
        values.append(current)

    return BrownianPath(times=time_grid(time_horizon, steps), values=values)


def expected_path(
    drift: float, time_horizon: float, steps: int, initial_value: float
) -> list[float]:
    """
    Deterministic expected value of GBM at each grid time: S₀·e^(μt).
    """
    _validate_grid(time_horizon, steps, initial_value)
    return [initial_value * math.exp(drift * t) for t in time_grid(time_horizon, steps)]


def path_seeds(path_count: int, seed_base: int) -> list[int]:
    """
    Independent seed per path: i·10000 + (seed_base mod 10000).
    """
    offset = seed_base % BM_SEED_STRIDE
    return [i * BM_SEED_STRIDE + offset for i in range(path_count)]


def simulate_brownian_paths(
    drift: float = BM_DRIFT,
    diffusion: float = BM_DIFFUSION,
    time_horizon: float = BM_TIME_HORIZON,
    steps: int = BM_STEPS,
    initial_value: float = BM_INITIAL_VALUE,
    path_count: int = BM_PATHS,
    seed_base: Optional[int] = None,
    sampler_factory: SamplerFactory = LCGNormalSampler,
) -> BrownianSimulation:
    """
    Simulate several GBM paths alongside the expected path.

    Args:
        drift: μ, annualized drift coefficient
        diffusion: σ, annualized diffusion coefficient
        time_horizon: T in years
        steps: Number of time steps per path
        initial_value: S₀ shared by all paths
        path_count: Number of stochastic paths
        seed_base: Base for per-path seeds; defaults to the wall clock in
            milliseconds so repeated runs differ
        sampler_factory: Builds a NormalSampler from an integer seed

    Returns:
        BrownianSimulation with the shared time grid, one value list per
        path, the expected path and the seeds used

    Notes:
        Each path gets its own sampler, so no state is shared between
        paths. The same seed_base and parameters reproduce the output exactly.
    """
    _validate_grid(time_horizon, steps, initial_value)
    if path_count < 0:
        raise InvalidParameterError("path_count", path_count, "Path count cannot be negative")

    if seed_base is None:
        seed_base = int(time.time() * 1000)
    seeds = path_seeds(path_count, seed_base)
    logger.debug("Simulating %d paths x %d steps, seeds=%s", path_count, steps, seeds)

    paths = [
        simulate_path(
            drift, diffusion, time_horizon, steps, initial_value, sampler_factory(seed)
        ).values
        for seed in seeds
    ]

    return BrownianSimulation(
        times=time_grid(time_horizon, steps),
        paths=paths,
        expected=expected_path(drift, time_horizon, steps, initial_value),
        seeds=seeds,
    )
