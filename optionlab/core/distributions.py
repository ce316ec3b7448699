"""
Normal distribution functions.

This module provides the standard normal cumulative distribution
function (CDF) and probability density function (PDF) used by the
Black-Scholes formulas, together with their general (mean, standard
deviation) forms used by the distribution charts.
"""

import math

from scipy.special import erf

SQRT_2 = math.sqrt(2.0)
SQRT_2PI = math.sqrt(2.0 * math.pi)


def normal_cdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """
    Normal cumulative distribution function via the error function.

    Args:
        x: Value at which to evaluate the CDF
        mean: Mean of the distribution, default 0.0
        std_dev: Standard deviation, default 1.0

    Returns:
        Probability that a normal random variable is less than x

    Formula:
        N(x) = ½ · (1 + erf((x - μ) / (σ√2)))

    Examples:
        >>> normal_cdf(0.0)
        0.5
        >>> round(normal_cdf(1.96), 3)
        0.975

    Notes:
        For large |x| the result saturates to exactly 0.0 or 1.0 under
        IEEE-754 double arithmetic. No clamping is applied.
    """
    return 0.5 * (1.0 + float(erf((x - mean) / (std_dev * SQRT_2))))


def normal_pdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """
    Normal probability density function.

    Args:
        x: Value at which to evaluate the PDF
        mean: Mean of the distribution, default 0.0
        std_dev: Standard deviation, default 1.0

    Returns:
        Probability density at x

    Formula:
        φ(x) = exp(-(x - μ)² / 2σ²) / (σ√(2π))
    """
    z = (x - mean) / std_dev
    return math.exp(-0.5 * z * z) / (std_dev * SQRT_2PI)
