"""
Numerical constants and default grid settings for pricing and charting.

This module collects the conventions used when reporting Greeks, the
default sweep ranges used by the chart generators, and the parameters
of the toy random number generator behind the Brownian motion demo.
"""

# Reporting conventions
DAYS_PER_YEAR = 365.0  # Theta is reported per calendar day
PERCENT = 100.0  # Vega and rho are reported per 1 percentage point

# Finite-difference step for the delta approximation
FD_STEP_SPOT = 0.01  # $0.01 central difference

# Price sweep around the spot price (±30%, 50 points)
DEFAULT_PRICE_RANGE = 0.3
DEFAULT_POINTS = 50

# Volatility sweeps, x-axis framed around the strike (±80%)
DEFAULT_STRIKE_RANGE = 0.8
PRICE_VOL_MIN = 0.2
PRICE_VOL_MAX = 0.9
DELTA_VOL_MIN = 0.1
DELTA_VOL_MAX = 0.9
VOL_STEP = 0.1

# At-the-money Greeks by volatility
ATM_VOL_MIN = 0.05
ATM_VOL_MAX = 1.0
ATM_VOL_STEP = 0.01

VOL_DECIMALS = 2  # Volatility levels are rounded to 2 decimals
VOL_LEVEL_TOLERANCE = 1e-9  # Absorbs representation error in (max - min) / step

# Delta approximation and tangent charts
APPROX_RANGE = 0.4  # Fraction of strike around the spot price
APPROX_INTERVALS = 30
TANGENT_RANGE = 0.8  # Fraction of strike around the strike price
TANGENT_INTERVALS = 50
MIN_CHART_PRICE = 1.0  # Lower clamp for underlying prices on these charts

# Normal distribution curves
NORMAL_SPAN_STD = 4.0  # Curves cover mean ± 4 standard deviations
NORMAL_INTERVALS_PER_SIDE = 50

# Linear congruential generator: seed' = (seed * a + c) mod m
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

# Brownian motion defaults
BM_DRIFT = 0.05
BM_DIFFUSION = 0.2
BM_TIME_HORIZON = 1.0
BM_STEPS = 252  # Trading days in a year
BM_INITIAL_VALUE = 100.0
BM_PATHS = 5
BM_SEED_STRIDE = 10000  # Per-path seed offset
