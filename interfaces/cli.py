"""
Command-line interface for the options toolkit.

This CLI provides access to:
- Option pricing (Black-Scholes)
- Greeks calculation
- Option price sweeps over the underlying price
- Geometric Brownian motion simulation
"""

import logging

import click

from optionlab.charts.frames import simulation_to_frame
from optionlab.charts.generators import approximate_delta, price_series
from optionlab.core.black_scholes import calculate_greeks, option_price
from optionlab.simulation.brownian import simulate_brownian_paths
from optionlab.utils.constants import (
    BM_DIFFUSION,
    BM_DRIFT,
    BM_INITIAL_VALUE,
    BM_PATHS,
    BM_STEPS,
    BM_TIME_HORIZON,
    DEFAULT_POINTS,
    DEFAULT_PRICE_RANGE,
)
from optionlab.utils.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def option_options(func):
    """Shared Black-Scholes parameter options."""
    decorators = [
        click.option("--spot", "-S", type=float, required=True, help="Underlying price"),
        click.option("--strike", "-K", type=float, required=True, help="Strike price"),
        click.option("--time", "-T", type=float, required=True, help="Time to maturity (years)"),
        click.option("--rate", "-r", type=float, required=True, help="Risk-free rate"),
        click.option("--vol", "-v", type=float, required=True, help="Volatility (annualized)"),
        click.option("--type", "-t", "option_type", type=click.Choice(["call", "put"]), default="call"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Options Toolkit - Black-Scholes pricing, Greeks and GBM simulation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@cli.command()
@option_options
def price(spot, strike, time, rate, vol, option_type):
    """Calculate option price using Black-Scholes."""
    try:
        price_value = option_price(spot, strike, time, rate, vol, option_type)
    except InvalidParameterError as e:
        raise click.BadParameter(str(e), param_hint=e.name)
    click.echo(f"\n{option_type.capitalize()} Option Price: ${price_value:.4f}")


@cli.command()
@option_options
def greeks(spot, strike, time, rate, vol, option_type):
    """Calculate all option Greeks."""
    try:
        greeks_values = calculate_greeks(spot, strike, time, rate, vol, option_type)
        fd_delta = approximate_delta(spot, strike, time, rate, vol, option_type)
    except InvalidParameterError as e:
        raise click.BadParameter(str(e), param_hint=e.name)

    click.echo(f"\nGreeks for {option_type.capitalize()} Option:")
    click.echo(f"  Delta:  {greeks_values.delta:>10.6f}")
    click.echo(f"  Gamma:  {greeks_values.gamma:>10.6f}")
    click.echo(f"  Theta:  {greeks_values.theta:>10.6f} (per day)")
    click.echo(f"  Vega:   {greeks_values.vega:>10.6f} (per 1% vol)")
    click.echo(f"  Rho:    {greeks_values.rho:>10.6f} (per 1% rate)")
    click.echo(f"  Delta (finite difference): {fd_delta:.6f}")


@cli.command()
@option_options
@click.option("--range", "price_range", type=float, default=DEFAULT_PRICE_RANGE, help="Half-width as fraction of spot")
@click.option("--points", "-n", type=int, default=DEFAULT_POINTS, help="Number of grid points")
def series(spot, strike, time, rate, vol, option_type, price_range, points):
    """Tabulate option price against the underlying price."""
    try:
        data = price_series(spot, strike, time, rate, vol, option_type, price_range, points)
    except InvalidParameterError as e:
        raise click.BadParameter(str(e), param_hint=e.name)

    click.echo(f"{'Underlying':>12}  {'Option':>12}")
    for point in data:
        click.echo(f"{point.x:>12.4f}  {point.y:>12.4f}")


@cli.command()
@click.option("--drift", "-m", type=float, default=BM_DRIFT, help="Drift coefficient")
@click.option("--diffusion", "-d", type=float, default=BM_DIFFUSION, help="Diffusion coefficient")
@click.option("--horizon", "-T", type=float, default=BM_TIME_HORIZON, help="Time horizon (years)")
@click.option("--steps", "-n", type=int, default=BM_STEPS, help="Number of time steps")
@click.option("--initial", "-s", type=float, default=BM_INITIAL_VALUE, help="Initial value")
@click.option("--paths", "-p", type=int, default=BM_PATHS, help="Number of paths")
@click.option("--seed", type=int, default=None, help="Seed base (defaults to the clock)")
def simulate(drift, diffusion, horizon, steps, initial, paths, seed):
    """Simulate geometric Brownian motion paths and print terminal values."""
    try:
        result = simulate_brownian_paths(drift, diffusion, horizon, steps, initial, paths, seed)
    except InvalidParameterError as e:
        raise click.BadParameter(str(e), param_hint=e.name)

    frame = simulation_to_frame(result)
    terminal = frame.iloc[-1]
    for i in range(1, paths + 1):
        click.echo(f"path{i}: {terminal[f'path{i}']:.4f}")
    click.echo(f"expected: {terminal['expected']:.4f}")


if __name__ == "__main__":
    cli()
