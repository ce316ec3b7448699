"""
Conversion of generator output into pandas DataFrames for display.
"""

from dataclasses import asdict

import pandas as pd

from optionlab.utils.types import BrownianSimulation, ChartPoint, ChartSeries, Greeks

GREEK_DESCRIPTIONS = {
    "delta": "Price change per $1 underlying move",
    "gamma": "Delta change per $1 underlying move",
    "theta": "Price change per day",
    "vega": "Price change per 1% vol move",
    "rho": "Price change per 1% rate move",
}


def points_to_frame(points: list[ChartPoint], x_name: str = "x", y_name: str = "y") -> pd.DataFrame:
    """Single curve as a two-column frame."""
    return pd.DataFrame({x_name: [p.x for p in points], y_name: [p.y for p in points]})


def series_to_frame(series: list[ChartSeries]) -> pd.DataFrame:
    """
    Multi-series chart in long format with columns series, x, y.

    Rows keep series order, then x order within each series.
    """
    rows = [
        {"series": s.label, "x": p.x, "y": p.y}
        for s in series
        for p in s.points
    ]
    return pd.DataFrame(rows, columns=["series", "x", "y"])


def records_to_frame(records: list) -> pd.DataFrame:
    """Frame with one row per dataclass record (e.g. VolatilityGreeksPoint)."""
    return pd.DataFrame([asdict(r) for r in records])


def greeks_to_frame(greeks: Greeks) -> pd.DataFrame:
    """Greeks table with name, value and description columns."""
    values = asdict(greeks)
    return pd.DataFrame(
        {
            "Greek": [name.capitalize() for name in GREEK_DESCRIPTIONS],
            "Value": [values[name] for name in GREEK_DESCRIPTIONS],
            "Description": list(GREEK_DESCRIPTIONS.values()),
        }
    )


def simulation_to_frame(simulation: BrownianSimulation, include_expected: bool = True) -> pd.DataFrame:
    """
    Wide frame with a time column, one pathN column per path and,
    optionally, the expected path.
    """
    data = {"time": simulation.times}
    for i, values in enumerate(simulation.paths, start=1):
        data[f"path{i}"] = values
    if include_expected:
        data["expected"] = simulation.expected
    return pd.DataFrame(data)
