"""
Streamlit web interface for the options toolkit.

Interactive UI with tabs for:
- Option pricing and Greeks
- Price and delta charts
- Normal distribution
- Brownian motion simulation
"""

import streamlit as st
import plotly.graph_objects as go

from optionlab.charts.frames import greeks_to_frame, records_to_frame, simulation_to_frame
from optionlab.charts.generators import (
    delta_approximation_series,
    delta_underlying_series,
    delta_volatility_series,
    normal_distribution_series,
    price_delta_series,
    price_series,
    tangent_line,
    volatility_series,
)
from optionlab.core.black_scholes import calculate_greeks, option_price
from optionlab.simulation.brownian import simulate_brownian_paths

st.set_page_config(page_title="Options Toolkit", layout="wide")

st.title("Options Toolkit")
st.markdown("Black-Scholes option pricing, Greeks and stochastic processes")

# Sidebar parameters
st.sidebar.header("Option Parameters")
option_type = st.sidebar.selectbox("Option Type", ["call", "put"])
S = st.sidebar.number_input("Underlying Price (S)", value=100.0, min_value=0.01)
K = st.sidebar.number_input("Strike Price (K)", value=100.0, min_value=0.01)
T = st.sidebar.slider("Time to Maturity (years)", 0.0, 5.0, 1.0)
r = st.sidebar.slider("Risk-Free Rate (%)", 0.0, 20.0, 5.0) / 100
sigma = st.sidebar.slider("Volatility (%)", 1.0, 200.0, 20.0) / 100

tab1, tab2, tab3, tab4, tab5 = st.tabs(
    ["Pricing & Greeks", "Price Charts", "Delta Charts", "Normal Distribution", "Brownian Motion"]
)

with tab1:
    st.header("Option Valuation")

    price = option_price(S, K, T, r, sigma, option_type)
    st.metric(label=f"{option_type.capitalize()} Price", value=f"${price:.4f}")

    st.subheader("Greeks")
    st.table(greeks_to_frame(calculate_greeks(S, K, T, r, sigma, option_type)))

with tab2:
    st.header("Option Price vs Underlying Price")

    points = price_series(S, K, T, r, sigma, option_type)
    fig_price = go.Figure()
    fig_price.add_trace(go.Scatter(x=[p.x for p in points], y=[p.y for p in points], name="Price"))
    fig_price.update_layout(xaxis_title="Underlying Price", yaxis_title="Option Price")
    st.plotly_chart(fig_price, use_container_width=True)

    st.subheader("By Volatility")
    fig_vol = go.Figure()
    for s in volatility_series(S, K, T, r, option_type):
        fig_vol.add_trace(go.Scatter(x=s.xs, y=s.ys, name=f"σ = {s.label}"))
    fig_vol.update_layout(xaxis_title="Underlying Price", yaxis_title="Option Price")
    st.plotly_chart(fig_vol, use_container_width=True)

with tab3:
    st.header("Delta")

    # Tangent at the grid point closest to the current underlying price
    curve = price_delta_series(K, T, r, sigma, option_type)
    anchor = min(curve, key=lambda p: abs(p.underlying_price - S))
    start, end = tangent_line(anchor, half_width=0.4 * K)
    fig_tan = go.Figure()
    fig_tan.add_trace(go.Scatter(
        x=[p.underlying_price for p in curve], y=[p.option_price for p in curve], name="Option Price"
    ))
    fig_tan.add_trace(go.Scatter(x=[start.x, end.x], y=[start.y, end.y], name="Delta Tangent"))
    fig_tan.update_layout(xaxis_title="Underlying Price", yaxis_title="Option Price")
    st.plotly_chart(fig_tan, use_container_width=True)

    st.subheader("Finite-Difference Approximation")
    st.dataframe(records_to_frame(delta_approximation_series(S, K, T, r, sigma, option_type)))

    st.subheader("Delta by Volatility")
    fig_delta = go.Figure()
    for s in delta_underlying_series(S, K, T, r, option_type):
        fig_delta.add_trace(go.Scatter(x=s.xs, y=s.ys, name=f"σ = {s.label}"))
    fig_delta.update_layout(xaxis_title="Underlying Price", yaxis_title="Delta")
    st.plotly_chart(fig_delta, use_container_width=True)

    atm = records_to_frame(delta_volatility_series(K, T, r, option_type))
    greek = st.selectbox("At-the-money Greek", ["delta", "gamma", "theta", "vega", "rho"])
    fig_atm = go.Figure()
    fig_atm.add_trace(go.Scatter(x=atm["volatility"], y=atm[greek], name=greek.capitalize()))
    fig_atm.update_layout(xaxis_title="Volatility (%)", yaxis_title=greek.capitalize())
    st.plotly_chart(fig_atm, use_container_width=True)

with tab4:
    st.header("Normal Distribution")

    mean = st.slider("Mean (μ)", -3.0, 3.0, 0.0, 0.1)
    std_dev = st.slider("Standard Deviation (σ)", 0.1, 3.0, 1.0, 0.1)
    x_value = st.slider("x", mean - 4 * std_dev, mean + 4 * std_dev, mean, 0.1)

    curves = normal_distribution_series(mean, std_dev, x_value)
    col1, col2 = st.columns(2)
    with col1:
        st.metric("PDF f(x)", f"{curves['pdf_value']:.4f}")
        fig_pdf = go.Figure(go.Scatter(x=curves["pdf"].xs, y=curves["pdf"].ys, fill="tozeroy"))
        st.plotly_chart(fig_pdf, use_container_width=True)
    with col2:
        st.metric("CDF F(x)", f"{curves['cdf_value']:.4f}")
        fig_cdf = go.Figure(go.Scatter(x=curves["cdf"].xs, y=curves["cdf"].ys))
        st.plotly_chart(fig_cdf, use_container_width=True)

with tab5:
    st.header("Geometric Brownian Motion")

    drift = st.slider("Drift (μ)", -0.5, 0.5, 0.05, 0.01)
    diffusion = st.slider("Diffusion (σ)", 0.01, 0.5, 0.2, 0.01)
    horizon = st.slider("Time Horizon (years)", 0.1, 5.0, 1.0, 0.1)
    initial = st.slider("Initial Value", 10.0, 500.0, 100.0, 10.0)
    n_paths = st.slider("Paths", 1, 10, 5)
    show_expected = st.checkbox("Show Expected Path", value=True)

    simulation = simulate_brownian_paths(drift, diffusion, horizon, 252, initial, n_paths)
    frame = simulation_to_frame(simulation, include_expected=show_expected)
    fig_bm = go.Figure()
    for column in frame.columns[1:]:
        fig_bm.add_trace(go.Scatter(x=frame["time"], y=frame[column], name=column))
    fig_bm.update_layout(xaxis_title="Time (years)", yaxis_title="Value ($)")
    st.plotly_chart(fig_bm, use_container_width=True)
