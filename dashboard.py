"""
Liquidity Buffer Model Dashboard

Interactive Streamlit page for tuning the liquidity model parameters and
exploring target ratios and rebalancing triggers across vault sizes.
"""

import json
from typing import Dict, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from liquidity_model.config.schema import (
    DEFAULT_LIQUIDITY_MODEL_PARAMS,
    VALIDATION_BOUNDS,
    LiquidityModelParams,
)
from liquidity_model.config.settings import settings
from liquidity_model.engine.evaluation import evaluate
from liquidity_model.engine.sampler import curve_to_frame, sample_curve
from liquidity_model.units import BPS, bp_to_percent


# Page config
st.set_page_config(
    page_title="Liquidity Buffer Model",
    page_icon="💧",
    layout="wide"
)

# Log-spaced TVL grid for the simulation selector ($1K to $1B)
TVL_GRID = [float(round(v)) for v in np.geomspace(1_000, 1_000_000_000, 121)]

# Reset value for the selector, snapped onto the grid
DEFAULT_TVL = min(
    TVL_GRID,
    key=lambda v: abs(np.log10(v) - np.log10(max(settings.chart.simulation_tvl, 1.0)))
)


RATIO_METHODOLOGY = """
**Foundation.** Follows optimal cash holdings theory (Baumol-Tobin): liquidity
needs and transaction costs do not scale linearly with vault size, so larger
vaults can run proportionally smaller buffers. The buffer exists for gas
savings at scale and as a cushion against large redemptions without slippage,
not because the deployed assets are illiquid.

**Model.** $r = b + (1-b)\\,(1 + T f)^{-e}$ where $r$ is the target ratio,
$b$ the min ratio, $T$ the vault TVL, $f$ the TVL factor and $e$ the
exponent. An empty vault holds a full reserve; the ratio decays towards $b$
as TVL grows.

**Practice.** The buffer lets deposits and withdrawals be batched and netted
so users interact only with the vault, while the idle cash can still earn
yield in money markets.
"""

TRIGGER_METHODOLOGY = """
**Foundation.** A dual-threshold (hysteresis) band keeps the buffer from
oscillating around the target. Flows that stay inside the band net out
without touching deployed positions.

**Model.** $t_l = r\\,(1-o_l)$ and $t_h = r\\,(1+o_h)$ where $t_l, t_h$ are
the low and high triggers, $r$ the target ratio and $o_l, o_h$ the offsets.

**Practice.** Falling below the low trigger unwinds LP positions in batches
to restore the buffer; rising above the high trigger deploys the excess.
Continuous rebalancing becomes event-driven, cutting DEX interactions.
"""


# ============================================================================
# Formatting Helpers
# ============================================================================

def format_bp(bp: float) -> str:
    """Format basis points as a percentage."""
    return f"{bp_to_percent(bp):.2f}%"


def format_dollars_auto(value: float, decimals: int = 1) -> str:
    """Format a dollar amount with a K/M/B suffix."""
    for threshold, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "K")):
        if abs(value) >= threshold:
            return f"${value / threshold:.{decimals}f}{suffix}"
    return f"${value:.{decimals}f}"


# ============================================================================
# Session State (parameter store)
# ============================================================================

SLIDERS: Dict[str, dict] = {
    "min_ratio_bp": {
        "label": "Min Ratio",
        "step": 100,
        "format": format_bp,
        "help": "Asymptotic minimum liquidity ratio floor that larger vaults approach as TVL increases.",
    },
    "tvl_factor_bp": {
        "label": "TVL Factor",
        "step": 100,
        "format": lambda v: f"{v / BPS:.2f}",
        "help": "Linear TVL scaling sensitivity in the decay term. Higher values make vault size more influential.",
    },
    "tvl_exponent_bp": {
        "label": "TVL Exponent",
        "step": 50,
        "format": lambda v: f"{v / BPS:.3f}",
        "help": "Decay strength controlling how quickly liquidity requirements fall with vault scale.",
    },
    "low_offset_bp": {
        "label": "Low Offset",
        "step": 100,
        "format": format_bp,
        "help": "Offset below target. Below this threshold LP positions are unwound to restore the buffer.",
    },
    "high_offset_bp": {
        "label": "High Offset",
        "step": 100,
        "format": format_bp,
        "help": "Offset above target. Above this threshold excess liquidity is deployed into LP positions.",
    },
}


def init_state():
    """Seed session state with default parameters and simulated TVL."""
    for field, value in DEFAULT_LIQUIDITY_MODEL_PARAMS.model_dump().items():
        st.session_state.setdefault(field, value)
    st.session_state.setdefault("liquidity_tvl", DEFAULT_TVL)


def reset_params():
    """Restore the default parameter set."""
    for field, value in DEFAULT_LIQUIDITY_MODEL_PARAMS.model_dump().items():
        st.session_state[field] = value


def reset_tvl():
    """Restore the default simulated TVL."""
    st.session_state["liquidity_tvl"] = DEFAULT_TVL


def current_params() -> LiquidityModelParams:
    """Snapshot the slider values as a validated parameter object."""
    return LiquidityModelParams(**{field: st.session_state[field] for field in SLIDERS})


# ============================================================================
# Charts
# ============================================================================

def build_curve_figure(
    params: LiquidityModelParams,
    tvl: float
) -> Tuple[go.Figure, pd.DataFrame]:
    """
    Build the target ratio and trigger curves with Plotly.

    Args:
        params: Liquidity model parameters
        tvl: Simulated TVL to mark on the chart

    Returns:
        Plotly figure and the sampled curve
    """
    chart = settings.chart
    curve = curve_to_frame(sample_curve(
        params,
        max_tvl=chart.max_tvl,
        point_count=chart.point_count,
        logarithmic=chart.logarithmic,
        min_tvl=chart.min_tvl,
    ))

    fig = go.Figure()
    traces = [
        ("low", "Low Trigger (%)", "#FFA15A", "dash"),
        ("target", "Target Ratio (%)", "#636EFA", "solid"),
        ("high", "High Trigger (%)", "#FFA15A", "dash"),
    ]
    for column, name, color, dash in traces:
        fig.add_trace(go.Scatter(
            x=curve["tvl"],
            y=curve[column].map(bp_to_percent),
            name=name,
            mode="lines",
            line=dict(color=color, dash=dash, width=2),
            hovertemplate="TVL $%{x:,.0f}<br>%{y:.2f}%<extra></extra>",
        ))

    fig.add_vline(
        x=tvl,
        line_dash="dot",
        line_color="gray",
        annotation_text=format_dollars_auto(tvl),
        annotation_position="top"
    )

    fig.update_layout(
        xaxis_title="Vault TVL (USD)",
        yaxis_title="Liquidity Ratio (%)",
        height=600,
        showlegend=True,
        hovermode="x unified"
    )
    if chart.logarithmic:
        fig.update_xaxes(type="log")

    return fig, curve


def main():
    """Main dashboard application."""
    init_state()

    st.title("💧 Liquidity Buffer Model")
    st.markdown(
        "Target liquidity ratio by vault TVL: "
        "$r = b + (1-b)\\,(1 + T f)^{-e}$, with triggers "
        "$t_l = r(1-o_l)$ and $t_h = r(1+o_h)$."
    )

    with st.expander("Methodology: target ratio"):
        st.markdown(RATIO_METHODOLOGY)

    # Sidebar controls
    st.sidebar.header("Parameters")
    st.sidebar.button("Reset parameters", on_click=reset_params)

    for field, slider in SLIDERS.items():
        bounds = VALIDATION_BOUNDS[field]
        st.sidebar.slider(
            slider["label"],
            min_value=bounds.min,
            max_value=bounds.max,
            step=slider["step"],
            key=field,
            help=slider["help"],
        )
        st.sidebar.caption(slider["format"](st.session_state[field]))

    params = current_params()

    # Simulation
    st.header("Simulation")
    col1, col2 = st.columns([4, 1])
    with col1:
        st.select_slider(
            "Current Vault TVL (USD)",
            options=TVL_GRID,
            key="liquidity_tvl",
            format_func=lambda v: format_dollars_auto(v, 0),
            help="Vault size driving the buffer requirement. Larger vaults run proportionally lower buffers.",
        )
    with col2:
        st.button("Reset TVL", on_click=reset_tvl)

    tvl = st.session_state["liquidity_tvl"]
    result = evaluate(params, tvl)

    with st.expander("Methodology: rebalancing triggers"):
        st.markdown(TRIGGER_METHODOLOGY)

    st.markdown(f"**For TVL = {format_dollars_auto(tvl)}:**")
    m1, m2, m3 = st.columns(3)
    m1.metric("Low", format_bp(result.low))
    m2.metric("Target", format_bp(result.target))
    m3.metric("High", format_bp(result.high))

    fig, curve = build_curve_figure(params, tvl)
    st.plotly_chart(fig, use_container_width=True)

    # Export
    st.markdown("---")
    st.subheader("Export")
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            label="📥 Download Curve (CSV)",
            data=curve.to_csv(index=False),
            file_name="liquidity_curve.csv",
            mime="text/csv"
        )
    with col2:
        st.download_button(
            label="📥 Download Parameters (JSON)",
            data=json.dumps(params.model_dump(by_alias=True), indent=2),
            file_name="liquidity_model_params.json",
            mime="application/json"
        )


if __name__ == "__main__":
    main()
