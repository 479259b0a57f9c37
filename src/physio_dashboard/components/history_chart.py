"""
History chart: the 12-month series as a single smoothed line.

Points are plotted at their index and labelled with their month, so months
are never re-sorted or merged. An empty series renders the axes frame without
a trace.
"""
from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from physio_dashboard.common.config import ChartSettings
from physio_dashboard.common.constants import (
    CHART_DOT_RADIUS,
    CHART_LINE_WIDTH,
    COLORS,
)
from physio_dashboard.models import HistoricalData

log = logging.getLogger(__name__)


def history_frame(points: Sequence[HistoricalData]) -> pd.DataFrame:
    """Convert the series to a DataFrame, keeping insertion order."""
    return pd.DataFrame(
        {
            "month": [p.month for p in points],
            "value": pd.Series([p.value for p in points], dtype="float64"),
        }
    )


def build_history_figure(
    points: Sequence[HistoricalData],
    settings: ChartSettings | None = None,
) -> go.Figure:
    """Build the history line chart."""
    settings = settings or ChartSettings()
    df = history_frame(points)
    months = df["month"].tolist()
    # Plot on positions so repeated labels keep their own tick
    positions = list(range(len(months)))

    fig = go.Figure()

    if not df.empty:
        fig.add_trace(
            go.Scatter(
                x=positions,
                y=df["value"].tolist(),
                customdata=months,
                mode="lines+markers",
                name="value",
                line=dict(color=COLORS["line"], width=CHART_LINE_WIDTH, shape="spline"),
                marker=dict(size=CHART_DOT_RADIUS * 2, color=COLORS["line"]),
                hovertemplate="%{customdata}: %{y}<extra></extra>",
            )
        )

    fig.update_layout(
        template="plotly_dark",
        height=settings.height,
        margin=dict(
            t=settings.margin_top,
            r=settings.margin_right,
            b=settings.margin_bottom,
            l=settings.margin_left,
        ),
        showlegend=False,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    if settings.fit_container:
        fig.update_layout(autosize=True)
    else:
        fig.update_layout(width=settings.width, autosize=False)

    axis_style = dict(
        showgrid=True,
        gridcolor=COLORS["grid"],
        griddash="dash",
        linecolor=COLORS["axis"],
        tickfont=dict(color=COLORS["axis"]),
        zeroline=False,
    )
    fig.update_xaxes(
        type="linear",
        tickmode="array",
        tickvals=positions,
        ticktext=months,
        **axis_style,
    )
    if positions:
        # Half a step of padding keeps the first and last dots off the frame
        fig.update_xaxes(range=[-0.5, len(positions) - 0.5])
    fig.update_yaxes(autorange=True, **axis_style)

    return fig


def render_history_chart(points: Sequence[HistoricalData], settings: ChartSettings | None = None) -> None:
    """Render the history chart into the current Streamlit container."""
    settings = settings or ChartSettings()
    if not points:
        log.warning("History series is empty; rendering an empty chart frame")
    else:
        log.debug("Rendering history chart with %d points", len(points))

    fig = build_history_figure(points, settings)
    st.plotly_chart(fig, width="stretch" if settings.fit_container else "content")
