#!/usr/bin/env python3
"""
Physical Assessment Dashboard

A Streamlit page showing one subject's physical assessment: a row of stat
cards, the 12-month history chart and the current body-composition results.

Usage:
    streamlit run streamlit_app.py
    physio-dashboard            # same, through the installed launcher
"""
from __future__ import annotations

import html
import logging
from dataclasses import dataclass

import streamlit as st

from physio_dashboard import sample_data
from physio_dashboard.common.config import ChartSettings, Config, get_config
from physio_dashboard.common.constants import (
    GREETING,
    HISTORY_TITLE,
    PAGE_CSS,
    PAGE_DESCRIPTION,
    REPORT_SUBTITLE,
    STAT_TITLES,
)
from physio_dashboard.common.logging_setup import configure_logging
from physio_dashboard.components.history_chart import render_history_chart
from physio_dashboard.components.results_grid import render_results_grid
from physio_dashboard.components.stat_card import (
    StatCardView,
    build_stat_card,
    render_stat_card,
)
from physio_dashboard.formatting import format_date, format_number
from physio_dashboard.models import (
    HistoricalData,
    ResultData,
    UserStats,
    history_from_records,
)

log = logging.getLogger(__name__)

# Lucide "user" icon
AVATAR_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round"><path d="M19 21v-2a4 4 0 0 0-4-4H9a4 4 0 0 0-4 4v2"/>'
    '<circle cx="12" cy="7" r="4"/></svg>'
)


# =============================================================================
# Data
# =============================================================================


@dataclass(frozen=True)
class DashboardData:
    """Everything the page displays. Owned by the composition root."""
    user_stats: UserStats
    results: ResultData
    history: tuple[HistoricalData, ...]


def build_default_data() -> DashboardData:
    """Parse the static dataset into validated, immutable records."""
    return DashboardData(
        user_stats=UserStats.from_dict(sample_data.USER_STATS),
        results=ResultData.from_dict(sample_data.RESULTS),
        history=history_from_records(sample_data.HISTORY),
    )


def build_stat_cards(user_stats: UserStats) -> tuple[StatCardView, ...]:
    """Build the four stat cards of the top row."""
    assessment_title, age_title, weight_title, height_title = STAT_TITLES
    return (
        build_stat_card(
            title=assessment_title,
            value=f"{user_stats.assessment.number}ª Avaliação",
            subtitle=format_date(user_stats.assessment.date),
        ),
        build_stat_card(
            title=age_title,
            value=f"{user_stats.age.years} anos",
            subtitle=format_date(user_stats.age.birth_date),
        ),
        build_stat_card(
            title=weight_title,
            value=f"{format_number(user_stats.weight.value)}kg",
            change=user_stats.weight.change,
        ),
        # TODO: height is stored in metres but labelled "cm"; switch the label once the report template is confirmed
        build_stat_card(
            title=height_title,
            value=f"{format_number(user_stats.height.value)}cm",
            change=user_stats.height.change,
        ),
    )


# =============================================================================
# Header
# =============================================================================


def header_html(display_name: str) -> str:
    """Generate HTML for the greeting header with avatar placeholder."""
    greeting = html.escape(GREETING.format(name=display_name))
    return (
        '<header class="dash-header">'
        f'<div><h1>{greeting}</h1><p>{html.escape(REPORT_SUBTITLE)}</p></div>'
        f'<div class="dash-avatar">{AVATAR_SVG}</div>'
        '</header>'
    )


def render_header(display_name: str):
    st.markdown(header_html(display_name), unsafe_allow_html=True)


# =============================================================================
# Page
# =============================================================================


def render_stat_row(user_stats: UserStats):
    """Render the 4-column row of stat cards."""
    cards = build_stat_cards(user_stats)
    cols = st.columns(len(cards))
    for col, card in zip(cols, cards):
        with col:
            render_stat_card(card)


def render_body(data: DashboardData, chart_settings: ChartSettings):
    """Render the chart panel (2/3) and the results panel (1/3)."""
    chart_col, results_col = st.columns([2, 1])

    with chart_col:
        with st.container(border=True):
            st.subheader(HISTORY_TITLE)
            render_history_chart(data.history, chart_settings)

    with results_col:
        render_results_grid(data.results)


def render_dashboard(
    data: DashboardData,
    display_name: str,
    chart_settings: ChartSettings | None = None,
):
    """Render the whole page from injected data."""
    log.info(
        "Rendering dashboard for %s: assessment #%d, %d history points",
        display_name,
        data.user_stats.assessment.number,
        len(data.history),
    )
    st.markdown(PAGE_CSS, unsafe_allow_html=True)
    render_header(display_name)
    render_stat_row(data.user_stats)
    render_body(data, chart_settings or ChartSettings())


# =============================================================================
# Main App
# =============================================================================


def main(config: Config | None = None, data: DashboardData | None = None):
    """Main dashboard application."""
    config = config or get_config()
    configure_logging(config.get_log_level())

    st.set_page_config(
        page_title=config.get_page_title(),
        page_icon=config.get_page_icon(),
        layout=config.get_layout() if config.get_layout() in ("wide", "centered") else "wide",
        menu_items={"About": PAGE_DESCRIPTION},
    )

    errors = config.validate()
    for error in errors:
        log.warning(f"Configuration problem: {error}")
    chart_settings = ChartSettings() if errors else config.get_chart_settings()

    data = data or build_default_data()
    render_dashboard(data, config.get_display_name(), chart_settings)


if __name__ == "__main__":
    main()
