"""
Results grid: the four current body-composition metrics.

Cards always appear as lean mass, fat mass, body-fat %, BMI. Deltas are
always shown as "+{change}%" in the warning color, unlike stat cards.
"""
from __future__ import annotations

import html
import logging
from dataclasses import dataclass

import streamlit as st

from physio_dashboard.common.constants import RESULT_LABELS, RESULTS_TITLE
from physio_dashboard.formatting import format_percent, format_result_change
from physio_dashboard.models import RESULT_FIELDS, ResultData

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultCardView:
    title: str
    value: str
    change: str
    tone: str = "warning"


def build_result_cards(results: ResultData) -> tuple[ResultCardView, ...]:
    """Build the four result card views in fixed display order."""
    cards = []
    for attr, _key in RESULT_FIELDS:
        metric = getattr(results, attr)
        cards.append(
            ResultCardView(
                title=RESULT_LABELS[attr],
                value=format_percent(metric.value),
                change=format_result_change(metric.change),
            )
        )
    return tuple(cards)


def result_card_html(view: ResultCardView) -> str:
    return (
        '<div class="result-card">'
        f'<h3>{html.escape(view.title)}</h3>'
        f'<div class="result-card-value">{html.escape(view.value)}</div>'
        f'<div class="delta-{view.tone}">{html.escape(view.change)}</div>'
        '</div>'
    )


def results_grid_html(cards: tuple[ResultCardView, ...]) -> str:
    """Generate HTML for the 2-column grid of result cards."""
    inner = "".join(result_card_html(card) for card in cards)
    return f'<div class="results-grid">{inner}</div>'


def render_results_grid(results: ResultData) -> None:
    """Render the results panel."""
    cards = build_result_cards(results)
    log.debug("Rendering %d result cards", len(cards))

    with st.container(border=True):
        st.subheader(RESULTS_TITLE)
        st.markdown(results_grid_html(cards), unsafe_allow_html=True)
