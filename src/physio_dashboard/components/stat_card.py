"""Stat card: one labeled metric with an optional delta badge and subtitle."""
from __future__ import annotations

import html
import logging
from dataclasses import dataclass

import streamlit as st

from physio_dashboard.formatting import format_signed_change

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeltaBadge:
    text: str
    tone: str  # "affirmative" or "warning"


@dataclass(frozen=True)
class StatCardView:
    title: str
    value: str
    subtitle: str | None = None
    badge: DeltaBadge | None = None


def delta_badge(change: float) -> DeltaBadge:
    """Badge for a signed change: non-negative is affirmative, negative a warning."""
    tone = "affirmative" if change >= 0 else "warning"
    return DeltaBadge(text=format_signed_change(change), tone=tone)


def build_stat_card(
    title: str,
    value: str,
    subtitle: str | None = None,
    change: float | None = None,
) -> StatCardView:
    """Build the view for a stat card.

    A change of 0 still renders a badge ("0%"); only None suppresses it.
    An empty subtitle renders nothing.
    """
    return StatCardView(
        title=title,
        value=value,
        subtitle=subtitle or None,
        badge=delta_badge(change) if change is not None else None,
    )


def stat_card_html(view: StatCardView) -> str:
    """Generate HTML for a stat card."""
    parts = [f'<span class="stat-card-value">{html.escape(view.value)}</span>']
    if view.badge is not None:
        parts.append(
            f'<span class="delta delta-{view.badge.tone}">{html.escape(view.badge.text)}</span>'
        )
    if view.subtitle:
        parts.append(f'<span class="stat-card-subtitle">{html.escape(view.subtitle)}</span>')

    return (
        '<div class="stat-card">'
        f'<h3>{html.escape(view.title)}</h3>'
        f'<div class="stat-card-body">{"".join(parts)}</div>'
        '</div>'
    )


def render_stat_card(view: StatCardView) -> None:
    """Render a stat card into the current Streamlit container."""
    log.debug("Rendering stat card %r", view.title)
    st.markdown(stat_card_html(view), unsafe_allow_html=True)
