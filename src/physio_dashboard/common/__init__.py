"""Common utilities for the assessment dashboard."""

from physio_dashboard.common.config import ChartSettings, Config, get_chart_settings, get_config
from physio_dashboard.common.constants import COLORS
from physio_dashboard.common.logging_setup import configure_logging

__all__ = [
    "ChartSettings",
    "Config",
    "get_config",
    "get_chart_settings",
    "COLORS",
    "configure_logging",
]
