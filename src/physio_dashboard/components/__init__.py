"""Dashboard component modules.

Each component handles a specific section of the dashboard:
- stat_card.py: single metric cards in the top row
- results_grid.py: current body-composition results
- history_chart.py: 12-month history line chart
"""

from physio_dashboard.components.history_chart import build_history_figure, render_history_chart
from physio_dashboard.components.results_grid import build_result_cards, render_results_grid
from physio_dashboard.components.stat_card import build_stat_card, render_stat_card

__all__ = [
    "build_history_figure",
    "render_history_chart",
    "build_result_cards",
    "render_results_grid",
    "build_stat_card",
    "render_stat_card",
]
