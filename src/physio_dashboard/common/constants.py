"""Dashboard constants: palette, labels and page styling."""

# Color palette (dark theme)
COLORS = {
    # Surfaces
    "bg_page": "#171717",      # neutral-900
    "bg_card": "#262626",      # neutral-800
    "bg_tile": "#404040",      # neutral-700
    "avatar": "#4B5563",       # gray-600

    # Text
    "text": "#FFFFFF",
    "muted": "#9CA3AF",        # gray-400

    # Status colors
    "affirmative": "#22C55E",  # green-500
    "warning": "#EF4444",      # red-500

    # Chart colors
    "line": "#8884d8",
    "grid": "#444",
    "axis": "#888",
}

PAGE_DESCRIPTION = "Sistema de Avaliação Física, Fisioterapia e Análise de Desempenho"
REPORT_SUBTITLE = "Esse é seu relatório de Avaliação Física, Fisioterapia e Análise de Desempenho"
GREETING = "Bem vinda, {name}"

# Section headings
HISTORY_TITLE = "Histórico"
RESULTS_TITLE = "Resultados Atuais"

# Stat card titles, in display order
STAT_TITLES = ("Avaliação", "Idade", "Peso", "Altura")

# Result card labels keyed by ResultData attribute
RESULT_LABELS = {
    "lean_mass": "PESO MAGRO",
    "fat_mass": "PESO GORDO",
    "body_fat": "% GORDURA",
    "bmi": "IMC",
}

# History chart geometry
CHART_WIDTH = 600
CHART_HEIGHT = 300
CHART_MARGIN = {"top": 5, "right": 30, "bottom": 5, "left": 20}
CHART_DOT_RADIUS = 4
CHART_LINE_WIDTH = 2


PAGE_CSS = f"""
<style>
    .stApp {{
        background-color: {COLORS["bg_page"]};
        color: {COLORS["text"]};
    }}

    .block-container {{
        padding-top: 1rem;
        padding-bottom: 1rem;
    }}

    /* Header */
    .dash-header {{
        display: flex;
        justify-content: space-between;
        align-items: center;
        margin-bottom: 1.5rem;
    }}
    .dash-header h1 {{
        font-size: 1.5rem;
        font-weight: 700;
        margin: 0;
        padding: 0;
    }}
    .dash-header p {{ color: {COLORS["muted"]}; margin: 0; }}
    .dash-avatar {{
        width: 2rem;
        height: 2rem;
        border-radius: 9999px;
        background-color: {COLORS["avatar"]};
        display: flex;
        align-items: center;
        justify-content: center;
    }}

    /* Stat cards */
    .stat-card {{
        background-color: {COLORS["bg_card"]};
        border-radius: 8px;
        padding: 1rem;
        margin-bottom: 1.5rem;
    }}
    .stat-card h3 {{
        color: {COLORS["muted"]};
        font-size: 1rem;
        font-weight: 400;
        margin: 0 0 0.5rem 0;
        padding: 0;
    }}
    .stat-card-body {{ display: flex; align-items: center; gap: 0.5rem; }}
    .stat-card-value {{ font-size: 1.125rem; }}
    .stat-card-subtitle {{ font-size: 0.875rem; color: {COLORS["muted"]}; }}

    /* Result tiles */
    .results-grid {{
        display: grid;
        grid-template-columns: repeat(2, minmax(0, 1fr));
        gap: 1rem;
    }}
    .result-card {{
        background-color: {COLORS["bg_tile"]};
        border-radius: 8px;
        padding: 1rem;
    }}
    .result-card h3 {{
        color: {COLORS["muted"]};
        font-size: 1rem;
        font-weight: 400;
        margin: 0 0 0.5rem 0;
        padding: 0;
    }}
    .result-card-value {{ font-size: 1.25rem; font-weight: 700; }}

    /* Deltas */
    .delta {{ font-size: 0.875rem; }}
    .delta-affirmative {{ color: {COLORS["affirmative"]}; }}
    .delta-warning {{ color: {COLORS["warning"]}; }}
</style>
"""
