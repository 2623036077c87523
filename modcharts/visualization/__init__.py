"""Visualization modules for charts and colors."""
from modcharts.constants import PREFERRED_CSV_ORDER
from modcharts.visualization.chart_builder import create_metric_overview, create_model_bar_chart
from modcharts.visualization.colors import MODEL_COLOR_MAP, generate_colors, hex_to_hsl

__all__ = [
    "MODEL_COLOR_MAP",
    "PREFERRED_CSV_ORDER",
    "create_metric_overview",
    "create_model_bar_chart",
    "generate_colors",
    "hex_to_hsl",
]
