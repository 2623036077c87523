"""Chart building utilities for model benchmark results."""
import math
from typing import Dict, Optional

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from modcharts.config import CHART_TEMPLATE
from modcharts.utils import setup_logger
from modcharts.visualization.colors import generate_colors

logger = setup_logger(__name__)


def _metric_values(results: pd.DataFrame, metric: str) -> pd.Series:
    if metric not in results.columns:
        raise ValueError(f"Unknown metric: {metric}")
    return results[metric].dropna()


def _model_bar(values: pd.Series, metric: str) -> go.Bar:
    models = [str(m) for m in values.index]
    return go.Bar(
        x=models,
        y=values.values,
        marker=dict(color=generate_colors(len(models), models)),
        hovertemplate=f"<b>%{{x}}</b><br>{metric}: %{{y:.3f}}<extra></extra>",
        showlegend=False,
    )


def create_model_bar_chart(
    results: pd.DataFrame, metric: str, title: Optional[str] = None
) -> go.Figure:
    """
    Create a bar chart of one metric across models.

    Known models keep their preset color in every chart; the rest get
    evenly spaced fallback hues.

    Args:
        results: Results table indexed by model name
        metric: Metric column to plot
        title: Chart title (defaults to the metric name)

    Returns:
        Plotly Figure with one bar per model
    """
    values = _metric_values(results, metric)

    fig = go.Figure()
    fig.add_trace(_model_bar(values, metric))
    fig.update_layout(
        title=title or metric,
        xaxis_title="Model",
        yaxis_title=metric,
        template=CHART_TEMPLATE,
        margin=dict(t=40, r=30, l=60, b=50),
    )

    return fig


def create_metric_overview(
    results_by_file: Dict[str, pd.DataFrame], metric: str, cols: int = 2
) -> go.Figure:
    """
    Create a grid of bar charts, one per results file, for a single metric.

    Subplots follow the order of results_by_file, so pass it already sorted
    for display. Files without the metric are skipped.

    Args:
        results_by_file: Mapping of file label to results table
        metric: Metric column to plot
        cols: Number of subplot columns

    Returns:
        Plotly Figure with one subplot per file
    """
    panels = {}
    for label, results in results_by_file.items():
        try:
            panels[label] = _metric_values(results, metric)
        except ValueError:
            logger.warning(f"{label}: no '{metric}' column, skipping")

    if not panels:
        raise ValueError(f"No results contain metric: {metric}")

    cols = max(1, min(cols, len(panels)))
    rows = math.ceil(len(panels) / cols)
    fig = make_subplots(rows=rows, cols=cols, subplot_titles=list(panels.keys()))

    for i, values in enumerate(panels.values()):
        fig.add_trace(_model_bar(values, metric), row=i // cols + 1, col=i % cols + 1)

    fig.update_layout(
        title=f"{metric} by modification",
        template=CHART_TEMPLATE,
        height=max(400, 320 * rows),
        margin=dict(t=80, r=30, l=60, b=50),
    )

    return fig
