"""Configuration settings for the chart helpers."""
import os
from pathlib import Path

from modcharts.constants import DEFAULT_METRIC

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Logging Configuration
LOG_DIR = Path(os.getenv("MODCHARTS_LOG_DIR", str(PROJECT_ROOT / "logs")))
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Results Configuration
RESULTS_DIR = Path(os.getenv("RESULTS_DIR", str(PROJECT_ROOT / "results")))

# Export Configuration
EXPORT_DIR = Path(os.getenv("EXPORT_DIR", str(PROJECT_ROOT / "charts")))

# Chart Configuration
CHART_METRIC = os.getenv("CHART_METRIC", DEFAULT_METRIC)
CHART_TEMPLATE = os.getenv("CHART_TEMPLATE", "plotly_white")
