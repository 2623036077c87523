"""Main entry point for rendering model benchmark charts."""
import sys
from pathlib import Path
from typing import Optional, Sequence

from modcharts.config import CHART_METRIC, EXPORT_DIR, RESULTS_DIR
from modcharts.data import load_results_dir
from modcharts.utils import setup_logger
from modcharts.visualization import create_metric_overview, create_model_bar_chart

logger = setup_logger(__name__)


def render_charts(results_dir: Path, export_dir: Path, metric: str) -> int:
    """Load results in display order and write one HTML chart per file plus an overview."""
    results_by_file = load_results_dir(results_dir)
    export_dir.mkdir(parents=True, exist_ok=True)

    written = 0
    for label, results in results_by_file.items():
        if metric not in results.columns:
            logger.warning(f"{label}: no '{metric}' column, no chart written")
            continue
        fig = create_model_bar_chart(results, metric, title=f"{label}: {metric}")
        fig.write_html(export_dir / f"{label}_{metric}.html", include_plotlyjs="cdn")
        written += 1

    overview = create_metric_overview(results_by_file, metric)
    overview.write_html(export_dir / f"overview_{metric}.html", include_plotlyjs="cdn")
    written += 1

    logger.info(f"Wrote {written} chart(s) to: {export_dir}")
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render charts for the results directory given on the command line (or RESULTS_DIR)."""
    args = list(sys.argv[1:] if argv is None else argv)
    results_dir = Path(args[0]) if args else RESULTS_DIR

    try:
        render_charts(results_dir, EXPORT_DIR, CHART_METRIC)
    except (FileNotFoundError, RuntimeError, ValueError) as e:
        logger.error(f"Could not render charts: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
