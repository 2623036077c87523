"""Loading of per-modification benchmark result CSVs."""
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from modcharts.constants import MODEL_COLUMN
from modcharts.data.ordering import sort_csv_files
from modcharts.utils import setup_logger

logger = setup_logger(__name__)


def load_results_csv(path: Union[str, Path]) -> pd.DataFrame:
    """
    Load one results CSV into a table indexed by model name.

    The "model" column becomes the index; without one, the first column is
    used. Every other column is a metric and is coerced to numbers, with
    unparseable cells left as NaN.

    Args:
        path: CSV file path

    Returns:
        DataFrame indexed by model name with one numeric column per metric
    """
    try:
        df = pd.read_csv(path)
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"Empty results file: {path}") from e

    if df.empty:
        raise ValueError(f"No rows in results file: {path}")

    model_col = MODEL_COLUMN if MODEL_COLUMN in df.columns else df.columns[0]
    if len(df.columns) < 2:
        raise ValueError(f"No metric columns in results file: {path}")

    df[model_col] = df[model_col].astype(str).str.strip()
    df = df.set_index(model_col)
    df.index.name = MODEL_COLUMN
    return df.apply(pd.to_numeric, errors="coerce")


def discover_csv_files(directory: Union[str, Path]) -> List[Path]:
    """List the CSV files in a directory in display order."""
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Results directory not found: {directory}")
    return sort_csv_files(p for p in directory.glob("*.csv") if p.is_file())


def load_results_dir(directory: Union[str, Path]) -> Dict[str, pd.DataFrame]:
    """
    Load every results CSV in a directory, in display order.

    Files that fail to load are logged and skipped.

    Returns:
        Ordered mapping of file stem (e.g. "m6A_002") to its results table
    """
    results: Dict[str, pd.DataFrame] = {}
    failed = []

    for path in discover_csv_files(directory):
        try:
            results[path.stem] = load_results_csv(path)
            logger.info(f"Loaded {path.name} ({len(results[path.stem])} models)")
        except ValueError as e:
            failed.append((path.name, str(e)))

    if failed:
        logger.warning(f"FAILED ({len(failed)} files):")
        for name, err in failed:
            logger.warning(f"- {name} -> {err}")

    if not results:
        raise RuntimeError(f"No results could be loaded from {directory}")

    return results
