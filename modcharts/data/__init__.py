"""Result file ordering and loading modules."""
from modcharts.data.loader import discover_csv_files, load_results_csv, load_results_dir
from modcharts.data.ordering import csv_sort_key, sort_csv_files

__all__ = [
    "csv_sort_key",
    "sort_csv_files",
    "discover_csv_files",
    "load_results_csv",
    "load_results_dir",
]
