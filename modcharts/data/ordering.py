"""Display ordering for result CSV files."""
from pathlib import Path
from typing import Iterable, List, Tuple, TypeVar, Union

from modcharts.constants import PREFERRED_CSV_ORDER

PathLike = TypeVar("PathLike", str, Path)

_RANK = {name: rank for rank, name in enumerate(PREFERRED_CSV_ORDER)}


def csv_sort_key(path: Union[str, Path]) -> Tuple[int, str]:
    """
    Sort key placing known result files in their preferred order.

    Files not in PREFERRED_CSV_ORDER come after the known ones, alphabetically.
    Only the file name is compared, so directories do not affect the order.
    """
    name = Path(path).name
    return (_RANK.get(name, len(_RANK)), name)


def sort_csv_files(paths: Iterable[PathLike]) -> List[PathLike]:
    """Return paths sorted for display, keeping their original type."""
    return sorted(paths, key=csv_sort_key)
