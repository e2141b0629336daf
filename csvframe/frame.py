"""
The in-memory table produced by a completed load.
"""
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd


def _readonly(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


@dataclass(frozen=True, eq=False)
class Frame:
    """Rows x numeric columns plus the header they were loaded with.

    `cells` is a row-major float64 array of shape (row_count, column_count).
    `column_min` and `column_max` are only set for detailed loads with at
    least one row. All arrays are read-only.
    """
    delimiter: str
    columns: Tuple[str, ...]
    cells: np.ndarray
    column_min: Optional[np.ndarray] = None
    column_max: Optional[np.ndarray] = None
    detailed: bool = False
    source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'columns', tuple(self.columns))
        cells = np.array(self.cells, dtype=np.float64, order='C')
        if cells.size == 0:
            cells = cells.reshape(0, len(self.columns))
        if cells.ndim != 2 or cells.shape[1] != len(self.columns):
            raise ValueError(f"cells shape {cells.shape} does not match {len(self.columns)} columns")
        object.__setattr__(self, 'cells', _readonly(cells))
        for name in ('column_min', 'column_max'):
            stats = getattr(self, name)
            if stats is not None:
                object.__setattr__(self, name, _readonly(np.array(stats, dtype=np.float64)))

    @property
    def row_count(self) -> int:
        return self.cells.shape[0]

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def size(self) -> int:
        return self.row_count * self.column_count

    @property
    def duplicate_columns(self) -> List[str]:
        """Column names that appear more than once, in first-seen order."""
        counts = Counter(self.columns)
        return [name for name in counts if counts[name] > 1]

    @property
    def has_stats(self) -> bool:
        return self.column_min is not None and self.column_max is not None

    def to_pandas(self) -> pd.DataFrame:
        """Return a writable DataFrame copy of the cells."""
        return pd.DataFrame(self.cells.copy(), columns=list(self.columns))
