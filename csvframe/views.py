"""
Read-only views over a completed Frame.
"""
import logging
import numpy as np
import pandas as pd
from typing import List, NamedTuple, Optional, Tuple

from csvframe.frame import Frame
from csvframe.exceptions import FrameViewError

logger = logging.getLogger(__name__)

DEFAULT_VIEW_ROWS = 5


class Sample(NamedTuple):
    indices: np.ndarray
    rows: np.ndarray


def _check_count(n: int) -> int:
    if n < 0:
        raise FrameViewError(f"Row count must be non-negative, got {n}.")
    return n


def _clamp(frame: Frame, n: int, view: str) -> int:
    _check_count(n)
    if n > frame.row_count:
        logger.warning(f"{view}: requested {n} rows but the frame has {frame.row_count}; returning all rows.")
        return frame.row_count
    return n


def feature_names(frame: Frame) -> List[str]:
    return list(frame.columns)


def frame_size(frame: Frame) -> Tuple[int, int, int]:
    """Return (rows, columns, total cells)."""
    return frame.row_count, frame.column_count, frame.size


def head(frame: Frame, n: int = DEFAULT_VIEW_ROWS) -> np.ndarray:
    """First `n` rows in original order; all rows when `n` exceeds the row count."""
    n = _clamp(frame, n, 'head')
    return frame.cells[:n]


def tail(frame: Frame, n: int = DEFAULT_VIEW_ROWS) -> np.ndarray:
    """Last `n` rows in original order; all rows when `n` exceeds the row count."""
    n = _clamp(frame, n, 'tail')
    return frame.cells[frame.row_count - n:]


def random_sample(frame: Frame, n: int = DEFAULT_VIEW_ROWS, rng: Optional[np.random.Generator] = None,
                  seed: Optional[int] = None) -> Sample:
    """Draw `n` row indices uniformly with replacement and return them with their rows.

    Pass `rng` to control the random source, or `seed` for a fresh
    reproducible generator, not both. Without either, results are
    non-deterministic.
    """
    _check_count(n)
    if rng is not None and seed is not None:
        raise FrameViewError("Pass either rng or seed, not both.")
    if frame.row_count == 0:
        raise FrameViewError("Cannot sample rows from a frame with no rows.")
    if rng is None:
        rng = np.random.default_rng(seed)
    indices = rng.integers(0, frame.row_count, size=n)
    return Sample(indices=indices, rows=frame.cells[indices])


def describe(frame: Frame) -> pd.DataFrame:
    """Per-column min/max table, indexed by column name."""
    if not frame.detailed:
        raise FrameViewError("Frame was not loaded in detailed mode; min/max values are unavailable.")
    if not frame.has_stats:
        raise FrameViewError("Frame has no rows; min/max values are unavailable.")
    return pd.DataFrame({
        'min': frame.column_min,
        'max': frame.column_max,
    }, index=pd.Index(frame.columns, name='column'))
