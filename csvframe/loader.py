"""
Loads a delimited text file into an immutable Frame.
"""
import os
import time
import logging
import numpy as np
from collections import Counter
from contextlib import contextmanager
from typing import List, Optional, Tuple, Union

from csvframe.frame import Frame
from csvframe.tokenizer import split, clean, parse_number
from csvframe.exceptions import SourceUnavailable, EmptySource, CapacityExceeded, MalformedRow

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def column_bounds(cells: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Per-column (min, max) over all rows, skipping NaN cells."""
    if cells.shape[0] == 0:
        raise ValueError("Cannot compute column bounds of a frame with no rows.")
    return np.fmin.reduce(cells, axis=0), np.fmax.reduce(cells, axis=0)


class FrameLoader:
    """Reads a header line and numeric data rows from a delimited text file.

    Any failure aborts the load; no partially populated Frame is ever
    returned. Capacity ceilings are optional, the table otherwise grows.
    """
    def __init__(self, filepath: PathLike, delimiter: str = ',', detailed: bool = False,
                 max_rows: Optional[int] = None, max_columns: Optional[int] = None,
                 encoding: str = 'utf-8-sig'):
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self.filepath = os.fspath(filepath)
        self.delimiter = delimiter
        self.detailed = detailed
        self.max_rows = max_rows
        self.max_columns = max_columns
        self.encoding = encoding

    def load(self) -> Frame:
        start_time = time.time()
        try:
            with self._open_source() as f:
                columns = self._read_header(f.readline())
                rows = self._read_rows(f, len(columns))
        except OSError as e:
            logger.error(f"Could not read {self.filepath}: {e}")
            raise SourceUnavailable(f"Could not read {self.filepath}: {e}") from e
        except UnicodeDecodeError as e:
            logger.error(f"Could not decode {self.filepath} as {self.encoding}: {e}")
            raise SourceUnavailable(f"Could not decode {self.filepath} as {self.encoding}: {e}") from e

        cells = np.array(rows, dtype=np.float64).reshape(len(rows), len(columns))
        column_min = column_max = None
        if self.detailed:
            if rows:
                column_min, column_max = column_bounds(cells)
            else:
                logger.warning(f"{self.filepath} has no data rows; min/max values are unavailable.")
        frame = Frame(
            delimiter=self.delimiter,
            columns=columns,
            cells=cells,
            column_min=column_min,
            column_max=column_max,
            detailed=self.detailed,
            source=self.filepath,
        )
        logger.info(f"Loaded {frame.row_count} rows x {frame.column_count} columns from {self.filepath}. Time: {time.time() - start_time:.2f}s")
        return frame

    @contextmanager
    def _open_source(self):
        f = open(self.filepath, 'r', encoding=self.encoding)
        logger.info(f"Opened {self.filepath} for reading.")
        try:
            yield f
        finally:
            f.close()
            logger.info(f"Closed {self.filepath}.")

    def _read_header(self, line: str) -> List[str]:
        if self._is_blank(line):
            logger.error(f"{self.filepath} has no header line.")
            raise EmptySource(f"{self.filepath} has no header line.")
        columns = [clean(token) for token in split(line, self.delimiter)]
        if self.max_columns is not None and len(columns) > self.max_columns:
            logger.error(f"Header has {len(columns)} columns, more than the allowed {self.max_columns}.")
            raise CapacityExceeded(f"Header has {len(columns)} columns, more than the allowed {self.max_columns}.")
        duplicates = [name for name, count in Counter(columns).items() if count > 1]
        if duplicates:
            logger.warning(f"Duplicate column names after cleaning: {duplicates}")
        return columns

    def _is_blank(self, line: str) -> bool:
        """Whitespace-only lines without a delimiter carry no fields."""
        return not line.strip() and self.delimiter not in line.rstrip("\r\n")

    def _read_rows(self, f, column_count: int) -> List[List[float]]:
        rows = []
        # Line 1 is the header.
        for line_number, line in enumerate(f, start=2):
            if self._is_blank(line):
                continue
            fields = split(line, self.delimiter)
            if len(fields) != column_count:
                logger.error(f"Malformed row at line {line_number}: expected {column_count} fields, got {len(fields)}")
                raise MalformedRow(line_number, column_count, len(fields))
            if self.max_rows is not None and len(rows) >= self.max_rows:
                logger.error(f"{self.filepath} has more than the allowed {self.max_rows} data rows.")
                raise CapacityExceeded(f"{self.filepath} has more than the allowed {self.max_rows} data rows.")
            rows.append([parse_number(field) for field in fields])
        return rows


def load(source: PathLike, delimiter: str = ',', detailed: bool = False, *,
         max_rows: Optional[int] = None, max_columns: Optional[int] = None,
         encoding: str = 'utf-8-sig') -> Frame:
    """Load `source` into a Frame; see FrameLoader for the failure modes."""
    return FrameLoader(source, delimiter=delimiter, detailed=detailed, max_rows=max_rows,
                       max_columns=max_columns, encoding=encoding).load()
