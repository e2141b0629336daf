"""
Plain-text rendering of Frame views for the command-line report.
"""
from typing import Optional

import numpy as np

from csvframe.frame import Frame
from csvframe.views import Sample, feature_names, frame_size, head, tail, random_sample, describe


def _format_cells(row) -> str:
    return "".join(f"\t{value:6.3f}" for value in row)


def format_feature_names(frame: Frame) -> str:
    names = "".join(f'~"{name}"~   ' for name in feature_names(frame))
    return f"Features:\n\t[\t{names}]\n"


def format_frame_size(frame: Frame) -> str:
    rows, cols, cells = frame_size(frame)
    return ("The dataset consists of:\n"
            f"\t{rows} rows,\n"
            f"\t{cols} columns,\n"
            f"\tthat is a total of {cells} cells.\n")


def format_rows(title: str, rows: np.ndarray) -> str:
    lines = [f"{title}: "]
    lines.extend(_format_cells(row) for row in rows)
    return "\n".join(lines) + "\n"


def format_sample(sample: Sample) -> str:
    lines = ["Random Samples: "]
    for index, row in zip(sample.indices, sample.rows):
        lines.append(f"\t{index})\t" + _format_cells(row))
    return "\n".join(lines) + "\n"


def format_describe(frame: Frame) -> str:
    return "Min/Max: \n" + describe(frame).to_string() + "\n"


def render_report(frame: Frame, head_rows: int, sample_rows: int, seed: Optional[int] = None) -> str:
    """Feature names, size, head, tail, random samples and (detailed only) min/max."""
    sections = [
        format_feature_names(frame),
        format_frame_size(frame),
        format_rows("Head", head(frame, head_rows)),
        format_rows("Tail", tail(frame, head_rows)),
    ]
    if frame.row_count:
        sections.append(format_sample(random_sample(frame, sample_rows, seed=seed)))
    if frame.has_stats:
        sections.append(format_describe(frame))
    return "\n".join(sections)
