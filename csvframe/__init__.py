"""
csvframe: load delimited numeric text files into immutable in-memory frames.
"""
from csvframe.frame import Frame
from csvframe.loader import FrameLoader, load
from csvframe.views import DEFAULT_VIEW_ROWS, Sample, feature_names, frame_size, head, tail, random_sample, describe
from csvframe.exceptions import (
    LoadError,
    SourceUnavailable,
    EmptySource,
    CapacityExceeded,
    MalformedRow,
    FrameViewError,
    ConfigValidationError,
)
