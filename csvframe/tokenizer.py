"""
Line tokenizing and field conversion for the csvframe loader.

Fields are split strictly on the delimiter: there is no quoting or
escaping, so a delimiter inside a field is a field boundary.
"""
import re
import string
from typing import List

ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)

# Longest numeric prefix accepted by C's strtod/atof, minus hex floats.
_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE | re.ASCII,
)


def split(line: str, delimiter: str) -> List[str]:
    """Split a raw line into fields, ignoring the trailing line terminator."""
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    return line.rstrip("\r\n").split(delimiter)


def clean(field: str, keep=ALPHANUMERIC) -> str:
    """Drop every character of `field` that is not in `keep`."""
    return "".join(ch for ch in field if ch in keep)


def parse_number(field: str) -> float:
    """Convert a field to float, or 0.0 when it has no numeric prefix.

    Leading whitespace and a sign are accepted and trailing garbage is
    ignored, so "  -1.5e2kg" gives -150.0 and "abc" gives 0.0.
    """
    match = _NUMBER_PREFIX.match(field)
    if match is None:
        return 0.0
    return float(match.group(1))
