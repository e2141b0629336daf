"""
Custom exceptions for the csvframe loader and views.
"""

class LoadError(Exception):
    """Raised when a source cannot be turned into a complete Frame."""
    pass

class SourceUnavailable(LoadError):
    """Raised when the source file cannot be opened or read as text."""
    pass

class EmptySource(LoadError):
    """Raised when the source has no header line."""
    pass

class CapacityExceeded(LoadError):
    """Raised when the row or column count exceeds the configured ceiling."""
    pass

class MalformedRow(LoadError):
    """Raised when a data row's field count does not match the header."""
    def __init__(self, line_number: int, expected: int, actual: int):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(line_number, expected, actual)

    def __str__(self):
        return f"Line {self.line_number}: expected {self.expected} fields, got {self.actual}"

class FrameViewError(Exception):
    """Raised when a view cannot produce data for the requested arguments."""
    pass

class ConfigValidationError(ValueError):
    """Raised when a run configuration fails validation."""
    pass
