"""Exception hierarchy for pattern loading and board construction.

Every failure the simulator can report derives from ``LifeError``. Each class
names the stage it belongs to so the command line can say which step failed.
"""

from typing import Optional


class LifeError(Exception):
    """Base class for all simulator errors."""

    stage = "simulation"


class PatternFileError(LifeError, OSError):
    """Pattern file is missing or cannot be read."""

    stage = "file read"


class PatternFormatError(LifeError, ValueError):
    """Pattern text violates the grammar of its file format.

    Attributes:
        line: 1-based line number of the offending text, if known
    """

    stage = "pattern parse"

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class PlacementError(LifeError, ValueError):
    """Pattern does not fit on the canvas at the requested offset."""

    stage = "placement"


class DimensionError(LifeError, ValueError):
    """Cell count does not agree with the declared width and height."""

    stage = "placement"


class DegenerateGridError(DimensionError):
    """Width or height is zero or negative."""
