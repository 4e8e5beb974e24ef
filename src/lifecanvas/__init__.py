"""Conway's Game of Life on a fixed, non-wrapping canvas.

A pattern loaded from a plaintext, RLE or Life 1.05 file is embedded into a
dead canvas at an offset and advanced one generation at a time.
"""

from .config import SimulationConfig
from .core import (
    Board,
    Cell,
    DegenerateGridError,
    DimensionError,
    LifeError,
    Pattern,
    PatternFileError,
    PatternFormatError,
    PlacementError,
    construct,
    render,
)
from .patterns import load_pattern
from .simulation import run

__version__ = "0.1.0"

__all__ = [
    'Board',
    'Cell',
    'DegenerateGridError',
    'DimensionError',
    'LifeError',
    'Pattern',
    'PatternFileError',
    'PatternFormatError',
    'PlacementError',
    'SimulationConfig',
    'construct',
    'load_pattern',
    'render',
    'run',
]
