"""Board model: cells, rules, neighbor lookup, embedding and rendering."""

from .board import Board, construct
from .cell import Cell
from .errors import (
    DegenerateGridError,
    DimensionError,
    LifeError,
    PatternFileError,
    PatternFormatError,
    PlacementError,
)
from .pattern import Pattern
from .render import render

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
    'construct',
    'render',
]
