"""Initial pattern handed from the loaders to the board."""

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from .errors import DegenerateGridError, DimensionError, PatternFormatError

ALIVE_CHARS = frozenset('*oO')
DEAD_CHARS = frozenset('.')


@dataclass(frozen=True)
class Pattern:
    """Rectangular block of cells in row-major order.

    Attributes:
        width: Pattern width in cells
        height: Pattern height in cells
        cells: Flat boolean array of width * height cells (True=alive)
    """
    width: int
    height: int
    cells: np.ndarray = field(repr=False, compare=False)

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise DegenerateGridError(f"Pattern dimensions must be positive, got {self.width}x{self.height}")

        cells = np.array(self.cells, dtype=bool).reshape(-1)
        if cells.size != self.width * self.height:
            raise DimensionError(
                f"Pattern has {cells.size} cells, expected {self.width}x{self.height}={self.width * self.height}"
            )
        cells.flags.writeable = False
        object.__setattr__(self, 'cells', cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[bool]]) -> 'Pattern':
        """Build a pattern from equal-length rows of booleans."""
        rows = [list(row) for row in rows]
        if not rows:
            raise DegenerateGridError("Pattern must have at least one row")
        if len({len(row) for row in rows}) != 1:
            raise DimensionError("Pattern rows must all have the same length")
        array = np.array(rows, dtype=bool).reshape(len(rows), len(rows[0]))
        height, width = array.shape
        return cls(width, height, array.reshape(-1))

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> 'Pattern':
        """Build a pattern from strings of '.' (dead) and '*', 'o', 'O' (alive)."""
        parsed = []
        for number, row in enumerate(rows, start=1):
            for ch in row:
                if ch not in ALIVE_CHARS and ch not in DEAD_CHARS:
                    raise PatternFormatError(f"Unknown cell character {ch!r}", line=number)
            parsed.append([ch in ALIVE_CHARS for ch in row])
        return cls.from_rows(parsed)

    def to_array(self) -> np.ndarray:
        """Pattern as a (height, width) boolean array."""
        return self.cells.reshape(self.height, self.width).copy()

    def count_alive(self) -> int:
        """Count alive cells in the pattern."""
        return int(np.sum(self.cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return (self.width == other.width and
                self.height == other.height and
                np.array_equal(self.cells, other.cells))
