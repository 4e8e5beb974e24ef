"""Two-valued cell state."""

from enum import Enum


class Cell(Enum):
    """State of a single board cell.

    Boards store cells as numpy booleans; ``Cell`` is the value handed out
    by per-cell accessors.
    """
    DEAD = False
    ALIVE = True

    @classmethod
    def from_bool(cls, alive: bool) -> 'Cell':
        """Convert a stored boolean into a Cell."""
        return cls.ALIVE if alive else cls.DEAD

    def __bool__(self) -> bool:
        return self.value

    @property
    def alive(self) -> bool:
        return self is Cell.ALIVE

    def glyph(self, alive: str = '0', dead: str = '.') -> str:
        """Character used to draw this cell."""
        return alive if self.alive else dead
