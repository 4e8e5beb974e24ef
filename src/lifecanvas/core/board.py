"""Fixed-size board for Conway's Game of Life.

The board keeps its cells in a flat, row-major numpy boolean array. It is
built once by embedding a smaller pattern into a dead canvas, then advanced
one generation at a time. Each generation is computed from a read-only view
of the current cells into a fresh array that replaces the old one.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from .cell import Cell
from .errors import DegenerateGridError, DimensionError, PlacementError
from .neighbors import neighbor_index
from .pattern import Pattern
from .rules import update_cell

logger = logging.getLogger(__name__)


class Board:
    """Bounded Game of Life board.

    Attributes:
        width: Board width in cells (fixed for the board's lifetime)
        height: Board height in cells
        size: Total number of cells (width * height)
        cells: Flat boolean array of size cells (True=alive)
        generation: Number of steps applied since construction
    """

    def __init__(self, width: int, height: int, cells: Optional[np.ndarray] = None):
        """Initialize board with given dimensions.

        Args:
            width: Board width (cells)
            height: Board height (cells)
            cells: Optional flat row-major cell array of width * height values

        Raises:
            DegenerateGridError: If width or height is less than 1
            DimensionError: If cells doesn't hold width * height values
        """
        if width < 1 or height < 1:
            raise DegenerateGridError(f"Board dimensions must be positive, got {width}x{height}")

        self.width = width
        self.size = width * height

        if cells is not None:
            cells = np.array(cells, dtype=bool).reshape(-1)
            if cells.size != self.size:
                raise DimensionError(f"Board has {cells.size} cells, expected {width}x{height}={self.size}")
            self.cells = cells
        else:
            self.cells = np.zeros(self.size, dtype=bool)

        self.generation = 0
        self._neighbors: Optional[Tuple[Tuple[int, ...], ...]] = None

    @property
    def height(self) -> int:
        return self.size // self.width

    @classmethod
    def from_pattern(cls, pattern: Pattern, canvas_width: int, canvas_height: int,
                     offset_x: int = 0, offset_y: int = 0) -> 'Board':
        """Create board by embedding a pattern into an otherwise dead canvas.

        Args:
            pattern: Initial pattern
            canvas_width: Board width (cells)
            canvas_height: Board height (cells)
            offset_x: Column of the pattern's top-left cell
            offset_y: Row of the pattern's top-left cell

        Returns:
            Board: New board with the pattern copied at the offset

        Raises:
            DegenerateGridError: If the canvas has a non-positive dimension
            PlacementError: If the pattern doesn't fit at the offset
        """
        if canvas_width < 1 or canvas_height < 1:
            raise DegenerateGridError(f"Canvas dimensions must be positive, got {canvas_width}x{canvas_height}")

        if offset_x < 0 or offset_y < 0:
            raise PlacementError(f"Offset ({offset_x}, {offset_y}) must not be negative")

        if offset_x + pattern.width > canvas_width or offset_y + pattern.height > canvas_height:
            raise PlacementError(
                f"{pattern.width}x{pattern.height} pattern at ({offset_x}, {offset_y}) "
                f"does not fit on {canvas_width}x{canvas_height} canvas"
            )

        canvas = np.zeros((canvas_height, canvas_width), dtype=bool)
        canvas[offset_y:offset_y + pattern.height, offset_x:offset_x + pattern.width] = pattern.to_array()

        logger.debug(f"Embedded {pattern.width}x{pattern.height} pattern at ({offset_x}, {offset_y}) "
                     f"on {canvas_width}x{canvas_height} canvas")
        return cls(canvas_width, canvas_height, canvas.reshape(-1))

    def neighbors(self, i: int) -> Tuple[int, ...]:
        """Indices of the cells adjacent to index i (no wraparound)."""
        if not 0 <= i < self.size:
            raise IndexError(f"Index {i} out of bounds for board of {self.size} cells")
        if self._neighbors is None:
            self._neighbors = neighbor_index(self.width, self.size)
        return self._neighbors[i]

    def live_neighbors(self, i: int) -> int:
        """Count alive cells adjacent to index i."""
        return sum(1 for j in self.neighbors(i) if self.cells[j])

    def next_cell(self, i: int) -> bool:
        """State of cell i in the next generation."""
        return update_cell(bool(self.cells[i]), self.live_neighbors(i))

    def next_generation(self) -> 'Board':
        """Compute the next generation as a new board, leaving this one untouched."""
        board = Board(self.width, self.height, self._next_cells())
        board.generation = self.generation + 1
        board._neighbors = self._neighbors
        return board

    def step(self) -> int:
        """Advance the board one generation in place.

        Returns:
            Number of alive cells after the step
        """
        self.cells = self._next_cells()
        self.generation += 1

        alive = self.count_alive()
        logger.debug(f"Generation {self.generation}: {alive} alive")
        return alive

    def _next_cells(self) -> np.ndarray:
        """Next-generation cell array computed from the current cells."""
        next_cells = np.zeros(self.size, dtype=bool)

        # self.cells is only read here; results go to the new array
        for i in range(self.size):
            next_cells[i] = self.next_cell(i)

        return next_cells

    def cell_at(self, i: int) -> Cell:
        """Cell state at flat index i."""
        if not 0 <= i < self.size:
            raise IndexError(f"Index {i} out of bounds for board of {self.size} cells")
        return Cell.from_bool(self.cells[i])

    def get(self, x: int, y: int) -> bool:
        """Get cell state at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} board")
        return bool(self.cells[y * self.width + x])

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.cells))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.cells)

    def to_array(self) -> np.ndarray:
        """Board as a (height, width) boolean array."""
        return self.cells.reshape(self.height, self.width).copy()

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        board = Board(self.width, self.height, self.cells)
        board.generation = self.generation
        return board

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using board[x, y] syntax."""
        x, y = key
        return self.get(x, y)

    def __eq__(self, other: object) -> bool:
        """Boards are equal when dimensions and cells match."""
        if not isinstance(other, Board):
            return False
        return (self.width == other.width and
                self.size == other.size and
                np.array_equal(self.cells, other.cells))

    def __str__(self) -> str:
        from .render import render
        return render(self, leading_newline=False)

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, generation={self.generation}, alive={self.count_alive()})"


def construct(initial_cells: Sequence[bool], initial_width: int, initial_height: int,
              canvas_width: int, canvas_height: int, offset_x: int, offset_y: int) -> Board:
    """Build a board from a flat initial cell list placed at an offset.

    Raises:
        DegenerateGridError: If any width or height is less than 1
        DimensionError: If initial_cells doesn't hold initial_width * initial_height values
        PlacementError: If the pattern doesn't fit on the canvas at the offset
    """
    pattern = Pattern(initial_width, initial_height, np.asarray(initial_cells, dtype=bool))
    return Board.from_pattern(pattern, canvas_width, canvas_height, offset_x, offset_y)
