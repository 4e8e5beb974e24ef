"""Moore neighborhood lookup on a bounded, non-wrapping grid.

Cells are addressed by their flat row-major index. A cell touching the edge
of the board has fewer than eight neighbors: the four boundary flags (top
row, bottom row, left column, right column) select which of the eight
compass directions stay on the board.
"""

from typing import Dict, Tuple

NW, N, NE, W, E, SW, S, SE = 'NW', 'N', 'NE', 'W', 'E', 'SW', 'S', 'SE'

# (row offset, column offset) for each compass direction
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    NW: (-1, -1), N: (-1, 0), NE: (-1, 1),
    W: (0, -1), E: (0, 1),
    SW: (1, -1), S: (1, 0), SE: (1, 1),
}

# Keyed by (is_top, is_bottom, is_left, is_right)
NEIGHBOR_TABLE: Dict[Tuple[bool, bool, bool, bool], Tuple[str, ...]] = {
    # single cell
    (True, True, True, True): (),
    # single row
    (True, True, True, False): (E,),
    (True, True, False, True): (W,),
    (True, True, False, False): (W, E),
    # single column
    (True, False, True, True): (S,),
    (False, True, True, True): (N,),
    (False, False, True, True): (N, S),
    # corners
    (True, False, True, False): (E, S, SE),
    (True, False, False, True): (W, SW, S),
    (False, True, True, False): (N, NE, E),
    (False, True, False, True): (NW, N, W),
    # edges
    (True, False, False, False): (W, E, SW, S, SE),
    (False, True, False, False): (NW, N, NE, W, E),
    (False, False, True, False): (N, NE, E, S, SE),
    (False, False, False, True): (NW, N, W, SW, S),
    # interior
    (False, False, False, False): (NW, N, NE, W, E, SW, S, SE),
}


def delta(direction: str, width: int) -> int:
    """Flat index offset of a compass direction on a board of given width."""
    dy, dx = DIRECTIONS[direction]
    return dy * width + dx


def classify(i: int, width: int, size: int) -> Tuple[bool, bool, bool, bool]:
    """Boundary flags (is_top, is_bottom, is_left, is_right) for index i."""
    is_top = i < width
    is_bottom = i >= size - width
    is_left = i % width == 0
    is_right = (i + 1) % width == 0
    return (is_top, is_bottom, is_left, is_right)


def neighbors(i: int, width: int, size: int) -> Tuple[int, ...]:
    """Indices of the cells adjacent to index i.

    Args:
        i: Flat row-major cell index (0 <= i < size)
        width: Board width in cells
        size: Total number of cells (a multiple of width)

    Returns:
        Tuple of neighbor indices, all within [0, size) and never i itself

    Raises:
        IndexError: If i is outside the board
    """
    if not 0 <= i < size:
        raise IndexError(f"Index {i} out of bounds for board of {size} cells")
    directions = NEIGHBOR_TABLE[classify(i, width, size)]
    return tuple(i + delta(d, width) for d in directions)


def neighbor_index(width: int, size: int) -> Tuple[Tuple[int, ...], ...]:
    """Neighbor tuples for every index of a board, in index order."""
    return tuple(neighbors(i, width, size) for i in range(size))
