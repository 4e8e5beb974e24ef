"""Text rendering of a board."""

from .board import Board
from .cell import Cell


def render(board: Board, alive: str = '0', dead: str = '.', leading_newline: bool = True) -> str:
    """Draw the board as text.

    Args:
        board: Board to draw
        alive: Glyph for alive cells
        dead: Glyph for dead cells
        leading_newline: Start the frame with a blank line

    Returns:
        height lines of width glyphs, newline separated
    """
    glyphs = {True: Cell.ALIVE.glyph(alive, dead), False: Cell.DEAD.glyph(alive, dead)}

    lines = []
    for y in range(board.height):
        row = board.cells[y * board.width:(y + 1) * board.width]
        lines.append(''.join(glyphs[bool(c)] for c in row))

    frame = '\n'.join(lines)
    return '\n' + frame if leading_newline else frame
