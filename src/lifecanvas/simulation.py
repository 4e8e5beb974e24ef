"""Render/sleep/step driving loop."""

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from .config import SimulationConfig
from .core.board import Board
from .core.render import render

logger = logging.getLogger(__name__)


def frame(board: Board, config: SimulationConfig) -> str:
    """Render one frame using the configured glyphs."""
    return render(board, config.alive_glyph, config.dead_glyph, config.leading_newline)


def run(board: Board, config: Optional[SimulationConfig] = None, out: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None) -> Board:
    """Run the simulation for a fixed number of generations.

    Each iteration prints the board, waits, then steps. The board is printed
    once more after the last step. There is no early exit on a stable or
    empty board.

    Args:
        board: Board to advance (modified in-place)
        config: Loop settings (defaults if None)
        out: Stream frames are written to (stdout if None)
        sleep: Function called with the frame delay between frames
            (time.sleep if None)

    Returns:
        The board after the final generation
    """
    config = config or SimulationConfig()
    out = out or sys.stdout
    sleep = sleep or time.sleep

    logger.info(f"Running {config.generations} generations on {board.width}x{board.height} board")

    for _ in range(config.generations):
        print(frame(board, config), file=out)
        sleep(config.frame_delay)
        board.step()

    print(frame(board, config), file=out)

    logger.info(f"Finished at generation {board.generation} with {board.count_alive()} alive")
    return board
