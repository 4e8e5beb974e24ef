"""Command line entry point.

Usage: lifecanvas <pattern-file> <canvas-size> <offset_x,offset_y> [options]
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .config import DEFAULT_FRAME_DELAY, DEFAULT_GENERATIONS, SimulationConfig
from .core.board import Board
from .core.errors import LifeError
from .patterns import FORMATS, load_pattern
from .simulation import run

logger = logging.getLogger(__name__)


def parse_canvas_size(value: str) -> Tuple[int, int]:
    """Parse 'N' (square) or 'WxH' into (width, height)."""
    parts = value.lower().split('x')
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid canvas size {value!r}, expected N or WxH") from None

    if len(numbers) == 1:
        numbers = numbers * 2
    if len(numbers) != 2:
        raise argparse.ArgumentTypeError(f"invalid canvas size {value!r}, expected N or WxH")
    return numbers[0], numbers[1]


def parse_offset(value: str) -> Tuple[int, int]:
    """Parse 'x,y' into (x, y)."""
    parts = value.split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"invalid offset {value!r}, expected x,y")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid offset {value!r}, expected x,y") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='lifecanvas', description="Conway's Game of Life on a fixed canvas")
    parser.add_argument("pattern", help="Pattern file (.cells, .rle or Life 1.05)")
    parser.add_argument("canvas_size", type=parse_canvas_size, help="Canvas size, N or WxH")
    parser.add_argument("offset", type=parse_offset, help="Pattern position on the canvas, x,y")
    parser.add_argument("--generations", type=int, default=DEFAULT_GENERATIONS, help="Number of steps")
    parser.add_argument("--delay", type=float, default=DEFAULT_FRAME_DELAY, help="Seconds between frames")
    parser.add_argument("--format", choices=sorted(FORMATS), default=None, help="Pattern format (detected if omitted)")
    parser.add_argument("--alive", default='0', help="Glyph for alive cells")
    parser.add_argument("--dead", default='.', help="Glyph for dead cells")
    parser.add_argument("--no-leading-newline", action="store_true", help="Don't start frames with a blank line")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (stderr)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the simulator and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s', stream=sys.stderr)

    try:
        config = SimulationConfig(
            generations=args.generations,
            frame_delay=args.delay,
            alive_glyph=args.alive,
            dead_glyph=args.dead,
            leading_newline=not args.no_leading_newline,
        )
    except ValueError as e:
        parser.error(str(e))

    print("Game of Life")

    canvas_width, canvas_height = args.canvas_size
    offset_x, offset_y = args.offset

    try:
        pattern = load_pattern(args.pattern, args.format)
        board = Board.from_pattern(pattern, canvas_width, canvas_height, offset_x, offset_y)
        run(board, config)
    except LifeError as e:
        logger.error(f"Simulation failed during {e.stage}: {e}")
        print(f"error: {e.stage}: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
