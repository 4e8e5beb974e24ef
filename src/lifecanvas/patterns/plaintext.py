"""
Plaintext (.cells) pattern format.

Lines starting with '!' or '#' are comments. Every other line is one row:
'.' is a dead cell and '*', 'o' or 'O' an alive one. Rows shorter than the
widest row are padded with dead cells.
"""

import logging

from ..core.errors import PatternFormatError
from ..core.pattern import ALIVE_CHARS, DEAD_CHARS, Pattern
from .source import PathLike, content_lines, read_pattern_file

logger = logging.getLogger(__name__)

NAME = 'plaintext'
EXTENSIONS = ('.cells', '.txt')
COMMENT_PREFIXES = ('#', '!')


def parse(text: str) -> Pattern:
    """Parse plaintext pattern text.

    Raises:
        PatternFormatError: On a character other than '.', '*', 'o', 'O'
            or when the text holds no rows
    """
    rows = []
    for number, line in content_lines(text, COMMENT_PREFIXES):
        row = []
        for ch in line:
            if ch in ALIVE_CHARS:
                row.append(True)
            elif ch in DEAD_CHARS:
                row.append(False)
            else:
                raise PatternFormatError(
                    f"Only '.', '*', 'o' and 'O' are valid non-comment characters, got {ch!r}", line=number
                )
        rows.append(row)

    return build_pattern(rows)


def build_pattern(rows) -> Pattern:
    """Pad ragged rows of booleans with dead cells and build a pattern."""
    if not rows:
        raise PatternFormatError("Pattern contains no rows")

    width = max(len(row) for row in rows)
    if width == 0:
        raise PatternFormatError("Pattern contains no cells")

    padded = [row + [False] * (width - len(row)) for row in rows]
    logger.debug(f"Parsed {width}x{len(padded)} pattern")
    return Pattern.from_rows(padded)


def load(path: PathLike) -> Pattern:
    """Read and parse a plaintext pattern file."""
    return parse(read_pattern_file(path))
