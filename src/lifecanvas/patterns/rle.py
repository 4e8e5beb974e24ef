"""
Run Length Encoded (.rle) pattern format.

Comment lines start with '#'. The first other line is the header
``x = <width>, y = <height>[, rule = ...]``; only x and y are used. The
rest is a stream of ``<count><tag>`` runs where the count defaults to 1:
'b' is a dead cell, 'o' an alive cell, '$' ends the current row and '!'
ends the pattern. Rows and missing trailing rows are padded with dead
cells up to the declared size.
"""

import logging
import re
from typing import List, Optional, Tuple

from ..core.errors import PatternFormatError
from ..core.pattern import Pattern
from .source import PathLike, content_lines, read_pattern_file

logger = logging.getLogger(__name__)

NAME = 'rle'
EXTENSIONS = ('.rle',)

_TAGS = {'b': False, 'o': True}

# A comma starts a new item only when "key =" follows it (rule = B3/S23:P10,10)
_HEADER_SPLIT = re.compile(r",\s*(?=\w+\s*=)")


def parse_header(line: str, number: Optional[int] = None) -> Tuple[int, int]:
    """Parse the ``x = W, y = H`` header line.

    Returns:
        (width, height) tuple

    Raises:
        PatternFormatError: If x or y is missing, not an integer or not positive
    """
    values = {}
    for item in _HEADER_SPLIT.split(line):
        key, sep, value = item.partition('=')
        if not sep:
            raise PatternFormatError(f"Malformed header entry {item.strip()!r}", line=number)
        values[key.strip()] = value.strip()

    size = []
    for key in ('x', 'y'):
        if key not in values:
            raise PatternFormatError(f"Header is missing '{key} = ...'", line=number)
        try:
            value = int(values[key])
        except ValueError:
            raise PatternFormatError(f"Header value {key} = {values[key]!r} is not an integer", line=number) from None
        if value < 1:
            raise PatternFormatError(f"Header value {key} = {value} must be positive", line=number)
        size.append(value)

    width, height = size
    logger.debug(f"RLE header declares {width}x{height}")
    return width, height


class _Decoder:
    """Accumulates decoded rows for a declared width and height."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.rows: List[List[bool]] = []
        self.row: List[bool] = []
        self.count = ''
        self.done = False

    def take_count(self) -> int:
        count = int(self.count) if self.count else 1
        self.count = ''
        return count

    def emit(self, alive: bool, number: int) -> None:
        count = self.take_count()
        if len(self.row) + count > self.width:
            raise PatternFormatError(
                f"Row {len(self.rows) + 1} is wider than the declared width {self.width}", line=number
            )
        self.row.extend([alive] * count)
        logger.debug(f"Cell run {'o' if alive else 'b'} x{count}, row width {len(self.row)}")

    def end_rows(self, number: int) -> None:
        for _ in range(self.take_count()):
            self.push_row(number)

    def push_row(self, number: Optional[int]) -> None:
        if len(self.rows) >= self.height:
            raise PatternFormatError(f"Pattern has more rows than the declared height {self.height}", line=number)
        self.rows.append(self.row + [False] * (self.width - len(self.row)))
        self.row = []

    def feed(self, line: str, number: int) -> None:
        for ch in line:
            if self.done:
                return
            if ch in '0123456789':
                self.count += ch
            elif ch.isspace():
                continue
            elif ch in _TAGS:
                self.emit(_TAGS[ch], number)
            elif ch == '$':
                self.end_rows(number)
            elif ch == '!':
                self.finish(number)
            else:
                raise PatternFormatError(f"Unknown symbol {ch!r}", line=number)

    def finish(self, number: Optional[int] = None) -> None:
        if self.count:
            raise PatternFormatError(f"Run count {self.count} is not followed by a tag", line=number)
        if self.row:
            self.push_row(number)
        self.done = True

    def pattern(self) -> Pattern:
        blank = [False] * self.width
        rows = self.rows + [blank] * (self.height - len(self.rows))
        cells = [cell for row in rows for cell in row]
        return Pattern(self.width, self.height, cells)


def parse(text: str) -> Pattern:
    """Parse RLE pattern text.

    Raises:
        PatternFormatError: If the header is missing or malformed, stream
            content appears before the header, an unknown symbol is found or
            the stream overflows the declared size
    """
    decoder = None
    for number, line in content_lines(text):
        if not line:
            continue
        if decoder is None:
            if '=' not in line:
                raise PatternFormatError("Pattern data before the 'x = ..., y = ...' header", line=number)
            decoder = _Decoder(*parse_header(line, number))
            continue
        decoder.feed(line, number)
        if decoder.done:
            break

    if decoder is None:
        raise PatternFormatError("Missing 'x = ..., y = ...' header")

    if not decoder.done:
        logger.debug("RLE stream ended without '!'")
        decoder.finish()

    return decoder.pattern()


def load(path: PathLike) -> Pattern:
    """Read and parse an RLE pattern file."""
    return parse(read_pattern_file(path))
