"""
Life 1.05 pattern format.

Files usually open with a '#Life 1.05' line. All lines starting with '#'
(including '#D', '#N' and '#P' blocks) are comments; the rest are rows of
'.' (dead) and '*' (alive). Width is the longest row and height the number
of rows, so non-square patterns keep their shape.
"""

from ..core.errors import PatternFormatError
from ..core.pattern import Pattern
from .plaintext import build_pattern
from .source import PathLike, content_lines, read_pattern_file

NAME = 'life105'
EXTENSIONS = ('.lif', '.life')
HEADER = '#Life 1.05'

_CELLS = {'.': False, '*': True}


def parse(text: str) -> Pattern:
    """Parse Life 1.05 pattern text.

    Raises:
        PatternFormatError: On a character other than '.' or '*', or when
            the text holds no rows
    """
    rows = []
    for number, line in content_lines(text):
        try:
            rows.append([_CELLS[ch] for ch in line])
        except KeyError as e:
            raise PatternFormatError(
                f"Only '.' and '*' are valid non-comment characters, got {e.args[0]!r}", line=number
            ) from None

    return build_pattern(rows)


def load(path: PathLike) -> Pattern:
    """Read and parse a Life 1.05 pattern file."""
    return parse(read_pattern_file(path))


def sniff(text: str) -> bool:
    """True if the text starts with the Life 1.05 header line."""
    first = text.lstrip().split('\n', 1)[0].strip()
    return first.lower().startswith(HEADER.lower())
