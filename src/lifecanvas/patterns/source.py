"""Reading pattern files from disk."""

import logging
from pathlib import Path
from typing import Iterator, Tuple, Union

from ..core.errors import PatternFileError, PatternFormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_pattern_file(path: PathLike) -> str:
    """Read a pattern file as text.

    Raises:
        PatternFileError: If the file is missing or unreadable
        PatternFormatError: If the file is not UTF-8 text
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise PatternFormatError(f"{path} is not a UTF-8 text file: {e}") from e
    except OSError as e:
        raise PatternFileError(f"Could not open file {path}: {e}") from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return text


def content_lines(text: str, comment_prefixes: Tuple[str, ...] = ('#',)) -> Iterator[Tuple[int, str]]:
    """Yield (line number, stripped line) for every non-comment line."""
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if line.startswith(comment_prefixes):
            continue
        yield number, line
