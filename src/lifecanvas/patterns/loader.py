"""Pattern format selection.

Each format module exposes ``NAME``, ``EXTENSIONS``, ``parse(text)`` and
``load(path)``. The format is picked by explicit name, then by the Life 1.05
header line, then by file extension, falling back to plaintext.
"""

import logging
from pathlib import Path
from typing import Optional

from ..core.errors import PatternFormatError
from ..core.pattern import Pattern
from . import life105, plaintext, rle
from .source import PathLike, read_pattern_file

logger = logging.getLogger(__name__)

FORMATS = {module.NAME: module for module in (plaintext, rle, life105)}


def detect_format(path: PathLike, text: str) -> str:
    """Name of the format to use for a file."""
    if life105.sniff(text):
        return life105.NAME

    suffix = Path(path).suffix.lower()
    for name, module in FORMATS.items():
        if suffix in module.EXTENSIONS:
            return name

    return plaintext.NAME


def parse_pattern(text: str, fmt: str) -> Pattern:
    """Parse pattern text in the named format."""
    try:
        module = FORMATS[fmt]
    except KeyError:
        raise PatternFormatError(f"Unknown pattern format {fmt!r}, expected one of {sorted(FORMATS)}") from None
    return module.parse(text)


def load_pattern(path: PathLike, fmt: Optional[str] = None) -> Pattern:
    """Load a pattern file.

    Args:
        path: Pattern file path
        fmt: Format name ('plaintext', 'rle' or 'life105'); detected when None

    Returns:
        Parsed pattern

    Raises:
        PatternFileError: If the file can't be read
        PatternFormatError: If the contents don't match the format
    """
    text = read_pattern_file(path)
    if fmt is None:
        fmt = detect_format(path, text)

    pattern = parse_pattern(text, fmt)
    logger.info(f"Loaded {pattern.width}x{pattern.height} {fmt} pattern from {path} "
                f"({pattern.count_alive()} alive)")
    return pattern
