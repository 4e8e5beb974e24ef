"""Pattern file loaders for the plaintext, RLE and Life 1.05 formats."""

from . import life105, plaintext, rle
from .loader import FORMATS, detect_format, load_pattern, parse_pattern

__all__ = ['FORMATS', 'detect_format', 'life105', 'load_pattern', 'parse_pattern', 'plaintext', 'rle']
