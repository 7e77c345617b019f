"""
Summary: Expose the pure path string algorithms of the path feature.
Why: Provide a stable import surface without leaking module layout.
"""

from .classifier import is_absolute
from .decomposer import basename, dirname, extname, parse
from .escaping import escape
from .formatter import format_path
from .normalizer import normalize
from .segmenter import path_split

__all__ = [
    "basename",
    "dirname",
    "escape",
    "extname",
    "format_path",
    "is_absolute",
    "normalize",
    "parse",
    "path_split",
]
