"""
Summary: Expose composition use cases and the Path value object.
Why: Provide a stable import surface for the package root and the CLI.
"""

from .composer import join, relative, resolve
from .path_value import DELIMITER, SEP, Path

__all__ = ["DELIMITER", "SEP", "Path", "join", "relative", "resolve"]
