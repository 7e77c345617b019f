# Path: `src/webpath/features/path/__init__.py`
# Summary: Export path feature domain and use case symbols.
# Why: Provide a stable import surface for the CLI and tests.

from webpath.shared.host_location import DEFAULT_LOCATION, HostLocation
from webpath.shared.parsed_path import FormatInput, ParsedPath

from .domain import (
    basename,
    dirname,
    escape,
    extname,
    format_path,
    is_absolute,
    normalize,
    parse,
    path_split,
)
from .usecases import DELIMITER, SEP, Path, join, relative, resolve

__all__ = [
    "DEFAULT_LOCATION",
    "DELIMITER",
    "FormatInput",
    "HostLocation",
    "ParsedPath",
    "Path",
    "SEP",
    "basename",
    "dirname",
    "escape",
    "extname",
    "format_path",
    "is_absolute",
    "join",
    "normalize",
    "parse",
    "path_split",
    "relative",
    "resolve",
]
