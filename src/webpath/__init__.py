"""POSIX-style path manipulation for hosts whose only location is a URL."""

from webpath.features.path import (
    DEFAULT_LOCATION,
    DELIMITER,
    SEP,
    FormatInput,
    HostLocation,
    ParsedPath,
    Path,
    basename,
    dirname,
    escape,
    extname,
    format_path,
    is_absolute,
    join,
    normalize,
    parse,
    path_split,
    relative,
    resolve,
)

__version__ = "0.1.0"

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
