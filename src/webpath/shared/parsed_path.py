# Where: webpath.shared.parsed_path
# What: Canonical ParsedPath record shared by the decomposer and formatter.
# Why: Keep parse() output and format_path() input on a single definition.

from collections.abc import Mapping
from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class ParsedPath:
    """Structural parts of a path string.

    Attributes:
        root: The root of the path such as ``/`` (empty for relative paths).
        dir: The full directory path such as ``/home/user/dir``.
        base: The file name including extension such as ``index.html``.
        ext: The file extension (if any) such as ``.html``.
        name: The file name without extension such as ``index``.
    """

    root: str = ""
    dir: str = ""
    base: str = ""
    ext: str = ""
    name: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the record as a plain dictionary."""

        return asdict(self)


# Partial records: absent or None entries are treated as missing.
FormatInput = ParsedPath | Mapping[str, str | None]


__all__ = ["FormatInput", "ParsedPath"]
