"""
Summary: Split raw path strings into ordered segments on either separator.
Why: Give every higher path operation one shared tokenizer for '/' and '\\'.
"""

from typing import Final

SEPARATORS: Final[frozenset[str]] = frozenset({"/", "\\"})


def path_split(path: str, keep_empty: bool = False) -> list[str]:
    """Split ``path`` into segments.

    Each contiguous run of non-separator characters becomes one segment and
    every ``/`` or ``\\`` terminates the current one.

    Args:
        path: Path string to split.
        keep_empty: Emit zero-length segments for leading and consecutive
            separators instead of dropping them. A trailing separator never
            produces a trailing empty segment.

    Returns:
        list[str]: Segments in order of appearance.
    """
    segments: list[str] = []
    current = ""
    for char in path:
        if char in SEPARATORS:
            if current or keep_empty:
                segments.append(current)
                current = ""
        else:
            current += char

    if current:
        segments.append(current)

    return segments


__all__ = ["SEPARATORS", "path_split"]
