"""
Summary: Collapse '.' and '..' segments into a canonical '/'-separated path.
Why: Join, resolve and the value wrapper all defer to one normalization fold.
"""

from webpath.shared.host_location import HostLocation

from .classifier import is_absolute
from .segmenter import path_split

CURRENT_DIR = "."
PARENT_DIR = ".."


def _fold_segments(segments: list[str]) -> list[str]:
    """Fold segments left to right, cancelling real names against '..'."""

    folded: list[str] = []
    for segment in segments:
        if segment == CURRENT_DIR:
            continue
        if segment != PARENT_DIR:
            folded.append(segment)
            continue

        if not folded:
            # Relative paths may climb above their starting point.
            folded.append(PARENT_DIR)
        elif folded[-1] == PARENT_DIR:
            folded.append(PARENT_DIR)
        elif folded[-1] == CURRENT_DIR:
            folded[-1] = PARENT_DIR
        else:
            _ = folded.pop()

    return folded


def strip_leading_climbs(segments: list[str]) -> list[str]:
    """Drop leading '.' and '..' segments; a rooted path cannot leave its root."""

    index = 0
    while index < len(segments) and segments[index] in (CURRENT_DIR, PARENT_DIR):
        index += 1
    return segments[index:]


def normalize(path: str, location: HostLocation | None = None) -> str:
    """Normalize a string path, reducing '..' and '.' parts.

    Repeated separators collapse into one and a trailing slash is preserved.

    Args:
        path: Path string to normalize.
        location: Host location used to classify the path as absolute.

    Returns:
        str: Normalized path using ``/`` as the only separator.
    """
    explicit_directory = path.endswith("/")
    absolute = is_absolute(path, location)

    segments = _fold_segments(path_split(path))
    if absolute:
        segments = strip_leading_climbs(segments)
        if not segments:
            return "/"

    result = "/".join(segments) or CURRENT_DIR
    if explicit_directory:
        result += "/"

    if absolute and not result.startswith("/"):
        result = "/" + result

    return result


__all__ = ["CURRENT_DIR", "PARENT_DIR", "normalize", "strip_leading_climbs"]
