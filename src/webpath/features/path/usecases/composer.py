"""
Summary: Join and resolve path strings on top of the normalization fold.
Why: Anchor relative input on the injected host location without global state.
"""

import logging

from webpath.features.path.domain.classifier import is_absolute
from webpath.features.path.domain.normalizer import normalize, strip_leading_climbs
from webpath.features.path.domain.segmenter import path_split
from webpath.platform.logging import logger
from webpath.shared.host_location import DEFAULT_LOCATION, HostLocation


def join(*paths: str, location: HostLocation | None = None) -> str:
    """Join all arguments together and normalize the resulting path.

    Absoluteness is decided on the concatenated string only, so a rooted
    argument in the middle does not discard what precedes it.

    Args:
        *paths: Path strings to join.
        location: Host location used to classify the joined path.

    Returns:
        str: ``.`` for no arguments, otherwise the normalized concatenation.
    """
    if not paths:
        return "."
    if len(paths) == 1:
        return normalize(paths[0], location)
    return normalize("/".join(paths), location)


def resolve(*segments: str, location: HostLocation | None = None) -> str:
    """Resolve a sequence of paths into an absolute path.

    The right-most absolute argument becomes the base and everything to its
    left is discarded. Without any absolute argument the location pathname is
    prepended. Climbs above the root are dropped and trailing slashes removed.

    Args:
        *segments: Path strings, the right-most being the target.
        location: Host location supplying the working directory and origin.

    Returns:
        str: An absolute path that always starts with ``/``.
    """
    host = location or DEFAULT_LOCATION

    anchored = False
    for index in range(len(segments) - 1, -1, -1):
        if is_absolute(segments[index], host):
            anchored = True
            segments = segments[index:]
            break

    if anchored:
        combined = join(*segments, location=host)
    else:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Anchoring %d segment(s) on location %s",
                len(segments),
                host.pathname,
                extra={
                    "path_event": "path.resolve.location",
                    "arguments": list(segments),
                    "result": host.pathname,
                },
            )
        combined = join(host.pathname, join(*segments, location=host), location=host)

    parts = strip_leading_climbs(path_split(combined))
    return "/" + "/".join(parts)


def relative(from_path: str, to_path: str, location: HostLocation | None = None) -> str:
    """Return ``to_path`` taken relative to ``from_path``.

    This concatenates and normalizes the two paths; it does not compute a
    common-prefix relative path between two absolute paths.

    Args:
        from_path: Starting path.
        to_path: Destination path.
        location: Host location used to classify the joined path.

    Returns:
        str: ``join(from_path, to_path)``.
    """
    return join(from_path, to_path, location=location)


__all__ = ["join", "relative", "resolve"]
