"""
Summary: Decide whether a path string is anchored at a root or host origin.
Why: Absolute paths may be full URLs in a browser-like host, not only '/...'.
"""

from webpath.shared.host_location import DEFAULT_LOCATION, HostLocation


def is_absolute(path: str, location: HostLocation | None = None) -> bool:
    """Return whether ``path`` always resolves to the same location.

    Args:
        path: Path to test.
        location: Host location whose origin also marks a path absolute.
            Defaults to ``DEFAULT_LOCATION``.

    Returns:
        bool: True for a leading ``/`` or a literal prefix match on the origin.
    """
    if path.startswith("/"):
        return True

    origin = (location or DEFAULT_LOCATION).origin
    return bool(origin) and path.startswith(origin)


__all__ = ["is_absolute"]
