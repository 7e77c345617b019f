# Where: webpath.shared.host_location
# What: Read-only snapshot of the host's current location and origin.
# Why: Inject the browser-like location explicitly instead of reading a global.

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class HostLocation:
    """Current location consulted by ``resolve`` and ``is_absolute``.

    Attributes:
        pathname: Path of the current location, used as the working directory.
        origin: URL origin such as ``https://example.com``. Paths starting with
            it are classified as absolute. An empty origin never matches.
    """

    pathname: str = "/"
    origin: str = ""


DEFAULT_LOCATION: Final[HostLocation] = HostLocation()


__all__ = ["DEFAULT_LOCATION", "HostLocation"]
