"""
Summary: Percent-encode characters in a path that are not safe inside a URL.
Why: Paths double as URLs in a browser-like host and must survive transport.
"""

from typing import Final
from urllib.parse import quote

# Reserved and unreserved characters left intact; quote() always keeps "_.-~".
URI_SAFE_CHARACTERS: Final[str] = ";,/?:@&=+$!*'()#"


def escape(path: str) -> str:
    """Escape characters in ``path`` that are not safe to use in a URI.

    Separators and URI delimiters are preserved; everything else outside
    ASCII letters and digits is percent-encoded as UTF-8.
    """
    return quote(path, safe=URI_SAFE_CHARACTERS)


__all__ = ["URI_SAFE_CHARACTERS", "escape"]
