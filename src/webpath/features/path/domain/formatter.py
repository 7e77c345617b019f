"""
Summary: Rebuild a path string from its structural parts.
Why: Provide the inverse of parse() for ParsedPath records and partial mappings.
"""

from collections.abc import Mapping
from dataclasses import asdict
from typing import Final

from webpath.shared.parsed_path import FormatInput, ParsedPath

ANCHOR_PREFIXES: Final[tuple[str, ...]] = ("./", "../", "/", ".")


def _as_mapping(parts: FormatInput) -> Mapping[str, str | None]:
    if isinstance(parts, ParsedPath):
        return asdict(parts)
    return parts


def format_path(parts: FormatInput) -> str:
    """Return a path string from structural parts; the opposite of ``parse``.

    ``dir`` falls back to ``root`` and ``base`` falls back to ``name + ext``
    when absent.

    Args:
        parts: A ``ParsedPath`` or a mapping holding any subset of its fields.

    Returns:
        str: Directory and base joined by a single ``/``, or ``base`` alone
        when no directory is available.
    """
    fields = _as_mapping(parts)

    directory = fields.get("dir")
    if directory is None:
        directory = fields.get("root")

    base = fields.get("base")
    if base is None:
        base = (fields.get("name") or "") + (fields.get("ext") or "")

    if not directory:
        return base

    joined = directory + base if directory.endswith("/") else f"{directory}/{base}"

    for prefix in ANCHOR_PREFIXES:
        if directory.startswith(prefix) and not joined.startswith(prefix):
            return prefix + joined
    return joined


__all__ = ["ANCHOR_PREFIXES", "format_path"]
