# Where: webpath.shared.__init__
# What: Provide a concise import surface for shared records.
# Why: Encourage consistent reuse of shared dataclasses across features.

"""Shared cross-cutting records exposed at the package level."""

from .host_location import DEFAULT_LOCATION, HostLocation
from .parsed_path import FormatInput, ParsedPath

__all__ = ["DEFAULT_LOCATION", "FormatInput", "HostLocation", "ParsedPath"]
