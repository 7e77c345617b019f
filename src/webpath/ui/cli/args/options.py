"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final

from webpath.shared.host_location import HostLocation

OperationName = Literal[
    "normalize",
    "join",
    "resolve",
    "relative",
    "is-absolute",
    "dirname",
    "basename",
    "extname",
    "parse",
    "format",
    "escape",
    "segments",
]


@final
@dataclass(slots=True)
class OperationArgs:
    """Command line arguments for a single path operation subcommand."""

    command: OperationName
    paths: list[str]
    location: HostLocation
    json_output: bool
    verbose: bool
    quiet: bool
    ext: str | None = None
    keep_empty: bool = False
    parts: dict[str, str] = field(default_factory=dict)


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    target: Path | None
    force: bool
    location: HostLocation
    quiet: bool


CLIArgs = OperationArgs | InitConfigArgs

__all__ = ["CLIArgs", "InitConfigArgs", "OperationArgs", "OperationName"]
