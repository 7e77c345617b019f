"""src/webpath/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors and the path operations.
Why: Map each subcommand onto one library call with uniform presentation.
"""

from __future__ import annotations

import sys
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import final

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from webpath.features.path import (
    basename,
    dirname,
    escape,
    extname,
    format_path,
    is_absolute,
    join,
    normalize,
    parse,
    path_split,
    relative,
    resolve,
)
from webpath.platform.logging import logger
from webpath.ui.cli.args.options import OperationArgs
from webpath.ui.cli.display.result import ResultDisplay
from webpath.ui.cli.models import OperationResult, OperationValue


class CommandExecutor(ABC):
    """Base class for command execution."""

    result_display: ResultDisplay

    def __init__(self, result_display: ResultDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            result_display: Display used for output. Defaults to stdout.
        """
        self.result_display = result_display or ResultDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass


Operation = Callable[[OperationArgs], OperationValue]

_OPERATIONS: dict[str, Operation] = {
    "normalize": lambda a: normalize(a.paths[0], a.location),
    "join": lambda a: join(*a.paths, location=a.location),
    "resolve": lambda a: resolve(*a.paths, location=a.location),
    "relative": lambda a: relative(a.paths[0], a.paths[1], location=a.location),
    "is-absolute": lambda a: is_absolute(a.paths[0], a.location),
    "dirname": lambda a: dirname(a.paths[0], a.location),
    "basename": lambda a: basename(a.paths[0], a.ext),
    "extname": lambda a: extname(a.paths[0]),
    "parse": lambda a: parse(a.paths[0], a.location),
    "format": lambda a: format_path(a.parts),
    "escape": lambda a: escape(a.paths[0]),
    "segments": lambda a: path_split(a.paths[0], keep_empty=a.keep_empty),
}


@final
class OperationCommand(CommandExecutor):
    """Run one path operation and print its result."""

    args: OperationArgs

    def __init__(self, args: OperationArgs, result_display: ResultDisplay | None = None) -> None:
        super().__init__(result_display)
        self.args = args

    def run(self) -> OperationResult:
        """Apply the requested operation without printing anything."""

        operation = _OPERATIONS[self.args.command]
        value = operation(self.args)
        arguments = self.args.paths or [f"{k}={v}" for k, v in self.args.parts.items()]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s %s",
                self.args.command,
                arguments,
                extra={
                    "path_event": f"path.{self.args.command}",
                    "arguments": arguments,
                    "result": value if isinstance(value, str) else None,
                },
            )
        return OperationResult(command=self.args.command, arguments=arguments, value=value)

    @override
    def execute(self) -> int:
        result = self.run()
        self.result_display.show_result(result, json_output=self.args.json_output)
        return 0


__all__ = ["CommandExecutor", "OperationCommand"]
