"""Command execution package for CLI."""

from webpath.ui.cli.commands.executor import CommandExecutor, OperationCommand
from webpath.ui.cli.commands.init_config import InitConfigCommand

__all__ = ["CommandExecutor", "InitConfigCommand", "OperationCommand"]
