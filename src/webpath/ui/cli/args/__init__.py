"""Command line argument handling package."""

from webpath.ui.cli.args.parser import ArgumentParser
from webpath.ui.cli.args.options import CLIArgs, InitConfigArgs, OperationArgs

__all__ = ["ArgumentParser", "CLIArgs", "InitConfigArgs", "OperationArgs"]
