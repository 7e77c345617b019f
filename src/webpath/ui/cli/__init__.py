"""Command line interface package."""

from webpath.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
