"""Display helpers for the CLI."""

from webpath.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
