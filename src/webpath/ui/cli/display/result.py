"""src/webpath/ui/cli/display/result.py
What: Render path operation results on the console.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

import json
from typing import final

from rich import box
from rich.console import Console
from rich.markup import escape as escape_markup
from rich.table import Table

from webpath.shared.parsed_path import ParsedPath
from webpath.ui.cli.models import OperationResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display.

        Args:
            console: Console to print to. Defaults to standard output.
        """
        self.console = console or Console(soft_wrap=True)

    def show_result(self, result: OperationResult, json_output: bool = False) -> None:
        """Display one operation result.

        Args:
            result: Result to display.
            json_output: Print the value as a JSON document instead of text.
        """
        if json_output:
            self.console.out(json.dumps(result.to_serializable()), highlight=False)
            return

        value = result.value
        if isinstance(value, ParsedPath):
            self.console.print(self._parsed_table(value))
        elif isinstance(value, bool):
            self.console.out("true" if value else "false", highlight=False)
        elif isinstance(value, list):
            for segment in value:
                self.console.out(segment, highlight=False)
        else:
            self.console.out(value, highlight=False)

    @staticmethod
    def _parsed_table(parsed: ParsedPath) -> Table:
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Part", style="cyan")
        table.add_column("Value", style="white")
        for part, value in parsed.to_dict().items():
            table.add_row(part, repr(value))
        return table

    def show_saved_config(self, target: str, quiet: bool = False) -> None:
        """Report where a configuration file was written."""

        if quiet:
            return
        self.console.print(f"[green]Configuration written to[/green] {escape_markup(target)}", highlight=False)


__all__ = ["ResultDisplay"]
