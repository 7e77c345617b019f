"""Rich console handler for path operation events.

Where: platform/logging/handlers.py
What: Render structured path events with highlighted separators.
Why: Keep operation traces readable when several paths appear on one line.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that renders ``path_event`` records with styled paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "path.normalize": ("🧹", "cyan"),
        "path.join": ("🔗", "cyan"),
        "path.resolve": ("📍", "green"),
        "path.resolve.location": ("🧭", "yellow"),
        "path.relative": ("↔️", "cyan"),
        "path.is-absolute": ("⚓", "cyan"),
        "path.dirname": ("📂", "blue"),
        "path.basename": ("📄", "blue"),
        "path.extname": ("🏷️", "blue"),
        "path.segments": ("✂️", "blue"),
        "path.parse": ("🔍", "blue"),
        "path.format": ("🧩", "blue"),
        "path.escape": ("🔒", "magenta"),
        "config.loaded": ("⚙️", "green"),
        "config.defaults": ("ℹ️", "yellow"),
    }
    _SEGMENT_LIMIT: ClassVar[int] = 6

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators and ellipsis truncation.

        Args:
            path: Path string to render.

        Returns:
            Text: Styled path, keeping only the last segments of long paths.
        """
        anchored = path.startswith("/")
        parts = [part for part in path.split("/") if part]
        trailing = path.endswith("/") and bool(parts)

        truncated = len(parts) > self._SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._SEGMENT_LIMIT :]

        display = "/" if anchored else ""
        if truncated:
            display += "…/"
        display += "/".join(parts)
        if trailing:
            display += "/"

        return self._style_path_string(display or path or '""')

    @staticmethod
    def _style_path_string(path_string: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char in {"/", "\\", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured path events with dedicated styling."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(event.removeprefix("path."), style=Style(color=color))

        arguments = getattr(record, "arguments", None)
        if isinstance(arguments, (list, tuple)) and arguments:
            _ = text.append(" ")
            for index, argument in enumerate(arguments):
                if index:
                    _ = text.append(", ", style=Style(color=color))
                _ = text.append_text(self._format_path(str(argument)))

        result = getattr(record, "result", None)
        if result is not None:
            _ = text.append(" → ", style=Style(color=color))
            _ = text.append_text(self._format_path(str(result)))

        detail = getattr(record, "detail", None)
        if detail:
            _ = text.append(f" ({detail})", style=Style(color=color))

        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        event_text = self._render_path_event(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
