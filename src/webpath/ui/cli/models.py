"""src/webpath/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass

from webpath.shared.parsed_path import ParsedPath

OperationValue = str | bool | list[str] | ParsedPath


@dataclass(slots=True, frozen=True)
class OperationResult:
    """Outcome of one path operation requested from the command line."""

    command: str
    arguments: list[str]
    value: OperationValue

    def to_serializable(self) -> str | bool | list[str] | dict[str, str]:
        """Return the value in a JSON-friendly shape."""

        if isinstance(self.value, ParsedPath):
            return self.value.to_dict()
        return self.value


__all__ = ["OperationResult", "OperationValue"]
