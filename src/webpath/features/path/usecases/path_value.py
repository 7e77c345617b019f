"""
Summary: Immutable Path value object exposing every path operation as a method.
Why: Let callers chain operations on one wrapped string with value semantics.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import total_ordering
from typing import ClassVar, Final, final

from webpath.features.path.domain.classifier import is_absolute
from webpath.features.path.domain.decomposer import basename, dirname, extname, parse
from webpath.features.path.domain.escaping import escape
from webpath.features.path.domain.formatter import format_path
from webpath.features.path.domain.normalizer import normalize
from webpath.features.path.domain.segmenter import path_split
from webpath.features.path.usecases.composer import join, relative, resolve
from webpath.shared.host_location import HostLocation
from webpath.shared.parsed_path import FormatInput, ParsedPath

SEP: Final[str] = "/"
DELIMITER: Final[str] = ":"


def _raw(path: Path | str) -> str:
    return path.to_string() if isinstance(path, Path) else path


class _ConstantGuard(type):
    """Metaclass keeping the separator constants fixed on the class itself."""

    _CONSTANTS: Final[frozenset[str]] = frozenset({"sep", "delimiter"})

    def __setattr__(cls, name: str, value: object) -> None:
        if name in _ConstantGuard._CONSTANTS:
            raise AttributeError(f"Path.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name in _ConstantGuard._CONSTANTS:
            raise AttributeError(f"Path.{name} is read-only")
        super().__delattr__(name)


@final
@total_ordering
class Path(metaclass=_ConstantGuard):
    """An immutable path string, compatible with the POSIX path module API.

    Equality, hashing and ordering are defined by the wrapped string.

    :param path: A path string, or another ``Path`` to copy.
    """

    __slots__ = ("_value",)
    _value: str

    sep: ClassVar[str] = SEP
    delimiter: ClassVar[str] = DELIMITER

    def __init__(self, path: Path | str) -> None:
        object.__setattr__(self, "_value", _raw(path))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Path is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path is immutable: cannot delete '{name}'")

    def __reduce__(self) -> tuple[type[Path], tuple[str]]:
        return (Path, (self._value,))

    def copy(self) -> Path:
        """Create a copy of this Path object."""
        return Path(self._value)

    # Conversions --------------------------------------------------------------

    def to_string(self) -> str:
        return self._value

    def to_serializable(self) -> str:
        """Return the JSON-friendly form of this path."""
        return self._value

    def to_segments(self) -> Iterator[str]:
        """Yield the path's segments, re-splitting the stored string each call."""
        yield from path_split(self._value)

    def to_namespaced_path(self) -> str:
        """Return the namespace-prefixed path; the identity on this host."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Path({self._value!r})"

    def __iter__(self) -> Iterator[str]:
        return self.to_segments()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    # Operations ---------------------------------------------------------------

    def normalize(self, location: HostLocation | None = None) -> Path:
        """Normalize the path, reducing '..' and '.' parts."""
        return Path(normalize(self._value, location))

    def join(self, *others: Path | str, location: HostLocation | None = None) -> Path:
        """Join this path with ``others`` and normalize the result."""
        return Path(join(self._value, *(_raw(o) for o in others), location=location))

    def resolve(self, *others: Path | str, location: HostLocation | None = None) -> Path:
        """Resolve this path followed by ``others`` into an absolute path."""
        return Path(resolve(self._value, *(_raw(o) for o in others), location=location))

    def is_absolute(self, location: HostLocation | None = None) -> bool:
        return is_absolute(self._value, location)

    def relative(self, to: Path | str, location: HostLocation | None = None) -> Path:
        """Return ``to`` taken relative to this path (see ``composer.relative``)."""
        return Path(relative(self._value, _raw(to), location=location))

    def dirname(self, location: HostLocation | None = None) -> Path:
        return Path(dirname(self._value, location))

    def basename(self, ext: str | None = None) -> str:
        """Return the last portion of the path, optionally without ``ext``."""
        return basename(self._value, ext)

    def extname(self) -> str:
        return extname(self._value)

    def parse(self, location: HostLocation | None = None) -> ParsedPath:
        """Return the structural parts of the path."""
        return parse(self._value, location)

    def escape(self) -> Path:
        """Escape characters that are not safe to use in a URI."""
        return Path(escape(self._value))

    @classmethod
    def from_parsed_path(cls, parts: FormatInput) -> Path:
        """Build a path from structural parts; the opposite of ``parse``."""
        return cls(format_path(parts))


__all__ = ["DELIMITER", "Path", "SEP"]
