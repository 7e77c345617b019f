"""
Summary: Extract directory, base name, extension and parsed records from paths.
Why: Mirror the POSIX dirname/basename/extname/parse family on plain strings.
"""

from webpath.shared.host_location import HostLocation
from webpath.shared.parsed_path import ParsedPath

from .classifier import is_absolute
from .segmenter import path_split


def dirname(path: str, location: HostLocation | None = None) -> str:
    """Return the directory name of a path, like the Unix ``dirname`` command.

    Args:
        path: The path to evaluate.
        location: Host location used to classify the path as absolute.

    Returns:
        str: Parent directory, ``/`` for rooted single segments, ``.`` when a
        relative path has no directory part.
    """
    segments = path_split(path, keep_empty=True)

    while segments and segments[-1] == "":
        _ = segments.pop()

    if segments:
        _ = segments.pop()

    joined = "/".join(segments)
    if is_absolute(path, location):
        return joined if joined.startswith("/") else "/" + joined
    return joined or "."


def _is_all_slashes(path: str) -> bool:
    return all(char == "/" for char in path)


def basename(path: str, ext: str | None = None) -> str:
    """Return the last portion of a path, like the Unix ``basename`` command.

    Args:
        path: The path to evaluate.
        ext: Optional extension to remove from the result.

    Returns:
        str: Final segment, stripped of ``ext`` when it is a proper suffix.
    """
    if _is_all_slashes(path):
        # Slash-only input echoes itself back when asked to strip anything else.
        if not ext or ext == path:
            return ""
        return path

    segments = path_split(path)
    file_name = segments[-1] if segments else ""
    if ext and file_name.endswith(ext) and len(file_name) > len(ext):
        return file_name[: -len(ext)]
    return file_name


def extname(path: str) -> str:
    """Return the extension of the last portion of a path.

    The extension runs from the last ``.`` to the end of the final segment.
    Dotfiles such as ``.gitignore`` and names ending in ``.`` have none.

    Args:
        path: The path to evaluate.

    Returns:
        str: Extension including the leading dot, or an empty string.
    """
    segments = path_split(path)
    file_name = segments[-1] if segments else ""
    index = file_name.rfind(".")

    if index <= 0 or index == len(file_name) - 1:
        return ""
    return file_name[index:]


def parse(path: str, location: HostLocation | None = None) -> ParsedPath:
    """Return the structural parts of ``path``; the opposite of ``format_path``.

    Args:
        path: Path to evaluate.
        location: Host location used to classify the path as absolute.

    Returns:
        ParsedPath: Root, directory, base name, extension and stem.
    """
    ext = extname(path)
    return ParsedPath(
        root="/" if path.startswith("/") else "",
        dir=dirname(path, location),
        base=basename(path),
        ext=ext,
        name=basename(path, ext),
    )


__all__ = ["basename", "dirname", "extname", "parse"]
