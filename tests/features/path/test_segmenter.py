"""
Summary: Cover separator handling and empty-segment retention in path_split.
Why: Every other path operation relies on this tokenizer behaving exactly.
"""

import pytest

from webpath.features.path.domain.segmenter import path_split


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a/b/c", ["a", "b", "c"]),
        ("//a//b/", ["a", "b"]),
        ("a\\b/c", ["a", "b", "c"]),
        ("\\\\server\\share", ["server", "share"]),
        ("", []),
        ("///", []),
        ("file.txt", ["file.txt"]),
    ],
)
def test_path_split_drops_empty_segments(raw: str, expected: list[str]) -> None:
    """Runs of separators never produce empty segments by default."""
    assert path_split(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/a//b/", ["", "a", "", "b"]),
        ("/a/b/c.txt", ["", "a", "b", "c.txt"]),
        ("a/b", ["a", "b"]),
        ("//", ["", ""]),
        ("", []),
    ],
)
def test_path_split_keeps_empty_segments(raw: str, expected: list[str]) -> None:
    """Leading and repeated separators emit empty segments; a trailing one does not."""
    assert path_split(raw, keep_empty=True) == expected
