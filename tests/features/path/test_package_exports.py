"""Ensure the public import surface stays stable."""

import webpath
import webpath.features.path as path_feature


def test_root_package_exports_match_feature() -> None:
    assert set(webpath.__all__) == set(path_feature.__all__)
    for name in webpath.__all__:
        assert getattr(webpath, name) is getattr(path_feature, name)


def test_literal_scenarios_through_root_package() -> None:
    assert webpath.normalize("a//b/../c/./") == "a/c/"
    assert webpath.join("a", "b", "..", "c") == "a/c"
    assert webpath.dirname("/a/b/c.txt") == "/a/b"
    assert webpath.basename("/a/b/c.txt", ".txt") == "c"
    assert webpath.parse("/a/b/c.txt").to_dict() == {
        "root": "/",
        "dir": "/a/b",
        "base": "c.txt",
        "ext": ".txt",
        "name": "c",
    }
    assert webpath.format_path({"dir": "/a/b", "name": "c", "ext": ".txt"}) == "/a/b/c.txt"
