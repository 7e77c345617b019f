"""Tests for CLI functionality."""

import json
from pathlib import Path

import pytest

from webpath.ui.cli import CommandProcessor


def _run(capsys: pytest.CaptureFixture[str], *args: str) -> str:
    CommandProcessor.process_command(list(args))
    return capsys.readouterr().out


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["normalize", "a//b/../c/./"], "a/c/"),
        (["join", "a", "b", "..", "c"], "a/c"),
        (["join"], "."),
        (["resolve", "a", "b"], "/a/b"),
        (["relative", "/a", "b"], "/a/b"),
        (["dirname", "/a/b/c.txt"], "/a/b"),
        (["basename", "/a/b/c.txt", "--ext", ".txt"], "c"),
        (["extname", "a.b.c"], ".c"),
        (["escape", "/my docs/a.txt"], "/my%20docs/a.txt"),
        (["format", "--dir", "/a/b", "--name", "c", "--ext", ".txt"], "/a/b/c.txt"),
        (["is-absolute", "/a"], "true"),
        (["is-absolute", "a"], "false"),
    ],
)
def test_operation_output(
    capsys: pytest.CaptureFixture[str], args: list[str], expected: str
) -> None:
    assert _run(capsys, *args) == expected + "\n"


def test_segments_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, "segments", "/a//b") == "a\nb\n"
    assert _run(capsys, "segments", "/a//b", "--keep-empty") == "\na\n\nb\n"


def test_parse_table_output(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, "parse", "/a/b/c.txt")
    for fragment in ("root", "'/a/b'", "'c.txt'", "'.txt'", "'c'"):
        assert fragment in out


def test_parse_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, "parse", "/a/b/c.txt", "--json")
    assert json.loads(out) == {
        "root": "/",
        "dir": "/a/b",
        "base": "c.txt",
        "ext": ".txt",
        "name": "c",
    }


def test_json_output_for_scalars(capsys: pytest.CaptureFixture[str]) -> None:
    assert json.loads(_run(capsys, "is-absolute", "/a", "--json")) is True
    assert json.loads(_run(capsys, "segments", "a/b", "--json")) == ["a", "b"]


def test_options_before_subcommand(capsys: pytest.CaptureFixture[str]) -> None:
    assert json.loads(_run(capsys, "--json", "normalize", "a")) == "a"
    out = _run(capsys, "--location", "/app/docs", "--quiet", "resolve", "img.png")
    assert out == "/app/docs/img.png\n"


def test_location_override(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, "resolve", "img.png", "--location", "/app/docs")
    assert out == "/app/docs/img.png\n"


def test_origin_override(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, "is-absolute", "https://example.com/a", "--origin", "https://example.com")
    assert out == "true\n"


def test_location_from_config_file(
    capsys: pytest.CaptureFixture[str], isolated_config: Path
) -> None:
    _ = isolated_config.write_text('location_pathname = "/srv"\n', encoding="utf-8")
    assert _run(capsys, "resolve", "a") == "/srv/a\n"


def test_invalid_config_exits_with_error(
    capsys: pytest.CaptureFixture[str], isolated_config: Path
) -> None:
    _ = isolated_config.write_text("origin = 5\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["normalize", "a"])
    assert exc_info.value.code == 1
    assert capsys.readouterr().out == ""


def test_unknown_command_exits() -> None:
    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["explode", "a"])
    assert exc_info.value.code == 2


def test_init_config_writes_file(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    target = tmp_path / "generated" / "webpath.toml"
    out = _run(
        capsys,
        "init-config",
        "--target",
        str(target),
        "--location",
        "/app",
        "--origin",
        "https://example.com",
    )
    assert "Configuration written to" in out
    content = target.read_text(encoding="utf-8")
    assert 'location_pathname = "/app"' in content
    assert 'origin = "https://example.com"' in content


def test_init_config_refuses_to_overwrite(tmp_path: Path) -> None:
    target = tmp_path / "webpath.toml"
    _ = target.write_text("# existing\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["init-config", "--target", str(target)])
    assert exc_info.value.code == 1
    assert target.read_text(encoding="utf-8") == "# existing\n"


def test_init_config_force_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "webpath.toml"
    _ = target.write_text("# existing\n", encoding="utf-8")
    CommandProcessor.process_command(["init-config", "--target", str(target), "--force", "--quiet"])
    assert "location_pathname" in target.read_text(encoding="utf-8")
