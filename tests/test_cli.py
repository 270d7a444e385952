from __future__ import annotations

import textwrap
from pathlib import Path

from markdown_render.cli import cli
from markdown_render.filesystem import MAX_FILE_SIZE_ENV_VAR


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def test_cli_prints_html(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "doc.md",
        """
        # Title

        content
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output.startswith('<h1>Title<a id="Title" href="#Title">')
    assert "<p>content\n</p>" in result.output


def test_cli_writes_output_file(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.md", "text\n")
    output = tmp_path / "doc.html"

    result = cli_runner.invoke(cli, [str(target), "--output", str(output)])

    assert result.exit_code == 0
    assert result.output == ""
    assert output.read_text(encoding="utf-8") == "<p>text\n</p>\n"


def test_cli_applies_overrides(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "doc.md",
        """
        ```python :n
        x = 1
        ```

        :::hide Title
        """,
    )

    result = cli_runner.invoke(
        cli, [str(target), "--line-number-flag", ":n", "--spoiler-marker", ":::hide"]
    )

    assert result.exit_code == 0
    assert '<span class="mdrd-ln">1</span>' in result.output
    assert "<summary>Title</summary>" in result.output


def test_cli_reads_project_config(cli_runner, tmp_path):
    (tmp_path / ".markdown-render.toml").write_text(
        '[markdown-render]\nanchor_icon_class = "icon"\n', encoding="utf-8"
    )
    target = _write(tmp_path, "doc.md", "# A\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert '<i class="icon"></i>' in result.output


def test_cli_rejects_invalid_override(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.md", "text\n")

    result = cli_runner.invoke(cli, [str(target), "--spoiler-marker", "spoiler"])

    assert result.exit_code != 0
    assert "spoiler_marker" in result.output


def test_cli_enforces_size_limit(cli_runner, tmp_path, monkeypatch):
    target = _write(tmp_path, "doc.md", "x" * 100)
    monkeypatch.setenv(MAX_FILE_SIZE_ENV_VAR, "10")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "exceeds the maximum allowed size" in result.output


def test_cli_rejects_invalid_size_env(cli_runner, tmp_path, monkeypatch):
    target = _write(tmp_path, "doc.md", "text\n")
    monkeypatch.setenv(MAX_FILE_SIZE_ENV_VAR, "lots")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}" in result.output


def test_cli_rejects_invalid_utf8(cli_runner, tmp_path):
    target = tmp_path / "doc.md"
    target.write_bytes(b"\xff\xfe\xfa")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code != 0
    assert "Invalid UTF-8" in result.output


def test_cli_prints_metadata(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "doc.md",
        """
        ---
        tag: example
        ---
        text
        """,
    )

    result = cli_runner.invoke(cli, [str(target), "--metadata"])

    assert result.exit_code == 0
    assert "tag: example" in result.output
    assert "<p>text\n</p>" in result.output
