from __future__ import annotations

import pytest

from markdown_render.highlight import (
    highlight_code,
    number_lines,
    pygments_highlight,
    split_lines,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\nb", ["a", "b"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("\n\n", ["", ""]),
    ],
)
def test_split_lines(text: str, expected: list[str]):
    assert list(split_lines(text)) == expected


def test_highlight_without_numbers_returns_backend_output_unchanged():
    html = highlight_code("x = 1\n", "python", False, backend=lambda code, lang: "RAW")
    assert html == "RAW"


def test_highlight_with_numbers_prefixes_each_line():
    html = highlight_code(
        "a\nb\n", "python", True, backend=lambda code, lang: "<i>a</i>\n<i>b</i>\n"
    )
    assert html == (
        '<span class="mdrd-ln">1</span><i>a</i>\n'
        '<span class="mdrd-ln">2</span><i>b</i>\n'
    )


def test_number_lines_terminates_last_line():
    assert number_lines("only") == '<span class="mdrd-ln">1</span>only\n'


def test_number_lines_keeps_blank_lines():
    numbered = number_lines("a\n\nc\n", line_number_class="ln")
    assert numbered == (
        '<span class="ln">1</span>a\n'
        '<span class="ln">2</span>\n'
        '<span class="ln">3</span>c\n'
    )


def test_backend_errors_propagate():
    def broken(code: str, language: str) -> str:
        raise LookupError(language)

    with pytest.raises(LookupError):
        highlight_code("x", "python", True, backend=broken)


def test_pygments_backend_keeps_line_count():
    code = "\n\ndef main():\n    return 1\n\n"
    html = pygments_highlight(code, "python")

    assert len(list(split_lines(html))) == len(list(split_lines(code)))
    assert "main" in html


def test_pygments_plain_text_is_escaped_without_markup():
    html = pygments_highlight("a < b\n", "plaintext")

    assert "<span" not in html
    assert "a &lt; b" in html
