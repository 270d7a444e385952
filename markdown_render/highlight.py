"""Syntax highlighting for code blocks."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name

from .constants import DEFAULT_LINE_NUMBER_CLASS
from .languages import PLAIN_TEXT

HighlightBackend = Callable[[str, str], str]


def split_lines(text: str) -> Iterator[str]:
    """Yield the lines of `text` without their terminators.

    Splits on ``\\n`` only, drops one trailing ``\\r`` per line, and yields no
    empty line after a final newline.

    Examples:
        list(split_lines("a\\r\\nb\\n"))  # ["a", "b"]
        list(split_lines(""))  # []
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def pygments_highlight(code: str, language: str) -> str:
    """Highlight `code` with Pygments, one output line per source line."""
    if language == PLAIN_TEXT:
        lexer = TextLexer(stripnl=False)
    else:
        lexer = get_lexer_by_name(language, stripnl=False)
    return highlight(code, lexer, HtmlFormatter(nowrap=True))


def number_lines(fragment: str, line_number_class: str = DEFAULT_LINE_NUMBER_CLASS) -> str:
    """Prefix every line of a highlighted fragment with its 1-based number.

    Args:
        fragment: Highlighted HTML with one line per source line.
        line_number_class: Class of the ``<span>`` holding the number.

    Returns:
        str: Numbered fragment; every line, the last included, ends with ``\\n``.

    Examples:
        number_lines("a\\nb")  # '<span class="mdrd-ln">1</span>a\\n<span class="mdrd-ln">2</span>b\\n'
    """
    return "".join(
        f'<span class="{line_number_class}">{number}</span>{line}\n'
        for number, line in enumerate(split_lines(fragment), start=1)
    )


def highlight_code(
    code: str,
    language: str,
    number: bool,
    *,
    backend: HighlightBackend = pygments_highlight,
    line_number_class: str = DEFAULT_LINE_NUMBER_CLASS,
) -> str:
    """Highlight a code block, optionally adding line numbers.

    Backend errors are not caught.

    Args:
        code: Source code of the block.
        language: Allow-listed language or ``plaintext``.
        number: Whether to prefix lines with their numbers.
        backend: Callable turning ``(code, language)`` into highlighted HTML.
        line_number_class: Class of the line number ``<span>``.

    Returns:
        str: Highlighted HTML fragment.

    Examples:
        highlight_code("print(1)\\n", "python", number=True)
    """
    fragment = backend(code, language)
    if not number:
        return fragment
    return number_lines(fragment, line_number_class)
