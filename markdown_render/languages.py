"""Languages eligible for syntax highlighting."""

from __future__ import annotations

PLAIN_TEXT = "plaintext"

SUPPORTED_LANGUAGES = frozenset(
    {
        "python",
        "rust",
        "typescript",
        "xml",
        "html",
        "fortran",
        "go",
        "java",
        "javascript",
        "json",
        "kotlin",
        "latex",
        "lua",
        "markdown",
        "bash",
        "c",
        "cpp",
        "css",
    }
)


def is_supported(tag: str) -> bool:
    """Check whether a code block language tag is on the allow-list.

    Matching is exact and case-sensitive; callers are responsible for any
    trimming.

    Args:
        tag: Language tag taken from a fenced code block info string.

    Returns:
        bool: True when `tag` is a supported language, otherwise False.

    Examples:
        is_supported("python")  # True
        is_supported("Python")  # False
        is_supported("cobol")  # False
    """
    return tag in SUPPORTED_LANGUAGES
