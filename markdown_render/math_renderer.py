"""LaTeX math rendering."""

from __future__ import annotations

from collections.abc import Callable

import latex2mathml.converter

from .constants import DEFAULT_MATH_DISPLAY_CLASS

MathBackend = Callable[[str, bool], str]


def latex_to_mathml(source: str, display: bool) -> str:
    """Convert LaTeX source to a MathML fragment with latex2mathml."""
    return latex2mathml.converter.convert(source, display="block" if display else "inline")


def render_math(
    source: str,
    display: bool,
    *,
    backend: MathBackend = latex_to_mathml,
    display_class: str = DEFAULT_MATH_DISPLAY_CLASS,
) -> str:
    """Render LaTeX math to an HTML fragment.

    Display math is wrapped in a ``<div>`` carrying `display_class`; inline
    math is returned as produced by the backend. Backend errors are not caught.

    Args:
        source: LaTeX source without delimiters.
        display: Whether the math is display (block) math.
        backend: Callable turning ``(source, display)`` into HTML.
        display_class: Class of the wrapper around display math.

    Returns:
        str: HTML fragment.

    Examples:
        render_math("e^{i\\pi} + 1 = 0", display=False)
        render_math("x^2", display=True)  # '<div class="math-display">...</div>'
    """
    fragment = backend(source, display)
    if not display:
        return fragment
    return f'<div class="{display_class}">{fragment}</div>'
