"""Markdown to HTML conversion entry points."""

from __future__ import annotations

from .config import RenderConfig
from .highlight import HighlightBackend, pygments_highlight
from .math_renderer import MathBackend, latex_to_mathml
from .models import EventKind, RenderResult
from .parser import merge_text, parse_events
from .serializer import render_html
from .transformer import EventTransformer


def render(
    markdown_text: str,
    config: RenderConfig | None = None,
    *,
    math_backend: MathBackend = latex_to_mathml,
    highlight_backend: HighlightBackend = pygments_highlight,
) -> RenderResult:
    """Render extended Markdown and return the HTML with the front-matter block.

    Args:
        markdown_text: Markdown document, optionally starting with a ``---``
            front-matter block.
        config: Rendering configuration; defaults to `RenderConfig()`.
        math_backend: Callable rendering ``(latex, display)`` to HTML.
        highlight_backend: Callable highlighting ``(code, language)`` to HTML.

    Returns:
        RenderResult: Rendered HTML and the raw front-matter text, if any.

    Raises:
        HeadingLevelMismatchError: If the parser produced an inconsistent
            heading structure.

    Examples:
        result = render("---\\ntag: example\\n---\\n# H1\\ncontent\\n")
        result.metadata  # "tag: example"
    """
    transformer = EventTransformer(
        config, math_backend=math_backend, highlight_backend=highlight_backend
    )
    events = transformer.transform(merge_text(parse_events(markdown_text)))
    metadata = next(
        (event.text for event in events if event.kind is EventKind.METADATA),
        None,
    )
    return RenderResult(html=render_html(events), metadata=metadata)


def convert(
    markdown_text: str,
    config: RenderConfig | None = None,
    *,
    math_backend: MathBackend = latex_to_mathml,
    highlight_backend: HighlightBackend = pygments_highlight,
) -> str:
    """Convert extended Markdown to an HTML fragment.

    Supports ``$``/``$$`` math, highlighted code blocks with optional line
    numbers (``python=`` or ``python :setNumber``), heading anchor links, and
    ``:::spoiler`` blocks.

    Args:
        markdown_text: Markdown document.
        config: Rendering configuration; defaults to `RenderConfig()`.
        math_backend: Callable rendering ``(latex, display)`` to HTML.
        highlight_backend: Callable highlighting ``(code, language)`` to HTML.

    Returns:
        str: HTML fragment.

    Examples:
        convert("# Title\\n\\ncontent")
    """
    return render(
        markdown_text,
        config,
        math_backend=math_backend,
        highlight_backend=highlight_backend,
    ).html
