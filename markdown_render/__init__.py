"""
markdown-render: extended Markdown to HTML.

Adds math, highlighted and line-numbered code blocks, heading anchor links,
and ``:::spoiler`` blocks on top of CommonMark.

CLI Usage:
    markdown-render README.md -o README.html

Library Usage:
    from markdown_render import convert

    html = convert("# Title\\n\\ncontent")
"""

from .config import ConfigError, RenderConfig
from .converter import convert, render
from .exceptions import HeadingLevelMismatchError, InvariantError, RenderError
from .languages import SUPPORTED_LANGUAGES, is_supported
from .models import Event, EventKind, RenderResult, Tag, TagKind
from .transformer import EventTransformer

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "convert",
    "render",
    "EventTransformer",
    "is_supported",
    "SUPPORTED_LANGUAGES",
    # Data models
    "Event",
    "EventKind",
    "Tag",
    "TagKind",
    "RenderConfig",
    "RenderResult",
    # Exceptions
    "ConfigError",
    "HeadingLevelMismatchError",
    "InvariantError",
    "RenderError",
    # Version
    "__version__",
]
