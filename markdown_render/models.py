"""Data models for markdown-render."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .exceptions import InvariantError
from .languages import PLAIN_TEXT


class EventKind(Enum):
    """Kinds of parse events flowing between the parser, transformer and serializer.

    Attributes:
        START: Opening of a container element (see `Tag`).
        END: Closing of a container element.
        TEXT: Plain text run, escaped on output.
        CODE: Inline code span.
        HTML: Raw block-level HTML, written verbatim.
        INLINE_HTML: Raw inline HTML, written verbatim.
        INLINE_MATH: Inline LaTeX source.
        DISPLAY_MATH: Display LaTeX source.
        SOFT_BREAK: Line break inside a paragraph.
        HARD_BREAK: Forced line break.
        RULE: Thematic break.
        IMAGE: Atomic image; alt text in `Event.text`.
        METADATA: Front-matter block; never written to the output.
    """

    START = auto()
    END = auto()
    TEXT = auto()
    CODE = auto()
    HTML = auto()
    INLINE_HTML = auto()
    INLINE_MATH = auto()
    DISPLAY_MATH = auto()
    SOFT_BREAK = auto()
    HARD_BREAK = auto()
    RULE = auto()
    IMAGE = auto()
    METADATA = auto()


class TagKind(Enum):
    """Container elements that open with a START event and close with an END event."""

    PARAGRAPH = auto()
    HEADING = auto()
    BLOCK_QUOTE = auto()
    CODE_BLOCK = auto()
    LIST = auto()
    ITEM = auto()
    TABLE = auto()
    TABLE_HEAD = auto()
    TABLE_BODY = auto()
    TABLE_ROW = auto()
    TABLE_CELL = auto()
    EMPHASIS = auto()
    STRONG = auto()
    STRIKETHROUGH = auto()
    LINK = auto()
    IMAGE = auto()


@dataclass(frozen=True)
class Tag:
    """Describe a container element.

    Attributes:
        kind: Element kind.
        level: Heading level (1-6); zero for other kinds.
        info: Code block info string; None for indented code blocks.
        start: First number of an ordered list; None for bullet lists.
        url: Link or image destination.
        title: Link or image title.
        align: Table cell alignment (``left``, ``center`` or ``right``).
        header: Whether a table cell belongs to the header row.
        attrs: Extra attributes (heading id, classes, ...) passed through verbatim.

    Examples:
        Tag(TagKind.HEADING, level=2)
        Tag(TagKind.CODE_BLOCK, info="python :setNumber")
    """

    kind: TagKind
    level: int = 0
    info: str | None = None
    start: int | None = None
    url: str = ""
    title: str = ""
    align: str | None = None
    header: bool = False
    attrs: tuple[tuple[str, str], ...] = ()

    @property
    def is_fenced(self) -> bool:
        return self.kind is TagKind.CODE_BLOCK and self.info is not None


@dataclass(frozen=True)
class Event:
    """One unit of Markdown structure or content.

    Attributes:
        kind: Event kind.
        text: Text, raw HTML, LaTeX source or alt text depending on `kind`.
        tag: Element description for START, END and IMAGE events.
    """

    kind: EventKind
    text: str = ""
    tag: Tag | None = None

    @classmethod
    def start(cls, tag: Tag) -> Event:
        return cls(EventKind.START, tag=tag)

    @classmethod
    def end(cls, tag: Tag) -> Event:
        return cls(EventKind.END, tag=tag)

    @classmethod
    def text_event(cls, text: str) -> Event:
        return cls(EventKind.TEXT, text=text)

    @classmethod
    def html(cls, html: str) -> Event:
        return cls(EventKind.HTML, text=html)

    @classmethod
    def inline_html(cls, html: str) -> Event:
        return cls(EventKind.INLINE_HTML, text=html)

    def require_tag(self) -> Tag:
        """Return the element tag, raising `InvariantError` when it is missing."""
        if self.tag is None:
            raise InvariantError(f"{self.kind.name} event carries no tag")
        return self.tag


@dataclass
class TransformerState:
    """Scan state of one transformer pass.

    Attributes:
        in_code_block: Between a code block start and its end.
        current_language: Normalized language of the active code block; always
            an allow-listed language or ``plaintext``.
        line_numbers_enabled: Whether the active code block asked for line numbers.
        in_heading: Between a heading start and its end.
        heading_level: Level recorded at the heading start.
        in_spoiler: Between a spoiler open line and its close line.
        pending_spoiler_summary: The next inline content becomes the spoiler summary.
    """

    in_code_block: bool = False
    current_language: str = PLAIN_TEXT
    line_numbers_enabled: bool = False
    in_heading: bool = False
    heading_level: int = 1
    in_spoiler: bool = False
    pending_spoiler_summary: bool = False


@dataclass(frozen=True)
class CodeBlockDirective:
    """Language and numbering options parsed from a fenced code block info string."""

    language: str = PLAIN_TEXT
    line_numbers: bool = False


@dataclass
class RenderResult:
    """Output of a conversion.

    Attributes:
        html: Rendered HTML fragment.
        metadata: Raw front-matter block, or None when the document has none.
    """

    html: str
    metadata: str | None = None
