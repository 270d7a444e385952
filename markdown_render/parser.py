"""Markdown parsing into a flat event stream.

markdown-it produces a two-level token list: block tokens, with the inline
content of each block held in the children of an ``inline`` token. The
functions here flatten that list into `Event` objects so the transformer can
walk the whole document in a single pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.front_matter import front_matter_plugin

from .models import Event, EventKind, Tag, TagKind

logger = logging.getLogger(__name__)

# Base names of markdown-it ``*_open`` / ``*_close`` token pairs
_CONTAINER_TAGS = {
    "paragraph": TagKind.PARAGRAPH,
    "heading": TagKind.HEADING,
    "blockquote": TagKind.BLOCK_QUOTE,
    "bullet_list": TagKind.LIST,
    "ordered_list": TagKind.LIST,
    "list_item": TagKind.ITEM,
    "table": TagKind.TABLE,
    "thead": TagKind.TABLE_HEAD,
    "tbody": TagKind.TABLE_BODY,
    "tr": TagKind.TABLE_ROW,
    "th": TagKind.TABLE_CELL,
    "td": TagKind.TABLE_CELL,
    "em": TagKind.EMPHASIS,
    "strong": TagKind.STRONG,
    "s": TagKind.STRIKETHROUGH,
    "link": TagKind.LINK,
}

_LEAF_EVENTS = {
    "text": EventKind.TEXT,
    "code_inline": EventKind.CODE,
    "html_block": EventKind.HTML,
    "html_inline": EventKind.INLINE_HTML,
    "math_inline": EventKind.INLINE_MATH,
    "math_inline_double": EventKind.DISPLAY_MATH,
    "math_block": EventKind.DISPLAY_MATH,
    "math_block_label": EventKind.DISPLAY_MATH,
    "softbreak": EventKind.SOFT_BREAK,
    "hardbreak": EventKind.HARD_BREAK,
    "hr": EventKind.RULE,
    "front_matter": EventKind.METADATA,
}


def create_parser() -> MarkdownIt:
    """Create a markdown-it parser with tables, strikethrough, math and front matter."""
    md = MarkdownIt("commonmark")
    md.enable(["table", "strikethrough"])
    md.use(dollarmath_plugin)
    md.use(front_matter_plugin)
    return md


def parse_events(markdown_text: str, parser: MarkdownIt | None = None) -> Iterator[Event]:
    """Parse Markdown into a flat stream of events.

    Args:
        markdown_text: Raw Markdown document.
        parser: Configured markdown-it instance; defaults to `create_parser()`.

    Returns:
        Iterator[Event]: Events in document order. Adjacent text events are
            not merged; see `merge_text`.

    Examples:
        list(parse_events("# Title"))
    """
    parser = parser or create_parser()
    return lower_tokens(parser.parse(markdown_text))


def lower_tokens(tokens: Iterable[Token]) -> Iterator[Event]:
    """Lower markdown-it tokens into events.

    Args:
        tokens: Block-level tokens as returned by `MarkdownIt.parse`.

    Returns:
        Iterator[Event]: Flattened events.
    """
    for token in tokens:
        if token.type == "inline":
            yield from lower_tokens(token.children or [])
        elif token.type in ("fence", "code_block"):
            yield from _lower_code_block(token)
        elif token.type == "image":
            yield _lower_image(token)
        elif token.type in _LEAF_EVENTS:
            yield Event(_LEAF_EVENTS[token.type], text=token.content)
        elif token.nesting != 0:
            # Tight lists hide their paragraphs
            if token.hidden:
                continue
            tag = _container_tag(token)
            yield Event.start(tag) if token.nesting == 1 else Event.end(tag)
        else:
            logger.debug("Skipping unsupported token type %r", token.type)


def merge_text(events: Iterable[Event]) -> Iterator[Event]:
    """Coalesce adjacent text events into single runs.

    Args:
        events: Event stream.

    Returns:
        Iterator[Event]: Events where no two consecutive items are text.

    Examples:
        merged = list(merge_text([Event.text_event("a"), Event.text_event("b")]))
        # [Event(kind=EventKind.TEXT, text="ab")]
    """
    pending: list[str] = []
    for event in events:
        if event.kind is EventKind.TEXT:
            pending.append(event.text)
            continue
        if pending:
            yield Event.text_event("".join(pending))
            pending = []
        yield event
    if pending:
        yield Event.text_event("".join(pending))


def _lower_code_block(token: Token) -> Iterator[Event]:
    info = token.info.strip() if token.type == "fence" else None
    tag = Tag(TagKind.CODE_BLOCK, info=info)
    yield Event.start(tag)
    if token.content:
        yield Event.text_event(token.content)
    yield Event.end(tag)


def _lower_image(token: Token) -> Event:
    tag = Tag(
        TagKind.IMAGE,
        url=str(token.attrGet("src") or ""),
        title=str(token.attrGet("title") or ""),
    )
    return Event(EventKind.IMAGE, text=_plain_text(token.children or []), tag=tag)


def _plain_text(tokens: list[Token]) -> str:
    """Flatten inline tokens to the text a reader sees, dropping markup."""
    parts = []
    for token in tokens:
        if token.type in ("text", "code_inline"):
            parts.append(token.content)
        elif token.type in ("softbreak", "hardbreak"):
            parts.append("\n")
        elif token.children:
            parts.append(_plain_text(token.children))
    return "".join(parts)


def _container_tag(token: Token) -> Tag:
    base_name = token.type.rsplit("_", 1)[0]
    kind = _CONTAINER_TAGS.get(base_name)
    if kind is None:
        raise ValueError(f"Unsupported container token: {token.type}")

    if kind is TagKind.HEADING:
        attrs = tuple((str(key), str(value)) for key, value in token.attrs.items())
        return Tag(kind, level=int(token.tag[1:]), attrs=attrs)
    if kind is TagKind.LIST:
        start = None
        if base_name == "ordered_list":
            start = int(token.attrGet("start") or 1)
        return Tag(kind, start=start)
    if kind is TagKind.TABLE_CELL:
        style = str(token.attrGet("style") or "")
        align = style.partition(":")[2].strip() or None
        return Tag(kind, align=align, header=base_name == "th")
    if kind is TagKind.LINK:
        return Tag(
            kind,
            url=str(token.attrGet("href") or ""),
            title=str(token.attrGet("title") or ""),
        )
    return Tag(kind)
