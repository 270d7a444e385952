"""HTML serialization of event streams."""

from __future__ import annotations

from collections.abc import Iterable

from markdown_it.common.utils import escapeHtml

from .models import Event, EventKind, Tag, TagKind

_SIMPLE_TAGS = {
    TagKind.PARAGRAPH: ("<p>", "</p>\n"),
    TagKind.BLOCK_QUOTE: ("<blockquote>\n", "</blockquote>\n"),
    TagKind.ITEM: ("<li>", "</li>\n"),
    TagKind.TABLE: ("<table>\n", "</table>\n"),
    TagKind.TABLE_HEAD: ("<thead>\n", "</thead>\n"),
    TagKind.TABLE_BODY: ("<tbody>\n", "</tbody>\n"),
    TagKind.TABLE_ROW: ("<tr>\n", "</tr>\n"),
    TagKind.EMPHASIS: ("<em>", "</em>"),
    TagKind.STRONG: ("<strong>", "</strong>"),
    TagKind.STRIKETHROUGH: ("<del>", "</del>"),
    TagKind.LINK: ("<a>", "</a>"),
}


def render_html(events: Iterable[Event]) -> str:
    """Serialize events to an HTML string.

    Raw HTML events are written verbatim; text is escaped. Metadata events are
    dropped.

    Args:
        events: Event stream, usually the output of `EventTransformer.transform`.

    Returns:
        str: HTML fragment.

    Examples:
        render_html(merge_text(parse_events("*hi*")))  # '<p><em>hi</em></p>\\n'
    """
    parts: list[str] = []
    for event in events:
        kind = event.kind
        if kind is EventKind.START:
            parts.append(_open_tag(event.require_tag()))
        elif kind is EventKind.END:
            parts.append(_close_tag(event.require_tag()))
        elif kind is EventKind.TEXT:
            parts.append(escapeHtml(event.text))
        elif kind is EventKind.CODE:
            parts.append(f"<code>{escapeHtml(event.text)}</code>")
        elif kind in (EventKind.HTML, EventKind.INLINE_HTML):
            parts.append(event.text)
        elif kind is EventKind.INLINE_MATH:
            parts.append(f'<span class="math math-inline">{escapeHtml(event.text)}</span>')
        elif kind is EventKind.DISPLAY_MATH:
            parts.append(f'<span class="math math-display">{escapeHtml(event.text)}</span>')
        elif kind is EventKind.SOFT_BREAK:
            parts.append("\n")
        elif kind is EventKind.HARD_BREAK:
            parts.append("<br />\n")
        elif kind is EventKind.RULE:
            parts.append("<hr />\n")
        elif kind is EventKind.IMAGE:
            parts.append(_image(event))
    return "".join(parts)


def _open_tag(tag: Tag) -> str:
    kind = tag.kind

    if kind is TagKind.HEADING:
        return f"<h{tag.level}{_attributes(tag.attrs)}>"
    if kind is TagKind.CODE_BLOCK:
        if tag.info:
            language = escapeHtml(tag.info.split()[0])
            return f'<pre><code class="language-{language}">'
        return "<pre><code>"
    if kind is TagKind.LIST:
        if tag.start is None:
            return "<ul>\n"
        if tag.start == 1:
            return "<ol>\n"
        return f'<ol start="{tag.start}">\n'
    if kind is TagKind.TABLE_CELL:
        name = "th" if tag.header else "td"
        if tag.align:
            return f'<{name} style="text-align: {escapeHtml(tag.align)}">'
        return f"<{name}>"
    if kind is TagKind.LINK:
        title = f' title="{escapeHtml(tag.title)}"' if tag.title else ""
        return f'<a href="{escapeHtml(tag.url)}"{title}>'
    return _SIMPLE_TAGS[kind][0]


def _close_tag(tag: Tag) -> str:
    kind = tag.kind

    if kind is TagKind.HEADING:
        return f"</h{tag.level}>\n"
    if kind is TagKind.CODE_BLOCK:
        return "</code></pre>\n"
    if kind is TagKind.LIST:
        return "</ul>\n" if tag.start is None else "</ol>\n"
    if kind is TagKind.TABLE_CELL:
        return "</th>\n" if tag.header else "</td>\n"
    return _SIMPLE_TAGS[kind][1]


def _image(event: Event) -> str:
    tag = event.require_tag()
    title = f' title="{escapeHtml(tag.title)}"' if tag.title else ""
    return f'<img src="{escapeHtml(tag.url)}" alt="{escapeHtml(event.text)}"{title} />'


def _attributes(attrs: tuple[tuple[str, str], ...]) -> str:
    return "".join(f' {name}="{escapeHtml(value)}"' for name, value in attrs)
