from __future__ import annotations

import pytest

from markdown_render.exceptions import InvariantError
from markdown_render.models import Event, EventKind, Tag, TagKind
from markdown_render.parser import merge_text, parse_events
from markdown_render.serializer import render_html


def _render(markdown_text: str) -> str:
    return render_html(merge_text(parse_events(markdown_text)))


def test_text_is_escaped_and_raw_html_is_verbatim():
    events = [
        Event.text_event("a < b & c"),
        Event.html("<b>raw</b>"),
        Event.inline_html("<i>"),
    ]

    assert render_html(events) == "a &lt; b &amp; c<b>raw</b><i>"


def test_paragraph_and_heading():
    assert _render("# Title\n\nText") == "<h1>Title</h1>\n<p>Text</p>\n"


def test_heading_attributes_are_written():
    tag = Tag(TagKind.HEADING, level=3, attrs=(("id", "x"),))

    assert render_html([Event.start(tag), Event.end(tag)]) == '<h3 id="x"></h3>\n'


def test_code_blocks():
    fenced = Tag(TagKind.CODE_BLOCK, info="python")
    indented = Tag(TagKind.CODE_BLOCK, info=None)

    assert render_html([Event.start(fenced), Event.end(fenced)]) == (
        '<pre><code class="language-python"></code></pre>\n'
    )
    assert render_html([Event.start(indented), Event.end(indented)]) == (
        "<pre><code></code></pre>\n"
    )


def test_lists():
    assert _render("- a\n- b\n") == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"
    assert _render("1. a\n") == "<ol>\n<li>a</li>\n</ol>\n"
    assert _render("3. a\n") == '<ol start="3">\n<li>a</li>\n</ol>\n'


def test_table():
    html = _render("| a | b |\n|:--|---|\n| 1 | 2 |\n")

    assert html == (
        "<table>\n<thead>\n<tr>\n"
        '<th style="text-align: left">a</th>\n<th>b</th>\n'
        "</tr>\n</thead>\n<tbody>\n<tr>\n"
        '<td style="text-align: left">1</td>\n<td>2</td>\n'
        "</tr>\n</tbody>\n</table>\n"
    )


def test_inline_markup():
    html = _render('*a* **b** ~~c~~ `<d>` [e](http://x "t") ![f](i.png)')

    assert html == (
        "<p><em>a</em> <strong>b</strong> <del>c</del> <code>&lt;d&gt;</code> "
        '<a href="http://x" title="t">e</a> <img src="i.png" alt="f" /></p>\n'
    )


def test_breaks_rules_and_quotes():
    assert _render("a\nb  \nc") == "<p>a\nb<br />\nc</p>\n"
    assert _render("***") == "<hr />\n"
    assert _render("> q") == "<blockquote>\n<p>q</p>\n</blockquote>\n"


def test_metadata_is_not_written():
    assert _render("---\ntitle: x\n---\ntext\n") == "<p>text</p>\n"


def test_unrendered_math_is_escaped():
    events = [Event(EventKind.INLINE_MATH, text="a<b"), Event(EventKind.DISPLAY_MATH, text="c")]

    assert render_html(events) == (
        '<span class="math math-inline">a&lt;b</span>'
        '<span class="math math-display">c</span>'
    )


def test_image_alt_drops_inline_markup():
    assert _render('![a **b** `<c>`](i.png "t")') == (
        '<p><img src="i.png" alt="a b &lt;c&gt;" title="t" /></p>\n'
    )


@pytest.mark.parametrize("kind", [EventKind.START, EventKind.END, EventKind.IMAGE])
def test_tagless_element_event_is_an_invariant_error(kind):
    with pytest.raises(InvariantError):
        render_html([Event(kind)])
