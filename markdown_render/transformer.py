"""Rewriting of the parse event stream into the annotated event stream.

The transformer walks the merged event stream once, keeping a small
`TransformerState` to know whether it is inside a heading, a code block or a
spoiler, and whether the next inline content must become a spoiler summary.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from markdown_it.common.utils import escapeHtml

from .config import RenderConfig
from .constants import (
    DEFAULT_ANCHOR_ICON_CLASS,
    DETAILS_CLOSE,
    DETAILS_OPEN,
    LINE_NUMBER_FLAG,
    LINE_NUMBER_SUFFIX,
    SPOILER_CLOSE,
    SUMMARY_CLOSE,
    SUMMARY_OPEN,
)
from .exceptions import HeadingLevelMismatchError
from .highlight import HighlightBackend, highlight_code, pygments_highlight, split_lines
from .languages import PLAIN_TEXT, is_supported
from .math_renderer import MathBackend, latex_to_mathml, render_math
from .models import CodeBlockDirective, Event, EventKind, Tag, TagKind, TransformerState

logger = logging.getLogger(__name__)


def parse_code_directive(
    info: str, line_number_flag: str = LINE_NUMBER_FLAG
) -> CodeBlockDirective:
    """Parse a fenced code block info string.

    The first whitespace-separated token names the language; a trailing ``=``
    on it turns line numbers on. A second token equal to `line_number_flag`
    also turns them on. Languages off the allow-list become ``plaintext``.

    Args:
        info: Info string following the opening fence.
        line_number_flag: Token that enables line numbers in second position.

    Returns:
        CodeBlockDirective: Normalized language and line-number setting.

    Examples:
        parse_code_directive("python=", ":setNumber")  # python, numbered
        parse_code_directive("rust :setNumber", ":setNumber")  # rust, numbered
        parse_code_directive("cobol", ":setNumber")  # plaintext, not numbered
    """
    tokens = info.split()
    language = PLAIN_TEXT
    line_numbers = False

    if tokens:
        language = tokens[0]
        if language.endswith(LINE_NUMBER_SUFFIX):
            language = language[: -len(LINE_NUMBER_SUFFIX)]
            line_numbers = True
        if not is_supported(language):
            logger.debug("Unsupported code block language %r, using %s", language, PLAIN_TEXT)
            language = PLAIN_TEXT
    if len(tokens) > 1:
        line_numbers = line_numbers or tokens[1] == line_number_flag

    return CodeBlockDirective(language=language, line_numbers=line_numbers)


def heading_anchor(text: str, icon_class: str = DEFAULT_ANCHOR_ICON_CLASS) -> str:
    """Build the self-link placed after heading text.

    The anchor identifier is `text` with every space replaced by a hyphen;
    nothing else is normalized.

    Examples:
        heading_anchor("Hello World", "bi bi-link")
        # '<a id="Hello-World" href="#Hello-World"><i class="bi bi-link"></i></a>'
    """
    anchor_id = escapeHtml(text.replace(" ", "-"))
    return f'<a id="{anchor_id}" href="#{anchor_id}"><i class="{icon_class}"></i></a>'


class EventTransformer:
    """Rewrite parse events: math, highlighted code, heading anchors and spoilers.

    Args:
        config: Rendering configuration; defaults to `RenderConfig()`.
        math_backend: Callable rendering ``(latex, display)`` to HTML.
        highlight_backend: Callable highlighting ``(code, language)`` to HTML.

    Examples:
        transformer = EventTransformer()
        events = transformer.transform(merge_text(parse_events("# Title")))
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        math_backend: MathBackend = latex_to_mathml,
        highlight_backend: HighlightBackend = pygments_highlight,
    ):
        self.config = config or RenderConfig()
        self.math_backend = math_backend
        self.highlight_backend = highlight_backend

    def transform(self, events: Iterable[Event]) -> list[Event]:
        """Transform a merged event stream.

        Args:
            events: Events with adjacent text runs already merged.

        Returns:
            list[Event]: Annotated events ready for serialization.

        Raises:
            HeadingLevelMismatchError: If a heading closes with a level other
                than the one it opened with.
        """
        state = TransformerState()
        output: list[Event] = []

        for event in events:
            if event.kind in (EventKind.INLINE_MATH, EventKind.DISPLAY_MATH):
                self._on_math(state, event, output)
            elif event.kind is EventKind.START:
                self._on_start(state, event, output)
            elif event.kind is EventKind.TEXT:
                self._on_text(state, event.text, output)
            elif event.kind is EventKind.END:
                self._on_end(state, event, output)
            elif state.pending_spoiler_summary:
                _emit_summary(state, output, event)
            else:
                output.append(event)

        return output

    def _on_math(self, state: TransformerState, event: Event, output: list[Event]) -> None:
        fragment = render_math(
            event.text,
            display=event.kind is EventKind.DISPLAY_MATH,
            backend=self.math_backend,
            display_class=self.config.math_display_class,
        )
        if state.pending_spoiler_summary:
            _emit_summary(state, output, Event.html(fragment))
        else:
            output.append(Event.html(fragment))

    def _on_start(self, state: TransformerState, event: Event, output: list[Event]) -> None:
        tag = event.require_tag()

        if tag.kind is TagKind.HEADING:
            state.in_heading = True
            state.heading_level = tag.level
            output.append(event)
        elif tag.kind is TagKind.CODE_BLOCK:
            state.in_code_block = True
            if tag.is_fenced:
                directive = parse_code_directive(tag.info, self.config.line_number_flag)
                state.current_language = directive.language
                state.line_numbers_enabled = directive.line_numbers
                output.append(Event.start(Tag(TagKind.CODE_BLOCK, info=directive.language)))
            else:
                if not self.config.inherit_code_state:
                    state.current_language = PLAIN_TEXT
                    state.line_numbers_enabled = False
                output.append(event)
        else:
            output.append(event)

    def _on_text(self, state: TransformerState, text: str, output: list[Event]) -> None:
        if state.in_code_block:
            fragment = highlight_code(
                text,
                state.current_language,
                state.line_numbers_enabled,
                backend=self.highlight_backend,
                line_number_class=self.config.line_number_class,
            )
            output.append(Event.html(fragment))
        elif state.in_heading:
            output.append(Event.text_event(text))
            output.append(Event.html(heading_anchor(text, self.config.anchor_icon_class)))
        else:
            self._scan_body_text(state, text, output)

    def _scan_body_text(self, state: TransformerState, text: str, output: list[Event]) -> None:
        marker = self.config.spoiler_marker
        for line in split_lines(text):
            if line.startswith(marker) and not state.in_spoiler:
                output.append(Event.inline_html(DETAILS_OPEN))
                state.in_spoiler = True
                _, separator, summary = line.rstrip().partition(" ")
                if separator:
                    output.append(Event.inline_html(SUMMARY_OPEN))
                    output.append(Event.text_event(summary))
                    output.append(Event.inline_html(SUMMARY_CLOSE))
                else:
                    state.pending_spoiler_summary = True
                logger.debug("Opened spoiler (summary pending: %s)", state.pending_spoiler_summary)
            elif line.startswith(SPOILER_CLOSE) and state.in_spoiler:
                output.append(Event.inline_html(DETAILS_CLOSE))
                state.in_spoiler = False
                state.pending_spoiler_summary = False
                logger.debug("Closed spoiler")
            elif state.pending_spoiler_summary and line:
                _emit_summary(state, output, Event.text_event(line))
                output.append(Event.text_event("\n"))
            else:
                output.append(Event.text_event(line))
                output.append(Event.text_event("\n"))

    def _on_end(self, state: TransformerState, event: Event, output: list[Event]) -> None:
        tag = event.require_tag()

        if tag.kind is TagKind.CODE_BLOCK:
            state.in_code_block = False
        elif tag.kind is TagKind.HEADING:
            if tag.level != state.heading_level:
                raise HeadingLevelMismatchError(state.heading_level, tag.level)
            state.in_heading = False
        output.append(event)


def _emit_summary(state: TransformerState, output: list[Event], content: Event) -> None:
    output.append(Event.inline_html(SUMMARY_OPEN))
    output.append(content)
    output.append(Event.inline_html(SUMMARY_CLOSE))
    state.pending_spoiler_summary = False
