"""Package-specific exception types."""

from __future__ import annotations


class RenderError(Exception):
    """Base class for rendering-related errors."""


class InvariantError(RenderError):
    """Raised when the event stream breaks a structural invariant.

    Signals a defect in the upstream parser or in the transformer's own
    bookkeeping, never a problem with the user's Markdown.
    """


class HeadingLevelMismatchError(InvariantError):
    """Raised when a heading closes with a level different from the one it opened with.

    Args:
        opened: Level recorded at the heading start.
        closed: Level carried by the heading end.
    """

    def __init__(self, opened: int, closed: int):
        self.opened = opened
        self.closed = closed
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Internal error: heading level mismatch (opened h{self.opened}, closed h{self.closed})"
