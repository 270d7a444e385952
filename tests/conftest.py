import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


def fake_math(source: str, display: bool) -> str:
    tag = "mdisplay" if display else "minline"
    return f"<{tag}>{source}</{tag}>"


class RecordingHighlighter:
    """Highlight backend stub that remembers its calls."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def __call__(self, code: str, language: str) -> str:
        self.calls.append((code, language))
        return f"[{language}]{code}"


@pytest.fixture()
def highlighter() -> RecordingHighlighter:
    return RecordingHighlighter()
