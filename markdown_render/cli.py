"""
Renders an extended-Markdown file to HTML.
The HTML goes to stdout unless an output file is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, build_config
from .converter import render
from .filesystem import (
    collect_file_stat,
    enforce_file_size,
    get_max_file_size,
    safe_read,
    write_output,
)

__all__ = ["cli"]

logger = logging.getLogger(__name__)


@click.command()
@click.version_option()
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the HTML to this file instead of stdout",
)
@click.option("--line-number-flag", help="Info-string token that enables line numbers")
@click.option("--spoiler-marker", help="Line prefix that opens a spoiler block")
@click.option(
    "--inherit-code-state/--reset-code-state",
    default=None,
    help="Let indented code blocks reuse the previous fenced block settings",
)
@click.option("--metadata", is_flag=True, help="Print the front-matter block to stderr")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    output: str | None = None,
    line_number_flag: str | None = None,
    spoiler_marker: str | None = None,
    inherit_code_state: bool | None = None,
    metadata: bool = False,
    verbose: bool = False,
):
    """
    Entry point for rendering a Markdown file to HTML.

    Args:
        filepath: Path to the Markdown file to render.
        output: Optional path of the HTML file to write.
        line_number_flag: Override for the line-number flag token.
        spoiler_marker: Override for the spoiler open marker.
        inherit_code_state: Override for indented code block settings.
        metadata: Whether to print the front-matter block to stderr.
        verbose: Whether to enable debug logging.

    Returns:
        None.

    Raises:
        click.BadParameter: If configuration values are invalid.
        click.ClickException: If the file is too large, unreadable, or not
            valid UTF-8.

    Examples:
        markdown-render README.md -o README.html
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path = Path(filepath)
    try:
        config = build_config(
            path.resolve().parent,
            line_number_flag=line_number_flag,
            spoiler_marker=spoiler_marker,
            inherit_code_state=inherit_code_state,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        enforce_file_size(collect_file_stat(path), max_file_size, path)
        with safe_read(path) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        raise click.ClickException(f"Invalid UTF-8 sequence in {path}: {error}") from error
    except IOError as error:
        raise click.ClickException(str(error)) from error

    logger.debug("Rendering %s (%d characters)", path, len(content))
    result = render(content, config)

    if metadata and result.metadata is not None:
        click.echo(result.metadata, err=True)

    if output is None:
        click.echo(result.html, nl=False)
        return

    try:
        write_output(Path(output), result.html)
    except IOError as error:
        raise click.ClickException(str(error)) from error
    logger.debug("Wrote %s", output)


if __name__ == "__main__":
    cli()
