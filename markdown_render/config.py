"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

@dataclass
class RenderConfig:
    """Configuration for rendering extended Markdown.

    Attributes:
        line_number_flag: Second info-string token that turns on line numbers.
        spoiler_marker: Line prefix that opens a spoiler block.
        anchor_icon_class: Class of the icon inside heading anchor links.
        line_number_class: Class of the line number ``<span>`` in code blocks.
        math_display_class: Class of the ``<div>`` wrapping display math.
        inherit_code_state: Whether indented code blocks reuse the language and
            line-number settings of the previous fenced block instead of
            starting from plain text.
        max_file_size: Maximum file size in bytes that the CLI will read.

    Examples:
        RenderConfig(line_number_flag=":numbers", inherit_code_state=True)
    """

    # Custom syntax
    line_number_flag: str = ":setNumber"
    spoiler_marker: str = ":::spoiler"

    # Markup
    anchor_icon_class: str = "bi bi-link mdrd-hl"
    line_number_class: str = "mdrd-ln"
    math_display_class: str = "math-display"

    # Behaviour
    inherit_code_state: bool = False

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`spoiler_marker` must start with `:::`")
    """


def load_config(search_path: Path) -> RenderConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.markdown-render]`` table from `pyproject.toml` and the
    ``[markdown-render]`` or ``[tool.markdown-render]`` table from
    `.markdown-render.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        RenderConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "markdown-render")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".markdown-render.toml",
            table_paths=[("markdown-render",), ("tool", "markdown-render")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return RenderConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> RenderConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> RenderConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return RenderConfig()

    # TOML keys use dashes, dataclass fields use underscores
    normalized = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return RenderConfig(**normalized)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: RenderConfig) -> None:
    """Validate a `RenderConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If a string field is empty or not a string, the line number
            flag contains whitespace, the spoiler marker does not start with
            ``:::``, or a flag or limit has the wrong type or value.

    Examples:
        validate_config(RenderConfig(line_number_flag=":n"))
    """
    _ensure_strings(
        {
            "line_number_flag": config.line_number_flag,
            "spoiler_marker": config.spoiler_marker,
            "anchor_icon_class": config.anchor_icon_class,
            "line_number_class": config.line_number_class,
            "math_display_class": config.math_display_class,
        }
    )

    # Info strings are split on whitespace before the flag is compared
    if any(char.isspace() for char in config.line_number_flag):
        raise ConfigError("`line_number_flag` must not contain whitespace")
    if not config.spoiler_marker.startswith(":::"):
        raise ConfigError("`spoiler_marker` must start with `:::`")
    if not isinstance(config.inherit_code_state, bool):
        raise ConfigError("`inherit_code_state` must be a boolean")

    max_file_size = config.max_file_size
    if isinstance(max_file_size, bool) or not isinstance(max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: RenderConfig, **overrides: object) -> RenderConfig:
    """Apply override values to a `RenderConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        RenderConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `RenderConfig`.

    Examples:
        updated = apply_overrides(config, spoiler_marker=":::details")
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> RenderConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        RenderConfig: Validated configuration ready for rendering.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), line_number_flag=":numbers")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_strings(values: dict[str, object]) -> None:
    for key, value in values.items():
        if not isinstance(value, str):
            raise ConfigError(f"`{key}` must be a string")
        if not value:
            raise ConfigError(f"`{key}` must not be empty")
