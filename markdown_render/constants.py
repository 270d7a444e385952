"""Constants used across the markdown-render package."""

from __future__ import annotations

from .config import RenderConfig

DEFAULT_CONFIG = RenderConfig()

# Custom syntax
LINE_NUMBER_FLAG = DEFAULT_CONFIG.line_number_flag
LINE_NUMBER_SUFFIX = "="
SPOILER_CLOSE = ":::"

# Markup emitted around custom syntax
DETAILS_OPEN = "<details>"
DETAILS_CLOSE = "</details>"
SUMMARY_OPEN = "<summary>"
SUMMARY_CLOSE = "</summary>"
DEFAULT_ANCHOR_ICON_CLASS = DEFAULT_CONFIG.anchor_icon_class
DEFAULT_LINE_NUMBER_CLASS = DEFAULT_CONFIG.line_number_class
DEFAULT_MATH_DISPLAY_CLASS = DEFAULT_CONFIG.math_display_class

# Input limits
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
