#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/constants.py
"""Constants and defaults shared across richmark."""

from __future__ import annotations

from typing import Final

# Optional dependencies as (install_name, import_name, version_spec)
DEPS_MARKDOWN: Final = [("mistune", "mistune", ">=3.0.0")]
DEPS_RICH: Final = [("rich", "rich", ">=13.0.0")]

# Markdown parser defaults
DEFAULT_PARSE_TABLES: Final = True
DEFAULT_PARSE_STRIKETHROUGH: Final = True
DEFAULT_PARSE_FOOTNOTES: Final = True
DEFAULT_FADE_OUT_LAST_PARAGRAPH: Final = False

# Console scope defaults
DEFAULT_CODE_THEME: Final = "monokai"
DEFAULT_BULLET: Final = "•"
DEFAULT_HEADING_STYLES: Final = (
    "bold underline",
    "bold",
    "bold italic",
    "italic",
    "dim bold",
    "dim italic",
)
DEFAULT_QUOTE_BORDER_STYLE: Final = "dim"
DEFAULT_CODE_STYLE: Final = "bold cyan"
DEFAULT_LINK_STYLE: Final = "underline blue"
DEFAULT_FADE_OUT_STYLE: Final = "dim"
DEFAULT_SHOW_LINK_URLS: Final = False

# Configuration discovery
CONFIG_FILENAMES: Final = (".richmark.toml", ".richmark.yaml", ".richmark.yml", ".richmark.json")
PYPROJECT_TOOL_SECTION: Final = "richmark"

# Replacement character used as alternate text for inline content placeholders
INLINE_CONTENT_PLACEHOLDER: Final = "�"

# Parent logger of every richmark module; the CLI attaches its handlers here
LOGGER_NAMESPACE: Final = "richmark"
LOG_FORMAT: Final = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT: Final = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
