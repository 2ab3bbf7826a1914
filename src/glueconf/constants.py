"""Shared constants for settings files and value substitution."""

from __future__ import annotations

import re
from typing import Final

# Default settings file, looked up beside the running program
DEFAULT_CONFIG_FILE_NAME: Final = "config.properties"

# Environment variable that overrides the default settings file
CONFIG_ENV_VAR: Final = "GLUECONF_CONFIG"

COMMENT_PREFIX: Final = "#"

# name=value, no whitespace in the name, something non-blank after '='
NEW_ENTRY_PATTERN: Final = re.compile(r"^[^=\s]+\s*=\s*[^\s]+")

# multi-line values must be indented at least 3 spaces
CONTINUATION_PATTERN: Final = re.compile(r"^\s{3,}[^ ]")

TAB_WIDTH: Final = 4

# Substitution tokens
REFERENCE_PREFIX: Final = "$"
PATH_TOKEN: Final = "$PATH"
TIMESTAMP_TOKEN: Final = "$TIMESTAMP"
TIMESTAMP_FORMAT: Final = "%Y%m%d"

# Residual whitespace collapsed in resolved values
LINE_BREAK_PATTERN: Final = re.compile(r"[\n\r\t]")
