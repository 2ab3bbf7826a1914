"""Turn the raw lines of a properties file into ordered name/value pairs.

Rules:
- lines whose first non-blank character is ``#`` are dropped
- ``name=value`` starts a new entry; the value is everything after the
  first ``=`` and may itself contain ``=``
- a line indented by three or more spaces continues the open entry and is
  appended after a single space (line breaks are not preserved)
- an entry closes at the end of the file, before the next ``name=value``
  line, or before a blank line
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Iterable, Optional

from glueconf.constants import (
    COMMENT_PREFIX,
    CONTINUATION_PATTERN,
    NEW_ENTRY_PATTERN,
    TAB_WIDTH,
)
from glueconf.errors import DuplicateKeyError

logger: Final = logging.getLogger(__name__)


def is_comment(line: str) -> bool:
    """Check whether a line is a ``#`` comment."""
    return line.lstrip().startswith(COMMENT_PREFIX)


def is_new_entry(line: str) -> bool:
    """Check whether a line starts a ``name=value`` entry."""
    return NEW_ENTRY_PATTERN.match(line) is not None


def parse_lines(lines: Iterable[str], source: Optional[Path] = None) -> dict[str, str]:
    """Parse properties lines into an ordered mapping of raw values.

    Args:
        lines: File lines, with or without their terminators
        source: File the lines came from, used in error messages

    Returns:
        Mapping of name to raw (unresolved, untrimmed) value in file order

    Raises:
        DuplicateKeyError: If a name is closed twice
    """
    content = [
        line.rstrip("\r\n") for line in lines if not is_comment(line)
    ]
    entries: dict[str, str] = {}
    name: Optional[str] = None
    value: Optional[str] = None
    last = len(content) - 1

    for i, raw in enumerate(content):
        line = raw.replace("\t", " " * TAB_WIDTH)

        if is_new_entry(line):
            name = line.split("=", 1)[0].strip()
            value = line[line.index("=") + 1 :]
        elif name is not None and value is not None and CONTINUATION_PATTERN.match(line):
            value += " " + line.strip()
        elif line.strip():
            logger.debug("Ignoring unrecognised line %d: %r", i + 1, raw)

        if name is None or value is None:
            continue

        if i == last or is_new_entry(content[i + 1]) or not content[i + 1].strip():
            if name in entries:
                raise DuplicateKeyError(name, source)
            entries[name] = value
            logger.debug("Parsed entry %s", name)
            name = value = None

    return entries
