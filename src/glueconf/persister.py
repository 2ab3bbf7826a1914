"""Rewrite a single ``name=value`` line of a settings file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from glueconf.errors import SettingsFileNotFoundError, UnmatchedKeyError
from glueconf.utils.file import file_encoding, read_lines, write_lines

logger: Final = logging.getLogger(__name__)


def persist_setting(path: Path, name: str, value: str, strict: bool = False) -> bool:
    """Replace the first line starting with ``name=`` by ``name=value``.

    Every other line, line endings included, is written back unchanged.
    When no line starts with ``name=`` the file is left untouched.

    Args:
        path: Settings file to update
        name: Setting name
        value: New value, written verbatim
        strict: Raise instead of doing nothing when the name is absent

    Returns:
        True if the file was rewritten

    Raises:
        SettingsFileNotFoundError: If *path* does not exist
        UnmatchedKeyError: If *strict* and no line matches
    """
    if not path.is_file():
        raise SettingsFileNotFoundError(path, f"Failed to find config file '{path}'")

    encoding = file_encoding(path)
    lines = read_lines(path)
    prefix = f"{name}="
    for i, line in enumerate(lines):
        if line.startswith(prefix):
            ending = line[len(line.rstrip("\r\n")) :]
            lines[i] = f"{prefix}{value}{ending}"
            write_lines(path, lines, encoding)
            logger.info("Saved %s to %s", name, path)
            return True

    if strict:
        raise UnmatchedKeyError(name, path)
    logger.debug("No %s line in %s, nothing saved", name, path)
    return False
