"""File utility functions."""

from __future__ import annotations

import codecs
import logging
import sys
from pathlib import Path
from typing import Final, Iterable

logger: Final = logging.getLogger(__name__)

UTF8: Final = "utf-8"
UTF8_BOM: Final = "utf-8-sig"


def current_dir() -> Path:
    """Get the directory of the running program.

    Falls back to the working directory when there is no script on disk
    (interactive sessions, ``python -c``).

    Returns:
        Absolute directory path
    """
    script = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if script is not None and script.is_file():
        return script.resolve().parent
    return Path.cwd()


def file_encoding(file_path: Path) -> str:
    """Tell whether a UTF-8 file starts with a byte-order mark.

    Returns:
        ``"utf-8-sig"`` when the file has a BOM, else ``"utf-8"``
    """
    with file_path.open("rb") as fh:
        head = fh.read(len(codecs.BOM_UTF8))
    return UTF8_BOM if head == codecs.BOM_UTF8 else UTF8


def read_lines(file_path: Path) -> list[str]:
    """Read a whole text file as lines, keeping each line's terminator.

    A leading UTF-8 byte-order mark is dropped.

    Args:
        file_path: File to read

    Returns:
        Lines in file order, with ``\\n``/``\\r\\n`` endings untouched
    """
    with file_path.open(encoding=UTF8_BOM, newline="") as fh:
        lines = fh.readlines()
    logger.debug("Read %d lines from %s", len(lines), file_path)
    return lines


def write_lines(file_path: Path, lines: Iterable[str], encoding: str = UTF8) -> None:
    """Write lines back to a file exactly as given.

    Args:
        file_path: File to overwrite
        lines: Lines including their terminators
        encoding: ``"utf-8-sig"`` to write a leading byte-order mark
    """
    with file_path.open("w", encoding=encoding, newline="") as fh:
        fh.writelines(lines)
    logger.debug("Wrote %s", file_path)
