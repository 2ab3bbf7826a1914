"""Common utility functions and helpers for the glueconf package."""

from glueconf.utils.file import current_dir, file_encoding, read_lines, write_lines
from glueconf.utils.time import Clock, TimeUtils

__all__ = [
    "Clock",
    "TimeUtils",
    "current_dir",
    "file_encoding",
    "read_lines",
    "write_lines",
]
