"""Caller-owned settings context: load once, then retrieve, bind and persist."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Final, Optional, Union

from glueconf.binding.binder import bind_settings
from glueconf.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE_NAME
from glueconf.errors import SettingsFileNotFoundError
from glueconf.parser import parse_lines
from glueconf.persister import persist_setting
from glueconf.resolver import ResolvedSettings, resolve
from glueconf.utils.file import current_dir, read_lines
from glueconf.utils.time import Clock

logger: Final = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike[str]]


class SettingsContext:
    """Holds the settings of one process.

    Create one at start-up and pass it to whatever needs settings. The
    first successful load is kept for the life of the context: later
    calls return the same mapping, whatever path they are given. Use
    :meth:`reset` (tests only) to force a fresh load.

    Examples:
        ctx = SettingsContext()
        name = ctx.retrieve()["firstName"]
        ctx.bind(self)
        ctx.persist("lastRun", "20240101")
    """

    def __init__(
        self,
        base_dir: Optional[PathLike] = None,
        default_file: str = DEFAULT_CONFIG_FILE_NAME,
        clock: Optional[Clock] = None,
    ):
        """Initialize the context.

        Args:
            base_dir: Execution directory; relative paths and ``$PATH``
                resolve against it (default: the running program's directory)
            default_file: File name used when no path is given
            clock: Source of "now" for ``$TIMESTAMP`` (default: system clock)
        """
        self.base_dir = Path(base_dir) if base_dir is not None else current_dir()
        self.default_file = default_file
        self._clock = clock
        self._settings: Optional[ResolvedSettings] = None
        self._lock = threading.Lock()
        self.load_count = 0

    @property
    def default_path(self) -> Path:
        """Default settings file, unless overridden by ``GLUECONF_CONFIG``."""
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override)
        return self.base_dir / self.default_file

    @property
    def is_loaded(self) -> bool:
        """Whether settings have been loaded and cached."""
        return self._settings is not None

    def locate(self, path: Optional[PathLike] = None) -> Path:
        """Find the settings file, retrying relative to the base directory.

        Raises:
            SettingsFileNotFoundError: If neither location exists
        """
        candidate = Path(path) if path is not None else self.default_path
        if candidate.is_file():
            return candidate
        fallback = self.base_dir / candidate
        if fallback.is_file():
            return fallback
        raise SettingsFileNotFoundError(fallback)

    def retrieve(self, path: Optional[PathLike] = None) -> ResolvedSettings:
        """Return the resolved settings, loading them on first use.

        Args:
            path: Settings file (default: :attr:`default_path`); ignored
                once settings are cached

        Returns:
            Read-only mapping of name to value

        Raises:
            SettingsFileNotFoundError: If the file cannot be found
            DuplicateKeyError: If the file defines a name twice
        """
        settings = self._settings
        if settings is not None:
            return settings
        with self._lock:
            if self._settings is None:
                self._settings = self._load(path)
                self.load_count += 1
            return self._settings

    def _load(self, path: Optional[PathLike]) -> ResolvedSettings:
        located = self.locate(path)
        raw = parse_lines(read_lines(located), located)
        now = self._clock() if self._clock is not None else None
        settings = resolve(raw, self.base_dir, now)
        logger.info("Loaded %d settings from %s", len(settings), located)
        return settings

    def reset(self) -> None:
        """Forget cached settings so the next call loads again."""
        with self._lock:
            self._settings = None

    def bind(self, target: Any, path: Optional[PathLike] = None, strict: bool = False) -> None:
        """Glue settings onto the fields of *target*.

        See :func:`glueconf.binding.bind_settings` for the matching rules.
        """
        bind_settings(target, self.retrieve(path), strict=strict)

    def persist(self, name: str, value: str, strict: bool = False) -> bool:
        """Save one setting back into the default settings file.

        Cached settings are not refreshed.
        """
        return persist_setting(self.default_path, name, value, strict=strict)
