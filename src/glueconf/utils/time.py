"""Time and date handling utilities."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from glueconf.constants import TIMESTAMP_FORMAT

Clock = Callable[[], datetime]


class TimeUtils:
    """Time-related utility functions."""

    @staticmethod
    def now_localized() -> datetime:
        """Get current datetime with local timezone.

        Returns:
            Current datetime with local timezone
        """
        return datetime.now().astimezone()

    @staticmethod
    def timestamp_token(now: datetime | None = None) -> str:
        """Format a date the way ``$TIMESTAMP`` expands.

        Args:
            now: Moment to format (default: current local time)

        Returns:
            Date as ``YYYYMMDD``
        """
        return (now or TimeUtils.now_localized()).strftime(TIMESTAMP_FORMAT)
