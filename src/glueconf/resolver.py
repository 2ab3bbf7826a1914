"""Resolve ``$name`` references and builtin tokens in parsed values."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from glueconf.constants import (
    LINE_BREAK_PATTERN,
    PATH_TOKEN,
    REFERENCE_PREFIX,
    TIMESTAMP_TOKEN,
)
from glueconf.utils.time import TimeUtils

ResolvedSettings = Mapping[str, str]


def _reference_pattern(names: list[str]) -> Optional[re.Pattern[str]]:
    if not names:
        return None
    # longest first so $ab is not taken as $a followed by "b"
    alternatives = "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))
    return re.compile(re.escape(REFERENCE_PREFIX) + f"({alternatives})")


def substitute_references(name: str, value: str, raw: Mapping[str, str]) -> str:
    """Replace ``$other`` with the raw value of every other entry.

    Substitution is a single sweep: inserted values are never scanned
    again, so references are not chained.
    """
    if REFERENCE_PREFIX not in value:
        return value
    pattern = _reference_pattern([other for other in raw if other != name])
    if pattern is None:
        return value
    return pattern.sub(lambda m: raw[m.group(1)], value)


def substitute_builtins(value: str, base_dir: Path, now: Optional[datetime] = None) -> str:
    """Expand ``$PATH`` and ``$TIMESTAMP``."""
    if REFERENCE_PREFIX not in value:
        return value
    return value.replace(PATH_TOKEN, str(base_dir)).replace(
        TIMESTAMP_TOKEN, TimeUtils.timestamp_token(now)
    )


def clean_value(value: str) -> str:
    """Collapse leftover line breaks and tabs, then trim."""
    return LINE_BREAK_PATTERN.sub(" ", value).strip()


def resolve(
    raw: Mapping[str, str], base_dir: Path, now: Optional[datetime] = None
) -> ResolvedSettings:
    """Build the final read-only settings mapping.

    Args:
        raw: Parser output, name to raw value
        base_dir: Directory that ``$PATH`` expands to
        now: Moment ``$TIMESTAMP`` expands to (default: current time)

    Returns:
        Immutable mapping of name to resolved value, in file order
    """
    now = now or TimeUtils.now_localized()
    resolved: dict[str, str] = {}
    for name, value in raw.items():
        value = substitute_references(name, value, raw)
        value = substitute_builtins(value, base_dir, now)
        resolved[name] = clean_value(value)
    return MappingProxyType(resolved)
