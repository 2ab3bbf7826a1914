from datetime import datetime
from pathlib import Path

import pytest

from glueconf.resolver import clean_value, resolve, substitute_references

NOW = datetime(2024, 7, 4, 12, 0)
BASE = Path("/opt/app")


def test_reference_to_other_entry() -> None:
    settings = resolve({"a": "hello", "b": "$a world"}, BASE, NOW)
    assert settings["b"] == "hello world"


def test_references_are_not_chained() -> None:
    raw = {"a": "hello", "b": "$a", "c": "[$b]"}
    settings = resolve(raw, BASE, NOW)
    assert settings["b"] == "hello"
    assert settings["c"] == "[$a]"


def test_longest_name_wins() -> None:
    raw = {"a": "short", "ab": "long", "c": "$ab/$a"}
    assert resolve(raw, BASE, NOW)["c"] == "long/short"


def test_unknown_reference_is_left_alone() -> None:
    assert resolve({"a": "cost $5"}, BASE, NOW)["a"] == "cost $5"


def test_self_reference_is_not_substituted() -> None:
    assert substitute_references("a", "x $a", {"a": "x $a"}) == "x $a"


def test_builtin_tokens() -> None:
    settings = resolve({"log": "$PATH/log_$TIMESTAMP.txt"}, BASE, NOW)
    assert settings["log"] == f"{BASE}/log_20240704.txt"


def test_entry_named_like_builtin_takes_precedence() -> None:
    settings = resolve({"PATH": "/custom", "dir": "$PATH"}, BASE, NOW)
    assert settings["dir"] == "/custom"


def test_timestamp_defaults_to_today() -> None:
    settings = resolve({"stamp": "$TIMESTAMP"}, BASE)
    assert settings["stamp"] == datetime.now().strftime("%Y%m%d")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("  padded  ", "padded"),
        ("a\tb", "a b"),
        ("a\r\nb", "a  b"),
    ],
)
def test_clean_value(value: str, expected: str) -> None:
    assert clean_value(value) == expected


def test_result_is_read_only() -> None:
    settings = resolve({"a": "1"}, BASE, NOW)
    with pytest.raises(TypeError):
        settings["a"] = "2"  # type: ignore[index]
