import pytest

from glueconf.errors import DuplicateKeyError
from glueconf.parser import is_comment, is_new_entry, parse_lines


def test_simple_entries_keep_file_order() -> None:
    raw = parse_lines(["b=2\n", "a=1\n"])
    assert list(raw.items()) == [("b", "2"), ("a", "1")]


def test_value_keeps_everything_after_first_equals() -> None:
    assert parse_lines(["test2=dsn=test"]) == {"test2": "dsn=test"}


def test_value_is_not_trimmed() -> None:
    assert parse_lines(["name = value  "]) == {"name": " value  "}


def test_comment_lines_are_dropped() -> None:
    raw = parse_lines(["# a comment", "   # indented comment", "a=1"])
    assert raw == {"a": "1"}


def test_hash_inside_value_is_kept() -> None:
    assert parse_lines(["colors.one=#FF0000;"]) == {"colors.one": "#FF0000;"}


def test_continuation_lines_join_with_single_space() -> None:
    raw = parse_lines(["q=Select a,b", "   from t"])
    assert raw == {"q": "Select a,b from t"}


def test_tab_indented_continuation() -> None:
    raw = parse_lines(["q=Select a,b", "\tfrom t"])
    assert raw == {"q": "Select a,b from t"}


def test_two_space_indent_is_not_a_continuation() -> None:
    raw = parse_lines(["q=Select a,b", "  from t"])
    assert raw == {"q": "Select a,b"}


def test_blank_line_closes_entry() -> None:
    raw = parse_lines(["q=first", "", "   orphan", "r=second"])
    assert raw == {"q": "first", "r": "second"}


def test_comment_between_continuation_lines_is_skipped() -> None:
    raw = parse_lines(["q=a", "   b", "# note", "   c"])
    assert raw == {"q": "a b c"}


def test_line_terminators_are_stripped() -> None:
    raw = parse_lines(["a=1\r\n", "   more\r\n", "b=2\n"])
    assert raw == {"a": "1 more", "b": "2"}


@pytest.mark.parametrize("line", ["empty=", "empty=   ", "has space=value", "no equals"])
def test_lines_that_are_not_entries_are_ignored(line: str) -> None:
    assert parse_lines([line, "a=1"]) == {"a": "1"}


def test_duplicate_name_fails(tmp_path) -> None:
    source = tmp_path / "config.properties"
    with pytest.raises(DuplicateKeyError) as exc_info:
        parse_lines(["x=1", "x=1"], source)
    assert exc_info.value.name == "x"
    assert exc_info.value.path == source
    assert str(source) in str(exc_info.value)


def test_empty_file() -> None:
    assert parse_lines([]) == {}


def test_line_helpers() -> None:
    assert is_comment("  # hi") is True
    assert is_comment("a=#1") is False
    assert is_new_entry("a=1") is True
    assert is_new_entry("   a=1") is False
