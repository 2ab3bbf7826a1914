from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from glueconf.cli import app
from glueconf.constants import CONFIG_ENV_VAR

runner = CliRunner()


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_show(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    write_config("a=hello\nb=$a world\n")
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "a=hello" in result.output
    assert "b=hello world" in result.output


def test_get_with_explicit_config(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    path = write_config("name=Ada\n", name="other.properties")
    result = runner.invoke(app, ["get", "name", "--config", str(path)])
    assert result.exit_code == 0
    assert "Ada" in result.output


def test_get_missing_name(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    write_config("name=Ada\n")
    result = runner.invoke(app, ["get", "nope"])
    assert result.exit_code == 1


def test_set_updates_file(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    path = write_config("x=1\ny=2\n")
    result = runner.invoke(app, ["set", "x", "42"])
    assert result.exit_code == 0
    assert path.read_text(encoding="utf-8") == "x=42\ny=2\n"


def test_set_absent_name(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    path = write_config("x=1\n")
    result = runner.invoke(app, ["set", "z", "1"])
    assert result.exit_code == 0
    assert "nothing saved" in result.output
    assert runner.invoke(app, ["set", "z", "1", "--strict"]).exit_code == 1
    assert path.read_text(encoding="utf-8") == "x=1\n"


def test_check_reports_duplicates(in_tmp: Path, write_config: Callable[..., Path]) -> None:
    write_config("x=1\nx=1\n")
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 1
    assert "duplicate" in result.output


def test_check_missing_file(in_tmp: Path) -> None:
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 1
    assert "Failed to locate config file" in result.output


def test_check_uses_env_override(
    in_tmp: Path, write_config: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    path = write_config("a=1\nb=2\n", name="env.properties")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "2 settings" in result.output
