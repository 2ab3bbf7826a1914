from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from glueconf.constants import CONFIG_ENV_VAR
from glueconf.context import SettingsContext

FIXED_NOW = datetime(2016, 3, 21, 9, 30)

SAMPLE_PROPERTIES = """\
# sample settings
test1=someValue
test2=dsn=test
test3=log_$TIMESTAMP.txt
test4=$PATH/logs
test5=hello $test1
test6=Here is a setting
test7=Select a,b,c,d
    from tableA as A  join tableB as B on A.foo = B.foo
    where something=something

test8=1234
test9=2016-03-21
colors.0=Red
colors.1=Green
"""


@pytest.fixture(autouse=True)
def no_config_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    def _write(content: str, name: str = "config.properties") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config(write_config: Callable[..., Path]) -> Path:
    return write_config(SAMPLE_PROPERTIES)


@pytest.fixture
def ctx(tmp_path: Path) -> SettingsContext:
    return SettingsContext(base_dir=tmp_path, clock=lambda: FIXED_NOW)
