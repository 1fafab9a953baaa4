from io import StringIO

import pytest
from rich.console import Console

from slimargs.registry import CommandRegistry


@pytest.fixture
def output():
    return StringIO()


@pytest.fixture
def console(output):
    return Console(file=output, width=200, color_system=None, highlight=False)


@pytest.fixture
def registry():
    registry = CommandRegistry()
    registry.register("test1", shortcut="s", description="Special test string")
    registry.register("hello", shortcut="n", description="Special test number")
    registry.register("verbose", shortcut="v", description="Print more output")
    return registry


@pytest.fixture
def pyproject(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text(
        "[project]\n"
        'name = "demo-tool"\n'
        'description = "Demo tool for [bold]testing[/bold]"\n'
        'version = "1.2.3"\n',
        encoding="UTF-8",
    )
    return path


@pytest.fixture(autouse=True)
def no_metadata_env(monkeypatch):
    monkeypatch.delenv("SLIMARGS_METADATA", raising=False)
