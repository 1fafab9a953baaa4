import json
import logging

import pytest

from slimargs.__main__ import main
from slimargs.parsers import get_root_parser, get_subparsers
from slimargs.version import __version__


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    """setup_logging() replaces the root handlers; put them back afterwards."""
    monkeypatch.setenv("SLIMARGS_LOG_MODE", "cli")
    monkeypatch.delenv("SLIMARGS_METADATA", raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def config_file(tmp_path):
    (tmp_path / "package.json").write_text(
        '{"name": "demo", "description": "Demo tool", "version": "3.1.4"}',
        encoding="UTF-8",
    )
    path = tmp_path / "commands.yaml"
    path.write_text(
        "metadata: package.json\n"
        "commands:\n"
        "  - name: test1\n    shortcut: s\n    description: Special test string\n"
        "  - name: hello\n    shortcut: n\n    description: Special test number\n",
        encoding="UTF-8",
    )
    return path


def test_subparsers():
    parser = get_root_parser()
    get_subparsers(parser)

    args = parser.parse_args(["-v", "parse", "commands.yaml", "--hello", "10", "20"])
    assert args.verbose is True
    assert args.command == "parse"
    assert args.config == "commands.yaml"
    assert args.tokens == ["--hello", "10", "20"]


def test_get_subparsers_type_error():
    with pytest.raises(TypeError):
        get_subparsers("not a parser")


def test_main_parse(config_file, capsys):
    assert main(["parse", str(config_file), "--hello", "10", "20", "--test1", "x"]) == 0

    captured = capsys.readouterr()
    assert json.loads(captured.out) == {"hello": ["10", "20"], "test1": "x"}


def test_main_parse_without_tokens(config_file, capsys):
    assert main(["parse", str(config_file)]) == 0

    captured = capsys.readouterr()
    assert json.loads(captured.out) == {}


def test_main_help(config_file, capsys):
    assert main(["help", str(config_file)]) == 0

    captured = capsys.readouterr()
    assert "usage: demo [option]" in captured.out
    assert "  -s, --test1  Special test string" in captured.out
    assert "  -n, --hello  Special test number" in captured.out


def test_main_help_missing_metadata(config_file, tmp_path, capsys):
    missing = tmp_path / "missing.toml"
    assert main(["--metadata", str(missing), "help", str(config_file)]) == 1

    captured = capsys.readouterr()
    assert "No such metadata file" in captured.out


def test_main_missing_config(tmp_path, capsys):
    assert main(["parse", str(tmp_path / "nope.yaml")]) == 1

    captured = capsys.readouterr()
    assert "No such config file" in captured.out


def test_main_version(capsys):
    assert main(["version"]) == 0

    captured = capsys.readouterr()
    assert f"slimargs v{__version__}" in captured.out


def test_main_without_command(capsys):
    assert main([]) == 1

    captured = capsys.readouterr()
    assert "usage: slimargs" in captured.out


def test_main_log_file(config_file, tmp_path, capsys):
    log_file = tmp_path / "run.log"
    assert main(["--log-file", str(log_file), "parse", str(config_file), "--hello", "10"]) == 0

    captured = capsys.readouterr()
    assert json.loads(captured.out) == {"hello": "10"}
    messages = [
        json.loads(line)["message"]
        for line in log_file.read_text(encoding="UTF-8").splitlines()
    ]
    assert any(message.startswith("Loaded 2 command(s)") for message in messages)


def test_main_verbose_keeps_stdout_json(config_file, capsys):
    assert main(["-v", "parse", str(config_file), "--test1", "x"]) == 0

    captured = capsys.readouterr()
    assert json.loads(captured.out) == {"test1": "x"}
    assert "Registered command" in captured.err
