import json
import logging

import pytest
from rich.logging import RichHandler

from slimargs.utils import resolve_log_mode, running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    monkeypatch.delenv("SLIMARGS_LOG_MODE", raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli():
    setup_logging(mode="cli")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.handlers[0].level == logging.WARNING


def test_setup_logging_verbose():
    setup_logging(verbose=True, mode="cli")
    assert logging.getLogger().handlers[0].level == logging.DEBUG


def test_setup_logging_log_file(tmp_path):
    log_file = tmp_path / "slimargs.log"
    setup_logging(log_file=log_file, mode="cli")

    root = logging.getLogger()
    assert len(root.handlers) == 2
    logging.getLogger("slimargs").debug("scanned %d tokens", 3)
    for handler in root.handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text(encoding="UTF-8").splitlines()]
    assert {"name": "slimargs", "levelname": "DEBUG", "message": "scanned 3 tokens"}.items() <= records[-1].items()


def test_setup_logging_mode_from_env(monkeypatch):
    monkeypatch.setenv("SLIMARGS_LOG_MODE", "json")
    setup_logging()

    root = logging.getLogger()
    assert not isinstance(root.handlers[0], RichHandler)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


def test_resolve_log_mode_invalid_env(monkeypatch):
    monkeypatch.setenv("SLIMARGS_LOG_MODE", "xml")
    with pytest.raises(ValueError, match="Invalid log mode"):
        resolve_log_mode()


def test_running_in_container(tmp_path):
    cgroup = tmp_path / "cgroup"
    cgroup.write_text("0::/system.slice/docker-abc123.scope\n", encoding="UTF-8")
    assert running_in_container(cgroup) is True

    cgroup.write_text("0::/init.scope\n", encoding="UTF-8")
    assert running_in_container(cgroup) is False
    assert running_in_container(tmp_path / "missing") is False
