# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py
Log handler setup for the `slimargs` command-line tool."""
from __future__ import annotations

import logging
import os
from pathlib import Path

import pythonjsonlogger.json
from rich.console import Console
from rich.logging import RichHandler

from slimargs.logger import logger

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_MODES = ("cli", "json")


def running_in_container(cgroup_path: Path = Path("/proc/1/cgroup")) -> bool:
    """Return True when PID 1 belongs to a container runtime's cgroup."""
    try:
        content = cgroup_path.read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def resolve_log_mode(mode: str | None = None) -> str:
    """Pick the console log mode: explicit, `SLIMARGS_LOG_MODE`, then auto-detect."""
    mode = mode or os.getenv("SLIMARGS_LOG_MODE")
    if not mode:
        return "json" if running_in_container() else "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")
    return mode


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    return handler


def setup_logging(
    verbose: bool = False,
    log_file: Path | str | None = None,
    mode: str | None = None,
) -> None:
    """
    Install the log handlers used by the `slimargs` command.

    Library modules only log through the "slimargs" logger and never configure
    handlers; the CLI entry point calls this once per run.

    Console records go to stderr so that `slimargs parse` output on stdout stays
    valid JSON. Only warnings and errors are shown unless `verbose` (`-v`) is
    set, in which case registration, config loading and scanning debug records
    are shown too. Rich renders them in "cli" mode; "json" mode writes one JSON
    object per record for log collectors and is the default inside containers.

    `log_file` (`--log-file`) appends every record, DEBUG included, to a JSON
    lines file regardless of `verbose`.

    Raises:
        ValueError: If `mode` (or `SLIMARGS_LOG_MODE`) is not "cli" or "json".
    """
    mode = resolve_log_mode(mode)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_handler = _console_handler(mode)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        root.addHandler(file_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logger.debug("Logging initialized in '%s' mode (verbose=%s).", mode, verbose)
