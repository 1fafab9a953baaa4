# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for slimargs command declarations."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

import toml
import yaml
from pydantic import BaseModel, Field

from slimargs.arg_parser import ArgParser
from slimargs.logger import logger


class RawCommand(BaseModel):
    """Raw command model for slimargs configuration."""

    name: str
    shortcut: str
    description: str | None = None
    default: str | int | float | bool | None = None


class SlimArgsConfig(BaseModel):
    """slimargs configuration model."""

    commands: list[RawCommand] = Field(default_factory=list)
    metadata: str | None = None

    def to_parser(
        self, args: Sequence[str] | None = None, base_dir: Path | None = None
    ) -> ArgParser:
        metadata_path = None
        if self.metadata:
            metadata_path = Path(self.metadata)
            if base_dir and not metadata_path.is_absolute():
                metadata_path = (base_dir / metadata_path).resolve()
        parser = ArgParser(args, metadata_path=metadata_path)
        for raw_command in self.commands:
            parser.add_command(**raw_command.model_dump())
        return parser


def loader(file_path: Path | str, args: Sequence[str] | None = None) -> ArgParser:
    """
    Load command declarations from a YAML or TOML file.

    The file should contain a dictionary with a list of commands. Each command
    is a dictionary with a `name` and a `shortcut`, and optionally a
    `description` and a `default`. An optional top-level `metadata` key points at
    the package metadata document, relative to the config file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).
        args (Sequence[str] | None): Tokens handed to the returned parser.

    Returns:
        ArgParser: A parser with every command registered in file order.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or there is no commands list.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict) or not isinstance(
        raw_config.get("commands"), list
    ):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "commands:\n"
            "  - name: 'verbose'\n"
            "    shortcut: 'v'\n"
            "    description: 'Print more output'"
        )

    config = SlimArgsConfig.model_validate(raw_config)
    logger.debug("Loaded %d command(s) from %s", len(config.commands), path)
    return config.to_parser(args, base_dir=path.parent)
