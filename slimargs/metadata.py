# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""metadata.py
Package metadata lookup used by the help and version reports.

The metadata document is a key-value file providing at least `name` and
`version`, and usually `description`. Supported formats:
- `pyproject.toml`: the `[project]` table, then `[tool.poetry]`, then top level.
- `package.json`: top-level keys.
- `.yaml` / `.yml`: top-level keys.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from slimargs.exceptions import MetadataUnreadableError
from slimargs.logger import logger

METADATA_FILENAMES = ("pyproject.toml", "package.json", "package.yaml")


class PackageMetadata(BaseModel):
    """Name, description and version of the package being described."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str
    description: str = ""
    version: str


def find_metadata(start: Path | str | None = None) -> Path | None:
    """
    Locate the metadata document.

    `SLIMARGS_METADATA` wins when set. Otherwise the first known metadata file
    found in `start` or one of its parents. `start` may be a module file such as
    `__file__`, in which case the search begins in its directory; it defaults to
    the current directory.
    """
    from_env = os.getenv("SLIMARGS_METADATA")
    if from_env:
        return Path(from_env)

    directory = Path(start) if start is not None else Path.cwd()
    if directory.is_file():
        directory = directory.parent
    for candidate_dir in (directory, *directory.parents):
        for filename in METADATA_FILENAMES:
            candidate = candidate_dir / filename
            if candidate.is_file():
                return candidate
    return None


def _select_toml_table(raw: dict[str, Any]) -> dict[str, Any]:
    if isinstance(raw.get("project"), dict):
        return raw["project"]
    poetry = raw.get("tool", {}).get("poetry")
    if isinstance(poetry, dict):
        return poetry
    return raw


def _read_raw(path: Path) -> dict[str, Any]:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as metadata_file:
        if suffix == ".toml":
            raw = _select_toml_table(toml.load(metadata_file))
        elif suffix == ".json":
            raw = json.load(metadata_file)
        elif suffix in (".yaml", ".yml"):
            raw = yaml.safe_load(metadata_file)
        else:
            raise MetadataUnreadableError(f"Unsupported metadata format: {suffix}")
    if not isinstance(raw, dict):
        raise MetadataUnreadableError(
            f"Metadata document {path} must contain a key-value mapping"
        )
    return raw


def load_metadata(path: Path | str | None) -> PackageMetadata:
    """
    Read and validate the metadata document at `path`.

    Raises:
        MetadataUnreadableError: If the file is missing, unreadable, malformed,
            or lacks a required field.
    """
    if path is None:
        raise MetadataUnreadableError("No package metadata document was found")
    path = Path(path)
    if not path.is_file():
        raise MetadataUnreadableError(f"No such metadata file: {path}")

    try:
        raw = _read_raw(path)
    except (OSError, UnicodeDecodeError) as error:
        raise MetadataUnreadableError(f"Cannot read {path}: {error}") from error
    except (toml.TomlDecodeError, json.JSONDecodeError, yaml.YAMLError) as error:
        raise MetadataUnreadableError(f"Cannot parse {path}: {error}") from error

    try:
        metadata = PackageMetadata.model_validate(raw)
    except ValidationError as error:
        raise MetadataUnreadableError(
            f"Invalid package metadata in {path}: {error}"
        ) from error
    logger.debug("Loaded metadata for '%s' from %s", metadata.name, path)
    return metadata
