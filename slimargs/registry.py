# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandRegistry`, the owned collection of declared
commands that `TokenScanner` and `Reporter` read from.

Registration validates every field before touching the registry, so a failed
`register()` call leaves previously registered commands intact.

Validation Rules:
- `name` must be present (not `None`, not empty) and a string.
- `shortcut` is required and must be a single-character string.
- `description` may be omitted; when given it must be a string.
- No two commands may share a `name`, and no two may share a `shortcut`.

Example Usage:
    registry = CommandRegistry()
    registry.register("test1", shortcut="s", description="Special test string")
    registry.register("hello", shortcut="n", default=10)

    "hello" in registry  # True
    registry.names()     # ['test1', 'hello']
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping

from slimargs.command import Command
from slimargs.exceptions import (
    DuplicateNameError,
    DuplicateShortcutError,
    InvalidTypeError,
    MissingNameError,
)
from slimargs.logger import logger


class CommandRegistry:
    """
    Append-only collection of `Command` objects keyed by name.

    Commands keep their registration order, which is the order used for help
    rendering. The registry is meant to be populated by its owner before any
    parse call and only read afterwards.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._shortcuts: dict[str, Command] = {}

    def _validate_name(self, name: Any) -> str:
        if name is None or name == "":
            raise MissingNameError("You must name your command")
        if not isinstance(name, str):
            raise InvalidTypeError(
                f"name param must be a string, got {type(name).__name__}"
            )
        return name

    def _validate_shortcut(self, shortcut: Any) -> str:
        if not isinstance(shortcut, str):
            raise InvalidTypeError(
                f"shortcut param must be a string, got {type(shortcut).__name__}"
            )
        if len(shortcut) != 1:
            raise InvalidTypeError(
                f"shortcut param must be a single character, got '{shortcut}'"
            )
        return shortcut

    def _validate_description(self, description: Any) -> str:
        if description is None:
            return ""
        if not isinstance(description, str):
            raise InvalidTypeError(
                f"description param must be a string, got {type(description).__name__}"
            )
        return description

    def _check_conflicts(self, name: str, shortcut: str) -> None:
        if name in self._commands:
            raise DuplicateNameError(f"The name '{name}' already exists")
        if shortcut in self._shortcuts:
            existing = self._shortcuts[shortcut]
            raise DuplicateShortcutError(
                f"The shortcut '{shortcut}' already exists (used by '{existing.name}')"
            )

    def register(
        self,
        name: str,
        shortcut: str | None = None,
        description: str | None = None,
        default: Any = None,
    ) -> Command:
        """
        Declare a new command.

        Args:
            name (str): Unique command name, matched against `--<name>` tokens.
            shortcut (str): Single-character alias, required.
            description (str | None): Optional help text.
            default (Any): Advisory default value, never applied by the scanner.

        Returns:
            Command: The stored command.

        Raises:
            MissingNameError: If `name` is absent.
            InvalidTypeError: If `name` or `description` is malformed, or if
                `shortcut` is missing or not a single character.
            DuplicateNameError: If a command with the same name exists.
            DuplicateShortcutError: If a command with the same shortcut exists.
        """
        name = self._validate_name(name)
        shortcut = self._validate_shortcut(shortcut)
        description = self._validate_description(description)
        self._check_conflicts(name, shortcut)

        command = Command(
            name=name,
            shortcut=shortcut,
            description=description,
            default=default,
        )
        self._commands[name] = command
        self._shortcuts[shortcut] = command
        logger.debug("Registered command %s", command)
        return command

    def register_options(self, name: str, options: Mapping[str, Any]) -> Command:
        """Declare a command from a mapping of `shortcut`, `description` and `default`."""
        if not isinstance(options, Mapping):
            raise InvalidTypeError(
                f"options must be a mapping, got {type(options).__name__}"
            )
        return self.register(
            name,
            shortcut=options.get("shortcut"),
            description=options.get("description"),
            default=options.get("default"),
        )

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def get_by_shortcut(self, shortcut: str) -> Command | None:
        return self._shortcuts.get(shortcut)

    def names(self) -> list[str]:
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __bool__(self) -> bool:
        return bool(self._commands)

    def __str__(self) -> str:
        return f"CommandRegistry(commands={len(self._commands)}, shortcuts={len(self._shortcuts)})"

    def __repr__(self) -> str:
        return str(self)
