# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Command` dataclass used by `CommandRegistry` to represent a single
declared command-line option.

A `Command` is created only through `CommandRegistry.register()` and is never
mutated afterwards. Its `default` is advisory: the scanner does not fill it in
for commands absent from the input.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Command:
    """
    Represents a declared command-line option.

    Attributes:
        name (str): Unique identifier, matched against `--<name>` tokens.
        shortcut (str): Single-character alias shown as `-<shortcut>`.
        description (str): Help text for the option.
        default (Any): Advisory default value (text, number or boolean).
    """

    name: str
    shortcut: str
    description: str = ""
    default: Any = None

    @property
    def long_flag(self) -> str:
        return f"--{self.name}"

    @property
    def short_flag(self) -> str:
        return f"-{self.shortcut}"

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', shortcut={self.shortcut!r}, "
            f"description='{self.description}')"
        )
