# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `TokenScanner`, which groups a raw argument vector into
a flat mapping of command names to the values that followed them.

Scanning Rules:
- A token starting with `--` opens a command context named after the token
  without its prefix, and resets the value accumulator.
- A flag that directly follows another flag is stored as `True` on the spot and
  leaves the open context untouched. The earlier flag is dropped unless the
  scanner was created with `flush_flags=True`.
- The first bare token after a flag is stored as a string; further bare tokens
  before the next flag promote the entry to a list of every value seen.
- Bare tokens that appear before any flag are dropped.

The scanner does not check flags against the registry. It only refuses to run
when the registry is empty.

Example Usage:
    scanner = TokenScanner(registry)
    scanner.scan(["--test1", "SpecialVal"])   # {'test1': 'SpecialVal'}
    scanner.scan(["--hello", "10", "20"])     # {'hello': ['10', '20']}
    scanner.scan(["--flagA", "--flagB"])      # {'flagB': True}
    scanner.scan([])                          # None
"""
from __future__ import annotations

from typing import Sequence, Union

from slimargs.exceptions import InvalidTypeError, NoCommandsRegisteredError
from slimargs.logger import logger
from slimargs.registry import CommandRegistry

LONG_FLAG_PREFIX = "--"

ParsedValue = Union[bool, str, list[str]]
ParsedArguments = dict[str, ParsedValue]


def is_long_flag(token: str) -> bool:
    """Return True if the token introduces a command context."""
    return token.startswith(LONG_FLAG_PREFIX)


class TokenScanner:
    """
    Single-pass scanner turning argument tokens into `ParsedArguments`.

    Args:
        registry (CommandRegistry): Registry that must hold at least one command.
        flush_flags (bool): Record a flag that got no value as `True` instead of
            dropping it when another flag follows or the input ends.
    """

    def __init__(self, registry: CommandRegistry, flush_flags: bool = False) -> None:
        self.registry: CommandRegistry = registry
        self.flush_flags: bool = flush_flags

    def scan(self, tokens: Sequence[str]) -> ParsedArguments | None:
        """
        Scan the tokens from left to right.

        Returns:
            ParsedArguments | None: The mapping, or None when there are no tokens.

        Raises:
            NoCommandsRegisteredError: If no command has been registered.
            InvalidTypeError: If a token is not a string.
        """
        if not self.registry:
            raise NoCommandsRegisteredError(
                "There are no commands, add options with register() before parsing"
            )
        if not tokens:
            logger.debug("No tokens to scan.")
            return None

        result: ParsedArguments = {}
        current_command: str | None = None
        values: list[str] = []
        preceding_was_flag = False

        for position, token in enumerate(tokens):
            if not isinstance(token, str):
                raise InvalidTypeError(
                    f"Token at position {position} must be a string, got {type(token).__name__}"
                )
            if is_long_flag(token):
                values = []
                name = token[len(LONG_FLAG_PREFIX) :]
                if self.flush_flags:
                    if preceding_was_flag and current_command is not None:
                        result[current_command] = True
                    current_command = name
                    preceding_was_flag = True
                elif not preceding_was_flag:
                    current_command = name
                    preceding_was_flag = True
                else:
                    result[name] = True
                continue

            preceding_was_flag = False
            if current_command is None:
                logger.debug("Dropping value '%s' with no command before it.", token)
                continue
            values.append(token)
            if len(values) == 1:
                result[current_command] = token
            else:
                result[current_command] = values

        if self.flush_flags and preceding_was_flag and current_command is not None:
            result[current_command] = True

        unknown = [name for name in result if name not in self.registry]
        if unknown:
            logger.debug("Parsed unregistered commands: %s", unknown)
        return result
