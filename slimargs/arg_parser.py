# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgParser`, the facade most callers use. It owns one
`CommandRegistry`, one `TokenScanner` and one `Reporter`, and holds the argument
vector it was given at construction.

Public Interface:
- `add_command(...)`: Declare a command with shortcut, description and default.
- `parse()`: Scan the injected tokens into a `dict`, or None for no tokens.
- `help()`: Print the option listing with package name and description.
- `version()`: Print the package version.

Example Usage:
    parser = ArgParser(["--test1", "SpecialVal", "--hello", "10", "20"])
    parser.add_command("test1", shortcut="s", description="Special test string")
    parser.add_command("hello", shortcut="n", description="Special test number")

    parser.parse()
    # {'test1': 'SpecialVal', 'hello': ['10', '20']}

    await parser.help()
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Sequence

from rich.console import Console

from slimargs.command import Command
from slimargs.registry import CommandRegistry
from slimargs.reporter import Reporter
from slimargs.scanner import ParsedArguments, TokenScanner


class ArgParser:
    """
    Declare commands and parse an argument vector against them.

    Args:
        args (Sequence[str] | None): Tokens to parse. `sys.argv[1:]` is captured
            once when omitted.
        metadata_path (Path | str | None): Package metadata document for
            `help()` and `version()`.
        console (Console | None): Console used by the reports.
        flush_flags (bool): Record value-less flags as `True` instead of
            dropping them. See `TokenScanner`.
        package_file (Path | str | None): The calling module's `__file__`; the
            metadata document is searched from its directory upwards.
    """

    def __init__(
        self,
        args: Sequence[str] | None = None,
        metadata_path: Path | str | None = None,
        console: Console | None = None,
        flush_flags: bool = False,
        package_file: Path | str | None = None,
    ) -> None:
        self.args: list[str] = list(sys.argv[1:] if args is None else args)
        self.registry: CommandRegistry = CommandRegistry()
        self.scanner: TokenScanner = TokenScanner(self.registry, flush_flags=flush_flags)
        self.reporter: Reporter = Reporter(
            self.registry,
            metadata_path=metadata_path,
            console=console,
            package_file=package_file,
        )
        self.parsed_args: ParsedArguments | None = None

    @property
    def commands(self) -> list[Command]:
        return list(self.registry)

    def add_command(
        self,
        name: str,
        shortcut: str | None = None,
        description: str | None = None,
        default: Any = None,
    ) -> Command:
        """
        Declare a command. `shortcut` is required.

        See `CommandRegistry.register()` for the errors raised.
        """
        return self.registry.register(
            name, shortcut=shortcut, description=description, default=default
        )

    def parse(self) -> ParsedArguments | None:
        """Parse the tokens given at construction."""
        self.parsed_args = self.scanner.scan(self.args)
        return self.parsed_args

    async def help(self) -> None:
        await self.reporter.render_help()

    async def version(self) -> None:
        await self.reporter.render_version()

    def __str__(self) -> str:
        return f"ArgParser(args={len(self.args)}, commands={len(self.registry)})"

    def __repr__(self) -> str:
        return str(self)
