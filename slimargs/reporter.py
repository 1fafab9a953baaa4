# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the help listing and version string for a `CommandRegistry`.

Both reports read the package metadata document on every call, so edits to the
document show up without rebuilding the parser. A missing or unreadable
document raises `MetadataUnreadableError` and nothing is printed.

Help layout:
    usage: <name> [option]

    <description>

    options:
      -s, --test1  Special test string
      -n, --hello  Special test number

Descriptions start at the same column: the longest registered command name plus
the fixed `-x, --` prefix and two spaces of separation.
"""
from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from slimargs.command import Command
from slimargs.console import console as default_console
from slimargs.metadata import PackageMetadata, find_metadata, load_metadata
from slimargs.registry import CommandRegistry


class Reporter:
    """
    Help and version output for the commands of a registry.

    Args:
        registry (CommandRegistry): Commands to list.
        metadata_path (Path | str | None): Metadata document. When None it is
            located with `find_metadata()` at render time.
        package_file (Path | str | None): File of the consuming module, usually
            its `__file__`. The metadata search starts next to it instead of
            in the current directory.
        console (Console | None): Output console, the package console by default.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        metadata_path: Path | str | None = None,
        console: Console | None = None,
        package_file: Path | str | None = None,
    ) -> None:
        self.registry: CommandRegistry = registry
        self.metadata_path: Path | None = Path(metadata_path) if metadata_path else None
        self.package_file: Path | None = Path(package_file) if package_file else None
        self.console: Console = console or default_console

    def read_metadata(self) -> PackageMetadata:
        return load_metadata(self.metadata_path or find_metadata(self.package_file))

    def _format_option(self, command: Command, width: int) -> str:
        flags = f"{command.short_flag}, {command.long_flag:<{width + 2}}"
        return f"  {flags}  {command.description}".rstrip()

    def format_help_lines(self, metadata: PackageMetadata) -> list[str]:
        """Build the help text, one entry per output line."""
        lines = [f"usage: {metadata.name} [option]", ""]
        if metadata.description:
            lines.extend([metadata.description, ""])
        lines.append("options:")
        commands = list(self.registry)
        width = max((len(command.name) for command in commands), default=0)
        lines.extend(self._format_option(command, width) for command in commands)
        return lines

    def format_version(self, metadata: PackageMetadata) -> str:
        return f"v{metadata.version}"

    async def render_help(self) -> None:
        """
        Print the usage line, package description and every registered option.

        Raises:
            MetadataUnreadableError: If the metadata document cannot be read.
        """
        metadata = self.read_metadata()
        for line in self.format_help_lines(metadata):
            self.console.print(escape(line), soft_wrap=True)

    async def render_version(self) -> None:
        """
        Print the package version prefixed with `v`.

        Raises:
            MetadataUnreadableError: If the metadata document cannot be read.
        """
        metadata = self.read_metadata()
        self.console.print(escape(self.format_version(metadata)), soft_wrap=True)
