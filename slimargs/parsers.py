# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse-based parsers for the `slimargs` command-line tool.

The tool itself is a thin driver around `ArgParser`: the tokens it parses for
the user are handed over untouched through `argparse.REMAINDER`.

Key Components:
- `get_root_parser()`: Creates the root-level CLI parser with global options.
- `get_subparsers()`: Attaches the `parse`, `help` and `version` subcommands.
"""
from argparse import REMAINDER, ArgumentParser, _SubParsersAction


def get_root_parser(
    prog: str | None = "slimargs",
    description: str | None = "slimargs - declare commands and parse arguments.",
    exit_on_error: bool = True,
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the slimargs CLI.

    Notes:
        ```
        Includes the following arguments:
            -v / --verbose       : Enable debug logging.
            --log-file PATH      : Append JSON log records to a file.
            --metadata PATH      : Package metadata document for help and version.
        ```
    """
    parser = ArgumentParser(
        prog=prog,
        description=description,
        exit_on_error=exit_on_error,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Append every log record, debug included, to this file as JSON lines.",
    )
    parser.add_argument(
        "--metadata",
        default=None,
        help="Path to the package metadata document (pyproject.toml, package.json).",
    )
    return parser


def get_subparsers(
    parser: ArgumentParser,
    title: str = "slimargs commands",
    description: str | None = "Available commands for the slimargs CLI.",
) -> _SubParsersAction:
    """
    Create the subparsers block and register the slimargs subcommands.

    Raises:
        TypeError: If `parser` is not an instance of `ArgumentParser`.
    """
    if not isinstance(parser, ArgumentParser):
        raise TypeError("parser must be an instance of ArgumentParser")
    subparsers = parser.add_subparsers(
        title=title,
        description=description,
        dest="command",
    )

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse tokens against commands declared in a config file",
        description="Load command declarations and print the parsed tokens as JSON.",
    )
    parse_parser.add_argument("config", help="YAML or TOML file declaring commands")
    parse_parser.add_argument(
        "tokens", nargs=REMAINDER, help="Tokens to parse, e.g. --name value"
    )

    help_parser = subparsers.add_parser(
        "help",
        help="Show the option listing for a config file",
        description="Render the help listing for commands declared in a config file.",
    )
    help_parser.add_argument("config", help="YAML or TOML file declaring commands")

    subparsers.add_parser("version", help="Show the slimargs version")
    return subparsers
