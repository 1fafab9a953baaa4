"""
Slimargs Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from slimargs.config import loader
from slimargs.console import console
from slimargs.exceptions import SlimArgsError
from slimargs.logger import logger
from slimargs.parsers import get_root_parser, get_subparsers
from slimargs.utils import setup_logging
from slimargs.version import __version__


def run_command(cli_args: Namespace) -> int:
    if cli_args.command == "version":
        console.print(f"slimargs v{__version__}")
        return 0

    parser = loader(cli_args.config, args=getattr(cli_args, "tokens", []))
    if cli_args.metadata:
        parser.reporter.metadata_path = Path(cli_args.metadata)

    if cli_args.command == "parse":
        parsed = parser.parse()
        console.print_json(json.dumps(parsed or {}))
    elif cli_args.command == "help":
        asyncio.run(parser.help())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    root_parser = get_root_parser()
    get_subparsers(root_parser)
    cli_args = root_parser.parse_args(argv)

    setup_logging(verbose=cli_args.verbose, log_file=cli_args.log_file)

    if not cli_args.command:
        root_parser.print_help()
        return 1

    try:
        return run_command(cli_args)
    except (SlimArgsError, OSError, ValueError) as error:
        logger.error("slimargs %s failed: %s", cli_args.command, error)
        console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
