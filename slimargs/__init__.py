"""
Slimargs Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg_parser import ArgParser
from .command import Command
from .logger import logger
from .registry import CommandRegistry
from .reporter import Reporter
from .scanner import ParsedArguments, TokenScanner

__all__ = [
    "ArgParser",
    "Command",
    "CommandRegistry",
    "ParsedArguments",
    "Reporter",
    "TokenScanner",
]
