# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by slimargs.

These exceptions provide structured error handling for the failure cases of
command registration, token scanning, and metadata-backed reporting.

All exceptions inherit from `SlimArgsError`, the base exception for the package.

Exception Hierarchy:
- SlimArgsError
    ├── MissingNameError
    ├── InvalidTypeError
    ├── CommandConflictError
    │     ├── DuplicateNameError
    │     └── DuplicateShortcutError
    ├── NoCommandsRegisteredError
    └── MetadataUnreadableError

None of these are recovered internally. They propagate to the immediate caller,
which is expected to abort the current command-line invocation.
"""


class SlimArgsError(Exception):
    """Base exception for slimargs."""


class MissingNameError(SlimArgsError):
    """Exception raised when a command is registered without a name."""


class InvalidTypeError(SlimArgsError, TypeError):
    """Exception raised when a command field has the wrong type or shape."""


class CommandConflictError(SlimArgsError):
    """Exception raised when a command clashes with one already registered."""


class DuplicateNameError(CommandConflictError):
    """Exception raised when a command with the same name already exists."""


class DuplicateShortcutError(CommandConflictError):
    """Exception raised when a command with the same shortcut already exists."""


class NoCommandsRegisteredError(SlimArgsError):
    """Exception raised when parsing is attempted against an empty registry."""


class MetadataUnreadableError(SlimArgsError):
    """Exception raised when the package metadata document cannot be read."""
