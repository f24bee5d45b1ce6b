"""Errores del Core.

All resolution failures inherit from `BazelifyError` so the CLI can catch
them in one place and map them to exit codes.
"""

from __future__ import annotations


class BazelifyError(Exception):
    """Base exception for every argument/resolution failure."""


class ArgumentInvalid(BazelifyError, ValueError):
    """Raised when the command line is missing a required option or is malformed."""

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument(s) ({argument}): {reason}")


class ExecutableNotFound(BazelifyError):
    """Raised when an explicitly given executable path is not a regular file."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f'No "{name}" found at "{path}"')


class ExecutableUnresolvable(BazelifyError):
    """Raised when no path was given and the search path has no such program."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Could not find "{name}" on your PATH')


class PubspecMissing(BazelifyError):
    """Raised when the package directory has no `pubspec.yaml`."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f'No "pubspec" found at "{path}"')
