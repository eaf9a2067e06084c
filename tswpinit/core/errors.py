"""
Scaffold errors.

Every failure aborts the run: nothing here is recovered locally. The CLI
catches ``ScaffoldError`` at the top, prints one line and exits non-zero.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for errors that abort a scaffold run."""


class TargetNotEmptyError(ScaffoldError):
    """The target directory exists and already has entries."""

    def __init__(self, target: object):
        self.target = target
        super().__init__(f"Target folder {target} not empty, aborting...")


class CommandError(ScaffoldError):
    """An external command exited non-zero or could not be spawned."""

    def __init__(self, command: str, detail: str):
        self.command = command
        self.detail = detail
        super().__init__(f"Command failed: {command}\n{detail}")


class FileOperationError(ScaffoldError):
    """A filesystem adapter operation failed."""


class FormatError(ScaffoldError):
    """The external formatter rejected the source."""

    def __init__(self, filepath: str, detail: str):
        self.filepath = filepath
        self.detail = detail
        super().__init__(f"Could not format {filepath}: {detail}")
