"""Fatal error kinds raised at pipeline stage boundaries."""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of failures that stop the whole run."""

    INVALID_TARGET = "invalid_target"
    ENUMERATION_IO = "enumeration_io"
    PATTERN_SYNTAX = "pattern_syntax"


class RenameError(Exception):
    """Base class for errors that abort the run before any rename happens."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidTargetError(RenameError):
    """Target path does not exist or is not a directory."""

    kind = ErrorKind.INVALID_TARGET


class EnumerationError(RenameError):
    """Directory or entry metadata could not be read."""

    kind = ErrorKind.ENUMERATION_IO


class PatternSyntaxError(RenameError):
    """Glob pattern is malformed."""

    kind = ErrorKind.PATTERN_SYNTAX
