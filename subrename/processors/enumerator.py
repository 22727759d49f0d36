"""Directory listing restricted to regular files."""

import os
from pathlib import Path

from subrename.errors import EnumerationError, InvalidTargetError


# Enumeration stops once this many regular files have been collected
MAX_FILES = 50


def validate_target(path: Path) -> Path:
    """Check that the target exists and is a directory.

    Raises:
        InvalidTargetError: If the path is missing or not a directory.
    """
    if not path.is_dir():
        raise InvalidTargetError(f"'{path}' is not a valid directory.")
    return path


def list_files(path: Path, max_files: int = MAX_FILES) -> list[str]:
    """List the base names of regular files in a directory.

    Entries are collected in directory order until `max_files` regular files
    have been seen, then sorted. Subdirectories, symlinks and special files
    are skipped.

    Args:
        path: Directory to list, already validated.
        max_files: Maximum number of names to collect.

    Returns:
        Sorted list of file names.

    Raises:
        EnumerationError: If the directory or an entry's metadata cannot be read.
    """
    files: list[str] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if not entry.is_file(follow_symlinks=False):
                    continue
                # Names that are not valid UTF-8 decode to lone surrogates; skip them
                try:
                    entry.name.encode("utf-8")
                except UnicodeEncodeError:
                    continue
                files.append(entry.name)
                if len(files) >= max_files:
                    break
    except OSError as e:
        raise EnumerationError(f"Cannot read directory '{path}': {e}") from e

    files.sort()
    return files
