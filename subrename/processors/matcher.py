"""Glob pattern compilation and full-name matching."""

import fnmatch
import re
from dataclasses import dataclass, field

from subrename.errors import PatternSyntaxError


def _validate(pattern: str) -> None:
    """Reject malformed glob syntax.

    Raises:
        PatternSyntaxError: On an unterminated character class, a run of three
            or more `*` wildcards, or a `**` that is not the whole pattern.
    """
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*":
            run = len(pattern[i:]) - len(pattern[i:].lstrip("*"))
            if run > 2:
                raise PatternSyntaxError(f"Invalid pattern '{pattern}': wildcards are either '*' or '**'.")
            if run == 2 and pattern != "**":
                raise PatternSyntaxError(f"Invalid pattern '{pattern}': '**' must be the whole pattern.")
            i += run
            continue
        if char == "[":
            # A `]` directly after `[` or `[!` is a literal member of the class
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise PatternSyntaxError(f"Invalid pattern '{pattern}': unterminated character class at {i}.")
            i = close + 1
            continue
        i += 1


@dataclass(frozen=True)
class GlobPattern:
    """A validated glob pattern matched against whole, case-sensitive names."""

    source: str
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _validate(self.source)
        object.__setattr__(self, "_regex", re.compile(fnmatch.translate(self.source)))

    def matches(self, name: str) -> bool:
        return self._regex.match(name) is not None

    def filter(self, names: list[str]) -> list[str]:
        """Return the names matching the pattern, in their original order."""
        return [name for name in names if self.matches(name)]


def compile_pattern(pattern: str) -> GlobPattern:
    """Compile a glob pattern.

    Raises:
        PatternSyntaxError: If the pattern is malformed.
    """
    return GlobPattern(pattern)
