"""Run configuration built once from the command line."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from subrename.models.rename import SubstitutionRule


class Mode(str, Enum):
    """How the pattern and substitution strings are obtained."""

    INTERACTIVE = "interactive"
    NON_INTERACTIVE = "non-interactive"


class RenameConfig(BaseModel):
    """Immutable settings for a single invocation."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Directory whose files are renamed", default=Path("."))
    pattern: str | None = Field(description="Glob pattern selecting files", default=None)
    search: str | None = Field(description="Substring to replace", default=None)
    replacement: str | None = Field(description="Replacement substring", default=None)
    yes: bool = Field(description="Skip the confirmation prompt", default=False)

    @property
    def mode(self) -> Mode:
        """Non-interactive only when pattern, search and replacement were all given.

        Supplying one or two of them still prompts for all three.
        """
        if self.pattern is not None and self.search is not None and self.replacement is not None:
            return Mode.NON_INTERACTIVE
        return Mode.INTERACTIVE

    def substitution(self) -> tuple[str, SubstitutionRule] | None:
        """Return the pattern and substitution rule given on the command line.

        Returns None unless all three were supplied.
        """
        if self.pattern is None or self.search is None or self.replacement is None:
            return None
        return self.pattern, SubstitutionRule(search=self.search, replacement=self.replacement)
