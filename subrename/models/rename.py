"""Rename plan data models."""

from pydantic import BaseModel, ConfigDict, Field


class SubstitutionRule(BaseModel):
    """Literal substring substitution applied to whole file names."""

    model_config = ConfigDict(frozen=True)

    search: str = Field(description="Literal substring to look for")
    replacement: str = Field(description="Literal substring to put in its place", default="")

    def apply(self, name: str) -> str:
        """Replace every non-overlapping occurrence of `search` in a single pass.

        Raises:
            ValueError: If the search string is empty.
        """
        if not self.search:
            raise ValueError("The search string must not be empty.")
        return name.replace(self.search, self.replacement)

    def __str__(self) -> str:
        return f"'{self.search}' -> '{self.replacement}'"


class RenameOp(BaseModel):
    """A single file rename operation within one directory."""

    model_config = ConfigDict(frozen=True)

    old_name: str = Field(description="Original filename (without directory path)")
    new_name: str = Field(description="New filename (without directory path)")

    def __str__(self) -> str:
        return f"RenameOp('{self.old_name}' -> '{self.new_name}')"


class RenamePlan(BaseModel):
    """Ordered rename operations to perform."""

    operations: list[RenameOp] = Field(
        description="List of rename operations to perform, in execution order",
        default_factory=list,
    )

    def __len__(self) -> int:
        return len(self.operations)

    def pairs(self) -> list[tuple[str, str]]:
        """Return the plan as (old, new) name pairs."""
        return [(op.old_name, op.new_name) for op in self.operations]
