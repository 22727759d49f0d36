"""Tally of per-entry rename outcomes."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class RenameReport:
    """Tracks successes and failures across a rename batch."""

    renamed: list[tuple[Path, Path]] = field(default_factory=list)
    failed: list[tuple[Path, OSError]] = field(default_factory=list)

    def add_success(self, source: Path, target: Path) -> None:
        self.renamed.append((source, target))

    def add_failure(self, source: Path, error: OSError) -> None:
        self.failed.append((source, error))

    @property
    def attempted(self) -> int:
        """Number of entries processed, successful or not."""
        return len(self.renamed) + len(self.failed)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)

    def summary(self) -> str:
        """Return a one-line human-readable summary."""
        if not self.failed:
            return f"Renamed {len(self.renamed)} file(s)."
        return f"Renamed {len(self.renamed)} of {self.attempted} file(s), {len(self.failed)} failed."
