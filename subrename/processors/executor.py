"""Applies a rename plan to the filesystem."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from subrename.models.rename import RenamePlan
from subrename.report import RenameReport


# Consoles for rich output
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


class RenameExecutor:
    """Renames files inside a single directory, one plan entry at a time."""

    def __init__(self, directory: Path) -> None:
        """Initialize the executor.

        Args:
            directory: Directory containing every file named in the plan.
        """
        self.directory = directory

    def _resolve_full_paths(self, plan: RenamePlan) -> list[tuple[Path, Path]]:
        """Resolve plan operations to (source_path, target_path) tuples."""
        return [(self.directory / op.old_name, self.directory / op.new_name) for op in plan.operations]

    def _rename_one(self, source: Path, target: Path) -> None:
        """Rename a single file.

        Raises:
            FileExistsError: If the target already exists.
            OSError: If the underlying rename fails.
        """
        if target.exists() or target.is_symlink():
            raise FileExistsError(f"Target file already exists: {target}")
        source.rename(target)

    def apply(self, plan: RenamePlan) -> RenameReport:
        """Apply every operation in the plan, in order.

        A failed entry is reported and recorded; the remaining entries are
        still attempted.

        Args:
            plan: Rename plan to execute.

        Returns:
            RenameReport with the outcome of every entry.
        """
        report = RenameReport()

        for source, target in self._resolve_full_paths(plan):
            try:
                self._rename_one(source, target)
            except OSError as e:
                err_console.print(f"[red]Failed to rename[/red] {escape(str(source))}: {escape(str(e))}")
                report.add_failure(source, e)
                continue

            console.print(f"Renamed: {escape(str(source))} -> {escape(str(target))}")
            report.add_success(source, target)

        return report
