"""Unit tests for RenameExecutor."""

from pathlib import Path
from unittest.mock import patch

import pytest

from subrename.models.rename import RenameOp, RenamePlan
from subrename.processors.executor import RenameExecutor


@pytest.fixture
def two_file_plan():
    """Plan renaming two files."""
    return RenamePlan(
        operations=[
            RenameOp(old_name="file1.txt", new_name="renamed1.txt"),
            RenameOp(old_name="file2.txt", new_name="renamed2.txt"),
        ]
    )


class TestRenameExecutor:
    """Tests for RenameExecutor class."""

    def test_init(self, tmp_path):
        """Test executor initialization."""
        executor = RenameExecutor(directory=tmp_path)

        assert executor.directory == tmp_path

    def test_resolve_full_paths(self, two_file_plan):
        """Test resolving plan operations to paths inside the directory."""
        executor = RenameExecutor(directory=Path("/docs"))

        resolved = executor._resolve_full_paths(two_file_plan)

        assert resolved == [
            (Path("/docs/file1.txt"), Path("/docs/renamed1.txt")),
            (Path("/docs/file2.txt"), Path("/docs/renamed2.txt")),
        ]

    def test_apply_renames_files(self, tmp_path, two_file_plan):
        """Test that apply actually renames files."""
        (tmp_path / "file1.txt").touch()
        (tmp_path / "file2.txt").touch()

        report = RenameExecutor(tmp_path).apply(two_file_plan)

        assert not (tmp_path / "file1.txt").exists()
        assert not (tmp_path / "file2.txt").exists()
        assert (tmp_path / "renamed1.txt").exists()
        assert (tmp_path / "renamed2.txt").exists()
        assert len(report.renamed) == 2
        assert not report.has_failures

    def test_apply_preserves_content(self, tmp_path):
        """Test that the renamed file keeps its content."""
        (tmp_path / "a.txt").write_text("payload")
        plan = RenamePlan(operations=[RenameOp(old_name="a.txt", new_name="b.txt")])

        RenameExecutor(tmp_path).apply(plan)

        assert (tmp_path / "b.txt").read_text() == "payload"

    def test_empty_plan(self, tmp_path):
        """Test that an empty plan touches nothing."""
        report = RenameExecutor(tmp_path).apply(RenamePlan())

        assert report.attempted == 0


class TestRenameExecutorFailures:
    """Tests for per-entry failure handling."""

    def test_existing_target_is_reported_and_batch_continues(self, tmp_path):
        """Test that a collision fails one entry without stopping the rest."""
        (tmp_path / "a_old.txt").write_text("a")
        (tmp_path / "a_new.txt").write_text("existing")
        (tmp_path / "b_old.txt").write_text("b")
        plan = RenamePlan(
            operations=[
                RenameOp(old_name="a_old.txt", new_name="a_new.txt"),
                RenameOp(old_name="b_old.txt", new_name="b_new.txt"),
            ]
        )

        report = RenameExecutor(tmp_path).apply(plan)

        assert report.has_failures
        assert len(report.failed) == 1
        failed_source, error = report.failed[0]
        assert failed_source == tmp_path / "a_old.txt"
        assert isinstance(error, FileExistsError)
        # Existing target is untouched
        assert (tmp_path / "a_new.txt").read_text() == "existing"
        assert (tmp_path / "a_old.txt").exists()
        # Later entry still processed
        assert (tmp_path / "b_new.txt").read_text() == "b"

    def test_missing_source_is_reported(self, tmp_path):
        """Test that a vanished source surfaces as a per-entry error."""
        plan = RenamePlan(operations=[RenameOp(old_name="gone.txt", new_name="new.txt")])

        report = RenameExecutor(tmp_path).apply(plan)

        assert len(report.failed) == 1
        assert isinstance(report.failed[0][1], FileNotFoundError)

    def test_two_entries_targeting_same_name(self, tmp_path):
        """Test that the second rename onto an already-created name fails."""
        (tmp_path / "x-1.txt").touch()
        (tmp_path / "x_1.txt").touch()
        plan = RenamePlan(
            operations=[
                RenameOp(old_name="x-1.txt", new_name="x1.txt"),
                RenameOp(old_name="x_1.txt", new_name="x1.txt"),
            ]
        )

        report = RenameExecutor(tmp_path).apply(plan)

        assert len(report.renamed) == 1
        assert len(report.failed) == 1
        assert (tmp_path / "x_1.txt").exists()

    def test_os_error_from_rename(self, tmp_path):
        """Test that an arbitrary OSError from the rename is caught per entry."""
        (tmp_path / "a.txt").touch()
        (tmp_path / "b.txt").touch()
        plan = RenamePlan(
            operations=[
                RenameOp(old_name="a.txt", new_name="c.txt"),
                RenameOp(old_name="b.txt", new_name="d.txt"),
            ]
        )
        original_rename = Path.rename
        calls = []

        def flaky_rename(self, target):
            calls.append(self.name)
            if self.name == "a.txt":
                raise PermissionError("Permission denied")
            return original_rename(self, target)

        with patch.object(Path, "rename", flaky_rename):
            report = RenameExecutor(tmp_path).apply(plan)

        assert calls == ["a.txt", "b.txt"]
        assert isinstance(report.failed[0][1], PermissionError)
        assert (tmp_path / "d.txt").exists()
