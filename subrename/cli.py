"""CLI entrypoint."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from subrename.errors import RenameError
from subrename.models.config import RenameConfig
from subrename.models.rename import RenameOp, SubstitutionRule
from subrename.processors.enumerator import list_files, validate_target
from subrename.processors.executor import RenameExecutor
from subrename.processors.matcher import compile_pattern
from subrename.processors.planner import build_plan
from subrename.prompts import (
    PATTERN_PROMPT,
    REPLACEMENT_PROMPT,
    SEARCH_PROMPT,
    SEPARATOR,
    ask_confirmation,
    read_line,
)
from subrename.report import RenameReport


console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _prompt_substitution() -> tuple[str, SubstitutionRule] | None:
    """Ask for pattern, A and B. Returns None if the user left a required field empty."""
    console.print(SEPARATOR)
    pattern = read_line(PATTERN_PROMPT)
    if not pattern:
        console.print("No filter pattern entered, operation cancelled.")
        return None

    console.print(SEPARATOR)
    console.print("Replace <A> with <B>:\n", markup=False)
    search = read_line(SEARCH_PROMPT)
    if not search:
        console.print("The string <A> to replace must not be empty.", markup=False)
        return None

    replacement = read_line(REPLACEMENT_PROMPT)
    return pattern, SubstitutionRule(search=search, replacement=replacement)


def _render_op(op: RenameOp) -> None:
    console.print(f"[red]{escape(op.old_name)}[/red] [yellow]->[/yellow] [green]{escape(op.new_name)}[/green]")


def run(config: RenameConfig) -> RenameReport | None:
    """Run the enumerate, filter, plan, confirm and apply pipeline.

    Args:
        config: Settings for this invocation.

    Returns:
        RenameReport if renames were attempted, None if the run stopped early
        (empty directory, no matches, nothing to rename, or cancelled).

    Raises:
        RenameError: On an invalid target, unreadable directory or bad pattern.
    """
    path = validate_target(config.path)

    console.print(f"List {escape(str(path))}:")
    files = list_files(path)
    if not files:
        console.print(f"Directory '{escape(str(path))}' is empty or contains no files.")
        return None

    request = config.substitution()
    if request is None:
        for name in files:
            console.print(name, markup=False, highlight=False)
        request = _prompt_substitution()
        if request is None:
            return None
        pattern_str, rule = request
    else:
        pattern_str, rule = request
        console.print(SEPARATOR)
        console.print(f"Pattern: [cyan]{escape(pattern_str)}[/cyan]")
        console.print(f"Replace: '[cyan]{escape(rule.search)}[/cyan]' -> '[cyan]{escape(rule.replacement)}[/cyan]'")
        if not rule.search:
            console.print("The string <A> to replace must not be empty.", markup=False)
            return None

    pattern = compile_pattern(pattern_str)
    matched = pattern.filter(files)
    if not matched:
        console.print(f"\nNo files match pattern '{escape(pattern_str)}'.")
        return None

    console.print("\n[bold]Matched files and rename preview:[/bold]")
    plan = build_plan(matched, rule)
    if not plan.operations:
        console.print("Nothing to rename.")
        return None

    for op in plan.operations:
        _render_op(op)

    if not ask_confirmation(skip=config.yes):
        console.print("[yellow]Operation cancelled.[/yellow]")
        return None

    console.print("\n[cyan]Renaming...[/cyan]")
    report = RenameExecutor(path).apply(plan)

    if report.has_failures:
        console.print(f"\n[bold yellow]Completed with errors.[/bold yellow] {report.summary()}")
    else:
        console.print(f"\n[bold green]Success:[/bold green] {report.summary()}")
    return report


@click.command(context_settings=dict(show_default=True))
@click.argument("path", type=click.Path(path_type=Path), default=".")
@click.argument("pattern", required=False)
@click.argument("search", metavar="[FROM]", required=False)
@click.argument("replacement", metavar="[TO]", required=False)
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Skip the final confirmation and rename right away.",
)
@click.version_option(package_name="subrename")
def cli(
    path: Path,
    pattern: str | None,
    search: str | None,
    replacement: str | None,
    yes: bool,
) -> None:
    """subrename - Batch rename files in a directory by substring substitution.

    Files in PATH whose names match the glob PATTERN have every occurrence of
    FROM replaced with TO. Omit PATTERN, FROM and TO to be prompted for them.

    Examples:

        subrename ./docs 'report_*' draft final

        subrename -y . '*.txt' ' ' _
    """
    config = RenameConfig(path=path, pattern=pattern, search=search, replacement=replacement, yes=yes)

    try:
        report = run(config)
    except RenameError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        raise SystemExit(1) from e

    if report is not None and report.has_failures:
        raise SystemExit(1)
