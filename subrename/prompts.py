"""Interactive prompts read from standard input."""

import click
from rich.console import Console


console = Console(soft_wrap=True)

SEPARATOR = "[yellow]---------------------------------------------[/yellow]"

PATTERN_PROMPT = "Filter pattern (glob): "
SEARCH_PROMPT = "A: "
REPLACEMENT_PROMPT = "B: "
CONFIRM_PROMPT = "\nProceed? (y/N): "


def read_line(prompt: str) -> str:
    """Print a prompt and read one trimmed line from stdin.

    End of input yields an empty string.
    """
    console.print(prompt, end="", markup=False, highlight=False)
    line = click.get_text_stream("stdin").readline()
    return line.strip()


def ask_confirmation(skip: bool = False) -> bool:
    """Return True to proceed with the renames.

    With `skip` set, nothing is read. Otherwise exactly `y` (any case,
    surrounding whitespace ignored) proceeds; any other answer aborts.
    """
    if skip:
        return True
    return read_line(CONFIRM_PROMPT).lower() == "y"
