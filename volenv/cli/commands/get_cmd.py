"""``volenv get NAME`` — print a variable from the environment or the volatile scope."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from volenv.bridge.registry import read_published
from volenv.core.environment_reader import read_current

console = Console()


def get_cmd(
    name: str = typer.Argument(..., help="Environment variable name."),
    volatile: bool = typer.Option(
        False,
        "--volatile",
        "-v",
        help="Read the value stored in HKCU\\Volatile Environment instead.",
    ),
) -> None:
    """Print the value of NAME.

    By default this is the value inherited by this process, which does not
    reflect a publish made after the process started.  An absent variable
    prints an empty line.
    """
    if volatile:
        value = read_published(name)
        if value is None:
            console.print(f"[dim]{escape(name)} is not set in the volatile scope.[/dim]")
            raise typer.Exit(code=1)
    else:
        value = read_current(name)

    # Plain output for scripting
    typer.echo(value)
