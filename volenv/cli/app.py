"""Main Typer application — imports and registers all CLI commands.

Entry point: ``volenv`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import typer

from volenv.cli.commands.get_cmd import get_cmd
from volenv.cli.commands.set_cmd import set_cmd
from volenv.cli.commands.status_cmd import status_cmd
from volenv.config import LogLevel, config
from volenv.log import configure_logging

app = typer.Typer(
    name="volenv",
    help="Publish session-scoped environment variables to HKCU\\Volatile Environment.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _root(
    log_level: LogLevel = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Override VOLENV_LOG_LEVEL for this invocation.",
    ),
) -> None:
    configure_logging((log_level or config.log_level).value)


# Register subcommands
app.command(name="set", help="Publish a variable and broadcast the change.")(set_cmd)
app.command(name="get", help="Print a variable's value.")(get_cmd)
app.command(name="status", help="Show registry and broadcast availability.")(status_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
